from __future__ import annotations

import json
from pathlib import Path

import pytest

from product_catalog.application.use_cases.products import (
    CreateProductUseCase,
    DeleteProductsUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    UpdateProductUseCase,
)
from product_catalog.domain.products import (
    InvalidProductIdsError,
    NoProductsDeletedError,
    Product,
    ProductNotFoundError,
)
from product_catalog.infrastructure.repositories import JsonProductRepository
from product_catalog.infrastructure.storage import JsonCollectionStore


@pytest.fixture()
def products_file(tmp_path: Path) -> Path:
    return tmp_path / "products.json"


@pytest.fixture()
def repo(products_file: Path) -> JsonProductRepository:
    return JsonProductRepository(JsonCollectionStore(products_file, name="products"))


def _seed(repo: JsonProductRepository, *ids: str) -> None:
    for pid in ids:
        repo.add(Product(id=pid, name=f"name-{pid}", price=1, quantity=1))


def test_create_update_get_round_trip(repo: JsonProductRepository) -> None:
    created = CreateProductUseCase(products=repo).execute({"name": "X", "price": 1, "quantity": 1})

    UpdateProductUseCase(products=repo).execute(created.id, {"price": 2})
    fetched = GetProductUseCase(products=repo).execute(created.id)

    assert fetched == Product(id=created.id, name="X", price=2, quantity=1)


def test_create_assigns_fresh_ids_and_persists(
    repo: JsonProductRepository, products_file: Path
) -> None:
    create = CreateProductUseCase(products=repo)
    first = create.execute({"name": "A", "price": 1, "quantity": 1})
    second = create.execute({"name": "A", "price": 1, "quantity": 1})

    assert first.id != second.id
    stored = json.loads(products_file.read_text(encoding="utf-8"))
    assert [record["id"] for record in stored] == [first.id, second.id]


def test_create_takes_fields_verbatim(repo: JsonProductRepository) -> None:
    created = CreateProductUseCase(products=repo, id_factory=lambda: "fixed").execute(
        {"name": "Odd", "price": "-5", "id": "client-id"}
    )

    assert created == Product(id="fixed", name="Odd", price="-5", quantity=None)


def test_update_ignores_id_in_payload(repo: JsonProductRepository) -> None:
    _seed(repo, "p1")

    updated = UpdateProductUseCase(products=repo).execute("p1", {"id": "hijack", "name": "new"})

    assert updated.id == "p1"
    assert updated.name == "new"
    assert repo.get("hijack") is None


def test_update_preserves_fields_not_supplied(repo: JsonProductRepository) -> None:
    repo.add(Product(id="p1", name="keep", price=10, quantity=3))

    updated = UpdateProductUseCase(products=repo).execute("p1", {"quantity": 0})

    assert updated == Product(id="p1", name="keep", price=10, quantity=0)


def test_update_missing_product_raises(repo: JsonProductRepository) -> None:
    with pytest.raises(ProductNotFoundError):
        UpdateProductUseCase(products=repo).execute("nope", {"price": 1})


def test_delete_then_get_is_not_found(repo: JsonProductRepository) -> None:
    _seed(repo, "p1", "p2")

    DeleteProductUseCase(products=repo).execute("p1")

    with pytest.raises(ProductNotFoundError):
        GetProductUseCase(products=repo).execute("p1")
    assert [p.id for p in repo.list_all()] == ["p2"]


def test_delete_missing_product_raises(repo: JsonProductRepository) -> None:
    with pytest.raises(ProductNotFoundError):
        DeleteProductUseCase(products=repo).execute("nope")


def test_delete_many_partial_match_succeeds(repo: JsonProductRepository) -> None:
    _seed(repo, "p1", "p2", "p3")

    removed = DeleteProductsUseCase(products=repo).execute(["p1", "p3", "ghost"])

    assert removed == 2
    assert [p.id for p in repo.list_all()] == ["p2"]


def test_delete_many_without_matches_raises(repo: JsonProductRepository) -> None:
    _seed(repo, "p1")

    with pytest.raises(NoProductsDeletedError) as exc_info:
        DeleteProductsUseCase(products=repo).execute(["ghost"])

    assert exc_info.value.message == "No products found to delete"
    assert [p.id for p in repo.list_all()] == ["p1"]


@pytest.mark.parametrize("ids", ["p1", [1, 2], ["p1", None]])
def test_delete_many_rejects_non_identifier_sequences(
    repo: JsonProductRepository, ids: object
) -> None:
    _seed(repo, "p1")

    with pytest.raises(InvalidProductIdsError):
        DeleteProductsUseCase(products=repo).execute(ids)  # type: ignore[arg-type]

    assert len(repo.list_all()) == 1
