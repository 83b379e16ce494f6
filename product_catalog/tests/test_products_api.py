from __future__ import annotations

import json

from flask.testing import FlaskClient

from product_catalog.shared.config import AppConfig


def _create(client: FlaskClient, headers: dict[str, str], **fields: object) -> dict:
    response = client.post("/products", json=fields, headers=headers)
    assert response.status_code == 201
    return response.get_json()


def test_create_update_get_round_trip(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    created = _create(client, auth_headers, name="X", price=1, quantity=1)

    updated = client.put(f"/products/{created['id']}", json={"price": 2}, headers=auth_headers)
    assert updated.status_code == 200

    fetched = client.get(f"/products/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.get_json() == {"id": created["id"], "name": "X", "price": 2, "quantity": 1}


def test_get_by_id_is_public_and_404s(client: FlaskClient) -> None:
    response = client.get("/products/missing")

    assert response.status_code == 404
    assert response.get_json()["message"] == "Product not found"


def test_update_cannot_change_id(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    created = _create(client, auth_headers, name="X", price=1, quantity=1)

    response = client.put(
        f"/products/{created['id']}", json={"id": "other", "name": "Y"}, headers=auth_headers
    )

    assert response.get_json() == {"id": created["id"], "name": "Y", "price": 1, "quantity": 1}


def test_update_missing_product_returns_404(
    client: FlaskClient, auth_headers: dict[str, str]
) -> None:
    response = client.put("/products/missing", json={"price": 3}, headers=auth_headers)

    assert response.status_code == 404


def test_delete_then_fetch_returns_404(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    created = _create(client, auth_headers, name="X", price=1, quantity=1)

    deleted = client.delete(f"/products/{created['id']}", headers=auth_headers)
    assert deleted.status_code == 204
    assert deleted.data == b""

    assert client.get(f"/products/{created['id']}").status_code == 404
    assert client.delete(f"/products/{created['id']}", headers=auth_headers).status_code == 404


def test_delete_many(client: FlaskClient, auth_headers: dict[str, str], config: AppConfig) -> None:
    a = _create(client, auth_headers, name="A", price=1, quantity=1)
    b = _create(client, auth_headers, name="B", price=1, quantity=1)
    c = _create(client, auth_headers, name="C", price=1, quantity=1)

    partial = client.delete("/products", json={"ids": [a["id"], c["id"], "ghost"]}, headers=auth_headers)
    assert partial.status_code == 204

    stored = json.loads(config.products_path.read_text(encoding="utf-8"))
    assert [p["id"] for p in stored] == [b["id"]]

    none_left = client.delete("/products", json={"ids": ["ghost"]}, headers=auth_headers)
    assert none_left.status_code == 404
    assert none_left.get_json()["message"] == "No products found to delete"


def test_delete_many_requires_id_array(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    for body in ({"ids": "abc"}, {}, {"ids": [1, 2]}):
        response = client.delete("/products", json=body, headers=auth_headers)
        assert response.status_code == 400
        assert response.get_json()["message"] == "IDs should be an array"


def test_list_filters_and_paginates(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    _create(client, auth_headers, name="A", price=5, quantity=1)
    _create(client, auth_headers, name="B", price=15, quantity=1)
    _create(client, auth_headers, name="AB", price=25, quantity=1)

    response = client.get("/products?name=a&minPrice=10")

    assert response.status_code == 200
    body = response.get_json()
    assert [p["name"] for p in body["data"]] == ["AB"]
    assert {k: body[k] for k in ("totalProducts", "page", "limit", "totalPages")} == {
        "totalProducts": 1,
        "page": 1,
        "limit": 10,
        "totalPages": 1,
    }


def test_list_is_public(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    _create(client, auth_headers, name="A", price=5, quantity=1)

    assert client.get("/products").status_code == 200


def test_list_inverted_range_returns_400(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    _create(client, auth_headers, name="A", price=5, quantity=1)

    response = client.get("/products?minPrice=10&maxPrice=1")

    assert response.status_code == 400
    assert response.get_json()["message"] == "minPrice cannot be greater than maxPrice"


def test_list_page_out_of_bounds(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    _create(client, auth_headers, name="A", price=5, quantity=1)

    response = client.get("/products?page=2")

    assert response.status_code == 400
    assert response.get_json()["message"] == "Page 2 is out of bounds. There are only 1 pages."


def test_health_reports_storage(client: FlaskClient, config: AppConfig) -> None:
    assert client.get("/health").get_json() == {
        "ok": True,
        "storage": {"users": "ok", "products": "ok"},
    }

    config.products_path.write_text("not json", encoding="utf-8")

    response = client.get("/health")
    assert response.status_code == 503
    assert response.get_json()["storage"]["products"] == "unavailable"


def test_corrupt_store_returns_503(client: FlaskClient, config: AppConfig) -> None:
    config.products_path.write_text("{", encoding="utf-8")

    response = client.get("/products")

    assert response.status_code == 503
    assert response.get_json()["error"] == "storage_unavailable"


def test_record_without_id_returns_503(client: FlaskClient, config: AppConfig) -> None:
    config.products_path.write_text('[{"name": "x", "price": 1}]', encoding="utf-8")

    response = client.get("/products")

    assert response.status_code == 503
    assert response.get_json()["error"] == "storage_unavailable"


def test_user_record_without_password_returns_503(client: FlaskClient, config: AppConfig) -> None:
    config.users_path.write_text('[{"id": "1", "username": "alice"}]', encoding="utf-8")

    response = client.post("/auth/login", json={"username": "alice", "password": "pw"})

    assert response.status_code == 503
    assert response.get_json()["error"] == "storage_unavailable"


def test_responses_carry_request_id(client: FlaskClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "req-42"})

    assert response.headers["X-Request-ID"] == "req-42"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
