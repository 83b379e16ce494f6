# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from product_catalog.domain.products.exceptions import (
    InvalidProductIdsError,
    NoProductsDeletedError,
    ProductNotFoundError,
)
from product_catalog.domain.products.repositories import ProductRepository
from product_catalog.shared.logging import logger


class DeleteProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: str) -> None:
        if not self._products.delete(product_id):
            raise ProductNotFoundError(context={"id": product_id})
        logger.info(f"products.delete: ok id={product_id}")


class DeleteProductsUseCase:
    """Batch delete; succeeds when at least one id matched."""

    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_ids: Sequence[str]) -> int:
        if isinstance(product_ids, (str, bytes)) or not all(
            isinstance(pid, str) for pid in product_ids
        ):
            raise InvalidProductIdsError()
        removed = self._products.delete_many(product_ids)
        if removed == 0:
            raise NoProductsDeletedError()
        logger.info(f"products.delete_many: ok requested={len(product_ids)} removed={removed}")
        return removed
