# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from product_catalog.domain.products.entities import Product
from product_catalog.domain.products.exceptions import ProductNotFoundError
from product_catalog.domain.products.repositories import ProductRepository
from product_catalog.shared.logging import logger


class UpdateProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: str, changes: Mapping[str, Any]) -> Product:
        # the target is addressed by path id; an "id" key in changes never wins
        updated = self._products.update(product_id, changes)
        if updated is None:
            raise ProductNotFoundError(context={"id": product_id})
        logger.info(f"products.update: ok id={product_id} fields={sorted(changes)}")
        return updated
