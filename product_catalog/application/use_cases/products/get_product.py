# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from product_catalog.domain.products.entities import Product
from product_catalog.domain.products.exceptions import ProductNotFoundError
from product_catalog.domain.products.repositories import ProductRepository


class GetProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: str) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(context={"id": product_id})
        return product
