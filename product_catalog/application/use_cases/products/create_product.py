# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping
from typing import Any

from product_catalog.domain.products.entities import MUTABLE_FIELDS, Product
from product_catalog.domain.products.repositories import ProductRepository
from product_catalog.shared.logging import logger


def _uuid4() -> str:
    return str(uuid.uuid4())


class CreateProductUseCase:
    def __init__(
        self,
        *,
        products: ProductRepository,
        id_factory: Callable[[], str] = _uuid4,
    ) -> None:
        self._products = products
        self._id_factory = id_factory

    def execute(self, fields: Mapping[str, Any]) -> Product:
        product = Product(
            id=self._id_factory(),
            **{name: fields.get(name) for name in MUTABLE_FIELDS},
        )
        created = self._products.add(product)
        logger.info(f"products.create: ok id={created.id}")
        return created
