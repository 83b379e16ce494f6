# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from contextlib import AbstractContextManager
from typing import Any, Protocol

from .entities import Product


class ProductRepository(Protocol):
    def list_all(self) -> Sequence[Product]: ...
    def get(self, product_id: str) -> Product | None: ...
    def add(self, product: Product) -> Product: ...
    def update(self, product_id: str, changes: Mapping[str, Any]) -> Product | None: ...
    def delete(self, product_id: str) -> bool: ...
    def delete_many(self, product_ids: Collection[str]) -> int: ...
    def locked(self) -> AbstractContextManager[object]: ...
