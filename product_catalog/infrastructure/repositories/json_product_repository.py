# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
from collections.abc import Collection, Mapping
from typing import Any

from product_catalog.domain.products.entities import Product
from product_catalog.domain.products.repositories import ProductRepository
from product_catalog.infrastructure.storage import CollectionStore


class JsonProductRepository(ProductRepository):
    """Product collection kept in a single JSON file.

    Every mutation is a full read-modify-write of the file, held under the
    collection lock.
    """

    def __init__(self, store: CollectionStore) -> None:
        self._store = store

    def locked(self) -> threading.RLock:
        return self._store.locked()

    def list_all(self) -> list[Product]:
        return [Product.from_record(record) for record in self._store.load()]

    def get(self, product_id: str) -> Product | None:
        for record in self._store.load():
            if record.get("id") == product_id:
                return Product.from_record(record)
        return None

    def add(self, product: Product) -> Product:
        with self._store.locked():
            records = self._store.load()
            records.append(product.to_record())
            self._store.save(records)
        return product

    def update(self, product_id: str, changes: Mapping[str, Any]) -> Product | None:
        with self._store.locked():
            records = self._store.load()
            for index, record in enumerate(records):
                if record.get("id") == product_id:
                    updated = Product.from_record(record).merged(changes)
                    records[index] = updated.to_record()
                    self._store.save(records)
                    return updated
        return None

    def delete(self, product_id: str) -> bool:
        with self._store.locked():
            records = self._store.load()
            remaining = [record for record in records if record.get("id") != product_id]
            if len(remaining) == len(records):
                return False
            self._store.save(remaining)
        return True

    def delete_many(self, product_ids: Collection[str]) -> int:
        targets = set(product_ids)
        with self._store.locked():
            records = self._store.load()
            remaining = [record for record in records if record.get("id") not in targets]
            removed = len(records) - len(remaining)
            if removed:
                self._store.save(remaining)
        return removed
