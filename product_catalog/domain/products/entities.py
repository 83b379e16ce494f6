# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Product records and the page envelope returned by catalogue queries."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

# Fields a client may write; ``id`` is always assigned by the store.
MUTABLE_FIELDS = ("name", "price", "quantity")
# Keys every persisted product record must carry.
RECORD_KEYS = ("id",)


@dataclass(slots=True, frozen=True)
class Product:
    """A catalogue entry.

    ``name``, ``price`` and ``quantity`` are stored exactly as supplied by the
    client, so they are typed loosely.
    """

    id: str
    name: Any = None
    price: Any = None
    quantity: Any = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Product:
        return cls(
            id=str(record["id"]),
            name=record.get("name"),
            price=record.get("price"),
            quantity=record.get("quantity"),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
        }

    def merged(self, changes: Mapping[str, Any]) -> Product:
        """Return a copy with the supplied writable fields overwritten."""

        updates = {key: value for key, value in changes.items() if key in MUTABLE_FIELDS}
        return replace(self, **updates)


@dataclass(slots=True, frozen=True)
class ProductPage:
    total_count: int
    page: int
    limit: int
    total_pages: int
    data: Sequence[Product] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalProducts": self.total_count,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
            "data": [product.to_record() for product in self.data],
        }
