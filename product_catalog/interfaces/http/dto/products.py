from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr


class ProductWriteDTO(BaseModel):
    """Writable product fields, accepted verbatim.

    Unknown keys, ``id`` included, are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    price: Any = None
    quantity: Any = None

    def supplied_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class DeleteProductsDTO(BaseModel):
    ids: list[StrictStr]
