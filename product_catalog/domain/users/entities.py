# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

RECORD_KEYS = ("id", "username", "password")


@dataclass(slots=True, frozen=True)
class User:

    id: str
    username: str
    password_hash: str

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> User:
        return cls(
            id=str(record["id"]),
            username=str(record["username"]),
            password_hash=str(record["password"]),
        )

    def to_record(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username, "password": self.password_hash}


@dataclass(slots=True, frozen=True)
class Identity:
    """Claim carried by a bearer token."""

    id: str
    username: str
