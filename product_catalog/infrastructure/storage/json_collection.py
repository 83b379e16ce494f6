# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Whole-collection JSON file store."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Protocol

from product_catalog.shared.errors import StorageUnavailableError
from product_catalog.shared.logging import logger
from product_catalog.utils.jsonio import read_json_list_of_dicts, write_json_list

from .locks import collection_lock_for


class CollectionStore(Protocol):
    """Protocol for whole-collection persistence."""

    def load(self) -> list[dict[str, Any]]: ...

    def save(self, records: list[dict[str, Any]]) -> None: ...

    def locked(self) -> threading.RLock: ...


class JsonCollectionStore(CollectionStore):
    """Keeps one collection as a JSON array in a single file.

    ``load`` and ``save`` always move the entire collection. A
    read-modify-write cycle is only safe against concurrent writers in this
    process when it runs inside ``locked()``; the lock is shared by every
    store pointing at the same file.

    ``required_keys`` names the keys every stored record must carry; a
    record without them makes the collection unavailable.
    """

    def __init__(
        self,
        path: Path,
        *,
        name: str | None = None,
        required_keys: Iterable[str] = (),
    ) -> None:
        self._path = path
        self._name = name or path.stem
        self._required_keys = frozenset(required_keys)
        self._lock = collection_lock_for(path)

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Path:
        return self._path

    def locked(self) -> threading.RLock:
        return self._lock

    def load(self) -> list[dict[str, Any]]:
        try:
            records = read_json_list_of_dicts(self._path)
            self._check_required_keys(records)
        except (OSError, ValueError) as exc:
            logger.error(f"storage.load: failed collection={self._name} path={self._path}: {exc}")
            raise StorageUnavailableError(self._name) from exc
        logger.debug(f"storage.load: collection={self._name} n={len(records)}")
        return records

    def save(self, records: list[dict[str, Any]]) -> None:
        try:
            write_json_list(self._path, records)
        except (OSError, TypeError, ValueError) as exc:
            logger.error(f"storage.save: failed collection={self._name} path={self._path}: {exc}")
            raise StorageUnavailableError(self._name) from exc
        logger.debug(f"storage.save: collection={self._name} n={len(records)}")

    def _check_required_keys(self, records: list[dict[str, Any]]) -> None:
        for index, record in enumerate(records):
            missing = self._required_keys.difference(record)
            if missing:
                raise ValueError(f"record {index} lacks {sorted(missing)}")


__all__ = ["CollectionStore", "JsonCollectionStore"]
