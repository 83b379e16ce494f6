# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading

from product_catalog.domain.users.entities import User
from product_catalog.domain.users.repositories import UserRepository
from product_catalog.infrastructure.storage import CollectionStore


class JsonUserRepository(UserRepository):
    def __init__(self, store: CollectionStore) -> None:
        self._store = store

    def locked(self) -> threading.RLock:
        return self._store.locked()

    def find_by_username(self, username: str) -> User | None:
        for record in self._store.load():
            if record.get("username") == username:
                return User.from_record(record)
        return None

    def add(self, user: User) -> User:
        with self._store.locked():
            records = self._store.load()
            records.append(user.to_record())
            self._store.save(records)
        return user
