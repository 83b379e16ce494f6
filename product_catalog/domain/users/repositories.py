# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from .entities import Identity, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def add(self, user: User) -> User: ...
    def locked(self) -> AbstractContextManager[object]: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, identity: Identity) -> str: ...
    def verify(self, token: str) -> Identity: ...
