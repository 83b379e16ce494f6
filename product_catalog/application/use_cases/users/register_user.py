# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from product_catalog.domain.users.entities import User
from product_catalog.domain.users.exceptions import UserAlreadyExistsError
from product_catalog.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        hashed = self._password_hasher.hash(password)
        with self._users.locked():
            if self._users.find_by_username(username):
                raise UserAlreadyExistsError()
            user = User(id=str(uuid.uuid4()), username=username, password_hash=hashed)
            return self._users.add(user)
