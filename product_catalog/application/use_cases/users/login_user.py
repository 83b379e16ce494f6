# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from product_catalog.domain.users.entities import Identity
from product_catalog.domain.users.exceptions import InvalidCredentialsError
from product_catalog.domain.users.repositories import (
    PasswordHasher,
    TokenService,
    UserRepository,
)


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> str:
        user = self._users.find_by_username(username)
        # unknown user and wrong password must be indistinguishable
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return self._tokens.issue(Identity(id=user.id, username=user.username))
