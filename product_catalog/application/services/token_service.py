# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless bearer tokens.

Tokens are HS256 JWTs carrying ``{sub, id, username, iat, exp}``. Nothing is
stored server side: a token is valid while its signature matches the
configured secret and the current time is before ``exp``, and it cannot be
revoked earlier.
"""

from __future__ import annotations

import time
from collections.abc import Callable

import jwt

from product_catalog.domain.users.entities import Identity
from product_catalog.domain.users.exceptions import ExpiredTokenError, InvalidTokenError
from product_catalog.domain.users.repositories import TokenService

DEFAULT_TOKEN_TTL_SECONDS = 60 * 60


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        secret: str,
        ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
        algorithm: str = "HS256",
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._ttl = ttl_seconds
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, identity: Identity) -> str:
        issued_at = int(self._clock())
        payload = {
            "sub": identity.id,
            "id": identity.id,
            "username": identity.username,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        try:
            # expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat", "sub"], "verify_exp": False, "verify_iat": False},
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(str(exc)) from exc

        user_id = payload.get("id")
        username = payload.get("username")
        if not isinstance(user_id, str) or not isinstance(username, str):
            raise InvalidTokenError("token is missing the identity claim")

        exp = payload["exp"]
        if not isinstance(exp, (int, float)):
            raise InvalidTokenError("exp claim must be numeric")
        if self._clock() >= exp:
            raise ExpiredTokenError("token has expired")

        return Identity(id=user_id, username=username)
