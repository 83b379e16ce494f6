# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token gate for protected endpoints."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from product_catalog.domain.users.entities import Identity
from product_catalog.domain.users.exceptions import TokenError
from product_catalog.domain.users.repositories import TokenService
from product_catalog.shared.errors import ForbiddenError, UnauthenticatedError
from product_catalog.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])

_BEARER_PREFIX = "Bearer "


def extract_bearer_token(header: str | None) -> str:
    if header and header.startswith(_BEARER_PREFIX):
        return header[len(_BEARER_PREFIX):].strip()
    return ""


class AuthGate:
    def __init__(self, tokens: TokenService) -> None:
        self._tokens = tokens

    def authenticate(self, authorization: str | None) -> Identity:
        token = extract_bearer_token(authorization)
        if not token:
            raise UnauthenticatedError()
        try:
            return self._tokens.verify(token)
        except TokenError as exc:
            logger.warning(f"auth.gate: rejected token ({type(exc).__name__})")
            raise ForbiddenError() from exc

    def required(self, f: F) -> F:
        @wraps(f)
        def inner(*a, **kw):
            try:
                identity = self.authenticate(request.headers.get("Authorization"))
            except UnauthenticatedError:
                logger.warning(
                    f"No Authorization header on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise
            g.identity = identity
            logger.debug(f"Auth OK: user={identity.id} {request.method} {request.path}")
            return f(*a, **kw)

        return cast(F, inner)


def current_identity() -> Identity:
    """Identity attached by ``AuthGate.required`` for the current request."""
    return cast(Identity, g.identity)
