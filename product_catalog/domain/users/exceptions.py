# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from product_catalog.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    message = "User already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    message = "Invalid credentials"


class TokenError(Exception):
    pass


class InvalidTokenError(TokenError):
    """Malformed token, bad signature or missing claims."""


class ExpiredTokenError(TokenError):
    pass
