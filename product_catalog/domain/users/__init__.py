# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Identity, User
from .exceptions import (
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenError,
    UserAlreadyExistsError,
)

__all__ = [
    "ExpiredTokenError",
    "Identity",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "TokenError",
    "User",
    "UserAlreadyExistsError",
]
