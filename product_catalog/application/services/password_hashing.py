"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from product_catalog.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted slow hash via werkzeug (scrypt unless another method is configured)."""

    def __init__(self, method: str | None = None) -> None:
        self._method = method

    def hash(self, password: str) -> str:
        if self._method:
            return str(generate_password_hash(password, method=self._method))
        return str(generate_password_hash(password))

    def verify(self, password: str, hashed: str) -> bool:
        return bool(check_password_hash(hashed, password))
