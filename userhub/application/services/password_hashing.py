"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from userhub.domain.users.repositories import PasswordHasher

DEFAULT_METHOD = "scrypt"


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = DEFAULT_METHOD) -> None:
        self._method = method

    def hash(self, password: str) -> str:
        if not password:
            raise ValueError("Password cannot be empty")
        return str(generate_password_hash(password, method=self._method))

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed or password is None:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except ValueError:
            # unknown or malformed method prefix
            return False
