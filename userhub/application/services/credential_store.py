# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Sequence
from datetime import UTC, datetime

from userhub.domain.users.entities import User
from userhub.domain.users.exceptions import DuplicateUsernameError
from userhub.domain.users.repositories import PasswordHasher, UserRepository
from userhub.shared.logging import logger


class CredentialStore:
    """User records keyed by username, with hashing applied on creation.

    The duplicate check is a read before the insert. The repository maps a
    unique-index violation on insert to the same ``DuplicateUsernameError``.
    """

    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._placeholder: str | None = None

    def find_by_username(self, username: str) -> User | None:
        return self._users.find_by_username(username)

    def create(self, username: str, password: str) -> User:
        if self._users.find_by_username(username) is not None:
            raise DuplicateUsernameError(context={"username": username})
        hashed = self._password_hasher.hash(password)
        user = User(id=0, username=username, password_hash=hashed, created_at=datetime.now(UTC))
        persisted = self._users.add(user)
        logger.info(f"credentials.create: ok user_id={persisted.id}")
        return persisted

    def verify(self, user: User, password: str) -> bool:
        return self._password_hasher.verify(password, user.password_hash)

    def check_credentials(self, username: str, password: str) -> User | None:
        """Return the matching user, or ``None`` for an unknown name or wrong password.

        An unknown name is still checked against a placeholder hash so both
        failures cost one hash comparison.
        """
        user = self._users.find_by_username(username) if username else None
        if user is None:
            self._password_hasher.verify(password, self._placeholder_hash())
            return None
        return user if self.verify(user, password) else None

    def _placeholder_hash(self) -> str:
        if self._placeholder is None:
            self._placeholder = self._password_hasher.hash(secrets.token_urlsafe(16))
        return self._placeholder

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()
