# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userhub.application.services.credential_store import CredentialStore
from userhub.domain.users.entities import User


class RegisterUserUseCase:
    def __init__(self, *, credentials: CredentialStore) -> None:
        self._credentials = credentials

    def execute(self, username: str, password: str) -> User:
        return self._credentials.create(username, password)
