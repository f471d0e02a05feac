# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userhub.application.services.credential_store import CredentialStore
from userhub.domain.users.entities import IssuedUserToken, TokenClaims
from userhub.domain.users.repositories import TokenIssuer


class ListUsersUseCase:
    """Lists every user with a freshly minted bearer token.

    Each call signs a new token for every listed user, not for the caller.
    """

    def __init__(self, *, credentials: CredentialStore, tokens: TokenIssuer) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self) -> list[IssuedUserToken]:
        users = self._credentials.list_users()
        return [
            IssuedUserToken(
                id=user.id,
                username=user.username,
                token=self._tokens.issue(TokenClaims(id=user.id, username=user.username)),
            )
            for user in users
        ]


__all__ = ["ListUsersUseCase"]
