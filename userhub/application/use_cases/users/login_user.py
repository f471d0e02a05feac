# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userhub.application.services.credential_store import CredentialStore
from userhub.application.services.session_manager import SessionManager
from userhub.domain.sessions.entities import Session
from userhub.domain.users.exceptions import AuthenticationFailure


class LoginUserUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        sessions: SessionManager,
    ) -> None:
        self._credentials = credentials
        self._sessions = sessions

    def execute(self, session_id: str, username: str, password: str) -> Session:
        user = self._credentials.check_credentials(username, password)

        # unknown user and wrong password are indistinguishable to the caller
        if user is None:
            raise AuthenticationFailure()

        return self._sessions.authenticate(session_id, user.username)
