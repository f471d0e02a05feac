# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from userhub.domain.sessions.entities import Session
from userhub.domain.sessions.repositories import SessionStore
from userhub.shared.logging import logger

SESSION_ID_BYTES = 32


class SessionManager:
    def __init__(self, store: SessionStore) -> None:
        self._store = store

    @staticmethod
    def new_session_id() -> str:
        return secrets.token_urlsafe(SESSION_ID_BYTES)

    def exists(self, session_id: str) -> bool:
        return bool(session_id) and self._store.load(session_id) is not None

    def get(self, session_id: str) -> Session:
        session = self._store.load(session_id)
        if session is None:
            session = Session()
            self._store.save(session_id, session)
        return session

    def authenticate(self, session_id: str, username: str) -> Session:
        session = self.get(session_id)
        session.is_authenticated = True
        session.username = username
        self._store.save(session_id, session)
        logger.info(f"sessions.authenticate: ok username={username}")
        return session

    def destroy(self, session_id: str) -> None:
        self._store.delete(session_id)
        logger.info("sessions.destroy: ok")
