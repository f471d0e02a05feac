# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import replace
from threading import Lock

from userhub.domain.sessions.entities import Session
from userhub.domain.sessions.repositories import SessionStore
from userhub.shared.logging import logger


class InMemorySessionStore(SessionStore):
    """Process-local session map.

    Entries live until deleted; nothing expires and nothing survives a restart.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._sessions: dict[str, Session] = {}

    def load(self, session_id: str) -> Session | None:
        with self._lock:
            session = self._sessions.get(session_id)
            return replace(session) if session is not None else None

    def save(self, session_id: str, session: Session) -> None:
        with self._lock:
            self._sessions[session_id] = replace(session)

    def delete(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is not None:
                logger.debug("sessions.store: deleted entry")

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
