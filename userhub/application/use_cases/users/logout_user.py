"""Use-case for ending a browser session."""

from __future__ import annotations

from userhub.application.services.session_manager import SessionManager


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionManager) -> None:
        self._sessions = sessions

    def execute(self, session_id: str | None) -> None:
        if session_id:
            self._sessions.destroy(session_id)
