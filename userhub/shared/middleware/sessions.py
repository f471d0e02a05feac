# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response, g, request

from userhub.application.services.session_manager import SessionManager
from userhub.shared.config import load_config
from userhub.shared.logging import logger

API_PREFIX = "/api/"


def end_session(response: Response) -> Response:
    """Mark the bound session as finished and drop the client's cookie."""
    g.session_ended = True
    g.session = None
    response.delete_cookie(load_config().security.session_cookie_name, path="/")
    return response


def configure_sessions(app: Flask, sessions: SessionManager) -> None:
    security = load_config().security
    cookie_name = security.session_cookie_name

    @app.before_request
    def _bind_session() -> None:
        if request.path.startswith(API_PREFIX):
            return

        session_id = request.cookies.get(cookie_name, "")
        if not sessions.exists(session_id):
            session_id = sessions.new_session_id()
            g.session_cookie_pending = True
            logger.debug("sessions.bind: issued new session id")

        g.session_id = session_id
        g.session = sessions.get(session_id)

    @app.after_request
    def _issue_cookie(response: Response) -> Response:
        if getattr(g, "session_cookie_pending", False) and not getattr(g, "session_ended", False):
            response.set_cookie(
                cookie_name,
                g.session_id,
                httponly=True,
                samesite=security.cookie_samesite,
                secure=security.cookie_secure,
                path="/",
            )
        return response


__all__ = ["configure_sessions", "end_session"]
