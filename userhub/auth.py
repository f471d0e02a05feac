# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import wraps

from flask import g, redirect, request

from userhub.application.services.auth_gate import require_auth
from userhub.domain.sessions.entities import Session
from userhub.shared.logging import logger


def current_session_id() -> str | None:
    return getattr(g, "session_id", None)


def current_session() -> Session | None:
    return getattr(g, "session", None)


def login_required(f):
    """Redirect anonymous visitors to the login page.

    The wrapped view receives the bound session as the ``session`` keyword.
    """

    @wraps(f)
    def inner(*a, **kw):
        session = current_session()
        decision = require_auth(session)
        if not decision.allowed:
            logger.info(f"auth.gate: denied {request.method} {request.path}")
            return redirect(decision.redirect_to)

        kw["session"] = session
        return f(*a, **kw)

    return inner
