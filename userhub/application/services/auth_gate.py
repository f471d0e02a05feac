# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from userhub.domain.sessions.entities import Session

LOGIN_PATH = "/login"


@dataclass(slots=True, frozen=True)
class AuthDecision:
    allowed: bool
    redirect_to: str | None = None


def require_auth(session: Session | None) -> AuthDecision:
    if session is not None and session.is_authenticated:
        return AuthDecision(allowed=True)
    return AuthDecision(allowed=False, redirect_to=LOGIN_PATH)


__all__ = ["AuthDecision", "LOGIN_PATH", "require_auth"]
