# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .sessions import Session, SessionStore
from .users import (
    AuthenticationFailure,
    DuplicateUsernameError,
    IssuedUserToken,
    TokenClaims,
    User,
)

__all__ = [
    "AuthenticationFailure",
    "DuplicateUsernameError",
    "IssuedUserToken",
    "Session",
    "SessionStore",
    "TokenClaims",
    "User",
]
