# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import IssuedUserToken, TokenClaims, User
from .exceptions import AuthenticationFailure, DuplicateUsernameError
from .repositories import PasswordHasher, TokenIssuer, UserRepository

__all__ = [
    "AuthenticationFailure",
    "DuplicateUsernameError",
    "IssuedUserToken",
    "PasswordHasher",
    "TokenClaims",
    "TokenIssuer",
    "User",
    "UserRepository",
]
