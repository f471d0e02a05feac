# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class TokenClaims:
    """Identity carried by a bearer token."""

    id: int
    username: str


@dataclass(slots=True, frozen=True)
class IssuedUserToken:

    id: int
    username: str
    token: str
