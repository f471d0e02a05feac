# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Session


class SessionStore(Protocol):
    def load(self, session_id: str) -> Session | None: ...
    def save(self, session_id: str, session: Session) -> None: ...
    def delete(self, session_id: str) -> None: ...
