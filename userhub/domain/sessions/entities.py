# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Session:
    """Per-browser authentication state kept on the server."""

    is_authenticated: bool = False
    username: str | None = None
