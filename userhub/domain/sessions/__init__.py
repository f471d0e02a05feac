# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Session
from .repositories import SessionStore

__all__ = ["Session", "SessionStore"]
