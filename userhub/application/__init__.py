# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.auth_gate import AuthDecision, require_auth
from .services.credential_store import CredentialStore
from .services.session_manager import SessionManager

__all__ = [
    "AuthDecision",
    "CredentialStore",
    "SessionManager",
    "require_auth",
]
