# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from userhub.shared.errors.base import DomainError


class DuplicateUsernameError(DomainError):
    code = "username_taken"
    status = HTTPStatus.CONFLICT


class AuthenticationFailure(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
