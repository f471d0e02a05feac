# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Blueprint, Response, redirect, request

from userhub.application.use_cases.users.login_user import LoginUserUseCase
from userhub.application.use_cases.users.logout_user import LogoutUserUseCase
from userhub.application.use_cases.users.register_user import RegisterUserUseCase
from userhub.auth import current_session_id
from userhub.domain.users.exceptions import AuthenticationFailure, DuplicateUsernameError
from userhub.interfaces.http.dto.auth import CredentialsFormDTO
from userhub.interfaces.http.views import (
    INVALID_CREDENTIALS_MESSAGE,
    LOGIN_ERROR_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    USERNAME_TAKEN_MESSAGE,
    LoginPage,
    RegisterPage,
    render_view,
    store_error_message,
)
from userhub.shared.errors import StoreError, ValidationError
from userhub.shared.errors.validation import parse_payload
from userhub.shared.logging import logger
from userhub.shared.middleware.sessions import end_session


def _form_payload() -> Mapping[str, Any]:
    if request.form:
        return request.form.to_dict()
    payload = request.get_json(silent=True)
    # only a JSON object carries named fields
    return payload if isinstance(payload, dict) else {}


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case

    def register_form(self) -> Response:
        logger.debug("auth.register: form requested")
        return render_view(RegisterPage())

    def register(self) -> Response:
        try:
            form = parse_payload(
                CredentialsFormDTO, _form_payload(), code="username_and_password_required"
            )
        except ValidationError as exc:
            logger.warning(f"auth.register: missing fields {dict(exc.context or {})}")
            return render_view(RegisterPage(message=MISSING_FIELDS_MESSAGE))

        try:
            user = self._register_use_case.execute(form.username, form.password)
        except DuplicateUsernameError:
            logger.warning(f"auth.register: username taken (username='{form.username}')")
            return render_view(RegisterPage(message=USERNAME_TAKEN_MESSAGE))
        except StoreError as exc:
            logger.error(f"auth.register: store error (username='{form.username}'): {exc}")
            return render_view(RegisterPage(message=store_error_message(exc.message)))

        logger.info(f"auth.register: ok user_id={user.id} username='{user.username}'")
        return redirect("/login")

    def login_form(self) -> Response:
        return render_view(LoginPage())

    def login(self) -> Response:
        username = ""
        try:
            form = parse_payload(CredentialsFormDTO, _form_payload())
            username = form.username
            self._login_use_case.execute(current_session_id(), form.username, form.password)
        except (ValidationError, AuthenticationFailure):
            logger.warning(f"auth.login: invalid credentials (username='{username}')")
            return render_view(LoginPage(message=INVALID_CREDENTIALS_MESSAGE))
        except StoreError as exc:
            logger.error(f"auth.login: store error (username='{username}'): {exc}")
            return render_view(LoginPage(message=LOGIN_ERROR_MESSAGE))

        logger.info(f"auth.login: ok username='{username}'")
        return redirect("/dashboard")

    def logout(self) -> Response:
        self._logout_use_case.execute(current_session_id())
        logger.info("auth.logout: ok")
        return end_session(redirect("/login"))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register_form, methods=["GET"])
        bp.add_url_rule(
            "/register", endpoint="register_submit", view_func=self.register, methods=["POST"]
        )
        bp.add_url_rule("/login", view_func=self.login_form, methods=["GET"])
        bp.add_url_rule(
            "/login", endpoint="login_submit", view_func=self.login, methods=["POST"]
        )
        bp.add_url_rule("/logout", view_func=self.logout, methods=["GET"])
        return bp
