# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Typed page views.

Each view names its Jinja2 template and carries the data the template needs.
Templates are autoescaped, so user-supplied text (usernames, store error
messages) is rendered as text, never as markup.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from http import HTTPStatus
from typing import Any, ClassVar

from flask import Response, make_response, render_template

MISSING_FIELDS_MESSAGE = "Username and password are required."
USERNAME_TAKEN_MESSAGE = "Username already exists."
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
LOGIN_ERROR_MESSAGE = "Error during login."


def store_error_message(raw: str) -> str:
    return f"Error creating user: {raw}."


@dataclass(slots=True, frozen=True)
class View:
    template: ClassVar[str]

    def context(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class HomePage(View):
    template: ClassVar[str] = "home.html"


@dataclass(slots=True, frozen=True)
class RegisterPage(View):
    template: ClassVar[str] = "register.html"
    message: str | None = None


@dataclass(slots=True, frozen=True)
class LoginPage(View):
    template: ClassVar[str] = "login.html"
    message: str | None = None


@dataclass(slots=True, frozen=True)
class DashboardPage(View):
    template: ClassVar[str] = "dashboard.html"
    username: str


def render_view(view: View, status: HTTPStatus = HTTPStatus.OK) -> Response:
    response = make_response(render_template(view.template, **view.context()), status)
    response.mimetype = "text/html"
    return response


__all__ = [
    "DashboardPage",
    "HomePage",
    "INVALID_CREDENTIALS_MESSAGE",
    "LOGIN_ERROR_MESSAGE",
    "LoginPage",
    "MISSING_FIELDS_MESSAGE",
    "RegisterPage",
    "USERNAME_TAKEN_MESSAGE",
    "View",
    "render_view",
    "store_error_message",
]
