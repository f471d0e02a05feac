# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, redirect

from userhub.auth import current_session, login_required
from userhub.domain.sessions.entities import Session
from userhub.interfaces.http.views import DashboardPage, HomePage, render_view


class PagesController:
    def home(self) -> Response:
        session = current_session()
        if session is not None and session.is_authenticated:
            return redirect("/dashboard")
        return render_view(HomePage())

    @login_required
    def dashboard(self, session: Session) -> Response:
        return render_view(DashboardPage(username=session.username or ""))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("pages", __name__)
        bp.add_url_rule("/", view_func=self.home, methods=["GET"])
        bp.add_url_rule("/dashboard", view_func=self.dashboard, methods=["GET"])
        return bp
