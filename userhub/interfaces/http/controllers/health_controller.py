# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Blueprint, Response, jsonify

from userhub.infrastructure.health import HealthReport, probe_database


class HealthController:
    def __init__(self, probe: Callable[[], HealthReport] = probe_database) -> None:
        self._probe = probe

    def health(self) -> Response:
        return jsonify(self._probe().to_dict())

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("health", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp
