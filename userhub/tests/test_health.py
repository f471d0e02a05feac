from __future__ import annotations

from flask import Flask

from userhub.infrastructure.health import HealthReport, probe_database
from userhub.interfaces.http.controllers.health_controller import HealthController


def test_probe_database_reports_ok(reset_database) -> None:
    report = probe_database()

    assert report.ok is True
    assert report.to_dict() == {"ok": True, "database": "ok"}


def test_health_reports_database_error() -> None:
    app = Flask("userhub")
    controller = HealthController(probe=lambda: HealthReport(database="error: disk I/O error"))
    app.register_blueprint(controller.as_blueprint())

    with app.test_client() as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": False, "database": "error: disk I/O error"}
