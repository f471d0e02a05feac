# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
from typing import Any, Protocol, cast

from flask import Flask

from userhub.container import Container
from userhub.infrastructure.db import init_db
from userhub.shared.config import load_config
from userhub.shared.logging import logger, setup_logging
from userhub.shared.middleware.error_handler import configure_error_handling
from userhub.shared.middleware.request_logger import configure_request_logging
from userhub.shared.middleware.sessions import configure_sessions


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


def create_app(container: Container | None = None) -> Flask:
    config = load_config()
    setup_logging(debug_mode=config.debug_logging)
    init_db()

    deps = container or Container(config)

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)

    configure_error_handling(app)
    configure_request_logging(app)
    configure_sessions(app, deps.session_manager)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(deps.health_controller.as_blueprint())
    app.register_blueprint(deps.users_controller.as_blueprint())
    app.register_blueprint(deps.pages_controller.as_blueprint())
    app.register_blueprint(deps.auth_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    if not config.tokens.secret:
        logger.warning("JWT_SECRET is not set; /api/users will fail until it is configured")

    logger.info("Flask app initialized")
    return app
