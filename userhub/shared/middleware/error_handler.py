# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, jsonify, request

from userhub.shared.config import load_config
from userhub.shared.errors import register_error_handler
from userhub.shared.logging import logger

API_PREFIX = "/api/"
PAGE_ERROR_TEXT = "Something broke!"


def _unexpected_response() -> Response | tuple[Response, HTTPStatus]:
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    if request.path.startswith(API_PREFIX):
        return jsonify({"error": "internal_error"}), status
    return Response(PAGE_ERROR_TEXT, status=status, mimetype="text/plain")


def configure_error_handling(app: Flask) -> None:
    """Install the application error handlers plus a last-resort 500.

    Unexpected exceptions never take the process down: API paths get a JSON
    body, pages get a short plain-text message.
    """
    register_error_handler(app)
    debug_mode = load_config().debug_logging

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"query={dict(request.args)}, body_size={request.content_length or 0}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")
        return _unexpected_response()


__all__ = ["configure_error_handling"]
