# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time
from collections.abc import Mapping
from typing import Any

from flask import Flask, Response, g, request

from userhub.shared.config import load_config
from userhub.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
)

REQUEST_ID_HEADER = "X-Request-ID"
SENSITIVE_HEADERS = {"authorization", "cookie", "set-cookie", "x-api-key"}
SENSITIVE_FIELDS = ("password", "token", "secret", "sid")


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _fingerprint(value: str) -> str:
    return f"<hashed:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        key: _fingerprint(value) if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def _mask_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: "<redacted>" if any(marker in key.lower() for marker in SENSITIVE_FIELDS) else value
        for key, value in fields.items()
    }


def configure_request_logging(app: Flask) -> None:
    """Log one line per request start and end, tagged with a correlation id.

    The id comes from ``X-Request-ID`` when the caller sends one and is echoed
    back on the response. Debug mode also logs masked headers and form fields.
    """
    debug_mode = load_config().debug_logging

    @app.before_request
    def _start() -> None:
        set_correlation_id(request.headers.get(REQUEST_ID_HEADER) or secrets.token_urlsafe(8))
        g.request_started = time.perf_counter()
        if debug_mode:
            logger.debug(
                f"http.request: {request.method} {request.path} from {_client_ip()} "
                f"query={_mask_fields(request.args)} form={_mask_fields(request.form)} "
                f"headers={_mask_headers(request.headers)}"
            )
        else:
            logger.info(f"http.request: {request.method} {request.path} from {_client_ip()}")

    @app.after_request
    def _finish(response: Response) -> Response:
        started = getattr(g, "request_started", time.perf_counter())
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        response.headers.setdefault(REQUEST_ID_HEADER, get_correlation_id())
        logger.info(
            f"http.response: {request.method} {request.path} "
            f"status={response.status_code} duration={elapsed_ms:.1f}ms"
        )
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(
                f"http.error: {type(exc).__name__} on {request.method} {request.path}"
            )
        clear_correlation_id()


__all__ = ["configure_request_logging"]
