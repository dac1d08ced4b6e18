"""Centralized JSON error handlers.

Every error leaving the application is rendered as a structured JSON payload
(see `codegen.utils.errors.build_error_payload`). Each request gets a
``request_id`` that is echoed as ``error_id``.
"""
from __future__ import annotations

import traceback
import uuid
from typing import Any, Dict

from flask import Blueprint, current_app, g, jsonify, make_response
from werkzeug.exceptions import HTTPException

from codegen.services.service_base import ServiceError
from codegen.utils.errors import AppError, build_error_payload, map_service_exception

error_bp = Blueprint("errors", __name__)

ERROR_TITLES = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    415: "Unsupported Media Type",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}


def render_error(status_code: int, error: Exception | None = None):
    title = ERROR_TITLES.get(status_code, "Error")
    debug = current_app.debug or current_app.config.get("SHOW_ERROR_DETAILS", False)
    extra: Dict[str, Any] = {}

    if isinstance(error, AppError):
        status_code = error.http_status or status_code
        title = ERROR_TITLES.get(status_code, title)
        message = error.message or title
        title = message
        extra.update(code=error.code, details=error.details)
    elif isinstance(error, HTTPException):
        message = getattr(error, "description", None) or title
    elif isinstance(error, ServiceError):
        status_code = map_service_exception(error)
        title = ERROR_TITLES.get(status_code, title)
        message = str(error) or title
    else:
        message = title

    if debug and error is not None and not isinstance(error, (HTTPException, AppError)):
        extra["debug"] = {
            "exception_type": type(error).__name__,
            "stacktrace": traceback.format_exc(),
        }

    payload = build_error_payload(message, status=status_code, error=title, **extra)
    return make_response(jsonify(payload), status_code)


@error_bp.app_errorhandler(AppError)  # type: ignore[misc]
def handle_app_error(exc: AppError):
    return render_error(exc.http_status, exc)


@error_bp.app_errorhandler(ServiceError)  # type: ignore[misc]
def handle_service_error(exc: ServiceError):
    return render_error(map_service_exception(exc), exc)


@error_bp.app_errorhandler(HTTPException)  # type: ignore[misc]
def handle_http_exception(exc: HTTPException):
    return render_error(getattr(exc, "code", 500) or 500, exc)


@error_bp.app_errorhandler(Exception)  # type: ignore[misc]
def handle_uncaught_exception(exc: Exception):
    current_app.logger.exception("Unhandled exception: %s", exc)
    return render_error(500, exc)


def register_error_handlers(app):
    """Register handlers & attach request id generation."""
    @app.before_request  # type: ignore[misc]
    def _assign_request_id():  # pragma: no cover - simple
        g.request_id = uuid.uuid4().hex

    app.register_blueprint(error_bp)
    return app
