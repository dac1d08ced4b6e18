"""Route Response Utilities
===========================

Shared helpers to standardize API route responses.

json_success(data=None, message=None, **meta) -> (Response, int)
json_error(message, status=400, **details) -> (Response, int)
handle_exceptions -> decorator mapping exceptions to json_error
require_json_fields(payload, *fields) -> dict of non-blank string values

Response Envelope Standard:
{
  "ok": true/false,
  "message": str | null,
  "data": {...} | list | null,
  "error": {"type": str, "details": any} | null,
  "meta": {...}
}

The front-end endpoints (/api/generate, /api/languages, /api/health) keep
their bare JSON shapes; every other endpoint uses the envelope.
"""
from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Dict, Optional, TypeVar
import logging
from flask import jsonify, request

from codegen.services.service_base import ServiceError
from codegen.utils.errors import AppError, BadRequestError, map_service_exception

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# ---------------------------------------------------------------------------
# JSON Builders
# ---------------------------------------------------------------------------

def json_success(data: Any = None, message: Optional[str] = None, status: int = 200, **meta):
    """Build a standardized success JSON response.

    Additional keyword args become part of meta.
    """
    payload: Dict[str, Any] = {
        "ok": True,
        "message": message,
        "data": data,
        "error": None,
        "meta": meta or None,
    }
    return jsonify(payload), status


def json_error(message: str, status: int = 400, *, error_type: Optional[str] = None, **details):
    """Build a standardized error JSON response."""
    payload: Dict[str, Any] = {
        "ok": False,
        "message": message,
        "data": None,
        "error": {
            "type": error_type or "ApplicationError",
            "details": details or None,
        },
        "meta": None,
    }
    return jsonify(payload), status

# ---------------------------------------------------------------------------
# Request parsing
# ---------------------------------------------------------------------------

def get_json_body() -> Dict[str, Any]:
    """Request JSON object, or an empty dict for missing/invalid bodies."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def require_json_fields(payload: Dict[str, Any], *fields: str, message: Optional[str] = None) -> Dict[str, str]:
    """Return the named fields as non-blank strings or raise BadRequestError."""
    values: Dict[str, str] = {}
    missing = []
    for name in fields:
        value = payload.get(name)
        if not isinstance(value, str) or not value.strip():
            missing.append(name)
        else:
            values[name] = value
    if missing:
        raise BadRequestError(
            message or f"Missing required field(s): {', '.join(missing)}",
            code='missing_fields',
            details={'missing': missing},
        )
    return values

# ---------------------------------------------------------------------------
# Decorators
# ---------------------------------------------------------------------------

def handle_exceptions(func: F) -> F:
    """Decorator to standardize exception handling for envelope routes.

    AppError keeps its own status, ServiceError subclasses map through
    map_service_exception and anything else becomes a 500 envelope.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):  # type: ignore
        try:
            return func(*args, **kwargs)
        except AppError as exc:
            return json_error(exc.message, status=exc.http_status, error_type=exc.code or type(exc).__name__, **(exc.details or {}))
        except ServiceError as exc:
            status = map_service_exception(exc)
            logger.info(f"{func.__name__} rejected: {exc} ({status})")
            return json_error(str(exc), status=status, error_type=type(exc).__name__)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Unhandled exception in %s", func.__name__)
            return json_error("Internal server error", status=500, error_type=exc.__class__.__name__, detail=str(exc))
    return wrapper  # type: ignore


__all__ = [
    "json_success",
    "json_error",
    "handle_exceptions",
    "get_json_body",
    "require_json_fields",
]
