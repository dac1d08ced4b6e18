"""Service Base Utilities
=========================

Shared exception hierarchy for the service layer.

Usage Pattern:
    from .service_base import ServiceError, NotFoundError, ValidationError

Service modules raise these exceptions so route / CLI layers can map them
uniformly to HTTP responses or exit codes.
"""
from __future__ import annotations

__all__ = [
    'ServiceError', 'NotFoundError', 'ValidationError', 'OperationError',
]


class ServiceError(Exception):
    """Base class for all service layer errors."""


class NotFoundError(ServiceError):
    """Entity not found."""


class ValidationError(ServiceError):
    """Invalid input or failed validation rules."""


class OperationError(ServiceError):
    """Generic failure performing an operation (e.g., storage write)."""

