from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class ValidationError(AppError):
    code = "validation_error"
    status_code = 400


class InternalError(AppError):
    """A server-side failure whose message is safe to show to the caller."""

    code = "internal_error"
    status_code = 500


class StoreError(AppError):
    """Any persistence failure other than a missing row.

    The message carries driver context for the logs and is never rendered
    in a response body.
    """

    code = "store_error"
    status_code = 500


class ForeignKeyViolation(StoreError):
    code = "foreign_key_violation"
