"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class NotReadyError(NotFoundError):
    """The origin has no result for the round (not drawn yet, or unreachable)."""

    def __init__(self, message: str = "not_ready", details: Any | None = None) -> None:
        super().__init__(message=message, details=details)
        self.code = "not_ready"


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class InvalidRangeError(ValidationError):
    """Range bounds are missing or not integers."""

    def __init__(self, message: str = "Invalid range", details: Any | None = None) -> None:
        super().__init__(message=message, details=details)
        self.code = "invalid_range"


class RangeTooWideError(ValidationError):
    """Range is reversed or spans more rounds than allowed."""

    def __init__(self, max_span: int = 100, details: Any | None = None) -> None:
        super().__init__(message=f"Invalid range (max {max_span} draws)", details=details)
        self.code = "range_too_wide"
