"""Typed failures raised by handlers and the persistence adapter.

Every error knows its HTTP status and renders a `{"message": ...}` body;
the handlers in `error_handlers` turn them into responses.
"""
from __future__ import annotations

from typing import Any

from .validators import FieldError


class StaffdeskError(Exception):
    """Base exception for all expected API failures."""

    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message}


class InvalidPayloadError(StaffdeskError):
    """Request body failed validation.

    With `detailed=True` every field error is listed under `details`
    (login form); otherwise only the first message is returned.
    """

    http_status = 400

    def __init__(self, errors: list[FieldError], *, detailed: bool = False) -> None:
        message = "Invalid input" if detailed or not errors else errors[0].message
        super().__init__(message)
        self.errors = errors
        self.detailed = detailed

    def to_response(self) -> dict[str, Any]:
        body = super().to_response()
        if self.detailed:
            body["details"] = [error.as_detail() for error in self.errors]
        return body


class DuplicateEmailError(StaffdeskError):
    http_status = 400

    def __init__(self) -> None:
        super().__init__("Email already exists")


class EmployeeNotFoundError(StaffdeskError):
    http_status = 404

    def __init__(self) -> None:
        super().__init__("Employee not found")


class InvalidCredentialsError(StaffdeskError):
    http_status = 401

    def __init__(self) -> None:
        super().__init__("Incorrect username or password")


class ServerError(StaffdeskError):
    """Sanitized stand-in for an unexpected failure; the cause is only logged."""

    http_status = 500

    def __init__(self, message: str = "Server error", *, extra: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.extra = extra or {}

    def to_response(self) -> dict[str, Any]:
        return {**self.extra, **super().to_response()}
