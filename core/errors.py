"""Typed failures raised by the services; `main.py` renders them as
`{"error": message}` with the matching status code."""

from __future__ import annotations


class ServiceError(Exception):
    status_code: int = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(ServiceError):
    status_code = 401
    default_message = "Unauthorized"


class InvalidInput(ServiceError):
    status_code = 400
    default_message = "Invalid input"


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found"


class Conflict(ServiceError):
    status_code = 409
    default_message = "Already exists"


class Internal(ServiceError):
    """Persistence unavailable or failing; details go to the log only."""
