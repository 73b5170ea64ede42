from __future__ import annotations


class WebexError(Exception):
    """Base class for every failure an operation can report.

    ``str(exc)`` is always a human-readable message suitable for direct
    display in the activity log.
    """

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(WebexError):
    """Local input problem detected before any request is issued."""

    kind = "validation"


class ApiError(WebexError):
    """The API answered with a non-success status."""

    kind = "api"

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(WebexError):
    """No response was received (DNS, connection reset, timeout...)."""

    kind = "transport"
