"""Domain errors raised by the outing manager and mapped to responses by the routes."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"


class OutingError(Exception):
    """Base error with a code and a user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(OutingError):
    """Raised when an event id does not resolve to a stored event."""

    def __init__(self, event_id: str) -> None:
        super().__init__(ErrorCode.EVENT_NOT_FOUND, "Event not found")
        self.event_id = event_id


class ValidationError(OutingError):
    """Raised when required form fields are missing.

    Attributes:
        missing: Names of the required fields that were empty.
    """

    def __init__(self, message: str, missing: list[str]) -> None:
        super().__init__(ErrorCode.VALIDATION_FAILED, message)
        self.missing = missing
