"""
Carpool errors. All of them are recoverable: fix the input and call again.
"""

from typing import Optional


class CarpoolError(ValueError):
    """Base error for the carpool package."""


class NoDriversAvailableError(CarpoolError):
    """Raised when an event has no availability with is_driving=True."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"No drivers marked for event {event_id}")


class InvalidRecordError(CarpoolError):
    """Raised by the record loader when a raw record fails validation."""

    def __init__(self, kind: str, index: int, detail: Optional[str] = None):
        self.kind = kind
        self.index = index
        self.detail = detail
        message = f"Invalid {kind} record at index {index}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
