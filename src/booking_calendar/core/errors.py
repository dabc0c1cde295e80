"""Exception types shared across the package."""
from __future__ import annotations

from typing import Any, Optional


class BookingCalendarError(Exception):
    """Base class for errors raised by booking_calendar."""


class ParseError(BookingCalendarError, ValueError):
    """Raised when a reservation date field is not a valid calendar date."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Any = None,
        index: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
        self.index = index


class InvalidSelectionError(BookingCalendarError):
    """Raised when an operation needs a complete check-in/check-out range."""


__all__ = ["BookingCalendarError", "InvalidSelectionError", "ParseError"]
