"""Booking selection state machine."""

from .selection import BookingSelection, BookingSession, SelectionState

__all__ = ["BookingSelection", "BookingSession", "SelectionState"]
