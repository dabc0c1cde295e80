"""Availability rules and calendar helpers."""

from .calendar import CalendarDay, month_grid, selectable_dates
from .engine import (
    AvailabilityEngine,
    is_check_in_selectable,
    is_check_out_selectable,
    is_date_disabled,
    next_booking,
)

__all__ = [
    "AvailabilityEngine",
    "CalendarDay",
    "is_check_in_selectable",
    "is_check_out_selectable",
    "is_date_disabled",
    "month_grid",
    "next_booking",
    "selectable_dates",
]
