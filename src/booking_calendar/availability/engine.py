"""Check-in and check-out selectability rules over a reservation snapshot."""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Optional, Sequence

from booking_calendar.reservations import ReservationInterval, normalize, to_date_only

logger = logging.getLogger(__name__)


def is_date_disabled(
    day: date,
    intervals: Iterable[ReservationInterval],
    *,
    checkout_day_free: bool = False,
) -> bool:
    """Return True when ``day`` is occupied by any interval.

    Both ends are inclusive, so a reservation's departure day is blocked too.
    ``checkout_day_free`` switches to ``[check_in, check_out)`` membership.
    """
    day = to_date_only(day, field="day")
    include_check_out = not checkout_day_free
    return any(interval.contains(day, include_check_out=include_check_out) for interval in intervals)


def is_check_in_selectable(
    day: date,
    today: date,
    intervals: Iterable[ReservationInterval],
    *,
    checkout_day_free: bool = False,
) -> bool:
    day = to_date_only(day, field="day")
    today = to_date_only(today, field="today")
    if day < today:
        return False
    return not is_date_disabled(day, intervals, checkout_day_free=checkout_day_free)


def next_booking(
    check_in: date, intervals: Iterable[ReservationInterval]
) -> Optional[ReservationInterval]:
    """Return the earliest interval starting strictly after ``check_in``."""
    check_in = to_date_only(check_in, field="check_in")
    later = [interval for interval in intervals if interval.check_in > check_in]
    if not later:
        return None
    return min(later, key=lambda interval: interval.check_in)


def is_check_out_selectable(
    day: date,
    check_in: Optional[date],
    intervals: Sequence[ReservationInterval],
    *,
    checkout_day_free: bool = False,
) -> bool:
    if check_in is None:
        return False
    day = to_date_only(day, field="day")
    check_in = to_date_only(check_in, field="check_in")
    # A check-out on the check-in day would be a zero-night stay.
    if day <= check_in:
        return False
    upcoming = next_booking(check_in, intervals)
    if upcoming is not None and day > upcoming.check_in:
        return False
    return not is_date_disabled(day, intervals, checkout_day_free=checkout_day_free)


class AvailabilityEngine:
    """Answers selectability questions for one snapshot and one "today"."""

    def __init__(
        self,
        intervals: Iterable[ReservationInterval],
        today: date,
        *,
        checkout_day_free: bool = False,
    ) -> None:
        self._intervals = tuple(sorted(intervals, key=lambda interval: interval.check_in))
        self._today = to_date_only(today, field="today")
        self._checkout_day_free = checkout_day_free

    @classmethod
    def from_records(
        cls,
        records: Iterable[Any],
        today: date,
        *,
        strict: bool = False,
        checkout_day_free: bool = False,
    ) -> "AvailabilityEngine":
        return cls(normalize(records, strict=strict), today, checkout_day_free=checkout_day_free)

    @property
    def intervals(self) -> tuple[ReservationInterval, ...]:
        return self._intervals

    @property
    def today(self) -> date:
        return self._today

    @property
    def checkout_day_free(self) -> bool:
        return self._checkout_day_free

    def is_date_disabled(self, day: date) -> bool:
        return is_date_disabled(day, self._intervals, checkout_day_free=self._checkout_day_free)

    def is_check_in_selectable(self, day: date) -> bool:
        selectable = is_check_in_selectable(
            day, self._today, self._intervals, checkout_day_free=self._checkout_day_free
        )
        if not selectable:
            logger.debug("Check-in %s is not selectable", day)
        return selectable

    def is_check_out_selectable(self, day: date, check_in: Optional[date]) -> bool:
        selectable = is_check_out_selectable(
            day, check_in, self._intervals, checkout_day_free=self._checkout_day_free
        )
        if not selectable:
            logger.debug("Check-out %s is not selectable for check-in %s", day, check_in)
        return selectable

    def next_booking(self, check_in: date) -> Optional[ReservationInterval]:
        return next_booking(check_in, self._intervals)


__all__ = [
    "AvailabilityEngine",
    "is_check_in_selectable",
    "is_check_out_selectable",
    "is_date_disabled",
    "next_booking",
]
