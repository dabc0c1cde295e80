"""Per-day availability grids for calendar rendering."""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, List, Optional

from .engine import AvailabilityEngine


@dataclass(frozen=True, slots=True)
class CalendarDay:
    """A single calendar cell."""

    day: date
    selectable: bool
    booked: bool
    past: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "date": self.day.isoformat(),
            "selectable": self.selectable,
            "booked": self.booked,
            "past": self.past,
        }


def _iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current = current + timedelta(days=1)


def _is_selectable(engine: AvailabilityEngine, day: date, check_in: Optional[date]) -> bool:
    if check_in is None:
        return engine.is_check_in_selectable(day)
    return engine.is_check_out_selectable(day, check_in)


def month_grid(
    engine: AvailabilityEngine,
    year: int,
    month: int,
    *,
    check_in: Optional[date] = None,
) -> List[CalendarDay]:
    """Describe every day of a month.

    Without ``check_in`` the cells follow the check-in rules; with it they
    follow the check-out rules for that check-in.
    """
    _, days_in_month = calendar.monthrange(year, month)
    first = date(year, month, 1)
    last = date(year, month, days_in_month)
    return [
        CalendarDay(
            day=day,
            selectable=_is_selectable(engine, day, check_in),
            booked=engine.is_date_disabled(day),
            past=day < engine.today,
        )
        for day in _iter_days(first, last)
    ]


def selectable_dates(
    engine: AvailabilityEngine,
    start: date,
    end: date,
    *,
    check_in: Optional[date] = None,
) -> Iterator[date]:
    """Yield the selectable dates in the inclusive range ``start..end``."""
    for day in _iter_days(start, end):
        if _is_selectable(engine, day, check_in):
            yield day


__all__ = ["CalendarDay", "month_grid", "selectable_dates"]
