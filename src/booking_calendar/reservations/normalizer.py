"""Utilities to turn raw reservation records into sorted, typed intervals."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Iterable, List, Optional

from booking_calendar.core.errors import ParseError

from .models import NormalizationResult, ReservationInterval

logger = logging.getLogger(__name__)

_CHECK_IN_KEYS = ("checkIn", "check_in")
_CHECK_OUT_KEYS = ("checkOut", "check_out")
_REFERENCE_KEYS = ("id", "reference", "reservationId")


def to_date_only(value: Any, *, field: Optional[str] = None) -> date:
    """Coerce a date-like value to a calendar date, dropping any time of day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ParseError(f"Empty date value for {field or 'date'}", field=field, value=value)
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise ParseError(
                f"Invalid date '{value}' for {field or 'date'}; expected ISO 8601",
                field=field,
                value=value,
            ) from exc
    raise ParseError(
        f"Unsupported {type(value).__name__} value for {field or 'date'}",
        field=field,
        value=value,
    )


def _lookup(record: Any, keys: Iterable[str]) -> Any:
    if isinstance(record, Mapping):
        for key in keys:
            if record.get(key) is not None:
                return record[key]
        return None
    for key in keys:
        value = getattr(record, key, None)
        if value is not None:
            return value
    return None


def parse_reservation(record: Any, *, index: Optional[int] = None) -> ReservationInterval:
    """Build a single interval, raising ParseError on a missing or invalid date."""
    fields = (("check_in", _CHECK_IN_KEYS), ("check_out", _CHECK_OUT_KEYS))
    parsed: dict[str, date] = {}
    for name, keys in fields:
        raw = _lookup(record, keys)
        if raw is None:
            raise ParseError(f"Reservation is missing {name}", field=name, index=index)
        try:
            parsed[name] = to_date_only(raw, field=name)
        except ParseError as exc:
            exc.index = index
            raise
    reference = _lookup(record, _REFERENCE_KEYS)
    return ReservationInterval(
        check_in=parsed["check_in"],
        check_out=parsed["check_out"],
        reference=str(reference) if reference is not None else None,
    )


def normalize_with_errors(records: Iterable[Any], *, strict: bool = False) -> NormalizationResult:
    result = NormalizationResult()
    for index, record in enumerate(records):
        try:
            interval = parse_reservation(record, index=index)
        except ParseError as exc:
            if strict:
                raise
            logger.warning("Skipping reservation #%s: %s", index, exc)
            result.errors.append(exc)
            continue
        if interval.is_inverted():
            logger.debug("Reservation #%s ends before it starts; it will never block a date", index)
        result.intervals.append(interval)
    # sorted() is stable, so equal check-ins keep their input order.
    result.intervals = sorted(result.intervals, key=lambda interval: interval.check_in)
    return result


def normalize(records: Iterable[Any], *, strict: bool = False) -> List[ReservationInterval]:
    """Return intervals sorted ascending by check-in.

    Records with an unparseable date are skipped and logged, unless ``strict``
    is set, in which case the first ParseError propagates.
    """
    return normalize_with_errors(records, strict=strict).intervals


__all__ = ["normalize", "normalize_with_errors", "parse_reservation", "to_date_only"]
