"""Reservation snapshot helpers."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Tuple

from booking_calendar.core.errors import ParseError

from .models import ReservationInterval
from .normalizer import normalize_with_errors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReservationSnapshot:
    """Immutable set of intervals read once from a data source."""

    intervals: Tuple[ReservationInterval, ...] = ()
    errors: Tuple[ParseError, ...] = field(default=(), compare=False)
    source: Optional[Path] = field(default=None, compare=False)

    def __iter__(self) -> Iterator[ReservationInterval]:
        return iter(self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)

    def to_dict(self) -> dict[str, object]:
        return {
            "source": str(self.source) if self.source else None,
            "reservations": ReservationInterval.from_iterable(self.intervals),
            "skipped": len(self.errors),
        }

    @classmethod
    def from_records(
        cls,
        records: Iterable[Any],
        *,
        strict: bool = False,
        source: Optional[Path] = None,
    ) -> "ReservationSnapshot":
        result = normalize_with_errors(records, strict=strict)
        return cls(intervals=tuple(result.intervals), errors=tuple(result.errors), source=source)

    @classmethod
    def load(cls, path: Path, *, strict: bool = False) -> "ReservationSnapshot":
        if not path.exists():
            raise FileNotFoundError(f"Reservation snapshot not found at {path}")
        data = json.loads(path.read_text())
        if isinstance(data, dict):
            entries = data.get("reservations", [])
        elif isinstance(data, list):
            entries = data
        else:
            raise TypeError(f"Reservation snapshot {path} must hold a list or an object with 'reservations'")
        snapshot = cls.from_records(entries, strict=strict, source=path)
        logger.info(
            "Loaded %s reservations from %s (%s skipped)", len(snapshot), path, len(snapshot.errors)
        )
        return snapshot


__all__ = ["ReservationSnapshot"]
