"""Dataclasses for normalised reservation intervals."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional

from booking_calendar.core.errors import ParseError


@dataclass(frozen=True, slots=True)
class ReservationInterval:
    """An occupied stay, ``[check_in, check_out)`` in whole days."""

    check_in: date
    check_out: date
    reference: Optional[str] = field(default=None, compare=False)

    @property
    def nights(self) -> int:
        return max((self.check_out - self.check_in).days, 0)

    def is_inverted(self) -> bool:
        return self.check_out < self.check_in

    def contains(self, day: date, *, include_check_out: bool = True) -> bool:
        """Return True when ``day`` falls inside the stay.

        The check-out day counts as occupied unless ``include_check_out`` is False.
        Inverted intervals never contain anything.
        """
        if self.is_inverted():
            return False
        if include_check_out:
            return self.check_in <= day <= self.check_out
        return self.check_in <= day < self.check_out

    def to_dict(self) -> dict[str, object]:
        return {
            "check_in": self.check_in.isoformat(),
            "check_out": self.check_out.isoformat(),
            "nights": self.nights,
            "reference": self.reference,
        }

    @classmethod
    def from_iterable(cls, intervals: Iterable["ReservationInterval"]) -> List[dict[str, object]]:
        return [interval.to_dict() for interval in intervals]


@dataclass(slots=True)
class NormalizationResult:
    """Sorted intervals plus the parse failures that were skipped."""

    intervals: List[ReservationInterval] = field(default_factory=list)
    errors: List[ParseError] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.errors)


__all__ = ["NormalizationResult", "ReservationInterval"]
