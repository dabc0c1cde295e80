"""Check-in/check-out selection state for one interaction session."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional

from booking_calendar.availability import AvailabilityEngine
from booking_calendar.core.errors import InvalidSelectionError
from booking_calendar.pricing import PricingConfig, Quote, compute_quote, nights_between
from booking_calendar.reservations import to_date_only

logger = logging.getLogger(__name__)


class SelectionState(Enum):
    EMPTY = "empty"
    CHECK_IN_CHOSEN = "check_in_chosen"
    RANGE_CHOSEN = "range_chosen"


@dataclass(frozen=True, slots=True)
class BookingSelection:
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    nights: int = 0

    @property
    def state(self) -> SelectionState:
        if self.check_in is None:
            return SelectionState.EMPTY
        if self.check_out is None:
            return SelectionState.CHECK_IN_CHOSEN
        return SelectionState.RANGE_CHOSEN

    def with_check_in(self, check_in: date) -> "BookingSelection":
        # A new check-in always drops the previous check-out.
        return BookingSelection(check_in=check_in, check_out=None, nights=0)

    def with_check_out(self, check_out: date) -> "BookingSelection":
        return BookingSelection(
            check_in=self.check_in,
            check_out=check_out,
            nights=nights_between(self.check_in, check_out),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.state.value,
            "check_in": self.check_in.isoformat() if self.check_in else None,
            "check_out": self.check_out.isoformat() if self.check_out else None,
            "nights": self.nights,
        }


class BookingSession:
    """Drives a BookingSelection through the availability rules.

    Rejected selections leave the current selection untouched and return False.
    """

    def __init__(self, engine: AvailabilityEngine, pricing: Optional[PricingConfig] = None) -> None:
        self._engine = engine
        self._pricing = pricing or PricingConfig()
        self._selection = BookingSelection()

    @property
    def engine(self) -> AvailabilityEngine:
        return self._engine

    @property
    def pricing(self) -> PricingConfig:
        return self._pricing

    @property
    def selection(self) -> BookingSelection:
        return self._selection

    @property
    def state(self) -> SelectionState:
        return self._selection.state

    @property
    def can_submit(self) -> bool:
        return self.state is SelectionState.RANGE_CHOSEN

    def select_check_in(self, day: date) -> bool:
        day = to_date_only(day, field="check_in")
        if not self._engine.is_check_in_selectable(day):
            logger.debug("Rejected check-in %s; keeping %s", day, self.state.value)
            return False
        self._selection = self._selection.with_check_in(day)
        logger.debug("Check-in set to %s", day)
        return True

    def select_check_out(self, day: date) -> bool:
        day = to_date_only(day, field="check_out")
        if not self._engine.is_check_out_selectable(day, self._selection.check_in):
            logger.debug("Rejected check-out %s; keeping %s", day, self.state.value)
            return False
        self._selection = self._selection.with_check_out(day)
        logger.debug("Check-out set to %s (%s nights)", day, self._selection.nights)
        return True

    def reset(self) -> None:
        self._selection = BookingSelection()

    def quote(self) -> Quote:
        return compute_quote(self._pricing, self._selection.nights)

    def require_range(self) -> BookingSelection:
        """Return the completed selection or raise InvalidSelectionError."""
        if not self.can_submit:
            raise InvalidSelectionError(
                f"Booking requires both check-in and check-out (state: {self.state.value})"
            )
        return self._selection

    def to_dict(self) -> dict[str, Any]:
        summary = self._selection.to_dict()
        summary["can_submit"] = self.can_submit
        summary["quote"] = self.quote().to_dict()
        return summary


__all__ = ["BookingSelection", "BookingSession", "SelectionState"]
