"""Dataclasses for pricing configuration and derived quotes."""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "SAR"

# (key, property field, display label), in display order.
DISCOUNT_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    ("new_reservation_discount", "newReservationDiscount", "New Reservation Discount"),
    ("week_reservation_discount", "weekReservationDiscount", "Week Reservation Discount"),
    ("month_reservation_discount", "monthReservationDiscount", "Month Reservation Discount"),
)


def _to_number(value: Any, *, name: str) -> float:
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        logger.warning("Ignoring boolean value for %s", name)
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric value %r for %s", value, name)
        return 0.0
    if not math.isfinite(number):
        logger.warning("Ignoring non-finite value %r for %s", value, name)
        return 0.0
    return number


@dataclass(frozen=True, slots=True)
class PricingConfig:
    """Nightly price and signed discount adjustments for one bookable unit."""

    price_before_tax: float = 0.0
    new_reservation_discount: float = 0.0
    week_reservation_discount: float = 0.0
    month_reservation_discount: float = 0.0
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        # Frozen and slotted, so coerced amounts go through object.__setattr__.
        for key in ("price_before_tax", *(key for key, _, _ in DISCOUNT_FIELDS)):
            object.__setattr__(self, key, _to_number(getattr(self, key), name=key))
        if self.price_before_tax < 0:
            logger.warning("Clamping negative price_before_tax %s to 0", self.price_before_tax)
            object.__setattr__(self, "price_before_tax", 0.0)
        if not self.currency:
            object.__setattr__(self, "currency", DEFAULT_CURRENCY)

    @classmethod
    def from_property(
        cls, data: Optional[Mapping[str, Any]], *, currency: Optional[str] = None
    ) -> "PricingConfig":
        """Read a property mapping using camelCase keys, falling back to snake_case."""
        data = data or {}

        def pick(snake: str, camel: str) -> float:
            raw = data.get(camel)
            if raw is None:
                raw = data.get(snake)
            return _to_number(raw, name=camel)

        return cls(
            price_before_tax=pick("price_before_tax", "priceBeforeTax"),
            new_reservation_discount=pick(*DISCOUNT_FIELDS[0][:2]),
            week_reservation_discount=pick(*DISCOUNT_FIELDS[1][:2]),
            month_reservation_discount=pick(*DISCOUNT_FIELDS[2][:2]),
            currency=currency or str(data.get("currency") or DEFAULT_CURRENCY),
        )

    def discount_lines(self) -> Tuple["DiscountLine", ...]:
        return tuple(
            DiscountLine(key=key, label=label, amount=getattr(self, key))
            for key, _, label in DISCOUNT_FIELDS
        )


@dataclass(frozen=True, slots=True)
class DiscountLine:
    key: str
    label: str
    amount: float

    def to_dict(self) -> dict[str, object]:
        return {"key": self.key, "label": self.label, "amount": self.amount}


@dataclass(frozen=True, slots=True)
class Quote:
    """Price breakdown for a prospective stay. Amounts are unrounded."""

    nights: int
    price_before_tax: float
    subtotal: float
    total: float
    discounts: Tuple[DiscountLine, ...] = field(default_factory=tuple)
    currency: str = DEFAULT_CURRENCY

    @property
    def discount_total(self) -> float:
        return sum(line.amount for line in self.discounts)

    def to_dict(self) -> dict[str, object]:
        discounts: List[dict[str, object]] = [line.to_dict() for line in self.discounts]
        return {
            "nights": self.nights,
            "price_before_tax": self.price_before_tax,
            "subtotal": self.subtotal,
            "discounts": discounts,
            "total": self.total,
            "currency": self.currency,
        }


__all__ = ["DEFAULT_CURRENCY", "DiscountLine", "PricingConfig", "Quote"]
