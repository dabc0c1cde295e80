"""Property listing configuration loaded from TOML."""
from __future__ import annotations

import re
import tomllib
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from booking_calendar.pricing import PricingConfig

if TYPE_CHECKING:  # pragma: no cover
    from booking_calendar.config.settings import Settings

_RELATIVE_DAY = re.compile(r"^(?P<count>\d+)\s*(?P<unit>[dDwW])$")


class PricingSection(BaseModel):
    """Nightly price and discount adjustments; camelCase keys are accepted too."""

    model_config = ConfigDict(populate_by_name=True)

    price_before_tax: Optional[float] = Field(default=None, alias="priceBeforeTax")
    new_reservation_discount: Optional[float] = Field(default=None, alias="newReservationDiscount")
    week_reservation_discount: Optional[float] = Field(default=None, alias="weekReservationDiscount")
    month_reservation_discount: Optional[float] = Field(default=None, alias="monthReservationDiscount")
    currency: Optional[str] = None

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip().upper() or None

    @field_validator("price_before_tax")
    @classmethod
    def _non_negative_price(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value < 0:
            raise ValueError("price_before_tax must not be negative")
        return value


class ReservationEntry(BaseModel):
    """Raw reservation dates; parsing happens in the reservations normalizer."""

    model_config = ConfigDict(populate_by_name=True)

    check_in: str = Field(alias="checkIn")
    check_out: str = Field(alias="checkOut")
    reference: Optional[str] = None

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> object:
        # TOML local dates arrive as datetime.date.
        if isinstance(value, date):
            return value.isoformat()
        return value


class AvailabilitySection(BaseModel):
    today: Optional[str] = Field(
        default=None, description="ISO date, 'today' or a relative offset such as 'today+3d'"
    )
    checkout_day_free: Optional[bool] = None
    strict_reservation_parsing: Optional[bool] = None


class PropertyConfig(BaseModel):
    """Top-level property listing decoded from TOML."""

    title: Optional[str] = None
    pricing: PricingSection = Field(default_factory=PricingSection)
    reservations: list[ReservationEntry] = Field(default_factory=list)
    availability: AvailabilitySection = Field(default_factory=AvailabilitySection)

    @classmethod
    def load(cls, path: Path) -> "PropertyConfig":
        """Load a property listing from a TOML file."""
        if not path.exists():
            raise FileNotFoundError(f"Property config not found at {path}")
        data = tomllib.loads(path.read_text())
        return cls.model_validate(data)

    # Public API -----------------------------------------------------------------

    def apply_to(self, settings: "Settings") -> None:
        """Apply overrides to an existing Settings instance."""
        availability = self.availability
        if availability.today:
            settings.today = _parse_day(availability.today)
        if availability.checkout_day_free is not None:
            settings.checkout_day_free = availability.checkout_day_free
        if availability.strict_reservation_parsing is not None:
            settings.strict_reservation_parsing = availability.strict_reservation_parsing
        if self.pricing.currency:
            settings.currency = self.pricing.currency

    def pricing_config(self, *, currency: Optional[str] = None) -> PricingConfig:
        return PricingConfig.from_property(
            self.pricing.model_dump(exclude={"currency"}),
            currency=currency or self.pricing.currency,
        )

    def reservation_records(self) -> list[dict[str, Any]]:
        return [
            {"checkIn": entry.check_in, "checkOut": entry.check_out, "reference": entry.reference}
            for entry in self.reservations
        ]


def _parse_day(value: str) -> date:
    text = value.strip()
    lowered = text.lower()
    if lowered == "today":
        return date.today()
    if lowered.startswith("today+"):
        match = _RELATIVE_DAY.match(lowered.split("+", 1)[1])
        if not match:
            raise ValueError(f"Unsupported relative date '{value}'. Use forms like 'today+3d' or 'today+2w'.")
        count = int(match.group("count"))
        if match.group("unit").lower() == "w":
            return date.today() + timedelta(weeks=count)
        return date.today() + timedelta(days=count)
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"Invalid date '{value}'. Provide ISO format (YYYY-MM-DD) or 'today+Nd'.") from exc


__all__ = ["PropertyConfig"]
