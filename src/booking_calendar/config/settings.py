"""Runtime configuration for the booking calendar.

Relies on pydantic-settings so that environment variables (prefixed with ``BOOKING_``)
can override defaults.
"""
from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from booking_calendar.availability import AvailabilityEngine
from booking_calendar.pricing import DEFAULT_CURRENCY, PricingConfig

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Captures runtime configuration for availability and pricing."""

    log_level: str = Field(default="INFO")
    log_dir: Optional[Path] = Field(default=None, description="Directory for the log file; stream only when unset")
    today: Optional[date] = Field(
        default=None, description="Fixed 'today' for past-date filtering; the system date when unset"
    )
    strict_reservation_parsing: bool = Field(
        default=False,
        description="Raise on the first invalid reservation date instead of skipping the record",
    )
    checkout_day_free: bool = Field(
        default=False,
        description="Treat a reservation's check-out day as free for a new arrival",
    )
    currency: str = Field(default=DEFAULT_CURRENCY, description="Currency code carried on quotes")

    model_config = SettingsConfigDict(
        env_prefix="BOOKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_dir", mode="before")
    def _expand_log_dir(cls, value: str | Path | None) -> Optional[Path]:
        if value in (None, ""):
            return None
        return Path(value).expanduser()

    @field_validator("today", mode="before")
    def _parse_today(cls, value: str | date | None) -> Optional[date]:
        if value in (None, ""):
            return None
        if isinstance(value, date):
            return value
        return date.fromisoformat(value)

    @field_validator("currency")
    def _normalise_currency(cls, value: str) -> str:
        value = value.strip().upper()
        if not value:
            raise ValueError("currency must not be blank")
        return value

    def ensure_directories(self) -> None:
        """Create directories that must exist at runtime."""
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    def resolve_today(self) -> date:
        return self.today or date.today()

    def build_engine(self, records: Iterable[Any]) -> AvailabilityEngine:
        engine = AvailabilityEngine.from_records(
            records,
            self.resolve_today(),
            strict=self.strict_reservation_parsing,
            checkout_day_free=self.checkout_day_free,
        )
        logger.debug("Built availability engine with %s intervals", len(engine.intervals))
        return engine

    def pricing_config(self, data: Optional[Mapping[str, Any]] = None) -> PricingConfig:
        """Read a property mapping, quoting in the configured currency."""
        return PricingConfig.from_property(data, currency=self.currency)
