"""Reservation models and normalization helpers."""

from .models import NormalizationResult, ReservationInterval
from .normalizer import (
    normalize,
    normalize_with_errors,
    parse_reservation,
    to_date_only,
)
from .snapshot import ReservationSnapshot

__all__ = [
    "NormalizationResult",
    "ReservationInterval",
    "ReservationSnapshot",
    "normalize",
    "normalize_with_errors",
    "parse_reservation",
    "to_date_only",
]
