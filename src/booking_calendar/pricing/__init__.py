"""Pricing configuration and quote calculation."""

from .calculator import compute_quote, nights_between, quote_stay
from .models import DEFAULT_CURRENCY, DiscountLine, PricingConfig, Quote

__all__ = [
    "DEFAULT_CURRENCY",
    "DiscountLine",
    "PricingConfig",
    "Quote",
    "compute_quote",
    "nights_between",
    "quote_stay",
]
