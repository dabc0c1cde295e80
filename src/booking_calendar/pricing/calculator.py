"""Nightly price calculation."""
from __future__ import annotations

from datetime import date
from typing import Optional

from .models import PricingConfig, Quote


def nights_between(check_in: Optional[date], check_out: Optional[date]) -> int:
    """Whole nights between two dates; 0 unless check-out is after check-in."""
    if check_in is None or check_out is None:
        return 0
    return max((check_out - check_in).days, 0)


def compute_quote(pricing: Optional[PricingConfig], nights: int) -> Quote:
    pricing = pricing or PricingConfig()
    nights = max(nights, 0)
    subtotal = pricing.price_before_tax * nights
    discounts = pricing.discount_lines()
    return Quote(
        nights=nights,
        price_before_tax=pricing.price_before_tax,
        subtotal=subtotal,
        total=subtotal + sum(line.amount for line in discounts),
        discounts=discounts,
        currency=pricing.currency,
    )


def quote_stay(
    pricing: Optional[PricingConfig], check_in: Optional[date], check_out: Optional[date]
) -> Quote:
    return compute_quote(pricing, nights_between(check_in, check_out))


__all__ = ["compute_quote", "nights_between", "quote_stay"]
