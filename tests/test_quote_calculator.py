from __future__ import annotations

from datetime import date

import pytest

from booking_calendar.pricing import PricingConfig, compute_quote, nights_between, quote_stay


def test_nights_between_handles_missing_and_reversed_dates():
    day = date(2024, 6, 20)
    assert nights_between(day, None) == 0
    assert nights_between(None, day) == 0
    assert nights_between(None, None) == 0
    assert nights_between(day, day) == 0
    assert nights_between(date(2024, 6, 25), day) == 0


def test_nights_between_counts_whole_days():
    assert nights_between(date(2024, 6, 20), date(2024, 6, 25)) == 5
    assert nights_between(date(2024, 2, 28), date(2024, 3, 1)) == 2


@pytest.mark.parametrize("nights", [0, 1, 5, 7, 30, 365])
def test_subtotal_is_linear_in_nights(nights):
    config = PricingConfig(price_before_tax=137.5)
    assert compute_quote(config, nights).subtotal == 137.5 * nights


def test_quote_with_new_reservation_discount():
    config = PricingConfig(
        price_before_tax=200,
        new_reservation_discount=-20,
        week_reservation_discount=0,
        month_reservation_discount=0,
    )

    quote = compute_quote(config, 5)

    assert quote.nights == 5
    assert quote.subtotal == 1000
    assert quote.total == 980
    assert quote.discount_total == -20


def test_discounts_are_summed_with_their_sign():
    config = PricingConfig(
        price_before_tax=100,
        new_reservation_discount=-10,
        week_reservation_discount=-25.5,
        month_reservation_discount=5,
    )
    quote = compute_quote(config, 3)
    assert quote.total == 300 - 10 - 25.5 + 5
    assert [line.key for line in quote.discounts] == [
        "new_reservation_discount",
        "week_reservation_discount",
        "month_reservation_discount",
    ]


def test_missing_pricing_yields_zero_quote():
    quote = compute_quote(None, 4)
    assert quote.subtotal == 0
    assert quote.total == 0


def test_negative_nights_are_clamped():
    assert compute_quote(PricingConfig(price_before_tax=50), -3).subtotal == 0


def test_from_property_reads_camel_case_and_defaults_missing_fields():
    config = PricingConfig.from_property({"priceBeforeTax": "250", "newReservationDiscount": -30})

    assert config.price_before_tax == 250
    assert config.new_reservation_discount == -30
    assert config.week_reservation_discount == 0
    assert config.month_reservation_discount == 0
    assert config.currency == "SAR"


def test_from_property_ignores_non_numeric_values(caplog):
    with caplog.at_level("WARNING"):
        config = PricingConfig.from_property({"priceBeforeTax": "n/a", "weekReservationDiscount": True})
    assert config.price_before_tax == 0
    assert config.week_reservation_discount == 0
    assert "priceBeforeTax" in caplog.text


def test_from_property_with_nothing():
    assert PricingConfig.from_property(None) == PricingConfig()


def test_quote_stay_and_to_dict():
    config = PricingConfig(price_before_tax=200, new_reservation_discount=-20, currency="EUR")
    quote = quote_stay(config, date(2024, 6, 20), date(2024, 6, 25))

    payload = quote.to_dict()
    assert payload["nights"] == 5
    assert payload["subtotal"] == 1000
    assert payload["total"] == 980
    assert payload["currency"] == "EUR"
    assert payload["discounts"][0] == {
        "key": "new_reservation_discount",
        "label": "New Reservation Discount",
        "amount": -20,
    }


def test_none_amounts_count_as_zero():
    assert compute_quote(PricingConfig(price_before_tax=None), 5).total == 0

    config = PricingConfig(price_before_tax=200, week_reservation_discount=None, month_reservation_discount="")
    quote = compute_quote(config, 5)
    assert quote.subtotal == 1000
    assert quote.total == 1000
    assert config.week_reservation_discount == 0


@pytest.mark.parametrize("value", ["nan", "inf", "-inf", float("nan"), float("inf")])
def test_non_finite_amounts_count_as_zero(value, caplog):
    with caplog.at_level("WARNING"):
        quote = compute_quote(PricingConfig.from_property({"priceBeforeTax": value, "newReservationDiscount": value}), 5)
    assert quote.subtotal == 0
    assert quote.total == 0
    assert "non-finite" in caplog.text


def test_negative_price_is_clamped(caplog):
    with caplog.at_level("WARNING"):
        from_mapping = PricingConfig.from_property({"priceBeforeTax": -50, "newReservationDiscount": -10})
        direct = PricingConfig(price_before_tax=-50, new_reservation_discount=-10)

    assert from_mapping == direct
    assert from_mapping.price_before_tax == 0
    assert from_mapping.new_reservation_discount == -10
    assert compute_quote(from_mapping, 3).total == -10
    assert "Clamping negative price_before_tax" in caplog.text


def test_blank_currency_falls_back_to_default():
    assert PricingConfig(currency="").currency == "SAR"
