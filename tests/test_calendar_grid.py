from __future__ import annotations

from datetime import date

from booking_calendar.availability import AvailabilityEngine, month_grid, selectable_dates


def _engine() -> AvailabilityEngine:
    return AvailabilityEngine.from_records(
        [
            {"checkIn": "2024-06-10", "checkOut": "2024-06-15"},
            {"checkIn": "2024-07-01", "checkOut": "2024-07-05"},
        ],
        date(2024, 6, 5),
    )


def test_month_grid_covers_every_day():
    grid = month_grid(_engine(), 2024, 2)
    assert len(grid) == 29
    assert grid[0].day == date(2024, 2, 1)
    assert grid[-1].day == date(2024, 2, 29)


def test_month_grid_marks_past_and_booked_days():
    cells = {cell.day.day: cell for cell in month_grid(_engine(), 2024, 6)}

    assert cells[4].past and not cells[4].selectable
    assert cells[5].selectable and not cells[5].past
    assert cells[12].booked and not cells[12].selectable
    assert cells[15].booked
    assert cells[16].selectable and not cells[16].booked
    assert cells[16].to_dict() == {"date": "2024-06-16", "selectable": True, "booked": False, "past": False}


def test_month_grid_with_check_in_uses_check_out_rules():
    cells = {cell.day: cell for cell in month_grid(_engine(), 2024, 6, check_in=date(2024, 6, 20))}

    assert not cells[date(2024, 6, 19)].selectable
    assert not cells[date(2024, 6, 20)].selectable
    assert cells[date(2024, 6, 21)].selectable
    assert cells[date(2024, 6, 30)].selectable


def test_selectable_dates_stops_at_next_booking():
    days = list(selectable_dates(_engine(), date(2024, 6, 20), date(2024, 7, 10), check_in=date(2024, 6, 20)))
    assert days[0] == date(2024, 6, 21)
    assert days[-1] == date(2024, 6, 30)


def test_selectable_dates_for_check_in_skips_booked_range():
    days = list(selectable_dates(_engine(), date(2024, 6, 8), date(2024, 6, 17)))
    assert days == [date(2024, 6, 8), date(2024, 6, 9), date(2024, 6, 16), date(2024, 6, 17)]
