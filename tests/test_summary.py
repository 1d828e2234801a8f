"""Tests for day summaries."""

from datetime import date

from feeding_tracker.domain.feedings import DayGroup
from feeding_tracker.services.aggregation import group_by_day
from feeding_tracker.services.summary import format_day_label, format_time, summarize
from tests.conftest import ML, OZ, feeding_at


def _scenario_group() -> DayGroup:
    return group_by_day(
        [
            feeding_at(16, quantity=2, unit=OZ, feeding_id=3),
            feeding_at(8, quantity=4, unit=OZ, feeding_id=1),
            feeding_at(12, quantity=120, unit=ML, feeding_id=2),
        ]
    ).groups[0]


def test_summary_lists_feedings_in_order_with_total() -> None:
    text = summarize(_scenario_group(), use_24_hour_clock=False, display_unit=OZ)

    assert text.splitlines() == [
        "8:00 AM - 4.0oz",
        "12:00 PM - 4.1oz",
        "4:00 PM - 2.0oz",
        "Total: 10.1oz",
    ]


def test_summary_with_24_hour_clock() -> None:
    text = summarize(_scenario_group(), use_24_hour_clock=True, display_unit=OZ)

    assert text.splitlines()[0] == "08:00 - 4.0oz"
    assert text.splitlines()[2] == "16:00 - 2.0oz"


def test_summary_in_milliliters() -> None:
    text = summarize(_scenario_group(), use_24_hour_clock=True, display_unit=ML)

    assert text.splitlines() == [
        "08:00 - 118ml",
        "12:00 - 120ml",
        "16:00 - 59ml",
        "Total: 297ml",
    ]


def test_empty_group_summary_is_total_only() -> None:
    empty = DayGroup(day=date(2026, 10, 19))

    assert summarize(empty, use_24_hour_clock=False, display_unit=OZ) == (
        "Total: 0.0oz"
    )
    assert summarize(empty, use_24_hour_clock=True, display_unit=ML) == "Total: 0ml"


def test_format_time_twelve_hour_edges() -> None:
    assert format_time(feeding_at(0, 5).timestamp, False) == "12:05 AM"
    assert format_time(feeding_at(12, 0).timestamp, False) == "12:00 PM"
    assert format_time(feeding_at(23, 59).timestamp, False) == "11:59 PM"
    assert format_time(feeding_at(11, 59).timestamp, False) == "11:59 AM"
    assert format_time(feeding_at(0, 5).timestamp, True) == "00:05"


def test_format_day_label() -> None:
    assert format_day_label(date(2026, 10, 19)) == "Mon, Oct 19, 2026"
    assert format_day_label(date(2026, 3, 1)) == "Sun, Mar 1, 2026"
