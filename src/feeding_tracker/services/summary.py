"""Shareable text summaries of a day's feedings."""

from datetime import date, datetime

from feeding_tracker.domain.feedings import DayGroup
from feeding_tracker.domain.units import UnitOfMeasurement, convert, format_with_unit
from feeding_tracker.services.aggregation import day_total

_NOON = 12


def summarize(
    group: DayGroup, use_24_hour_clock: bool, display_unit: UnitOfMeasurement
) -> str:
    """Return one line per feeding followed by the day's total."""
    lines = []
    for feeding in group.feedings:
        quantity = convert(feeding.quantity, feeding.unit, display_unit)
        lines.append(
            f"{format_time(feeding.timestamp, use_24_hour_clock)} - "
            f"{format_with_unit(quantity, display_unit)}"
        )
    total = day_total(group, display_unit)
    lines.append(f"Total: {format_with_unit(total, display_unit)}")
    return "\n".join(lines)


def format_time(timestamp: datetime, use_24_hour_clock: bool) -> str:
    """Format a time of day as ``16:05`` or ``4:05 PM``."""
    if use_24_hour_clock:
        return timestamp.strftime("%H:%M")
    hour = timestamp.hour % 12 or 12
    suffix = "AM" if timestamp.hour < _NOON else "PM"
    return f"{hour}:{timestamp.minute:02d} {suffix}"


def format_day_label(day: date) -> str:
    """Format a day header label like ``Mon, Oct 19, 2026``."""
    return f"{day:%a, %b} {day.day}, {day.year}"
