"""Grouping and totals for feedings."""

import logging
import math
from collections.abc import Iterable, Iterator
from datetime import date, datetime
from itertools import accumulate

from feeding_tracker.domain.feedings import (
    DayGroup,
    Feeding,
    GraphPoint,
    GroupedFeedings,
    wall_clock,
)
from feeding_tracker.domain.units import UnitOfMeasurement, convert

logger = logging.getLogger(__name__)


def group_by_day(feedings: Iterable[Feeding]) -> GroupedFeedings:
    """Group feedings by calendar day.

    Days are ordered most recent first; feedings within a day are ordered by
    timestamp ascending, ties broken by id and then input order. Records
    without a usable timestamp are returned in ``skipped`` instead of failing
    the whole pass.
    """
    valid, skipped = _partition(feedings)
    buckets: dict[date, list[Feeding]] = {}
    for feeding in sorted(valid, key=_chronological_key):
        buckets.setdefault(feeding.timestamp.date(), []).append(feeding)

    groups = tuple(
        DayGroup(day=day, feedings=tuple(buckets[day]))
        for day in sorted(buckets, reverse=True)
    )
    return GroupedFeedings(groups=groups, skipped=tuple(skipped))


def day_total(group: DayGroup, display_unit: UnitOfMeasurement) -> float:
    """Return the sum of a day's feedings in the display unit."""
    return total(group.feedings, display_unit)


def total(feedings: Iterable[Feeding], display_unit: UnitOfMeasurement) -> float:
    """Return the sum of feedings in the display unit."""
    return math.fsum(
        convert(feeding.quantity, feeding.unit, display_unit) for feeding in feedings
    )


def cumulative_points(
    feedings: Iterable[Feeding], display_unit: UnitOfMeasurement
) -> Iterator[GraphPoint]:
    """Yield running totals across all feedings in chronological order."""
    valid, _ = _partition(feedings)
    ordered = sorted(valid, key=_chronological_key)
    running = accumulate(
        convert(feeding.quantity, feeding.unit, display_unit) for feeding in ordered
    )
    for feeding, value in zip(ordered, running, strict=True):
        yield GraphPoint(timestamp=feeding.timestamp, value=value)


def feedings_on(feedings: Iterable[Feeding], day: date) -> list[Feeding]:
    """Return the feedings whose timestamp falls on a calendar day."""
    valid, _ = _partition(feedings)
    return [feeding for feeding in valid if feeding.timestamp.date() == day]


def _partition(feedings: Iterable[Feeding]) -> tuple[list[Feeding], list[Feeding]]:
    valid: list[Feeding] = []
    skipped: list[Feeding] = []
    for feeding in feedings:
        if isinstance(feeding.timestamp, datetime):
            valid.append(feeding)
        else:
            skipped.append(feeding)
    if skipped:
        logger.warning(
            "Excluded %d malformed feedings",
            len(skipped),
            extra={"feeding_ids": [feeding.id for feeding in skipped]},
        )
    return valid, skipped


def _chronological_key(feeding: Feeding) -> tuple[datetime, bool, int]:
    # offset-aware and naive records must stay comparable
    return (wall_clock(feeding.timestamp), feeding.id is None, feeding.id or 0)
