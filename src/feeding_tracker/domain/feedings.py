"""Domain models for feedings and their derived views."""

from dataclasses import dataclass, field
from datetime import date, datetime

from feeding_tracker.domain.units import UnitOfMeasurement


@dataclass(frozen=True)
class Feeding:
    """A single recorded feeding.

    ``timestamp`` is local wall-clock time. It is ``None`` only for records the
    persistence layer could not parse.
    """

    timestamp: datetime | None
    quantity: float
    unit: UnitOfMeasurement
    id: int | None = None


def wall_clock(timestamp: datetime) -> datetime:
    """Drop any UTC offset, keeping the clock reading as recorded."""
    return timestamp.replace(tzinfo=None)


@dataclass(frozen=True)
class DayGroup:
    """Feedings of one calendar day, in chronological order."""

    day: date
    feedings: tuple[Feeding, ...] = ()


@dataclass(frozen=True)
class GroupedFeedings:
    """Day groups, most recent day first, plus records that could not be grouped."""

    groups: tuple[DayGroup, ...] = ()
    skipped: tuple[Feeding, ...] = field(default=())

    @property
    def skipped_count(self) -> int:
        """Number of malformed records left out of the groups."""
        return len(self.skipped)

    def find(self, day: date) -> DayGroup | None:
        """Return the group for a day if it has any feedings."""
        for group in self.groups:
            if group.day == day:
                return group
        return None


@dataclass(frozen=True)
class GraphPoint:
    """Running total at a feeding's timestamp."""

    timestamp: datetime
    value: float


@dataclass(frozen=True)
class Preferences:
    """User display preferences."""

    display_unit: UnitOfMeasurement
    goal_quantity: float
    goal_unit: UnitOfMeasurement
