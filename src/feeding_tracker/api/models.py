"""Pydantic models for the HTTP API."""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from feeding_tracker.domain.feedings import (
    DayGroup,
    Feeding,
    GraphPoint,
    Preferences,
    wall_clock,
)
from feeding_tracker.domain.units import (
    UnitOfMeasurement,
    convert,
    format_with_unit,
)
from feeding_tracker.services.feeding_list import ProgressGraph
from feeding_tracker.services.summary import format_day_label


def _normalize_unit(value: str) -> str:
    return UnitOfMeasurement.from_abbreviation(value).abbreviation


class FeedingIn(BaseModel):
    """Feeding create/update payload."""

    timestamp: datetime
    quantity: float = Field(ge=0)
    unit: str

    normalize_unit = field_validator("unit")(_normalize_unit)
    normalize_timestamp = field_validator("timestamp")(wall_clock)

    def to_domain(self, feeding_id: int | None = None) -> Feeding:
        """Build a domain feeding."""
        return Feeding(
            id=feeding_id,
            timestamp=self.timestamp,
            quantity=self.quantity,
            unit=UnitOfMeasurement.from_abbreviation(self.unit),
        )


class FeedingOut(BaseModel):
    """Stored feeding with its quantity rendered in the display unit."""

    id: int | None
    timestamp: datetime | None
    quantity: float
    unit: str
    display: str

    @classmethod
    def from_domain(
        cls, feeding: Feeding, display_unit: UnitOfMeasurement
    ) -> "FeedingOut":
        """Build the response for a feeding."""
        converted = convert(feeding.quantity, feeding.unit, display_unit)
        return cls(
            id=feeding.id,
            timestamp=feeding.timestamp,
            quantity=feeding.quantity,
            unit=feeding.unit.abbreviation,
            display=format_with_unit(converted, display_unit),
        )


class DayGroupOut(BaseModel):
    """A day section of the feeding list."""

    day: date
    label: str
    total: float
    total_label: str
    feedings: list[FeedingOut]

    @classmethod
    def from_domain(
        cls, group: DayGroup, total: float, display_unit: UnitOfMeasurement
    ) -> "DayGroupOut":
        """Build the response for a day group."""
        return cls(
            day=group.day,
            label=format_day_label(group.day),
            total=total,
            total_label=format_with_unit(total, display_unit),
            feedings=[
                FeedingOut.from_domain(feeding, display_unit)
                for feeding in group.feedings
            ],
        )


class FeedingListOut(BaseModel):
    """Feedings grouped by day, most recent first."""

    display_unit: str
    skipped: int
    days: list[DayGroupOut]


class SummaryOut(BaseModel):
    """Shareable day summary."""

    day: date
    text: str


class GraphPointOut(BaseModel):
    """Cumulative total at a feeding."""

    timestamp: datetime
    value: float

    @classmethod
    def from_domain(cls, point: GraphPoint) -> "GraphPointOut":
        """Build the response for a graph point."""
        return cls(timestamp=point.timestamp, value=point.value)


class ProgressOut(BaseModel):
    """Today's progress towards the goal."""

    day: date
    display_unit: str
    goal: float
    current: float
    points: list[GraphPointOut]

    @classmethod
    def from_domain(cls, graph: ProgressGraph) -> "ProgressOut":
        """Build the response for a progress graph."""
        return cls(
            day=graph.day,
            display_unit=graph.display_unit.abbreviation,
            goal=graph.goal,
            current=graph.current,
            points=[GraphPointOut.from_domain(point) for point in graph.points],
        )


class PreferencesBody(BaseModel):
    """Display preferences payload."""

    display_unit: str
    goal_quantity: float = Field(ge=0)
    goal_unit: str

    normalize_units = field_validator("display_unit", "goal_unit")(_normalize_unit)

    @classmethod
    def from_domain(cls, preferences: Preferences) -> "PreferencesBody":
        """Build the payload for stored preferences."""
        return cls(
            display_unit=preferences.display_unit.abbreviation,
            goal_quantity=preferences.goal_quantity,
            goal_unit=preferences.goal_unit.abbreviation,
        )

    def to_domain(self) -> Preferences:
        """Build domain preferences."""
        return Preferences(
            display_unit=UnitOfMeasurement.from_abbreviation(self.display_unit),
            goal_quantity=self.goal_quantity,
            goal_unit=UnitOfMeasurement.from_abbreviation(self.goal_unit),
        )
