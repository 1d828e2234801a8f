"""State holder for the feeding list: groups, progress graph, summaries, rows."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from feeding_tracker.domain.feedings import (
    DayGroup,
    GraphPoint,
    GroupedFeedings,
    Preferences,
)
from feeding_tracker.domain.units import UnitOfMeasurement, convert
from feeding_tracker.services.aggregation import (
    cumulative_points,
    day_total,
    feedings_on,
    group_by_day,
)
from feeding_tracker.services.feedings import FeedingService, FeedingSnapshot
from feeding_tracker.services.preferences import PreferencesService
from feeding_tracker.services.summary import summarize
from feeding_tracker.services.swipe import SwipeRevealController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupState:
    """Grouped feedings; ``is_loading`` until the first snapshot arrives.

    ``error`` is set when the latest snapshot could not be grouped. ``data``
    then holds no groups and lists every record of that snapshot as skipped.
    """

    is_loading: bool = True
    data: GroupedFeedings = field(default_factory=GroupedFeedings)
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Return whether the latest snapshot failed to group."""
        return self.error is not None


@dataclass(frozen=True)
class ProgressGraph:
    """Today's cumulative intake against the goal, in the display unit."""

    day: date
    display_unit: UnitOfMeasurement
    goal: float
    points: tuple[GraphPoint, ...]

    @property
    def current(self) -> float:
        """Return the latest running total."""
        return self.points[-1].value if self.points else 0.0


@dataclass
class FeedingListService:
    """Recomputes list and graph state from each feedings or preferences update."""

    feeding_service: FeedingService
    preferences_service: PreferencesService
    swipe_factory: Callable[[], SwipeRevealController] = SwipeRevealController
    today: Callable[[], date] = date.today
    group_state: GroupState = field(init=False, default_factory=GroupState)
    preferences: Preferences = field(init=False)
    graph_points: tuple[GraphPoint, ...] = field(init=False, default=())
    _feedings: FeedingSnapshot = field(init=False, default=())
    _preferences_loaded: bool = field(init=False, default=False)
    _controllers: dict[int, SwipeRevealController] = field(
        init=False, default_factory=dict
    )
    _unsubscribers: list[Callable[[], None]] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.preferences = self.preferences_service.defaults
        self._unsubscribers = [
            self.preferences_service.subscribe(self._on_preferences),
            self.feeding_service.subscribe(self._on_feedings),
        ]

    def close(self) -> None:
        """Stop listening for updates."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def ensure_loaded(self) -> GroupState:
        """Load preferences and the first snapshot if none has been delivered yet."""
        if not self._preferences_loaded:
            self.preferences_service.refresh()
        if self.group_state.is_loading or self.group_state.failed:
            self.feeding_service.refresh()
        return self.group_state

    def display_unit(self) -> UnitOfMeasurement:
        """Return the unit feedings are presented in."""
        if not self._preferences_loaded:
            self.preferences_service.refresh()
        return self.preferences.display_unit

    def day_totals(self) -> list[tuple[DayGroup, float]]:
        """Return each day group with its total in the display unit."""
        groups = self.ensure_loaded().data.groups
        unit = self.preferences.display_unit
        return [(group, day_total(group, unit)) for group in groups]

    def progress(self) -> ProgressGraph:
        """Return today's progress graph."""
        self.ensure_loaded()
        # the day may have rolled over since the last snapshot
        self._recompute_graph()
        unit = self.preferences.display_unit
        return ProgressGraph(
            day=self.today(),
            display_unit=unit,
            goal=convert(
                self.preferences.goal_quantity, self.preferences.goal_unit, unit
            ),
            points=self.graph_points,
        )

    def day_summary(
        self,
        day: date,
        use_24_hour_clock: bool,
        display_unit: UnitOfMeasurement | None = None,
    ) -> str:
        """Return the shareable summary for a day."""
        group = self.ensure_loaded().data.find(day) or DayGroup(day=day)
        return summarize(
            group, use_24_hour_clock, display_unit or self.preferences.display_unit
        )

    def controller_for(self, feeding_id: int) -> SwipeRevealController:
        """Return the swipe controller of a row, creating it on first use."""
        controller = self._controllers.get(feeding_id)
        if controller is None:
            controller = self.swipe_factory()
            self._controllers[feeding_id] = controller
        return controller

    def delete_feeding(self, feeding_id: int) -> bool:
        """Delete the feeding behind a revealed row action."""
        self._controllers.pop(feeding_id, None)
        return self.feeding_service.delete_feeding(feeding_id)

    def _on_feedings(self, snapshot: FeedingSnapshot) -> None:
        self._feedings = snapshot
        live_ids = {feeding.id for feeding in snapshot}
        for feeding_id in list(self._controllers):
            if feeding_id not in live_ids:
                del self._controllers[feeding_id]
        try:
            grouped = group_by_day(snapshot)
            self._recompute_graph()
        except Exception as exc:
            logger.exception("Failed to group %d feedings", len(snapshot))
            self.graph_points = ()
            self.group_state = GroupState(
                is_loading=False,
                data=GroupedFeedings(skipped=snapshot),
                error=f"{type(exc).__name__}: {exc}",
            )
            return
        self.group_state = GroupState(is_loading=False, data=grouped)

    def _on_preferences(self, preferences: Preferences) -> None:
        self.preferences = preferences
        self._preferences_loaded = True
        self._recompute_graph()

    def _recompute_graph(self) -> None:
        todays = feedings_on(self._feedings, self.today())
        self.graph_points = tuple(
            cumulative_points(todays, self.preferences.display_unit)
        )
