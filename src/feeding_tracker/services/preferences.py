"""User preferences service."""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Protocol

from feeding_tracker.domain.feedings import Preferences
from feeding_tracker.domain.units import UnitOfMeasurement
from feeding_tracker.services.subscriptions import SnapshotPublisher


class PreferencesRepository(Protocol):
    """Persistence interface for preferences."""

    def get_preferences(self) -> Preferences | None:
        """Return stored preferences if any were saved."""

    def save_preferences(self, preferences: Preferences) -> None:
        """Store preferences."""


@dataclass
class PreferencesService:
    """Service for display preferences with change notifications."""

    repository: PreferencesRepository
    defaults: Preferences
    publisher: SnapshotPublisher[Preferences] = field(
        default_factory=SnapshotPublisher
    )

    def get(self) -> Preferences:
        """Return stored preferences or the defaults."""
        return self.repository.get_preferences() or self.defaults

    def update(self, preferences: Preferences) -> Preferences:
        """Persist preferences and notify subscribers."""
        if preferences.goal_quantity < 0:
            raise ValueError("goal_quantity must not be negative")
        self.repository.save_preferences(preferences)
        self.publisher.publish(preferences)
        return preferences

    def set_display_unit(self, unit: UnitOfMeasurement) -> Preferences:
        """Change the display unit."""
        return self.update(replace(self.get(), display_unit=unit))

    def set_goal(self, quantity: float, unit: UnitOfMeasurement) -> Preferences:
        """Change the daily goal."""
        return self.update(replace(self.get(), goal_quantity=quantity, goal_unit=unit))

    def subscribe(self, callback: Callable[[Preferences], None]) -> Callable[[], None]:
        """Receive preferences on every change; returns an unsubscribe function."""
        return self.publisher.subscribe(callback)

    def refresh(self) -> Preferences:
        """Re-read preferences and publish them to subscribers."""
        preferences = self.get()
        self.publisher.publish(preferences)
        return preferences
