"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime

import pytest

from feeding_tracker.config import Settings
from feeding_tracker.containers import AppContainer, build_services
from feeding_tracker.domain.feedings import Feeding, Preferences
from feeding_tracker.domain.units import UnitOfMeasurement
from feeding_tracker.services.feedings import FeedingRepository
from feeding_tracker.services.preferences import PreferencesRepository

OZ = UnitOfMeasurement.OUNCE
ML = UnitOfMeasurement.MILLILITER

# header.payload.signature shape accepted by the Supabase client
FAKE_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)


def feeding_at(
    hour: int,
    minute: int = 0,
    quantity: float = 1.0,
    unit: UnitOfMeasurement = OZ,
    day: date = date(2026, 10, 19),
    feeding_id: int | None = None,
) -> Feeding:
    """Build a feeding on a given day and time."""
    return Feeding(
        id=feeding_id,
        timestamp=datetime(day.year, day.month, day.day, hour, minute),
        quantity=quantity,
        unit=unit,
    )


@dataclass
class InMemoryFeedingRepository(FeedingRepository):
    """In-memory feeding repository for tests."""

    feedings: dict[int, Feeding] = field(default_factory=dict)
    next_id: int = 1

    def get_feeding(self, feeding_id: int) -> Feeding | None:
        return self.feedings.get(feeding_id)

    def save_feeding(self, feeding: Feeding) -> int:
        feeding_id = feeding.id
        if feeding_id is None:
            feeding_id = self.next_id
            self.next_id += 1
        self.feedings[feeding_id] = replace(feeding, id=feeding_id)
        return feeding_id

    def delete_feeding(self, feeding_id: int) -> None:
        self.feedings.pop(feeding_id, None)

    def list_feedings(self) -> list[Feeding]:
        return list(self.feedings.values())


@dataclass
class InMemoryPreferencesRepository(PreferencesRepository):
    """In-memory preferences repository for tests."""

    preferences: Preferences | None = None
    saves: int = 0

    def get_preferences(self) -> Preferences | None:
        return self.preferences

    def save_preferences(self, preferences: Preferences) -> None:
        self.preferences = preferences
        self.saves += 1


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=FAKE_SERVICE_KEY,
        api_token="api-token",
    )


@pytest.fixture
def feeding_repository() -> InMemoryFeedingRepository:
    return InMemoryFeedingRepository()


@pytest.fixture
def preferences_repository() -> InMemoryPreferencesRepository:
    return InMemoryPreferencesRepository()


@pytest.fixture
def container(
    settings: Settings,
    feeding_repository: InMemoryFeedingRepository,
    preferences_repository: InMemoryPreferencesRepository,
) -> AppContainer:
    return build_services(settings, feeding_repository, preferences_repository)
