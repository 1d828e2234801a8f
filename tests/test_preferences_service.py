"""Tests for preferences service."""

import pytest

from feeding_tracker.domain.feedings import Preferences
from feeding_tracker.services.preferences import PreferencesService
from tests.conftest import ML, OZ, InMemoryPreferencesRepository

DEFAULTS = Preferences(display_unit=OZ, goal_quantity=32, goal_unit=OZ)


def test_get_falls_back_to_defaults() -> None:
    service = PreferencesService(InMemoryPreferencesRepository(), DEFAULTS)

    assert service.get() == DEFAULTS


def test_set_display_unit_persists_and_notifies() -> None:
    repository = InMemoryPreferencesRepository()
    service = PreferencesService(repository, DEFAULTS)
    received: list[Preferences] = []
    service.subscribe(received.append)

    updated = service.set_display_unit(ML)

    assert updated.display_unit is ML
    assert updated.goal_quantity == 32
    assert repository.preferences == updated
    assert received == [updated]


def test_set_goal_keeps_display_unit() -> None:
    service = PreferencesService(InMemoryPreferencesRepository(), DEFAULTS)

    updated = service.set_goal(900, ML)

    assert updated == Preferences(display_unit=OZ, goal_quantity=900, goal_unit=ML)


def test_negative_goal_is_rejected() -> None:
    repository = InMemoryPreferencesRepository()
    service = PreferencesService(repository, DEFAULTS)

    with pytest.raises(ValueError):
        service.set_goal(-1, OZ)
    assert repository.saves == 0
