"""Tests for configuration helpers."""

import pytest

from feeding_tracker.config import Settings, default_preferences, parse_unit
from tests.conftest import FAKE_SERVICE_KEY, ML, OZ


def test_parse_unit() -> None:
    assert parse_unit("ml", OZ) is ML
    assert parse_unit(None, OZ) is OZ
    assert parse_unit("  ", ML) is ML
    with pytest.raises(ValueError):
        parse_unit("cup", OZ)


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", FAKE_SERVICE_KEY)
    monkeypatch.setenv("API_TOKEN", "secret")
    monkeypatch.setenv("DEFAULT_DISPLAY_UNIT", "ml")
    monkeypatch.setenv("SWIPE_ACTION_WIDTH", "96")

    settings = Settings()

    assert settings.api_token == "secret"
    assert settings.swipe_action_width == 96
    assert settings.swipe_positional_threshold == 0.5
    assert default_preferences(settings).display_unit is ML


def test_default_preferences(settings: Settings) -> None:
    preferences = default_preferences(settings)

    assert preferences.display_unit is OZ
    assert preferences.goal_quantity == 32
    assert preferences.goal_unit is OZ
