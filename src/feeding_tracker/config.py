"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from feeding_tracker.domain.feedings import Preferences
from feeding_tracker.domain.units import UnitOfMeasurement

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    feedings_table: str = "feedings"
    preferences_table: str = "preferences"
    default_display_unit: str = "oz"
    default_goal_quantity: float = 32.0
    default_goal_unit: str = "oz"
    use_24_hour_clock: bool = False
    swipe_action_width: float = 80.0
    swipe_positional_threshold: float = 0.5
    swipe_velocity_threshold: float = 100.0
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_unit(raw: str | None, fallback: UnitOfMeasurement) -> UnitOfMeasurement:
    """Parse a configured unit abbreviation, falling back when unset."""
    if raw is None or not raw.strip():
        return fallback
    return UnitOfMeasurement.from_abbreviation(raw)


def default_preferences(settings: Settings) -> Preferences:
    """Build the preferences used until the user saves their own."""
    return Preferences(
        display_unit=parse_unit(
            settings.default_display_unit, UnitOfMeasurement.OUNCE
        ),
        goal_quantity=settings.default_goal_quantity,
        goal_unit=parse_unit(settings.default_goal_unit, UnitOfMeasurement.OUNCE),
    )
