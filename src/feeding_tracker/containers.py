"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import partial

from supabase import create_client

from feeding_tracker.adapters.supabase_feeding_repository import (
    SupabaseFeedingRepository,
)
from feeding_tracker.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from feeding_tracker.config import Settings, default_preferences
from feeding_tracker.services.feeding_list import FeedingListService
from feeding_tracker.services.feedings import FeedingRepository, FeedingService
from feeding_tracker.services.preferences import (
    PreferencesRepository,
    PreferencesService,
)
from feeding_tracker.services.swipe import SwipeRevealController


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    feeding_service: FeedingService
    preferences_service: PreferencesService
    feeding_list_service: FeedingListService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    feeding_repository = SupabaseFeedingRepository(
        supabase_client, table=resolved_settings.feedings_table
    )
    preferences_repository = SupabasePreferencesRepository(
        supabase_client, table=resolved_settings.preferences_table
    )
    return build_services(resolved_settings, feeding_repository, preferences_repository)


def build_services(
    settings: Settings,
    feeding_repository: FeedingRepository,
    preferences_repository: PreferencesRepository,
) -> AppContainer:
    """Wire services around the given repositories."""
    feeding_service = FeedingService(feeding_repository)
    preferences_service = PreferencesService(
        repository=preferences_repository,
        defaults=default_preferences(settings),
    )
    feeding_list_service = FeedingListService(
        feeding_service=feeding_service,
        preferences_service=preferences_service,
        swipe_factory=partial(
            SwipeRevealController,
            action_width=settings.swipe_action_width,
            positional_threshold=settings.swipe_positional_threshold,
            velocity_threshold=settings.swipe_velocity_threshold,
        ),
    )

    async def close_resources() -> None:
        feeding_list_service.close()

    return AppContainer(
        settings=settings,
        feeding_service=feeding_service,
        preferences_service=preferences_service,
        feeding_list_service=feeding_list_service,
        close_resources=close_resources,
    )
