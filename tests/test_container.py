"""Tests for container wiring."""

import asyncio

from feeding_tracker.adapters.supabase_feeding_repository import (
    SupabaseFeedingRepository,
)
from feeding_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(
        container.feeding_service.repository, SupabaseFeedingRepository
    )
    assert container.feeding_list_service.group_state.is_loading
    controller = container.feeding_list_service.controller_for(1)
    assert controller.action_width == settings.swipe_action_width
    asyncio.run(container.close_resources())
