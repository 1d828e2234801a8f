"""Feeding API endpoints with simple token auth."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status

from feeding_tracker.api.models import (
    DayGroupOut,
    FeedingIn,
    FeedingListOut,
    FeedingOut,
    PreferencesBody,
    ProgressOut,
    SummaryOut,
)

if TYPE_CHECKING:
    from feeding_tracker.containers import AppContainer

router = APIRouter(tags=["feedings"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _require_grouped(container: AppContainer) -> None:
    state = container.feeding_list_service.ensure_loaded()
    if state.failed:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=state.error
        )


@router.get("/feedings", dependencies=[Depends(require_token)])
async def list_feedings(request: Request) -> FeedingListOut:
    """Return feedings grouped by day with per-day totals."""
    container = _container(request)
    _require_grouped(container)
    list_service = container.feeding_list_service
    day_totals = list_service.day_totals()
    unit = list_service.preferences.display_unit
    return FeedingListOut(
        display_unit=unit.abbreviation,
        skipped=list_service.group_state.data.skipped_count,
        days=[
            DayGroupOut.from_domain(group, total, unit) for group, total in day_totals
        ],
    )


@router.post(
    "/feedings",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_token)],
)
async def create_feeding(body: FeedingIn, request: Request) -> FeedingOut:
    """Record a new feeding."""
    container = _container(request)
    feeding = container.feeding_service.save_feeding(body.to_domain())
    return FeedingOut.from_domain(
        feeding, container.feeding_list_service.display_unit()
    )


@router.get("/feedings/{feeding_id}", dependencies=[Depends(require_token)])
async def get_feeding(feeding_id: int, request: Request) -> FeedingOut:
    """Return a single feeding."""
    container = _container(request)
    feeding = container.feeding_service.get_feeding(feeding_id)
    if feeding is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return FeedingOut.from_domain(
        feeding, container.feeding_list_service.display_unit()
    )


@router.put("/feedings/{feeding_id}", dependencies=[Depends(require_token)])
async def update_feeding(
    feeding_id: int, body: FeedingIn, request: Request
) -> FeedingOut:
    """Replace an existing feeding in place."""
    container = _container(request)
    if container.feeding_service.get_feeding(feeding_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    feeding = container.feeding_service.save_feeding(body.to_domain(feeding_id))
    return FeedingOut.from_domain(
        feeding, container.feeding_list_service.display_unit()
    )


@router.delete(
    "/feedings/{feeding_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_token)],
)
async def delete_feeding(feeding_id: int, request: Request) -> Response:
    """Delete a feeding."""
    container = _container(request)
    if not container.feeding_list_service.delete_feeding(feeding_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/days/{day}/summary", dependencies=[Depends(require_token)])
async def day_summary(
    day: date, request: Request, use_24_hour_clock: bool | None = None
) -> SummaryOut:
    """Return the shareable text summary for a day."""
    container = _container(request)
    _require_grouped(container)
    clock = (
        container.settings.use_24_hour_clock
        if use_24_hour_clock is None
        else use_24_hour_clock
    )
    text = container.feeding_list_service.day_summary(day, clock)
    return SummaryOut(day=day, text=text)


@router.get("/progress", dependencies=[Depends(require_token)])
async def progress(request: Request) -> ProgressOut:
    """Return today's cumulative progress towards the goal."""
    container = _container(request)
    _require_grouped(container)
    graph = container.feeding_list_service.progress()
    return ProgressOut.from_domain(graph)


@router.get("/preferences", dependencies=[Depends(require_token)])
async def get_preferences(request: Request) -> PreferencesBody:
    """Return the current display preferences."""
    preferences = _container(request).preferences_service.get()
    return PreferencesBody.from_domain(preferences)


@router.put("/preferences", dependencies=[Depends(require_token)])
async def update_preferences(
    body: PreferencesBody, request: Request
) -> PreferencesBody:
    """Update display preferences."""
    preferences = _container(request).preferences_service.update(body.to_domain())
    return PreferencesBody.from_domain(preferences)
