from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from weeklytv.api.models import (
    GridResponse,
    NowPlayingRequest,
    NowPlayingResponse,
    ScheduleRequest,
    ScheduleResponse,
)
from weeklytv.catalog.plex import CatalogReadError, read_catalog
from weeklytv.config import get_settings, is_debug_enabled, to_broadcast_time
from weeklytv.scheduling import (
    InvalidDurationError,
    WeekSchedule,
    build_week_schedule,
    now_playing,
)
from weeklytv.scheduling.grid import build_day_columns, now_marker_minutes

router = APIRouter()
logger = logging.getLogger(__name__)


def _build(request: ScheduleRequest, *, clip: bool) -> WeekSchedule:
    now = to_broadcast_time(request.now)
    try:
        return build_week_schedule(
            request.catalog,
            now,
            seed=request.seed,
            clip=clip,
            debug=is_debug_enabled(request.debug),
        )
    except InvalidDurationError as exc:
        logger.warning("Rejected catalog: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/health")
async def health() -> dict[str, str]:
    logger.info("Health check requested")
    return {"status": "ok"}


@router.post("/schedule", response_model=ScheduleResponse)
async def schedule(request: ScheduleRequest) -> ScheduleResponse:
    logger.info(
        "Processing schedule request with %s catalog items (clip=%s)",
        len(request.catalog),
        request.clip,
    )
    week = _build(request, clip=request.clip)
    return ScheduleResponse(seed=week.seed, week_start=week.week_start, events=list(week.events))


@router.post("/now-playing", response_model=NowPlayingResponse)
async def now_playing_lookup(request: NowPlayingRequest) -> NowPlayingResponse:
    logger.info(
        "Looking up now playing at %02d:%02d among %s events",
        request.hour,
        request.minute,
        len(request.events),
    )
    return NowPlayingResponse(event=now_playing(request.events, request.hour, request.minute))


@router.post("/grid", response_model=GridResponse)
async def grid(request: ScheduleRequest) -> GridResponse:
    now = to_broadcast_time(request.now)
    logger.info("Processing grid request with %s catalog items", len(request.catalog))
    week = _build(request.model_copy(update={"now": now}), clip=True)
    return GridResponse(
        seed=week.seed,
        days=build_day_columns(week.events, now.date()),
        now_marker_minutes=now_marker_minutes(now),
        now_playing=now_playing(week.events, now.hour, now.minute),
    )


@router.get("/library/schedule", response_model=ScheduleResponse)
def library_schedule(debug: bool = False) -> ScheduleResponse:
    settings = get_settings()
    if not settings.library_db:
        raise HTTPException(status_code=503, detail="WEEKLYTV_LIBRARY_DB is not configured")

    debug = is_debug_enabled(debug)
    try:
        catalog = read_catalog(settings.library_db, debug=debug)
    except CatalogReadError as exc:
        logger.error("Library read failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    request = ScheduleRequest(catalog=catalog, debug=debug)
    week = _build(request, clip=settings.clip_window)
    logger.info("Library schedule built with %s events", len(week.events))
    return ScheduleResponse(seed=week.seed, week_start=week.week_start, events=list(week.events))
