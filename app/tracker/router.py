"""Tracker HTTP router — goals, projections & sync."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from app.auth import verify_api_key
from app.config import settings
from app.tracker.errors import TrackerError
from app.tracker.features import ALL_CATEGORIES
from app.tracker.models import (
    Category,
    ChartPoint,
    Dashboard,
    Goal,
    GoalStats,
    MilestoneBucket,
    StatusUpdateRequest,
    SyncResult,
    TimeProgress,
)
from app.tracker.store import GoalStore, get_store

router = APIRouter(prefix="/tracker", tags=["tracker"], dependencies=[Depends(verify_api_key)])

CATEGORY_FILTERS = {ALL_CATEGORIES, *(c.value for c in Category)}


def _now_for(start: datetime) -> datetime:
    """Current time in the same (naive or aware) flavour as the window."""
    return datetime.now(start.tzinfo)


def _to_http(exc: TrackerError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


# ---------------------------------------------------------------------------
# Read endpoints
# ---------------------------------------------------------------------------


@router.get("/goals", response_model=list[Goal])
async def list_goals(
    store: GoalStore = Depends(get_store),
    category: str = Query(default=ALL_CATEGORIES, description="all | physical | mental | other"),
) -> list[Goal]:
    if category not in CATEGORY_FILTERS:
        raise HTTPException(status_code=422, detail=f"Unknown category: {category}")
    return store.filter(category)


@router.get("/stats", response_model=GoalStats)
async def get_stats(store: GoalStore = Depends(get_store)) -> GoalStats:
    return store.stats()


@router.get("/chart", response_model=list[ChartPoint])
async def get_chart(store: GoalStore = Depends(get_store)) -> list[ChartPoint]:
    return store.chart_data()


@router.get("/milestones", response_model=list[MilestoneBucket])
async def get_milestones(store: GoalStore = Depends(get_store)) -> list[MilestoneBucket]:
    return store.milestones()


@router.get("/time-progress", response_model=TimeProgress)
async def get_time_progress(store: GoalStore = Depends(get_store)) -> TimeProgress:
    start, end = settings.challenge_start, settings.challenge_end
    return store.time_progress(start, end, _now_for(start))


@router.get("/dashboard", response_model=Dashboard)
async def get_dashboard(store: GoalStore = Depends(get_store)) -> Dashboard:
    start, end = settings.challenge_start, settings.challenge_end
    return store.dashboard(start, end, _now_for(start))


# ---------------------------------------------------------------------------
# Sync endpoints
# ---------------------------------------------------------------------------


@router.post("/sync/text", response_model=SyncResult)
async def sync_text(
    body: StatusUpdateRequest,
    store: GoalStore = Depends(get_store),
) -> SyncResult:
    try:
        return store.apply_status_update(body.text)
    except TrackerError as exc:
        raise _to_http(exc)


@router.post("/sync/sheet", response_model=SyncResult)
async def sync_sheet(store: GoalStore = Depends(get_store)) -> SyncResult:
    try:
        return await store.sync_from_sheet(settings)
    except TrackerError as exc:
        raise _to_http(exc)
