"""GoalStore: the single owner of the in-memory goal list.

All changes are whole-list replacements. The `syncing` flag keeps two
ingestions from overlapping; a second one fails fast with SyncInProgress.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Sequence

import httpx

from app.config import Settings
from app.tracker import connector, features, seed, sheet_ingest, text_ingest
from app.tracker.errors import SyncInProgress
from app.tracker.models import (
    ChartPoint,
    Dashboard,
    Goal,
    GoalStats,
    MilestoneBucket,
    SyncResult,
    TimeProgress,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GoalStore:
    def __init__(self, goals: Sequence[Goal] | None = None):
        self._goals: list[Goal] = list(goals) if goals is not None else seed.initial_goals()
        self._syncing = False
        self.last_update: datetime = _utcnow()

    @property
    def goals(self) -> list[Goal]:
        return list(self._goals)

    @property
    def is_syncing(self) -> bool:
        return self._syncing

    def replace(self, goals: Sequence[Goal]) -> None:
        self._goals = list(goals)
        self.last_update = _utcnow()

    @contextmanager
    def syncing(self) -> Iterator[None]:
        if self._syncing:
            raise SyncInProgress("A sync is already in progress. Please wait for it to finish.")
        self._syncing = True
        try:
            yield
        finally:
            self._syncing = False

    # -- projections -------------------------------------------------------

    def stats(self) -> GoalStats:
        return features.compute_stats(self._goals)

    def chart_data(self) -> list[ChartPoint]:
        return features.compute_chart_data(self._goals)

    def filter(self, category: str) -> list[Goal]:
        return features.filter_by_category(self._goals, category)

    def milestones(self) -> list[MilestoneBucket]:
        return features.milestone_breakdown(self._goals)

    def time_progress(self, start: datetime, end: datetime, now: datetime) -> TimeProgress:
        return features.compute_time_progress(start, end, now)

    def dashboard(self, start: datetime, end: datetime, now: datetime) -> Dashboard:
        goals = self._goals
        return Dashboard(
            start_date=start,
            target_date=end,
            last_update=self.last_update,
            goals=list(goals),
            stats=features.compute_stats(goals),
            time_progress=features.compute_time_progress(start, end, now),
            chart=features.compute_chart_data(goals),
            milestones=features.milestone_breakdown(goals),
        )

    # -- ingestion ---------------------------------------------------------

    def apply_status_update(self, text: str) -> SyncResult:
        """Apply a pasted status update. Lines that match nothing are ignored."""
        with self.syncing():
            updated, applied = text_ingest.parse_status_update(text, self._goals)
            self.replace(updated)

        logger.info("Status update applied to %d goal(s)", applied)
        return SyncResult(
            source="text",
            goals_loaded=len(updated),
            goals_updated=applied,
            message=f"Updated {applied} goal(s) from the status text.",
            synced_at=self.last_update,
        )

    async def sync_from_sheet(self, settings: Settings, client: httpx.AsyncClient | None = None) -> SyncResult:
        """Replace the whole list from the configured sheet range."""
        with self.syncing():
            rows = await connector.fetch_sheet_rows(
                settings.google_sheet_id,
                settings.google_api_key,
                settings.sheets_range,
                base_url=settings.sheets_base_url,
                timeout=settings.sheets_timeout_seconds,
                client=client,
            )
            goals = sheet_ingest.goals_from_rows(rows, default_unit=settings.default_unit)
            self.replace(goals)

        logger.info("Sheet sync loaded %d goal(s)", len(goals))
        return SyncResult(
            source="sheet",
            goals_loaded=len(goals),
            goals_updated=len(goals),
            message=f"Successfully synced! Loaded {len(goals)} goals from your Google Sheet.",
            synced_at=self.last_update,
        )


_store = GoalStore()


def get_store() -> GoalStore:
    """FastAPI dependency; tests override it with their own store."""
    return _store
