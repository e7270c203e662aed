"""Goal tracker contract — Pydantic v2 models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Category(str, Enum):
    physical = "physical"
    mental = "mental"
    other = "other"


class Goal(BaseModel):
    id: str
    name: str
    current: int | float
    target: int | float  # Non-zero expected; ratios guard against 0
    unit: str
    category: Category = Category.physical


class GoalStats(BaseModel):
    average_progress: float | None = None  # None when there are no goals
    completed_goals: int = 0
    total_goals: int = 0


class ChartPoint(BaseModel):
    name: str
    progress: float  # 0–100
    remaining: float  # 0–100


class TimeProgress(BaseModel):
    percentage: float  # 0–100
    days_left: int
    days_elapsed: int


class MilestoneBucket(BaseModel):
    label: str
    count: int = 0
    share_pct: float = 0.0  # count / total goals * 100


class SyncResult(BaseModel):
    source: str  # "text" | "sheet"
    goals_loaded: int
    goals_updated: int = 0
    message: str = ""
    synced_at: datetime


class StatusUpdateRequest(BaseModel):
    text: str


class Dashboard(BaseModel):
    start_date: datetime
    target_date: datetime
    last_update: datetime
    goals: list[Goal] = Field(default_factory=list)
    stats: GoalStats
    time_progress: TimeProgress
    chart: list[ChartPoint] = Field(default_factory=list)
    milestones: list[MilestoneBucket] = Field(default_factory=list)
