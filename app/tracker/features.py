"""Pure stateless goal functions. Math only, no clock, no I/O."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Sequence

from app.tracker.models import ChartPoint, Goal, GoalStats, MilestoneBucket, TimeProgress

ALL_CATEGORIES = "all"

_DAY = timedelta(days=1)


def goal_ratio(goal: Goal) -> float:
    """current / target.

    A zero target is met by any positive current (ratio 1.0, so it charts
    as 100% and lands in Completed); 0 of 0 or a negative current is 0.
    """
    if goal.target == 0:
        return 1.0 if goal.current > 0 else 0.0
    return goal.current / goal.target


def goal_progress_pct(goal: Goal) -> float:
    """Unclamped progress percentage, as shown on a goal card."""
    return goal_ratio(goal) * 100.0


def compute_stats(goals: Sequence[Goal]) -> GoalStats:
    """Average progress (percent), completed and total counts.

    Overshoot is not clamped, so the average may exceed 100.
    An empty list has no average: `average_progress` is None.
    """
    if not goals:
        return GoalStats(average_progress=None, completed_goals=0, total_goals=0)
    total = sum(goal_ratio(g) for g in goals) / len(goals)
    return GoalStats(
        average_progress=total * 100.0,
        completed_goals=sum(1 for g in goals if g.current >= g.target),
        total_goals=len(goals),
    )


def compute_chart_data(goals: Sequence[Goal]) -> list[ChartPoint]:
    """Bar-chart projection: progress clamped to [0, 100], remaining to fill."""
    points: list[ChartPoint] = []
    for g in goals:
        pct = goal_progress_pct(g)
        points.append(
            ChartPoint(
                name=g.name,
                progress=max(0.0, min(pct, 100.0)),
                remaining=min(max(100.0 - pct, 0.0), 100.0),
            )
        )
    return points


def filter_by_category(goals: Sequence[Goal], category: str) -> list[Goal]:
    """Goals of one category in list order; "all" returns every goal."""
    if category == ALL_CATEGORIES:
        return list(goals)
    return [g for g in goals if g.category == category]


def compute_time_progress(start: datetime, end: datetime, now: datetime) -> TimeProgress:
    """Elapsed share of the [start, end] window, clamped to 0–100.

    days_left rounds up, days_elapsed rounds down; both go negative
    outside the window.
    """
    total = (end - start).total_seconds()
    elapsed = (now - start).total_seconds()
    if total <= 0:
        percentage = 100.0 if now >= end else 0.0
    else:
        percentage = min(max(elapsed / total * 100.0, 0.0), 100.0)

    return TimeProgress(
        percentage=percentage,
        days_left=math.ceil((end - now) / _DAY),
        days_elapsed=math.floor((now - start) / _DAY),
    )


# ---------------------------------------------------------------------------
# Milestone breakdown
# ---------------------------------------------------------------------------

MILESTONES: tuple[str, ...] = (
    "Completed (100%)",
    "Advanced (75-99%)",
    "Steady (50-74%)",
    "Starting (1-49%)",
    "Not Started (0%)",
)


def milestone_label(goal: Goal) -> str | None:
    """Bucket label for one goal, or None when it fits no bucket (negative)."""
    if goal.current == 0:
        return "Not Started (0%)"
    ratio = goal_ratio(goal)
    if ratio >= 1.0:
        return "Completed (100%)"
    if ratio >= 0.75:
        return "Advanced (75-99%)"
    if ratio >= 0.5:
        return "Steady (50-74%)"
    if ratio > 0.0:
        return "Starting (1-49%)"
    return None


def milestone_breakdown(goals: Sequence[Goal]) -> list[MilestoneBucket]:
    counts = {label: 0 for label in MILESTONES}
    for g in goals:
        label = milestone_label(g)
        if label is not None:
            counts[label] += 1

    total = len(goals)
    return [
        MilestoneBucket(
            label=label,
            count=counts[label],
            share_pct=(counts[label] / total * 100.0) if total else 0.0,
        )
        for label in MILESTONES
    ]
