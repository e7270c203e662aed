"""Seed goal list, loaded once at startup. No DB.

Each Goal is the starting point of one "50@50" challenge metric. A successful
sheet sync replaces the whole list; text updates only move `current`.
"""

from __future__ import annotations

from app.tracker.models import Category, Goal

SEED_GOALS: tuple[Goal, ...] = (
    Goal(id="running", name="Running (1 Mile)", current=3, target=51, unit="Miles", category=Category.physical),
    Goal(id="gym", name="Gym Sessions", current=2, target=51, unit="Sessions", category=Category.physical),
    Goal(id="jump-ropes", name="Jump Ropes", current=2028, target=51000, unit="Ropes", category=Category.physical),
    Goal(id="sit-ups", name="Sit-ups", current=65, target=5000, unit="Reps", category=Category.physical),
    Goal(id="manache-shlok", name="Manache Shlok", current=22, target=51, unit="Shloks", category=Category.mental),
    Goal(id="shir-sasan", name="Shir-sasan", current=1.5, target=100, unit="Minutes", category=Category.physical),
    Goal(id="surya-namaskar", name="Surya Namaskar", current=12, target=500, unit="Reps", category=Category.physical),
    Goal(id="push-ups", name="Push-ups", current=11, target=500, unit="Reps", category=Category.physical),
)


def initial_goals() -> list[Goal]:
    """Fresh copies of the seed list, in display order."""
    return [g.model_copy() for g in SEED_GOALS]


def get_seed_goal(goal_id: str) -> Goal | None:
    for goal in SEED_GOALS:
        if goal.id == goal_id:
            return goal
    return None
