"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.tracker.models import Category, Goal
from app.tracker.store import GoalStore, get_store


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def store():
    """Fresh store seeded with the default goal list."""
    return GoalStore()


@pytest.fixture()
def override_store(store):
    """Override the FastAPI dependency so every test gets its own store."""
    app.dependency_overrides[get_store] = lambda: store
    yield store
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_store):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_goal(
    goal_id: str = "g",
    current: float = 0,
    target: float = 100,
    category: Category | str = Category.physical,
    name: str | None = None,
    unit: str = "Reps",
) -> Goal:
    """Helper to build a Goal with sensible defaults."""
    return Goal(
        id=goal_id,
        name=name or goal_id.title(),
        current=current,
        target=target,
        unit=unit,
        category=category,
    )
