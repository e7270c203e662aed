"""Build a goal list from spreadsheet rows.

Columns: A=Name, B=Current, C=Target, D=Unit, E=Category. Cells may be
strings or numbers and trailing cells may be missing entirely.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Sequence

from app.config import settings
from app.tracker.errors import EmptyResult
from app.tracker.models import Category, Goal

logger = logging.getLogger(__name__)

DEFAULT_CURRENT = 0.0
DEFAULT_TARGET = 100.0
DEFAULT_CATEGORY = Category.physical

_WHITESPACE = re.compile(r"\s+")
# Plain decimal or scientific notation; no inf/nan words, no underscores.
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _cell(row: Sequence[Any], idx: int) -> str | None:
    """Trimmed cell text, or None when the cell is missing/blank."""
    if idx >= len(row) or row[idx] is None:
        return None
    text = str(row[idx]).strip()
    return text or None


def parse_number(raw: str | None, default: float) -> float:
    """Finite float with thousands separators stripped; `default` on anything else."""
    if raw is None:
        return default
    cleaned = raw.replace(",", "")
    if not _NUMBER.fullmatch(cleaned):
        return default
    value = float(cleaned)
    if not math.isfinite(value):
        return default
    return value


def parse_category(raw: str | None) -> Category:
    if raw is None:
        return DEFAULT_CATEGORY
    try:
        return Category(raw.lower())
    except ValueError:
        return DEFAULT_CATEGORY


def slugify(name: str) -> str:
    return _WHITESPACE.sub("-", name).lower()


def goal_from_row(index: int, row: Sequence[Any], default_unit: str | None = None) -> Goal | None:
    """One goal per row; None when the name cell is empty.

    A blank Unit cell takes `default_unit`, else the configured default.
    """
    name = _cell(row, 0)
    if name is None:
        return None
    return Goal(
        id=f"sheet-{index}-{slugify(name)}",
        name=name,
        current=parse_number(_cell(row, 1), DEFAULT_CURRENT),
        target=parse_number(_cell(row, 2), DEFAULT_TARGET),
        unit=_cell(row, 3) or default_unit or settings.default_unit,
        category=parse_category(_cell(row, 4)),
    )


def goals_from_rows(
    rows: Sequence[Sequence[Any]] | None,
    default_unit: str | None = None,
) -> list[Goal]:
    """Convert all rows, skipping nameless ones.

    Raises EmptyResult when there are no rows or none of them is usable.
    """
    if not rows:
        raise EmptyResult("No data found in the specified range. Ensure the sheet has data and the tab name is correct.")

    goals: list[Goal] = []
    for index, row in enumerate(rows):
        goal = goal_from_row(index, row or [], default_unit)
        if goal is None:
            logger.debug("Skipping row %d: no name", index)
            continue
        goals.append(goal)

    if not goals:
        raise EmptyResult("No valid goal data found in the sheet.")
    return goals
