"""Apply a pasted free-text status update to the goal list.

Only `current` of already-known goals changes. Lines that match no anchor,
or whose pattern fails, are skipped without error.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from app.tracker.anchors import AnchorRule, match_rule
from app.tracker.errors import ParseFailure
from app.tracker.models import Goal

logger = logging.getLogger(__name__)


def parse_number(raw: str, numeric_kind: str) -> int | float:
    """'2,028' -> 2028, '1.5' -> 1.5 (or 1 for an int goal)."""
    value = float(raw.replace(",", ""))
    if numeric_kind == "int":
        return int(value)
    return value


def extract_current(rule: AnchorRule, line: str) -> int | float | None:
    """New current value for the rule's goal, or None if the pattern misses."""
    m = rule.pattern.search(line)
    if m is None:
        return None
    return parse_number(m.group(1), rule.numeric_kind)


def apply_status_lines(lines: Iterable[str], goals: Sequence[Goal]) -> tuple[list[Goal], int]:
    """Return (updated copy of goals, number of lines applied).

    Works on a shallow copy; the input list is never touched. Any unexpected
    error is raised as ParseFailure so the caller can keep its old list.
    """
    updated = list(goals)
    index_by_id = {g.id: i for i, g in enumerate(updated)}
    applied = 0

    try:
        for line in lines:
            rule = match_rule(line)
            if rule is None:
                continue
            value = extract_current(rule, line)
            if value is None:
                logger.debug("Anchor %r matched but pattern did not: %r", rule.anchor, line)
                continue
            idx = index_by_id.get(rule.goal_id)
            if idx is None:
                logger.debug("No goal with id %r in current list, skipping", rule.goal_id)
                continue
            updated[idx] = updated[idx].model_copy(update={"current": value})
            applied += 1
    except Exception as exc:
        logger.warning("Status update parse failed: %s", exc)
        raise ParseFailure(f"Could not read the status update: {exc}") from exc

    return updated, applied


def parse_status_update(text: str, goals: Sequence[Goal]) -> tuple[list[Goal], int]:
    """Split a pasted text blob into lines and apply them."""
    return apply_status_lines(text.splitlines(), goals)
