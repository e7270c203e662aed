"""
Anchor table for free-text status updates.

A status update is pasted line by line, e.g.

  Running (1 Mile): 3/51
  Jump Ropes: 2,028/51,000
  Shir-sasan: 1.5 मिनिटे

Each line is matched against the anchors below in order; the first anchor
found in the line picks the goal and the pattern that pulls the numbers out.
Group 1 is always the new current value, group 2 (optional) the target.
The table is static on purpose: adding a goal means adding a row here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# 2,028 / 51000 / 1.5
NUMBER = r"(\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?)"
# "/" or the Marathi word for minutes written in place of it
SEPARATOR = r"\s*(?:/|मिनिटे)\s*"


def _progress_pattern(label: str) -> re.Pattern[str]:
    """`<label> ... : <current>[/<target>]`"""
    return re.compile(rf"{label}(?:[^:]*:)?\s*{NUMBER}(?:{SEPARATOR}{NUMBER}?)?", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class AnchorRule:
    anchor: str  # Substring looked up (case-insensitive) in each line
    goal_id: str
    pattern: re.Pattern[str]
    numeric_kind: str = "int"  # "int" | "float"


ANCHOR_RULES: tuple[AnchorRule, ...] = (
    AnchorRule("Running", "running", _progress_pattern(r"Running(?:\s*\(1 Mile\))?")),
    AnchorRule("Gym", "gym", _progress_pattern(r"Gym(?:\s+Sessions?)?")),
    AnchorRule("Jump Rope", "jump-ropes", _progress_pattern(r"Jump Ropes?")),
    AnchorRule("Sit-up", "sit-ups", _progress_pattern(r"Sit-ups?")),
    AnchorRule("Shlok", "manache-shlok", _progress_pattern(r"(?:Manache\s+)?Shloks?")),
    AnchorRule("Shir-sasan", "shir-sasan", _progress_pattern(r"Shir-sasan"), numeric_kind="float"),
    AnchorRule("Surya Namaskar", "surya-namaskar", _progress_pattern(r"Surya Namaskars?")),
    AnchorRule("Push-up", "push-ups", _progress_pattern(r"Push-ups?")),
)


def match_rule(line: str) -> AnchorRule | None:
    """First rule whose anchor occurs in the line, or None."""
    lowered = line.lower()
    for rule in ANCHOR_RULES:
        if rule.anchor.lower() in lowered:
            return rule
    return None


def list_rules() -> list[AnchorRule]:
    return list(ANCHOR_RULES)
