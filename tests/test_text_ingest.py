"""Tests for free-text status updates."""

from unittest.mock import patch

import pytest

from app.tracker.anchors import ANCHOR_RULES, list_rules, match_rule
from app.tracker.errors import ParseFailure
from app.tracker.seed import initial_goals
from app.tracker.text_ingest import apply_status_lines, parse_number, parse_status_update


def _by_id(goals):
    return {g.id: g for g in goals}


class TestAnchorTable:
    def test_every_seed_goal_has_a_rule(self):
        ids = {r.goal_id for r in list_rules()}
        assert ids == {g.id for g in initial_goals()}

    def test_first_matching_anchor_wins(self):
        rule = match_rule("Running (1 Mile): 3/51")
        assert rule is not None
        assert rule.goal_id == "running"

    def test_anchor_case_insensitive(self):
        rule = match_rule("push-ups: 20/500")
        assert rule is not None
        assert rule.goal_id == "push-ups"

    def test_no_anchor(self):
        assert match_rule("Weather was nice today") is None

    def test_only_shir_sasan_is_float(self):
        floats = [r.goal_id for r in ANCHOR_RULES if r.numeric_kind == "float"]
        assert floats == ["shir-sasan"]


class TestParseNumber:
    def test_thousands(self):
        assert parse_number("2,028", "int") == 2028

    def test_float(self):
        assert parse_number("1.5", "float") == 1.5

    def test_int_kind_truncates(self):
        assert parse_number("7.0", "int") == 7


class TestParseStatusUpdate:
    def test_running_line_updates_only_running(self):
        before = initial_goals()
        after, applied = parse_status_update("Running (1 Mile): 3/51", before)
        assert applied == 1
        assert _by_id(after)["running"].current == 3
        for b, a in zip(before, after):
            if b.id != "running":
                assert a == b

    def test_other_fields_untouched(self):
        after, _ = parse_status_update("Running (1 Mile): 7/51", initial_goals())
        running = _by_id(after)["running"]
        assert running.current == 7
        assert running.target == 51
        assert running.unit == "Miles"
        assert running.name == "Running (1 Mile)"

    def test_multi_line_blob(self):
        text = "\n".join(
            [
                "50@50 update - week 3",
                "Running (1 Mile): 5/51",
                "Gym Sessions: 4/51",
                "Jump Ropes: 3,100/51,000",
                "Sit-ups: 120/5000",
                "Manache Shlok: 25/51",
                "Shir-sasan: 2.5 मिनिटे",
                "Surya Namaskar: 24/500",
                "Push-ups: 40/500",
            ]
        )
        after, applied = parse_status_update(text, initial_goals())
        goals = _by_id(after)
        assert applied == 8
        assert goals["running"].current == 5
        assert goals["gym"].current == 4
        assert goals["jump-ropes"].current == 3100
        assert goals["sit-ups"].current == 120
        assert goals["manache-shlok"].current == 25
        assert goals["shir-sasan"].current == 2.5
        assert goals["surya-namaskar"].current == 24
        assert goals["push-ups"].current == 40

    def test_int_goal_stores_int(self):
        after, _ = parse_status_update("Gym: 9/51", initial_goals())
        assert isinstance(_by_id(after)["gym"].current, int)

    def test_float_goal_with_slash(self):
        after, _ = parse_status_update("Shir-sasan: 3.25/100", initial_goals())
        assert _by_id(after)["shir-sasan"].current == 3.25

    def test_no_anchor_matches_is_unchanged_success(self):
        before = initial_goals()
        after, applied = parse_status_update("Slept well.\nDrank water.", before)
        assert applied == 0
        assert after == before

    def test_anchor_without_numbers_ignored(self):
        before = initial_goals()
        after, applied = parse_status_update("Gym closed today", before)
        assert applied == 0
        assert after == before

    def test_unknown_goal_id_ignored(self):
        goals = [g for g in initial_goals() if g.id != "gym"]
        after, applied = parse_status_update("Gym Sessions: 4/51", goals)
        assert applied == 0
        assert after == goals

    def test_input_list_not_mutated(self):
        before = initial_goals()
        snapshot = [g.model_copy() for g in before]
        parse_status_update("Running (1 Mile): 40/51", before)
        assert before == snapshot

    def test_empty_text(self):
        before = initial_goals()
        after, applied = parse_status_update("", before)
        assert applied == 0
        assert after == before

    def test_accepts_line_sequence(self):
        after, applied = apply_status_lines(["Push-ups: 12/500", "noise"], initial_goals())
        assert applied == 1
        assert _by_id(after)["push-ups"].current == 12

    def test_unexpected_error_becomes_parse_failure(self):
        with patch("app.tracker.text_ingest.extract_current", side_effect=RuntimeError("boom")):
            with pytest.raises(ParseFailure):
                parse_status_update("Running (1 Mile): 3/51", initial_goals())
