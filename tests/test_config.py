"""Tests for settings loading."""

from datetime import datetime, timedelta, timezone

from app.config import Settings
from app.tracker.features import compute_time_progress

IST = timezone(timedelta(hours=5, minutes=30))


class TestChallengeWindow:
    def test_defaults_are_naive(self):
        s = Settings()
        assert s.challenge_start.tzinfo is None
        assert s.challenge_end.tzinfo is None

    def test_naive_end_takes_start_zone(self):
        s = Settings(challenge_start=datetime(2026, 2, 23, tzinfo=IST), challenge_end=datetime(2026, 6, 25))
        assert s.challenge_end.tzinfo == IST
        assert s.challenge_end.replace(tzinfo=None) == datetime(2026, 6, 25)

    def test_naive_start_takes_end_zone(self):
        s = Settings(challenge_start="2026-02-23T00:00:00", challenge_end="2026-06-25T00:00:00+05:30")
        assert s.challenge_start.utcoffset() == timedelta(hours=5, minutes=30)

    def test_mixed_window_usable(self):
        s = Settings(challenge_start=datetime(2026, 2, 23), challenge_end=datetime(2026, 6, 25, tzinfo=timezone.utc))
        now = datetime.now(s.challenge_start.tzinfo)
        tp = compute_time_progress(s.challenge_start, s.challenge_end, now)
        assert 0.0 <= tp.percentage <= 100.0
