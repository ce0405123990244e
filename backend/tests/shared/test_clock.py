"""Tests for shared/clock.py."""

from datetime import datetime, timezone, timedelta

from shared.clock import ensure_utc, utcnow


class TestClock:
    def test_utcnow_is_aware(self):
        assert utcnow().tzinfo is not None

    def test_naive_treated_as_utc(self):
        value = ensure_utc(datetime(2025, 1, 1, 12, 0))
        assert value == datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_aware_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        value = ensure_utc(datetime(2025, 1, 1, 12, 0, tzinfo=plus_two))
        assert value == datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)
        assert value.utcoffset() == timedelta(0)
