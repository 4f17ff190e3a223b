"""Tests for datetime helpers and the deadline policy."""

from datetime import datetime, timedelta, timezone

from core.utils.datetime import ensure_utc, is_expired, now, to_iso


DEADLINE = datetime(2026, 1, 13, 12, 0, tzinfo=timezone.utc)


class TestIsExpired:
    """Expired means the reference time is strictly after the deadline."""

    def test_before_deadline(self):
        assert is_expired(DEADLINE, at=DEADLINE - timedelta(seconds=1)) is False

    def test_exactly_at_deadline_is_not_expired(self):
        assert is_expired(DEADLINE, at=DEADLINE) is False

    def test_after_deadline(self):
        assert is_expired(DEADLINE, at=DEADLINE + timedelta(microseconds=1)) is True

    def test_monotonic(self):
        references = [DEADLINE + timedelta(minutes=offset) for offset in range(-5, 6)]
        results = [is_expired(DEADLINE, at=reference) for reference in references]
        # Once expired, stays expired
        first_expired = results.index(True)
        assert all(results[first_expired:])
        assert not any(results[:first_expired])

    def test_defaults_to_now(self):
        assert is_expired(now() - timedelta(hours=1)) is True
        assert is_expired(now() + timedelta(hours=1)) is False

    def test_naive_deadline_read_as_utc(self):
        naive = datetime(2026, 1, 13, 12, 0)
        assert is_expired(naive, at=DEADLINE) is False
        assert is_expired(naive, at=DEADLINE + timedelta(seconds=1)) is True

    def test_other_timezone_compared_in_utc(self):
        plus_two = timezone(timedelta(hours=2))
        # 13:00 at UTC+2 is 11:00 UTC, before the deadline
        assert is_expired(DEADLINE, at=datetime(2026, 1, 13, 13, 0, tzinfo=plus_two)) is False
        # 15:00 at UTC+2 is 13:00 UTC, after the deadline
        assert is_expired(DEADLINE, at=datetime(2026, 1, 13, 15, 0, tzinfo=plus_two)) is True


class TestConversions:
    """Test UTC normalisation and formatting."""

    def test_ensure_utc_naive(self):
        assert ensure_utc(datetime(2026, 1, 1)).tzinfo == timezone.utc

    def test_ensure_utc_converts(self):
        plus_two = timezone(timedelta(hours=2))
        converted = ensure_utc(datetime(2026, 1, 1, 2, 0, tzinfo=plus_two))
        assert converted == datetime(2026, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert converted.hour == 0

    def test_now_is_aware(self):
        assert now().tzinfo is not None

    def test_to_iso_milliseconds(self):
        dt = datetime(2026, 1, 13, 12, 0, 5, 123456, tzinfo=timezone.utc)
        assert to_iso(dt) == "2026-01-13T12:00:05.123Z"

    def test_to_iso_naive(self):
        assert to_iso(datetime(2026, 1, 13)) == "2026-01-13T00:00:00.000Z"
