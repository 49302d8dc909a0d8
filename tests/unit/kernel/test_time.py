"""Unit tests for kernel time utilities."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from es_commons.kernel.time import FrozenClock, SystemClock, to_epoch_millis
from es_commons.testing.fakes import FAKE_NOW, FakeClock


class TestSystemClock:
    def test_now_is_utc_aware(self) -> None:
        now = SystemClock().now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_timestamp_millis_close_to_now(self) -> None:
        expected = datetime.now(UTC).timestamp() * 1000
        assert abs(SystemClock().timestamp_millis() - expected) < 1000


class TestFrozenClock:
    def test_now_is_fixed(self) -> None:
        fixed = datetime(2026, 3, 1, tzinfo=UTC)
        clock = FrozenClock(fixed)
        assert clock.now() == fixed
        assert clock.now() == fixed

    def test_advance(self) -> None:
        clock = FrozenClock(datetime(2026, 3, 1, tzinfo=UTC))
        clock.advance(days=1)
        assert clock.now() == datetime(2026, 3, 2, tzinfo=UTC)

    def test_fake_clock(self) -> None:
        assert FakeClock().now() == FAKE_NOW == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_fake_clock_at(self) -> None:
        at = datetime(2026, 6, 30, tzinfo=UTC)
        assert FakeClock(at).now() == at


class TestEpochMillis:
    def test_epoch(self) -> None:
        assert to_epoch_millis(datetime(1970, 1, 1, tzinfo=UTC)) == 0

    def test_naive_is_utc(self) -> None:
        assert to_epoch_millis(datetime(1970, 1, 1, 0, 0, 1)) == 1000

    def test_offset_respected(self) -> None:
        plus_eight = timezone(timedelta(hours=8))
        assert to_epoch_millis(datetime(1970, 1, 1, 8, 0, tzinfo=plus_eight)) == 0
