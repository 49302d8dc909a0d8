"""Testing fakes – a pinned clock for login-log time windows."""
from __future__ import annotations

from datetime import UTC, datetime

from es_commons.kernel.time import FrozenClock

FAKE_NOW = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def FakeClock(at: datetime = FAKE_NOW) -> FrozenClock:
    """A ``FrozenClock`` for ``recently_days`` windows; pinned to :data:`FAKE_NOW` unless *at* is given."""
    return FrozenClock(at)


__all__ = ["FAKE_NOW", "FakeClock"]
