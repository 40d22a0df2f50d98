"""Testing fakes – FakeClock factory."""
from __future__ import annotations

from datetime import UTC, datetime

from fix_commons.kernel.time import FrozenClock, to_epoch_millis

FAKE_NOW = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
#: ``FAKE_NOW`` as epoch millis, the base of every order id a fresh fake clock yields.
FAKE_NOW_MILLIS = to_epoch_millis(FAKE_NOW)


def FakeClock(at: datetime | None = None) -> FrozenClock:
    """Return a ``FrozenClock`` pinned to *at* (default :data:`FAKE_NOW`)."""
    return FrozenClock(at if at is not None else FAKE_NOW)


__all__ = ["FAKE_NOW", "FAKE_NOW_MILLIS", "FakeClock"]
