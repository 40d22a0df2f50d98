"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

import time
from datetime import UTC, date, datetime, timedelta
from typing import Protocol

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLI = timedelta(milliseconds=1)


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...
    def today(self) -> date: ...
    def timestamp(self) -> float: ...
    def epoch_millis(self) -> int: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def today(self) -> date:
        return datetime.now(UTC).date()

    def timestamp(self) -> float:
        return datetime.now(UTC).timestamp()

    def epoch_millis(self) -> int:
        return time.time_ns() // 1_000_000


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def today(self) -> date:
        return self._fixed.date()

    def timestamp(self) -> float:
        return self._fixed.timestamp()

    def epoch_millis(self) -> int:
        return to_epoch_millis(self._fixed)

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


def to_epoch_millis(value: datetime) -> int:
    """Whole milliseconds since the Unix epoch; naive values are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return (value - _EPOCH) // _ONE_MILLI


def utc_time_nanos(clock: Clock | None = None) -> int:
    """Current UTC epoch time in nanoseconds.

    With the system clock this has true nanosecond resolution; any other clock
    is read through :meth:`Clock.now` and therefore ends in ``000``.
    """
    if clock is None or isinstance(clock, SystemClock):
        return time.time_ns()
    now = clock.now()
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    delta = now - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1_000_000_000 + delta.microseconds * 1_000


__all__ = [
    "Clock",
    "FrozenClock",
    "SystemClock",
    "to_epoch_millis",
    "utc_time_nanos",
]
