"""Fields – date/time adjuster port and the modify-pattern implementation."""
from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Protocol

from fix_commons.kernel.errors import ValidationError
from fix_commons.kernel.time import Clock, SystemClock, modify_datetime, resolve_zone

logger = logging.getLogger(__name__)


class DateTimeAdjuster(Protocol):
    """Port: turn a textual representation into a transact time."""

    def adjust(self, representation: str) -> datetime: ...


class ModifyPatternAdjuster:
    """Current wall-clock time in *zone*, modified by a modify pattern.

    The result is naive (a local date/time). An empty representation returns
    the current time unchanged; see :mod:`fix_commons.kernel.time.modify` for
    the pattern grammar.

    Example::

        adjuster = ModifyPatternAdjuster(zone="Europe/London")
        adjuster.adjust("D+1:h=9:m=0:s=0:ms=0")   # tomorrow 09:00 London time
    """

    def __init__(self, clock: Clock | None = None, zone: str = "UTC") -> None:
        self._clock = clock or SystemClock()
        self._zone_id = zone
        self._zone = resolve_zone(zone)

    @property
    def zone(self) -> str:
        return self._zone_id

    def now(self) -> datetime:
        """Current time on the wall clock of :attr:`zone`, naive."""
        current = self._clock.now()
        if current.tzinfo is None:
            current = current.replace(tzinfo=UTC)
        return current.astimezone(self._zone).replace(tzinfo=None)

    def adjust(self, representation: str = "") -> datetime:
        try:
            return modify_datetime(self.now(), representation)
        except ValidationError as exc:
            logger.warning("transact_time.adjust_failed representation=%r code=%s", representation, exc.code)
            raise


__all__ = ["DateTimeAdjuster", "ModifyPatternAdjuster"]
