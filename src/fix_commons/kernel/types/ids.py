"""Order identifiers: epoch millis plus a per-instance counter."""

from __future__ import annotations

import threading

from fix_commons.kernel.errors import InvalidArgumentError
from fix_commons.kernel.time import Clock, SystemClock


class OrderIdSequence:
    """Produces ``str(epoch_millis + counter)`` and advances the counter.

    The counter belongs to the instance, starts at *start* (1 by default) and
    is read together with the clock under a lock, so with a non-decreasing
    clock the values of one instance strictly increase even across threads.

    Uniqueness is local and best-effort: two instances, a restart or a clock
    moving backwards can all produce a value seen before.

    Examples::

        seq = OrderIdSequence()
        seq.next()   # e.g. '1718452800001'
        seq.next()   # e.g. '1718452800002' (same millisecond)
    """

    def __init__(self, clock: Clock | None = None, start: int = 1) -> None:
        if isinstance(start, bool) or not isinstance(start, int) or start < 0:
            raise InvalidArgumentError(
                f"start must be a non-negative int, got {start!r}", argument="start", value=start
            )
        self._clock = clock or SystemClock()
        self._next = start
        self._lock = threading.Lock()

    @property
    def counter(self) -> int:
        """The counter value the next call will use."""
        return self._next

    def next(self) -> str:
        """Return the next order identifier."""
        with self._lock:
            value = self._clock.epoch_millis() + self._next
            self._next += 1
        return str(value)

    __call__ = next


__all__ = ["OrderIdSequence"]
