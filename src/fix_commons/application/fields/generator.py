"""Fields – FieldGenerator: order ids, transact times, hex tokens, bounded ints."""
from __future__ import annotations

import logging
import random
from datetime import datetime

from fix_commons.application.fields.adjuster import DateTimeAdjuster, ModifyPatternAdjuster
from fix_commons.config.settings import EnvSettingsLoader, GeneratorSettings
from fix_commons.kernel.random import RandomSource, bounded_int, hex_token
from fix_commons.kernel.time import Clock, SystemClock
from fix_commons.kernel.types import OrderIdSequence
from fix_commons.observability.logging import JsonLoggerFactory

logger = logging.getLogger(__name__)


class FieldGenerator:
    """Produces the generated fields of an outgoing order message.

    Parameters
    ----------
    clock:
        Time source for order ids and the default adjuster
        (:class:`SystemClock` by default).
    adjuster:
        Turns a representation into a transact time. Defaults to a
        :class:`ModifyPatternAdjuster` on *clock* in UTC.
    rng:
        Random source for hex tokens and bounded integers. Defaults to a
        private :class:`random.Random`.
    order_id_start:
        First counter value of this instance's order-id sequence.

    Every instance owns its own order-id counter; the other three operations
    keep no state beyond the random source.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        adjuster: DateTimeAdjuster | None = None,
        rng: RandomSource | None = None,
        order_id_start: int = 1,
    ) -> None:
        self._clock = clock or SystemClock()
        self._adjuster = adjuster or ModifyPatternAdjuster(self._clock)
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._order_ids = OrderIdSequence(self._clock, start=order_id_start)

    @classmethod
    def from_settings(
        cls,
        settings: GeneratorSettings | None = None,
        *,
        clock: Clock | None = None,
        adjuster: DateTimeAdjuster | None = None,
        configure_logging: bool = False,
    ) -> "FieldGenerator":
        """Build a generator from :class:`GeneratorSettings`.

        Without *settings* they are loaded from ``FIX_COMMONS_*`` environment
        variables. With *configure_logging* the root logger is set up through
        :class:`JsonLoggerFactory` at ``settings.log_level``.
        """
        if settings is None:
            settings = EnvSettingsLoader().load(GeneratorSettings)
        if configure_logging:
            JsonLoggerFactory.configure(settings.log_level)
        clock = clock or SystemClock()
        return cls(
            clock=clock,
            adjuster=adjuster or ModifyPatternAdjuster(clock, zone=settings.transact_time_zone),
            rng=random.Random(settings.random_seed),
            order_id_start=settings.order_id_start,
        )

    def generate_order_id(self) -> str:
        """Return ``str(epoch_millis + counter)`` and advance the counter."""
        order_id = self._order_ids.next()
        logger.debug("order_id.generated order_id=%s", order_id)
        return order_id

    def generate_transact_time(self, representation: str = "") -> datetime:
        """Return whatever the adjuster produces for *representation*."""
        transact_time = self._adjuster.adjust(representation)
        logger.debug("transact_time.generated representation=%r value=%s", representation, transact_time)
        return transact_time

    def generate_hex_token(self) -> str:
        """Lowercase hex of the bit pattern of a random double in ``[0, 1)``."""
        return hex_token(self._rng)

    def generate_bounded_int(self, bound: int) -> int:
        """Uniform random integer in ``[0, bound)``; ``bound <= 0`` is rejected."""
        return bounded_int(bound, self._rng)


__all__ = ["FieldGenerator"]
