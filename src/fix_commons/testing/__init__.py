"""Testing support – fakes and generators for code built on fix_commons."""

from fix_commons.testing.fakes import FakeClock, FrozenClock, SequenceRandom
from fix_commons.testing.generators import (
    StepClock,
    modify_pattern_strategy,
    naive_datetime_strategy,
    shift_modifier_strategy,
)

__all__ = [
    "FakeClock",
    "FrozenClock",
    "SequenceRandom",
    "StepClock",
    "modify_pattern_strategy",
    "naive_datetime_strategy",
    "shift_modifier_strategy",
]
