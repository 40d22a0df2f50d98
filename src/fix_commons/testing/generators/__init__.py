"""Testing generators – deterministic clocks and property-test strategies."""
from fix_commons.testing.generators.step_clock import StepClock
from fix_commons.testing.generators.strategies import (
    modify_pattern_strategy,
    naive_datetime_strategy,
    shift_modifier_strategy,
)

__all__ = [
    "StepClock",
    "modify_pattern_strategy",
    "naive_datetime_strategy",
    "shift_modifier_strategy",
]
