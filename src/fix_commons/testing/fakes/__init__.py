"""Testing fakes – in-memory doubles for kernel ports."""
from fix_commons.kernel.time import FrozenClock
from fix_commons.testing.fakes.clock import FAKE_NOW, FAKE_NOW_MILLIS, FakeClock
from fix_commons.testing.fakes.random import SequenceRandom

__all__ = ["FAKE_NOW", "FAKE_NOW_MILLIS", "FakeClock", "FrozenClock", "SequenceRandom"]
