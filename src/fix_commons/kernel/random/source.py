"""Kernel random – RandomSource port and the draws built on it."""
from __future__ import annotations

import random
import struct
from typing import Protocol

from fix_commons.kernel.errors import InvalidArgumentError

_DOUBLE = struct.Struct(">d")
_UINT64 = struct.Struct(">Q")


class RandomSource(Protocol):
    """Port: the subset of :class:`random.Random` the generators need."""

    def random(self) -> float: ...
    def randrange(self, stop: int) -> int: ...


def shared_random() -> RandomSource:
    """The process-wide source behind the :mod:`random` module functions."""
    return random  # type: ignore[return-value]


def double_bits(value: float) -> int:
    """IEEE-754 bit pattern of *value* as an unsigned 64-bit integer."""
    return _UINT64.unpack(_DOUBLE.pack(value))[0]


def hex_token(rng: RandomSource | None = None) -> str:
    """Lowercase hex of the bit pattern of a random double in ``[0, 1)``.

    No fixed width: leading zero nibbles are dropped, so ``0.0`` gives ``"0"``.
    Not suitable as a secret; use :mod:`secrets` for that.
    """
    source = rng if rng is not None else shared_random()
    return format(double_bits(source.random()), "x")


def bounded_int(bound: int, rng: RandomSource | None = None) -> int:
    """Uniform random integer in ``[0, bound)``.

    Raises :class:`InvalidArgumentError` when *bound* is not a positive ``int``.
    """
    if isinstance(bound, bool) or not isinstance(bound, int):
        raise InvalidArgumentError(
            f"bound must be an int, got {type(bound).__name__}", argument="bound", value=bound
        )
    if bound <= 0:
        raise InvalidArgumentError(f"bound must be positive, got {bound}", argument="bound", value=bound)
    source = rng if rng is not None else shared_random()
    return source.randrange(bound)


__all__ = ["RandomSource", "bounded_int", "double_bits", "hex_token", "shared_random"]
