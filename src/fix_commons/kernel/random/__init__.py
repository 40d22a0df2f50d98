"""Kernel random – injectable random source, hex tokens, bounded integers."""
from fix_commons.kernel.random.source import (
    RandomSource,
    bounded_int,
    double_bits,
    hex_token,
    shared_random,
)

__all__ = ["RandomSource", "bounded_int", "double_bits", "hex_token", "shared_random"]
