"""Kernel value types — public re-export surface."""

from fix_commons.kernel.types.ids import OrderIdSequence

__all__ = ["OrderIdSequence"]
