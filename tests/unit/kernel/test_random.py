"""Unit tests for random draws: hex tokens and bounded integers."""

from __future__ import annotations

import random
import re

import pytest

from fix_commons.kernel.errors import InvalidArgumentError
from fix_commons.kernel.random import bounded_int, double_bits, hex_token
from fix_commons.testing.fakes import SequenceRandom

HEX_RE = re.compile(r"^[0-9a-f]+$")


class TestDoubleBits:
    def test_known_patterns(self) -> None:
        assert double_bits(0.0) == 0
        assert double_bits(0.5) == 0x3FE0000000000000
        assert double_bits(1.0) == 0x3FF0000000000000


class TestHexToken:
    def test_renders_bit_pattern_of_draw(self) -> None:
        assert hex_token(SequenceRandom(floats=[0.5])) == "3fe0000000000000"

    def test_zero_draw_is_single_digit(self) -> None:
        assert hex_token(SequenceRandom(floats=[0.0])) == "0"

    def test_small_draw_drops_leading_zeros(self) -> None:
        token = hex_token(SequenceRandom(floats=[5e-324]))
        assert token == "1"

    def test_format_over_many_draws(self) -> None:
        rng = random.Random(1234)
        for _ in range(1_000):
            assert HEX_RE.match(hex_token(rng))

    def test_default_source_is_ambient(self) -> None:
        random.seed(42)
        first = hex_token()
        random.seed(42)
        assert hex_token() == first
        assert HEX_RE.match(first)


class TestBoundedInt:
    @pytest.mark.parametrize("bound", [1, 2, 100, 1_000_000])
    def test_stays_in_range(self, bound: int) -> None:
        rng = random.Random(bound)
        for _ in range(10_000):
            value = bounded_int(bound, rng)
            assert 0 <= value < bound

    def test_bound_one_is_always_zero(self) -> None:
        assert {bounded_int(1) for _ in range(100)} == {0}

    def test_delegates_to_randrange(self) -> None:
        rng = SequenceRandom(ints=[7])
        assert bounded_int(10, rng) == 7
        assert rng.randrange_calls == [10]

    @pytest.mark.parametrize("bound", [0, -5])
    def test_non_positive_bound_raises(self, bound: int) -> None:
        with pytest.raises(InvalidArgumentError) as info:
            bounded_int(bound)
        assert info.value.argument == "bound"
        assert info.value.value == bound

    @pytest.mark.parametrize("bound", [2.5, "10", True, None])
    def test_non_int_bound_raises(self, bound: object) -> None:
        with pytest.raises(InvalidArgumentError):
            bounded_int(bound)  # type: ignore[arg-type]

    def test_rejected_bound_never_draws(self) -> None:
        rng = SequenceRandom()
        with pytest.raises(InvalidArgumentError):
            bounded_int(0, rng)
        assert rng.randrange_calls == []
