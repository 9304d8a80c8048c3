"""Tests for the modulus-11 checks and rejection-sampled drawing."""

from __future__ import annotations

import pytest

from testnumbers.checksums.mod11 import (
    derived_check_digit,
    draw_prefix,
    draw_with_check_digit,
    is_derived_digit_valid,
    is_zero_sum_valid,
    to_digits,
    weighted_sum,
)
from testnumbers.core.exceptions import CheckDigitExhaustedError, UnreachableCheckDigitError
from tests.fakes import REACHABLE_PREFIX, UNREACHABLE_PREFIX, ScriptedRandomSource

BSN_WEIGHTS = (9, 8, 7, 6, 5, 4, 3, 2, -1)
PREFIX_WEIGHTS = (9, 8, 7, 6, 5, 4, 3, 2)


class TestWeightedSum:
    def test_sums_products(self):
        assert weighted_sum([1, 2, 3, 4, 5, 6, 7, 8], PREFIX_WEIGHTS) == 156

    def test_negative_weight(self):
        assert weighted_sum(to_digits("123456782"), BSN_WEIGHTS) == 154

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            weighted_sum([1, 2, 3], PREFIX_WEIGHTS)


class TestZeroSum:
    def test_known_valid(self):
        assert is_zero_sum_valid(to_digits("123456782"), BSN_WEIGHTS)
        assert is_zero_sum_valid(to_digits("111222333"), BSN_WEIGHTS)

    def test_known_invalid(self):
        assert not is_zero_sum_valid(to_digits("123456789"), BSN_WEIGHTS)


class TestDerivedDigit:
    def test_check_digit_is_remainder(self):
        assert derived_check_digit(REACHABLE_PREFIX, PREFIX_WEIGHTS) == 2
        assert derived_check_digit([1] * 8, PREFIX_WEIGHTS) == 0

    def test_remainder_ten_is_unreachable(self):
        with pytest.raises(UnreachableCheckDigitError) as exc_info:
            derived_check_digit(UNREACHABLE_PREFIX, PREFIX_WEIGHTS)
        assert exc_info.value.remainder == 10

    def test_validity(self):
        assert is_derived_digit_valid(to_digits("111111110"), PREFIX_WEIGHTS)
        assert is_derived_digit_valid(to_digits("123456782"), PREFIX_WEIGHTS)
        assert not is_derived_digit_valid(to_digits("111111111"), PREFIX_WEIGHTS)

    def test_empty_is_invalid(self):
        assert not is_derived_digit_valid([], PREFIX_WEIGHTS)


class TestDrawPrefix:
    def test_leading_digit_non_zero(self, rng):
        for _ in range(200):
            prefix = draw_prefix(rng, 8)
            assert len(prefix) == 8
            assert 1 <= prefix[0] <= 9
            assert all(0 <= d <= 9 for d in prefix)

    def test_leading_digit_cap(self, rng):
        assert all(draw_prefix(rng, 8, first_digit_max=7)[0] <= 7 for _ in range(200))

    def test_rejects_bad_arguments(self, rng):
        with pytest.raises(ValueError):
            draw_prefix(rng, 0)
        with pytest.raises(ValueError):
            draw_prefix(rng, 8, first_digit_max=0)


class TestDrawWithCheckDigit:
    def test_redraws_whole_prefix(self):
        source = ScriptedRandomSource(UNREACHABLE_PREFIX + REACHABLE_PREFIX)
        digits = draw_with_check_digit(source, PREFIX_WEIGHTS)
        assert digits == REACHABLE_PREFIX + [2]
        assert source.consumed == 16

    def test_safety_cap(self):
        source = ScriptedRandomSource(UNREACHABLE_PREFIX * 3)
        with pytest.raises(CheckDigitExhaustedError) as exc_info:
            draw_with_check_digit(source, PREFIX_WEIGHTS, max_attempts=3)
        assert exc_info.value.attempts == 3
