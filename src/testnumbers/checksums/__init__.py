"""Checksum algorithms shared by the number engines."""

from __future__ import annotations

from testnumbers.checksums.mod11 import (
    derived_check_digit,
    draw_with_check_digit,
    is_derived_digit_valid,
    is_zero_sum_valid,
    weighted_sum,
)
from testnumbers.checksums.mod97 import check_digits, is_mod97_valid, letters_to_numbers, mod97

__all__ = [
    "check_digits",
    "derived_check_digit",
    "draw_with_check_digit",
    "is_derived_digit_valid",
    "is_mod97_valid",
    "is_zero_sum_valid",
    "letters_to_numbers",
    "mod97",
    "weighted_sum",
]
