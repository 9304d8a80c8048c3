"""Modulus-11 weighted-sum checks (elfproef).

Two distinct rules share the weighted-sum machinery:

* zero-sum: the check digit carries weight -1 and the whole weighted sum must
  be divisible by 11 (BSN).
* derived-digit: the check digit must equal the weighted sum of the preceding
  digits mod 11 (Loonheffingennummer).

Each rule has its own function; there is no mode flag.
"""

from __future__ import annotations

import logging

from testnumbers.core.exceptions import CheckDigitExhaustedError, UnreachableCheckDigitError
from testnumbers.core.protocols import IRandomSource
from testnumbers.core.types import Digits, Weights

logger = logging.getLogger(__name__)

MODULUS = 11
DEFAULT_MAX_ATTEMPTS = 10_000


def to_digits(value: str) -> list[int]:
    """Split a string of ASCII digits into ints."""
    return [int(ch) for ch in value]


def weighted_sum(digits: Digits, weights: Weights) -> int:
    """Return ``sum(digit * weight)`` over two equal-length sequences."""
    if len(digits) != len(weights):
        raise ValueError(f"Expected {len(weights)} digits, got {len(digits)}")
    return sum(d * w for d, w in zip(digits, weights))


def is_zero_sum_valid(digits: Digits, weights: Weights) -> bool:
    """Zero-sum rule: the full weighted sum (check digit included) is 0 mod 11."""
    return weighted_sum(digits, weights) % MODULUS == 0


def derived_check_digit(prefix: Digits, weights: Weights) -> int:
    """Check digit for ``prefix`` under the derived-digit rule.

    Raises:
        UnreachableCheckDigitError: the remainder is 10, so no single digit
            completes this prefix.
    """
    remainder = weighted_sum(prefix, weights) % MODULUS
    if remainder > 9:
        raise UnreachableCheckDigitError(remainder)
    return remainder


def is_derived_digit_valid(digits: Digits, weights: Weights) -> bool:
    """Derived-digit rule: last digit equals weighted sum of the rest mod 11."""
    if not digits:
        return False
    *prefix, check = digits
    return weighted_sum(prefix, weights) % MODULUS == check


def draw_prefix(rng: IRandomSource, length: int, first_digit_max: int = 9) -> list[int]:
    """Leading digit in ``1..first_digit_max``, the rest uniform in ``0..9``."""
    if length < 1:
        raise ValueError("prefix length must be positive")
    if not 1 <= first_digit_max <= 9:
        raise ValueError("first_digit_max must be between 1 and 9")
    return [rng.randint(1, first_digit_max)] + [rng.randint(0, 9) for _ in range(length - 1)]


def draw_with_check_digit(
    rng: IRandomSource,
    weights: Weights,
    *,
    first_digit_max: int = 9,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> list[int]:
    """Draw a prefix and append its derived check digit.

    A prefix whose remainder is 10 is discarded as a whole and redrawn, since
    the prefix alone fixes the remainder.

    Raises:
        CheckDigitExhaustedError: ``max_attempts`` prefixes were all unusable.
    """
    for attempt in range(1, max_attempts + 1):
        prefix = draw_prefix(rng, len(weights), first_digit_max)
        try:
            check = derived_check_digit(prefix, weights)
        except UnreachableCheckDigitError:
            logger.debug("Prefix rejected on attempt %d, redrawing", attempt)
            continue
        return prefix + [check]
    raise CheckDigitExhaustedError(max_attempts)
