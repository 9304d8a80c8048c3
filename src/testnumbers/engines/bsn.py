"""BSN (burgerservicenummer) engine: 9 digits passing the elfproef."""

from __future__ import annotations

import re

from testnumbers.checksums.mod11 import draw_with_check_digit, is_zero_sum_valid, to_digits
from testnumbers.core.types import BSN
from testnumbers.engines.base import BaseEngine

BSN_RE = re.compile(r"[0-9]{9}")
BSN_WEIGHTS = (9, 8, 7, 6, 5, 4, 3, 2, -1)


class BSNEngine(BaseEngine):
    """Generate and validate BSNs.

    The ninth digit carries weight -1, so the weighted sum of all nine digits
    must be divisible by 11. That digit equals the remainder of the first
    eight, which is why generation reuses the derived-digit draw.
    """

    kind = "bsn"

    def generate(self) -> BSN:
        gen = self._settings.generator
        digits = draw_with_check_digit(
            self._rng,
            BSN_WEIGHTS[:-1],
            first_digit_max=gen.bsn_first_digit_max,
            max_attempts=gen.max_attempts,
        )
        return self._verified("".join(map(str, digits)))

    def validate(self, value: object) -> bool:
        if not isinstance(value, str) or not BSN_RE.fullmatch(value):
            return False
        return is_zero_sum_valid(to_digits(value), BSN_WEIGHTS)
