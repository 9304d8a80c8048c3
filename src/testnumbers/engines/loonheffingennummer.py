"""Loonheffingennummer (payroll tax number) engine."""

from __future__ import annotations

import re

from testnumbers.checksums.mod11 import draw_with_check_digit, is_derived_digit_valid, to_digits
from testnumbers.core.types import Loonheffingennummer
from testnumbers.engines.base import BaseEngine

LOONHEFFINGENNUMMER_RE = re.compile(r"[0-9]{9}")
LOONHEFFINGENNUMMER_WEIGHTS = (9, 8, 7, 6, 5, 4, 3, 2)


class LoonheffingennummerEngine(BaseEngine):
    """Generate and validate loonheffingennummers.

    The ninth digit must equal the weighted sum of the first eight mod 11.
    The ``L01`` suffix is a presentation affix: ``format`` adds it, and
    ``validate`` only accepts it when called with ``suffixed=True``.
    """

    kind = "loonheffingennummer"

    @property
    def suffix(self) -> str:
        return self._settings.loonheffingennummer_suffix

    def generate(self) -> Loonheffingennummer:
        digits = draw_with_check_digit(
            self._rng,
            LOONHEFFINGENNUMMER_WEIGHTS,
            max_attempts=self._settings.generator.max_attempts,
        )
        return self._verified("".join(map(str, digits)))

    def validate(self, value: object, *, suffixed: bool = False) -> bool:
        if not isinstance(value, str):
            return False
        if suffixed:
            if not value.endswith(self.suffix):
                return False
            value = value[: len(value) - len(self.suffix)]
        if not LOONHEFFINGENNUMMER_RE.fullmatch(value):
            return False
        return is_derived_digit_valid(to_digits(value), LOONHEFFINGENNUMMER_WEIGHTS)

    def format(self, value: Loonheffingennummer) -> str:
        """Append the ``L01`` suffix, once."""
        if value.endswith(self.suffix):
            return value
        return value + self.suffix
