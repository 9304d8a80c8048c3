"""Random sources behind IRandomSource.

``random.Random`` already satisfies the protocol; ``ScriptedRandomSource`` is a
replaying fake for unit tests.
"""

from __future__ import annotations

import random
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def create_random_source(seed: int | None = None) -> random.Random:
    """Return a private ``random.Random``, seeded when ``seed`` is given."""
    return random.Random(seed)


class ScriptedRandomSource:
    """Replays a fixed script of integers.

    ``randint`` returns the next scripted value (checked against the bounds);
    ``choice`` uses the next scripted value as an index.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._pos = 0

    @property
    def consumed(self) -> int:
        return self._pos

    def _next(self) -> int:
        if self._pos >= len(self._values):
            raise IndexError("scripted random source exhausted")
        value = self._values[self._pos]
        self._pos += 1
        return value

    def randint(self, a: int, b: int) -> int:
        value = self._next()
        if not a <= value <= b:
            raise ValueError(f"scripted value {value} outside [{a}, {b}]")
        return value

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self._next()]
