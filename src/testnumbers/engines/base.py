"""Base engine with common dependency wiring."""

from __future__ import annotations

import logging

from testnumbers.core.config import AppSettings
from testnumbers.core.protocols import IRandomSource
from testnumbers.randomness import create_random_source

logger = logging.getLogger(__name__)


class BaseEngine:
    """Common base for the number engines.

    The random source and settings are injected at construction time. Without
    an explicit source, one is created from ``settings.generator.seed``.
    """

    kind: str = ""

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        rng: IRandomSource | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._rng = rng if rng is not None else create_random_source(self._settings.generator.seed)

    def generate(self) -> str:
        raise NotImplementedError

    def validate(self, value: object) -> bool:
        raise NotImplementedError

    def generate_many(self, count: int) -> list[str]:
        """``count`` independent values; duplicates are possible."""
        check_count(count)
        return [self.generate() for _ in range(count)]

    def _verified(self, value: str) -> str:
        if not self.validate(value):
            raise AssertionError(f"generated {self.kind} {value!r} fails validation")
        logger.debug("Generated %s %s", self.kind, value)
        return value


def check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
