"""Number engines: one generate/validate pair per identification number."""

from __future__ import annotations

from testnumbers.core.config import AppSettings
from testnumbers.core.protocols import IRandomSource
from testnumbers.engines.bsn import BSNEngine
from testnumbers.engines.iban import DUTCH_BANK_CODES, IBANEngine
from testnumbers.engines.loonheffingennummer import LoonheffingennummerEngine
from testnumbers.randomness import create_random_source


def create_engines(
    settings: AppSettings | None = None, rng: IRandomSource | None = None
) -> tuple[BSNEngine, IBANEngine, LoonheffingennummerEngine]:
    """Create the three engines sharing one settings object and random source.

    Returns:
        Tuple of (bsn, iban, loonheffingennummer).
    """
    if settings is None:
        settings = AppSettings()
    if rng is None:
        rng = create_random_source(settings.generator.seed)

    return (
        BSNEngine(settings=settings, rng=rng),
        IBANEngine(settings=settings, rng=rng),
        LoonheffingennummerEngine(settings=settings, rng=rng),
    )


__all__ = [
    "BSNEngine",
    "DUTCH_BANK_CODES",
    "IBANEngine",
    "LoonheffingennummerEngine",
    "create_engines",
]
