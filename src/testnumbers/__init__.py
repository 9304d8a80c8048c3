"""Generate and validate Dutch test numbers: BSN, IBAN and loonheffingennummer.

Module-level functions share lazily created default engines. Build engines
with :func:`testnumbers.engines.create_engines` to inject settings or a seeded
random source.
"""

from __future__ import annotations

from functools import lru_cache

from testnumbers.core.exceptions import (
    CheckDigitExhaustedError,
    InvalidBankCodeError,
    TestnumbersError,
)
from testnumbers.engines import (
    DUTCH_BANK_CODES,
    BSNEngine,
    IBANEngine,
    LoonheffingennummerEngine,
    create_engines,
)

__version__ = "0.1.0"


@lru_cache(maxsize=1)
def _default_engines() -> tuple[BSNEngine, IBANEngine, LoonheffingennummerEngine]:
    return create_engines()


# --- BSN ---

def generate_bsn() -> str:
    return _default_engines()[0].generate()


def is_valid_bsn(value: object) -> bool:
    return _default_engines()[0].validate(value)


def generate_multiple_bsn(count: int) -> list[str]:
    return _default_engines()[0].generate_many(count)


# --- IBAN ---

def generate_iban(bank_code: str | None = None) -> str:
    return _default_engines()[1].generate(bank_code)


def is_valid_iban(value: object) -> bool:
    return _default_engines()[1].validate(value)


def format_iban(value: str) -> str:
    return _default_engines()[1].format(value)


def generate_multiple_iban(count: int, bank_code: str | None = None) -> list[str]:
    return _default_engines()[1].generate_many(count, bank_code)


# --- Loonheffingennummer ---

def generate_loonheffingennummer() -> str:
    return _default_engines()[2].generate()


def is_valid_loonheffingennummer(value: object, suffixed: bool = False) -> bool:
    return _default_engines()[2].validate(value, suffixed=suffixed)


def format_loonheffingennummer(value: str) -> str:
    return _default_engines()[2].format(value)


def generate_multiple_loonheffingennummer(count: int) -> list[str]:
    return _default_engines()[2].generate_many(count)


__all__ = [
    "BSNEngine",
    "CheckDigitExhaustedError",
    "DUTCH_BANK_CODES",
    "IBANEngine",
    "InvalidBankCodeError",
    "LoonheffingennummerEngine",
    "TestnumbersError",
    "create_engines",
    "format_iban",
    "format_loonheffingennummer",
    "generate_bsn",
    "generate_iban",
    "generate_loonheffingennummer",
    "generate_multiple_bsn",
    "generate_multiple_iban",
    "generate_multiple_loonheffingennummer",
    "is_valid_bsn",
    "is_valid_iban",
    "is_valid_loonheffingennummer",
]
