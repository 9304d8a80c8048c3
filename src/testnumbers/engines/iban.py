"""Dutch IBAN engine (ISO 13616 structure, ISO 7064 mod-97-10 check digits)."""

from __future__ import annotations

import logging
import re

from testnumbers.checksums.mod97 import check_digits, is_mod97_valid
from testnumbers.core.exceptions import InvalidBankCodeError
from testnumbers.core.types import IBAN, BankCode
from testnumbers.engines.base import BaseEngine, check_count

logger = logging.getLogger(__name__)

COUNTRY_CODE = "NL"
ACCOUNT_LENGTH = 10
DUTCH_BANK_CODES: tuple[BankCode, ...] = (
    "ABNA", "INGB", "RABO", "SNSB", "TRIO", "KNAB", "BUNQ", "ASNB",
)
IBAN_RE = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z]{4}[0-9]{10}")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_iban(value: str) -> str:
    """Drop all whitespace and uppercase."""
    return _WHITESPACE_RE.sub("", value).upper()


def resolve_bank_code(bank_code: str | None) -> BankCode | None:
    """Uppercase ``bank_code`` and check it against DUTCH_BANK_CODES.

    Raises:
        InvalidBankCodeError: the code is not a known Dutch bank.
    """
    if bank_code is None:
        return None
    code = bank_code.strip().upper()
    if code not in DUTCH_BANK_CODES:
        logger.warning("Rejected bank code %r", bank_code)
        raise InvalidBankCodeError(bank_code, DUTCH_BANK_CODES)
    return code


class IBANEngine(BaseEngine):
    """Generate, validate and format Dutch IBANs."""

    kind = "iban"

    def generate(self, bank_code: str | None = None) -> IBAN:
        bank = resolve_bank_code(bank_code) or self._rng.choice(DUTCH_BANK_CODES)
        account = "".join(str(self._rng.randint(0, 9)) for _ in range(ACCOUNT_LENGTH))
        digits = check_digits(bank + account, COUNTRY_CODE)
        return self._verified(f"{COUNTRY_CODE}{digits}{bank}{account}")

    def generate_many(self, count: int, bank_code: str | None = None) -> list[IBAN]:
        check_count(count)
        bank = resolve_bank_code(bank_code)
        return [self.generate(bank) for _ in range(count)]

    def validate(self, value: object) -> bool:
        if not isinstance(value, str):
            return False
        iban = normalize_iban(value)
        if not IBAN_RE.fullmatch(iban):
            return False
        return is_mod97_valid(iban)

    def format(self, value: IBAN) -> str:
        """Group in fours: ``NL91 ABNA 0417 1643 00``."""
        iban = normalize_iban(value)
        return " ".join(iban[i:i + 4] for i in range(0, len(iban), 4))
