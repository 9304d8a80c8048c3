"""Testnumbers exception hierarchy.

Validation never raises: malformed input is reported as ``False`` by every
``validate`` / ``is_valid_*`` call. Exceptions are reserved for generation.
"""

from __future__ import annotations


class TestnumbersError(Exception):
    """Base exception for all testnumbers errors."""

    __test__ = False  # not a pytest test class


class InvalidBankCodeError(TestnumbersError):
    """Bank code is not one of the known Dutch bank codes."""

    def __init__(self, bank_code: str, valid_codes: tuple[str, ...] = ()) -> None:
        self.bank_code = bank_code
        self.valid_codes = valid_codes
        message = f"Invalid bank code {bank_code!r}"
        if valid_codes:
            message += f". Available: {', '.join(valid_codes)}"
        super().__init__(message)


class UnreachableCheckDigitError(TestnumbersError):
    """Drawn prefix yields a modulus-11 remainder that is not a single digit."""

    def __init__(self, remainder: int) -> None:
        self.remainder = remainder
        super().__init__(f"Remainder {remainder} cannot be used as a check digit")


class CheckDigitExhaustedError(TestnumbersError):
    """Rejection sampling hit its safety cap without a usable prefix."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"No valid check digit found after {attempts} attempts")


class MissingArgumentError(TestnumbersError):
    """Required command-line argument was not supplied."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"Missing required argument: {argument}")
