"""ISO 7064 mod-97-10 helpers for IBAN check digits."""

from __future__ import annotations

MODULUS = 97


def letters_to_numbers(value: str) -> str:
    """Replace ``A``..``Z`` with ``10``..``35``; digits pass through unchanged."""
    out: list[str] = []
    for ch in value:
        if "A" <= ch <= "Z":
            out.append(str(ord(ch) - 55))
        elif "0" <= ch <= "9":
            out.append(ch)
        else:
            raise ValueError(f"Unexpected character {ch!r} in {value!r}")
    return "".join(out)


def mod97(numeral: str) -> int:
    """Reduce an arbitrarily long decimal string mod 97, one digit at a time."""
    remainder = 0
    for ch in numeral:
        if not "0" <= ch <= "9":
            raise ValueError(f"Unexpected character {ch!r} in numeral")
        remainder = (remainder * 10 + ord(ch) - 48) % MODULUS
    return remainder


def check_digits(bban: str, country: str = "NL") -> str:
    """Two IBAN check digits for ``bban`` in ``country``, zero-padded."""
    numeral = letters_to_numbers(bban + country + "00")
    return f"{98 - mod97(numeral):02d}"


def is_mod97_valid(iban: str) -> bool:
    """True when the rearranged, letter-substituted IBAN is 1 mod 97."""
    rearranged = iban[4:] + iban[:4]
    return mod97(letters_to_numbers(rearranged)) == 1
