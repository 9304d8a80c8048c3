"""Type aliases used across testnumbers."""

from __future__ import annotations

from typing import Literal, Sequence

BSN = str
IBAN = str
Loonheffingennummer = str
BankCode = str
Digits = Sequence[int]
Weights = Sequence[int]
NumberKind = Literal["bsn", "iban", "loonheffingennummer"]
