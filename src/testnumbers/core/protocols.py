"""Protocol interfaces for testnumbers abstractions.

Engines and front ends talk through these Protocols: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Random source
# ---------------------------------------------------------------------------

@runtime_checkable
class IRandomSource(Protocol):
    """Subset of ``random.Random`` the generators rely on."""

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...


# ---------------------------------------------------------------------------
# Number engines
# ---------------------------------------------------------------------------

@runtime_checkable
class INumberEngine(Protocol):
    """Generate/validate pair for one kind of identification number."""

    kind: str

    def generate(self) -> str: ...

    def validate(self, value: object) -> bool: ...

    def generate_many(self, count: int) -> list[str]: ...
