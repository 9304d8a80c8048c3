"""Result models returned by the CLI and HTTP front ends."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from testnumbers.core.types import NumberKind


class ValidationResult(BaseModel):
    """Outcome of validating a single value."""

    model_config = {"frozen": True}

    kind: NumberKind
    value: str
    normalized: str = ""
    valid: bool = False
    formatted: str = ""  # Presentation form; empty when invalid


class GeneratedBatch(BaseModel):
    """Values produced by one generate request."""

    model_config = {"frozen": True}

    kind: NumberKind
    values: list[str] = Field(default_factory=list)
    formatted: list[str] = Field(default_factory=list)
    bank_code: Optional[str] = None  # IBAN only

    @property
    def count(self) -> int:
        return len(self.values)


class HistoryEntry(BaseModel):
    """One generated value remembered by the front end."""

    model_config = {"frozen": True}

    kind: NumberKind
    value: str


class GenerationHistory(BaseModel):
    """Bounded newest-first list of generated values."""

    max_items: int = Field(default=50, gt=0)
    items: list[HistoryEntry] = Field(default_factory=list)

    def add(self, kind: NumberKind, value: str) -> None:
        self.items.insert(0, HistoryEntry(kind=kind, value=value))
        del self.items[self.max_items:]

    def extend(self, batch: GeneratedBatch) -> None:
        for value in batch.values:
            self.add(batch.kind, value)

    def clear(self) -> None:
        self.items.clear()

    def entries(self, kind: NumberKind | None = None) -> list[HistoryEntry]:
        if kind is None:
            return list(self.items)
        return [e for e in self.items if e.kind == kind]

    def __len__(self) -> int:
        return len(self.items)
