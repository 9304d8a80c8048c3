"""Generation history endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request

from testnumbers.core.types import NumberKind
from testnumbers.models.numbers import HistoryEntry

router = APIRouter(tags=["history"])


@router.get("", response_model=list[HistoryEntry])
async def list_history(request: Request, kind: Optional[NumberKind] = None) -> list[HistoryEntry]:
    """Most recent first, at most ``history.max_items`` entries."""
    return request.app.state.history.entries(kind)


@router.delete("")
async def clear_history(request: Request) -> dict[str, int]:
    history = request.app.state.history
    removed = len(history)
    history.clear()
    return {"removed": removed}
