"""Generate and validate endpoints for each number kind."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from testnumbers.core.exceptions import InvalidBankCodeError
from testnumbers.models.numbers import GeneratedBatch, ValidationResult

router = APIRouter(tags=["numbers"])

MAX_COUNT = 100


def _record(request: Request, batch: GeneratedBatch) -> GeneratedBatch:
    request.app.state.history.extend(batch)
    return batch


# --- BSN ---

@router.get("/bsn", response_model=GeneratedBatch)
async def generate_bsn(request: Request, count: int = Query(1, ge=1, le=MAX_COUNT)) -> GeneratedBatch:
    values = request.app.state.bsn.generate_many(count)
    return _record(request, GeneratedBatch(kind="bsn", values=values, formatted=values))


@router.get("/bsn/{value}/validate", response_model=ValidationResult)
async def validate_bsn(request: Request, value: str) -> ValidationResult:
    valid = request.app.state.bsn.validate(value)
    return ValidationResult(
        kind="bsn", value=value, normalized=value, valid=valid, formatted=value if valid else ""
    )


# --- IBAN ---

@router.get("/iban", response_model=GeneratedBatch)
async def generate_iban(
    request: Request,
    count: int = Query(1, ge=1, le=MAX_COUNT),
    bank: Optional[str] = None,
) -> GeneratedBatch:
    engine = request.app.state.iban
    try:
        values = engine.generate_many(count, bank)
    except InvalidBankCodeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    batch = GeneratedBatch(
        kind="iban",
        values=values,
        formatted=[engine.format(v) for v in values],
        bank_code=bank.strip().upper() if bank else None,
    )
    return _record(request, batch)


@router.get("/iban/{value}/validate", response_model=ValidationResult)
async def validate_iban(request: Request, value: str) -> ValidationResult:
    engine = request.app.state.iban
    valid = engine.validate(value)
    normalized = "".join(value.split()).upper()
    return ValidationResult(
        kind="iban",
        value=value,
        normalized=normalized,
        valid=valid,
        formatted=engine.format(normalized) if valid else "",
    )


# --- Loonheffingennummer ---

@router.get("/loonheffingennummer", response_model=GeneratedBatch)
async def generate_loonheffingennummer(
    request: Request,
    count: int = Query(1, ge=1, le=MAX_COUNT),
    suffix: bool = False,
) -> GeneratedBatch:
    engine = request.app.state.loonheffingennummer
    values = engine.generate_many(count)
    formatted = [engine.format(v) for v in values] if suffix else list(values)
    return _record(request, GeneratedBatch(kind="loonheffingennummer", values=values, formatted=formatted))


@router.get("/loonheffingennummer/{value}/validate", response_model=ValidationResult)
async def validate_loonheffingennummer(request: Request, value: str) -> ValidationResult:
    engine = request.app.state.loonheffingennummer
    suffixed = value.endswith(engine.suffix)
    valid = engine.validate(value, suffixed=suffixed)
    normalized = value[: len(value) - len(engine.suffix)] if suffixed else value
    return ValidationResult(
        kind="loonheffingennummer",
        value=value,
        normalized=normalized,
        valid=valid,
        formatted=engine.format(normalized) if valid else "",
    )
