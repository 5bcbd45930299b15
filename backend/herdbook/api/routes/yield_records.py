"""Yield Records — weekly milk-yield tracking per animal.

Invariants:
    - total_yield / total_cost are recomputed from the body on every create and
      update; the client never sets them
    - New records need an existing, active animal; an update re-checks only when
      it moves the record to a different animal
    - Summary aggregates exactly the rows the list would return, unpaginated

Design Decisions:
    - Deactivated animals keep their history editable: the active check would
      otherwise lock old rows the moment an animal is sold
"""

import datetime

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from herdbook.api.dependencies import (
    export_filters, export_format, get_today, list_filters, spreadsheet_response,
)
from herdbook.core.derived_fields import compute_yield_totals
from herdbook.core.errors import RecordValidationError
from herdbook.core.formatting import format_created_at, format_display_date, format_inr
from herdbook.core.summaries import summarize_yield
from herdbook.infrastructure.database import get_db
from herdbook.models.animal import Animal
from herdbook.models.yield_record import YieldRecord
from herdbook.schemas.yield_record import YieldRecordCreate, YieldRecordResponse, YieldSummary
from herdbook.services.export import ExportColumn
from herdbook.services.record_store import ListFilters, RecordStore

router = APIRouter(prefix="/api/v1/yield-records", tags=["yield-records"])

store = RecordStore(
    YieldRecord, "YieldRecord",
    key=YieldRecord.id,
    search_columns=(YieldRecord.animal_id, YieldRecord.remarks),
    date_column=YieldRecord.date,
)

EXPORT_COLUMNS = (
    ExportColumn("Date", "date", format_display_date),
    ExportColumn("Animal ID", "animal_id"),
    ExportColumn("Morning Yield (L)", "morning_yield"),
    ExportColumn("Evening Yield (L)", "evening_yield"),
    ExportColumn("Total Yield (L)", "total_yield"),
    ExportColumn("Cost / Litre", "cost_per_litre", format_inr),
    ExportColumn("Total Cost", "total_cost", format_inr),
    ExportColumn("Remarks", "remarks"),
    ExportColumn("Created At", "created_at", format_created_at),
)


def _conditions(animal_id: str | None) -> list:
    return [YieldRecord.animal_id == animal_id.strip()] if animal_id else []


async def _require_active_animal(db: AsyncSession, animal_id: str) -> None:
    animal = await db.get(Animal, animal_id)
    if animal is None:
        raise RecordValidationError(f"Animal '{animal_id}' does not exist", "animal_id")
    if not animal.is_active:
        raise RecordValidationError(f"Animal '{animal_id}' is inactive", "animal_id")


def _values(body: YieldRecordCreate) -> dict:
    values = body.model_dump()
    values["total_yield"], values["total_cost"] = compute_yield_totals(
        body.morning_yield, body.evening_yield, body.cost_per_litre,
    )
    return values


@router.get("", response_model=list[YieldRecordResponse])
async def list_yield_records(
    filters: ListFilters = Depends(list_filters),
    animal_id: str | None = Query(None, max_length=50),
    db: AsyncSession = Depends(get_db),
):
    return await store.list_records(db, filters, *_conditions(animal_id))


@router.post(
    "", response_model=YieldRecordResponse, status_code=status.HTTP_201_CREATED,
)
async def create_yield_record(body: YieldRecordCreate, db: AsyncSession = Depends(get_db)):
    await _require_active_animal(db, body.animal_id)
    return await store.create(db, _values(body))


@router.get("/summary", response_model=YieldSummary)
async def yield_summary(
    filters: ListFilters = Depends(export_filters),
    animal_id: str | None = Query(None, max_length=50),
    db: AsyncSession = Depends(get_db),
):
    """Litres, cost and average per record for the filtered rows."""
    rows = await store.list_records(db, filters, *_conditions(animal_id))
    return YieldSummary(**summarize_yield(rows))


@router.get("/export")
async def export_yield_records(
    filters: ListFilters = Depends(export_filters),
    animal_id: str | None = Query(None, max_length=50),
    fmt: str = Depends(export_format),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    rows = await store.list_records(db, filters, *_conditions(animal_id))
    return spreadsheet_response(
        fmt, "weekly_milk_yield", "Weekly Milk Yield", EXPORT_COLUMNS, rows, today,
    )


@router.get("/{record_id}", response_model=YieldRecordResponse)
async def get_yield_record(record_id: int, db: AsyncSession = Depends(get_db)):
    return await store.get(db, record_id)


@router.put("/{record_id}", response_model=YieldRecordResponse)
async def update_yield_record(
    record_id: int, body: YieldRecordCreate, db: AsyncSession = Depends(get_db),
):
    record = await store.get(db, record_id)
    if body.animal_id != record.animal_id:
        await _require_active_animal(db, body.animal_id)
    return await store.update(db, record, _values(body))


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_yield_record(record_id: int, db: AsyncSession = Depends(get_db)):
    record = await store.get(db, record_id)
    await store.delete(db, record)
