"""Calf Feeding — colostrum and weaning log per calf."""

import datetime

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from herdbook.api.dependencies import (
    export_filters, export_format, get_today, list_filters, spreadsheet_response,
)
from herdbook.core.formatting import format_created_at, format_display_date, yes_no_label
from herdbook.infrastructure.database import get_db
from herdbook.models.calf_feeding import CalfFeedingRecord
from herdbook.schemas.calf_feeding import CalfFeedingCreate, CalfFeedingResponse
from herdbook.services.export import ExportColumn
from herdbook.services.record_store import ListFilters, RecordStore

router = APIRouter(prefix="/api/v1/calf-feeding", tags=["calf-feeding"])

store = RecordStore(
    CalfFeedingRecord, "CalfFeeding",
    key=CalfFeedingRecord.id,
    search_columns=(
        CalfFeedingRecord.calf_id,
        CalfFeedingRecord.milk_feeding,
        CalfFeedingRecord.remarks,
    ),
    date_column=CalfFeedingRecord.created_at,
)

EXPORT_COLUMNS = (
    ExportColumn("Calf ID", "calf_id"),
    ExportColumn("Colostrum Given", "colostrum_given", yes_no_label),
    ExportColumn("Milk Feeding", "milk_feeding"),
    ExportColumn("Starter Feed Started", "starter_feed_started", format_display_date),
    ExportColumn("Weaning Date", "weaning_date", format_display_date),
    ExportColumn("Remarks", "remarks"),
    ExportColumn("Created At", "created_at", format_created_at),
)


def _conditions(colostrum_given: bool | None) -> list:
    if colostrum_given is None:
        return []
    return [CalfFeedingRecord.colostrum_given == colostrum_given]


@router.get("", response_model=list[CalfFeedingResponse])
async def list_calf_feeding(
    filters: ListFilters = Depends(list_filters),
    colostrum_given: bool | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await store.list_records(db, filters, *_conditions(colostrum_given))


@router.post(
    "", response_model=CalfFeedingResponse, status_code=status.HTTP_201_CREATED,
)
async def create_calf_feeding(body: CalfFeedingCreate, db: AsyncSession = Depends(get_db)):
    return await store.create(db, body.model_dump())


@router.get("/export")
async def export_calf_feeding(
    filters: ListFilters = Depends(export_filters),
    colostrum_given: bool | None = Query(None),
    fmt: str = Depends(export_format),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    rows = await store.list_records(db, filters, *_conditions(colostrum_given))
    return spreadsheet_response(
        fmt, "calf_feeding", "Calf Feeding", EXPORT_COLUMNS, rows, today,
    )


@router.get("/{record_id}", response_model=CalfFeedingResponse)
async def get_calf_feeding(record_id: int, db: AsyncSession = Depends(get_db)):
    return await store.get(db, record_id)


@router.put("/{record_id}", response_model=CalfFeedingResponse)
async def update_calf_feeding(
    record_id: int, body: CalfFeedingCreate, db: AsyncSession = Depends(get_db),
):
    record = await store.get(db, record_id)
    return await store.update(db, record, body.model_dump())


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_calf_feeding(record_id: int, db: AsyncSession = Depends(get_db)):
    record = await store.get(db, record_id)
    await store.delete(db, record)
