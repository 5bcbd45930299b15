"""Calf Feed Register — daily feed given to each calf, by type and quantity."""

import datetime

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from herdbook.api.dependencies import (
    export_filters, export_format, get_today, list_filters, spreadsheet_response,
)
from herdbook.core.domain_types import CalfFeedType
from herdbook.core.formatting import format_created_at, format_display_date
from herdbook.infrastructure.database import get_db
from herdbook.models.calf_feeding import CalfFeedRegister
from herdbook.schemas.calf_feeding import CalfFeedRegisterCreate, CalfFeedRegisterResponse
from herdbook.services.export import ExportColumn
from herdbook.services.record_store import ListFilters, RecordStore

router = APIRouter(prefix="/api/v1/calf-feed-register", tags=["calf-feed-register"])

store = RecordStore(
    CalfFeedRegister, "CalfFeedRegister",
    key=CalfFeedRegister.id,
    search_columns=(
        CalfFeedRegister.calf_id,
        CalfFeedRegister.activity,
        CalfFeedRegister.description,
        CalfFeedRegister.responsible_person,
    ),
    date_column=CalfFeedRegister.date,
)

EXPORT_COLUMNS = (
    ExportColumn("Date", "date", format_display_date),
    ExportColumn("Calf ID", "calf_id"),
    ExportColumn("Activity", "activity"),
    ExportColumn("Description", "description"),
    ExportColumn("Feed Type", "feed_type"),
    ExportColumn("Quantity (g)", "quantity_grams"),
    ExportColumn("Frequency", "frequency"),
    ExportColumn("Time", "time_of_day"),
    ExportColumn("Responsible Person", "responsible_person"),
    ExportColumn("Record Log", "record_log"),
    ExportColumn("Created At", "created_at", format_created_at),
)


def _conditions(feed_type: CalfFeedType | None) -> list:
    return [] if feed_type is None else [CalfFeedRegister.feed_type == feed_type.value]


@router.get("", response_model=list[CalfFeedRegisterResponse])
async def list_calf_feed_register(
    filters: ListFilters = Depends(list_filters),
    feed_type: CalfFeedType | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await store.list_records(db, filters, *_conditions(feed_type))


@router.post(
    "", response_model=CalfFeedRegisterResponse, status_code=status.HTTP_201_CREATED,
)
async def create_calf_feed_entry(
    body: CalfFeedRegisterCreate, db: AsyncSession = Depends(get_db),
):
    return await store.create(db, body.model_dump())


@router.get("/export")
async def export_calf_feed_register(
    filters: ListFilters = Depends(export_filters),
    feed_type: CalfFeedType | None = Query(None),
    fmt: str = Depends(export_format),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    rows = await store.list_records(db, filters, *_conditions(feed_type))
    return spreadsheet_response(
        fmt, "calf_feed_register", "Calf Feed Register", EXPORT_COLUMNS, rows, today,
    )


@router.get("/{entry_id}", response_model=CalfFeedRegisterResponse)
async def get_calf_feed_entry(entry_id: int, db: AsyncSession = Depends(get_db)):
    return await store.get(db, entry_id)


@router.put("/{entry_id}", response_model=CalfFeedRegisterResponse)
async def update_calf_feed_entry(
    entry_id: int, body: CalfFeedRegisterCreate, db: AsyncSession = Depends(get_db),
):
    entry = await store.get(db, entry_id)
    return await store.update(db, entry, body.model_dump())


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_calf_feed_entry(entry_id: int, db: AsyncSession = Depends(get_db)):
    entry = await store.get(db, entry_id)
    await store.delete(db, entry)
