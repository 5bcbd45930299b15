"""Milk Rejections — batches or animals whose milk failed quality checks."""

import datetime

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from herdbook.api.dependencies import (
    export_filters, export_format, get_today, list_filters, spreadsheet_response,
)
from herdbook.core.formatting import format_created_at, format_display_date
from herdbook.infrastructure.database import get_db
from herdbook.models.milk_rejection import MilkRejection
from herdbook.schemas.milk_rejection import MilkRejectionCreate, MilkRejectionResponse
from herdbook.services.export import ExportColumn
from herdbook.services.record_store import ListFilters, RecordStore

router = APIRouter(prefix="/api/v1/milk-rejections", tags=["milk-rejections"])

store = RecordStore(
    MilkRejection, "MilkRejection",
    key=MilkRejection.id,
    search_columns=(
        MilkRejection.rejection_reason,
        MilkRejection.animal_or_batch,
        MilkRejection.action_taken,
        MilkRejection.responsible_person,
        MilkRejection.remarks,
    ),
    date_column=MilkRejection.date,
)

EXPORT_COLUMNS = (
    ExportColumn("Date", "date", format_display_date),
    ExportColumn("Rejection Reason", "rejection_reason"),
    ExportColumn("Animal / Batch", "animal_or_batch"),
    ExportColumn("Action Taken", "action_taken"),
    ExportColumn("Responsible Person", "responsible_person"),
    ExportColumn("Remarks", "remarks"),
    ExportColumn("Created At", "created_at", format_created_at),
)


@router.get("", response_model=list[MilkRejectionResponse])
async def list_milk_rejections(
    filters: ListFilters = Depends(list_filters),
    db: AsyncSession = Depends(get_db),
):
    return await store.list_records(db, filters)


@router.post(
    "", response_model=MilkRejectionResponse, status_code=status.HTTP_201_CREATED,
)
async def create_milk_rejection(
    body: MilkRejectionCreate, db: AsyncSession = Depends(get_db),
):
    return await store.create(db, body.model_dump())


@router.get("/export")
async def export_milk_rejections(
    filters: ListFilters = Depends(export_filters),
    fmt: str = Depends(export_format),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    rows = await store.list_records(db, filters)
    return spreadsheet_response(
        fmt, "milk_rejections", "Milk Rejections", EXPORT_COLUMNS, rows, today,
    )


@router.get("/{rejection_id}", response_model=MilkRejectionResponse)
async def get_milk_rejection(rejection_id: int, db: AsyncSession = Depends(get_db)):
    return await store.get(db, rejection_id)


@router.put("/{rejection_id}", response_model=MilkRejectionResponse)
async def update_milk_rejection(
    rejection_id: int, body: MilkRejectionCreate, db: AsyncSession = Depends(get_db),
):
    rejection = await store.get(db, rejection_id)
    return await store.update(db, rejection, body.model_dump())


@router.delete("/{rejection_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_milk_rejection(rejection_id: int, db: AsyncSession = Depends(get_db)):
    rejection = await store.get(db, rejection_id)
    await store.delete(db, rejection)
