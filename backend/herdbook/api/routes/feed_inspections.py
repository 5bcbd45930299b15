"""Feed Inspections — daily quality checks on feed and water.

Invariants:
    - unfit_quantity_kg is cleared whenever fit_for_use is Y, on create and update
"""

import datetime

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from herdbook.api.dependencies import (
    export_filters, export_format, get_today, list_filters, spreadsheet_response,
)
from herdbook.core.derived_fields import normalize_unfit_quantity
from herdbook.core.domain_types import FeedType, YesNo
from herdbook.core.formatting import format_created_at, format_display_date, yes_no_label
from herdbook.infrastructure.database import get_db
from herdbook.models.feed_inspection import FeedInspection
from herdbook.schemas.feed_inspection import FeedInspectionCreate, FeedInspectionResponse
from herdbook.services.export import ExportColumn
from herdbook.services.record_store import ListFilters, RecordStore

router = APIRouter(prefix="/api/v1/feed-inspections", tags=["feed-inspections"])

store = RecordStore(
    FeedInspection, "FeedInspection",
    key=FeedInspection.id,
    search_columns=(
        FeedInspection.feed_type,
        FeedInspection.appearance,
        FeedInspection.smell,
        FeedInspection.contamination,
        FeedInspection.action_taken,
    ),
    date_column=FeedInspection.date,
)

EXPORT_COLUMNS = (
    ExportColumn("Date", "date", format_display_date),
    ExportColumn("Feed Type", "feed_type"),
    ExportColumn("Appearance", "appearance"),
    ExportColumn("Smell", "smell"),
    ExportColumn("Moisture Level", "moisture_level"),
    ExportColumn("Contamination", "contamination"),
    ExportColumn("Fit For Use", "fit_for_use", yes_no_label),
    ExportColumn("Unfit Quantity (kg)", "unfit_quantity_kg"),
    ExportColumn("Action Taken", "action_taken"),
    ExportColumn("Created At", "created_at", format_created_at),
)


def _conditions(feed_type: FeedType | None, fit_for_use: YesNo | None) -> list:
    conditions = []
    if feed_type is not None:
        conditions.append(FeedInspection.feed_type == feed_type.value)
    if fit_for_use is not None:
        conditions.append(FeedInspection.fit_for_use == fit_for_use.value)
    return conditions


def _values(body: FeedInspectionCreate) -> dict:
    values = body.model_dump()
    values["unfit_quantity_kg"] = normalize_unfit_quantity(
        values["fit_for_use"], values["unfit_quantity_kg"],
    )
    return values


@router.get("", response_model=list[FeedInspectionResponse])
async def list_feed_inspections(
    filters: ListFilters = Depends(list_filters),
    feed_type: FeedType | None = Query(None),
    fit_for_use: YesNo | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await store.list_records(db, filters, *_conditions(feed_type, fit_for_use))


@router.post(
    "", response_model=FeedInspectionResponse, status_code=status.HTTP_201_CREATED,
)
async def create_feed_inspection(
    body: FeedInspectionCreate, db: AsyncSession = Depends(get_db),
):
    return await store.create(db, _values(body))


@router.get("/export")
async def export_feed_inspections(
    filters: ListFilters = Depends(export_filters),
    feed_type: FeedType | None = Query(None),
    fit_for_use: YesNo | None = Query(None),
    fmt: str = Depends(export_format),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    rows = await store.list_records(db, filters, *_conditions(feed_type, fit_for_use))
    return spreadsheet_response(
        fmt, "feed_inspections", "Feed Inspections", EXPORT_COLUMNS, rows, today,
    )


@router.get("/{inspection_id}", response_model=FeedInspectionResponse)
async def get_feed_inspection(inspection_id: int, db: AsyncSession = Depends(get_db)):
    return await store.get(db, inspection_id)


@router.put("/{inspection_id}", response_model=FeedInspectionResponse)
async def update_feed_inspection(
    inspection_id: int, body: FeedInspectionCreate, db: AsyncSession = Depends(get_db),
):
    inspection = await store.get(db, inspection_id)
    return await store.update(db, inspection, _values(body))


@router.delete("/{inspection_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_feed_inspection(inspection_id: int, db: AsyncSession = Depends(get_db)):
    inspection = await store.get(db, inspection_id)
    await store.delete(db, inspection)
