"""Record Categories — which registers the farm keeps, how often, and for how long.

Invariants:
    - No business date column: start_date / end_date filter on created_at
"""

import datetime

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from herdbook.api.dependencies import (
    export_filters, export_format, get_today, list_filters, spreadsheet_response,
)
from herdbook.core.domain_types import RecordFrequency
from herdbook.core.formatting import format_created_at
from herdbook.infrastructure.database import get_db
from herdbook.models.record_category import RecordCategory
from herdbook.schemas.record_category import RecordCategoryCreate, RecordCategoryResponse
from herdbook.services.export import ExportColumn
from herdbook.services.record_store import ListFilters, RecordStore

router = APIRouter(prefix="/api/v1/record-categories", tags=["record-categories"])

store = RecordStore(
    RecordCategory, "RecordCategory",
    key=RecordCategory.id,
    search_columns=(
        RecordCategory.record_category,
        RecordCategory.examples,
        RecordCategory.retention_period,
        RecordCategory.format,
    ),
    date_column=RecordCategory.created_at,
)

EXPORT_COLUMNS = (
    ExportColumn("Record Category", "record_category"),
    ExportColumn("Examples", "examples"),
    ExportColumn("Frequency", "frequency"),
    ExportColumn("Retention Period", "retention_period"),
    ExportColumn("Format", "format"),
    ExportColumn("Created At", "created_at", format_created_at),
)


def _conditions(frequency: RecordFrequency | None) -> list:
    return [] if frequency is None else [RecordCategory.frequency == frequency.value]


@router.get("", response_model=list[RecordCategoryResponse])
async def list_record_categories(
    filters: ListFilters = Depends(list_filters),
    frequency: RecordFrequency | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await store.list_records(db, filters, *_conditions(frequency))


@router.post(
    "", response_model=RecordCategoryResponse, status_code=status.HTTP_201_CREATED,
)
async def create_record_category(
    body: RecordCategoryCreate, db: AsyncSession = Depends(get_db),
):
    return await store.create(db, body.model_dump())


@router.get("/export")
async def export_record_categories(
    filters: ListFilters = Depends(export_filters),
    frequency: RecordFrequency | None = Query(None),
    fmt: str = Depends(export_format),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    rows = await store.list_records(db, filters, *_conditions(frequency))
    return spreadsheet_response(
        fmt, "record_categories", "Record Keeping", EXPORT_COLUMNS, rows, today,
    )


@router.get("/{category_id}", response_model=RecordCategoryResponse)
async def get_record_category(category_id: int, db: AsyncSession = Depends(get_db)):
    return await store.get(db, category_id)


@router.put("/{category_id}", response_model=RecordCategoryResponse)
async def update_record_category(
    category_id: int, body: RecordCategoryCreate, db: AsyncSession = Depends(get_db),
):
    category = await store.get(db, category_id)
    return await store.update(db, category, body.model_dump())


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record_category(category_id: int, db: AsyncSession = Depends(get_db)):
    category = await store.get(db, category_id)
    await store.delete(db, category)
