"""Vaccinations — doses given, next due dates, and their derived due status.

Invariants:
    - Every response carries status = classify_vaccination(next_due_date, today, window)
    - The status filter is the same classification expressed in SQL, so
      pagination counts only matching rows
    - Window = settings.vaccination_due_soon_days, inclusive

Design Decisions:
    - Status never stored: it changes with the calendar, not with the row
"""

import datetime

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from herdbook.api.dependencies import (
    export_filters, export_format, get_today, list_filters, spreadsheet_response,
)
from herdbook.config import get_settings
from herdbook.core.derived_fields import classify_vaccination
from herdbook.core.domain_types import AnimalType, VaccinationStatus
from herdbook.core.formatting import format_created_at, format_display_date
from herdbook.core.summaries import summarize_vaccinations
from herdbook.infrastructure.database import get_db
from herdbook.models.vaccination import VaccinationRecord
from herdbook.schemas.vaccination import (
    VaccinationCreate, VaccinationResponse, VaccinationSummary,
)
from herdbook.services.export import ExportColumn
from herdbook.services.record_store import ListFilters, RecordStore

router = APIRouter(prefix="/api/v1/vaccinations", tags=["vaccinations"])

store = RecordStore(
    VaccinationRecord, "Vaccination",
    key=VaccinationRecord.id,
    search_columns=(
        VaccinationRecord.animal_id,
        VaccinationRecord.vaccine_type,
        VaccinationRecord.batch_no,
        VaccinationRecord.administered_by,
        VaccinationRecord.remarks,
    ),
    date_column=VaccinationRecord.date,
)


def _export_columns(today: datetime.date, window: int) -> tuple[ExportColumn, ...]:
    return (
        ExportColumn("Date", "date", format_display_date),
        ExportColumn("Animal Type", "animal_type", str.capitalize),
        ExportColumn("Animal ID", "animal_id"),
        ExportColumn("Vaccine Type", "vaccine_type"),
        ExportColumn("Batch No", "batch_no"),
        ExportColumn("Administered By", "administered_by"),
        ExportColumn("Next Due Date", "next_due_date", format_display_date),
        ExportColumn(
            "Status", "next_due_date",
            lambda due: classify_vaccination(due, today, window).value,
        ),
        ExportColumn("Remarks", "remarks"),
        ExportColumn("Created At", "created_at", format_created_at),
    )


def _status_condition(wanted: VaccinationStatus, today: datetime.date, window: int):
    due = VaccinationRecord.next_due_date
    horizon = today + datetime.timedelta(days=window)
    if wanted == VaccinationStatus.OVERDUE:
        return due < today
    if wanted == VaccinationStatus.DUE_SOON:
        return due.between(today, horizon)
    return or_(due.is_(None), due > horizon)


def _conditions(
    animal_type: AnimalType | None,
    due_status: VaccinationStatus | None,
    today: datetime.date,
    window: int,
) -> list:
    conditions = []
    if animal_type is not None:
        conditions.append(VaccinationRecord.animal_type == animal_type.value)
    if due_status is not None:
        conditions.append(_status_condition(due_status, today, window))
    return conditions


def _respond(record: VaccinationRecord, today: datetime.date) -> VaccinationResponse:
    window = get_settings().vaccination_due_soon_days
    return VaccinationResponse.model_validate(record).model_copy(
        update={"status": classify_vaccination(record.next_due_date, today, window)},
    )


@router.get("", response_model=list[VaccinationResponse])
async def list_vaccinations(
    filters: ListFilters = Depends(list_filters),
    animal_type: AnimalType | None = Query(None),
    due_status: VaccinationStatus | None = Query(None, alias="status"),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    window = get_settings().vaccination_due_soon_days
    rows = await store.list_records(db, filters, *_conditions(animal_type, due_status, today, window))
    return [_respond(row, today) for row in rows]


@router.post(
    "", response_model=VaccinationResponse, status_code=status.HTTP_201_CREATED,
)
async def create_vaccination(
    body: VaccinationCreate,
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    record = await store.create(db, body.model_dump())
    return _respond(record, today)


@router.get("/summary", response_model=VaccinationSummary)
async def vaccination_summary(
    filters: ListFilters = Depends(export_filters),
    animal_type: AnimalType | None = Query(None),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Counts per due status for the filtered doses."""
    window = get_settings().vaccination_due_soon_days
    rows = await store.list_records(db, filters, *_conditions(animal_type, None, today, window))
    return VaccinationSummary(**summarize_vaccinations(rows, today, window))


@router.get("/export")
async def export_vaccinations(
    filters: ListFilters = Depends(export_filters),
    animal_type: AnimalType | None = Query(None),
    due_status: VaccinationStatus | None = Query(None, alias="status"),
    fmt: str = Depends(export_format),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    window = get_settings().vaccination_due_soon_days
    rows = await store.list_records(db, filters, *_conditions(animal_type, due_status, today, window))
    return spreadsheet_response(
        fmt, "vaccinations", "Vaccinations", _export_columns(today, window), rows, today,
    )


@router.get("/{vaccination_id}", response_model=VaccinationResponse)
async def get_vaccination(
    vaccination_id: int,
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    return _respond(await store.get(db, vaccination_id), today)


@router.put("/{vaccination_id}", response_model=VaccinationResponse)
async def update_vaccination(
    vaccination_id: int,
    body: VaccinationCreate,
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    record = await store.get(db, vaccination_id)
    record = await store.update(db, record, body.model_dump())
    return _respond(record, today)


@router.delete("/{vaccination_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vaccination(vaccination_id: int, db: AsyncSession = Depends(get_db)):
    record = await store.get(db, vaccination_id)
    await store.delete(db, record)
