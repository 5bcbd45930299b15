"""Repair Logs — shed inspections, damage found, and when repairs were completed.

Invariants:
    - completed_on is cleared whenever repair_needed is N, on create and update
"""

import datetime

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from herdbook.api.dependencies import (
    export_filters, export_format, get_today, list_filters, spreadsheet_response,
)
from herdbook.core.derived_fields import normalize_completed_on
from herdbook.core.domain_types import YesNo
from herdbook.core.formatting import format_created_at, format_display_date, yes_no_label
from herdbook.infrastructure.database import get_db
from herdbook.models.repair_log import RepairLog
from herdbook.schemas.repair_log import RepairLogCreate, RepairLogResponse
from herdbook.services.export import ExportColumn
from herdbook.services.record_store import ListFilters, RecordStore

router = APIRouter(prefix="/api/v1/repair-logs", tags=["repair-logs"])

store = RecordStore(
    RepairLog, "RepairLog",
    key=RepairLog.id,
    search_columns=(
        RepairLog.checked_area,
        RepairLog.damage_type,
        RepairLog.immediate_action,
        RepairLog.remarks,
    ),
    date_column=RepairLog.date,
)

EXPORT_COLUMNS = (
    ExportColumn("Date", "date", format_display_date),
    ExportColumn("Checked Area", "checked_area"),
    ExportColumn("Damage Type", "damage_type"),
    ExportColumn("Immediate Action", "immediate_action"),
    ExportColumn("Repair Needed", "repair_needed", yes_no_label),
    ExportColumn("Completed On", "completed_on", format_display_date),
    ExportColumn("Remarks", "remarks"),
    ExportColumn("Created At", "created_at", format_created_at),
)


def _conditions(repair_needed: YesNo | None) -> list:
    return [] if repair_needed is None else [RepairLog.repair_needed == repair_needed.value]


def _values(body: RepairLogCreate) -> dict:
    values = body.model_dump()
    values["completed_on"] = normalize_completed_on(
        values["repair_needed"], values["completed_on"],
    )
    return values


@router.get("", response_model=list[RepairLogResponse])
async def list_repair_logs(
    filters: ListFilters = Depends(list_filters),
    repair_needed: YesNo | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await store.list_records(db, filters, *_conditions(repair_needed))


@router.post(
    "", response_model=RepairLogResponse, status_code=status.HTTP_201_CREATED,
)
async def create_repair_log(body: RepairLogCreate, db: AsyncSession = Depends(get_db)):
    return await store.create(db, _values(body))


@router.get("/export")
async def export_repair_logs(
    filters: ListFilters = Depends(export_filters),
    repair_needed: YesNo | None = Query(None),
    fmt: str = Depends(export_format),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    rows = await store.list_records(db, filters, *_conditions(repair_needed))
    return spreadsheet_response(
        fmt, "repair_logs", "Repair Logs", EXPORT_COLUMNS, rows, today,
    )


@router.get("/{log_id}", response_model=RepairLogResponse)
async def get_repair_log(log_id: int, db: AsyncSession = Depends(get_db)):
    return await store.get(db, log_id)


@router.put("/{log_id}", response_model=RepairLogResponse)
async def update_repair_log(
    log_id: int, body: RepairLogCreate, db: AsyncSession = Depends(get_db),
):
    log = await store.get(db, log_id)
    return await store.update(db, log, _values(body))


@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_repair_log(log_id: int, db: AsyncSession = Depends(get_db)):
    log = await store.get(db, log_id)
    await store.delete(db, log)
