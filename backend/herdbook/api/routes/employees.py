"""Employees — staff register with server-assigned, year-scoped ids.

Invariants:
    - employee_id, when omitted, is {farm_code}-{year}{serial:03d} with serial = max + 1
    - A caller-supplied employee_id that already exists is 409
    - employee_id is immutable after create (PUT/PATCH bodies do not carry it)
    - toggle-active flips is_active and returns the updated employee

Design Decisions:
    - Generated ids retry on a unique-key collision: two concurrent creates can
      read the same max serial, the loser regenerates from the new max
"""

import datetime
import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from herdbook.api.dependencies import (
    export_filters, export_format, get_today, list_filters, spreadsheet_response,
)
from herdbook.config import get_settings
from herdbook.core.errors import DuplicateRecordError
from herdbook.core.formatting import format_created_at, format_inr
from herdbook.core.identifiers import employee_id_prefix, next_employee_id
from herdbook.infrastructure.database import get_db
from herdbook.models.employee import Employee
from herdbook.schemas.employee import (
    EmployeeCreate, EmployeePatch, EmployeeResponse, EmployeeUpdate, NextEmployeeId,
)
from herdbook.services.export import ExportColumn
from herdbook.services.record_store import ListFilters, RecordStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/employees", tags=["employees"])

MAX_ID_ATTEMPTS = 3

store = RecordStore(
    Employee, "Employee",
    key=Employee.employee_id,
    search_columns=(Employee.employee_id, Employee.staff_name, Employee.designation),
    date_column=Employee.created_at,
)

EXPORT_COLUMNS = (
    ExportColumn("Employee ID", "employee_id"),
    ExportColumn("Staff Name", "staff_name"),
    ExportColumn("Designation", "designation"),
    ExportColumn("Payment / Day", "payment_per_day", format_inr),
    ExportColumn("Status", "is_active", lambda v: "Active" if v else "Inactive"),
    ExportColumn("Created At", "created_at", format_created_at),
)


def _conditions(is_active: bool | None, designation: str | None) -> list:
    conditions = []
    if is_active is not None:
        conditions.append(Employee.is_active == is_active)
    if designation:
        conditions.append(func.lower(Employee.designation) == designation.strip().lower())
    return conditions


async def _generate_id(db: AsyncSession, today: datetime.date) -> str:
    farm_code = get_settings().farm_code
    existing = await store.keys_with_prefix(db, employee_id_prefix(farm_code, today.year))
    return next_employee_id(existing, today.year, farm_code)


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    filters: ListFilters = Depends(list_filters),
    is_active: bool | None = Query(None),
    designation: str | None = Query(None, max_length=120),
    db: AsyncSession = Depends(get_db),
):
    return await store.list_records(db, filters, *_conditions(is_active, designation))


@router.post(
    "", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate,
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Create an employee, assigning the next id when none is given."""
    values = body.model_dump()
    if values["employee_id"] is not None:
        return await store.create(db, values)

    for attempt in range(1, MAX_ID_ATTEMPTS + 1):
        values["employee_id"] = await _generate_id(db, today)
        try:
            return await store.create(db, values)
        except DuplicateRecordError:
            if attempt == MAX_ID_ATTEMPTS:
                raise
            logger.warning(
                f"Generated employee id {values['employee_id']} taken, retrying",
                extra={"resource": "Employee", "record_id": values["employee_id"]},
            )


@router.get("/next-id", response_model=NextEmployeeId)
async def suggest_employee_id(
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Preview of the id the next create would assign."""
    return NextEmployeeId(employee_id=await _generate_id(db, today))


@router.get("/export")
async def export_employees(
    filters: ListFilters = Depends(export_filters),
    is_active: bool | None = Query(None),
    designation: str | None = Query(None, max_length=120),
    fmt: str = Depends(export_format),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    rows = await store.list_records(db, filters, *_conditions(is_active, designation))
    return spreadsheet_response(
        fmt, "employees", "Employees", EXPORT_COLUMNS, rows, today,
    )


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: str, db: AsyncSession = Depends(get_db)):
    return await store.get(db, employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def replace_employee(
    employee_id: str, body: EmployeeUpdate, db: AsyncSession = Depends(get_db),
):
    employee = await store.get(db, employee_id)
    return await store.update(db, employee, body.model_dump())


@router.patch("/{employee_id}", response_model=EmployeeResponse)
async def patch_employee(
    employee_id: str, body: EmployeePatch, db: AsyncSession = Depends(get_db),
):
    employee = await store.get(db, employee_id)
    return await store.update(db, employee, body.model_dump(exclude_unset=True))


@router.post("/{employee_id}/toggle-active", response_model=EmployeeResponse)
async def toggle_employee(employee_id: str, db: AsyncSession = Depends(get_db)):
    employee = await store.get(db, employee_id)
    return await store.set_active(db, employee, not employee.is_active)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: str, db: AsyncSession = Depends(get_db)):
    employee = await store.get(db, employee_id)
    await store.delete(db, employee)
