"""Animals — herd register with soft toggle and tag suggestions.

Invariants:
    - animal_id is unique; renaming to an existing tag is 409
    - Renaming a tag carries its yield history along
    - Animals with yield history cannot be deleted (409), only deactivated
    - toggle-active flips is_active and returns the updated animal

Design Decisions:
    - PATCH for edits (the herd screen sends only changed fields), PUT kept for
      parity with the other registers
    - next-id suggests {prefix}{serial}; the caller may still choose any free tag
"""

import datetime
import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from herdbook.api.dependencies import (
    export_filters, export_format, get_today, list_filters, spreadsheet_response,
)
from herdbook.config import get_settings
from herdbook.core.errors import RecordInUseError
from herdbook.core.formatting import format_created_at
from herdbook.core.identifiers import next_serial_id
from herdbook.infrastructure.database import get_db
from herdbook.models.animal import Animal
from herdbook.models.yield_record import YieldRecord
from herdbook.schemas.animal import (
    AnimalCreate, AnimalPatch, AnimalResponse, NextAnimalId,
)
from herdbook.services.export import ExportColumn
from herdbook.services.record_store import ListFilters, RecordStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/animals", tags=["animals"])

store = RecordStore(
    Animal, "Animal",
    key=Animal.animal_id,
    search_columns=(Animal.animal_id,),
    date_column=Animal.created_at,
)

EXPORT_COLUMNS = (
    ExportColumn("Animal ID", "animal_id"),
    ExportColumn("Target Milk (L/day)", "target_milk"),
    ExportColumn("Status", "is_active", lambda v: "Active" if v else "Inactive"),
    ExportColumn("Created At", "created_at", format_created_at),
)


def _conditions(is_active: bool | None) -> list:
    return [] if is_active is None else [Animal.is_active == is_active]


async def _carry_yield_history(db: AsyncSession, old_id: str, new_id: str) -> None:
    await db.execute(
        update(YieldRecord)
        .where(YieldRecord.animal_id == old_id)
        .values(animal_id=new_id),
    )


async def _apply_changes(db: AsyncSession, animal: Animal, values: dict) -> Animal:
    """Update an animal; a new tag and its yield rows commit in one transaction."""
    old_id = animal.animal_id
    await store.stage_update(db, animal, values)
    if animal.animal_id != old_id:
        await _carry_yield_history(db, old_id, animal.animal_id)
    animal = await store.commit_update(db, animal)
    if animal.animal_id != old_id:
        logger.info(
            f"Animal {old_id} renamed to {animal.animal_id}",
            extra={"resource": "Animal", "record_id": animal.animal_id},
        )
    return animal


@router.get("", response_model=list[AnimalResponse])
async def list_animals(
    filters: ListFilters = Depends(list_filters),
    is_active: bool | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List animals, newest first."""
    return await store.list_records(db, filters, *_conditions(is_active))


@router.post(
    "", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED,
)
async def create_animal(body: AnimalCreate, db: AsyncSession = Depends(get_db)):
    return await store.create(db, body.model_dump())


@router.get("/next-id", response_model=NextAnimalId)
async def suggest_animal_id(
    prefix: str = Query(min_length=1, max_length=40),
    db: AsyncSession = Depends(get_db),
):
    """Suggest the next free tag for a prefix, e.g. COW- → COW-015."""
    existing = await store.keys_with_prefix(db, prefix)
    width = get_settings().animal_id_width
    return NextAnimalId(animal_id=next_serial_id(existing, prefix, width))


@router.get("/export")
async def export_animals(
    filters: ListFilters = Depends(export_filters),
    is_active: bool | None = Query(None),
    fmt: str = Depends(export_format),
    today: datetime.date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> Response:
    rows = await store.list_records(db, filters, *_conditions(is_active))
    return spreadsheet_response(
        fmt, "animals", "Animals", EXPORT_COLUMNS, rows, today,
    )


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal(animal_id: str, db: AsyncSession = Depends(get_db)):
    return await store.get(db, animal_id)


@router.put("/{animal_id}", response_model=AnimalResponse)
async def replace_animal(
    animal_id: str, body: AnimalCreate, db: AsyncSession = Depends(get_db),
):
    animal = await store.get(db, animal_id)
    return await _apply_changes(db, animal, body.model_dump())


@router.patch("/{animal_id}", response_model=AnimalResponse)
async def patch_animal(
    animal_id: str, body: AnimalPatch, db: AsyncSession = Depends(get_db),
):
    """Update only the fields sent."""
    animal = await store.get(db, animal_id)
    return await _apply_changes(db, animal, body.model_dump(exclude_unset=True))


@router.post("/{animal_id}/toggle-active", response_model=AnimalResponse)
async def toggle_animal(animal_id: str, db: AsyncSession = Depends(get_db)):
    animal = await store.get(db, animal_id)
    return await store.set_active(db, animal, not animal.is_active)


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal(animal_id: str, db: AsyncSession = Depends(get_db)):
    animal = await store.get(db, animal_id)
    history = await db.scalar(
        select(func.count()).select_from(YieldRecord)
        .where(YieldRecord.animal_id == animal_id),
    )
    if history:
        raise RecordInUseError("Animal", animal_id, f"{history} yield record(s)")
    await store.delete(db, animal)
