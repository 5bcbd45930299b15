"""Record Store — filtering, ordering, duplicates and soft toggle against SQLite.

Invariants:
    - Lists newest first, date range inclusive, search case-insensitive across columns
    - supervisor scoping bypassed by all_supervisors
    - A duplicate natural key is a DuplicateRecordError, not a database error
"""

from datetime import date, timedelta
from typing import get_type_hints

import pytest

from herdbook.core.errors import (
    DuplicateRecordError, RecordValidationError, ResourceNotFoundError,
)
from herdbook.models.animal import Animal
from herdbook.models.milk_rejection import MilkRejection
from herdbook.services.record_store import ListFilters, RecordStore

animals = RecordStore(
    Animal, "Animal", key=Animal.animal_id,
    search_columns=(Animal.animal_id,), date_column=Animal.created_at,
)
rejections = RecordStore(
    MilkRejection, "MilkRejection", key=MilkRejection.id,
    search_columns=(MilkRejection.rejection_reason, MilkRejection.animal_or_batch),
    date_column=MilkRejection.date,
)


def _rejection(day: int, reason: str = "High SCC", batch: str = "B-1", supervisor=None) -> dict:
    return {
        "date": date(2026, 10, day),
        "rejection_reason": reason,
        "animal_or_batch": batch,
        "action_taken": "Discarded",
        "responsible_person": "Ravi",
        "supervisor_id": supervisor,
    }


async def test_create_and_get(test_db):
    await animals.create(test_db, {"animal_id": "COW-001", "target_milk": 12.0})
    animal = await animals.get(test_db, "COW-001")
    assert animal.target_milk == 12.0
    assert animal.is_active is True


async def test_get_missing_raises_not_found(test_db):
    with pytest.raises(ResourceNotFoundError):
        await animals.get(test_db, "COW-404")


async def test_duplicate_key_raises_conflict(test_db):
    await animals.create(test_db, {"animal_id": "COW-001", "target_milk": 12.0})
    with pytest.raises(DuplicateRecordError):
        await animals.create(test_db, {"animal_id": "COW-001", "target_milk": 9.0})


async def test_rename_onto_existing_key_raises_conflict(test_db):
    await animals.create(test_db, {"animal_id": "COW-001", "target_milk": 12.0})
    second = await animals.create(test_db, {"animal_id": "COW-002", "target_milk": 10.0})
    with pytest.raises(DuplicateRecordError):
        await animals.update(test_db, second, {"animal_id": "COW-001"})


async def test_list_newest_first(test_db):
    for tag in ("COW-001", "COW-002", "COW-003"):
        await animals.create(test_db, {"animal_id": tag, "target_milk": 10.0})
    rows = await animals.list_records(test_db, ListFilters())
    assert [r.animal_id for r in rows] == ["COW-003", "COW-002", "COW-001"]


async def test_date_range_inclusive_both_ends(test_db):
    for day in (10, 11, 12, 13):
        await rejections.create(test_db, _rejection(day))
    rows = await rejections.list_records(
        test_db, ListFilters(start_date=date(2026, 10, 11), end_date=date(2026, 10, 12)),
    )
    assert sorted(r.date.day for r in rows) == [11, 12]


async def test_timestamp_range_covers_whole_end_day(test_db):
    animal = await animals.create(test_db, {"animal_id": "COW-001", "target_milk": 10.0})
    created = animal.created_at.date()
    rows = await animals.list_records(test_db, ListFilters(start_date=created, end_date=created))
    assert len(rows) == 1
    rows = await animals.list_records(
        test_db, ListFilters(end_date=created - timedelta(days=1)),
    )
    assert rows == []


async def test_search_is_case_insensitive_across_columns(test_db):
    await rejections.create(test_db, _rejection(10, reason="Antibiotic residue"))
    await rejections.create(test_db, _rejection(11, batch="TANK-ANTI"))
    await rejections.create(test_db, _rejection(12, reason="Off smell"))
    rows = await rejections.list_records(test_db, ListFilters(search="anti"))
    assert len(rows) == 2


async def test_search_wildcards_are_literal(test_db):
    await rejections.create(test_db, _rejection(10, reason="100% sour"))
    await rejections.create(test_db, _rejection(11, reason="Clots"))
    rows = await rejections.list_records(test_db, ListFilters(search="%"))
    assert [r.rejection_reason for r in rows] == ["100% sour"]


async def test_supervisor_scoping_and_bypass(test_db):
    await rejections.create(test_db, _rejection(10, supervisor="sup-1"))
    await rejections.create(test_db, _rejection(11, supervisor="sup-2"))
    scoped = await rejections.list_records(test_db, ListFilters(supervisor_id="sup-1"))
    assert len(scoped) == 1
    everyone = await rejections.list_records(
        test_db, ListFilters(supervisor_id="sup-1", all_supervisors=True),
    )
    assert len(everyone) == 2


async def test_limit_and_offset(test_db):
    for day in (10, 11, 12):
        await rejections.create(test_db, _rejection(day))
    rows = await rejections.list_records(test_db, ListFilters(limit=1, offset=1))
    assert len(rows) == 1


async def test_update_without_supervisor_keeps_owner(test_db):
    record = await rejections.create(test_db, _rejection(10, supervisor="sup-1"))
    record = await rejections.update(test_db, record, {**_rejection(10), "remarks": "ok"})
    assert record.supervisor_id == "sup-1"
    assert record.remarks == "ok"


async def test_set_active_is_a_soft_toggle(test_db):
    animal = await animals.create(test_db, {"animal_id": "COW-001", "target_milk": 10.0})
    animal = await animals.set_active(test_db, animal, False)
    assert animal.is_active is False
    assert await animals.find(test_db, "COW-001") is not None


async def test_delete_removes_row(test_db):
    record = await rejections.create(test_db, _rejection(10))
    await rejections.delete(test_db, record)
    assert await rejections.find(test_db, record.id) is None


async def test_keys_with_prefix(test_db):
    for tag in ("COW-001", "COW-002", "CALF-001"):
        await animals.create(test_db, {"animal_id": tag, "target_milk": 10.0})
    assert sorted(await animals.keys_with_prefix(test_db, "COW-")) == ["COW-001", "COW-002"]


def test_inverted_range_rejected():
    with pytest.raises(RecordValidationError):
        ListFilters(start_date=date(2026, 10, 12), end_date=date(2026, 10, 11))


def test_blank_search_ignored():
    assert ListFilters(search="   ").search is None


def test_method_names_leave_builtin_annotations_intact():
    assert not {"list", "dict", "tuple", "type"} & set(vars(RecordStore))
    assert get_type_hints(RecordStore.keys_with_prefix)["return"] == list[str]
