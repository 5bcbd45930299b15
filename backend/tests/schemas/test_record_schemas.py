"""Record schemas — request validation for every register body.

Invariants:
    - Strings are stripped; empty required strings rejected
    - Cross-field date rules reject inverted dates
    - PATCH bodies need at least one field and never null a required column
    - Enum fields dump as their stored values
"""

from datetime import date

import pytest
from pydantic import ValidationError

from herdbook.schemas.animal import AnimalCreate, AnimalPatch
from herdbook.schemas.calf_feeding import CalfFeedingCreate, CalfFeedRegisterCreate
from herdbook.schemas.employee import EmployeeCreate, EmployeePatch
from herdbook.schemas.feed_inspection import FeedInspectionCreate
from herdbook.schemas.purchase_approval import PurchaseApprovalCreate, PurchaseDecision
from herdbook.schemas.repair_log import RepairLogCreate
from herdbook.schemas.vaccination import VaccinationCreate
from herdbook.schemas.yield_record import YieldRecordCreate


# --- Animals / Employees -----------------------------------------------------

def test_animal_id_is_stripped():
    assert AnimalCreate(animal_id="  COW-001 ", target_milk=10).animal_id == "COW-001"


def test_animal_target_milk_must_be_positive():
    with pytest.raises(ValidationError):
        AnimalCreate(animal_id="COW-001", target_milk=0)


def test_empty_patch_rejected():
    with pytest.raises(ValidationError):
        AnimalPatch()


def test_patch_cannot_null_required_field():
    with pytest.raises(ValidationError):
        AnimalPatch(target_milk=None)


def test_patch_dump_only_sent_fields():
    assert AnimalPatch(is_active=False).model_dump(exclude_unset=True) == {"is_active": False}


def test_employee_id_optional():
    body = EmployeeCreate(staff_name="Ravi", designation="Milker", payment_per_day=450)
    assert body.employee_id is None


def test_employee_blank_name_rejected():
    with pytest.raises(ValidationError):
        EmployeeCreate(staff_name="   ", designation="Milker", payment_per_day=450)


def test_employee_patch_may_clear_picture():
    body = EmployeePatch(picture_url=None)
    assert body.model_dump(exclude_unset=True) == {"picture_url": None}


# --- Purchase approvals ------------------------------------------------------

def _request(**overrides):
    data = {
        "date": date(2026, 10, 18), "item_type": "FEED", "item_requested": "Silage",
        "quantity": 20, "requested_by": "Ravi",
    }
    data.update(overrides)
    return PurchaseApprovalCreate(**data)


def test_item_type_dumps_stored_value():
    assert _request().model_dump()["item_type"] == "FEED"


def test_unknown_item_type_rejected():
    with pytest.raises(ValidationError):
        _request(item_type="TRACTOR")


def test_quantity_must_be_positive():
    with pytest.raises(ValidationError):
        _request(quantity=0)


def test_reject_requires_remarks():
    with pytest.raises(ValidationError):
        PurchaseDecision(decision="reject", approved_by="Admin")


def test_reject_cannot_change_quantity():
    with pytest.raises(ValidationError):
        PurchaseDecision(
            decision="reject", approved_by="Admin", approver_remarks="no", quantity=5,
        )


def test_approve_may_adjust_quantity():
    body = PurchaseDecision(decision="approve", approved_by="Admin", quantity=15)
    assert body.quantity == 15


# --- Registers ---------------------------------------------------------------

def test_yield_rejects_negative_litres():
    with pytest.raises(ValidationError):
        YieldRecordCreate(
            date=date(2026, 10, 18), animal_id="COW-001", morning_yield=-1, evening_yield=2,
        )


def test_feed_inspection_defaults_fit():
    body = FeedInspectionCreate(
        date=date(2026, 10, 18), feed_type="Silage", appearance="Good",
        smell="Normal", moisture_level="Low",
    )
    assert body.model_dump()["fit_for_use"] == "Y"


def test_repair_completion_before_inspection_rejected():
    with pytest.raises(ValidationError):
        RepairLogCreate(
            date=date(2026, 10, 18), checked_area="Shed 2", damage_type="Roof",
            immediate_action="Tarp", repair_needed="Y", completed_on=date(2026, 10, 1),
        )


def test_vaccination_due_before_dose_rejected():
    with pytest.raises(ValidationError):
        VaccinationCreate(
            date=date(2026, 10, 18), animal_id="COW-001", vaccine_type="FMD",
            batch_no="B1", administered_by="Vet", next_due_date=date(2026, 10, 1),
        )


def test_weaning_before_starter_rejected():
    with pytest.raises(ValidationError):
        CalfFeedingCreate(
            calf_id="CALF-01", starter_feed_started=date(2026, 10, 10),
            weaning_date=date(2026, 10, 1),
        )


def test_time_of_day_must_be_24h():
    base = {
        "date": date(2026, 10, 18), "calf_id": "CALF-01", "activity": "Feeding",
        "feed_type": "Calf Starter", "quantity_grams": 250, "frequency": "Twice daily",
        "responsible_person": "Ravi",
    }
    assert CalfFeedRegisterCreate(**base).time_of_day == "08:00"
    with pytest.raises(ValidationError):
        CalfFeedRegisterCreate(**base, time_of_day="25:00")
