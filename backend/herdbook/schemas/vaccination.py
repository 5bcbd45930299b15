"""Vaccination Schemas — dose records with a derived due status.

Invariants:
    - next_due_date never precedes the vaccination date
    - status is response-only, filled from classify_vaccination()
"""

import datetime

from pydantic import BaseModel, Field, model_validator

from herdbook.core.domain_types import AnimalType, VaccinationStatus
from herdbook.schemas.common import RecordIn, RecordOut


class VaccinationCreate(RecordIn):
    date: datetime.date
    animal_type: AnimalType = AnimalType.COW
    animal_id: str = Field(min_length=1, max_length=50)
    vaccine_type: str = Field(min_length=1, max_length=120)
    batch_no: str = Field(min_length=1, max_length=60)
    administered_by: str = Field(min_length=1, max_length=120)
    next_due_date: datetime.date | None = None
    remarks: str | None = Field(None, max_length=2000)

    @model_validator(mode="after")
    def due_after_dose(self):
        if self.next_due_date and self.next_due_date < self.date:
            raise ValueError("next_due_date cannot be before the vaccination date")
        return self


class VaccinationResponse(RecordOut):
    id: int
    date: datetime.date
    animal_type: AnimalType
    animal_id: str
    vaccine_type: str
    batch_no: str
    administered_by: str
    next_due_date: datetime.date | None = None
    remarks: str | None = None
    status: VaccinationStatus = VaccinationStatus.SCHEDULED


class VaccinationSummary(BaseModel):
    total_records: int
    by_status: dict[str, int]
