"""Repair Log Schemas.

Invariants:
    - completed_on never precedes the inspection date
"""

import datetime

from pydantic import Field, model_validator

from herdbook.core.domain_types import YesNo
from herdbook.schemas.common import RecordIn, RecordOut


class RepairLogCreate(RecordIn):
    date: datetime.date
    checked_area: str = Field(min_length=1, max_length=120)
    damage_type: str = Field(min_length=1, max_length=120)
    immediate_action: str = Field(min_length=1, max_length=2000)
    repair_needed: YesNo = YesNo.NO
    completed_on: datetime.date | None = None
    remarks: str | None = Field(None, max_length=2000)

    @model_validator(mode="after")
    def completion_after_inspection(self):
        if self.completed_on and self.completed_on < self.date:
            raise ValueError("completed_on cannot be before the inspection date")
        return self


class RepairLogResponse(RecordOut):
    id: int
    date: datetime.date
    checked_area: str
    damage_type: str
    immediate_action: str
    repair_needed: YesNo
    completed_on: datetime.date | None = None
    remarks: str | None = None
