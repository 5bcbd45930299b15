"""Milk Rejection Schemas."""

import datetime

from pydantic import Field

from herdbook.schemas.common import RecordIn, RecordOut


class MilkRejectionCreate(RecordIn):
    date: datetime.date
    rejection_reason: str = Field(min_length=1, max_length=200)
    animal_or_batch: str = Field(min_length=1, max_length=100)
    action_taken: str = Field(min_length=1, max_length=2000)
    responsible_person: str = Field(min_length=1, max_length=120)
    remarks: str | None = Field(None, max_length=2000)


class MilkRejectionResponse(RecordOut):
    id: int
    date: datetime.date
    rejection_reason: str
    animal_or_batch: str
    action_taken: str
    responsible_person: str
    remarks: str | None = None
