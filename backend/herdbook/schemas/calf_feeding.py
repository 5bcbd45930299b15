"""Calf Feeding Schemas — colostrum log and daily calf feed register.

Invariants:
    - weaning_date never precedes starter_feed_started
    - quantity_grams > 0; time_of_day is HH:MM (24h)
"""

import datetime

from pydantic import Field, model_validator

from herdbook.core.domain_types import CalfFeedType
from herdbook.schemas.common import RecordIn, RecordOut


class CalfFeedingCreate(RecordIn):
    calf_id: str = Field(min_length=1, max_length=50)
    colostrum_given: bool = False
    milk_feeding: str | None = Field(None, max_length=200)
    starter_feed_started: datetime.date | None = None
    weaning_date: datetime.date | None = None
    remarks: str | None = Field(None, max_length=2000)

    @model_validator(mode="after")
    def weaning_after_starter(self):
        if (
            self.starter_feed_started and self.weaning_date
            and self.weaning_date < self.starter_feed_started
        ):
            raise ValueError("weaning_date cannot be before starter_feed_started")
        return self


class CalfFeedingResponse(RecordOut):
    id: int
    calf_id: str
    colostrum_given: bool
    milk_feeding: str | None = None
    starter_feed_started: datetime.date | None = None
    weaning_date: datetime.date | None = None
    remarks: str | None = None


class CalfFeedRegisterCreate(RecordIn):
    date: datetime.date
    calf_id: str = Field(min_length=1, max_length=50)
    activity: str = Field(min_length=1, max_length=120)
    description: str | None = Field(None, max_length=2000)
    feed_type: CalfFeedType
    quantity_grams: float = Field(gt=0)
    frequency: str = Field(min_length=1, max_length=40)
    time_of_day: str = Field("08:00", pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    responsible_person: str = Field(min_length=1, max_length=120)
    record_log: str | None = Field(None, max_length=2000)


class CalfFeedRegisterResponse(RecordOut):
    id: int
    date: datetime.date
    calf_id: str
    activity: str
    description: str | None = None
    feed_type: CalfFeedType
    quantity_grams: float
    frequency: str
    time_of_day: str
    responsible_person: str
    record_log: str | None = None
