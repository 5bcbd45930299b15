"""Yield Record Schemas — milk quantities in, recomputed totals out.

Invariants:
    - morning_yield, evening_yield >= 0 litres
    - cost_per_litre >= 0 when given
    - total_yield / total_cost are response-only: a client cannot set them
"""

import datetime

from pydantic import BaseModel, Field

from herdbook.schemas.common import RecordIn, RecordOut


class YieldRecordCreate(RecordIn):
    date: datetime.date
    animal_id: str = Field(min_length=1, max_length=50)
    morning_yield: float = Field(ge=0)
    evening_yield: float = Field(ge=0)
    cost_per_litre: float | None = Field(None, ge=0)
    remarks: str | None = Field(None, max_length=2000)


class YieldRecordResponse(RecordOut):
    id: int
    date: datetime.date
    animal_id: str
    morning_yield: float
    evening_yield: float
    total_yield: float
    cost_per_litre: float | None = None
    total_cost: float | None = None
    remarks: str | None = None


class YieldSummary(BaseModel):
    total_records: int
    total_yield: float
    total_cost: float
    average_yield: float
    total_yield_display: str
    total_cost_display: str
