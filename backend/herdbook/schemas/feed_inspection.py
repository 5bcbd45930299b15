"""Feed Inspection Schemas — quality observations on feed and water."""

import datetime

from pydantic import Field

from herdbook.core.domain_types import FeedType, YesNo
from herdbook.schemas.common import RecordIn, RecordOut


class FeedInspectionCreate(RecordIn):
    date: datetime.date
    feed_type: FeedType
    appearance: str = Field(min_length=1, max_length=200)
    smell: str = Field(min_length=1, max_length=200)
    moisture_level: str = Field(min_length=1, max_length=100)
    contamination: str | None = Field(None, max_length=200)
    fit_for_use: YesNo = YesNo.YES
    unfit_quantity_kg: float | None = Field(None, ge=0)
    action_taken: str | None = Field(None, max_length=2000)


class FeedInspectionResponse(RecordOut):
    id: int
    date: datetime.date
    feed_type: FeedType
    appearance: str
    smell: str
    moisture_level: str
    contamination: str | None = None
    fit_for_use: YesNo
    unfit_quantity_kg: float | None = None
    action_taken: str | None = None
