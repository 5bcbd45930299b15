"""Record Category Schemas — retention policy per register."""

from pydantic import Field

from herdbook.core.domain_types import RecordFrequency
from herdbook.schemas.common import RecordIn, RecordOut


class RecordCategoryCreate(RecordIn):
    record_category: str = Field(min_length=1, max_length=120)
    examples: str = Field(min_length=1, max_length=2000)
    frequency: RecordFrequency = RecordFrequency.DAILY
    retention_period: str = Field(min_length=1, max_length=60)
    format: str = Field(min_length=1, max_length=60)


class RecordCategoryResponse(RecordOut):
    id: int
    record_category: str
    examples: str
    frequency: RecordFrequency
    retention_period: str
    format: str
