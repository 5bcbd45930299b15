"""Shared schema bases — ownership field on input, audit fields on output.

Invariants:
    - Every input strips surrounding whitespace from strings
    - Every response exposes supervisor_id, created_at, updated_at
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RecordIn(BaseModel):
    """Base for create/update bodies."""
    model_config = ConfigDict(
        str_strip_whitespace=True, use_enum_values=True, validate_default=True,
    )

    supervisor_id: str | None = Field(None, max_length=64)


class RecordOut(BaseModel):
    """Base for register responses, read straight from ORM rows."""
    model_config = ConfigDict(from_attributes=True)

    supervisor_id: str | None = None
    created_at: datetime
    updated_at: datetime
