"""Employee Schemas — staff details and daily wage.

Invariants:
    - staff_name / designation non-empty after strip
    - payment_per_day > 0
    - employee_id optional on create: server generates {farm_code}-{year}{serial}
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from herdbook.schemas.common import RecordIn, RecordOut


class EmployeeCreate(RecordIn):
    employee_id: str | None = Field(None, min_length=1, max_length=32)
    staff_name: str = Field(min_length=1, max_length=120)
    designation: str = Field(min_length=1, max_length=120)
    payment_per_day: float = Field(gt=0)
    is_active: bool = True
    picture_url: str | None = Field(None, max_length=500)


class EmployeeUpdate(RecordIn):
    staff_name: str = Field(min_length=1, max_length=120)
    designation: str = Field(min_length=1, max_length=120)
    payment_per_day: float = Field(gt=0)
    is_active: bool = True
    picture_url: str | None = Field(None, max_length=500)


_REQUIRED_ON_PATCH = ("staff_name", "designation", "payment_per_day", "is_active")


class EmployeePatch(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    staff_name: str | None = Field(None, min_length=1, max_length=120)
    designation: str | None = Field(None, min_length=1, max_length=120)
    payment_per_day: float | None = Field(None, gt=0)
    is_active: bool | None = None
    picture_url: str | None = Field(None, max_length=500)

    @model_validator(mode="after")
    def require_some_field(self):
        if not self.model_fields_set:
            raise ValueError("at least one field must be provided")
        for name in _REQUIRED_ON_PATCH:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class EmployeeResponse(RecordOut):
    employee_id: str
    staff_name: str
    designation: str
    payment_per_day: float
    is_active: bool
    picture_url: str | None = None


class NextEmployeeId(BaseModel):
    employee_id: str
