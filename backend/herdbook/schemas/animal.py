"""Animal Schemas — tag and target milk validation.

Invariants:
    - animal_id: 1-50 chars, no surrounding whitespace
    - target_milk > 0 litres/day
    - AnimalPatch: every field optional, at least one must be sent
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from herdbook.schemas.common import RecordIn, RecordOut


class AnimalCreate(RecordIn):
    animal_id: str = Field(min_length=1, max_length=50)
    target_milk: float = Field(gt=0)
    is_active: bool = True


_REQUIRED_ON_PATCH = ("animal_id", "target_milk", "is_active")


class AnimalPatch(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    animal_id: str | None = Field(None, min_length=1, max_length=50)
    target_milk: float | None = Field(None, gt=0)
    is_active: bool | None = None

    @model_validator(mode="after")
    def require_some_field(self):
        if not self.model_fields_set:
            raise ValueError("at least one field must be provided")
        for name in _REQUIRED_ON_PATCH:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class AnimalResponse(RecordOut):
    animal_id: str
    target_milk: float
    is_active: bool


class NextAnimalId(BaseModel):
    animal_id: str
