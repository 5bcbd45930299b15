"""Animal ORM — the milking herd, keyed by the tag painted on the animal.

Invariants:
    - animal_id is the natural primary key (unique tag, e.g. COW-014)
    - target_milk is litres/day expected from the animal (> 0, checked by schema)
    - is_active flips instead of deleting: yield history keeps referring to the tag

Design Decisions:
    - Natural key over surrogate: every register refers to animals by tag
"""

from sqlalchemy import Boolean, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from herdbook.db.base import Base, RecordMixin


class Animal(RecordMixin, Base):
    """A cow in the milking herd."""
    __tablename__ = "animals"

    animal_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    target_milk: Mapped[float] = mapped_column(Float, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
