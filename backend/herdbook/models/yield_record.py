"""Yield Record ORM — one animal's morning and evening milk for a day.

Invariants:
    - animal_id references an Animal tag (FK, ON UPDATE CASCADE; no delete cascade,
      so an animal with history can only be deactivated)
    - Renames also move rows explicitly (api/routes/animals.py) for backends that
      do not enforce foreign keys
    - total_yield / total_cost are stored derived values, recomputed on every write
      (core/derived_fields.py) — never taken from the request

Design Decisions:
    - Totals persisted rather than computed in SELECT: exports and summaries read
      them directly and range filters stay index-friendly
"""

import datetime

from sqlalchemy import Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from herdbook.db.base import Base, RecordMixin


class YieldRecord(RecordMixin, Base):
    __tablename__ = "yield_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    animal_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("animals.animal_id", onupdate="CASCADE"),
        nullable=False, index=True,
    )
    morning_yield: Mapped[float] = mapped_column(Float, nullable=False)
    evening_yield: Mapped[float] = mapped_column(Float, nullable=False)
    total_yield: Mapped[float] = mapped_column(Float, nullable=False)
    cost_per_litre: Mapped[float | None] = mapped_column(Float, nullable=True)
    total_cost: Mapped[float | None] = mapped_column(Float, nullable=True)
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
