"""Feed Inspection ORM — feed and water quality observations.

Invariants:
    - fit_for_use in {Y, N}
    - unfit_quantity_kg is NULL whenever fit_for_use == Y
"""

import datetime

from sqlalchemy import Date, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from herdbook.db.base import Base, RecordMixin


class FeedInspection(RecordMixin, Base):
    __tablename__ = "feed_inspections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    feed_type: Mapped[str] = mapped_column(String(40), nullable=False)
    appearance: Mapped[str] = mapped_column(String(200), nullable=False)
    smell: Mapped[str] = mapped_column(String(200), nullable=False)
    moisture_level: Mapped[str] = mapped_column(String(100), nullable=False)
    contamination: Mapped[str | None] = mapped_column(String(200), nullable=True)
    fit_for_use: Mapped[str] = mapped_column(String(1), nullable=False, default="Y")
    unfit_quantity_kg: Mapped[float | None] = mapped_column(Float, nullable=True)
    action_taken: Mapped[str | None] = mapped_column(Text, nullable=True)
