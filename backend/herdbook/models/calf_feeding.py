"""Calf Feeding ORM — colostrum log per calf and the daily calf feed register.

Invariants:
    - CalfFeedingRecord: one row per calf milestone set (colostrum, starter, weaning);
      weaning_date never precedes starter_feed_started
    - CalfFeedRegister: one row per feeding activity; quantity_grams > 0

Design Decisions:
    - Both tables in one module: they describe the same calves and are always
      migrated together
"""

import datetime

from sqlalchemy import Boolean, Date, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from herdbook.db.base import Base, RecordMixin


class CalfFeedingRecord(RecordMixin, Base):
    __tablename__ = "calf_feeding_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    calf_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    colostrum_given: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    milk_feeding: Mapped[str | None] = mapped_column(String(200), nullable=True)
    starter_feed_started: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    weaning_date: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)


class CalfFeedRegister(RecordMixin, Base):
    __tablename__ = "calf_feed_register"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    calf_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    activity: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    feed_type: Mapped[str] = mapped_column(String(30), nullable=False)
    quantity_grams: Mapped[float] = mapped_column(Float, nullable=False)
    frequency: Mapped[str] = mapped_column(String(40), nullable=False)
    time_of_day: Mapped[str] = mapped_column(String(5), nullable=False, default="08:00")
    responsible_person: Mapped[str] = mapped_column(String(120), nullable=False)
    record_log: Mapped[str | None] = mapped_column(Text, nullable=True)
