"""Milk Rejection ORM — milk quality checks that ended in rejection."""

import datetime

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from herdbook.db.base import Base, RecordMixin


class MilkRejection(RecordMixin, Base):
    __tablename__ = "milk_rejections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    rejection_reason: Mapped[str] = mapped_column(String(200), nullable=False)
    animal_or_batch: Mapped[str] = mapped_column(String(100), nullable=False)
    action_taken: Mapped[str] = mapped_column(Text, nullable=False)
    responsible_person: Mapped[str] = mapped_column(String(120), nullable=False)
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
