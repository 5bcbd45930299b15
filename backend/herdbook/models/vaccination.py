"""Vaccination ORM — doses given and when the next one falls due.

Invariants:
    - animal_type in {cow, calf}; calves are not in the animals table, so
      animal_id is free text rather than a foreign key
    - next_due_date never precedes date
    - Due status is NOT stored: classify_vaccination() derives it per request
"""

import datetime

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from herdbook.db.base import Base, RecordMixin


class VaccinationRecord(RecordMixin, Base):
    __tablename__ = "vaccination_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    animal_type: Mapped[str] = mapped_column(String(10), nullable=False, default="cow")
    animal_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    vaccine_type: Mapped[str] = mapped_column(String(120), nullable=False)
    batch_no: Mapped[str] = mapped_column(String(60), nullable=False)
    administered_by: Mapped[str] = mapped_column(String(120), nullable=False)
    next_due_date: Mapped[datetime.date | None] = mapped_column(Date, nullable=True, index=True)
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
