"""Repair Log ORM — shed damage found on inspection and how it was handled.

Invariants:
    - repair_needed in {Y, N}
    - completed_on is NULL whenever repair_needed == N, and never precedes date
"""

import datetime

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from herdbook.db.base import Base, RecordMixin


class RepairLog(RecordMixin, Base):
    __tablename__ = "repair_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    checked_area: Mapped[str] = mapped_column(String(120), nullable=False)
    damage_type: Mapped[str] = mapped_column(String(120), nullable=False)
    immediate_action: Mapped[str] = mapped_column(Text, nullable=False)
    repair_needed: Mapped[str] = mapped_column(String(1), nullable=False, default="N")
    completed_on: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
