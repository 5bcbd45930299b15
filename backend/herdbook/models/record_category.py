"""Record Category ORM — which registers are kept, how often, and for how long.

Invariants:
    - frequency in {Daily, Weekly, Monthly}
    - No business date: range filters apply to created_at
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from herdbook.db.base import Base, RecordMixin


class RecordCategory(RecordMixin, Base):
    __tablename__ = "record_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    record_category: Mapped[str] = mapped_column(String(120), nullable=False)
    examples: Mapped[str] = mapped_column(Text, nullable=False)
    frequency: Mapped[str] = mapped_column(String(10), nullable=False, default="Daily")
    retention_period: Mapped[str] = mapped_column(String(60), nullable=False)
    format: Mapped[str] = mapped_column(String(60), nullable=False)
