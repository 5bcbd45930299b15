"""Employee ORM — farm staff on daily wages.

Invariants:
    - employee_id follows {farm_code}-{year}{serial:03d} when server-generated
    - payment_per_day > 0 (checked by schema)

Design Decisions:
    - picture_url is a plain string: photo capture and upload live outside this service
"""

from sqlalchemy import Boolean, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from herdbook.db.base import Base, RecordMixin


class Employee(RecordMixin, Base):
    __tablename__ = "employees"

    employee_id: Mapped[str] = mapped_column(String(32), primary_key=True)
    staff_name: Mapped[str] = mapped_column(String(120), nullable=False)
    designation: Mapped[str] = mapped_column(String(120), nullable=False)
    payment_per_day: Mapped[float] = mapped_column(Float, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    picture_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
