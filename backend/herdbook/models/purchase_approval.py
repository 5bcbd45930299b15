"""Purchase Approval ORM — supervisor purchase requests awaiting an admin decision.

Invariants:
    - approval_status in {P, A, R}; starts at P
    - approved_by / approver_remarks only set by the decision operation
    - Rows leave P exactly once
"""

import datetime

from sqlalchemy import Date, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from herdbook.db.base import Base, RecordMixin


class PurchaseApproval(RecordMixin, Base):
    __tablename__ = "purchase_approvals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    item_type: Mapped[str] = mapped_column(String(20), nullable=False)
    item_requested: Mapped[str] = mapped_column(String(200), nullable=False)
    quantity: Mapped[float] = mapped_column(Float, nullable=False)
    requested_by: Mapped[str] = mapped_column(String(120), nullable=False)
    approval_status: Mapped[str] = mapped_column(
        String(1), nullable=False, default="P", index=True,
    )
    approved_by: Mapped[str | None] = mapped_column(String(120), nullable=True)
    requester_remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    approver_remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
