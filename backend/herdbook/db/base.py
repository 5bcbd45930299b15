"""SQLAlchemy Declarative Base — shared base class and audit columns for all ORM models.

Invariants:
    - All models inherit from Base
    - Every register row carries supervisor_id, created_at, updated_at via RecordMixin
    - updated_at is bumped by the ORM on every UPDATE

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - supervisor_id is an opaque string: identity is issued elsewhere, never verified here
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all Herdbook ORM models."""
    pass


class RecordMixin:
    """Ownership and audit columns shared by every register."""

    supervisor_id: Mapped[str | None] = mapped_column(
        String(64), nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )
