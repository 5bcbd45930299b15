"""Record Store — async CRUD, search and date-range filtering shared by every register.

Invariants:
    - Lists are newest first: created_at DESC, then key DESC as tie-breaker
    - Free-text search is a case-insensitive substring match OR-ed across search columns
    - Date range is inclusive on both ends; on timestamp columns end_date covers the whole day
    - supervisor_id scoping applies unless all_supervisors is set
    - Unique-key violations surface as DuplicateRecordError (409), never as 503
    - supervisor_id is never cleared by an update that omits it

Design Decisions:
    - One configurable class instead of per-register repositories: the registers
      differ only in columns, so routes keep the register-specific rules
    - Session passed per call (not stored): the store is a module-level singleton
      per register while sessions are per request
"""

import datetime
import logging
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from sqlalchemy import DateTime, Select, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from herdbook.core.errors import (
    DuplicateRecordError, RecordValidationError, ResourceNotFoundError,
)
from herdbook.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


@dataclass
class ListFilters:
    """Query-string filters every register list and export accepts."""
    search: str | None = None
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    supervisor_id: str | None = None
    all_supervisors: bool = False
    limit: int | None = None
    offset: int = 0

    def __post_init__(self):
        if self.search is not None:
            self.search = self.search.strip() or None
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise RecordValidationError(
                "start_date cannot be after end_date", "start_date",
            )


class RecordStore(Generic[ModelT]):
    """CRUD operations for one register table."""

    def __init__(
        self,
        model: type[ModelT],
        resource: str,
        key: InstrumentedAttribute,
        search_columns: tuple[InstrumentedAttribute, ...],
        date_column: InstrumentedAttribute,
    ):
        self.model = model
        self.resource = resource
        self.key = key
        self.search_columns = search_columns
        self.date_column = date_column

    # ─── Queries ────────────────────────────────────────────────

    def build_query(self, filters: ListFilters, *conditions: Any) -> Select:
        """SELECT for a filtered, newest-first list (no pagination)."""
        query = select(self.model)
        if filters.search and self.search_columns:
            query = query.where(_any_contains(self.search_columns, filters.search))
        if filters.start_date:
            query = query.where(self.date_column >= self._range_start(filters.start_date))
        if filters.end_date:
            query = query.where(self._before_end(filters.end_date))
        if filters.supervisor_id and not filters.all_supervisors:
            query = query.where(self.model.supervisor_id == filters.supervisor_id)
        for condition in conditions:
            query = query.where(condition)
        return query.order_by(self.model.created_at.desc(), self.key.desc())

    async def list_records(
        self, db: AsyncSession, filters: ListFilters, *conditions: Any,
    ) -> list[ModelT]:
        query = self.build_query(filters, *conditions)
        if filters.offset:
            query = query.offset(filters.offset)
        if filters.limit:
            query = query.limit(filters.limit)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find(self, db: AsyncSession, key_value: Any) -> ModelT | None:
        return await db.get(self.model, key_value)

    async def get(self, db: AsyncSession, key_value: Any) -> ModelT:
        """Get record or raise 404."""
        record = await self.find(db, key_value)
        if record is None:
            raise ResourceNotFoundError(self.resource, str(key_value))
        return record

    async def keys_with_prefix(self, db: AsyncSession, prefix: str) -> list[str]:
        """Natural keys starting with prefix, for id generation."""
        result = await db.execute(
            select(self.key).where(self.key.startswith(prefix, autoescape=True)),
        )
        return list(result.scalars().all())

    # ─── Writes ─────────────────────────────────────────────────

    async def create(self, db: AsyncSession, values: dict[str, Any]) -> ModelT:
        key_name = self.key.key
        key_value = values.get(key_name)
        if key_value is not None and await self.find(db, key_value) is not None:
            raise DuplicateRecordError(self.resource, str(key_value))
        record = self.model(**values)
        db.add(record)
        await self._commit(db, key_value)
        await db.refresh(record)
        logger.info(
            f"{self.resource} created",
            extra={"resource": self.resource, "record_id": str(getattr(record, key_name))},
        )
        return record

    async def update(
        self, db: AsyncSession, record: ModelT, values: dict[str, Any],
    ) -> ModelT:
        """Apply values to a loaded record and commit."""
        await self.stage_update(db, record, values)
        return await self.commit_update(db, record)

    async def stage_update(
        self, db: AsyncSession, record: ModelT, values: dict[str, Any],
    ) -> None:
        """Apply values and flush inside the open transaction, without committing.

        Lets a route add dependent writes (e.g. moving child rows on a key
        change) that commit or roll back together with the record.
        """
        values = dict(values)
        if values.get("supervisor_id") is None:
            values.pop("supervisor_id", None)
        key_name = self.key.key
        old_key = getattr(record, key_name)
        new_key = values.get(key_name, old_key)
        if new_key != old_key and await self.find(db, new_key) is not None:
            raise DuplicateRecordError(self.resource, str(new_key))
        for name, value in values.items():
            setattr(record, name, value)
        try:
            await db.flush()
        except IntegrityError as e:
            await self._integrity_failure(db, e, new_key)

    async def commit_update(self, db: AsyncSession, record: ModelT) -> ModelT:
        key_value = getattr(record, self.key.key)
        await self._commit(db, key_value)
        await db.refresh(record)
        logger.info(
            f"{self.resource} updated",
            extra={"resource": self.resource, "record_id": str(key_value)},
        )
        return record

    async def delete(self, db: AsyncSession, record: ModelT) -> None:
        key_value = str(getattr(record, self.key.key))
        await db.delete(record)
        await db.commit()
        logger.info(
            f"{self.resource} deleted",
            extra={"resource": self.resource, "record_id": key_value},
        )

    async def set_active(self, db: AsyncSession, record: ModelT, is_active: bool) -> ModelT:
        """Soft toggle — the row stays, only is_active changes."""
        return await self.update(db, record, {"is_active": is_active})

    # ─── Helpers ────────────────────────────────────────────────

    async def _commit(self, db: AsyncSession, key_value: Any) -> None:
        try:
            await db.commit()
        except IntegrityError as e:
            await self._integrity_failure(db, e, key_value)

    async def _integrity_failure(
        self, db: AsyncSession, error: IntegrityError, key_value: Any,
    ) -> NoReturn:
        await db.rollback()
        logger.warning(
            f"{self.resource} integrity error: {error.orig}",
            extra={"resource": self.resource},
        )
        raise DuplicateRecordError(self.resource, str(key_value))

    def _is_timestamp(self) -> bool:
        return isinstance(self.date_column.type, DateTime)

    def _range_start(self, day: datetime.date):
        if self._is_timestamp():
            return datetime.datetime.combine(day, datetime.time.min, tzinfo=datetime.timezone.utc)
        return day

    def _before_end(self, day: datetime.date):
        if self._is_timestamp():
            next_day = datetime.datetime.combine(
                day + datetime.timedelta(days=1), datetime.time.min,
                tzinfo=datetime.timezone.utc,
            )
            return self.date_column < next_day
        return self.date_column <= day


def _any_contains(columns: tuple[InstrumentedAttribute, ...], term: str):
    return or_(*(column.icontains(term, autoescape=True) for column in columns))
