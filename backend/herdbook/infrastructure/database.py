"""Database — async engine, per-request sessions and the readiness check.

Invariants:
    - A session that raises rolls back before it is closed
    - SQLAlchemy errors escaping a request become DatabaseError (503), classified
      by the most specific failure kind in _FAILURE_KINDS
    - Register-level integrity errors never reach here: RecordStore turns them
      into DuplicateRecordError (409) at commit time
    - SQLite URLs skip pool sizing (aiosqlite runs on the default pool)

Design Decisions:
    - Module-level db_manager set by the lifespan; get_db and the readiness probe
      read it at call time
    - expire_on_commit=False: routes return ORM rows after commit without reloading
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from herdbook.core.errors import DatabaseError, ErrorContext

logger = logging.getLogger(__name__)

# Most specific first: IntegrityError and OperationalError subclass DBAPIError.
_FAILURE_KINDS: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "commit", "constraint violated"),
    (OperationalError, "connect", "database unreachable or timed out"),
    (DBAPIError, "query", "driver rejected the statement"),
)


def _classify(error: SQLAlchemyError) -> tuple[str, str]:
    for kind, operation, message in _FAILURE_KINDS:
        if isinstance(error, kind):
            return operation, message
    return "session", "unexpected SQLAlchemy failure"


def _table_of(error: SQLAlchemyError) -> str | None:
    """Best-effort table name from the failed statement, for logs."""
    statement = getattr(error, "statement", None)
    if not statement:
        return None
    words = statement.replace(",", " ").split()
    upper = [w.upper() for w in words]
    for marker in ("INTO", "UPDATE", "FROM"):
        if marker in upper:
            index = upper.index(marker) + 1
            if index < len(words):
                return words[index].strip('"')
    return None


class DatabaseSessionManager:
    """Owns the engine and hands out sessions for requests and probes."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        options = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            options.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **options)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            operation, message = _classify(e)
            table = _table_of(e)
            logger.error(
                f"Database {operation} failed: {e}",
                extra={"resource": table, "operation": operation},
            )
            raise DatabaseError(
                message, operation,
                ErrorContext(resource=table, debug_info={"error_type": type(e).__name__}),
            ) from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when a trivial query round-trips."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except DatabaseError:
            return False
        except OSError as e:
            logger.error(f"Database unreachable: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    logger.info("Database engine created", extra={"operation": "init"})
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
