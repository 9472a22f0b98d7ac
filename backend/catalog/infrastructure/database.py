"""Database Session Manager - one async engine per process, sessions per request.

Invariants:
    - A session that sees an exception is rolled back before it is closed
    - Driver failures escaping the plan store surface as DatabaseError (503);
      CatalogError subclasses raised inside a session pass through untouched
    - Constraint conflicts the plan store classifies itself never reach here

Design Decisions:
    - Pool sizing and recycling only for server databases; SQLite (tests,
      local runs) keeps the dialect's own pool
    - expire_on_commit=False: rows mapped to Plan values after commit
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from catalog.core.errors import DatabaseError

logger = logging.getLogger(__name__)

# Checked in order; the first matching class wins.
_DRIVER_ERRORS: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Plan catalog constraint violated", "commit"),
    (OperationalError, "Plan catalog database unavailable", "execute"),
)


def to_database_error(error: SQLAlchemyError) -> DatabaseError:
    for error_type, message, operation in _DRIVER_ERRORS:
        if isinstance(error, error_type):
            return DatabaseError(message, operation)
    return DatabaseError("Plan catalog query failed", "unknown")


class DatabaseSessionManager:
    """Owns the engine and hands out sessions for the plan and token tables."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        options: dict = {"pool_pre_ping": True}
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
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                mapped = to_database_error(e)
                logger.error(
                    f"{mapped.message}: {e}",
                    extra={"error_code": mapped.code},
                )
                raise mapped from e
            except Exception:
                await session.rollback()
                raise

    async def health_check(self) -> bool:
        """SELECT 1 through a fresh session; False on any failure."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"Plan catalog database not ready: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
