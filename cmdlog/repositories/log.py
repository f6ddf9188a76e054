"""
Log repository: the only code that talks to the store.

Every store failure surfaces as PersistenceError; an unknown id surfaces as
NotFoundError. Reads select plain columns so results always reflect the
stored row rather than objects cached in the session.
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cmdlog.core.exceptions import NotFoundError, PersistenceError
from cmdlog.models.log import Log
from cmdlog.schemas.log import LogEntry

logger = logging.getLogger(__name__)

LOG_COLUMNS = (Log.id, Log.command, Log.message, Log.created)


class LogRepository(ABC):
    """Persistence operations for log records."""

    @abstractmethod
    async def create(self, command: str, message: str) -> LogEntry:
        """Insert a record and return it with its generated id and created."""

    @abstractmethod
    async def get(self, log_id: int) -> LogEntry:
        """Fetch one record by id."""

    @abstractmethod
    async def list_all(self) -> list[LogEntry]:
        """All records, newest ``created`` first, ties broken by id descending."""

    @abstractmethod
    async def update(self, log_id: int, changes: dict[str, str]) -> LogEntry:
        """Apply ``changes`` to an existing record and return its stored state.

        Fields missing from ``changes`` keep their values; ``id`` and
        ``created`` are never written.
        """


class SQLAlchemyLogRepository(LogRepository):
    """LogRepository backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, command: str, message: str) -> LogEntry:
        # INSERT ... RETURNING so the generated fields come from the same statement
        stmt = insert(Log).values(command=command, message=message).returning(*LOG_COLUMNS)
        try:
            result = await self.db.execute(stmt)
            entry = LogEntry.model_validate(dict(result.mappings().one()))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._rollback()
            raise PersistenceError("create", "Failed to create log") from e
        return entry

    async def get(self, log_id: int) -> LogEntry:
        try:
            result = await self.db.execute(select(*LOG_COLUMNS).where(Log.id == log_id))
            row = result.mappings().one_or_none()
        except SQLAlchemyError as e:
            await self._rollback()
            raise PersistenceError("get", "Failed to fetch log") from e

        if row is None:
            raise NotFoundError()
        return LogEntry.model_validate(dict(row))

    async def list_all(self) -> list[LogEntry]:
        try:
            result = await self.db.execute(
                select(*LOG_COLUMNS).order_by(Log.created.desc(), Log.id.desc())
            )
            rows = result.mappings().all()
        except SQLAlchemyError as e:
            await self._rollback()
            raise PersistenceError("list", "Failed to fetch logs") from e

        return [LogEntry.model_validate(dict(row)) for row in rows]

    async def update(self, log_id: int, changes: dict[str, str]) -> LogEntry:
        values = {name: changes[name] for name in ("command", "message") if name in changes}
        if not values:
            raise ValueError("update requires at least one of command or message")

        # Single conditional write: the id check, the write and the read of the
        # stored row happen in one statement, so concurrent updates to the same
        # id cannot interleave between them.
        stmt = (
            update(Log)
            .where(Log.id == log_id)
            .values(**values)
            .returning(*LOG_COLUMNS)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(stmt)
            row = result.mappings().one_or_none()
            if row is None:
                await self.db.rollback()
                raise NotFoundError()
            entry = LogEntry.model_validate(dict(row))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._rollback()
            raise PersistenceError("update", "Failed to update log") from e
        return entry

    async def _rollback(self) -> None:
        try:
            await self.db.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback failed after store error", exc_info=True)
