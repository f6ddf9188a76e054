"""
Log service: validates caller input, then runs the repository operation.

Usage:
    service = LogService(SQLAlchemyLogRepository(db))
    entry = await service.create_log({"command": "ls -la", "message": "List directory contents"})
"""

import logging
from collections.abc import Mapping
from typing import Any

from cmdlog.repositories.log import LogRepository
from cmdlog.schemas.log import LogEntry
from cmdlog.services.validation import validate_create, validate_update

logger = logging.getLogger(__name__)


class LogService:
    """Create, read, list and partially update log records."""

    def __init__(self, repository: LogRepository):
        self.repository = repository

    async def create_log(self, fields: Mapping[str, Any]) -> LogEntry:
        data = validate_create(fields)
        entry = await self.repository.create(data.command, data.message)
        logger.info(f"Created log {entry.id}")
        return entry

    async def get_log(self, log_id: int) -> LogEntry:
        return await self.repository.get(log_id)

    async def list_logs(self) -> list[LogEntry]:
        return await self.repository.list_all()

    async def update_log(self, log_id: int, fields: Mapping[str, Any]) -> LogEntry:
        """Apply the supplied fields only; omitted fields keep their stored values."""
        changes = validate_update(fields).model_dump(exclude_unset=True)
        entry = await self.repository.update(log_id, changes)
        logger.info(f"Updated log {entry.id} fields={sorted(changes)}")
        return entry
