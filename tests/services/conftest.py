"""Fixtures for service tests: an in-memory LogRepository."""

from datetime import datetime, timedelta

import pytest

from cmdlog.core.exceptions import NotFoundError
from cmdlog.repositories.log import LogRepository
from cmdlog.schemas.log import LogEntry


class InMemoryLogRepository(LogRepository):
    """Dict-backed repository that records every write it performs."""

    def __init__(self):
        self.rows: dict[int, LogEntry] = {}
        self.writes: list[tuple[str, int]] = []
        self._next_id = 1
        self._clock = datetime(2026, 1, 1, 0, 0, 0)

    def _now(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    async def create(self, command: str, message: str) -> LogEntry:
        entry = LogEntry(id=self._next_id, command=command, message=message, created=self._now())
        self._next_id += 1
        self.rows[entry.id] = entry
        self.writes.append(("create", entry.id))
        return entry.model_copy()

    async def get(self, log_id: int) -> LogEntry:
        if log_id not in self.rows:
            raise NotFoundError()
        return self.rows[log_id].model_copy()

    async def list_all(self) -> list[LogEntry]:
        ordered = sorted(self.rows.values(), key=lambda e: (e.created, e.id), reverse=True)
        return [entry.model_copy() for entry in ordered]

    async def update(self, log_id: int, changes: dict[str, str]) -> LogEntry:
        if log_id not in self.rows:
            raise NotFoundError()
        self.rows[log_id] = self.rows[log_id].model_copy(update=changes)
        self.writes.append(("update", log_id))
        return self.rows[log_id].model_copy()


@pytest.fixture
def fake_repository() -> InMemoryLogRepository:
    return InMemoryLogRepository()
