"""
Schemas for the logs API.

Response bodies wrap records under ``log`` or ``logs``.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictStr


class LogEntry(BaseModel):
    """A persisted log record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    command: str
    message: str
    created: datetime


class LogCreate(BaseModel):
    command: StrictStr
    message: StrictStr


class LogUpdate(BaseModel):
    """Partial update.

    A field counts as supplied when its key was present in the body, so an
    explicit empty string is a value and an omitted key is not.
    ``model_dump(exclude_unset=True)`` yields only the supplied fields.
    """

    command: StrictStr | None = None
    message: StrictStr | None = None


class LogResponse(BaseModel):
    log: LogEntry


class LogListResponse(BaseModel):
    logs: list[LogEntry]


class ErrorBody(BaseModel):
    error: str
