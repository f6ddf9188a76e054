from cmdlog.schemas.log import (
    ErrorBody,
    LogCreate,
    LogEntry,
    LogListResponse,
    LogResponse,
    LogUpdate,
)

__all__ = [
    "ErrorBody",
    "LogCreate",
    "LogEntry",
    "LogListResponse",
    "LogResponse",
    "LogUpdate",
]
