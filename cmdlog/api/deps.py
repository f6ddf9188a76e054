from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from cmdlog.core.exceptions import NotFoundError
from cmdlog.db.session import get_db
from cmdlog.repositories.log import SQLAlchemyLogRepository
from cmdlog.services.log import LogService
from cmdlog.utils.request import parse_log_id


async def get_log_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LogService:
    return LogService(SQLAlchemyLogRepository(db))


async def get_log_id(
    log_id: Annotated[str, Path(description="Log identifier")],
) -> int:
    """Resolve the path identifier; one that is not an integer matches no log."""
    parsed = parse_log_id(log_id)
    if parsed is None:
        raise NotFoundError()
    return parsed
