"""
Logs API endpoints.

Records are returned under ``log`` (one) or ``logs`` (many); failures as
``{"error": "<message>"}``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from cmdlog.api.deps import get_log_id, get_log_service
from cmdlog.schemas.log import ErrorBody, LogListResponse, LogResponse
from cmdlog.services.log import LogService
from cmdlog.utils.request import read_json_object

router = APIRouter(prefix="/logs", tags=["logs"])

_WRITE_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorBody},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorBody},
}
_READ_ERRORS = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorBody},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorBody},
}


@router.post(
    "",
    response_model=LogResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_WRITE_ERRORS,
)
async def create_log(
    request: Request,
    service: Annotated[LogService, Depends(get_log_service)],
):
    fields = await read_json_object(request)
    return LogResponse(log=await service.create_log(fields))


@router.get(
    "",
    response_model=LogListResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorBody}},
)
async def list_logs(
    service: Annotated[LogService, Depends(get_log_service)],
):
    """All logs, most recent first."""
    return LogListResponse(logs=await service.list_logs())


@router.get("/{log_id}", response_model=LogResponse, responses=_READ_ERRORS)
async def get_log(
    log_id: Annotated[int, Depends(get_log_id)],
    service: Annotated[LogService, Depends(get_log_service)],
):
    return LogResponse(log=await service.get_log(log_id))


@router.api_route(
    "/{log_id}",
    methods=["PUT", "PATCH"],
    response_model=LogResponse,
    responses={**_WRITE_ERRORS, **_READ_ERRORS},
)
async def update_log(
    request: Request,
    log_id: Annotated[int, Depends(get_log_id)],
    service: Annotated[LogService, Depends(get_log_service)],
):
    """
    Partially update a log.

    Only the keys present in the body are written; at least one of
    ``command`` or ``message`` is required.
    """
    fields = await read_json_object(request)
    return LogResponse(log=await service.update_log(log_id, fields))
