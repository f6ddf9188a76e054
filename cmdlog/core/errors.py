"""
Error responses.

Every error leaves the API as ``{"error": "<message>"}``.
"""
import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cmdlog.core.exceptions import LogServiceError, PersistenceError

logger = logging.getLogger(__name__)


class ErrorResponse:
    """Standard error response format."""

    @staticmethod
    def create(message: str, status_code: int = 500) -> JSONResponse:
        """
        Create an error response.

        Args:
            message: Human-readable error message
            status_code: HTTP status code

        Returns:
            JSONResponse with the ``error`` body
        """
        return JSONResponse(status_code=status_code, content={"error": message})


async def log_service_error_handler(request: Request, exc: LogServiceError) -> JSONResponse:
    """Map validator/repository failures onto their HTTP status."""
    if isinstance(exc, PersistenceError):
        logger.error(
            "Persistence failure during %s on %s %s",
            exc.operation,
            request.method,
            request.url.path,
            exc_info=exc.__cause__ or exc,
        )
    else:
        logger.info(
            "Rejected %s %s: %s", request.method, request.url.path, exc.message
        )

    return ErrorResponse.create(exc.message, status_code=exc.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep framework errors (unknown route, bad method) in the same body shape."""
    response = ErrorResponse.create(str(exc.detail), status_code=exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response
