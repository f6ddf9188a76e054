"""Custom middleware for request validation and error handling."""

import logging
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from cmdlog.core.errors import ErrorResponse

logger = logging.getLogger(__name__)


class RequestValidationMiddleware(BaseHTTPMiddleware):
    """Middleware for request validation.

    Enforces:
    - Request size limits declared by Content-Length
    - JSON Content-Type for POST/PUT/PATCH, when enabled
    """

    def __init__(
        self,
        app: ASGIApp,
        max_request_size: int = 1024 * 1024,
        enforce_content_type: bool = False,
    ) -> None:
        super().__init__(app)
        self.max_request_size = max_request_size
        self.enforce_content_type = enforce_content_type

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        client_host = request.client.host if request.client else "unknown"

        content_length = request.headers.get("content-length")
        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                size = 0
            if size > self.max_request_size:
                logger.warning(f"Request too large: {size} bytes from {client_host}")
                return ErrorResponse.create(
                    f"Request too large. Maximum size is {self.max_request_size} bytes",
                    status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                )

        if self.enforce_content_type and request.method in {"POST", "PUT", "PATCH"}:
            content_type = request.headers.get("content-type", "")
            if not content_type.startswith("application/json"):
                logger.warning(f"Invalid Content-Type from {client_host}: {content_type}")
                return ErrorResponse.create(
                    "Content-Type must be application/json",
                    status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                )

        return await call_next(request)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request ID to request state, log context and response headers."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["X-Request-ID"] = request_id
        return response


class ErrorResponseMiddleware(BaseHTTPMiddleware):
    """Turn anything the exception handlers missed into a generic 500."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"Request error: {request.method} {request.url.path}")
            return ErrorResponse.create(
                "Internal server error",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
