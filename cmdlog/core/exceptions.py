"""Exceptions raised by the log validator and repository."""

from fastapi import status


class LogServiceError(Exception):
    """Base class for failures that map to a user-visible error response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(LogServiceError):
    """Caller input failed a precondition; never reaches the store."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(LogServiceError):
    """The referenced log id has no record."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Log not found"):
        super().__init__(message)


class PersistenceError(LogServiceError):
    """The store failed while running an operation.

    ``message`` is safe to show to callers; driver detail stays on
    ``__cause__``.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(message)


class PayloadTooLargeError(LogServiceError):
    """The request body went past the configured size limit."""

    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE

    def __init__(self, max_size: int):
        self.max_size = max_size
        super().__init__(f"Request too large. Maximum size is {max_size} bytes")
