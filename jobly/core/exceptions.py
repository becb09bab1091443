"""
Domain errors raised by the repositories.

Routers do not catch these; the handler registered in ``jobly.main`` turns
them into ``{"detail": message}`` responses with the error's status code.
"""

from fastapi import status


class JoblyError(Exception):
    """Base class for user-facing errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(JoblyError):
    """Malformed or invalid input (empty update, unknown company, ...)."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(JoblyError):
    """The targeted row does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
