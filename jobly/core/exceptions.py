"""
Repository errors.

Each error carries the HTTP status code the API layer should answer with,
so callers can translate them without knowing which operation raised.
"""

from typing import Optional


class JoblyError(Exception):
    """Base class for errors raised by the data-access layer."""

    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def __repr__(self):
        return f"<{type(self).__name__}(status_code={self.status_code}, message='{self.message}')>"


class NotFoundError(JoblyError):
    """A user, job or application does not exist (404)."""

    status_code = 404
    default_message = "Not Found"


class BadRequestError(JoblyError):
    """Duplicate data, empty update payloads or invalid values (400)."""

    status_code = 400
    default_message = "Bad Request"


class UnauthorizedError(JoblyError):
    """Failed authentication (401)."""

    status_code = 401
    default_message = "Unauthorized"
