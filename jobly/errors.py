"""
Error classes raised by the Jobly data-access layer.

Each error carries a ``status`` so an outer HTTP layer can turn it into a
response without knowing about the models.
"""

from typing import Optional


class JoblyError(Exception):
    """Base class for all Jobly errors."""

    status = 500

    def __init__(self, message: str = "", status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class BadRequestError(JoblyError):
    """Raised when the caller supplied invalid data."""

    status = 400


class EmptyUpdateError(BadRequestError):
    """Raised when a partial update carries no fields."""

    def __init__(self, message: str = "No data"):
        super().__init__(message)


class NotFoundError(JoblyError):
    """Raised when the requested row does not exist."""

    status = 404


class DatabaseError(JoblyError):
    """Raised when a database operation fails."""

    def __init__(self, message: str = "", pgcode: Optional[str] = None):
        super().__init__(message)
        self.pgcode = pgcode
