"""
Entity models for the Jobly job board.

Each model wraps a database object exposing ``query(text, params)`` and
raises NotFoundError / BadRequestError from jobly.errors.
"""

from .company import Company
from .job import Job

__all__ = [
    "Company",
    "Job",
]
