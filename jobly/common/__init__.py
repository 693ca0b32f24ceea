"""
Common helpers shared across Jobly models.

Kept dependency-free so the SQL builders can be tested without a database.
"""

from .sql import PartialUpdate, sql_for_partial_update, to_pyformat

__all__ = [
    "PartialUpdate",
    "sql_for_partial_update",
    "to_pyformat",
]
