"""Jobly data-access package.

This package contains the database-facing pieces of the Jobly job board:
- common: pure helpers shared by the models (partial-update SQL builder)
- models: Company and Job entity models (CRUD against PostgreSQL)
- db_operations: psycopg2 connection handling and query execution
"""

__version__ = "0.1.0"
