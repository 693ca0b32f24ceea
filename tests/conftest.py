"""
Pytest configuration and shared fixtures

Unit tests run against StubDB, an in-memory stand-in for JoblyDB that records
every statement and replays scripted result sets. Integration tests need a
real PostgreSQL database (see tests/integration).
"""

import os
from typing import Any, Optional

import pytest
from psycopg2 import sql


class StubDB:
    """
    Scripted stand-in for JoblyDB.

    Each call to query() pops the next queued result set (an empty list once
    the queue is exhausted) and records the statement and its values. A
    queued exception is raised instead of returned. ``psycopg2.sql``
    compositions are recorded as their rendered text.
    """

    def __init__(self, results: Optional[list[Any]] = None):
        self.results = list(results or [])
        self.calls: list[tuple[str, list[Any]]] = []

    def query(self, text, params=()) -> list[dict[str, Any]]:
        if isinstance(text, sql.Composable):
            # Plain sql.SQL parts render without a connection
            text = text.as_string(None)
        self.calls.append((text, list(params)))
        if self.results:
            result = self.results.pop(0)
            if isinstance(result, Exception):
                raise result
            return result
        return []

    @property
    def last_sql(self) -> str:
        return self.calls[-1][0]

    @property
    def last_params(self) -> list[Any]:
        return self.calls[-1][1]


@pytest.fixture
def stub_db():
    """Factory fixture: ``stub_db([rows1, rows2])`` builds a StubDB."""
    return StubDB


@pytest.fixture(scope="session")
def test_database_url() -> Optional[str]:
    """
    Provide the integration test database URL, if configured.

    Integration tests drop and recreate the companies/jobs tables, so they
    only use TEST_DATABASE_URL and never DATABASE_URL.
    """
    return os.getenv("TEST_DATABASE_URL")


@pytest.fixture(scope="function")
def sample_company() -> dict:
    """Provide a sample company row as returned by the models."""
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "numEmployees": 1,
        "logoUrl": "http://c1.img",
    }


@pytest.fixture(scope="function")
def sample_job() -> dict:
    """Provide a sample job row as returned by the models."""
    return {
        "id": 1,
        "title": "Data Engineer",
        "salary": 100000,
        "equity": "0.05",
        "companyHandle": "c1",
    }


# Mark tests based on their type for selective running
def pytest_configure(config):
    """
    Register custom pytest markers.

    - pytest -m unit        (run only unit tests)
    - pytest -m integration (run only integration tests)
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (isolated, fast)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires PostgreSQL)"
    )
