"""
Integration Tests for the Jobly models

These tests run against a real PostgreSQL database and are skipped unless
TEST_DATABASE_URL is set. They DROP and recreate the companies and jobs
tables, so point TEST_DATABASE_URL at a dedicated database:

    createdb jobly_test
    export TEST_DATABASE_URL="postgresql://localhost/jobly_test"
    pytest tests/integration -v
"""

import os
from decimal import Decimal

import pytest

from jobly.db_operations import JoblyDB
from jobly.errors import BadRequestError, NotFoundError
from jobly.models import Company, Job

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.getenv("TEST_DATABASE_URL"),
        reason="TEST_DATABASE_URL not set - requires dedicated test database",
    ),
]

SCHEMA = [
    "DROP TABLE IF EXISTS jobs",
    "DROP TABLE IF EXISTS companies",
    """CREATE TABLE companies (
           handle VARCHAR(25) PRIMARY KEY CHECK (handle = lower(handle)),
           name TEXT UNIQUE NOT NULL,
           num_employees INTEGER CHECK (num_employees >= 0),
           description TEXT NOT NULL,
           logo_url TEXT
       )""",
    """CREATE TABLE jobs (
           id SERIAL PRIMARY KEY,
           title TEXT NOT NULL,
           salary INTEGER CHECK (salary >= 0),
           equity NUMERIC CHECK (equity <= 1.0),
           company_handle VARCHAR(25) NOT NULL
               REFERENCES companies ON DELETE CASCADE
       )""",
]


@pytest.fixture
def db(test_database_url):
    database = JoblyDB(test_database_url)
    for statement in SCHEMA:
        database.query(statement)

    companies = Company(database)
    companies.create("c1", "C1", "Desc1", 1, "http://c1.img")
    companies.create("c2", "C2", "Desc2", 2, "http://c2.img")
    companies.create("c3", "C3", "Desc3", 3, "http://c3.img")

    jobs = Job(database)
    jobs.create("J1", 100, "0.1", "c1")
    jobs.create("J2", 200, "0.2", "c1")
    jobs.create("J3", 300, "0", "c1")
    jobs.create("J4", None, None, "c1")
    return database


def test_company_filters(db):
    companies = Company(db).find_by_filters(min_employees=2, name_like="c")

    assert [c["handle"] for c in companies] == ["c2", "c3"]


def test_company_get_with_jobs(db):
    company = Company(db).get("c1")

    assert company["numEmployees"] == 1
    assert [j["title"] for j in company["jobs"]] == ["J1", "J2", "J3", "J4"]


def test_company_update_and_remove(db):
    updated = Company(db).update("c1", {"numEmployees": 10, "logoUrl": None})

    assert updated["numEmployees"] == 10
    assert updated["logoUrl"] is None

    Company(db).remove("c1")
    with pytest.raises(NotFoundError):
        Company(db).get("c1")


def test_company_duplicate(db):
    with pytest.raises(BadRequestError):
        Company(db).create("c1", "Other", "Desc")


def test_company_duplicate_name_on_new_handle(db):
    with pytest.raises(BadRequestError, match="Duplicate company: c9"):
        Company(db).create("c9", "C1", "Desc")


def test_job_get_returns_the_requested_row(db):
    created = Job(db).create("New", 50, "0", "c2")

    job = Job(db).get(created["id"])

    assert job["id"] == created["id"]
    assert job["title"] == "New"
    assert job["company"]["handle"] == "c2"


def test_job_filters(db):
    jobs = Job(db).find_all(min_salary=150, has_equity=True)

    assert [j["title"] for j in jobs] == ["J2"]
    assert jobs[0]["companyName"] == "C1"


def test_job_update(db):
    job_id = Job(db).find_all(title="j1")[0]["id"]

    updated = Job(db).update(job_id, {"salary": 0, "equity": "0.5"})

    assert updated["salary"] == 0
    assert updated["equity"] == Decimal("0.5")
