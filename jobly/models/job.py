"""
Job model.

CRUD operations for the ``jobs`` table.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from psycopg2 import sql

from jobly.common.sql import sql_for_partial_update
from jobly.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

# Job attributes share their column names
JOB_JS_TO_SQL: dict[str, str] = {}

# id and companyHandle are fixed once a job exists
UPDATABLE_FIELDS = frozenset({"title", "salary", "equity"})

_JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


class Job:
    """Related functions for jobs."""

    def __init__(self, db):
        self.db = db

    def create(
        self,
        title: str,
        salary: Optional[int] = None,
        equity: Any = None,
        company_handle: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Create a job, update db, return new job data.

        Returns:
            { id, title, salary, equity, companyHandle }
        """
        rows = self.db.query(
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {_JOB_COLUMNS}""",
            [title, salary, equity, company_handle],
        )
        job = rows[0]

        logger.info(
            "Created job",
            extra={"job_id": job["id"], "company_handle": company_handle},
        )
        return job

    def find_all(
        self,
        min_salary: Optional[int] = None,
        has_equity: bool = False,
        title: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """
        Find all jobs, optionally filtered.

        Args:
            min_salary: Only jobs paying at least this much.
            has_equity: When True, only jobs with equity > 0.
            title: Case-insensitive partial match on the title.

        Returns:
            [{ id, title, salary, equity, companyHandle, companyName }, ...]
        """
        query = """SELECT j.id,
                          j.title,
                          j.salary,
                          j.equity,
                          j.company_handle AS "companyHandle",
                          c.name AS "companyName"
                   FROM jobs j
                   LEFT JOIN companies AS c ON c.handle = j.company_handle"""

        conditions = []
        query_values: list[Any] = []

        if min_salary is not None:
            query_values.append(min_salary)
            conditions.append(sql.SQL(f"j.salary >= ${len(query_values)}"))

        if has_equity is True:
            conditions.append(sql.SQL("j.equity > 0"))

        if title is not None:
            query_values.append(f"%{title}%")
            conditions.append(sql.SQL(f"j.title ILIKE ${len(query_values)}"))

        query_parts = [sql.SQL(query)]
        if conditions:
            query_parts.append(sql.SQL(" WHERE ") + sql.SQL(" AND ").join(conditions))
        query_parts.append(sql.SQL(" ORDER BY j.title"))

        return self.db.query(sql.SQL("").join(query_parts), query_values)

    def get(self, id: int) -> dict[str, Any]:
        """
        Given a job id, return data about that job.

        Returns:
            { id, title, salary, equity, companyHandle, company }
            where company is { handle, name, description, numEmployees, logoUrl }

        Raises:
            NotFoundError: If not found.
        """
        rows = self.db.query(
            f"""SELECT {_JOB_COLUMNS}
                FROM jobs
                WHERE id = $1""",
            [id],
        )
        if not rows:
            raise NotFoundError(f"No job: {id}")
        job = rows[0]

        companies = self.db.query(
            """SELECT handle,
                      name,
                      description,
                      num_employees AS "numEmployees",
                      logo_url AS "logoUrl"
               FROM companies
               WHERE handle = $1""",
            [job["companyHandle"]],
        )
        job["company"] = companies[0] if companies else None
        return job

    def update(self, id: int, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Update job data with ``data``; only the fields provided change.

        Data can include: { title, salary, equity }

        Returns:
            { id, title, salary, equity, companyHandle }

        Raises:
            BadRequestError: If data names a field that cannot be updated.
            EmptyUpdateError: If data is empty.
            NotFoundError: If not found.
        """
        unknown = sorted(set(data) - UPDATABLE_FIELDS)
        if unknown:
            raise BadRequestError(f"Cannot update job field(s): {', '.join(unknown)}")

        update = sql_for_partial_update(data, JOB_JS_TO_SQL)
        id_var_idx = f"${len(update.values) + 1}"

        rows = self.db.query(
            f"""UPDATE jobs
                SET {update.set_cols}
                WHERE id = {id_var_idx}
                RETURNING {_JOB_COLUMNS}""",
            [*update.values, id],
        )
        if not rows:
            raise NotFoundError(f"No job: {id}")

        logger.info("Updated job", extra={"job_id": id, "fields": list(data)})
        return rows[0]

    def remove(self, id: int) -> None:
        """
        Delete given job from database.

        Raises:
            NotFoundError: If job not found.
        """
        rows = self.db.query(
            """DELETE
               FROM jobs
               WHERE id = $1
               RETURNING id""",
            [id],
        )
        if not rows:
            raise NotFoundError(f"No job: {id}")

        logger.info("Removed job", extra={"job_id": id})
