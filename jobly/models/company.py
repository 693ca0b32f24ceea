"""
Company model.

CRUD operations for the ``companies`` table. Rows are returned with the JSON
attribute names used by API clients (``numEmployees``, ``logoUrl``).
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from psycopg2 import errorcodes, sql

from jobly.common.sql import sql_for_partial_update
from jobly.errors import BadRequestError, DatabaseError, NotFoundError

logger = logging.getLogger(__name__)

# Attribute -> column for attributes whose column name differs
COMPANY_JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

UPDATABLE_FIELDS = frozenset({"name", "description", "numEmployees", "logoUrl"})

_COMPANY_COLUMNS = (
    'handle, name, description, '
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)


class Company:
    """Related functions for companies."""

    def __init__(self, db):
        """
        Args:
            db: Object exposing ``query(text, params) -> list[dict]``,
                normally a JoblyDB.
        """
        self.db = db

    def create(
        self,
        handle: str,
        name: str,
        description: Optional[str] = None,
        num_employees: Optional[int] = None,
        logo_url: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Create a company, update db, return new company data.

        Returns:
            { handle, name, description, numEmployees, logoUrl }

        Raises:
            BadRequestError: If the handle or name is already in the database.
        """
        duplicate_check = self.db.query(
            """SELECT handle
               FROM companies
               WHERE handle = $1""",
            [handle],
        )
        if duplicate_check:
            raise BadRequestError(f"Duplicate company: {handle}")

        try:
            rows = self.db.query(
                f"""INSERT INTO companies
                    (handle, name, description, num_employees, logo_url)
                    VALUES ($1, $2, $3, $4, $5)
                    RETURNING {_COMPANY_COLUMNS}""",
                [handle, name, description, num_employees, logo_url],
            )
        except DatabaseError as e:
            # Concurrent create of the same handle, or a name already taken
            if e.pgcode == errorcodes.UNIQUE_VIOLATION:
                raise BadRequestError(f"Duplicate company: {handle}") from e
            raise
        company = rows[0]

        logger.info("Created company", extra={"handle": handle})
        return company

    def find_all(self) -> list[dict[str, Any]]:
        """
        Find all companies.

        Returns:
            [{ handle, name, description, numEmployees, logoUrl }, ...]
        """
        return self.db.query(
            f"""SELECT {_COMPANY_COLUMNS}
                FROM companies
                ORDER BY name"""
        )

    def find_by_filters(
        self,
        min_employees: Optional[int] = None,
        max_employees: Optional[int] = None,
        name_like: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """
        Find companies matching every filter given.

        Args:
            min_employees: Minimum number of employees (inclusive).
            max_employees: Maximum number of employees (inclusive).
            name_like: Case-insensitive partial match on the company name.

        Returns:
            [{ handle, name, description, numEmployees, logoUrl }, ...]

        Raises:
            BadRequestError: If min_employees is greater than max_employees.
        """
        if (
            min_employees is not None
            and max_employees is not None
            and int(min_employees) > int(max_employees)
        ):
            raise BadRequestError("min employees cannot be greater than max employees")

        conditions = []
        query_values: list[Any] = []

        if min_employees is not None:
            query_values.append(int(min_employees))
            conditions.append(sql.SQL(f"num_employees >= ${len(query_values)}"))

        if max_employees is not None:
            query_values.append(int(max_employees))
            conditions.append(sql.SQL(f"num_employees <= ${len(query_values)}"))

        if name_like is not None:
            query_values.append(f"%{name_like.lower()}%")
            conditions.append(sql.SQL(f"LOWER(name) LIKE ${len(query_values)}"))

        query_parts = [sql.SQL(f"SELECT {_COMPANY_COLUMNS} FROM companies")]
        if conditions:
            query_parts.append(sql.SQL(" WHERE ") + sql.SQL(" AND ").join(conditions))
        query_parts.append(sql.SQL(" ORDER BY name"))

        return self.db.query(sql.SQL("").join(query_parts), query_values)

    def get(self, handle: str) -> dict[str, Any]:
        """
        Given a company handle, return data about company.

        Returns:
            { handle, name, description, numEmployees, logoUrl, jobs }
            where jobs is [{ id, title, salary, equity, companyHandle }, ...]

        Raises:
            NotFoundError: If not found.
        """
        rows = self.db.query(
            f"""SELECT {_COMPANY_COLUMNS}
                FROM companies
                WHERE handle = $1""",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        company = rows[0]

        company["jobs"] = self.db.query(
            """SELECT id, title, salary, equity, company_handle AS "companyHandle"
               FROM jobs
               WHERE company_handle = $1
               ORDER BY id""",
            [handle],
        )
        return company

    def update(self, handle: str, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Update company data with ``data``.

        This is a "partial update": it's fine if data doesn't contain all the
        fields; this only changes provided ones.

        Data can include: { name, description, numEmployees, logoUrl }

        Returns:
            { handle, name, description, numEmployees, logoUrl }

        Raises:
            BadRequestError: If data names a field that cannot be updated.
            EmptyUpdateError: If data is empty.
            NotFoundError: If not found.
        """
        unknown = sorted(set(data) - UPDATABLE_FIELDS)
        if unknown:
            raise BadRequestError(f"Cannot update company field(s): {', '.join(unknown)}")

        update = sql_for_partial_update(data, COMPANY_JS_TO_SQL)
        handle_var_idx = f"${len(update.values) + 1}"

        rows = self.db.query(
            f"""UPDATE companies
                SET {update.set_cols}
                WHERE handle = {handle_var_idx}
                RETURNING {_COMPANY_COLUMNS}""",
            [*update.values, handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        logger.info(
            "Updated company",
            extra={"handle": handle, "fields": list(data)},
        )
        return rows[0]

    def remove(self, handle: str) -> None:
        """
        Delete given company from database.

        Raises:
            NotFoundError: If company not found.
        """
        rows = self.db.query(
            """DELETE
               FROM companies
               WHERE handle = $1
               RETURNING handle""",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        logger.info("Removed company", extra={"handle": handle})
