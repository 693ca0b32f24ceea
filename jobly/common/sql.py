"""
SQL helpers for the Jobly models.

- sql_for_partial_update: build the SET clause of a partial UPDATE
- to_pyformat: turn ``$n`` numbered placeholders into psycopg2's
  ``%(name)s`` style before execution
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple, Optional

from jobly.errors import EmptyUpdateError

_NUMBERED_PLACEHOLDER = re.compile(r"\$(\d+)")


class PartialUpdate(NamedTuple):
    """SET clause fragments and the values to bind, positionally aligned."""

    fragments: tuple[str, ...]
    values: list[Any]

    @property
    def set_cols(self) -> str:
        """Fragments joined into a clause ready to follow ``SET``."""
        return ", ".join(self.fragments)


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
) -> PartialUpdate:
    """
    Generate SQL for a partial update of a database record.

    Keys of ``data_to_update`` are attribute names as callers know them
    (e.g. ``numEmployees``). Keys found in ``js_to_sql`` are translated to
    their column name, others are used verbatim. Values are never touched.

    Args:
        data_to_update: Attribute name -> new value. ``None``, ``0`` and ``""``
            are all legitimate values.
        js_to_sql: Attribute name -> column name for attributes whose column
            differs.

    Returns:
        PartialUpdate with one ``"<column>"=$<n>`` fragment per key (n from 1)
        and the values in the same order.

    Raises:
        EmptyUpdateError: If ``data_to_update`` is empty.

    Example:
        >>> result = sql_for_partial_update({'firstName': 'Aliya', 'age': 32},
        ...                                 {'firstName': 'first_name'})
        >>> result.set_cols
        '"first_name"=$1, "age"=$2'
        >>> result.values
        ['Aliya', 32]
    """
    keys = list(data_to_update)
    if not keys:
        raise EmptyUpdateError("No data")

    fragments = tuple(
        f'"{js_to_sql.get(key, key)}"=${idx}'
        for idx, key in enumerate(keys, start=1)
    )
    values = [data_to_update[key] for key in keys]

    return PartialUpdate(fragments=fragments, values=values)


def to_pyformat(
    query: str, params: Sequence[Any] = ()
) -> tuple[str, Optional[dict[str, Any]]]:
    """
    Rewrite ``$n`` placeholders as ``%(pn)s`` and bind ``params`` by name.

    Literal ``%`` characters are doubled because psycopg2 treats them as
    format markers once parameters are bound. Placeholders must not appear
    inside SQL string literals.

    Args:
        query: Statement using 1-based ``$n`` placeholders.
        params: Values, ``params[0]`` binds ``$1``.

    Returns:
        Tuple of (converted query, mapping of names to values). With no
        parameters the query is returned untouched together with ``None``.

    Example:
        >>> to_pyformat("SELECT * FROM jobs WHERE id = $1", [7])
        ('SELECT * FROM jobs WHERE id = %(p1)s', {'p1': 7})
    """
    if not params:
        return query, None

    escaped = query.replace("%", "%%")
    converted = _NUMBERED_PLACEHOLDER.sub(lambda m: f"%(p{m.group(1)})s", escaped)
    bound = {f"p{idx}": value for idx, value in enumerate(params, start=1)}
    return converted, bound
