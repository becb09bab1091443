"""
Helpers for building parameterized SQL by hand.

Queries are written with PostgreSQL-style positional placeholders ($1, $2, ...)
and a parallel list of bind values. ``execute`` rewrites the placeholders to
named binds so the statement can go through ``sqlalchemy.text``.
"""

import logging
import re
from typing import Any, Iterable, Mapping

from sqlalchemy import text
from sqlalchemy.orm import Session

from jobly.core.exceptions import BadRequestError

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")


class SqlParams:
    """Bind values for one statement; ``add`` returns the placeholder for the new value."""

    def __init__(self, values: Iterable[Any] = ()):
        self.values: list[Any] = list(values)

    def add(self, value: Any) -> str:
        self.values.append(value)
        return f"${len(self.values)}"

    def __len__(self) -> int:
        return len(self.values)


def sql_for_partial_update(
    data: Mapping[str, Any],
    js_to_sql: Mapping[str, str] | None = None,
) -> tuple[str, list[Any]]:
    """
    Build the ``SET`` part of an UPDATE from a sparse field mapping.

    ``data`` maps field names to new values; its iteration order decides the
    placeholder positions. ``js_to_sql`` maps a field name to its column name
    for fields whose column is spelled differently; other fields are used as-is.

        >>> sql_for_partial_update({"numEmployees": 5, "logoUrl": "x"},
        ...                        {"numEmployees": "num_employees", "logoUrl": "logo_url"})
        ('"num_employees"=$1, "logo_url"=$2', [5, 'x'])

    Column names are interpolated into the clause, so keys must come from a
    validated schema, never from raw user input. Values are only ever bound.

    Raises BadRequestError if ``data`` is empty.
    """
    if not data:
        raise BadRequestError("No data")
    js_to_sql = js_to_sql or {}

    params = SqlParams()
    cols = [f'"{js_to_sql.get(name, name)}"={params.add(value)}' for name, value in data.items()]
    return ", ".join(cols), params.values


def bind_positional(sql: str, values: Iterable[Any]) -> tuple[Any, dict[str, Any]]:
    """Turn ``$n`` placeholders into ``:pn`` binds. Returns (TextClause, params)."""
    stmt = text(_PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", sql))
    params = {f"p{i}": value for i, value in enumerate(values, start=1)}
    return stmt, params


def execute(db: Session, sql: str, values: Iterable[Any] = ()):
    stmt, params = bind_positional(sql, values)
    logger.debug("SQL: %s | params=%s", sql.strip(), params)
    return db.execute(stmt, params)
