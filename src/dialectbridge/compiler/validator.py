"""Post-generation SQL validation using sqlglot."""

from __future__ import annotations

import sqlglot
from sqlglot.errors import SqlglotError

# Map DialectBridge dialect names to sqlglot dialect identifiers.
# sqlglot has no H2 dialect; H2 SQL is checked against sqlglot's ANSI default.
_DIALECT_MAP: dict[str, str | None] = {
    "generic": None,
    "h2": None,
}


def validate_sql(sql: str, dialect_name: str) -> list[str]:
    """Parse SQL with sqlglot for the given dialect.

    Returns a list of error messages (empty if valid).
    Non-blocking: callers report errors as warnings, never fail on them.
    """
    if dialect_name not in _DIALECT_MAP:
        return [f"Unknown dialect '{dialect_name}', SQL validation skipped"]

    errors: list[str] = []
    try:
        sqlglot.transpile(sql, read=_DIALECT_MAP[dialect_name])
    except SqlglotError as exc:
        errors.append(str(exc))
    return errors
