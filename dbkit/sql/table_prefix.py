"""Schema-qualified table name prefixes."""

from __future__ import annotations

from dbkit.vendor import DatabaseSystemType


def get_table_name_prefix(db_type: DatabaseSystemType, schema: str | None) -> str:
    """Return the quoted ``<schema>.`` prefix for unqualified table names.

    The schema is trimmed first; a missing or blank schema yields ``""``.
    Quote characters inside the schema name are not escaped, the caller
    must pass a valid identifier.

    >>> get_table_name_prefix(DatabaseSystemType.MYSQL, " app ")
    '`app`.'
    >>> get_table_name_prefix(DatabaseSystemType.POSTGRESQL, "app")
    '"app".'
    """
    if db_type is None:
        raise ValueError("db_type must not be None")

    schema_name = schema.strip() if schema else ""
    if not schema_name:
        return ""

    # Quoted so that special characters survive
    quote = db_type.identifier_quote
    return f"{quote}{schema_name}{quote}."
