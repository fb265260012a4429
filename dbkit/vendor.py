"""Closed catalog of the supported database systems.

Resolution from a string identifier never raises: an unknown or empty
identifier yields ``None`` so callers can fall back to generic SQL.
"""

from __future__ import annotations

from enum import Enum


class DatabaseSystemType(str, Enum):
    """Supported database systems, keyed by their lowercase id."""

    DB2 = "db2"
    H2 = "h2"
    MYSQL = "mysql"
    ORACLE = "oracle"
    POSTGRESQL = "postgresql"
    SQLSERVER = "sqlserver"

    @property
    def id(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def identifier_quote(self) -> str:
        """Character placed on both sides of a quoted identifier."""
        return _IDENTIFIER_QUOTES.get(self, '"')

    @classmethod
    def from_id(cls, identifier: str | None) -> DatabaseSystemType | None:
        """Exact-match lookup; ``None`` when nothing matches."""
        if not isinstance(identifier, str) or not identifier:
            return None
        return _BY_ID.get(identifier)

    @classmethod
    def from_id_case_insensitive(cls, identifier: str | None) -> DatabaseSystemType | None:
        """Case-insensitive lookup; ``None`` when nothing matches."""
        if not isinstance(identifier, str) or not identifier:
            return None
        return _BY_ID.get(identifier.casefold())


_DISPLAY_NAMES: dict[DatabaseSystemType, str] = {
    DatabaseSystemType.DB2: "DB2",
    DatabaseSystemType.H2: "H2",
    DatabaseSystemType.MYSQL: "MySQL",
    DatabaseSystemType.ORACLE: "Oracle",
    DatabaseSystemType.POSTGRESQL: "PostgreSQL",
    DatabaseSystemType.SQLSERVER: "SQL Server",
}

# MySQL: https://dev.mysql.com/doc/refman/8.4/en/identifiers.html
_IDENTIFIER_QUOTES: dict[DatabaseSystemType, str] = {
    DatabaseSystemType.MYSQL: "`",
}

_BY_ID: dict[str, DatabaseSystemType] = {member.value: member for member in DatabaseSystemType}


def resolve_database_system_type(identifier: str | None) -> DatabaseSystemType | None:
    """Resolve *identifier* to a :class:`DatabaseSystemType`, ignoring case."""
    return DatabaseSystemType.from_id_case_insensitive(identifier)
