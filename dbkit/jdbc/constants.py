"""JDBC connection URL prefixes and default driver classes per vendor."""

from __future__ import annotations

from dataclasses import dataclass

from dbkit.vendor import DatabaseSystemType


@dataclass(frozen=True, slots=True)
class JdbcDriverInfo:
    """Static JDBC facts about one database system."""

    db_type: DatabaseSystemType
    connection_prefixes: tuple[str, ...]
    default_driver_class_name: str
    legacy_driver_class_names: tuple[str, ...] = ()

    @property
    def connection_prefix(self) -> str:
        """The primary URL prefix, e.g. ``jdbc:mysql:``."""
        return self.connection_prefixes[0]

    def matches(self, jdbc_url: str) -> bool:
        return jdbc_url.startswith(self.connection_prefixes)


DB2 = JdbcDriverInfo(
    db_type=DatabaseSystemType.DB2,
    connection_prefixes=("jdbc:db2://",),
    default_driver_class_name="com.ibm.db2.jcc.DB2Driver",
)

H2 = JdbcDriverInfo(
    db_type=DatabaseSystemType.H2,
    connection_prefixes=("jdbc:h2:",),
    default_driver_class_name="org.h2.Driver",
)

MYSQL = JdbcDriverInfo(
    db_type=DatabaseSystemType.MYSQL,
    connection_prefixes=("jdbc:mysql:",),
    default_driver_class_name="com.mysql.cj.jdbc.Driver",
    legacy_driver_class_names=("com.mysql.jdbc.Driver",),
)

ORACLE = JdbcDriverInfo(
    db_type=DatabaseSystemType.ORACLE,
    # thin first, OCI second
    connection_prefixes=("jdbc:oracle:thin:", "jdbc:oracle:oci:"),
    default_driver_class_name="oracle.jdbc.driver.OracleDriver",
)

POSTGRESQL = JdbcDriverInfo(
    db_type=DatabaseSystemType.POSTGRESQL,
    connection_prefixes=("jdbc:postgresql:",),
    default_driver_class_name="org.postgresql.Driver",
)

SQLSERVER = JdbcDriverInfo(
    db_type=DatabaseSystemType.SQLSERVER,
    connection_prefixes=("jdbc:sqlserver://",),
    default_driver_class_name="com.microsoft.sqlserver.jdbc.SQLServerDriver",
)

_DRIVER_INFOS: dict[DatabaseSystemType, JdbcDriverInfo] = {
    info.db_type: info for info in (DB2, H2, MYSQL, ORACLE, POSTGRESQL, SQLSERVER)
}


def get_jdbc_driver_info(db_type: DatabaseSystemType) -> JdbcDriverInfo:
    """Return the JDBC facts for *db_type*."""
    return _DRIVER_INFOS[db_type]


def detect_database_system_type(jdbc_url: str | None) -> DatabaseSystemType | None:
    """Guess the database system from a JDBC URL prefix.

    Returns ``None`` for an empty or unrecognised URL.
    """
    if not jdbc_url:
        return None
    for info in _DRIVER_INFOS.values():
        if info.matches(jdbc_url):
            return info.db_type
    return None
