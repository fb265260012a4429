"""JDBC configuration, vendor constants and URL helpers."""

from dbkit.jdbc.configuration import (
    JdbcConfiguration,
    JdbcConfigurationView,
    SourceJdbcConfiguration,
)
from dbkit.jdbc.constants import JdbcDriverInfo, detect_database_system_type, get_jdbc_driver_info
from dbkit.jdbc.h2 import H2LockMode, H2Log, build_h2_jdbc_url
from dbkit.jdbc.mysql import MySQLConnectionProperty, build_mysql_jdbc_url

__all__ = [
    "JdbcConfiguration",
    "JdbcConfigurationView",
    "SourceJdbcConfiguration",
    "JdbcDriverInfo",
    "detect_database_system_type",
    "get_jdbc_driver_info",
    "H2LockMode",
    "H2Log",
    "build_h2_jdbc_url",
    "MySQLConnectionProperty",
    "build_mysql_jdbc_url",
]
