"""Unit tests for dbkit.jdbc constants and URL helpers."""

from __future__ import annotations

import pytest
from dbkit.jdbc import (
    H2LockMode,
    H2Log,
    MySQLConnectionProperty,
    build_h2_jdbc_url,
    build_mysql_jdbc_url,
    detect_database_system_type,
    get_jdbc_driver_info,
)
from dbkit.vendor import DatabaseSystemType

# ---------------------------------------------------------------------------
# Driver constants
# ---------------------------------------------------------------------------


class TestJdbcDriverInfo:
    @pytest.mark.parametrize("db_type", list(DatabaseSystemType))
    def test_every_vendor_has_info(self, db_type: DatabaseSystemType):
        info = get_jdbc_driver_info(db_type)
        assert info.db_type is db_type
        assert info.connection_prefix.startswith("jdbc:")
        assert info.default_driver_class_name

    def test_known_values(self):
        assert get_jdbc_driver_info(DatabaseSystemType.H2).default_driver_class_name == "org.h2.Driver"
        assert get_jdbc_driver_info(DatabaseSystemType.POSTGRESQL).connection_prefix == "jdbc:postgresql:"
        mysql = get_jdbc_driver_info(DatabaseSystemType.MYSQL)
        assert mysql.default_driver_class_name == "com.mysql.cj.jdbc.Driver"
        assert mysql.legacy_driver_class_names == ("com.mysql.jdbc.Driver",)

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("jdbc:db2://host:50000/db", DatabaseSystemType.DB2),
            ("jdbc:h2:mem:test", DatabaseSystemType.H2),
            ("jdbc:mysql://localhost/app", DatabaseSystemType.MYSQL),
            ("jdbc:oracle:thin:@localhost:1521/xe", DatabaseSystemType.ORACLE),
            ("jdbc:oracle:oci:@xe", DatabaseSystemType.ORACLE),
            ("jdbc:postgresql://localhost/app", DatabaseSystemType.POSTGRESQL),
            ("jdbc:sqlserver://localhost;databaseName=app", DatabaseSystemType.SQLSERVER),
            ("jdbc:sqlite:app.db", None),
            ("", None),
            (None, None),
        ],
    )
    def test_detect_database_system_type(self, url, expected):
        assert detect_database_system_type(url) is expected


# ---------------------------------------------------------------------------
# H2
# ---------------------------------------------------------------------------


class TestBuildH2JdbcUrl:
    def test_without_properties(self):
        assert build_h2_jdbc_url("jdbc:h2:mem:test") == "jdbc:h2:mem:test"
        assert build_h2_jdbc_url("jdbc:h2:mem:test", {}) == "jdbc:h2:mem:test"

    def test_properties_in_order(self):
        url = build_h2_jdbc_url(
            "jdbc:h2:~/app",
            {"LOCK_MODE": H2LockMode.default(), "LOG": H2Log.DISABLE, "TRACE_LEVEL_FILE": "0"},
        )
        assert url == "jdbc:h2:~/app;LOCK_MODE=3;LOG=0;TRACE_LEVEL_FILE=0"

    def test_rejects_non_h2_url(self):
        with pytest.raises(ValueError, match="H2"):
            build_h2_jdbc_url("jdbc:mysql:a")

    def test_rejects_empty_url(self):
        with pytest.raises(ValueError):
            build_h2_jdbc_url("")

    def test_enum_values(self):
        assert H2LockMode.READ_COMMITTED == 3
        assert H2LockMode.SERIALIZABLE == 1
        assert H2LockMode.READ_UNCOMMITTED == 0
        assert H2Log.default() is H2Log.LOG_AND_SYNC
        assert int(H2Log.LOG) == 1


# ---------------------------------------------------------------------------
# MySQL
# ---------------------------------------------------------------------------


class TestBuildMySQLJdbcUrl:
    def test_without_properties(self):
        assert build_mysql_jdbc_url("jdbc:mysql:a") == "jdbc:mysql:a"
        assert build_mysql_jdbc_url("jdbc:mysql:a", {}) == "jdbc:mysql:a"

    def test_single_property(self):
        url = build_mysql_jdbc_url("jdbc:mysql:a", {MySQLConnectionProperty.AUTO_DESERIALIZE: "true"})
        assert url == "jdbc:mysql:a?autoDeserialize=true"

    def test_multiple_properties(self):
        url = build_mysql_jdbc_url(
            "jdbc:mysql:a",
            {
                MySQLConnectionProperty.AUTO_DESERIALIZE: "true",
                MySQLConnectionProperty.AUTO_SLOW_LOG: "true",
            },
        )
        assert url == "jdbc:mysql:a?autoDeserialize=true&autoSlowLog=true"

    def test_existing_query_is_extended(self):
        url = build_mysql_jdbc_url(
            "jdbc:mysql://h/db?useSSL=true",
            {MySQLConnectionProperty.SERVER_TIMEZONE: "UTC"},
        )
        assert url == "jdbc:mysql://h/db?useSSL=true&serverTimezone=UTC"

    def test_rejects_non_mysql_url(self):
        with pytest.raises(ValueError, match="MySQL"):
            build_mysql_jdbc_url("jdbc:h2:mem:x", {})

    def test_property_metadata(self):
        prop = MySQLConnectionProperty.USE_SSL
        assert prop.property_name == "useSSL"
        assert prop.default_value == "false"
        assert prop.min_version == (3, 0, 2)
        assert MySQLConnectionProperty.USER.min_version is None
        strategy = MySQLConnectionProperty.from_name("ha.loadBalanceStrategy")
        assert strategy is MySQLConnectionProperty.HA_LOAD_BALANCE_STRATEGY
        assert MySQLConnectionProperty.from_name("nope") is None

    def test_property_names_unique(self):
        names = [prop.property_name for prop in MySQLConnectionProperty]
        assert len(names) == len(set(names))
