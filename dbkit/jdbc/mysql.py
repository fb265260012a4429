"""MySQL Connector/J URL handling.

:class:`MySQLConnectionProperty` lists the commonly tuned Connector/J
connection properties together with their driver default and the driver
version that introduced them.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from dbkit.jdbc.constants import MYSQL

Version = tuple[int, int, int]


class MySQLConnectionProperty(Enum):
    """Connector/J connection properties: ``(name, default, min_version)``."""

    # Connection / authentication
    USER = ("user", None, None)
    PASSWORD = ("password", None, None)
    CONNECTION_ATTRIBUTES = ("connectionAttributes", None, (5, 1, 25))
    CREATE_DATABASE_IF_NOT_EXIST = ("createDatabaseIfNotExist", "false", (3, 1, 9))
    DISCONNECT_ON_EXPIRED_PASSWORDS = ("disconnectOnExpiredPasswords", "true", (5, 1, 23))
    INTERACTIVE_CLIENT = ("interactiveClient", "false", (3, 1, 0))

    # Character sets
    CHARACTER_ENCODING = ("characterEncoding", None, (1, 0, 0))
    CHARACTER_SET_RESULTS = ("characterSetResults", None, (3, 0, 13))
    CONNECTION_COLLATION = ("connectionCollation", None, (3, 0, 13))
    SESSION_VARIABLES = ("sessionVariables", None, (3, 1, 8))

    # Networking
    CONNECT_TIMEOUT = ("connectTimeout", "0", (3, 0, 1))
    SOCKET_TIMEOUT = ("socketTimeout", "0", (3, 0, 1))
    MAX_ALLOWED_PACKET = ("maxAllowedPacket", "65535", (5, 1, 8))
    TCP_KEEP_ALIVE = ("tcpKeepAlive", "true", (5, 0, 7))
    TCP_NO_DELAY = ("tcpNoDelay", "true", (5, 0, 7))
    USE_COMPRESSION = ("useCompression", "false", (3, 0, 17))

    # Security
    ALLOW_MULTI_QUERIES = ("allowMultiQueries", "false", (3, 1, 1))
    USE_SSL = ("useSSL", "false", (3, 0, 2))
    REQUIRE_SSL = ("requireSSL", "false", (3, 1, 0))
    VERIFY_SERVER_CERTIFICATE = ("verifyServerCertificate", "true", (5, 1, 6))
    ALLOW_LOAD_LOCAL_INFILE = ("allowLoadLocalInfile", "true", (3, 0, 3))
    ALLOW_PUBLIC_KEY_RETRIEVAL = ("allowPublicKeyRetrieval", "false", (5, 1, 31))
    PARANOID = ("paranoid", "false", (3, 0, 1))

    # Statements and result sets
    CONTINUE_BATCH_ON_ERROR = ("continueBatchOnError", "true", (3, 0, 3))
    USE_SERVER_PREP_STMTS = ("useServerPrepStmts", "false", (3, 1, 0))
    CACHE_PREP_STMTS = ("cachePrepStmts", "false", (3, 0, 10))
    PREP_STMT_CACHE_SIZE = ("prepStmtCacheSize", "25", (3, 0, 10))
    PREP_STMT_CACHE_SQL_LIMIT = ("prepStmtCacheSqlLimit", "256", (3, 0, 10))
    REWRITE_BATCHED_STATEMENTS = ("rewriteBatchedStatements", "false", (3, 1, 13))
    DEFAULT_FETCH_SIZE = ("defaultFetchSize", "0", (3, 1, 9))
    USE_CURSOR_FETCH = ("useCursorFetch", "false", (5, 0, 0))
    MAX_ROWS = ("maxRows", "-1", None)
    TINY_INT1_IS_BIT = ("tinyInt1isBit", "true", (3, 0, 16))
    JDBC_COMPLIANT_TRUNCATION = ("jdbcCompliantTruncation", "true", (3, 1, 2))

    # Date and time
    SERVER_TIMEZONE = ("serverTimezone", None, (3, 0, 2))
    ZERO_DATE_TIME_BEHAVIOR = ("zeroDateTimeBehavior", "exception", (3, 1, 4))
    SEND_FRACTIONAL_SECONDS = ("sendFractionalSeconds", "true", (5, 1, 37))

    # High availability
    AUTO_RECONNECT = ("autoReconnect", "false", (1, 1, 0))
    FAIL_OVER_READ_ONLY = ("failOverReadOnly", "true", (3, 0, 12))
    MAX_RECONNECTS = ("maxReconnects", "3", (1, 1, 0))
    INITIAL_TIMEOUT = ("initialTimeout", "2", (1, 1, 0))
    HA_LOAD_BALANCE_STRATEGY = ("ha.loadBalanceStrategy", "random", (5, 0, 6))

    # Diagnostics
    AUTO_DESERIALIZE = ("autoDeserialize", "false", (3, 1, 5))
    AUTO_SLOW_LOG = ("autoSlowLog", "true", (5, 1, 4))
    LOG_SLOW_QUERIES = ("logSlowQueries", "false", (3, 1, 2))
    SLOW_QUERY_THRESHOLD_MILLIS = ("slowQueryThresholdMillis", "2000", (3, 1, 2))
    EXPLAIN_SLOW_QUERIES = ("explainSlowQueries", "false", (3, 1, 2))
    GATHER_PERF_METRICS = ("gatherPerfMetrics", "false", (3, 1, 2))
    PROFILE_SQL = ("profileSQL", "false", (3, 1, 0))
    USE_USAGE_ADVISOR = ("useUsageAdvisor", "false", (3, 1, 1))
    DUMP_QUERIES_ON_EXCEPTION = ("dumpQueriesOnException", "false", (3, 1, 3))

    def __init__(self, property_name: str, default_value: str | None, min_version: Version | None) -> None:
        self.property_name = property_name
        self.default_value = default_value
        self.min_version = min_version

    @classmethod
    def from_name(cls, property_name: str) -> MySQLConnectionProperty | None:
        for member in cls:
            if member.property_name == property_name:
                return member
        return None


def build_mysql_jdbc_url(
    jdbc_url: str,
    properties: Mapping[MySQLConnectionProperty, str] | None = None,
) -> str:
    """Append *properties* to a MySQL JDBC URL as query parameters.

    Values are appended verbatim (not percent-encoded), in mapping order.

    Raises
    ------
    ValueError
        If *jdbc_url* is empty or not a MySQL URL.
    """
    if not jdbc_url:
        raise ValueError("JDBC URL must not be empty")
    if not MYSQL.matches(jdbc_url):
        raise ValueError(f"The JDBC URL '{jdbc_url}' does not seem to be a MySQL connection string!")

    if not properties:
        return jdbc_url

    query = "&".join(f"{prop.property_name}={value}" for prop, value in properties.items())
    separator = "&" if "?" in jdbc_url else "?"
    return f"{jdbc_url}{separator}{query}"
