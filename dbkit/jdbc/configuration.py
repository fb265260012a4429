"""JDBC connection configuration.

Two flavours share the :class:`JdbcConfigurationView` interface:

* :class:`JdbcConfiguration` -- an immutable value, loaded from
  ``DBKIT_``-prefixed environment variables or passed explicitly.
* :class:`SourceJdbcConfiguration` -- a read-through view over a
  :class:`~dbkit.sources.ConfigSource`; every access reads the source
  again, nothing is cached.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dbkit.errors import ConfigurationError
from dbkit.sources import ConfigSource, check_config_prefix
from dbkit.vendor import DatabaseSystemType

DEFAULT_EXECUTION_TIME_WARNING_ENABLED = True
DEFAULT_EXECUTION_TIME_WARNING_MS = 1000
DEFAULT_DEBUG_CONNECTIONS = False
DEFAULT_DEBUG_TRANSACTIONS = False
DEFAULT_DEBUG_SQL = False


class JdbcConfigurationView(Protocol):
    """Read-only JDBC configuration options.

    ``jdbc_database_system_type`` is derived from ``jdbc_database_type``
    on every access with a case-insensitive lookup.  Implementations may
    use another resolution strategy.  The password is wrapped in a
    :class:`~pydantic.SecretStr`; call ``get_secret_value()`` for the text.
    """

    @property
    def jdbc_database_type(self) -> str | None: ...

    @property
    def jdbc_database_system_type(self) -> DatabaseSystemType | None: ...

    @property
    def jdbc_driver(self) -> str | None: ...

    @property
    def jdbc_url(self) -> str | None: ...

    @property
    def jdbc_user(self) -> str | None: ...

    @property
    def jdbc_password(self) -> SecretStr | None: ...

    @property
    def jdbc_schema(self) -> str | None: ...

    @property
    def jdbc_execution_time_warning_enabled(self) -> bool: ...

    @property
    def jdbc_execution_time_warning_ms(self) -> int: ...

    @property
    def jdbc_debug_connections(self) -> bool: ...

    @property
    def jdbc_debug_transactions(self) -> bool: ...

    @property
    def jdbc_debug_sql(self) -> bool: ...


class JdbcConfiguration(BaseSettings):
    """Immutable JDBC configuration.

    All values can be overridden via environment variables prefixed with
    ``DBKIT_`` (e.g. ``DBKIT_JDBC_URL=jdbc:h2:mem:test``) or through a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="DBKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    jdbc_database_type: str | None = None
    jdbc_driver: str | None = None
    jdbc_url: str | None = None
    jdbc_user: str | None = None
    jdbc_password: SecretStr | None = None
    jdbc_schema: str | None = None

    # Slow statement reporting
    jdbc_execution_time_warning_enabled: bool = DEFAULT_EXECUTION_TIME_WARNING_ENABLED
    jdbc_execution_time_warning_ms: int = Field(default=DEFAULT_EXECUTION_TIME_WARNING_MS, ge=0)

    # Debug switches
    jdbc_debug_connections: bool = DEFAULT_DEBUG_CONNECTIONS
    jdbc_debug_transactions: bool = DEFAULT_DEBUG_TRANSACTIONS
    jdbc_debug_sql: bool = DEFAULT_DEBUG_SQL

    @field_validator("jdbc_password", mode="before")
    @classmethod
    def mask_password_in_repr(cls, v: str | SecretStr | None) -> SecretStr | None:
        if v is None:
            return None
        if isinstance(v, SecretStr):
            return v
        return SecretStr(v)

    @property
    def jdbc_database_system_type(self) -> DatabaseSystemType | None:
        return DatabaseSystemType.from_id_case_insensitive(self.jdbc_database_type)


class SourceJdbcConfiguration:
    """JDBC configuration read on demand from a :class:`ConfigSource`.

    Parameters
    ----------
    source:
        The configuration source to read from.
    config_prefix:
        Common key prefix, either empty or ending with ``"."``.  Checked
        immediately; a malformed prefix raises
        :class:`~dbkit.errors.ConfigurationError`.
    """

    SUFFIX_DATABASE_TYPE = "database-type"
    SUFFIX_DRIVER = "driver"
    SUFFIX_URL = "url"
    SUFFIX_USER = "user"
    SUFFIX_PASSWORD = "password"
    SUFFIX_SCHEMA = "schema"
    SUFFIX_EXECUTION_TIME_WARNING_ENABLED = "execution-time-warning.enabled"
    SUFFIX_EXECUTION_TIME_WARNING_MS = "execution-time-warning.ms"
    SUFFIX_DEBUG_CONNECTIONS = "debug.connections"
    SUFFIX_DEBUG_TRANSACTIONS = "debug.transactions"
    SUFFIX_DEBUG_SQL = "debug.sql"

    def __init__(self, source: ConfigSource, config_prefix: str) -> None:
        if source is None:
            raise ValueError("source must not be None")
        self._source = source
        self._config_prefix = check_config_prefix(config_prefix)

    @property
    def config_prefix(self) -> str:
        return self._config_prefix

    # -- config keys ---------------------------------------------------------

    @property
    def config_key_database_type(self) -> str:
        return self._config_prefix + self.SUFFIX_DATABASE_TYPE

    @property
    def config_key_jdbc_driver(self) -> str:
        return self._config_prefix + self.SUFFIX_DRIVER

    @property
    def config_key_jdbc_url(self) -> str:
        return self._config_prefix + self.SUFFIX_URL

    @property
    def config_key_jdbc_user(self) -> str:
        return self._config_prefix + self.SUFFIX_USER

    @property
    def config_key_jdbc_password(self) -> str:
        return self._config_prefix + self.SUFFIX_PASSWORD

    @property
    def config_key_jdbc_schema(self) -> str:
        return self._config_prefix + self.SUFFIX_SCHEMA

    @property
    def config_key_execution_time_warning_enabled(self) -> str:
        return self._config_prefix + self.SUFFIX_EXECUTION_TIME_WARNING_ENABLED

    @property
    def config_key_execution_time_warning_ms(self) -> str:
        return self._config_prefix + self.SUFFIX_EXECUTION_TIME_WARNING_MS

    @property
    def config_key_debug_connections(self) -> str:
        return self._config_prefix + self.SUFFIX_DEBUG_CONNECTIONS

    @property
    def config_key_debug_transactions(self) -> str:
        return self._config_prefix + self.SUFFIX_DEBUG_TRANSACTIONS

    @property
    def config_key_debug_sql(self) -> str:
        return self._config_prefix + self.SUFFIX_DEBUG_SQL

    # -- values --------------------------------------------------------------

    @property
    def jdbc_database_type(self) -> str | None:
        return self._source.get_str(self.config_key_database_type)

    @property
    def jdbc_database_system_type(self) -> DatabaseSystemType | None:
        return DatabaseSystemType.from_id_case_insensitive(self.jdbc_database_type)

    @property
    def jdbc_driver(self) -> str | None:
        return self._source.get_str(self.config_key_jdbc_driver)

    @property
    def jdbc_url(self) -> str | None:
        return self._source.get_str(self.config_key_jdbc_url)

    @property
    def jdbc_user(self) -> str | None:
        return self._source.get_str(self.config_key_jdbc_user)

    @property
    def jdbc_password(self) -> SecretStr | None:
        value = self._source.get_str(self.config_key_jdbc_password)
        return None if value is None else SecretStr(value)

    @property
    def jdbc_schema(self) -> str | None:
        return self._source.get_str(self.config_key_jdbc_schema)

    @property
    def jdbc_execution_time_warning_enabled(self) -> bool:
        return self._source.get_bool(
            self.config_key_execution_time_warning_enabled,
            DEFAULT_EXECUTION_TIME_WARNING_ENABLED,
        )

    @property
    def jdbc_execution_time_warning_ms(self) -> int:
        return self._source.get_int(
            self.config_key_execution_time_warning_ms,
            DEFAULT_EXECUTION_TIME_WARNING_MS,
        )

    @property
    def jdbc_debug_connections(self) -> bool:
        return self._source.get_bool(self.config_key_debug_connections, DEFAULT_DEBUG_CONNECTIONS)

    @property
    def jdbc_debug_transactions(self) -> bool:
        return self._source.get_bool(self.config_key_debug_transactions, DEFAULT_DEBUG_TRANSACTIONS)

    @property
    def jdbc_debug_sql(self) -> bool:
        return self._source.get_bool(self.config_key_debug_sql, DEFAULT_DEBUG_SQL)

    def snapshot(self) -> JdbcConfiguration:
        """Read every value once and return them as an immutable value.

        Raises
        ------
        ConfigurationError
            If the configured execution time threshold is negative.
        """
        warning_ms = self.jdbc_execution_time_warning_ms
        if warning_ms < 0:
            raise ConfigurationError(
                f"Config key '{self.config_key_execution_time_warning_ms}' must be >= 0, got {warning_ms}"
            )
        return JdbcConfiguration(
            jdbc_database_type=self.jdbc_database_type,
            jdbc_driver=self.jdbc_driver,
            jdbc_url=self.jdbc_url,
            jdbc_user=self.jdbc_user,
            jdbc_password=self.jdbc_password,
            jdbc_schema=self.jdbc_schema,
            jdbc_execution_time_warning_enabled=self.jdbc_execution_time_warning_enabled,
            jdbc_execution_time_warning_ms=warning_ms,
            jdbc_debug_connections=self.jdbc_debug_connections,
            jdbc_debug_transactions=self.jdbc_debug_transactions,
            jdbc_debug_sql=self.jdbc_debug_sql,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self._source!r}, config_prefix={self._config_prefix!r})"
