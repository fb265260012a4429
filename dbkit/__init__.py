"""dbkit -- vendor abstraction and configuration resolution for relational databases.

Usage::

    from dbkit import (
        DatabaseSystemType,
        MappingConfigSource,
        get_table_name_prefix,
        load_migration_configuration,
        resolve_database_system_type,
    )

    db_type = resolve_database_system_type("PostgreSQL")
    prefix = get_table_name_prefix(db_type, "app")        # '"app".'
    source = MappingConfigSource({"db.migration.baseline.version": "3"})
    migration = load_migration_configuration(source, "db.migration.")
"""

from dbkit.callback import (
    ExecutionTimeExceededCallback,
    ExecutionTimeExceededHandlers,
    LoggingExecutionTimeExceededCallback,
    execution_time_exceeded_handlers,
)
from dbkit.config import Settings, load_settings
from dbkit.errors import ConfigurationError, DbKitError
from dbkit.jdbc import JdbcConfiguration, JdbcConfigurationView, SourceJdbcConfiguration
from dbkit.logging_config import configure_logging
from dbkit.migration import (
    MigrationConfiguration,
    MigrationConfigurationBuilder,
    SourceMigrationConfigurationBuilder,
    load_migration_configuration,
)
from dbkit.sources import (
    ChainedConfigSource,
    ConfigSource,
    EnvironmentConfigSource,
    MappingConfigSource,
    check_config_prefix,
)
from dbkit.sql import get_table_name_prefix, get_trimmed_to_length
from dbkit.vendor import DatabaseSystemType, resolve_database_system_type

__all__ = [
    # Vendors
    "DatabaseSystemType",
    "resolve_database_system_type",
    # SQL fragments
    "get_table_name_prefix",
    "get_trimmed_to_length",
    # Configuration sources
    "ConfigSource",
    "MappingConfigSource",
    "EnvironmentConfigSource",
    "ChainedConfigSource",
    "check_config_prefix",
    # JDBC
    "JdbcConfigurationView",
    "JdbcConfiguration",
    "SourceJdbcConfiguration",
    # Migration
    "MigrationConfiguration",
    "MigrationConfigurationBuilder",
    "SourceMigrationConfigurationBuilder",
    "load_migration_configuration",
    # Callbacks
    "ExecutionTimeExceededCallback",
    "ExecutionTimeExceededHandlers",
    "LoggingExecutionTimeExceededCallback",
    "execution_time_exceeded_handlers",
    # Settings and logging
    "Settings",
    "load_settings",
    "configure_logging",
    # Exceptions
    "DbKitError",
    "ConfigurationError",
]
