"""Configuration for an external schema migration runner."""

from dbkit.migration.configuration import (
    DEFAULT_MIGRATION_BASELINE_VERSION,
    DEFAULT_MIGRATION_ENABLED,
    DEFAULT_MIGRATION_JDBC_SCHEMA_CREATE,
    MigrationConfiguration,
    MigrationConfigurationBuilder,
)
from dbkit.migration.source import SourceMigrationConfigurationBuilder, load_migration_configuration

__all__ = [
    "DEFAULT_MIGRATION_BASELINE_VERSION",
    "DEFAULT_MIGRATION_ENABLED",
    "DEFAULT_MIGRATION_JDBC_SCHEMA_CREATE",
    "MigrationConfiguration",
    "MigrationConfigurationBuilder",
    "SourceMigrationConfigurationBuilder",
    "load_migration_configuration",
]
