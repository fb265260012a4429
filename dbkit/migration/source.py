"""Populate a migration configuration from a generic configuration source.

Key suffixes, relative to a prefix that is empty or ends with ``"."``:

=====================  =======  ==========================================
Suffix                 Type     Default
=====================  =======  ==========================================
``enabled``            bool     :data:`DEFAULT_MIGRATION_ENABLED`
``jdbc.url``           str      none
``jdbc.user``          str      none
``jdbc.password``      str      none
``jdbc.schema-create`` bool     :data:`DEFAULT_MIGRATION_JDBC_SCHEMA_CREATE`
``baseline.version``   int      :data:`DEFAULT_MIGRATION_BASELINE_VERSION`
=====================  =======  ==========================================
"""

from __future__ import annotations

import logging

from dbkit.migration.configuration import (
    DEFAULT_MIGRATION_BASELINE_VERSION,
    DEFAULT_MIGRATION_ENABLED,
    DEFAULT_MIGRATION_JDBC_SCHEMA_CREATE,
    MigrationConfiguration,
    MigrationConfigurationBuilder,
)
from dbkit.sources import ConfigSource, check_config_prefix

logger = logging.getLogger(__name__)

SUFFIX_ENABLED = "enabled"
SUFFIX_JDBC_URL = "jdbc.url"
SUFFIX_JDBC_USER = "jdbc.user"
SUFFIX_JDBC_PASSWORD = "jdbc.password"
SUFFIX_JDBC_SCHEMA_CREATE = "jdbc.schema-create"
SUFFIX_BASELINE_VERSION = "baseline.version"


class SourceMigrationConfigurationBuilder(MigrationConfigurationBuilder):
    """A builder pre-filled from a :class:`ConfigSource`.

    All keys are read eagerly in the constructor.  The setters stay usable
    afterwards to override individual values programmatically.

    Raises
    ------
    ConfigurationError
        If *config_prefix* is non-empty and does not end with ``"."``.
    ValueError
        If the configured baseline version is negative.
    """

    def __init__(self, source: ConfigSource, config_prefix: str) -> None:
        if source is None:
            raise ValueError("source must not be None")
        super().__init__()
        self._config_prefix = check_config_prefix(config_prefix)

        self.enabled(source.get_bool(self.config_key_enabled, DEFAULT_MIGRATION_ENABLED))
        self.jdbc_url(source.get_str(self.config_key_jdbc_url))
        self.jdbc_user(source.get_str(self.config_key_jdbc_user))
        self.jdbc_password(source.get_str(self.config_key_jdbc_password))
        self.schema_create(
            source.get_bool(self.config_key_schema_create, DEFAULT_MIGRATION_JDBC_SCHEMA_CREATE)
        )
        self.baseline_version(
            source.get_int(self.config_key_baseline_version, DEFAULT_MIGRATION_BASELINE_VERSION)
        )

        logger.debug("Read migration configuration from %r with prefix '%s'", source, config_prefix)

    @property
    def config_prefix(self) -> str:
        return self._config_prefix

    @property
    def config_key_enabled(self) -> str:
        return self._config_prefix + SUFFIX_ENABLED

    @property
    def config_key_jdbc_url(self) -> str:
        return self._config_prefix + SUFFIX_JDBC_URL

    @property
    def config_key_jdbc_user(self) -> str:
        return self._config_prefix + SUFFIX_JDBC_USER

    @property
    def config_key_jdbc_password(self) -> str:
        return self._config_prefix + SUFFIX_JDBC_PASSWORD

    @property
    def config_key_schema_create(self) -> str:
        return self._config_prefix + SUFFIX_JDBC_SCHEMA_CREATE

    @property
    def config_key_baseline_version(self) -> str:
        return self._config_prefix + SUFFIX_BASELINE_VERSION


def load_migration_configuration(source: ConfigSource, config_prefix: str = "") -> MigrationConfiguration:
    """Validate *config_prefix*, read every key from *source* and build."""
    return SourceMigrationConfigurationBuilder(source, config_prefix).build()
