"""Schema migration runner configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr

DEFAULT_MIGRATION_ENABLED = True
DEFAULT_MIGRATION_JDBC_SCHEMA_CREATE = False
DEFAULT_MIGRATION_BASELINE_VERSION = 0


class MigrationConfiguration(BaseModel):
    """Parameters handed to an external schema migration runner.

    Immutable; compares by value.  ``baseline_version`` is the version the
    runner assumes history starts at: ``0`` means no prior migrations.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(
        default=DEFAULT_MIGRATION_ENABLED,
        description="Whether the migration runner should run at all.",
    )
    jdbc_url: str | None = Field(
        default=None,
        description="JDBC URL the runner connects to.",
    )
    jdbc_user: str | None = Field(
        default=None,
        description="JDBC user name.",
    )
    jdbc_password: SecretStr | None = Field(
        default=None,
        description="JDBC password; read it with get_secret_value().",
    )
    schema_create: bool = Field(
        default=DEFAULT_MIGRATION_JDBC_SCHEMA_CREATE,
        description="Create the schema if it does not exist yet.",
    )
    baseline_version: int = Field(
        default=DEFAULT_MIGRATION_BASELINE_VERSION,
        ge=0,
        description="Baseline version; 0 means no previous version.",
    )

    @classmethod
    def builder(cls, base: MigrationConfiguration | None = None) -> MigrationConfigurationBuilder:
        """Return a new builder, optionally seeded with the values of *base*."""
        return MigrationConfigurationBuilder(base)


class MigrationConfigurationBuilder:
    """Fluent, single-use staging object for :class:`MigrationConfiguration`.

    Not thread-safe; populate it from one thread and call :meth:`build`.
    """

    def __init__(self, base: MigrationConfiguration | None = None) -> None:
        self._enabled = DEFAULT_MIGRATION_ENABLED
        self._jdbc_url: str | None = None
        self._jdbc_user: str | None = None
        self._jdbc_password: str | SecretStr | None = None
        self._schema_create = DEFAULT_MIGRATION_JDBC_SCHEMA_CREATE
        self._baseline_version = DEFAULT_MIGRATION_BASELINE_VERSION

        if base is not None:
            (
                self.enabled(base.enabled)
                .jdbc_url(base.jdbc_url)
                .jdbc_user(base.jdbc_user)
                .jdbc_password(base.jdbc_password)
                .schema_create(base.schema_create)
                .baseline_version(base.baseline_version)
            )

    def enabled(self, enabled: bool = True) -> MigrationConfigurationBuilder:
        self._enabled = enabled
        return self

    def disabled(self) -> MigrationConfigurationBuilder:
        return self.enabled(False)

    def jdbc_url(self, jdbc_url: str | None) -> MigrationConfigurationBuilder:
        self._jdbc_url = jdbc_url
        return self

    def jdbc_user(self, jdbc_user: str | None) -> MigrationConfigurationBuilder:
        self._jdbc_user = jdbc_user
        return self

    def jdbc_password(self, jdbc_password: str | SecretStr | None) -> MigrationConfigurationBuilder:
        self._jdbc_password = jdbc_password
        return self

    def schema_create(self, schema_create: bool) -> MigrationConfigurationBuilder:
        self._schema_create = schema_create
        return self

    def baseline_version(self, baseline_version: int) -> MigrationConfigurationBuilder:
        if baseline_version < 0:
            raise ValueError(f"baseline_version must be >= 0, got {baseline_version}")
        self._baseline_version = baseline_version
        return self

    def build(self) -> MigrationConfiguration:
        # Everything is optional - nothing to check beyond the field rules
        return MigrationConfiguration(
            enabled=self._enabled,
            jdbc_url=self._jdbc_url,
            jdbc_user=self._jdbc_user,
            jdbc_password=self._jdbc_password,
            schema_create=self._schema_create,
            baseline_version=self._baseline_version,
        )
