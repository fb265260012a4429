"""Generic key/value configuration sources.

Configuration consumers in dbkit never parse raw strings themselves: they
ask a :class:`ConfigSource` for a typed value and supply the default to
use when the key is absent.  Keys are dotted, e.g. ``db.jdbc.url``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import TypeAdapter, ValidationError

from dbkit.errors import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

PREFIX_SEPARATOR = "."

_BOOL_ADAPTER: TypeAdapter[bool] = TypeAdapter(bool)
_INT_ADAPTER: TypeAdapter[int] = TypeAdapter(int)


def check_config_prefix(prefix: str) -> str:
    """Validate a configuration key prefix and return it unchanged.

    The prefix must be either empty or end with ``"."``.

    Raises
    ------
    ConfigurationError
        If *prefix* is ``None`` or non-empty without the trailing dot.
    """
    if prefix is None:
        raise ConfigurationError("Config prefix must not be None")
    if prefix and not prefix.endswith(PREFIX_SEPARATOR):
        raise ConfigurationError(f"Config prefix '{prefix}' should end with a dot")
    return prefix


@runtime_checkable
class ConfigSource(Protocol):
    """Read-only typed access to configuration values."""

    def has(self, key: str) -> bool:
        """Return ``True`` if *key* has a value."""
        ...

    def get_str(self, key: str, default: str | None = None) -> str | None:
        """Return the value of *key* as string, or *default*."""
        ...

    def get_bool(self, key: str, default: bool) -> bool:
        """Return the value of *key* as boolean, or *default*."""
        ...

    def get_int(self, key: str, default: int) -> int:
        """Return the value of *key* as integer, or *default*."""
        ...


class MappingConfigSource:
    """A :class:`ConfigSource` over an in-memory mapping.

    Values are coerced with pydantic's lax mode, so ``"true"``/``"1"``/
    ``"yes"`` read as booleans and ``"42"`` reads as an integer.  A value
    that cannot be coerced is logged and replaced by the default.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: Mapping[str, Any] = values if values is not None else {}

    def _raw(self, key: str) -> Any:
        return self._values.get(key)

    def has(self, key: str) -> bool:
        return self._raw(key) is not None

    def get_str(self, key: str, default: str | None = None) -> str | None:
        raw = self._raw(key)
        if raw is None:
            return default
        return str(raw)

    def get_bool(self, key: str, default: bool) -> bool:
        return self._coerce(key, _BOOL_ADAPTER, "boolean", default)

    def get_int(self, key: str, default: int) -> int:
        return self._coerce(key, _INT_ADAPTER, "integer", default)

    def _coerce(self, key: str, adapter: TypeAdapter[T], type_name: str, default: T) -> T:
        raw = self._raw(key)
        if raw is None:
            return default
        if isinstance(raw, str):
            raw = raw.strip()
            if not raw:
                return default
        try:
            return adapter.validate_python(raw)
        except ValidationError:
            logger.warning(
                "Config value %r of key '%s' is not a valid %s; using default %r",
                raw,
                key,
                type_name,
                default,
            )
            return default

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={sorted(self._values)!r})"


class EnvironmentConfigSource(MappingConfigSource):
    """A :class:`ConfigSource` backed by environment variables.

    The key ``db.jdbc.schema-create`` is looked up as
    ``DB_JDBC_SCHEMA_CREATE``.  An optional *env_prefix* is prepended to
    every variable name.
    """

    def __init__(self, environ: Mapping[str, str] | None = None, env_prefix: str = "") -> None:
        super().__init__(os.environ if environ is None else environ)
        self._env_prefix = env_prefix

    @staticmethod
    def to_env_name(key: str) -> str:
        return key.replace(".", "_").replace("-", "_").upper()

    def _raw(self, key: str) -> Any:
        return self._values.get(self._env_prefix + self.to_env_name(key))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(env_prefix={self._env_prefix!r})"


class ChainedConfigSource:
    """Query several sources in order; the first one having the key wins."""

    def __init__(self, *sources: ConfigSource) -> None:
        if not sources:
            raise ValueError("At least one config source is required")
        self._sources = sources

    def _first(self, key: str) -> ConfigSource | None:
        for source in self._sources:
            if source.has(key):
                return source
        return None

    def has(self, key: str) -> bool:
        return self._first(key) is not None

    def get_str(self, key: str, default: str | None = None) -> str | None:
        source = self._first(key)
        return default if source is None else source.get_str(key, default)

    def get_bool(self, key: str, default: bool) -> bool:
        source = self._first(key)
        return default if source is None else source.get_bool(key, default)

    def get_int(self, key: str, default: int) -> int:
        source = self._first(key)
        return default if source is None else source.get_int(key, default)
