"""H2 specific JDBC URL handling."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum

from dbkit.jdbc.constants import H2


class H2LockMode(IntEnum):
    """Values of the H2 ``LOCK_MODE`` URL setting."""

    READ_COMMITTED = 3
    SERIALIZABLE = 1
    READ_UNCOMMITTED = 0

    @classmethod
    def default(cls) -> H2LockMode:
        return cls.READ_COMMITTED


class H2Log(IntEnum):
    """Values of the H2 ``LOG`` URL setting."""

    DISABLE = 0
    LOG = 1
    LOG_AND_SYNC = 2

    @classmethod
    def default(cls) -> H2Log:
        return cls.LOG_AND_SYNC


def build_h2_jdbc_url(jdbc_url: str, properties: Mapping[str, object] | None = None) -> str:
    """Append *properties* to an H2 JDBC URL as ``;KEY=VALUE`` pairs.

    Raises
    ------
    ValueError
        If *jdbc_url* is empty or not an H2 URL.
    """
    if not jdbc_url:
        raise ValueError("JDBC URL must not be empty")
    if not H2.matches(jdbc_url):
        raise ValueError(f"The JDBC URL '{jdbc_url}' does not seem to be a H2 connection string!")

    parts = [jdbc_url]
    if properties:
        for key, value in properties.items():
            # IntEnum members render as their number
            rendered = str(int(value)) if isinstance(value, IntEnum) else str(value)
            parts.append(f";{key}={rendered}")
    return "".join(parts)
