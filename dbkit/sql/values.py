"""Value adjustments applied before writing to a column."""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

TrimCallback = Callable[[int, int], None]


def _log_trim(existing_length: int, max_length: int) -> None:
    logger.warning("Cutting value with length %d to %d for DB", existing_length, max_length)


def get_trimmed_to_length(
    value: str | None,
    max_length: int,
    on_trim: TrimCallback | None = _log_trim,
) -> str | None:
    """Cut *value* to at most *max_length* characters.

    Parameters
    ----------
    value:
        The string to store.  ``None`` is returned unchanged.
    max_length:
        Inclusive maximum length; must be greater than zero.
    on_trim:
        Invoked with ``(existing_length, max_length)`` when the value is
        actually cut.  Logs a warning by default; pass ``None`` to stay
        silent.
    """
    if max_length <= 0:
        raise ValueError(f"max_length must be > 0, got {max_length}")
    if value is None:
        return None

    length = len(value)
    if length <= max_length:
        return value

    if on_trim is not None:
        on_trim(length, max_length)
    return value[:max_length]
