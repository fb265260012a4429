"""Root logger setup driven by :class:`~dbkit.config.Settings`."""

from __future__ import annotations

import logging

from dbkit.config import Settings
from dbkit.json_formatter import JSONFormatter

logger = logging.getLogger(__name__)

_TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings, root: logging.Logger | None = None) -> logging.Handler:
    """Replace the handlers of *root* with a single stream handler.

    Structured JSON output is used when ``settings.structured_logging`` is
    set, plain text otherwise.  Returns the installed handler.
    """
    root_logger = root if root is not None else logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler()
    if settings.structured_logging:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level)

    if settings.structured_logging:
        logger.info("Structured JSON logging enabled")
    return handler
