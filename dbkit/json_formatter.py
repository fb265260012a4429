"""JSON log formatter for log aggregation.

Emits each log record as a single-line JSON object so aggregators
(Datadog, Splunk, CloudWatch Logs, ELK, etc.) can index fields without
regex parsing.

Output schema per line::

    {
        "timestamp": "2025-05-15T12:34:56.789012+00:00",
        "level": "WARNING",
        "logger": "dbkit.callback.execution_time",
        "message": "DB execution select took 1500ms (limit is 1000 ms)",
        "exc_info": "Traceback ...",    // present only on exceptions
        "stack_info": "Stack (most ..." // present only when requested
    }
"""

from __future__ import annotations

import json
import logging
import traceback
from datetime import UTC, datetime
from typing import Any


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Render *record* as a single JSON line."""
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_info"] = "".join(traceback.format_exception(*record.exc_info))

        # Set by ``stack_info=True``, e.g. by the slow-statement callback.
        if record.stack_info:
            payload["stack_info"] = record.stack_info

        return json.dumps(payload, default=str, ensure_ascii=False)
