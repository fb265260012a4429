"""Callbacks for statements that ran longer than their configured limit.

The timing itself happens elsewhere: an executor measures each statement
and calls :meth:`ExecutionTimeExceededHandlers.notify` when the measured
duration exceeds the limit.  Callbacks may be invoked concurrently from
several executor threads.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ExecutionTimeExceededCallback(Protocol):
    """Receives notifications about slow operations."""

    def on_execution_time_exceeded(self, message: str, execution_millis: int, limit_millis: int) -> None:
        """Called after an operation took longer than *limit_millis*.

        Args:
            message: Description of the slow operation.
            execution_millis: Observed duration in milliseconds.
            limit_millis: The configured limit in milliseconds.
        """
        ...


class LoggingExecutionTimeExceededCallback:
    """Log slow operations at warning level.

    With ``emit_stack_trace`` enabled the log record carries the stack of
    the calling thread, which shows where the slow call came from.
    """

    def __init__(self, emit_stack_trace: bool) -> None:
        self.emit_stack_trace = emit_stack_trace

    def on_execution_time_exceeded(self, message: str, execution_millis: int, limit_millis: int) -> None:
        try:
            logger.warning(
                "%s took %dms (limit is %d ms)",
                message,
                execution_millis,
                limit_millis,
                stack_info=self.emit_stack_trace,
                stacklevel=2,
            )
        except Exception:  # noqa: BLE001
            # A broken log sink must never fail the timed operation.
            return

    def __repr__(self) -> str:
        return f"{type(self).__name__}(emit_stack_trace={self.emit_stack_trace})"


class ExecutionTimeExceededHandlers:
    """Thread-safe list of :class:`ExecutionTimeExceededCallback` objects."""

    def __init__(self, *callbacks: ExecutionTimeExceededCallback) -> None:
        self._lock = threading.Lock()
        self._callbacks: list[ExecutionTimeExceededCallback] = list(callbacks)

    def add(self, callback: ExecutionTimeExceededCallback) -> None:
        with self._lock:
            self._callbacks.append(callback)

    def remove(self, callback: ExecutionTimeExceededCallback) -> bool:
        """Remove *callback*; return ``False`` if it was not registered."""
        with self._lock:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                return False
            return True

    def clear(self) -> None:
        with self._lock:
            self._callbacks.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._callbacks)

    def callbacks(self) -> list[ExecutionTimeExceededCallback]:
        """Return a copy of the registered callbacks."""
        with self._lock:
            return list(self._callbacks)

    def notify(self, message: str, execution_millis: int, limit_millis: int) -> None:
        """Invoke every registered callback.

        A failing callback is logged and skipped; the remaining callbacks
        still run and nothing propagates to the caller.
        """
        for callback in self.callbacks():
            try:
                callback.on_execution_time_exceeded(message, execution_millis, limit_millis)
            except Exception:
                logger.exception("Execution time callback %r failed", callback)


_lock = threading.Lock()
_default_handlers: ExecutionTimeExceededHandlers | None = None


def execution_time_exceeded_handlers() -> ExecutionTimeExceededHandlers:
    """Return the process-wide handler list.

    Lazily created with a single :class:`LoggingExecutionTimeExceededCallback`
    that emits stack traces.
    """
    global _default_handlers
    if _default_handlers is not None:
        return _default_handlers

    with _lock:
        if _default_handlers is None:
            _default_handlers = ExecutionTimeExceededHandlers(
                LoggingExecutionTimeExceededCallback(emit_stack_trace=True)
            )
        return _default_handlers


def reset_execution_time_exceeded_handlers() -> None:
    """Drop the process-wide handler list.  **For testing only.**"""
    global _default_handlers
    with _lock:
        _default_handlers = None
