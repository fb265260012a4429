"""Callbacks invoked by external statement executors."""

from dbkit.callback.execution_time import (
    ExecutionTimeExceededCallback,
    ExecutionTimeExceededHandlers,
    LoggingExecutionTimeExceededCallback,
    execution_time_exceeded_handlers,
    reset_execution_time_exceeded_handlers,
)

__all__ = [
    "ExecutionTimeExceededCallback",
    "ExecutionTimeExceededHandlers",
    "LoggingExecutionTimeExceededCallback",
    "execution_time_exceeded_handlers",
    "reset_execution_time_exceeded_handlers",
]
