"""Unit tests for dbkit.json_formatter and dbkit.logging_config."""

from __future__ import annotations

import json
import logging
import sys

import dbkit
import pytest
from dbkit.config import Settings, load_settings
from dbkit.json_formatter import JSONFormatter
from dbkit.logging_config import configure_logging


def _record(msg: str = "hello %s", args: tuple = ("world",), **kwargs) -> logging.LogRecord:
    return logging.LogRecord("dbkit.test", logging.WARNING, __file__, 1, msg, args, None, **kwargs)


class TestJSONFormatter:
    def test_basic_fields(self):
        payload = json.loads(JSONFormatter().format(_record()))
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "dbkit.test"
        assert payload["message"] == "hello world"
        assert "timestamp" in payload
        assert "exc_info" not in payload
        assert "stack_info" not in payload

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord("dbkit.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        payload = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in payload["exc_info"]

    def test_stack_info_included(self):
        record = _record(sinfo="Stack (most recent call last):\n  frame")
        payload = json.loads(JSONFormatter().format(record))
        assert payload["stack_info"].startswith("Stack")

    def test_single_line(self):
        output = JSONFormatter().format(_record(msg="line1\nline2", args=()))
        assert "\n" not in output


class TestConfigureLogging:
    @pytest.fixture()
    def root(self):
        logger = logging.getLogger("dbkit.test.root")
        yield logger
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    def test_text_handler(self, root: logging.Logger):
        handler = configure_logging(Settings(log_level="DEBUG"), root=root)
        assert root.handlers == [handler]
        assert not isinstance(handler.formatter, JSONFormatter)
        assert root.level == logging.DEBUG

    def test_structured_handler(self, root: logging.Logger):
        handler = configure_logging(Settings(structured_logging=True), root=root)
        assert isinstance(handler.formatter, JSONFormatter)
        assert root.level == logging.INFO

    def test_replaces_existing_handlers(self, root: logging.Logger):
        root.addHandler(logging.NullHandler())
        configure_logging(Settings(), root=root)
        assert len(root.handlers) == 1

    def test_exported_from_package_root(self, root: logging.Logger):
        assert dbkit.configure_logging is configure_logging
        assert dbkit.load_settings is load_settings
        assert dbkit.Settings is Settings

        handler = dbkit.configure_logging(dbkit.load_settings(log_level="warning"), root=root)
        assert root.handlers == [handler]
        assert root.level == logging.WARNING
