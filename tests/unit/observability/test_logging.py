"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from fix_commons.config import GeneratorSettings
from fix_commons.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


class TestJsonLoggerFactory:
    def test_configures_root_logger(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_accepts_level_name_from_settings(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(GeneratorSettings(log_level="warning").log_level)
        assert logging.getLogger().level == logging.WARNING

    def test_stdlib_records_render_as_json(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        formatter = logging.getLogger().handlers[0].formatter
        record = logging.LogRecord("fix_commons.test", logging.INFO, __file__, 1, "order_id.generated", None, None)
        payload = json.loads(formatter.format(record))
        assert payload["event"] == "order_id.generated"
        assert payload["level"] == "info"
        assert payload["logger"] == "fix_commons.test"


class TestGetLogger:
    def test_returns_structlog_logger(self) -> None:
        logger = get_logger("fix_commons.test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as captured:
            get_logger("fix_commons.test", session="S1").info("hex_token.generated")
        assert captured[0]["session"] == "S1"
        assert captured[0]["event"] == "hex_token.generated"
