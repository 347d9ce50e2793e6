"""Tests for centralized logging."""

import io
import json
import logging
import sys

import pytest
from ecsguard.infrastructure.config import EcsGuardConfig
from ecsguard.infrastructure.logging import (
    JSONFormatter,
    configure_logging,
    configure_logging_from_config,
    level_from_name,
)


class TestConfigureLogging:
    def test_default_level(self):
        configure_logging(level=logging.INFO)
        logger = logging.getLogger("ecsguard")
        assert logger.level == logging.INFO

    def test_debug_level(self):
        configure_logging(level=logging.DEBUG)
        logger = logging.getLogger("ecsguard")
        assert logger.level == logging.DEBUG

    def test_json_format(self):
        configure_logging(level=logging.INFO, json_format=True)
        logger = logging.getLogger("ecsguard")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_human_format(self):
        configure_logging(level=logging.INFO, json_format=False)
        logger = logging.getLogger("ecsguard")
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_replaces_handlers(self):
        configure_logging(level=logging.INFO)
        configure_logging(level=logging.DEBUG)
        logger = logging.getLogger("ecsguard")
        assert len(logger.handlers) == 1


class TestConfigureLoggingFromConfig:
    def test_uses_configured_level_and_format(self):
        config = EcsGuardConfig(log_level="debug", log_json=True)
        logger = configure_logging_from_config(config)
        assert logger.level == logging.DEBUG
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_override_keeps_configured_format(self):
        config = EcsGuardConfig(log_level="ERROR", log_json=True)
        logger = configure_logging_from_config(config, level_override=logging.INFO)
        assert logger.level == logging.INFO
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_unknown_level_name_falls_back_to_warning(self):
        logger = configure_logging_from_config(EcsGuardConfig(log_level="chatty"))
        assert logger.level == logging.WARNING

    def test_records_reach_stream_as_json(self):
        stream = io.StringIO()
        configure_logging_from_config(
            EcsGuardConfig(log_level="INFO", log_json=True), stream=stream
        )
        logging.getLogger("ecsguard.test").info("checked %s", "web")
        data = json.loads(stream.getvalue().splitlines()[-1])
        assert data["message"] == "checked web"
        assert data["logger"] == "ecsguard.test"


class TestLevelFromName:
    @pytest.mark.parametrize(
        "name, expected",
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("Warning", logging.WARNING)],
    )
    def test_known_levels(self, name, expected):
        assert level_from_name(name) == expected

    def test_unknown_level_falls_back(self):
        assert level_from_name("chatty") == logging.WARNING
        assert level_from_name("chatty", default=logging.ERROR) == logging.ERROR


class TestJSONFormatter:
    def test_format_basic(self):
        formatter = JSONFormatter()
        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="validated %d description(s)",
            args=(3,),
            exc_info=None,
        )
        data = json.loads(formatter.format(record))
        assert data["message"] == "validated 3 description(s)"
        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert "timestamp" in data

    def test_format_with_exception(self):
        formatter = JSONFormatter()
        try:
            raise ValueError("test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            name="test",
            level=logging.ERROR,
            pathname="test.py",
            lineno=1,
            msg="error occurred",
            args=(),
            exc_info=exc_info,
        )
        data = json.loads(formatter.format(record))
        assert "ValueError" in data["exception"]
