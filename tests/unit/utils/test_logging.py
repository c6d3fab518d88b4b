"""Tests for logging configuration utilities."""

from __future__ import annotations

import io
import json
import logging
import sys
from pathlib import Path

from pdspring.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


def _record(msg: str = "Test message", level: int = logging.INFO, **kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=kwargs.pop("exc_info", None),
    )
    record.funcName = "test_function"
    record.module = "test_module"
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self) -> None:
        """Test basic log record formatting to JSON."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "test.logger"
        assert data["context"]["module"] == "test_module"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_log_with_extra_fields(self) -> None:
        """Test that extra fields are included in context."""
        record = _record(preset="snappy", stiffness=42.8)
        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["preset"] == "snappy"
        assert data["context"]["stiffness"] == 42.8

    def test_log_with_exception(self) -> None:
        """Test that exception info is captured in context."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = _record("Error occurred", logging.ERROR, exc_info=exc_info)
        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["level"] == "ERROR"
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "Test error"
        assert "ValueError: Test error" in data["context"]["stack_trace"]

    def test_private_attributes_are_skipped(self) -> None:
        """Underscore-prefixed attributes stay out of the context."""
        data = json.loads(StructuredJSONFormatter().format(_record(_internal="x")))
        assert "_internal" not in data["context"]


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_sets_level(self) -> None:
        """Level names are case-insensitive."""
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_text_format_to_file(self, tmp_path: Path) -> None:
        """Text logs go to the requested file with the given format."""
        log_file = tmp_path / "pdspring.log"
        configure_logging(
            level="INFO", format_string="%(levelname)s|%(message)s", filename=str(log_file)
        )

        logging.getLogger("pdspring.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "INFO|hello" in log_file.read_text()

    def test_structured_to_file(self, tmp_path: Path) -> None:
        """structured=True writes JSON lines."""
        log_file = tmp_path / "pdspring.jsonl"
        configure_logging(level="INFO", filename=str(log_file), structured=True)

        logging.getLogger("pdspring.test").warning("spring settled")
        for handler in logging.getLogger().handlers:
            handler.flush()

        line = log_file.read_text().strip().splitlines()[-1]
        data = json.loads(line)
        assert data["level"] == "WARNING"
        assert data["message"] == "spring settled"
        assert data["context"]["logger_name"] == "pdspring.test"

    def test_reconfigure_replaces_handlers(self) -> None:
        """Calling twice leaves a single handler installed."""
        configure_logging(level="INFO")
        configure_logging(level="WARNING")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len([h for h in root.handlers if type(h) is logging.StreamHandler]) == 1

    def test_custom_stream(self) -> None:
        """Console logs go to the given stream instead of stdout."""
        buffer = io.StringIO()
        configure_logging(level="INFO", format_string="%(message)s", stream=buffer)

        logging.getLogger("pdspring.test").info("to the buffer")

        assert buffer.getvalue() == "to the buffer\n"


class TestGetLogger:
    """Test suite for get_logger."""

    def test_plain_logger(self) -> None:
        """Without context a plain Logger is returned."""
        logger = get_logger("pdspring.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "pdspring.test"

    def test_adapter_with_context(self) -> None:
        """Context kwargs wrap the logger in a LoggerAdapter."""
        logger = get_logger("pdspring.test", preset="bouncy")
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"preset": "bouncy"}
