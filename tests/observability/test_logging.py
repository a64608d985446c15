"""
Test suite for logging helpers.

Tests package logger configuration and body rendering for API traffic logs.

System role: Verification of observability utilities
"""

import io
import logging

import pytest

from circonus_client.observability.log_utils import log_with_context, safe_log_value
from circonus_client.observability.logger import PACKAGE_LOGGER, configure_logging, get_logger


@pytest.fixture
def package_logger():
    """Restore the circonus_client logger handlers and level after the test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = logger.handlers[:]
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_should_replace_own_handler_on_reconfigure(self, package_logger: logging.Logger) -> None:
        """Test repeated configuration does not duplicate handlers."""
        before = len(package_logger.handlers)

        configure_logging()
        configure_logging("debug")

        assert len(package_logger.handlers) == before + 1
        assert package_logger.level == logging.DEBUG

    def test_should_leave_root_logger_alone(self, package_logger: logging.Logger) -> None:
        """Test the application's root handlers are untouched."""
        root_handlers = logging.getLogger().handlers[:]

        configure_logging()

        assert logging.getLogger().handlers == root_handlers

    def test_should_write_client_logs_to_stream(self, package_logger: logging.Logger) -> None:
        """Test records from client modules reach the configured stream."""
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)

        get_logger("circonus_client.boundary.http.api_client").info("GET /outlier_report -> 200")

        assert "circonus_client.boundary.http.api_client - INFO - GET /outlier_report -> 200" in stream.getvalue()

    def test_should_quiet_http_libraries(self, package_logger: logging.Logger) -> None:
        """Test httpx request logging is raised to WARNING."""
        configure_logging()

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING


class TestSafeLogValue:
    """Test suite for safe_log_value()."""

    def test_should_decode_body_bytes(self) -> None:
        """Test response bodies render as text."""
        assert safe_log_value(b'{"title": "t"}') == '{"title": "t"}'

    def test_should_replace_undecodable_bytes(self) -> None:
        """Test non-UTF-8 bodies still render."""
        assert safe_log_value(b"\xff{}") == "�{}"

    def test_should_truncate_long_bodies(self) -> None:
        """Test truncation marker and total length."""
        result = safe_log_value(b"x" * 20, max_length=5)

        assert result == "xxxxx... (truncated, 20 total)"

    def test_should_render_none_and_numbers(self) -> None:
        """Test context values such as status codes."""
        assert safe_log_value(None) == "None"
        assert safe_log_value(404) == "404"


class TestLogWithContext:
    """Test suite for log_with_context()."""

    def test_should_attach_context_as_extra(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test context keys land on the log record as strings."""
        logger = logging.getLogger("circonus_client.test")

        with caplog.at_level(logging.INFO, logger="circonus_client.test"):
            log_with_context(logger, logging.INFO, "fetched", cid="/outlier_report/1", status_code=200)

        record = caplog.records[0]
        assert record.cid == "/outlier_report/1"
        assert record.status_code == "200"
