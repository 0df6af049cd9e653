"""Tests for structured logging configuration."""

import json
import logging
from io import StringIO

import structlog

from feature_tour.core.logging import (
    NOISY_LOGGERS,
    configure_logging,
    connection_context,
    get_logger,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()

    def test_development_mode_logs(self) -> None:
        configure_logging(development=True)
        get_logger("test").info("paginator_moved", current_index=1)

    def test_lowercase_level_is_accepted(self) -> None:
        configure_logging(log_level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_defaults_to_info(self) -> None:
        configure_logging(log_level="CHATTY")
        assert logging.getLogger().level == logging.INFO

    def test_silences_third_party_loggers(self) -> None:
        configure_logging()
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING


class TestConnectionContext:
    """Tests for connection_context."""

    def setup_method(self) -> None:
        structlog.contextvars.clear_contextvars()

    def test_binds_inside_block_only(self) -> None:
        with connection_context("abc-123", client="websocket"):
            assert structlog.contextvars.get_contextvars() == {
                "connection_id": "abc-123",
                "client": "websocket",
            }
        assert structlog.contextvars.get_contextvars() == {}

    def test_unbinds_when_block_raises(self) -> None:
        try:
            with connection_context("abc-123"):
                raise RuntimeError("socket closed")
        except RuntimeError:
            pass
        assert structlog.contextvars.get_contextvars() == {}


class TestProductionJsonOutput:
    """Tests for JSON output in production mode."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()

    def test_events_carry_connection_id(self) -> None:
        output = StringIO()
        handler = logging.StreamHandler(output)
        handler.setLevel(logging.INFO)

        configure_logging(development=False, log_level="INFO")
        root_logger = logging.getLogger()
        root_logger.addHandler(handler)

        try:
            with connection_context("abc-123"):
                get_logger("test").info("paginator_moved", current_index=2)

            handler.flush()
            lines = [line for line in output.getvalue().strip().split("\n") if line]
            parsed = json.loads(lines[-1])
            assert parsed["event"] == "paginator_moved"
            assert parsed["current_index"] == 2
            assert parsed["connection_id"] == "abc-123"
            assert parsed["level"] == "info"
        finally:
            root_logger.removeHandler(handler)
