"""Tests for the logger module."""

import logging
from logging.handlers import QueueHandler, RotatingFileHandler

import pytest

from gh_installer.logger import (
    HybridConsoleFormatter,
    clear_logger_state,
    configure_logging,
    flush_all_handlers,
    get_logger,
)
from gh_installer.logger.state import get_state


@pytest.fixture
def fresh_logging():
    """Reset the shared logger state around a test."""
    clear_logger_state()
    yield get_state()
    clear_logger_state()


def make_record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="gh_installer.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


def test_root_logger_has_only_queue_handler(fresh_logging):
    """Test that handlers live on the listener, not the root logger."""
    get_logger("gh_installer.core.selector")

    root = logging.getLogger("gh_installer")
    assert root.propagate is False
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], QueueHandler)
    assert fresh_logging.root_initialized is True


def test_get_logger_initializes_once(fresh_logging):
    """Test that repeated calls reuse the same listener."""
    get_logger("gh_installer.a")
    listener = fresh_logging.queue_listener

    get_logger("gh_installer.b")

    assert fresh_logging.queue_listener is listener


def test_configure_logging_updates_levels(fresh_logging):
    """Test that console levels change in place."""
    get_logger()

    configure_logging("DEBUG", "INFO")

    (console,) = fresh_logging.queue_listener.handlers
    assert console.level == logging.DEBUG


def test_configure_logging_enables_file(fresh_logging, tmp_path):
    """Test that enabling file logging writes a rotating log file."""
    log_file = tmp_path / "gh-installer.log"

    configure_logging(
        "WARNING", "INFO", enable_file_logging=True, log_file=log_file
    )
    get_logger("gh_installer.test").info("resolved %s", "astral-sh/uv")
    flush_all_handlers()

    handlers = fresh_logging.queue_listener.handlers
    assert any(isinstance(h, RotatingFileHandler) for h in handlers)
    assert "resolved astral-sh/uv" in log_file.read_text(encoding="utf-8")


def test_hybrid_formatter_info_is_bare():
    """Test that INFO messages are printed without decoration."""
    formatter = HybridConsoleFormatter("%(levelname)s - %(message)s")

    assert formatter.format(make_record(logging.INFO, "hello")) == "hello"


def test_hybrid_formatter_warning_is_structured():
    """Test that other levels keep the structured, colored format."""
    formatter = HybridConsoleFormatter("%(levelname)s - %(message)s")
    record = make_record(logging.WARNING, "careful")

    formatted = formatter.format(record)

    assert "WARNING" in formatted
    assert formatted.endswith(" - careful")
    assert record.levelname == "WARNING"
