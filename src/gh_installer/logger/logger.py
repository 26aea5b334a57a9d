"""Public logging API.

``get_logger`` lazily builds the root handler chain from bootstrap
defaults. Once settings are loaded, ``configure_logging`` adjusts levels
and switches the rotating log file on.
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from gh_installer.logger.config import apply_log_levels, load_log_settings
from gh_installer.logger.handlers import (
    ROOT_LOGGER_NAME,
    setup_root_logger,
    stop_listener,
)
from gh_installer.logger.state import get_state

_FLUSH_TIMEOUT_SECONDS = 5.0


def _ensure_root_logger() -> None:
    state = get_state()
    with state.lock:
        if state.root_initialized:
            return
        console_level, file_level, _ = load_log_settings()
        setup_root_logger(state, console_level, file_level, log_file=None)


def setup_logging(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return the named logger, building the root chain on first use."""
    _ensure_root_logger()
    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger below the ``gh_installer`` root.

    Usage:
        >>> logger = get_logger(__name__)
        >>> logger.info("Resolving %s", slug)
    """
    return setup_logging(name)


def configure_logging(
    console_level: str,
    file_level: str,
    enable_file_logging: bool = False,  # noqa: FBT001, FBT002
    log_file: Path | None = None,
) -> None:
    """Apply levels from loaded settings to the running logger.

    Without file logging only handler levels change. Enabling it rebuilds
    the chain with a rotating file at ``log_file`` (or the default path).

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    state = get_state()
    if not enable_file_logging:
        _ensure_root_logger()
        apply_log_levels(state, console_level, file_level)
        return

    if log_file is None:
        _, _, log_file = load_log_settings()
    with state.lock:
        setup_root_logger(state, console_level, file_level, log_file)


def flush_all_handlers() -> None:
    """Wait (bounded) for queued records and flush every handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    deadline = time.monotonic() + _FLUSH_TIMEOUT_SECONDS
    while not state.log_queue.empty() and time.monotonic() < deadline:
        time.sleep(0.01)
    # The listener may still be handling the last record it dequeued
    time.sleep(0.1)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def clear_logger_state() -> None:
    """Tear down the handler chain. Intended for tests only."""
    state = get_state()
    with state.lock:
        stop_listener(state)
        state.log_queue = None
        state.root_initialized = False

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()


@atexit.register
def _shutdown() -> None:
    state = get_state()
    with state.lock:
        stop_listener(state)
