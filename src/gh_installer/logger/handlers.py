"""Handler chain for the ``gh_installer`` root logger.

Application code logs into a QueueHandler. A QueueListener thread drains
the queue into the console handler and, when enabled, a rotating file, so
request coroutines never wait on log I/O.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from gh_installer.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from gh_installer.exceptions import ConfigurationError
from gh_installer.logger.formatters import HybridConsoleFormatter
from gh_installer.logger.state import LoggerState

ROOT_LOGGER_NAME = "gh_installer"


def level_number(name: str, default: int) -> int:
    """Translate a level name such as ``"DEBUG"`` into its number."""
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else default


def build_handlers(
    console_level: str,
    file_level: str,
    log_file: Path | None,
) -> list[logging.Handler]:
    """Create the console handler and, if ``log_file`` is set, a file one.

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT, datefmt=LOG_CONSOLE_DATE_FORMAT
        )
    )
    console.setLevel(level_number(console_level, logging.WARNING))
    handlers: list[logging.Handler] = [console]

    if log_file is None:
        return handlers

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        rotating = RotatingFileHandler(
            log_file,
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"cannot open log file {log_file}: {e}"
        raise ConfigurationError(msg) from e

    rotating.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    rotating.setLevel(level_number(file_level, logging.INFO))
    handlers.append(rotating)
    return handlers


def stop_listener(state: LoggerState) -> None:
    """Stop the listener thread, draining whatever is still queued."""
    if state.queue_listener is None:
        return
    state.queue_listener.stop()
    for handler in state.queue_listener.handlers:
        handler.close()
    state.queue_listener = None


def setup_root_logger(
    state: LoggerState,
    console_level: str,
    file_level: str,
    log_file: Path | None,
) -> None:
    """(Re)build the root logger's queue and listener.

    Any previous listener is stopped first. Pass ``log_file=None`` to log
    to the console only.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    root_logger.propagate = False

    stop_listener(state)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    handlers = build_handlers(console_level, file_level, log_file)
    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue, *handlers, respect_handler_level=True
    )
    state.queue_listener.start()
    root_logger.addHandler(QueueHandler(state.log_queue))
    state.root_initialized = True
