"""Bootstrap log settings and runtime level updates."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from gh_installer.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_FILE_NAME,
)
from gh_installer.logger.handlers import level_number
from gh_installer.logger.state import LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Return the bootstrap console level, file level and log path.

    These apply before settings are loaded. ``GH_INSTALLER_LOG_DIR``
    relocates the log file, which keeps test runs out of the user's
    config directory.
    """
    env_log_dir = os.getenv("GH_INSTALLER_LOG_DIR")
    if env_log_dir:
        log_dir = Path(env_log_dir).expanduser()
    else:
        log_dir = (
            Path.home() / DEFAULT_CONFIG_SUBDIR / CONFIG_DIR_NAME / "logs"
        )
    log_path = log_dir / LOG_FILE_NAME
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def apply_log_levels(
    state: LoggerState, console_level: str, file_level: str
) -> None:
    """Update handler levels on the running listener in place."""
    if state.queue_listener is None:
        return

    for handler in state.queue_listener.handlers:
        # RotatingFileHandler is itself a StreamHandler, so test it first
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(level_number(file_level, logging.INFO))
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(level_number(console_level, logging.WARNING))
