"""Console formatters."""

import logging

from gh_installer.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Wraps the level name in ANSI colour codes while formatting.

    The record is restored afterwards because the file handler formats the
    same record object.
    """

    def format(self, record: logging.LogRecord) -> str:
        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        plain = record.levelname
        record.levelname = f"{color}{plain}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


class HybridConsoleFormatter(ColoredConsoleFormatter):
    """Bare message for INFO, coloured structured line for other levels.

    Example output::

        Listening on http://0.0.0.0:3000
        12:30:45 - gh_installer.core.search - WARNING - search backend ...
    """

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()
        return super().format(record)
