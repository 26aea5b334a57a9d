"""Logging for gh-installer.

Every module does ``logger = get_logger(__name__)`` and logs with
%-style arguments. Handlers only ever hang off the ``gh_installer`` root
logger, behind a QueueHandler; see ``handlers`` for the chain.
"""

from gh_installer.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from gh_installer.logger.logger import (
    clear_logger_state,
    configure_logging,
    flush_all_handlers,
    get_logger,
    setup_logging,
)

__all__ = [
    "ColoredConsoleFormatter",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "configure_logging",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
]
