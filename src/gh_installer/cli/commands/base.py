"""Base command handler for gh-installer CLI commands.

This module provides the abstract base class that all command handlers
inherit from, ensuring a consistent interface across commands.
"""

from abc import ABC, abstractmethod
from argparse import Namespace

from gh_installer.config import Settings
from gh_installer.core.resolver import Resolver


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner acts as the composition root: it creates the settings and
    the resolver (with its HTTP session and cache) and injects them.
    """

    def __init__(self, settings: Settings, resolver: Resolver) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            settings: Loaded runtime settings
            resolver: Shared resolver

        """
        self.settings = settings
        self.resolver = resolver

    @abstractmethod
    async def execute(self, args: Namespace) -> None:
        """Execute the command with the given arguments.

        Args:
            args: Parsed command-line arguments

        """
