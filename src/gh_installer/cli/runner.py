"""CLI runner for gh-installer.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers. The runner is the
composition root: settings, logging, the HTTP session and the resolver
are created here and injected into the handlers.
"""

import sys
from argparse import Namespace

import aiohttp

from gh_installer import __version__
from gh_installer.cli.commands import (
    BaseCommandHandler,
    ResolveHandler,
    ServeHandler,
)
from gh_installer.cli.parser import CLIParser
from gh_installer.config import Settings, SettingsManager
from gh_installer.core.cache import ResultCache
from gh_installer.core.github import (
    GitHubAPIClient,
    GitHubAuthManager,
    ReleaseFetcher,
)
from gh_installer.core.resolver import Resolver
from gh_installer.core.search import RepositorySearcher
from gh_installer.exceptions import ConfigurationError, InstallerError
from gh_installer.logger import configure_logging, get_logger

logger = get_logger(__name__)

COMMAND_HANDLERS: dict[str, type[BaseCommandHandler]] = {
    "resolve": ResolveHandler,
    "serve": ServeHandler,
}


def build_resolver(
    settings: Settings, session: aiohttp.ClientSession
) -> Resolver:
    """Wire the resolver and its collaborators around one session.

    Args:
        settings: Runtime settings
        session: Shared aiohttp session

    Returns:
        Resolver with a fresh result cache

    """
    auth_manager = GitHubAuthManager(settings.token)
    api_client = GitHubAPIClient(
        session, auth_manager, timeout_seconds=settings.timeout_seconds
    )
    searcher = (
        RepositorySearcher(session, timeout_seconds=settings.timeout_seconds)
        if settings.search_enabled
        else None
    )
    return Resolver(
        ReleaseFetcher(api_client),
        ResultCache(settings.cache_ttl_seconds),
        searcher,
        default_owner=settings.default_user,
    )


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self, settings_manager: SettingsManager | None = None
    ) -> None:
        """Initialize CLI runner.

        Args:
            settings_manager: Settings loader (defaults to the standard
                config directory and environment)

        """
        self.settings_manager = settings_manager or SettingsManager()

    async def run(self, argv: list[str] | None = None) -> None:
        """Run the CLI application.

        Parses arguments, handles global flags, validates commands,
        and routes to the appropriate handler.

        Args:
            argv: Argument list (defaults to ``sys.argv[1:]``)

        """
        try:
            settings = self.settings_manager.load()
        except ConfigurationError as e:
            print(f"❌ {e}")
            sys.exit(1)

        args = CLIParser(settings).parse_args(argv)

        if args.version:
            print(__version__)
            return

        if not args.command:
            print("❌ No command specified. Use --help.")
            sys.exit(1)

        self._setup_logging(settings, args)

        try:
            await self._execute_command(settings, args)
        except InstallerError as e:
            logger.error("%s", e)
            print(f"❌ {e}", file=sys.stderr)
            sys.exit(1)

    def _setup_logging(self, settings: Settings, args: Namespace) -> None:
        console_level = settings.console_log_level
        if getattr(args, "verbose", False):
            console_level = "DEBUG"
        configure_logging(
            console_level,
            settings.log_level,
            enable_file_logging=settings.file_logging,
        )

    async def _execute_command(
        self, settings: Settings, args: Namespace
    ) -> None:
        handler_class = COMMAND_HANDLERS.get(args.command)
        if handler_class is None:
            print(f"❌ Unknown command: {args.command}")
            sys.exit(1)

        async with aiohttp.ClientSession() as session:
            resolver = build_resolver(settings, session)
            handler = handler_class(settings, resolver)
            await handler.execute(args)
