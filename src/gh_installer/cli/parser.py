"""CLI argument parser for gh-installer.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace

from gh_installer.config import Settings


class CLIParser:
    """Command-line argument parser for gh-installer."""

    def __init__(self, settings: Settings) -> None:
        """Initialize the CLI parser.

        Args:
            settings: Loaded settings, used for option defaults

        """
        self.settings = settings

    def parse_args(self, argv: list[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Argument list (defaults to ``sys.argv[1:]``)

        Returns:
            Parsed arguments namespace

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="gh-installer",
            description="Resolve GitHub release downloads per platform",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Resolve the latest release of a repository
  %(prog)s resolve astral-sh/uv

  # Resolve a tag and print JSON
  %(prog)s resolve gitleaks/gitleaks@v8.28.0 --json

  # Prefer glibc builds
  %(prog)s resolve astral-sh/uv --select gnu

  # Serve install lookups over HTTP
  %(prog)s serve --port 3000
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        # Long form only; -v is reserved for subcommand --verbose
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show gh-installer version and exit",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )
        self._add_resolve_command(subparsers)
        self._add_serve_command(subparsers)

    def _add_resolve_command(
        self, subparsers: argparse._SubParsersAction
    ) -> None:
        resolve_parser = subparsers.add_parser(
            "resolve",
            help="Resolve a release and list its downloads",
        )
        resolve_parser.add_argument(
            "target",
            help="[owner/]program[@release], e.g. astral-sh/uv@0.8.17",
        )
        resolve_parser.add_argument(
            "--select",
            default="",
            help="Only consider assets whose name contains this text",
        )
        resolve_parser.add_argument(
            "--json",
            action="store_true",
            help="Print the result as JSON",
        )
        resolve_parser.add_argument(
            "--no-search",
            action="store_true",
            help="Do not search for the repository when it is not found",
        )
        resolve_parser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logging"
        )

    def _add_serve_command(
        self, subparsers: argparse._SubParsersAction
    ) -> None:
        serve_parser = subparsers.add_parser(
            "serve",
            help="Run the HTTP server",
        )
        serve_parser.add_argument(
            "--host",
            default=self.settings.host,
            help=f"Interface to bind (default: {self.settings.host})",
        )
        serve_parser.add_argument(
            "--port",
            type=int,
            default=self.settings.port,
            help=f"Port to listen on (default: {self.settings.port})",
        )
        serve_parser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logging"
        )
