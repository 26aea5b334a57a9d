"""Command handlers for the gh-installer CLI."""

from gh_installer.cli.commands.base import BaseCommandHandler
from gh_installer.cli.commands.resolve import ResolveHandler
from gh_installer.cli.commands.serve import ServeHandler

__all__ = ["BaseCommandHandler", "ResolveHandler", "ServeHandler"]
