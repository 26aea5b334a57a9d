"""Command-line interface for gh-installer."""

from gh_installer.cli.parser import CLIParser
from gh_installer.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
