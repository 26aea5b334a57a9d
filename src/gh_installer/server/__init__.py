"""HTTP server for gh-installer."""

from gh_installer.server.app import create_app

__all__ = ["create_app"]
