"""Top-level package for gh-installer.

Resolves ``owner/program@release`` requests into concrete, per-platform
release downloads hosted on GitHub.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gh-installer")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
