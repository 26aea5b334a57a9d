"""GitHub models package."""

from gh_installer.core.github.models.asset import Asset, ReleaseAsset
from gh_installer.core.github.models.release import Release, parse_assets
from gh_installer.core.github.models.result import ResolveResult

__all__ = [
    "Asset",
    "Release",
    "ReleaseAsset",
    "ResolveResult",
    "parse_assets",
]
