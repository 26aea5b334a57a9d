"""GitHub infrastructure - API client and release fetching."""

from gh_installer.core.github.auth import GitHubAuthManager
from gh_installer.core.github.client import GitHubAPIClient
from gh_installer.core.github.models import (
    Asset,
    Release,
    ReleaseAsset,
    ResolveResult,
)
from gh_installer.core.github.release_fetcher import (
    FetchedRelease,
    ReleaseFetcher,
)

__all__ = [
    "Asset",
    "FetchedRelease",
    "GitHubAPIClient",
    "GitHubAuthManager",
    "Release",
    "ReleaseAsset",
    "ReleaseFetcher",
    "ResolveResult",
]
