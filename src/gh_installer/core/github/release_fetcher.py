"""High-level GitHub release fetching operations.

This module resolves an ``(owner, repo, release)`` triple into a concrete
tag, its raw asset list and an optional checksum index, coordinating with
the low-level HTTP client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from gh_installer.constants import LATEST_RELEASE
from gh_installer.core.checksum import parse_checksum_manifest
from gh_installer.core.classify import classify_checksum_file
from gh_installer.core.github.models import Release, ReleaseAsset, parse_assets
from gh_installer.exceptions import (
    InstallerError,
    NoAssetsError,
    ReleaseTagNotFoundError,
    UpstreamError,
)
from gh_installer.logger import get_logger

if TYPE_CHECKING:
    from gh_installer.core.github.client import GitHubAPIClient

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class FetchedRelease:
    """A resolved release ready for asset selection.

    Attributes:
        tag: Concrete release tag
        assets: Raw release assets in API order
        checksums: Filename → digest index; empty without a manifest

    """

    tag: str
    assets: list[ReleaseAsset]
    checksums: dict[str, str] = field(default_factory=dict)


class ReleaseFetcher:
    """Fetches releases and their checksum manifests.

    Usage:
        fetcher = ReleaseFetcher(api_client)
        fetched = await fetcher.fetch("astral-sh", "uv", "0.8.17")
    """

    def __init__(self, api_client: GitHubAPIClient) -> None:
        """Initialize the release fetcher.

        Args:
            api_client: Client used for all GitHub requests

        """
        self.api_client = api_client

    async def fetch(
        self, owner: str, repo: str, release: str = LATEST_RELEASE
    ) -> FetchedRelease:
        """Resolve a release and collect its assets.

        Args:
            owner: Repository owner
            repo: Repository name
            release: Release tag, or empty / ``latest`` for the latest
                release

        Returns:
            FetchedRelease with the concrete tag

        Raises:
            NotFoundError: If the repository (or latest release) is missing
            ReleaseTagNotFoundError: If no release carries the tag
            NoAssetsError: If the release has no assets
            UpstreamError: For any other API failure

        """
        if not release or release == LATEST_RELEASE:
            found = await self._fetch_latest(owner, repo)
        else:
            found = await self._fetch_by_tag(owner, repo, release)

        if not found.assets:
            raise NoAssetsError("no assets found", f"{owner}/{repo}")

        checksums = await self._fetch_checksums(found.assets)
        logger.debug(
            "Fetched %s/%s@%s: %d assets, %d checksums",
            owner,
            repo,
            found.tag_name,
            len(found.assets),
            len(checksums),
        )
        return FetchedRelease(found.tag_name, found.assets, checksums)

    async def _fetch_latest(self, owner: str, repo: str) -> Release:
        url = self.api_client.repo_url(owner, repo, "releases", "latest")
        data = await self.api_client.get_json(url)
        release = self._parse_release(data, url)
        if not release.tag_name:
            raise UpstreamError(0, f"release without tag at {url}")
        return release

    async def _fetch_by_tag(self, owner: str, repo: str, tag: str) -> Release:
        url = self.api_client.repo_url(owner, repo, "releases")
        data = await self.api_client.get_json(url)
        if not isinstance(data, list):
            raise UpstreamError(0, f"unexpected release listing at {url}")

        for entry in data:
            if not isinstance(entry, dict) or entry.get("tag_name") != tag:
                continue
            release = Release.from_api_response(entry)
            if not release.assets and release.assets_url:
                release = await self._with_asset_listing(release)
            return release

        raise ReleaseTagNotFoundError(tag, f"{owner}/{repo}")

    async def _with_asset_listing(self, release: Release) -> Release:
        """Fill in assets the release listing omitted."""
        logger.debug("Fetching asset listing from %s", release.assets_url)
        data = await self.api_client.get_json(release.assets_url)
        if not isinstance(data, list):
            raise UpstreamError(
                0, f"unexpected asset listing at {release.assets_url}"
            )
        return Release(
            tag_name=release.tag_name,
            assets_url=release.assets_url,
            assets=parse_assets(data),
        )

    async def _fetch_checksums(
        self, assets: list[ReleaseAsset]
    ) -> dict[str, str]:
        """Download and parse the release checksum manifest, if any.

        Failures are logged and yield an empty index.
        """
        manifest = next(
            (
                asset
                for asset in assets
                if classify_checksum_file(asset.name, asset.size)
            ),
            None,
        )
        if manifest is None:
            return {}

        try:
            content = await self.api_client.get_text(
                manifest.browser_download_url
            )
        except InstallerError as e:
            logger.warning(
                "Ignoring checksum manifest %s: %s", manifest.name, e
            )
            return {}

        return parse_checksum_manifest(content)

    @staticmethod
    def _parse_release(data: Any, url: str) -> Release:
        if not isinstance(data, dict):
            raise UpstreamError(0, f"unexpected release document at {url}")
        return Release.from_api_response(data)
