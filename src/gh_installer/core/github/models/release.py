"""GitHub release model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gh_installer.core.github.models.asset import ReleaseAsset


@dataclass(slots=True, frozen=True)
class Release:
    """A GitHub release as returned by the releases API.

    Attributes:
        tag_name: Release tag
        assets_url: API URL listing the release's assets
        assets: Raw release assets

    """

    tag_name: str
    assets_url: str = ""
    assets: list[ReleaseAsset] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, api_data: dict[str, Any]) -> Release:
        """Create Release from GitHub API response data.

        Entries in ``assets`` that lack a name or download URL are dropped.

        Args:
            api_data: Raw release data from GitHub API

        Returns:
            Release instance

        """
        return cls(
            tag_name=api_data.get("tag_name", "") or "",
            assets_url=api_data.get("assets_url", "") or "",
            assets=parse_assets(api_data.get("assets") or []),
        )


def parse_assets(assets_data: list[Any]) -> list[ReleaseAsset]:
    """Convert a raw ``assets`` array into ReleaseAsset objects."""
    assets = []
    for asset_data in assets_data:
        if not isinstance(asset_data, dict):
            continue
        asset = ReleaseAsset.from_api_response(asset_data)
        if asset:
            assets.append(asset)
    return assets
