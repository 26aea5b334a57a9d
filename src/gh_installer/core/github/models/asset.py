"""Release asset models.

``ReleaseAsset`` mirrors one entry of a GitHub release's ``assets`` array.
``Asset`` is a selected, classified download for one platform.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gh_installer.constants import ARCH_386, ARCH_ARM64, OS_DARWIN


@dataclass(slots=True, frozen=True)
class ReleaseAsset:
    """Represents a raw GitHub release asset.

    Attributes:
        name: Asset filename
        browser_download_url: Direct download URL for the asset
        size: Asset size in bytes

    """

    name: str
    browser_download_url: str
    size: int

    @classmethod
    def from_api_response(
        cls, asset_data: dict[str, Any]
    ) -> ReleaseAsset | None:
        """Create ReleaseAsset from GitHub API response data.

        Args:
            asset_data: Raw asset data from GitHub API

        Returns:
            ReleaseAsset instance or None if required fields are missing

        """
        try:
            name = asset_data.get("name", "")
            download_url = asset_data.get("browser_download_url", "")
            size = asset_data.get("size", 0)

            if not name or not download_url:
                return None

            return cls(
                name=name,
                browser_download_url=download_url,
                size=int(size),
            )
        except (AttributeError, TypeError, ValueError):
            return None


@dataclass(slots=True, frozen=True)
class Asset:
    """A selected download for one OS/architecture pair.

    Attributes:
        name: Asset filename
        os: Normalized OS token
        arch: Normalized architecture token
        url: Download URL
        type: File type token (``.tar.gz``, ``.zip``, ``.bin``, ...)
        sha256: Hex digest from the release checksum manifest, or empty

    """

    name: str
    os: str
    arch: str
    url: str
    type: str
    sha256: str = ""

    @property
    def key(self) -> str:
        """Platform key, ``"<os>/<arch>"``."""
        return f"{self.os}/{self.arch}"

    @property
    def is_32bit(self) -> bool:
        return self.arch == ARCH_386

    @property
    def is_mac(self) -> bool:
        return self.os == OS_DARWIN

    @property
    def is_mac_arm64(self) -> bool:
        """Whether this is a native Apple Silicon build."""
        return self.is_mac and self.arch == ARCH_ARM64

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "name": self.name,
            "os": self.os,
            "arch": self.arch,
            "url": self.url,
            "type": self.type,
            "sha256": self.sha256,
            "key": self.key,
            "is_32bit": self.is_32bit,
            "is_mac": self.is_mac,
            "is_mac_arm64": self.is_mac_arm64,
        }
