"""Asset selection: one download per platform from a noisy release."""

from gh_installer.constants import (
    ARCH_AMD64,
    BARE_BINARY_MIN_SIZE,
    BARE_BINARY_TYPE,
    LIBC_GNU,
    LIBC_MUSL,
    OS_LINUX,
    OS_WINDOWS,
    SUPPORTED_FILE_TYPES,
)
from gh_installer.core.classify import (
    classify_arch,
    classify_file_extension,
    classify_os,
)
from gh_installer.core.github.models import Asset, ReleaseAsset
from gh_installer.exceptions import NoAssetsError
from gh_installer.logger import get_logger

logger = get_logger(__name__)

# Priority tiers; lower tiers only fill platform keys higher tiers left empty
_TIER_EXACT = 0
_TIER_LINUX_NO_ARCH = 1
_TIER_UNKNOWN_OS = 2


class AssetSelector:
    """Picks exactly one asset per ``os/arch`` key from a release.

    Selection strategy:
    1. Drop files that are not archives or bare binaries
    2. Classify OS and architecture from the filename
    3. Drop Windows builds and names not containing the select filter
    4. Key assets by platform; on collisions prefer musl over glibc
       builds, otherwise keep the first seen
    5. Assets without a recognizable OS (or Linux assets without an
       architecture) are assumed Linux/amd64-ish and only fill platform
       keys that no exact match claimed
    """

    @staticmethod
    def select(
        raw_assets: list[ReleaseAsset],
        select_filter: str = "",
        checksums: dict[str, str] | None = None,
    ) -> list[Asset]:
        """Select the installable assets of a release.

        Args:
            raw_assets: Raw release assets in API response order
            select_filter: Case-sensitive substring an asset name must
                contain (empty disables filtering)
            checksums: Filename → SHA-256 index from the release manifest

        Returns:
            Assets sorted by platform key, at most one per key

        Raises:
            NoAssetsError: If the release has no assets or none survive

        """
        if not raw_assets:
            raise NoAssetsError("no assets found")

        checksums = checksums or {}
        tiers: tuple[dict[str, Asset], ...] = ({}, {}, {})

        for raw in raw_assets:
            candidate = AssetSelector._classify_candidate(
                raw, select_filter, checksums
            )
            if candidate is None:
                continue
            tier, asset = candidate
            AssetSelector._add_to_index(tiers[tier], asset)

        index: dict[str, Asset] = {}
        for tier_index in tiers:
            for key, asset in tier_index.items():
                if key not in index:
                    index[key] = asset

        if not index:
            raise NoAssetsError("no downloads found for this release")

        assets = sorted(index.values(), key=lambda asset: asset.key)
        for asset in assets:
            logger.debug("Including asset: %s (%s)", asset.name, asset.key)
        return assets

    @staticmethod
    def _classify_candidate(
        raw: ReleaseAsset,
        select_filter: str,
        checksums: dict[str, str],
    ) -> tuple[int, Asset] | None:
        """Classify one raw asset, or return None if it is rejected."""
        file_type = AssetSelector.detect_file_type(raw)
        if file_type not in SUPPORTED_FILE_TYPES:
            logger.debug(
                "Asset has unsupported file type: %s (ext '%s')",
                raw.name,
                file_type,
            )
            return None

        os_token = classify_os(raw.name)
        arch = classify_arch(raw.name)

        if os_token == OS_WINDOWS:
            logger.debug("Asset is for windows: %s", raw.name)
            return None

        if select_filter and select_filter not in raw.name:
            logger.debug("Select filter excludes asset: %s", raw.name)
            return None

        if not os_token:
            tier = _TIER_UNKNOWN_OS
            os_token = OS_LINUX
        elif not arch and os_token == OS_LINUX:
            tier = _TIER_LINUX_NO_ARCH
        else:
            tier = _TIER_EXACT

        asset = Asset(
            name=raw.name,
            os=os_token,
            arch=arch or ARCH_AMD64,
            url=raw.browser_download_url,
            type=file_type,
            sha256=checksums.get(raw.name, ""),
        )
        return tier, asset

    @staticmethod
    def detect_file_type(raw: ReleaseAsset) -> str:
        """Return the asset's file type, treating big bare files as binaries.

        Args:
            raw: Raw release asset

        Returns:
            File type token, possibly empty

        """
        file_type = classify_file_extension(raw.browser_download_url)
        if not file_type and raw.size > BARE_BINARY_MIN_SIZE:
            return BARE_BINARY_TYPE
        return file_type

    @staticmethod
    def _add_to_index(index: dict[str, Asset], asset: Asset) -> None:
        """Insert asset, resolving a platform key collision."""
        existing = index.get(asset.key)
        if existing is None:
            index[asset.key] = asset
            return

        if AssetSelector.prefers_musl(existing.name, asset.name):
            logger.debug(
                "Preferring musl build %s over %s", asset.name, existing.name
            )
            index[asset.key] = asset

    @staticmethod
    def prefers_musl(current: str, challenger: str) -> bool:
        """Whether challenger (musl) should replace current (glibc).

        Statically linked musl builds are more portable; users can still
        force the glibc build with a ``gnu`` select filter.

        Args:
            current: Name of the asset already holding the platform key
            challenger: Name of the competing asset

        Returns:
            True if current is a glibc build and challenger a musl build

        """

        def is_gnu(name: str) -> bool:
            return LIBC_GNU in name

        def is_musl(name: str) -> bool:
            return LIBC_MUSL in name

        return (
            is_gnu(current)
            and not is_musl(current)
            and is_musl(challenger)
            and not is_gnu(challenger)
        )
