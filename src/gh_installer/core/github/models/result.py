"""Resolution result model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gh_installer.core.github.models.asset import Asset
    from gh_installer.core.query import Query


@dataclass(slots=True, frozen=True)
class ResolveResult:
    """Outcome of resolving one query.

    Attributes:
        query: The query as resolved (owner/program may differ from the
            request when the search fallback found the repository)
        resolved_release: Concrete release tag, never empty
        timestamp: When the result was produced
        assets: One asset per platform key, sorted by key

    """

    query: Query
    resolved_release: str
    timestamp: datetime
    assets: tuple[Asset, ...]

    @property
    def has_mac_arm64_asset(self) -> bool:
        """Whether a native Apple Silicon asset was selected."""
        return any(asset.is_mac_arm64 for asset in self.assets)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            **self.query.to_dict(),
            "resolved_release": self.resolved_release,
            "timestamp": self.timestamp.isoformat(),
            "assets": [asset.to_dict() for asset in self.assets],
            "has_mac_arm64_asset": self.has_mac_arm64_asset,
        }
