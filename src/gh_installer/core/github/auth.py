"""GitHub authentication and rate limit bookkeeping.

`GitHubAuthManager` applies the configured token to outgoing API requests
and records the rate-limit headers GitHub returns, warning when the
remaining request budget runs low.
"""

from collections.abc import Mapping
from datetime import UTC, datetime

from gh_installer.constants import RATE_LIMIT_WARNING_THRESHOLD
from gh_installer.logger import get_logger

logger = get_logger(__name__)


class GitHubAuthManager:
    """Manage GitHub authentication and rate limit tracking."""

    def __init__(self, token: str = "") -> None:
        """Initialize the auth manager.

        Args:
            token: GitHub API token; empty for anonymous access

        """
        self.token = token.strip()
        self.remaining_requests: int | None = None
        self.rate_limit_reset: int | None = None
        self._user_notified: bool = False

    def apply_auth(self, headers: dict[str, str]) -> dict[str, str]:
        """Apply GitHub authentication to the given request headers.

        Args:
            headers: HTTP headers to update

        Returns:
            Headers with an ``Authorization`` header when a token is set

        """
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        elif not self._user_notified:
            self._user_notified = True
            logger.info(
                "No GitHub token configured. API rate limits apply "
                "(60 requests/hour). Set GITHUB_TOKEN to raise the limit."
            )
        return headers

    def update_rate_limit_info(self, headers: Mapping[str, str]) -> None:
        """Update rate limit information from GitHub response headers.

        Args:
            headers: Response headers from a GitHub API call

        """
        if "X-RateLimit-Remaining" not in headers:
            return
        try:
            remaining = int(headers["X-RateLimit-Remaining"])
            reset = int(headers.get("X-RateLimit-Reset", 0))
        except (ValueError, TypeError):
            # Don't expose header values in log messages
            logger.warning("Invalid rate limit headers received")
            return

        self.remaining_requests = remaining
        self.rate_limit_reset = reset or None
        if remaining < RATE_LIMIT_WARNING_THRESHOLD:
            logger.warning(
                "GitHub API rate limit nearly exhausted: %d requests left, "
                "resets at %s",
                remaining,
                self._format_reset(),
            )

    def _format_reset(self) -> str:
        if self.rate_limit_reset is None:
            return "an unknown time"
        return datetime.fromtimestamp(self.rate_limit_reset, UTC).isoformat()
