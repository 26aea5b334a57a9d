"""Low-level GitHub API client for HTTP communication.

This module handles direct HTTP communication with the GitHub API:
authentication headers, rate limit bookkeeping and mapping of HTTP
failures onto the gh-installer error taxonomy. Requests are never retried.
"""

from typing import Any

import aiohttp
import orjson

from gh_installer.constants import (
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_URL,
    HTTP_NOT_FOUND,
)
from gh_installer.core.github.auth import GitHubAuthManager
from gh_installer.exceptions import NotFoundError, UpstreamError
from gh_installer.logger import get_logger

logger = get_logger(__name__)

# Error bodies are surfaced to users; keep them short
_MAX_ERROR_BODY = 500


class GitHubAPIClient:
    """Handles direct communication with the GitHub API."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        auth_manager: GitHubAuthManager,
        timeout_seconds: int = 10,
        api_url: str = GITHUB_API_URL,
    ) -> None:
        """Initialize the API client.

        Args:
            session: aiohttp session for making requests
            auth_manager: GitHub authentication manager
            timeout_seconds: Total timeout per request
            api_url: Base API URL

        """
        self.session = session
        self.auth_manager = auth_manager
        self.api_url = api_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def repo_url(self, owner: str, repo: str, *parts: str) -> str:
        """Build a ``/repos/{owner}/{repo}/...`` API URL."""
        return "/".join((f"{self.api_url}/repos/{owner}/{repo}", *parts))

    async def _request(self, url: str, accept: str) -> bytes:
        headers = self.auth_manager.apply_auth({"Accept": accept})
        logger.debug("GET %s", url)
        try:
            async with self.session.get(
                url, headers=headers, timeout=self.timeout
            ) as response:
                self.auth_manager.update_rate_limit_info(response.headers)
                body = await response.read()

                if response.status == HTTP_NOT_FOUND:
                    raise NotFoundError(url)
                if not 200 <= response.status < 300:  # noqa: PLR2004
                    text = body.decode("utf-8", errors="replace")
                    raise UpstreamError(
                        response.status,
                        response.reason or "",
                        text[:_MAX_ERROR_BODY].strip(),
                    )
                return body
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise UpstreamError(0, f"request failed: {e}") from e

    async def get_json(self, url: str) -> Any:
        """Fetch and decode a JSON document from the API.

        Args:
            url: API URL to fetch

        Returns:
            Decoded JSON value

        Raises:
            NotFoundError: If the API answers 404
            UpstreamError: For other non-2xx responses, transport
                failures and undecodable bodies

        """
        body = await self._request(url, GITHUB_ACCEPT_HEADER)
        try:
            return orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise UpstreamError(0, f"invalid JSON from {url}") from e

    async def get_text(self, url: str) -> str:
        """Fetch a plain text document, such as a checksum manifest.

        Args:
            url: URL to fetch

        Returns:
            Response body decoded as UTF-8

        Raises:
            NotFoundError: If the server answers 404
            UpstreamError: For other non-2xx responses and transport failures

        """
        body = await self._request(url, "*/*")
        return body.decode("utf-8", errors="replace")
