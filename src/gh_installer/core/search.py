"""Repository search fallback.

When a direct repository lookup 404s, the program name is sent to web
search engines as an "I'm feeling lucky" query. Such queries answer with a
redirect to the top hit; if that hit is a GitHub repository, its owner and
name are used for one more lookup.
"""

import re
from dataclasses import dataclass

import aiohttp

from gh_installer.constants import SEARCH_SITE_SUFFIX, SEARCH_USER_AGENT
from gh_installer.exceptions import SearchFallbackError
from gh_installer.logger import get_logger

logger = get_logger(__name__)

_GITHUB_REPO_RE = re.compile(r"^https://github\.com/([\w-]+)/([\w.-]+)")


@dataclass(slots=True, frozen=True)
class SearchBackend:
    """A search engine with a redirecting "lucky" endpoint.

    Attributes:
        name: Backend name used in logs
        url: Endpoint URL
        params: Static query parameters
        query_prefix: Text prepended to the search phrase

    """

    name: str
    url: str
    params: tuple[tuple[str, str], ...] = ()
    query_prefix: str = ""

    def build_params(self, phrase: str) -> dict[str, str]:
        return {**dict(self.params), "q": f"{self.query_prefix}{phrase}"}


# Tried in order; the first usable redirect wins
DEFAULT_BACKENDS: tuple[SearchBackend, ...] = (
    SearchBackend(
        "duckduckgo", "https://html.duckduckgo.com/html", query_prefix="! "
    ),
    SearchBackend(
        "google", "https://www.google.com/search", params=(("btnI", ""),)
    ),
)


def parse_github_location(location: str) -> tuple[str, str] | None:
    """Extract ``(owner, repo)`` from a GitHub repository URL.

    Args:
        location: Redirect target

    Returns:
        Owner and repository name, or None if the URL is not a repository

    """
    match = _GITHUB_REPO_RE.match(location)
    if not match:
        return None
    owner, repo = match.groups()
    return owner, repo.removesuffix(".git")


class RepositorySearcher:
    """Guesses a program's GitHub repository via web search redirects."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        backends: tuple[SearchBackend, ...] = DEFAULT_BACKENDS,
        timeout_seconds: int = 10,
    ) -> None:
        """Initialize the searcher.

        Args:
            session: aiohttp session for making requests
            backends: Search backends in preference order
            timeout_seconds: Total timeout per backend request

        """
        self.session = session
        self.backends = backends
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def search(self, program: str) -> tuple[str, str]:
        """Find the repository most likely to host program.

        Args:
            program: Program name that failed direct lookup

        Returns:
            ``(owner, repo)`` of the first backend hit

        Raises:
            SearchFallbackError: If no backend yields a repository redirect

        """
        phrase = f"{program}{SEARCH_SITE_SUFFIX}"
        for backend in self.backends:
            found = await self._query_backend(backend, phrase)
            if found is not None:
                logger.info(
                    "Search via %s found %s/%s for '%s'",
                    backend.name,
                    found[0],
                    found[1],
                    program,
                )
                return found

        msg = "no search backend returned a GitHub repository"
        raise SearchFallbackError(msg, program)

    async def _query_backend(
        self, backend: SearchBackend, phrase: str
    ) -> tuple[str, str] | None:
        headers = {"User-Agent": SEARCH_USER_AGENT, "Accept": "*/*"}
        try:
            async with self.session.get(
                backend.url,
                params=backend.build_params(phrase),
                headers=headers,
                allow_redirects=False,
                timeout=self.timeout,
            ) as response:
                status = response.status
                location = response.headers.get("Location", "")
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.debug("Search backend %s failed: %s", backend.name, e)
            return None

        if not 300 <= status < 400:  # noqa: PLR2004
            logger.debug(
                "Search backend %s answered %d, expected a redirect",
                backend.name,
                status,
            )
            return None

        found = parse_github_location(location)
        if found is None:
            logger.debug(
                "Search backend %s redirected to non-repository %s",
                backend.name,
                location,
            )
        return found
