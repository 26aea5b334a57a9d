"""Resolution orchestrator.

Ties release lookup, the one-shot search fallback, asset selection and
the result cache together::

    query ─► cache ─hit─► result
               │miss
               ▼
            fetch ─404 + search allowed─► search ─► fetch (once more)
               │
               ▼
            select ─► result (stored in cache)

Failures are never cached.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Protocol

from gh_installer.core.github.models import ResolveResult
from gh_installer.core.selector import AssetSelector
from gh_installer.exceptions import (
    InvalidQueryError,
    NotFoundError,
    SearchFallbackError,
)
from gh_installer.logger import get_logger

if TYPE_CHECKING:
    from gh_installer.core.cache import ResultCache
    from gh_installer.core.github.release_fetcher import FetchedRelease
    from gh_installer.core.query import Query

logger = get_logger(__name__)


class ReleaseSource(Protocol):
    """Anything that resolves a repository release (see ReleaseFetcher)."""

    async def fetch(
        self, owner: str, repo: str, release: str
    ) -> FetchedRelease: ...


class RepositoryFinder(Protocol):
    """Anything that guesses the repository hosting a program."""

    async def search(self, program: str) -> tuple[str, str]: ...


class Resolver:
    """Request-facing entry point of the resolution engine.

    Usage:
        resolver = Resolver(fetcher, ResultCache(3600), searcher)
        result = await resolver.resolve(query)
    """

    def __init__(
        self,
        fetcher: ReleaseSource,
        cache: ResultCache,
        searcher: RepositoryFinder | None = None,
        selector: type[AssetSelector] = AssetSelector,
        default_owner: str = "",
    ) -> None:
        """Initialize the resolver.

        Args:
            fetcher: Release source
            cache: Result cache shared by all requests
            searcher: Search fallback; None disables it
            selector: Asset selection strategy
            default_owner: Owner used for queries that name none; such
                queries may also use the search fallback

        """
        self.fetcher = fetcher
        self.cache = cache
        self.searcher = searcher
        self.selector = selector
        self.default_owner = default_owner

    async def resolve(self, query: Query) -> ResolveResult:
        """Resolve a query into a release and its per-platform assets.

        Args:
            query: Parsed query

        Returns:
            Cached or freshly built result

        Raises:
            InvalidQueryError: If the query names no program, or no owner
                while no default owner is configured
            NotFoundError: If the repository does not exist (and search did
                not find it either)
            InstallerError: For any other resolution failure

        """
        if not query.program:
            raise InvalidQueryError("program name is required")
        if not query.owner:
            if not self.default_owner:
                raise InvalidQueryError("owner is required", query.program)
            query = replace(query, owner=self.default_owner, search=True)

        # Search permission changes how a result is obtained, so callers
        # only share an in-flight resolution when it matches
        result = await self.cache.get_or_create(
            query.cache_key(),
            lambda: self._resolve_uncached(query),
            variant=query.search,
        )
        # Cache hits may come from a request with other rendering options
        return replace(
            result,
            query=replace(
                result.query,
                as_program=query.as_program,
                insecure=query.insecure,
                move_to_path=query.move_to_path,
            ),
        )

    async def _resolve_uncached(self, query: Query) -> ResolveResult:
        resolved_query, fetched = await self._fetch(query)

        assets = self.selector.select(
            fetched.assets, query.select, fetched.checksums
        )
        result = ResolveResult(
            query=resolved_query,
            resolved_release=fetched.tag,
            timestamp=self.cache.now(),
            assets=tuple(assets),
        )
        logger.info(
            "Resolved %s@%s to %s with %d assets",
            resolved_query.slug,
            query.release,
            fetched.tag,
            len(assets),
        )
        return result

    async def _fetch(self, query: Query) -> tuple[Query, FetchedRelease]:
        """Fetch the release, retrying once via search on a 404."""
        try:
            fetched = await self.fetcher.fetch(
                query.owner, query.program, query.release
            )
        except NotFoundError as not_found:
            if not (query.search and self.searcher is not None):
                raise
            logger.info(
                "%s not found, searching for '%s'", query.slug, query.program
            )
            try:
                owner, repo = await self.searcher.search(query.program)
            except SearchFallbackError as e:
                logger.warning("Search fallback failed: %s", e)
                raise not_found from e

            retry_query = query.with_repository(owner, repo)
            fetched = await self.fetcher.fetch(
                retry_query.owner, retry_query.program, retry_query.release
            )
            return retry_query, fetched

        return query, fetched
