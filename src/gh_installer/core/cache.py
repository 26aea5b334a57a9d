"""In-memory result cache with TTL validation.

Entries live for the process lifetime and expire lazily: a lookup treats an
entry as fresh while ``now - inserted_at < ttl``. Expired entries are simply
overwritten by the next successful resolution.

Concurrent lookups for the same cold key share one in-flight resolution
instead of each fetching upstream; later callers await the first caller's
task. Failures are never stored, so the next lookup after a failure starts
a fresh resolution.
"""

import asyncio
from collections.abc import Awaitable, Callable, Hashable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import partial

from gh_installer.core.github.models import ResolveResult
from gh_installer.logger import get_logger

logger = get_logger(__name__)

ResultFactory = Callable[[], Awaitable[ResolveResult]]


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True, frozen=True)
class CacheEntry:
    """Cached result and the time it was stored."""

    result: ResolveResult
    inserted_at: datetime


class ResultCache:
    """TTL cache of resolution results keyed by query cache key.

    Usage:
        cache = ResultCache(ttl_seconds=3600)
        result = await cache.get_or_create(query.cache_key(), factory)

    A TTL of zero (or less) disables caching: every call runs the factory.
    """

    def __init__(
        self,
        ttl_seconds: int,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: Entry lifetime in seconds; 0 disables caching
            clock: Returns the current time (defaults to UTC now)

        """
        self.ttl_seconds = ttl_seconds
        self.ttl = timedelta(seconds=max(ttl_seconds, 0))
        self._clock = clock or _utc_now
        self._entries: dict[str, CacheEntry] = {}
        self._in_flight: dict[
            tuple[str, Hashable], asyncio.Future[ResolveResult]
        ] = {}
        self._lock = asyncio.Lock()

    @property
    def enabled(self) -> bool:
        return self.ttl_seconds > 0

    def now(self) -> datetime:
        """Current time according to the cache clock."""
        return self._clock()

    def _is_fresh(self, entry: CacheEntry) -> bool:
        return self.now() - entry.inserted_at < self.ttl

    async def get(self, key: str) -> ResolveResult | None:
        """Return the fresh cached result for key, if any."""
        if not self.enabled:
            return None
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None or not self._is_fresh(entry):
                return None
            return entry.result

    async def put(self, key: str, result: ResolveResult) -> None:
        """Store result under key, stamped with the current time."""
        if not self.enabled:
            return
        async with self._lock:
            self._entries[key] = CacheEntry(result, self.now())

    async def get_or_create(
        self,
        key: str,
        factory: ResultFactory,
        variant: Hashable = None,
    ) -> ResolveResult:
        """Return the cached result for key or resolve and store it.

        Concurrent callers share one in-flight resolution only when both
        ``key`` and ``variant`` match. The variant never affects what is
        stored, so all variants read and write the same cache entry.

        Args:
            key: Query cache key
            factory: Coroutine function producing a fresh result
            variant: Extra in-flight discriminator for options that change
                how a result is obtained (e.g. whether search is allowed)

        Returns:
            Fresh cached result, or the result of the factory

        Raises:
            Exception: Whatever the factory raises; nothing is cached then

        """
        if not self.enabled:
            return await factory()

        flight_key = (key, variant)
        async with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._is_fresh(entry):
                logger.debug("Cache hit for %s", key)
                return entry.result

            task = self._in_flight.get(flight_key)
            if task is None:
                logger.debug("Cache miss for %s", key)
                task = asyncio.ensure_future(self._populate(key, factory))
                self._in_flight[flight_key] = task
                task.add_done_callback(partial(self._forget, flight_key))
            else:
                logger.debug("Joining in-flight resolution for %s", key)

        # Shielded so one cancelled caller does not fail the others
        return await asyncio.shield(task)

    async def _populate(
        self, key: str, factory: ResultFactory
    ) -> ResolveResult:
        result = await factory()
        await self.put(key, result)
        return result

    def _forget(
        self,
        flight_key: tuple[str, Hashable],
        task: asyncio.Future[ResolveResult],
    ) -> None:
        if self._in_flight.get(flight_key) is task:
            del self._in_flight[flight_key]
        if not task.cancelled():
            # Mark the exception retrieved; callers re-raise it themselves
            task.exception()

    def clear(self) -> None:
        """Drop all cached entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
