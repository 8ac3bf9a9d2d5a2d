"""Versioned collection cache."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Hashable
from dataclasses import dataclass, replace
from typing import Any

from kubedeploy.constants.limits import MAX_CACHE_ENTRIES
from kubedeploy.utils.clock import Clock, MonotonicClock


@dataclass(frozen=True)
class CacheEntry:
    """Immutable snapshot of one cached collection.

    ``version`` counts successful replacements; 0 means nothing has been
    fetched yet. A failed refresh sets ``error`` but leaves ``data`` and
    ``version`` untouched.
    """

    data: Any = None
    version: int = 0
    updated_at: float | None = None
    error: str | None = None
    stale: bool = False

    @property
    def has_data(self) -> bool:
        return self.version > 0


class DataCache:
    """Keyed cache of whole collections with bounded size.

    Performance notes:
    - Read operations (get, peek) are lock-free. Since asyncio is
      single-threaded and these methods perform only non-mutating dict reads,
      no lock is needed.
    - Write operations (set, set_error, mark_stale, clear) acquire the lock
      to prevent interleaving mutations from concurrent coroutines.
    - Entries are frozen; every write stores a new snapshot, so readers can
      hold on to what they got.
    """

    MAX_ENTRIES = MAX_CACHE_ENTRIES

    def __init__(self, clock: Clock | None = None, max_entries: int | None = None) -> None:
        self._cache: dict[Hashable, CacheEntry] = {}
        self._lock = asyncio.Lock()
        self._clock = clock or MonotonicClock()
        self._max_entries = max_entries or self.MAX_ENTRIES

    def peek(self, key: Hashable) -> CacheEntry | None:
        """Return the current snapshot for ``key`` (lock-free)."""
        return self._cache.get(key)

    async def get(self, key: Hashable) -> Any:
        """Get cached data or None if nothing has been stored."""
        entry = self._cache.get(key)
        if entry is None or not entry.has_data:
            return None
        return entry.data

    def keys(self) -> list[Hashable]:
        return list(self._cache)

    async def set(self, key: Hashable, data: Any, *, stale: bool = False) -> CacheEntry:
        """Replace the whole collection for ``key`` and bump its version.

        ``stale`` keeps the entry flagged when the data is known to predate
        a pending invalidation.
        """
        async with self._lock:
            previous = self._cache.get(key)
            entry = CacheEntry(
                data=data,
                version=(previous.version if previous else 0) + 1,
                updated_at=self._clock.now(),
                error=None,
                stale=stale,
            )
            self._cache[key] = entry
            if len(self._cache) > self._max_entries:
                self._evict_oldest(keep=key)
            return entry

    async def set_error(self, key: Hashable, error: str) -> CacheEntry:
        """Record a failed refresh, keeping the previous collection."""
        async with self._lock:
            previous = self._cache.get(key) or CacheEntry()
            entry = replace(previous, error=error)
            self._cache[key] = entry
            return entry

    async def mark_stale(self, predicate: Callable[[Hashable], bool]) -> list[Hashable]:
        """Flag every entry whose key matches ``predicate`` as stale."""
        async with self._lock:
            marked = [key for key in self._cache if predicate(key)]
            for key in marked:
                self._cache[key] = replace(self._cache[key], stale=True)
            return marked

    def _evict_oldest(self, keep: Hashable) -> None:
        """Evict oldest entries by update time until under the limit.

        Must be called under lock.
        """
        while len(self._cache) > self._max_entries:
            candidates = [k for k in self._cache if k != keep]
            if not candidates:
                return
            oldest_key = min(
                candidates, key=lambda k: self._cache[k].updated_at or float("-inf")
            )
            del self._cache[oldest_key]

    async def clear(self, key: Hashable | None = None) -> None:
        """Clear cache for specific key or all."""
        async with self._lock:
            if key is not None:
                self._cache.pop(key, None)
            else:
                self._cache.clear()
