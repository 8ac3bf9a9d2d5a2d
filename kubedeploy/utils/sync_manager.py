"""SyncManager - polling synchronization of remote collections.

This module keeps cached, versioned views of each resource collection,
keyed by query identity (resource kind + optional namespace filter).

Usage:
    sync = SyncManager(clock=MonotonicClock())
    sync.register_source(ResourceKind.PODS, pods.list_pods, interval=3.0)

    # Observe a collection (starts polling on first observer)
    subscription = sync.subscribe(ResourceKind.PODS, "default")
    subscription.add_listener(on_pods_changed)

    # After a mutation, force the next poll to run now
    await sync.invalidate(ResourceKind.PODS)

    # Stop observing (polling stops when the last observer leaves)
    subscription.close()
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from contextlib import suppress
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from kubedeploy.constants.defaults import POLL_RETRY_COUNT_DEFAULT
from kubedeploy.constants.enums import ErrorCategory, ResourceKind, ViewState
from kubedeploy.constants.values import MSG_TRANSPORT_FAILED
from kubedeploy.controllers.base import ApiResult, result_error_text
from kubedeploy.models.cache.data_cache import CacheEntry, DataCache
from kubedeploy.utils.clock import Clock, MonotonicClock

logger = logging.getLogger(__name__)

PollSource = Callable[[str | None], Awaitable[ApiResult[Any]]]
ViewListener = Callable[["CachedView"], None]


class QueryKey(NamedTuple):
    """Identity of one synchronized collection."""

    kind: ResourceKind
    namespace: str | None = None

    def label(self) -> str:
        return f"{self.kind.value}[{self.namespace or 'all'}]"


@dataclass(frozen=True)
class CachedView:
    """What an observer sees for one key at one moment."""

    key: QueryKey
    data: list[Any] = field(default_factory=list)
    version: int = 0
    error: str | None = None
    stale: bool = False
    updated_at: float | None = None

    @classmethod
    def from_entry(cls, key: QueryKey, entry: CacheEntry | None) -> CachedView:
        if entry is None:
            return cls(key=key)
        return cls(
            key=key,
            data=list(entry.data or []),
            version=entry.version,
            error=entry.error,
            stale=entry.stale,
            updated_at=entry.updated_at,
        )

    @property
    def has_data(self) -> bool:
        return self.version > 0

    @property
    def state(self) -> ViewState:
        """LOADING, ERROR, STALE (data present but outdated) or READY."""
        if not self.has_data:
            return ViewState.ERROR if self.error else ViewState.LOADING
        if self.error or self.stale:
            return ViewState.STALE
        return ViewState.READY


@dataclass
class _SourceRegistration:
    source: PollSource
    interval: float


class _PollLoop:
    """Poll state for one key, shared by all of its observers."""

    def __init__(self, key: QueryKey, source: PollSource, interval: float) -> None:
        self.key = key
        self.source = source
        self.interval = interval
        self.observers = 0
        self.listeners: list[ViewListener] = []
        self.wake = asyncio.Event()
        self.task: asyncio.Task[None] | None = None
        self.closed = False
        # Bumped by every invalidation of this key.
        self.generation = 0
        # Polls are numbered when issued; results older than the last applied one are dropped.
        self.issued = 0
        self.applied = 0


class Subscription:
    """Live handle on one synchronized collection.

    Reading :attr:`view` always returns the latest cached snapshot. Listeners
    added here are removed again by :meth:`close`.
    """

    def __init__(self, manager: SyncManager, loop: _PollLoop) -> None:
        self._manager = manager
        self._loop = loop
        self._listeners: list[ViewListener] = []
        self._closed = False

    @property
    def key(self) -> QueryKey:
        return self._loop.key

    @property
    def interval(self) -> float:
        return self._loop.interval

    @property
    def is_active(self) -> bool:
        return not self._closed

    @property
    def view(self) -> CachedView:
        return self._manager.view(self.key.kind, self.key.namespace)

    def add_listener(self, listener: ViewListener) -> None:
        self._listeners.append(listener)
        self._loop.listeners.append(listener)

    async def refresh(self) -> CachedView:
        """Poll immediately, outside the interval schedule."""
        return await self._manager.poll_now(self.key.kind, self.key.namespace)

    def close(self) -> None:
        """Stop observing. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        for listener in self._listeners:
            with suppress(ValueError):
                self._loop.listeners.remove(listener)
        self._listeners.clear()
        self._manager._release(self._loop)


class SyncManager:
    """Owns every poll loop and the collection cache behind them.

    Each subscribed key polls its source on a fixed interval while it has
    observers. A successful poll replaces the whole cached collection; a
    failed poll (after ``retry_count`` retries) keeps the previous
    collection and records the error. :meth:`invalidate` wakes the loops of a
    kind so they poll immediately.
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        cache: DataCache | None = None,
        retry_count: int = POLL_RETRY_COUNT_DEFAULT,
        auto_poll: bool = True,
    ) -> None:
        """Initialize the manager.

        Args:
            clock: Time source for intervals; defaults to the monotonic clock
            cache: Collection cache; created on the same clock when omitted
            retry_count: Automatic retries of a failed poll before it is surfaced
            auto_poll: When False, subscriptions do not start background loops
                and polls run only through :meth:`poll_now`
        """
        self._clock = clock or MonotonicClock()
        self._cache = cache or DataCache(clock=self._clock)
        self._retry_count = retry_count
        self._auto_poll = auto_poll
        self._sources: dict[ResourceKind, _SourceRegistration] = {}
        self._loops: dict[QueryKey, _PollLoop] = {}

        logger.info("SyncManager initialized")

    @property
    def cache(self) -> DataCache:
        return self._cache

    @property
    def clock(self) -> Clock:
        return self._clock

    # =========================================================================
    # Registration
    # =========================================================================

    def register_source(
        self, kind: ResourceKind, source: PollSource, interval: float
    ) -> None:
        """Declare how to fetch ``kind`` and how often."""
        self._sources[kind] = _SourceRegistration(source=source, interval=interval)

    def subscribe(
        self,
        kind: ResourceKind,
        namespace: str | None = None,
        *,
        source: PollSource | None = None,
        interval: float | None = None,
    ) -> Subscription:
        """Start observing ``(kind, namespace)``.

        Observers of the same key share one loop; the first observer's
        ``source``/``interval`` (or the registered ones) win.

        Raises:
            KeyError: No source was given or registered for ``kind``.
        """
        key = QueryKey(kind, namespace or None)
        loop = self._loops.get(key)
        if loop is None:
            registration = self._sources.get(kind)
            poll_source = source or (registration.source if registration else None)
            poll_interval = interval
            if poll_interval is None and registration is not None:
                poll_interval = registration.interval
            if poll_source is None or poll_interval is None:
                raise KeyError(f"No poll source registered for {kind.value}")
            loop = _PollLoop(key, poll_source, poll_interval)
            self._loops[key] = loop
            logger.info("Subscribed to %s every %ss", key.label(), loop.interval)
            if self._auto_poll:
                loop.task = asyncio.get_running_loop().create_task(
                    self._run(loop), name=f"poll-{key.label()}"
                )
        loop.observers += 1
        return Subscription(self, loop)

    def _release(self, loop: _PollLoop) -> None:
        loop.observers -= 1
        if loop.observers > 0:
            return
        loop.closed = True
        loop.wake.set()
        if self._loops.get(loop.key) is loop:
            del self._loops[loop.key]
        logger.info("Unsubscribed from %s", loop.key.label())

    def is_observed(self, kind: ResourceKind, namespace: str | None = None) -> bool:
        return QueryKey(kind, namespace or None) in self._loops

    # =========================================================================
    # Reads
    # =========================================================================

    def view(self, kind: ResourceKind, namespace: str | None = None) -> CachedView:
        key = QueryKey(kind, namespace or None)
        return CachedView.from_entry(key, self._cache.peek(key))

    # =========================================================================
    # Invalidation
    # =========================================================================

    async def invalidate(self, kind: ResourceKind) -> None:
        """Mark every cached collection of ``kind`` stale and poll them now."""
        marked = await self._cache.mark_stale(lambda key: key.kind is kind)
        woken = 0
        for key, loop in list(self._loops.items()):
            if key.kind is kind:
                loop.generation += 1
                loop.wake.set()
                woken += 1
        for key in marked:
            self._notify(key)
        logger.debug(
            "Invalidated %s (%d cached, %d active)", kind.value, len(marked), woken
        )

    async def clear(self) -> None:
        """Drop every cached collection (used on logout)."""
        await self._cache.clear()

    # =========================================================================
    # Polling
    # =========================================================================

    async def poll_now(
        self, kind: ResourceKind, namespace: str | None = None
    ) -> CachedView:
        """Run one poll for an observed key immediately.

        Raises:
            KeyError: The key has no active subscription.
        """
        key = QueryKey(kind, namespace or None)
        loop = self._loops.get(key)
        if loop is None:
            raise KeyError(f"{key.label()} is not subscribed")
        await self._poll(loop)
        return self.view(kind, namespace)

    async def _run(self, loop: _PollLoop) -> None:
        while not loop.closed:
            loop.wake.clear()
            await self._poll(loop)
            if loop.closed:
                break
            await self._wait_for_tick(loop)
        logger.debug("Poll loop for %s stopped", loop.key.label())

    async def _wait_for_tick(self, loop: _PollLoop) -> None:
        """Wait for the interval to elapse or for an invalidation, whichever is first."""
        wake_task = asyncio.ensure_future(loop.wake.wait())
        sleep_task = asyncio.ensure_future(self._clock.sleep(loop.interval))
        try:
            await asyncio.wait(
                {wake_task, sleep_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in (wake_task, sleep_task):
                if not task.done():
                    task.cancel()
                    with suppress(asyncio.CancelledError):
                        await task

    async def _fetch(self, loop: _PollLoop) -> ApiResult[Any]:
        attempts = 1 + max(0, self._retry_count)
        result: ApiResult[Any] = ApiResult.failure(ErrorCategory.TRANSPORT)
        for attempt in range(1, attempts + 1):
            try:
                result = await loop.source(loop.key.namespace)
            except Exception as exc:
                logger.exception("Poll source for %s raised", loop.key.label())
                result = ApiResult.failure(ErrorCategory.TRANSPORT, detail=str(exc))
            if result.success or result.is_unauthorized:
                return result
            if attempt < attempts:
                logger.warning(
                    "Poll of %s failed (attempt %s/%s), retrying",
                    loop.key.label(),
                    attempt,
                    attempts,
                )
        return result

    async def _poll(self, loop: _PollLoop) -> None:
        loop.issued += 1
        sequence = loop.issued
        generation = loop.generation
        result = await self._fetch(loop)
        if loop.closed:
            logger.debug("Discarding poll result for closed %s", loop.key.label())
            return
        if sequence < loop.applied:
            logger.debug("Discarding out-of-order poll result for %s", loop.key.label())
            return
        loop.applied = sequence

        if result.success:
            # Issued before an invalidation, so it may predate the mutation.
            outdated = generation != loop.generation
            entry = await self._cache.set(
                loop.key, list(result.data or []), stale=outdated
            )
            if outdated:
                loop.wake.set()
            logger.debug(
                "Polled %s: %d items (v%d)",
                loop.key.label(),
                len(entry.data),
                entry.version,
            )
        else:
            error = result_error_text(result, MSG_TRANSPORT_FAILED)
            await self._cache.set_error(loop.key, error)
            logger.warning("Poll of %s failed: %s", loop.key.label(), error)
        self._notify(loop.key)

    def _notify(self, key: QueryKey) -> None:
        loop = self._loops.get(key)
        if loop is None:
            return
        view = self.view(key.kind, key.namespace)
        for listener in list(loop.listeners):
            try:
                listener(view)
            except Exception:
                logger.exception("Listener for %s failed", key.label())

    async def aclose(self) -> None:
        """Stop every poll loop (application teardown)."""
        loops = list(self._loops.values())
        self._loops.clear()
        for loop in loops:
            loop.closed = True
            loop.wake.set()
            if loop.task is not None and not loop.task.done():
                loop.task.cancel()
                with suppress(asyncio.CancelledError):
                    await loop.task


__all__ = [
    "CachedView",
    "PollSource",
    "QueryKey",
    "Subscription",
    "SyncManager",
]
