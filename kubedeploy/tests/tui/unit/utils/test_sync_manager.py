"""Tests for SyncManager - polling synchronization of remote collections.

This module tests:
- View states: loading, ready, stale, error
- Failed polls keep the previous collection
- Automatic retry of a failed poll
- Invalidation marks stale and wakes the loop
- Shared loops per query key and observer lifecycle
- Results of closed loops and out-of-order results are discarded
- Polls issued before an invalidation stay stale
- Interval scheduling on the manual clock
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import pytest

from kubedeploy.constants.enums import ErrorCategory, ResourceKind, ViewState
from kubedeploy.constants.values import MSG_TRANSPORT_FAILED
from kubedeploy.controllers.base import ApiResult
from kubedeploy.utils.clock import ManualClock
from kubedeploy.utils.sync_manager import CachedView, QueryKey, SyncManager

# =============================================================================
# Test Fixtures
# =============================================================================


class ScriptedSource:
    """Poll source replaying scripted results; the last one repeats."""

    def __init__(self, *results: ApiResult[Any]) -> None:
        self.results = list(results)
        self.calls: list[str | None] = []

    async def __call__(self, namespace: str | None) -> ApiResult[Any]:
        self.calls.append(namespace)
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]


class GatedSource:
    """Poll source that blocks until released."""

    def __init__(self, result: ApiResult[Any]) -> None:
        self.result = result
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def __call__(self, namespace: str | None) -> ApiResult[Any]:
        self.started.set()
        await self.release.wait()
        return self.result


class SlowFirstSource:
    """Poll source whose first call blocks until released; later calls answer at once."""

    def __init__(self, first: ApiResult[Any], rest: ApiResult[Any]) -> None:
        self.first = first
        self.rest = rest
        self.calls = 0
        self.first_started = asyncio.Event()
        self.release_first = asyncio.Event()

    async def __call__(self, namespace: str | None) -> ApiResult[Any]:
        self.calls += 1
        if self.calls == 1:
            self.first_started.set()
            await self.release_first.wait()
            return self.first
        return self.rest


async def settle(predicate: Callable[[], bool], attempts: int = 500) -> None:
    """Yield to the event loop until ``predicate`` holds."""
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition was not reached")


def _fail(error: str | None = None, detail: str | None = None) -> ApiResult[Any]:
    return ApiResult.failure(ErrorCategory.REMOTE, error=error, detail=detail)


@pytest.fixture
def manual_sync(clock: ManualClock) -> SyncManager:
    return SyncManager(clock=clock, retry_count=1, auto_poll=False)


# =============================================================================
# View states
# =============================================================================


class TestViewStates:
    """Tests for CachedView state derivation."""

    def test_empty_view_is_loading(self) -> None:
        view = CachedView(key=QueryKey(ResourceKind.PODS))
        assert view.state is ViewState.LOADING
        assert view.has_data is False

    def test_error_without_data(self) -> None:
        view = CachedView(key=QueryKey(ResourceKind.PODS), error="down")
        assert view.state is ViewState.ERROR

    def test_error_with_data_is_stale(self) -> None:
        view = CachedView(key=QueryKey(ResourceKind.PODS), data=[1], version=2, error="down")
        assert view.state is ViewState.STALE

    def test_ready(self) -> None:
        view = CachedView(key=QueryKey(ResourceKind.PODS), data=[], version=1)
        assert view.state is ViewState.READY

    def test_key_label(self) -> None:
        assert QueryKey(ResourceKind.PODS).label() == "pods[all]"
        assert QueryKey(ResourceKind.PODS, "dev").label() == "pods[dev]"


# =============================================================================
# Polling results
# =============================================================================


class TestPolling:
    """Tests for poll outcomes written to the cache."""

    @pytest.mark.asyncio
    async def test_successful_poll_replaces_collection(self, manual_sync) -> None:
        source = ScriptedSource(ApiResult.ok(["a", "b"]), ApiResult.ok(["c"]))
        subscription = manual_sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)
        assert subscription.view.state is ViewState.LOADING

        first = await subscription.refresh()
        second = await subscription.refresh()

        assert (first.data, first.version) == (["a", "b"], 1)
        assert (second.data, second.version) == (["c"], 2)
        assert second.state is ViewState.READY
        subscription.close()

    @pytest.mark.asyncio
    async def test_failed_poll_keeps_previous_collection(self, manual_sync) -> None:
        source = ScriptedSource(ApiResult.ok(["a"]), _fail("backend down"))
        subscription = manual_sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)

        await subscription.refresh()
        view = await subscription.refresh()

        assert view.data == ["a"]
        assert view.version == 1
        assert view.error == "backend down"
        assert view.state is ViewState.STALE
        subscription.close()

    @pytest.mark.asyncio
    async def test_failure_is_retried_once(self, manual_sync) -> None:
        source = ScriptedSource(_fail("blip"), ApiResult.ok(["a"]))
        subscription = manual_sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)

        view = await subscription.refresh()

        assert len(source.calls) == 2
        assert view.state is ViewState.READY
        assert view.data == ["a"]
        subscription.close()

    @pytest.mark.asyncio
    async def test_retry_exhausted_surfaces_error(self, manual_sync) -> None:
        source = ScriptedSource(_fail("first"), _fail("second"))
        subscription = manual_sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)

        view = await subscription.refresh()

        assert len(source.calls) == 2
        assert view.state is ViewState.ERROR
        assert view.error == "second"
        subscription.close()

    @pytest.mark.asyncio
    async def test_unauthorized_is_not_retried(self, manual_sync) -> None:
        source = ScriptedSource(ApiResult.failure(ErrorCategory.UNAUTHORIZED, status_code=401))
        subscription = manual_sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)

        await subscription.refresh()

        assert len(source.calls) == 1
        subscription.close()

    @pytest.mark.asyncio
    async def test_error_text_falls_back(self, manual_sync) -> None:
        source = ScriptedSource(_fail())
        subscription = manual_sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)

        view = await subscription.refresh()

        assert view.error == MSG_TRANSPORT_FAILED
        subscription.close()

    @pytest.mark.asyncio
    async def test_raising_source_becomes_error(self, manual_sync) -> None:
        async def _explode(namespace: str | None) -> ApiResult[Any]:
            raise RuntimeError("kaboom")

        subscription = manual_sync.subscribe(ResourceKind.PODS, source=_explode, interval=3.0)

        view = await subscription.refresh()

        assert view.state is ViewState.ERROR
        assert view.error == "kaboom"
        subscription.close()

    @pytest.mark.asyncio
    async def test_namespace_is_passed_to_source(self, manual_sync) -> None:
        source = ScriptedSource(ApiResult.ok([]))
        scoped = manual_sync.subscribe(ResourceKind.PODS, "dev", source=source, interval=3.0)
        everything = manual_sync.subscribe(ResourceKind.PODS, "", source=source, interval=3.0)

        await scoped.refresh()
        await everything.refresh()

        assert source.calls == ["dev", None]
        assert scoped.key == QueryKey(ResourceKind.PODS, "dev")
        assert everything.key == QueryKey(ResourceKind.PODS, None)
        scoped.close()
        everything.close()

    @pytest.mark.asyncio
    async def test_listeners_receive_views(self, manual_sync) -> None:
        source = ScriptedSource(ApiResult.ok(["a"]))
        subscription = manual_sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)
        seen: list[CachedView] = []

        def _broken(view: CachedView) -> None:
            raise ValueError("listener bug")

        subscription.add_listener(_broken)
        subscription.add_listener(seen.append)

        await subscription.refresh()

        assert [view.version for view in seen] == [1]
        subscription.close()

    @pytest.mark.asyncio
    async def test_clear_drops_cached_collections(self, manual_sync) -> None:
        source = ScriptedSource(ApiResult.ok(["a"]))
        subscription = manual_sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)
        await subscription.refresh()

        await manual_sync.clear()

        assert subscription.view.state is ViewState.LOADING
        subscription.close()


# =============================================================================
# Invalidation
# =============================================================================


class TestInvalidation:
    """Tests for invalidate."""

    @pytest.mark.asyncio
    async def test_invalidate_marks_stale_and_notifies(self, manual_sync) -> None:
        source = ScriptedSource(ApiResult.ok(["a"]), ApiResult.ok(["a", "b"]))
        subscription = manual_sync.subscribe(ResourceKind.WORKLOADS, source=source, interval=5.0)
        await subscription.refresh()
        seen: list[CachedView] = []
        subscription.add_listener(seen.append)

        await manual_sync.invalidate(ResourceKind.WORKLOADS)

        assert seen[-1].stale is True
        assert seen[-1].state is ViewState.STALE
        assert seen[-1].data == ["a"]

        view = await subscription.refresh()
        assert view.stale is False
        assert view.data == ["a", "b"]
        subscription.close()

    @pytest.mark.asyncio
    async def test_invalidate_only_touches_its_kind(self, manual_sync) -> None:
        pods = manual_sync.subscribe(
            ResourceKind.PODS, source=ScriptedSource(ApiResult.ok([])), interval=3.0
        )
        workloads = manual_sync.subscribe(
            ResourceKind.WORKLOADS, source=ScriptedSource(ApiResult.ok([])), interval=5.0
        )
        await pods.refresh()
        await workloads.refresh()

        await manual_sync.invalidate(ResourceKind.WORKLOADS)

        assert workloads.view.stale is True
        assert pods.view.stale is False
        pods.close()
        workloads.close()

    @pytest.mark.asyncio
    async def test_poll_started_before_invalidate_stays_stale(self, manual_sync) -> None:
        source = GatedSource(ApiResult.ok(["old"]))
        subscription = manual_sync.subscribe(ResourceKind.WORKLOADS, source=source, interval=5.0)

        pending = asyncio.ensure_future(subscription.refresh())
        await source.started.wait()
        await manual_sync.invalidate(ResourceKind.WORKLOADS)
        source.release.set()
        view = await pending

        assert view.data == ["old"]
        assert view.stale is True
        assert view.state is ViewState.STALE

        fresh = await subscription.refresh()
        assert fresh.stale is False
        assert fresh.state is ViewState.READY
        subscription.close()

    @pytest.mark.asyncio
    async def test_older_result_does_not_overwrite_newer(self, manual_sync) -> None:
        source = SlowFirstSource(ApiResult.ok(["old"]), ApiResult.ok(["new"]))
        subscription = manual_sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)

        slow = asyncio.ensure_future(subscription.refresh())
        await source.first_started.wait()
        fast = await subscription.refresh()
        assert fast.data == ["new"]

        source.release_first.set()
        await slow

        view = subscription.view
        assert view.data == ["new"]
        assert view.version == 1
        subscription.close()


# =============================================================================
# Observers
# =============================================================================


class TestObservers:
    """Tests for subscription sharing and release."""

    @pytest.mark.asyncio
    async def test_same_key_shares_one_loop(self, manual_sync) -> None:
        source = ScriptedSource(ApiResult.ok(["a"]))
        first = manual_sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)
        second = manual_sync.subscribe(ResourceKind.PODS, interval=99.0)

        assert second.interval == 3.0
        await first.refresh()
        assert second.view.data == ["a"]

        first.close()
        assert manual_sync.is_observed(ResourceKind.PODS) is True
        second.close()
        assert manual_sync.is_observed(ResourceKind.PODS) is False

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, manual_sync) -> None:
        subscription = manual_sync.subscribe(
            ResourceKind.PODS, source=ScriptedSource(ApiResult.ok([])), interval=3.0
        )
        other = manual_sync.subscribe(ResourceKind.PODS)

        subscription.close()
        subscription.close()

        assert manual_sync.is_observed(ResourceKind.PODS) is True
        assert subscription.is_active is False
        other.close()

    @pytest.mark.asyncio
    async def test_registered_source_is_used(self, manual_sync) -> None:
        source = ScriptedSource(ApiResult.ok([]))
        manual_sync.register_source(ResourceKind.ENDPOINTS, source, interval=5.0)

        subscription = manual_sync.subscribe(ResourceKind.ENDPOINTS, "default")
        await subscription.refresh()

        assert source.calls == ["default"]
        assert subscription.interval == 5.0
        subscription.close()

    def test_unregistered_kind_raises(self, manual_sync) -> None:
        with pytest.raises(KeyError):
            manual_sync.subscribe(ResourceKind.NAMESPACES)

    @pytest.mark.asyncio
    async def test_poll_now_requires_subscription(self, manual_sync) -> None:
        with pytest.raises(KeyError):
            await manual_sync.poll_now(ResourceKind.PODS)

    @pytest.mark.asyncio
    async def test_result_for_closed_loop_is_discarded(self, manual_sync) -> None:
        source = GatedSource(ApiResult.ok(["late"]))
        subscription = manual_sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)

        pending = asyncio.ensure_future(subscription.refresh())
        await source.started.wait()
        subscription.close()
        source.release.set()
        view = await pending

        assert view.version == 0
        assert manual_sync.cache.peek(QueryKey(ResourceKind.PODS)) is None


# =============================================================================
# Scheduling
# =============================================================================


class TestScheduling:
    """Tests for interval polling driven by the manual clock."""

    @pytest.mark.asyncio
    async def test_polls_on_interval_and_on_invalidate(self, clock: ManualClock) -> None:
        sync = SyncManager(clock=clock, retry_count=0)
        source = ScriptedSource(ApiResult.ok(["a"]))
        subscription = sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)
        try:
            await settle(lambda: subscription.view.version == 1)
            await clock.wait_for_sleepers(1)
            assert len(source.calls) == 1

            await clock.advance(2.5)
            for _ in range(10):
                await asyncio.sleep(0)
            assert len(source.calls) == 1

            await clock.advance(0.5)
            await settle(lambda: subscription.view.version == 2)
            assert len(source.calls) == 2

            await clock.wait_for_sleepers(1)
            await sync.invalidate(ResourceKind.PODS)
            await settle(lambda: subscription.view.version == 3)
            assert len(source.calls) == 3
        finally:
            subscription.close()
            await sync.aclose()

    @pytest.mark.asyncio
    async def test_failed_interval_poll_keeps_data(self, clock: ManualClock) -> None:
        sync = SyncManager(clock=clock, retry_count=0)
        source = ScriptedSource(ApiResult.ok(["a"]), _fail("timeout"))
        subscription = sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)
        try:
            await settle(lambda: subscription.view.version == 1)
            await clock.wait_for_sleepers(1)

            await clock.advance(3.0)
            await settle(lambda: subscription.view.error is not None)

            view = subscription.view
            assert view.data == ["a"]
            assert view.version == 1
            assert view.state is ViewState.STALE
        finally:
            subscription.close()
            await sync.aclose()

    @pytest.mark.asyncio
    async def test_last_observer_stops_polling(self, clock: ManualClock) -> None:
        sync = SyncManager(clock=clock, retry_count=0)
        source = ScriptedSource(ApiResult.ok([]))
        subscription = sync.subscribe(ResourceKind.PODS, source=source, interval=3.0)
        try:
            await settle(lambda: len(source.calls) == 1)
            await clock.wait_for_sleepers(1)

            subscription.close()
            await clock.advance(10.0)
            for _ in range(10):
                await asyncio.sleep(0)

            assert len(source.calls) == 1
            assert sync.is_observed(ResourceKind.PODS) is False
        finally:
            await sync.aclose()
