"""Injectable time sources for the synchronization layer.

Poll loops never touch ``time`` or ``asyncio.sleep`` directly; they go
through a :class:`Clock` so tests can drive them with :class:`ManualClock`.
"""

from __future__ import annotations

import asyncio
import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Monotonic time source with an awaitable sleep."""

    @abstractmethod
    def now(self) -> float:
        """Current time in seconds."""
        ...

    @abstractmethod
    async def sleep(self, seconds: float) -> None:
        """Suspend the calling task for ``seconds``."""
        ...


class MonotonicClock(Clock):
    """Real clock backed by ``time.monotonic`` and ``asyncio.sleep``."""

    def now(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


class ManualClock(Clock):
    """Clock that only moves when :meth:`advance` is called.

    Sleepers are resolved in deadline order once the clock passes their
    deadline. No real time passes.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._sleepers: list[tuple[float, asyncio.Future[None]]] = []
        self._sleeper_added = asyncio.Event()

    def now(self) -> float:
        return self._now

    @property
    def pending_sleepers(self) -> int:
        return sum(1 for _, future in self._sleepers if not future.done())

    async def sleep(self, seconds: float) -> None:
        if seconds <= 0:
            await asyncio.sleep(0)
            return
        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        entry = (self._now + seconds, future)
        self._sleepers.append(entry)
        self._sleeper_added.set()
        try:
            await future
        finally:
            if entry in self._sleepers:
                self._sleepers.remove(entry)

    async def wait_for_sleepers(self, count: int = 1) -> None:
        """Wait until at least ``count`` tasks are sleeping on this clock."""
        while self.pending_sleepers < count:
            self._sleeper_added.clear()
            await self._sleeper_added.wait()

    async def advance(self, seconds: float) -> None:
        """Move time forward and wake every sleeper whose deadline has passed."""
        self._now += seconds
        for deadline, future in sorted(self._sleepers, key=lambda item: item[0]):
            if deadline <= self._now and not future.done():
                future.set_result(None)
        await asyncio.sleep(0)


__all__ = ["Clock", "ManualClock", "MonotonicClock"]
