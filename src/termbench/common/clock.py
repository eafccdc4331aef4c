# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Injectable clocks for the benchmark scheduler.

Every simulated delay in termbench (typing, command execution, pacing, frame
callbacks, run duration and the gap between runs) goes through a ``Clock``.
Production code uses ``LoopClock`` which is backed by the running asyncio loop;
tests and reproducible runs use ``VirtualClock`` which only moves when told to.

All times and delays are in milliseconds.
"""

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

__all__ = [
    "Clock",
    "LoopClock",
    "VirtualClock",
    "VirtualTimerHandle",
]


class Clock(ABC):
    """Time source and one-shot timer scheduler."""

    @abstractmethod
    def now(self) -> float:
        """Return the current time in milliseconds."""
        pass

    @abstractmethod
    def after(self, delay: float, callback: Callable[[], None]) -> Any:
        """Schedule ``callback`` to run once after ``delay`` milliseconds.

        Args:
            delay: Delay in milliseconds. Negative values are treated as 0.
            callback: Zero-argument callable to invoke

        Returns:
            An opaque handle accepted by ``cancel()``
        """
        pass

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        """Cancel a scheduled callback. No-op if it already fired or was cancelled."""
        pass

    async def sleep(self, delay: float) -> None:
        """Suspend the calling coroutine for ``delay`` milliseconds of clock time."""
        loop = asyncio.get_running_loop()
        waiter = loop.create_future()

        def _wake() -> None:
            if not waiter.done():
                waiter.set_result(None)

        handle = self.after(delay, _wake)
        try:
            await waiter
        finally:
            self.cancel(handle)


class LoopClock(Clock):
    """Clock backed by the running asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time() * 1000.0

    def after(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(delay, 0.0) / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle | None) -> None:
        if handle is not None:
            handle.cancel()


class VirtualTimerHandle:
    """Handle for a callback scheduled on a ``VirtualClock``."""

    __slots__ = ("due", "callback", "cancelled", "fired")

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class VirtualClock(Clock):
    """Deterministic manual clock.

    Time only advances through ``advance()`` / ``advance_to_next()``. Callbacks
    fire in order of due time, ties broken by scheduling order, so a run driven
    by a VirtualClock and a seeded RNG is fully reproducible.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)
        self._queue: list[tuple[float, int, VirtualTimerHandle]] = []
        self._sequence = itertools.count()

    def now(self) -> float:
        return self._now

    def after(self, delay: float, callback: Callable[[], None]) -> VirtualTimerHandle:
        handle = VirtualTimerHandle(self._now + max(delay, 0.0), callback)
        heapq.heappush(self._queue, (handle.due, next(self._sequence), handle))
        return handle

    def cancel(self, handle: VirtualTimerHandle | None) -> None:
        if handle is not None:
            handle.cancelled = True

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting to fire."""
        return sum(1 for _, _, handle in self._queue if handle.active)

    def advance(self, delay: float) -> int:
        """Move time forward by ``delay`` ms, firing every callback that falls due.

        Returns:
            Number of callbacks fired
        """
        target = self._now + max(delay, 0.0)
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if not handle.active:
                continue
            self._now = max(self._now, due)
            handle.fired = True
            handle.callback()
            fired += 1
        self._now = target
        return fired

    def advance_to_next(self) -> bool:
        """Jump to the earliest pending callback and fire everything due then.

        Returns:
            False if nothing was pending
        """
        while self._queue and not self._queue[0][2].active:
            heapq.heappop(self._queue)
        if not self._queue:
            return False
        self.advance(self._queue[0][0] - self._now)
        return True
