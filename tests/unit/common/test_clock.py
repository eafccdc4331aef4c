# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the clock implementations."""

import asyncio

from termbench.common.clock import LoopClock, VirtualClock


class TestVirtualClock:
    """Tests for VirtualClock."""

    def test_fires_in_due_order(self):
        clock = VirtualClock()
        fired = []
        clock.after(30, lambda: fired.append("c"))
        clock.after(10, lambda: fired.append("a"))
        clock.after(20, lambda: fired.append("b"))

        assert clock.advance(30) == 3
        assert fired == ["a", "b", "c"]

    def test_ties_fire_in_scheduling_order(self):
        clock = VirtualClock()
        fired = []
        for name in "xyz":
            clock.after(5, lambda name=name: fired.append(name))

        clock.advance(5)

        assert fired == ["x", "y", "z"]

    def test_now_during_callback_is_due_time(self):
        """Test callbacks observe their own due time, not the advance target."""
        clock = VirtualClock(start=100)
        seen = []
        clock.after(25, lambda: seen.append(clock.now()))

        clock.advance(1000)

        assert seen == [125.0]
        assert clock.now() == 1100.0

    def test_callbacks_scheduled_while_firing_are_honoured(self):
        """Test a callback scheduled inside the window fires in the same advance."""
        clock = VirtualClock()
        fired = []

        def first():
            fired.append(clock.now())
            clock.after(10, lambda: fired.append(clock.now()))

        clock.after(10, first)
        clock.advance(50)

        assert fired == [10.0, 20.0]

    def test_cancel(self):
        clock = VirtualClock()
        fired = []
        handle = clock.after(10, lambda: fired.append(1))

        clock.cancel(handle)
        clock.cancel(handle)

        assert clock.advance(20) == 0
        assert fired == []
        assert clock.pending == 0

    def test_negative_delay_clamped(self):
        clock = VirtualClock(start=50)
        handle = clock.after(-10, lambda: None)
        assert handle.due == 50.0

    def test_advance_to_next(self):
        clock = VirtualClock()
        fired = []
        clock.after(40, lambda: fired.append(1))

        assert clock.advance_to_next() is True
        assert clock.now() == 40.0
        assert fired == [1]
        assert clock.advance_to_next() is False

    async def test_sleep(self):
        """Test sleep resumes once the clock passes the delay."""
        clock = VirtualClock()
        task = asyncio.ensure_future(clock.sleep(100))
        await asyncio.sleep(0)

        clock.advance(99)
        await asyncio.sleep(0)
        assert not task.done()

        clock.advance(1)
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert task.done()
        assert clock.pending == 0


class TestLoopClock:
    """Tests for LoopClock."""

    async def test_now_in_milliseconds(self):
        loop = asyncio.get_running_loop()
        clock = LoopClock()
        assert abs(clock.now() - loop.time() * 1000) < 50

    async def test_after_fires(self):
        clock = LoopClock()
        done = asyncio.Event()
        clock.after(1, done.set)

        await asyncio.wait_for(done.wait(), timeout=1)

    async def test_cancel(self):
        clock = LoopClock()
        fired = []
        handle = clock.after(1, lambda: fired.append(1))
        clock.cancel(handle)

        await asyncio.sleep(0.02)
        assert fired == []

    async def test_sleep(self):
        clock = LoopClock()
        start = clock.now()
        await clock.sleep(5)
        assert clock.now() - start >= 4
