# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Simulated terminal session.

A session cycles ``IDLE -> TYPING -> EXECUTING -> IDLE``. Commands submitted
while a command is typing or executing wait in a FIFO queue, so at most one
command is in flight per session. The EXECUTING state covers execution, the
render frame and the post-command pacing delay.

FPS sampling runs independently of the command cycle on a per-frame callback.
Every timer a session owns is tracked so that ``destroy()`` can cancel all of
them; nothing is recorded once a session is destroyed.
"""

import asyncio
import inspect
import itertools
import random
from collections import deque
from collections.abc import Callable
from typing import Any

from termbench.common.clock import Clock
from termbench.common.config.benchmark_config import BenchmarkConfig
from termbench.common.enums import SessionState
from termbench.common.mixins import TermBenchLoggerMixin
from termbench.common.models.session_models import SessionMetrics, SessionSeries
from termbench.session.command_surface import simulated_execution_time
from termbench.session.host import Mount, RenderedOutput, SessionHost

__all__ = [
    "ErrorHandler",
    "SessionSimulator",
]

ErrorHandler = Callable[[str, BaseException], None]

FPS_SAMPLE_WINDOW_MS = 1000.0


class SessionSimulator(TermBenchLoggerMixin):
    """Emulates one terminal session's command lifecycle and records its metrics.

    Args:
        session_id: Unique session identifier within a run
        config: Benchmark configuration (typing, pacing, jitter, frame rate)
        clock: Clock driving every simulated delay
        host: Host that renders command output
        rng: Random source for execution jitter. Defaults to a Random seeded
            from ``config.random_seed``.
        error_handler: Called with ``(session_id, exc)`` when a simulated step
            fails. Defaults to logging the exception.
    """

    def __init__(
        self,
        session_id: str,
        config: BenchmarkConfig,
        clock: Clock,
        host: SessionHost,
        rng: random.Random | None = None,
        error_handler: ErrorHandler | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.id = session_id
        self._config = config
        self._clock = clock
        self._host = host
        self._rng = rng if rng is not None else random.Random(config.random_seed)
        self._error_handler = error_handler

        self._metrics = SessionMetrics(session_id=session_id)
        self._state = SessionState.IDLE
        self._attached = False
        self._queue: deque[str] = deque()
        self._current: str | None = None

        self._timers: dict[int, Any] = {}
        self._tokens = itertools.count()
        self._tasks: set[asyncio.Future] = set()
        self._frame_waiters: list[Callable[[], None]] = []

        self._typing_start = 0.0
        self._typed = 0
        self.input_buffer = ""
        self._command_start = 0.0
        self._execution_time = 0.0
        self._last_output_time: float | None = None
        self._frame_count = 0
        self._last_fps_time = 0.0

    def __repr__(self) -> str:
        return f"SessionSimulator(id={self.id!r}, state={self._state.value})"

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def metrics(self) -> SessionMetrics:
        return self._metrics

    @property
    def busy(self) -> bool:
        return self._state in (SessionState.TYPING, SessionState.EXECUTING)

    @property
    def in_flight(self) -> str | None:
        """The command currently being typed or executed, if any."""
        return self._current

    @property
    def queue_depth(self) -> int:
        return len(self._queue)

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    def attach(self, mount: Mount) -> None:
        """Mount the host and start the per-frame FPS counter."""
        if self._state is SessionState.DESTROYED:
            raise RuntimeError(f"Session {self.id} has been destroyed")
        if self._attached:
            return
        self._host.mount(mount)
        self._attached = True
        self._frame_count = 0
        self._last_fps_time = self._clock.now()
        self._schedule(self._config.frame_interval, self._on_frame, guarded=False)

    def execute_command(self, command: str) -> None:
        """Run ``command`` now, or queue it if another command is in flight.

        Raises:
            ValueError: If ``command`` is empty
            RuntimeError: If the session was never attached to a mount
        """
        if not command or not command.strip():
            raise ValueError("command must be a non-empty string")
        if self._state is SessionState.DESTROYED:
            self.debug(lambda: f"Session {self.id} destroyed, ignoring '{command}'")
            return
        if not self._attached:
            raise RuntimeError(f"Session {self.id} must be attached before executing")

        if self.busy:
            self._queue.append(command)
            self.debug(
                lambda: f"Session {self.id} busy, queued '{command}' (depth {len(self._queue)})"
            )
            return

        self._begin(command)

    def destroy(self) -> None:
        """Cancel every timer, frame callback and host task, then unmount. Idempotent."""
        if self._state is SessionState.DESTROYED:
            return
        self._state = SessionState.DESTROYED

        for handle in self._timers.values():
            self._clock.cancel(handle)
        self._timers.clear()
        for task in self._tasks:
            task.cancel()
        self._tasks.clear()
        self._frame_waiters.clear()
        self._queue.clear()
        self._current = None

        try:
            self._host.unmount()
        finally:
            self._metrics.freeze()
            self.debug(lambda: f"Session {self.id} destroyed")

    # Scheduling helpers

    def _schedule(self, delay: float, fn: Callable[[], None], guarded: bool = True) -> None:
        token = next(self._tokens)

        def _fire() -> None:
            self._timers.pop(token, None)
            if self._state is SessionState.DESTROYED:
                return
            if guarded:
                self._guarded(fn)
            else:
                fn()

        self._timers[token] = self._clock.after(delay, _fire)

    def _guarded(self, fn: Callable[..., None], *args: Any) -> None:
        try:
            fn(*args)
        except Exception as e:
            self._fail(e)

    def _fail(self, exc: BaseException) -> None:
        """Abandon the in-flight command, then pace and move on to the queue."""
        if self._error_handler is not None:
            self._error_handler(self.id, exc)
        else:
            self.logger.error(f"Session {self.id} step failed: {exc!r}", exc_info=exc)

        if self._state is SessionState.DESTROYED:
            return
        self._frame_waiters.clear()
        self._current = None
        self._state = SessionState.EXECUTING
        self._schedule(self._config.command_delay, self._finish_command)

    # Command lifecycle

    def _begin(self, command: str) -> None:
        self._current = command
        if self._config.simulate_typing:
            self._state = SessionState.TYPING
            self._typing_start = self._clock.now()
            self._typed = 0
            self.input_buffer = ""
            self._schedule(self._char_interval, self._type_next)
        else:
            self._submit(command)

    @property
    def _char_interval(self) -> float:
        return 1000.0 / self._config.typing_speed

    def _type_next(self) -> None:
        command = self._current
        if self._typed < len(command):
            self.input_buffer += command[self._typed]
            if self._typed == 0:
                self._metrics.record(
                    SessionSeries.INPUT_LATENCY, self._clock.now() - self._typing_start
                )
            self._typed += 1
            self._schedule(self._char_interval, self._type_next)
        else:
            self.input_buffer = ""
            self._submit(command)

    def _submit(self, command: str) -> None:
        self._state = SessionState.EXECUTING
        self._command_start = self._clock.now()
        self._execution_time = simulated_execution_time(
            command, self._rng, jitter=self._config.jitter
        )
        self._schedule(self._execution_time, self._execute)

    def _execute(self) -> None:
        rendered = self._host.submit(self._current)
        if inspect.isawaitable(rendered):
            task = asyncio.ensure_future(rendered)
            self._tasks.add(task)
            task.add_done_callback(self._on_render_done)
        else:
            self._on_output(rendered)

    def _on_render_done(self, task: asyncio.Future) -> None:
        self._tasks.discard(task)
        if task.cancelled() or self._state is SessionState.DESTROYED:
            return
        exc = task.exception()
        if exc is not None:
            self._fail(exc)
            return
        self._guarded(self._on_output, task.result())

    def _on_output(self, rendered: RenderedOutput) -> None:
        now = self._clock.now()
        self._metrics.record(SessionSeries.COMMAND_EXECUTION_TIME, self._execution_time)
        self._metrics.record(SessionSeries.TIME_TO_FIRST_OUTPUT, now - self._command_start)
        if self._last_output_time is not None:
            self._metrics.record(
                SessionSeries.OUTPUT_UPDATE_DELAY, now - self._last_output_time
            )
        self._last_output_time = now
        self._metrics.record(SessionSeries.OUTPUT_DOM_NODE_COUNT, rendered.node_count)

        self._frame_waiters.append(lambda: self._on_rendered(now))

    def _on_rendered(self, render_start: float) -> None:
        now = self._clock.now()
        self._metrics.record(SessionSeries.RENDER_TIME, now - render_start)
        self._metrics.record(
            SessionSeries.TOTAL_RESPONSE_TIME, now - self._command_start
        )

        heap = self._host.heap_usage() if self._config.collect_memory_profiles else None
        self._metrics.record(SessionSeries.MEMORY_USAGE, heap or 0.0)

        self._current = None
        self._schedule(self._config.command_delay, self._finish_command)

    def _finish_command(self) -> None:
        self._state = SessionState.IDLE
        if self._queue:
            self._begin(self._queue.popleft())

    # Frames

    def _on_frame(self) -> None:
        self._schedule(self._config.frame_interval, self._on_frame, guarded=False)

        now = self._clock.now()
        self._frame_count += 1
        elapsed = now - self._last_fps_time
        if elapsed >= FPS_SAMPLE_WINDOW_MS:
            self._metrics.record(SessionSeries.FPS, self._frame_count * 1000.0 / elapsed)
            self._frame_count = 0
            self._last_fps_time = now

        waiters, self._frame_waiters = self._frame_waiters, []
        for waiter in waiters:
            self._guarded(waiter)
