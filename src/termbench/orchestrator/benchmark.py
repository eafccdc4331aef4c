# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Single benchmark run over several concurrent simulated sessions."""

import asyncio
import math
import random
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from termbench.common.clock import Clock, LoopClock
from termbench.common.config import BenchmarkConfig
from termbench.common.exceptions import AlreadyRunningError, ConfigurationError
from termbench.common.mixins import TermBenchLoggerMixin
from termbench.common.models import BenchmarkResult
from termbench.metrics import aggregate_session_metrics
from termbench.session import HeadlessSessionHost, Mount, SessionHost, SessionSimulator

__all__ = [
    "BenchmarkOrchestrator",
    "HostFactory",
    "commands_per_session",
]

HostFactory = Callable[[str], SessionHost]


def commands_per_session(config: BenchmarkConfig) -> int:
    """Number of commands each session issues in a run, the initial one included."""
    total = math.ceil(config.duration / max(2 * config.command_delay, 1.0))
    return math.ceil(total / config.session_count)


class BenchmarkOrchestrator(TermBenchLoggerMixin):
    """Runs one benchmark: creates the sessions, paces their commands, stops on time.

    Every session issues one command as soon as the run starts. After
    ``2 * command_delay`` each session starts its own chain of follow-up
    commands, one every ``command_delay`` plus up to another ``command_delay``
    of jitter, until it has issued ``commands_per_session(config)`` commands.
    The run ends after ``duration``, whatever is still in flight.

    Args:
        config: Benchmark configuration
        clock: Clock for every delay. Defaults to the running asyncio loop.
        host_factory: Builds the host for a session id. Defaults to
            ``HeadlessSessionHost``.
        rng: Random source for command choice and jitter. Defaults to a Random
            seeded from ``config.random_seed``.
        label: Optional run label copied into the result
    """

    def __init__(
        self,
        config: BenchmarkConfig,
        clock: Clock | None = None,
        host_factory: HostFactory | None = None,
        rng: random.Random | None = None,
        label: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.config = config
        self.label = label
        self._clock = clock or LoopClock()
        self._host_factory = host_factory or HeadlessSessionHost
        self._rng = rng if rng is not None else random.Random(config.random_seed)

        self._running = False
        self._mount: Mount | None = None
        self._sessions: list[SessionSimulator] = []
        self._issued: dict[str, int] = {}
        self._errors: list[str] = []
        self._timers: dict[int, Any] = {}
        self._next_token = 0
        self._duration_timer: Any = None
        self._future: asyncio.Future | None = None
        self._result: BenchmarkResult | None = None
        self._start_time = 0.0
        self._end_time = 0.0

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def sessions(self) -> tuple[SessionSimulator, ...]:
        return tuple(self._sessions)

    @property
    def commands_issued(self) -> Mapping[str, int]:
        return MappingProxyType(self._issued)

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    @property
    def result(self) -> BenchmarkResult | None:
        return self._result

    def start(self, mount: Mount | None) -> "asyncio.Future[BenchmarkResult]":
        """Start the run and return a future resolved with its result.

        Must be called with a running event loop.

        Raises:
            AlreadyRunningError: If this orchestrator is already running
            ConfigurationError: If ``mount`` is missing
            MountInUseError: If another run owns ``mount``
        """
        if self._running:
            raise AlreadyRunningError("Benchmark is already running")
        if mount is None:
            raise ConfigurationError("A mount is required to start a benchmark")

        loop = asyncio.get_running_loop()
        mount.claim(self)

        self._running = True
        self._mount = mount
        self._future = loop.create_future()
        self._result = None
        self._sessions = []
        self._issued = {}
        self._errors = []
        self._start_time = self._clock.now()

        try:
            for i in range(self.config.session_count):
                session_id = f"session-{i + 1}"
                session = SessionSimulator(
                    session_id,
                    self.config,
                    self._clock,
                    self._host_factory(session_id),
                    rng=random.Random(self._rng.getrandbits(64)),
                    error_handler=self._on_session_error,
                )
                self._sessions.append(session)
                self._issued[session_id] = 0
                session.attach(mount)
        except Exception:
            self.exception("Failed to start benchmark")
            self._teardown()
            self._future = None
            raise

        self.info(
            lambda: f"Benchmark{self._label_suffix} started: {self.config.session_count} "
            f"sessions, {self.config.duration:.0f} ms, "
            f"{commands_per_session(self.config)} commands per session"
        )

        for session in self._sessions:
            self._issue_command(session)
        self._schedule(2 * self.config.command_delay, self._start_chains)
        self._duration_timer = self._clock.after(self.config.duration, self.stop)

        return self._future

    async def run(self, mount: Mount | None) -> BenchmarkResult:
        """Start the run and wait for it to finish."""
        return await self.start(mount)

    def stop(self) -> BenchmarkResult | None:
        """Stop the run now and resolve the pending future. Idempotent.

        Returns:
            The run's result, or None if the run never started
        """
        if not self._running:
            return self._result

        self._end_time = self._clock.now()
        self._teardown()

        self._result = BenchmarkResult(
            config=self.config,
            label=self.label,
            session_metrics=[session.metrics for session in self._sessions],
            aggregate_metrics=aggregate_session_metrics(
                session.metrics for session in self._sessions
            ),
            start_time=self._start_time,
            end_time=self._end_time,
            total_duration=self._end_time - self._start_time,
            errors=list(self._errors),
        )
        self.info(
            lambda: f"Benchmark{self._label_suffix} finished in "
            f"{self._result.total_duration:.0f} ms with {len(self._errors)} error(s)"
        )

        if self._future is not None and not self._future.done():
            self._future.set_result(self._result)
        return self._result

    @property
    def _label_suffix(self) -> str:
        return f" {self.label}" if self.label else ""

    def _teardown(self) -> None:
        self._running = False
        for handle in self._timers.values():
            self._clock.cancel(handle)
        self._timers.clear()
        self._clock.cancel(self._duration_timer)
        self._duration_timer = None

        for session in self._sessions:
            try:
                session.destroy()
            except Exception as e:
                self._on_session_error(session.id, e)

        if self._mount is not None:
            self._mount.release(self)
            self._mount = None

    def _schedule(self, delay: float, callback: Callable[[], None]) -> None:
        token = self._next_token
        self._next_token += 1

        def _fire() -> None:
            self._timers.pop(token, None)
            if self._running:
                callback()

        self._timers[token] = self._clock.after(delay, _fire)

    def _start_chains(self) -> None:
        for session in self._sessions:
            self._schedule_next(session)

    def _schedule_next(self, session: SessionSimulator) -> None:
        if self._issued[session.id] >= commands_per_session(self.config):
            return

        delay = self.config.command_delay
        if self.config.jitter:
            delay += self._rng.random() * self.config.command_delay

        def _step() -> None:
            self._issue_command(session)
            self._schedule_next(session)

        self._schedule(delay, _step)

    def _issue_command(self, session: SessionSimulator) -> None:
        commands = self.config.commands
        issued = self._issued[session.id]
        if self.config.random_commands:
            command = commands[self._rng.randrange(len(commands))]
        else:
            command = commands[issued % len(commands)]

        self._issued[session.id] = issued + 1
        try:
            session.execute_command(command)
        except Exception as e:
            self._on_session_error(session.id, e)

    def _on_session_error(self, session_id: str, exc: BaseException) -> None:
        message = f"{session_id}: {exc}"
        self._errors.append(message)
        self.warning(f"Session error in {message}")
