# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for termbench unit tests."""

import asyncio
import math
from collections.abc import Awaitable, Callable
from typing import Any

import pytest

from termbench.common.clock import VirtualClock
from termbench.common.config import BenchmarkConfig, PerformanceTestConfig
from termbench.common.models import (
    BaselineComparison,
    BenchmarkResult,
    BudgetViolation,
    EnvironmentInfo,
    PerformanceTestResult,
    ViewportDimensions,
)
from termbench.session import HeadlessSessionHost, Mount

# Deterministic timings: every execution time, frame and pacing delay is a
# whole number of milliseconds so recorded samples compare exactly.
FAST_SETTINGS: dict[str, Any] = {
    "command_delay": 100.0,
    "duration": 1000.0,
    "simulate_typing": False,
    "jitter": False,
    "collect_memory_profiles": False,
    "frame_interval": 20.0,
    "random_seed": 11,
}


@pytest.fixture
def clock() -> VirtualClock:
    return VirtualClock()


@pytest.fixture
def mount() -> Mount:
    return Mount()


@pytest.fixture
def fast_config() -> BenchmarkConfig:
    return BenchmarkConfig(session_count=2, commands=["date", "echo hi"], **FAST_SETTINGS)


@pytest.fixture
def fast_test_config() -> PerformanceTestConfig:
    return PerformanceTestConfig(
        name="Unit Test",
        runs=2,
        session_count=2,
        commands=["date", "echo hi"],
        **FAST_SETTINGS,
    )


class RecordingHostFactory:
    """Host factory that keeps every host it builds, keyed by session id."""

    def __init__(self, surface: Callable[[str], Any] | None = None) -> None:
        self.surface = surface
        self.hosts: dict[str, HeadlessSessionHost] = {}

    def __call__(self, session_id: str) -> HeadlessSessionHost:
        kwargs = {"heap_probe": None}
        if self.surface is not None:
            kwargs["surface"] = self.surface
        host = HeadlessSessionHost(session_id, **kwargs)
        self.hosts[session_id] = host
        return host

    def commands(self, session_id: str) -> list[str]:
        """Commands submitted to a session's host, in submission order."""
        return [
            line[2:] for line in self.hosts[session_id].transcript if line.startswith("$ ")
        ]


@pytest.fixture
def host_factory() -> RecordingHostFactory:
    return RecordingHostFactory()


@pytest.fixture
def drive(clock: VirtualClock) -> Callable[[Awaitable], Awaitable[Any]]:
    """Run an awaitable to completion, advancing the virtual clock whenever the loop is idle."""

    async def _drive(awaitable: Awaitable, max_steps: int = 200_000) -> Any:
        task = asyncio.ensure_future(awaitable)
        for _ in range(max_steps):
            await asyncio.sleep(0)
            if task.done():
                return task.result()
            if not clock.advance_to_next():
                await asyncio.sleep(0)
        task.cancel()
        raise AssertionError(f"Awaitable did not finish within {max_steps} steps")

    return _drive


@pytest.fixture
def make_host_factory() -> type[RecordingHostFactory]:
    return RecordingHostFactory


@pytest.fixture
def performance_result(tmp_path) -> PerformanceTestResult:
    """A two-run result with two budget violations and one baseline comparison."""
    config = PerformanceTestConfig(
        name="Nightly Smoke",
        runs=2,
        budgets={"maxAvgRenderTime": 16, "maxPeakMemoryUsage": 0, "minAvgFps": 30},
        baseline={"avgFps": 30.0},
        report_format=["json", "csv"],
        report_dir=tmp_path / "reports",
    )
    runs = [
        BenchmarkResult(
            config=BenchmarkConfig(),
            label=f"run_000{i}",
            aggregate_metrics={"avgRenderTime": 20.0, "avgFps": 45.0, "peakMemoryUsage": 3.0},
            start_time=i * 1000.0,
            end_time=i * 1000.0 + 1000.0,
            total_duration=1000.0,
        )
        for i in (1, 2)
    ]
    return PerformanceTestResult(
        config=config,
        start_time=0.0,
        end_time=2500.0,
        total_duration=2500.0,
        benchmark_results=runs,
        aggregated_metrics={"avgRenderTime": 20.0, "avgFps": 45.0, "peakMemoryUsage": 3.0},
        budget_violations=[
            BudgetViolation(
                metric="avgRenderTime",
                budget=16.0,
                actual=20.0,
                overage=4.0,
                overage_percentage=25.0,
            ),
            BudgetViolation(
                metric="peakMemoryUsage",
                budget=0.0,
                actual=3.0,
                overage=3.0,
                overage_percentage=math.inf,
            ),
        ],
        baseline_comparisons=[
            BaselineComparison(
                metric="avgFps",
                baseline=30.0,
                current=45.0,
                change=15.0,
                change_percentage=50.0,
                is_improvement=True,
            )
        ],
        passed_budgets=False,
        improved_over_baseline=True,
        environment=EnvironmentInfo(
            agent_string="termbench/test",
            viewport_dimensions=ViewportDimensions(width=80, height=24),
            cpu_core_count=4,
        ),
    )
