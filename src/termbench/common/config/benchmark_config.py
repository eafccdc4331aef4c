# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Benchmark and performance test configuration models."""

from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator

from termbench.common.config.base_config import BaseConfig
from termbench.common.enums import BudgetKey, ReportFormat

__all__ = [
    "DEFAULT_COMMANDS",
    "BenchmarkConfig",
    "PerformanceTestConfig",
]

DEFAULT_COMMANDS: tuple[str, ...] = (
    "ls -la",
    'echo "Hello World"',
    "cat package.json",
    "ps aux",
    'find . -type f -name "*.ts" | wc -l',
    "date",
    "uptime",
)


class BenchmarkConfig(BaseConfig):
    """Configuration for a single benchmark run. Immutable once created."""

    session_count: int = Field(
        default=3, ge=1, description="Number of simulated sessions to create"
    )
    commands: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COMMANDS),
        min_length=1,
        description="Pool of commands issued to the sessions",
    )
    command_delay: float = Field(
        default=500.0,
        ge=0,
        description="Base delay between commands and post-command pacing (ms)",
    )
    duration: float = Field(
        default=30_000.0, gt=0, description="Length of the benchmark run (ms)"
    )
    random_commands: bool = Field(
        default=True,
        description="Pick commands uniformly at random instead of round-robin",
    )
    collect_memory_profiles: bool = Field(
        default=True, description="Sample host heap usage after each command"
    )
    simulate_typing: bool = Field(
        default=True, description="Type each command character by character"
    )
    typing_speed: float = Field(
        default=10.0, gt=0, description="Typing speed in characters per second"
    )
    jitter: bool = Field(
        default=True,
        description="Add random jitter to execution times and command scheduling",
    )
    random_seed: int | None = Field(
        default=None, description="Seed for command selection and jitter"
    )
    frame_interval: float = Field(
        default=1000.0 / 60.0, gt=0, description="Period of the per-frame callback (ms)"
    )

    @field_validator("commands")
    @classmethod
    def _validate_commands(cls, commands: list[str]) -> list[str]:
        if any(not command.strip() for command in commands):
            raise ValueError("commands must not contain empty strings")
        return commands


class PerformanceTestConfig(BenchmarkConfig):
    """A benchmark repeated over several runs and evaluated against budgets."""

    name: str = Field(default="Default Performance Test", min_length=1)
    description: str | None = Field(default=None)
    runs: int = Field(default=3, ge=1, description="Number of benchmark runs")
    budgets: dict[BudgetKey, Annotated[float, Field(ge=0)]] = Field(
        default_factory=dict,
        description="Named thresholds, e.g. {'maxAvgRenderTime': 16}",
    )
    baseline: dict[str, float] = Field(
        default_factory=dict,
        description="Previously recorded aggregate metrics, e.g. {'avgFps': 30}",
    )
    fail_on_budget_violation: bool = Field(
        default=False,
        description="Fail the CI job when a budget is violated",
    )
    report_format: list[ReportFormat] = Field(
        default_factory=lambda: [ReportFormat.JSON],
        description="Report files to write after the test",
    )
    report_dir: Path | None = Field(
        default=None, description="Directory for report files"
    )
    run_cooldown: float = Field(
        default=1000.0, ge=0, description="Pause between consecutive runs (ms)"
    )
    auto_set_seed: bool = Field(
        default=True,
        description="Use a fixed seed when none is given so all runs share a workload",
    )

    @model_validator(mode="after")
    def _validate_baseline(self) -> "PerformanceTestConfig":
        for metric, value in self.baseline.items():
            if not metric:
                raise ValueError("baseline metric names must not be empty")
            if value != value:
                raise ValueError(f"baseline value for {metric} is NaN")
        return self

    def benchmark_config(self, **overrides) -> BenchmarkConfig:
        """Return the single-run portion of this config."""
        values = {name: getattr(self, name) for name in BenchmarkConfig.model_fields}
        values.update(overrides)
        return BenchmarkConfig(**values)
