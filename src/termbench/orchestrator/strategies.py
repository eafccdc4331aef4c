# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Execution strategies for multi-run performance tests."""

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path

from termbench.common.config import BenchmarkConfig, PerformanceTestConfig
from termbench.common.models import BenchmarkResult

logger = logging.getLogger(__name__)

__all__ = [
    "ExecutionStrategy",
    "FixedRunsStrategy",
]


class ExecutionStrategy(ABC):
    """Base class for execution strategies.

    Strategies decide:
    1. What config to run next (based on results so far)
    2. Whether to continue or stop
    3. How to label runs
    4. Pause between runs
    5. Where reports are written
    """

    def validate_config(self, config: PerformanceTestConfig) -> None:  # noqa: B027
        """Validate that config is suitable for this strategy.

        Called by the runner before the first run.
        """
        pass

    @abstractmethod
    def should_continue(self, results: list[BenchmarkResult]) -> bool:
        """Decide whether to start another run."""
        pass

    @abstractmethod
    def get_next_config(
        self, base_config: PerformanceTestConfig, results: list[BenchmarkResult]
    ) -> BenchmarkConfig:
        """Build the single-run config for the next run.

        Args:
            base_config: Performance test configuration
            results: Results from runs executed so far

        Returns:
            Configuration for the next benchmark run
        """
        pass

    @abstractmethod
    def get_run_label(self, run_index: int) -> str:
        """Generate label for run at the given zero-based index (e.g., "run_0001")."""
        pass

    @abstractmethod
    def get_cooldown(self) -> float:
        """Return the pause between runs in milliseconds."""
        pass

    @abstractmethod
    def get_report_path(self, base_dir: Path, name: str) -> Path:
        """Build the path stem (without suffix) for a test's report files."""
        pass


class FixedRunsStrategy(ExecutionStrategy):
    """Run the same benchmark a fixed number of times.

    Attributes:
        num_runs: Number of runs
        cooldown: Pause between runs (ms)
        auto_set_seed: Use DEFAULT_SEED when the config has no seed so every run
            issues the same command sequence
    """

    DEFAULT_SEED = 42

    def __init__(
        self,
        num_runs: int,
        cooldown: float = 0.0,
        auto_set_seed: bool = True,
    ) -> None:
        """Initialize FixedRunsStrategy.

        Raises:
            ValueError: If num_runs < 1 or cooldown < 0
        """
        if num_runs < 1:
            raise ValueError(f"Invalid num_runs: {num_runs}. Must be at least 1.")
        if cooldown < 0:
            raise ValueError(f"Invalid cooldown: {cooldown}. Must be non-negative.")

        self.num_runs = num_runs
        self.cooldown = cooldown
        self.auto_set_seed = auto_set_seed

    @classmethod
    def from_config(cls, config: PerformanceTestConfig) -> "FixedRunsStrategy":
        return cls(
            num_runs=config.runs,
            cooldown=config.run_cooldown,
            auto_set_seed=config.auto_set_seed,
        )

    def validate_config(self, config: PerformanceTestConfig) -> None:
        """Warn when runs may see different workloads."""
        if self.num_runs > 1 and config.random_seed is None and not self.auto_set_seed:
            logger.warning(
                "No random seed specified and auto_set_seed is disabled. "
                "Runs will issue different command sequences, "
                "making the cross-run average less meaningful."
            )

    def should_continue(self, results: list[BenchmarkResult]) -> bool:
        """Continue until num_runs runs have completed."""
        return len(results) < self.num_runs

    def get_next_config(
        self, base_config: PerformanceTestConfig, results: list[BenchmarkResult]
    ) -> BenchmarkConfig:
        if self.auto_set_seed and base_config.random_seed is None:
            if not results:
                logger.info(
                    f"No random seed specified. Using default seed {self.DEFAULT_SEED} "
                    "so all runs issue identical workloads."
                )
            return base_config.benchmark_config(random_seed=self.DEFAULT_SEED)
        return base_config.benchmark_config()

    def get_run_label(self, run_index: int) -> str:
        """Generate zero-padded label: run_0001, run_0002, etc."""
        return self._sanitize_label(f"run_{run_index + 1:04d}")

    def _sanitize_label(self, label: str) -> str:
        """Strip path separators, parent references and reserved characters."""
        sanitized = re.sub(r"[/\\]|\.\.", "", label)
        sanitized = re.sub(r'[<>:"|?*]', "", sanitized)
        return sanitized

    def get_cooldown(self) -> float:
        return self.cooldown

    def get_report_path(self, base_dir: Path, name: str) -> Path:
        """Reports for a test named "Nightly Smoke" go to base_dir/nightly_smoke_performance."""
        slug = re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_") or "performance_test"
        return Path(base_dir) / self._sanitize_label(f"{slug}_performance")
