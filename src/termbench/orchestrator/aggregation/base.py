# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base classes for cross-run aggregation strategies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from termbench.common.models import BenchmarkResult


@dataclass
class AggregateResult:
    """Results from aggregating multiple runs.

    Attributes:
        aggregation_type: Type of aggregation (e.g., "mean", "confidence")
        num_runs: Number of runs aggregated
        metrics: Strategy-specific aggregated metrics
        metadata: Strategy-specific metadata
    """

    aggregation_type: str
    num_runs: int
    metrics: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)


class AggregationStrategy(ABC):
    """Base class for multi-run aggregation strategies."""

    @abstractmethod
    def aggregate(self, results: list[BenchmarkResult]) -> AggregateResult:
        """Aggregate the aggregate metrics of several benchmark runs.

        Args:
            results: Completed benchmark runs, in run order

        Returns:
            AggregateResult with strategy-specific statistics
        """
        pass

    @abstractmethod
    def get_aggregation_type(self) -> str:
        """Return type identifier for this strategy."""
        pass

    @staticmethod
    def collect_values(results: list[BenchmarkResult]) -> dict[str, list[float]]:
        """Group each aggregate metric's per-run values, preserving first-seen key order."""
        values: dict[str, list[float]] = {}
        for result in results:
            for metric, value in result.aggregate_metrics.items():
                values.setdefault(metric, []).append(value)
        return values
