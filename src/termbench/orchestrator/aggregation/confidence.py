# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Confidence aggregation strategy for multi-run results."""

import logging

import numpy as np
from scipy import stats

from termbench.common.models import BenchmarkResult, ConfidenceMetric
from termbench.orchestrator.aggregation.base import AggregateResult, AggregationStrategy

logger = logging.getLogger(__name__)


class ConfidenceAggregation(AggregationStrategy):
    """Aggregation strategy for confidence reporting.

    Computes mean, std, CV, and confidence intervals for each aggregate metric.

    Attributes:
        confidence_level: Confidence level for intervals (default: 0.95)
    """

    def __init__(self, confidence_level: float = 0.95) -> None:
        """Initialize ConfidenceAggregation.

        Args:
            confidence_level: Confidence level for intervals (0 < level < 1)

        Raises:
            ValueError: If confidence_level is not between 0 and 1
        """
        if not 0 < confidence_level < 1:
            raise ValueError(
                f"Invalid confidence level: {confidence_level}. "
                "Confidence level must be between 0 and 1 (exclusive). "
                "Common values: 0.90 (90%), 0.95 (95%), 0.99 (99%)."
            )
        self.confidence_level = confidence_level

    def get_aggregation_type(self) -> str:
        """Return aggregation type identifier."""
        return "confidence"

    def aggregate(self, results: list[BenchmarkResult]) -> AggregateResult:
        """Aggregate results for confidence reporting.

        Raises:
            ValueError: If fewer than 2 runs are given
        """
        if len(results) < 2:
            raise ValueError(
                f"Insufficient runs for confidence intervals. Got {len(results)} "
                "run(s), but need at least 2. Increase 'runs' in the test config."
            )

        metrics = {
            metric: self._compute_confidence_stats(values)
            for metric, values in self.collect_values(results).items()
            if len(values) >= 2
        }
        return AggregateResult(
            aggregation_type=self.get_aggregation_type(),
            num_runs=len(results),
            metrics=metrics,
            metadata={
                "confidence_level": self.confidence_level,
                "run_labels": [r.label for r in results],
            },
        )

    def _compute_confidence_stats(self, values: list[float]) -> ConfidenceMetric:
        """Compute confidence statistics for a single metric."""
        n = len(values)
        mean = float(np.mean(values))
        std = float(np.std(values, ddof=1))  # Sample std (N-1)

        # CV is a ratio, not a percentage
        cv = std / mean if mean != 0 else float("inf")

        se = float(std / np.sqrt(n))

        alpha = 1 - self.confidence_level
        df = n - 1
        t_critical = float(stats.t.ppf(1 - alpha / 2, df))

        margin = t_critical * se
        return ConfidenceMetric(
            mean=mean,
            std=std,
            min=float(min(values)),
            max=float(max(values)),
            cv=cv,
            se=se,
            ci_low=mean - margin,
            ci_high=mean + margin,
            t_critical=t_critical,
        )
