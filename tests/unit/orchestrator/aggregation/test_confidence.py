# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for confidence aggregation strategy."""

import math

import numpy as np
import pytest
from scipy import stats

from termbench.common.models import ConfidenceMetric
from termbench.orchestrator.aggregation import ConfidenceAggregation


class TestConfidenceAggregation:
    """Tests for ConfidenceAggregation strategy."""

    def test_get_aggregation_type(self):
        """Test get_aggregation_type returns 'confidence'."""
        assert ConfidenceAggregation().get_aggregation_type() == "confidence"

    def test_aggregate_with_known_values(self, result_factory):
        """Test aggregation with known values."""
        strategy = ConfidenceAggregation(confidence_level=0.95)
        results = [
            result_factory("run_0001", {"avgCommandExecutionTime": 100.0, "avgRenderTime": 10.0}),
            result_factory("run_0002", {"avgCommandExecutionTime": 110.0, "avgRenderTime": 12.0}),
            result_factory("run_0003", {"avgCommandExecutionTime": 105.0, "avgRenderTime": 11.0}),
        ]

        aggregate = strategy.aggregate(results)

        assert aggregate.aggregation_type == "confidence"
        assert aggregate.num_runs == 3
        assert aggregate.metadata["confidence_level"] == 0.95
        assert aggregate.metadata["run_labels"] == ["run_0001", "run_0002", "run_0003"]

        execution = aggregate.metrics["avgCommandExecutionTime"]
        assert isinstance(execution, ConfidenceMetric)
        assert execution.mean == pytest.approx(105.0)
        assert execution.std == pytest.approx(5.0)
        assert execution.min == 100.0
        assert execution.max == 110.0

        render = aggregate.metrics["avgRenderTime"]
        assert render.mean == pytest.approx(11.0)
        assert render.std == pytest.approx(1.0)

    def test_aggregate_error_with_insufficient_runs(self, result_factory):
        """Test aggregation raises error with fewer than 2 runs."""
        with pytest.raises(ValueError, match="Insufficient runs"):
            ConfidenceAggregation().aggregate([result_factory("run_0001", {"avgFps": 60.0})])

    @pytest.mark.parametrize(
        "n,confidence_level",
        [
            (3, 0.95),
            (10, 0.99),
            (5, 0.90),
        ],
    )
    def test_t_critical_value_computation(self, result_factory, n, confidence_level):
        """Test t-critical value matches scipy for various N and confidence levels."""
        strategy = ConfidenceAggregation(confidence_level=confidence_level)
        results = [
            result_factory(f"run_{i:04d}", {"avgRenderTime": float(i)})
            for i in range(1, n + 1)
        ]

        metric = strategy.aggregate(results).metrics["avgRenderTime"]

        alpha = 1 - confidence_level
        assert metric.t_critical == pytest.approx(stats.t.ppf(1 - alpha / 2, n - 1))

    def test_confidence_interval_bounds(self, result_factory):
        """Test CI bounds are mean -/+ t_critical * se."""
        values = [98.0, 102.0, 100.0, 104.0, 96.0]
        results = [
            result_factory(f"run_{i:04d}", {"avgTotalResponseTime": v})
            for i, v in enumerate(values, start=1)
        ]

        metric = ConfidenceAggregation().aggregate(results).metrics["avgTotalResponseTime"]

        mean = np.mean(values)
        se = np.std(values, ddof=1) / np.sqrt(len(values))
        margin = stats.t.ppf(0.975, len(values) - 1) * se
        assert metric.se == pytest.approx(se)
        assert metric.ci_low == pytest.approx(mean - margin)
        assert metric.ci_high == pytest.approx(mean + margin)
        assert metric.ci_low < metric.mean < metric.ci_high

    def test_cv_computation(self, result_factory):
        results = [
            result_factory("run_0001", {"avgFps": 50.0}),
            result_factory("run_0002", {"avgFps": 70.0}),
        ]

        metric = ConfidenceAggregation().aggregate(results).metrics["avgFps"]

        assert metric.cv == pytest.approx(metric.std / 60.0)

    def test_cv_with_zero_mean(self, result_factory):
        """Test CV is infinite when the mean is zero."""
        results = [
            result_factory("run_0001", {"avgInputLatency": 0.0}),
            result_factory("run_0002", {"avgInputLatency": 0.0}),
        ]

        metric = ConfidenceAggregation().aggregate(results).metrics["avgInputLatency"]

        assert metric.std == 0.0
        assert math.isinf(metric.cv)

    def test_metric_in_single_run_skipped(self, result_factory):
        """Test metrics reported by fewer than 2 runs get no interval."""
        results = [
            result_factory("run_0001", {"avgFps": 60.0, "avgInputLatency": 100.0}),
            result_factory("run_0002", {"avgFps": 62.0}),
        ]

        metrics = ConfidenceAggregation().aggregate(results).metrics

        assert set(metrics) == {"avgFps"}

    @pytest.mark.parametrize("level", [0.0, 1.0, -0.5, 1.5])
    def test_invalid_confidence_level(self, level):
        """Test confidence levels outside (0, 1) are rejected."""
        with pytest.raises(ValueError, match="Invalid confidence level"):
            ConfidenceAggregation(confidence_level=level)
