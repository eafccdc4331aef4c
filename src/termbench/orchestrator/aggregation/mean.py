# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Mean aggregation: the cross-run merge used for budget and baseline evaluation."""

import numpy as np

from termbench.common.models import BenchmarkResult
from termbench.orchestrator.aggregation.base import AggregateResult, AggregationStrategy


class MeanAggregation(AggregationStrategy):
    """Average every aggregate metric across runs.

    Extremum metrics (``maxCommandExecutionTime``, ``minFps``, ``peakMemoryUsage``)
    are averaged like the others, not re-reduced. A metric missing from some runs
    is averaged over the runs that report it.
    """

    def get_aggregation_type(self) -> str:
        return "mean"

    def aggregate(self, results: list[BenchmarkResult]) -> AggregateResult:
        """Average each metric across runs.

        Raises:
            ValueError: If no results are given
        """
        if not results:
            raise ValueError("Cannot aggregate zero benchmark runs")

        metrics = {
            metric: float(np.mean(values))
            for metric, values in self.collect_values(results).items()
        }
        return AggregateResult(
            aggregation_type=self.get_aggregation_type(),
            num_runs=len(results),
            metrics=metrics,
            metadata={"run_labels": [r.label for r in results]},
        )
