# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Comparison of aggregated metrics against a recorded baseline."""

import math
from collections.abc import Mapping, Sequence

from termbench.common.models.result_models import BaselineComparison

__all__ = [
    "compare_with_baseline",
    "higher_is_better",
    "improved_over_baseline",
]


def higher_is_better(metric: str) -> bool:
    """Frame-rate metrics improve upwards; every other metric improves downwards."""
    return "fps" in metric.lower()


def _change_percentage(change: float, baseline: float) -> float:
    if baseline == 0:
        return 0.0 if change == 0 else math.copysign(math.inf, change)
    return change / baseline * 100


def compare_with_baseline(
    metrics: Mapping[str, float], baseline: Mapping[str, float]
) -> list[BaselineComparison]:
    """Compare every baseline metric that has a current value.

    Baseline entries without a matching current metric are ignored.
    """
    comparisons: list[BaselineComparison] = []
    for metric, baseline_value in baseline.items():
        current = metrics.get(metric)
        if current is None:
            continue
        change = current - baseline_value
        comparisons.append(
            BaselineComparison(
                metric=metric,
                baseline=baseline_value,
                current=current,
                change=change,
                change_percentage=_change_percentage(change, baseline_value),
                is_improvement=change > 0 if higher_is_better(metric) else change < 0,
            )
        )
    return comparisons


def improved_over_baseline(comparisons: Sequence[BaselineComparison]) -> bool:
    """True only when a strict majority of comparisons improved."""
    improvements = sum(1 for c in comparisons if c.is_improvement)
    return improvements > len(comparisons) / 2
