# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Reduction of per-session time series into a run's aggregate metrics.

Series are concatenated across sessions before reducing, so a session with more
samples weighs more. Every reduction of an empty series yields 0.0, never NaN
or an infinity; the empty series are reported once per call through an
``AggregationWarning``.
"""

import logging
import math
import warnings
from collections.abc import Iterable, Sequence

import numpy as np

from termbench.common.enums import MetricKey
from termbench.common.exceptions import AggregationWarning
from termbench.common.models.session_models import SessionMetrics, SessionSeries

logger = logging.getLogger(__name__)

__all__ = [
    "aggregate_session_metrics",
    "maximum",
    "mean",
    "minimum",
    "percentile_nearest_rank",
]


def mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def maximum(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.max(values))


def minimum(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.min(values))


def percentile_nearest_rank(values: Sequence[float], percentile: float) -> float:
    """Nearest-rank percentile: the sorted element at ``ceil(p/100 * n) - 1``.

    Examples:
        >>> percentile_nearest_rank([10, 20, 30, 40, 50], 95)
        50.0
        >>> percentile_nearest_rank([100], 95)
        100.0
    """
    if len(values) == 0:
        return 0.0
    ordered = np.sort(np.asarray(values, dtype=float))
    index = math.ceil(percentile * len(ordered) / 100.0) - 1
    index = min(max(index, 0), len(ordered) - 1)
    return float(ordered[index])


def _concat(sessions: Sequence[SessionMetrics], series: SessionSeries) -> list[float]:
    values: list[float] = []
    for session in sessions:
        values.extend(session.series(series))
    return values


def aggregate_session_metrics(sessions: Iterable[SessionMetrics]) -> dict[str, float]:
    """Reduce the sessions of one run into the ten aggregate metrics.

    Args:
        sessions: Metrics of every session in the run

    Returns:
        Dict keyed by the ``MetricKey`` values (camelCase strings)
    """
    sessions = list(sessions)
    execution = _concat(sessions, SessionSeries.COMMAND_EXECUTION_TIME)
    render = _concat(sessions, SessionSeries.RENDER_TIME)
    response = _concat(sessions, SessionSeries.TOTAL_RESPONSE_TIME)
    memory = _concat(sessions, SessionSeries.MEMORY_USAGE)
    fps = _concat(sessions, SessionSeries.FPS)
    latency = _concat(sessions, SessionSeries.INPUT_LATENCY)

    empty = [
        series.value
        for series, values in (
            (SessionSeries.COMMAND_EXECUTION_TIME, execution),
            (SessionSeries.RENDER_TIME, render),
            (SessionSeries.TOTAL_RESPONSE_TIME, response),
            (SessionSeries.MEMORY_USAGE, memory),
            (SessionSeries.FPS, fps),
            (SessionSeries.INPUT_LATENCY, latency),
        )
        if not values
    ]
    if empty:
        message = f"No samples recorded for {', '.join(empty)}; reporting 0"
        logger.debug(message)
        warnings.warn(message, AggregationWarning, stacklevel=2)

    return {
        MetricKey.AVG_COMMAND_EXECUTION_TIME.value: mean(execution),
        MetricKey.P95_COMMAND_EXECUTION_TIME.value: percentile_nearest_rank(execution, 95),
        MetricKey.MAX_COMMAND_EXECUTION_TIME.value: maximum(execution),
        MetricKey.AVG_RENDER_TIME.value: mean(render),
        MetricKey.AVG_TOTAL_RESPONSE_TIME.value: mean(response),
        MetricKey.AVG_MEMORY_USAGE.value: mean(memory),
        MetricKey.PEAK_MEMORY_USAGE.value: maximum(memory),
        MetricKey.AVG_FPS.value: mean(fps),
        MetricKey.MIN_FPS.value: minimum(fps),
        MetricKey.AVG_INPUT_LATENCY.value: mean(latency),
    }
