# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Enumerations shared across termbench."""

from enum import StrEnum

__all__ = [
    "BudgetKey",
    "MetricKey",
    "Polarity",
    "ReportFormat",
    "RunnerState",
    "SessionState",
]


class MetricKey(StrEnum):
    """Aggregate metrics produced for every benchmark run."""

    AVG_COMMAND_EXECUTION_TIME = "avgCommandExecutionTime"
    P95_COMMAND_EXECUTION_TIME = "p95CommandExecutionTime"
    MAX_COMMAND_EXECUTION_TIME = "maxCommandExecutionTime"
    AVG_RENDER_TIME = "avgRenderTime"
    AVG_TOTAL_RESPONSE_TIME = "avgTotalResponseTime"
    AVG_MEMORY_USAGE = "avgMemoryUsage"
    PEAK_MEMORY_USAGE = "peakMemoryUsage"
    AVG_FPS = "avgFps"
    MIN_FPS = "minFps"
    AVG_INPUT_LATENCY = "avgInputLatency"


class Polarity(StrEnum):
    """Direction a budget bounds its metric."""

    MAX = "max"
    MIN = "min"


class BudgetKey(StrEnum):
    """Every budget name accepted in a performance test config."""

    MAX_AVG_COMMAND_EXECUTION_TIME = "maxAvgCommandExecutionTime"
    MAX_P95_COMMAND_EXECUTION_TIME = "maxP95CommandExecutionTime"
    MAX_MAX_COMMAND_EXECUTION_TIME = "maxMaxCommandExecutionTime"
    MAX_AVG_RENDER_TIME = "maxAvgRenderTime"
    MAX_AVG_TOTAL_RESPONSE_TIME = "maxAvgTotalResponseTime"
    MAX_TOTAL_RESPONSE_TIME = "maxTotalResponseTime"
    MAX_AVG_MEMORY_USAGE = "maxAvgMemoryUsage"
    MAX_PEAK_MEMORY_USAGE = "maxPeakMemoryUsage"
    MAX_MEMORY_USAGE = "maxMemoryUsage"
    MIN_AVG_FPS = "minAvgFps"
    MIN_MIN_FPS = "minMinFps"
    MAX_AVG_INPUT_LATENCY = "maxAvgInputLatency"
    MAX_INPUT_LATENCY = "maxInputLatency"
    MAX_DOM_NODE_COUNT = "maxDomNodeCount"


class ReportFormat(StrEnum):
    JSON = "json"
    CSV = "csv"


class SessionState(StrEnum):
    """Lifecycle of a simulated session. TYPING is skipped when typing is off."""

    IDLE = "idle"
    TYPING = "typing"
    EXECUTING = "executing"
    DESTROYED = "destroyed"


class RunnerState(StrEnum):
    IDLE = "idle"
    RUNNING = "running"
    AGGREGATING = "aggregating"
    EVALUATED = "evaluated"
