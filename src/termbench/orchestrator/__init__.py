# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Benchmark orchestration.

A ``BenchmarkOrchestrator`` executes one run over several simulated sessions;
a ``PerformanceTestRunner`` repeats runs according to an execution strategy,
merges them and evaluates budgets and baselines.
"""

from termbench.orchestrator.aggregation import (
    AggregateResult,
    AggregationStrategy,
    ConfidenceAggregation,
    MeanAggregation,
)
from termbench.orchestrator.benchmark import (
    BenchmarkOrchestrator,
    HostFactory,
    commands_per_session,
)
from termbench.orchestrator.runner import (
    PerformanceTestRunner,
)
from termbench.orchestrator.strategies import (
    ExecutionStrategy,
    FixedRunsStrategy,
)

__all__ = [
    "AggregateResult",
    "AggregationStrategy",
    "BenchmarkOrchestrator",
    "ConfidenceAggregation",
    "ExecutionStrategy",
    "FixedRunsStrategy",
    "HostFactory",
    "MeanAggregation",
    "PerformanceTestRunner",
    "commands_per_session",
]
