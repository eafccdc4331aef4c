# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Result records produced by benchmark runs and performance tests."""

from typing import Any

from pydantic import Field

from termbench.common.config.benchmark_config import (
    BenchmarkConfig,
    PerformanceTestConfig,
)
from termbench.common.models.base_models import TermBenchBaseModel
from termbench.common.models.session_models import SessionMetrics

__all__ = [
    "BaselineComparison",
    "BenchmarkResult",
    "BudgetViolation",
    "ConfidenceMetric",
    "EnvironmentInfo",
    "PerformanceTestResult",
    "ViewportDimensions",
]


class BenchmarkResult(TermBenchBaseModel):
    """Outcome of one benchmark run. Created once per run."""

    config: BenchmarkConfig = Field(description="Configuration the run used")
    label: str | None = Field(default=None, description="Run label, e.g. 'run_0001'")
    session_metrics: list[SessionMetrics] = Field(default_factory=list)
    aggregate_metrics: dict[str, float] = Field(
        default_factory=dict,
        description="Reduced statistics over this run's session metrics",
    )
    start_time: float = Field(description="Clock time the run started (ms)")
    end_time: float = Field(description="Clock time the run stopped (ms)")
    total_duration: float = Field(description="end_time - start_time (ms)")
    errors: list[str] = Field(
        default_factory=list, description="Session-local faults caught during the run"
    )


class BudgetViolation(TermBenchBaseModel):
    """An aggregate metric that breached its configured budget."""

    metric: str
    budget: float
    actual: float
    overage: float = Field(description="|actual - budget|")
    overage_percentage: float = Field(description="overage / budget * 100")


class BaselineComparison(TermBenchBaseModel):
    """Current aggregate metric compared with a recorded baseline value."""

    metric: str
    baseline: float
    current: float
    change: float = Field(description="current - baseline")
    change_percentage: float = Field(description="change / baseline * 100")
    is_improvement: bool


class ConfidenceMetric(TermBenchBaseModel):
    """Spread of one aggregate metric across runs.

    Attributes:
        mean: Sample mean
        std: Sample standard deviation (ddof=1)
        min: Minimum value
        max: Maximum value
        cv: Coefficient of variation (std/mean)
        se: Standard error (std/sqrt(n))
        ci_low: Lower bound of confidence interval
        ci_high: Upper bound of confidence interval
        t_critical: t-distribution critical value used for CI
    """

    mean: float
    std: float
    min: float
    max: float
    cv: float
    se: float
    ci_low: float
    ci_high: float
    t_critical: float


class ViewportDimensions(TermBenchBaseModel):
    width: int
    height: int


class EnvironmentInfo(TermBenchBaseModel):
    """Snapshot of the machine a performance test ran on."""

    agent_string: str
    viewport_dimensions: ViewportDimensions
    device_pixel_ratio: float = 1.0
    cpu_core_count: int = 1
    heap_stats: dict[str, Any] | None = None


class PerformanceTestResult(TermBenchBaseModel):
    """Outcome of a multi-run performance test."""

    config: PerformanceTestConfig
    start_time: float
    end_time: float
    total_duration: float
    benchmark_results: list[BenchmarkResult] = Field(default_factory=list)
    aggregated_metrics: dict[str, float] = Field(
        default_factory=dict, description="Per-metric mean across runs"
    )
    confidence: dict[str, ConfidenceMetric] = Field(
        default_factory=dict,
        description="Per-metric spread across runs (two or more runs only)",
    )
    budget_violations: list[BudgetViolation] = Field(default_factory=list)
    baseline_comparisons: list[BaselineComparison] = Field(default_factory=list)
    passed_budgets: bool = True
    improved_over_baseline: bool = False
    environment: EnvironmentInfo
    exit_code: int = Field(
        default=0, description="Non-zero when the CI budget gate tripped"
    )
