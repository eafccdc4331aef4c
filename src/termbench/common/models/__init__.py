# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from termbench.common.models.base_models import TermBenchBaseModel
from termbench.common.models.result_models import (
    BaselineComparison,
    BenchmarkResult,
    BudgetViolation,
    ConfidenceMetric,
    EnvironmentInfo,
    PerformanceTestResult,
    ViewportDimensions,
)
from termbench.common.models.session_models import SessionMetrics, SessionSeries

__all__ = [
    "BaselineComparison",
    "BenchmarkResult",
    "BudgetViolation",
    "ConfidenceMetric",
    "EnvironmentInfo",
    "PerformanceTestResult",
    "SessionMetrics",
    "SessionSeries",
    "TermBenchBaseModel",
    "ViewportDimensions",
]
