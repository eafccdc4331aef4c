# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""termbench: synthetic multi-session terminal benchmarks with performance budgets."""

from termbench.common.clock import Clock, LoopClock, VirtualClock
from termbench.common.config import BenchmarkConfig, PerformanceTestConfig
from termbench.common.models import BenchmarkResult, PerformanceTestResult
from termbench.orchestrator import BenchmarkOrchestrator, PerformanceTestRunner
from termbench.session import HeadlessSessionHost, Mount, SessionSimulator

__all__ = [
    "BenchmarkConfig",
    "BenchmarkOrchestrator",
    "BenchmarkResult",
    "Clock",
    "HeadlessSessionHost",
    "LoopClock",
    "Mount",
    "PerformanceTestConfig",
    "PerformanceTestResult",
    "PerformanceTestRunner",
    "SessionSimulator",
    "VirtualClock",
]
