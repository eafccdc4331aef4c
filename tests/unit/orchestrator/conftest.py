# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Fixtures for orchestrator tests."""

import pytest

from termbench.common.config import BenchmarkConfig
from termbench.common.models import BenchmarkResult


def make_result(label: str, metrics: dict[str, float]) -> BenchmarkResult:
    """Build a finished run carrying only aggregate metrics."""
    return BenchmarkResult(
        config=BenchmarkConfig(),
        label=label,
        aggregate_metrics=metrics,
        start_time=0.0,
        end_time=1000.0,
        total_duration=1000.0,
    )


@pytest.fixture
def result_factory():
    return make_result
