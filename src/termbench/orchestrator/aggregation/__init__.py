# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Aggregation strategies for multi-run results."""

from termbench.orchestrator.aggregation.base import (
    AggregateResult,
    AggregationStrategy,
)
from termbench.orchestrator.aggregation.confidence import (
    ConfidenceAggregation,
)
from termbench.orchestrator.aggregation.mean import (
    MeanAggregation,
)

__all__ = [
    "AggregateResult",
    "AggregationStrategy",
    "ConfidenceAggregation",
    "MeanAggregation",
]
