# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from termbench.metrics.aggregator import (
    aggregate_session_metrics,
    maximum,
    mean,
    minimum,
    percentile_nearest_rank,
)

__all__ = [
    "aggregate_session_metrics",
    "maximum",
    "mean",
    "minimum",
    "percentile_nearest_rank",
]
