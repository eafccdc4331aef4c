# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from termbench.common.config.base_config import BaseConfig
from termbench.common.config.benchmark_config import (
    DEFAULT_COMMANDS,
    BenchmarkConfig,
    PerformanceTestConfig,
)
from termbench.common.config.loader import (
    load_performance_test_config,
    parse_config,
)

__all__ = [
    "DEFAULT_COMMANDS",
    "BaseConfig",
    "BenchmarkConfig",
    "PerformanceTestConfig",
    "load_performance_test_config",
    "parse_config",
]
