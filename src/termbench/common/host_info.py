# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Capture a description of the machine a performance test runs on."""

import os
import platform
import shutil
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

import psutil

from termbench.common.models.result_models import EnvironmentInfo, ViewportDimensions

__all__ = [
    "capture_environment_info",
    "process_heap_usage",
    "termbench_version",
]

_BYTES_PER_MB = 1024 * 1024

_process = psutil.Process(os.getpid())


def termbench_version() -> str:
    try:
        return get_version("termbench")
    except PackageNotFoundError:
        return "unknown"


def process_heap_usage() -> float | None:
    """Resident set size of this process in MB, or None if it cannot be read."""
    try:
        return _process.memory_info().rss / _BYTES_PER_MB
    except (psutil.Error, OSError):
        return None


def _heap_stats() -> dict[str, float] | None:
    try:
        memory = _process.memory_info()
        limit = psutil.virtual_memory().total
    except (psutil.Error, OSError):
        return None
    return {
        "usedHeapSize": memory.rss,
        "totalHeapSize": memory.vms,
        "heapSizeLimit": limit,
    }


def capture_environment_info() -> EnvironmentInfo:
    """Build an EnvironmentInfo for the current process.

    The viewport is the controlling terminal's size (80x24 when detached).
    Terminals have no pixel density, so the pixel ratio is always 1.
    """
    size = shutil.get_terminal_size()
    return EnvironmentInfo(
        agent_string=(
            f"termbench/{termbench_version()} "
            f"{platform.python_implementation()}/{platform.python_version()} "
            f"({platform.platform()})"
        ),
        viewport_dimensions=ViewportDimensions(width=size.columns, height=size.lines),
        device_pixel_ratio=1.0,
        cpu_core_count=psutil.cpu_count() or 1,
        heap_stats=_heap_stats(),
    )
