# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for host environment capture."""

from importlib.metadata import PackageNotFoundError
from unittest.mock import MagicMock, patch

import psutil
import pytest

from termbench.common import host_info
from termbench.common.host_info import (
    capture_environment_info,
    process_heap_usage,
    termbench_version,
)


class TestProcessHeapUsage:
    def test_reports_resident_memory_in_mb(self):
        usage = process_heap_usage()

        assert usage is not None
        assert usage > 0

    def test_matches_psutil_rss(self):
        """Test the value is the process RSS converted to MB."""
        process = MagicMock()
        process.memory_info.return_value = MagicMock(rss=64 * 1024 * 1024)

        with patch.object(host_info, "_process", process):
            assert process_heap_usage() == pytest.approx(64.0)

    def test_unreadable_process_returns_none(self):
        process = MagicMock()
        process.memory_info.side_effect = psutil.AccessDenied()

        with patch.object(host_info, "_process", process):
            assert process_heap_usage() is None


class TestCaptureEnvironmentInfo:
    def test_heap_stats_from_current_process(self):
        info = capture_environment_info()

        assert info.heap_stats is not None
        assert info.heap_stats["usedHeapSize"] > 0
        assert info.heap_stats["totalHeapSize"] >= info.heap_stats["usedHeapSize"]
        assert info.heap_stats["heapSizeLimit"] > 0

    def test_machine_description(self):
        info = capture_environment_info()

        assert info.agent_string.startswith("termbench/")
        assert info.device_pixel_ratio == 1.0
        assert info.cpu_core_count >= 1
        assert info.viewport_dimensions.width > 0

    def test_heap_stats_none_when_process_unreadable(self):
        process = MagicMock()
        process.memory_info.side_effect = psutil.NoSuchProcess(pid=0)

        with patch.object(host_info, "_process", process):
            assert capture_environment_info().heap_stats is None


class TestTermbenchVersion:
    def test_unknown_when_not_installed(self):
        with patch.object(
            host_info, "get_version", side_effect=PackageNotFoundError("termbench")
        ):
            assert termbench_version() == "unknown"

    def test_other_errors_propagate(self):
        with (
            patch.object(host_info, "get_version", side_effect=RuntimeError("boom")),
            pytest.raises(RuntimeError, match="boom"),
        ):
            termbench_version()
