# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the synthetic command surface."""

import random

import pytest

from termbench.session import simulated_execution_time, simulated_output


class TestSimulatedExecutionTime:
    """Tests for simulated_execution_time()."""

    @pytest.mark.parametrize(
        "command,expected",
        [
            ("date", 70.0),
            ("ls -la", 80.0),
            ("ps aux | sort", 50.0 + 5 * 13 + 200.0),
            ("grep foo", 50.0 + 5 * 8 + 500.0),
            ('find . -type f -name "*.ts" | wc -l', 50.0 + 5 * 35 + 200.0 + 500.0),
        ],
    )
    def test_without_jitter(self, command, expected):
        """Test the deterministic part of the execution time model."""
        assert simulated_execution_time(command, random.Random(0), jitter=False) == expected

    def test_jitter_bounded(self):
        """Test jitter adds between 0 and 100 ms."""
        rng = random.Random(1)
        for _ in range(200):
            duration = simulated_execution_time("date", rng)
            assert 70.0 <= duration < 170.0

    def test_jitter_reproducible_with_seed(self):
        """Test the same seed yields the same durations."""
        first = [simulated_execution_time("date", random.Random(5)) for _ in range(3)]
        second = [simulated_execution_time("date", random.Random(5)) for _ in range(3)]
        assert first == second


class TestSimulatedOutput:
    """Tests for simulated_output()."""

    def test_ls(self):
        assert "package.json" in simulated_output("ls -la")

    @pytest.mark.parametrize(
        "command,expected",
        [
            ('echo "Hello World"', "Hello World"),
            ("echo hi", "hi"),
        ],
    )
    def test_echo_returns_argument(self, command, expected):
        """Test echo prints its (optionally quoted) argument."""
        assert simulated_output(command) == expected

    def test_cat(self):
        assert '"name": "terminal-app"' in simulated_output("cat package.json")

    def test_find_with_count(self):
        assert simulated_output('find . -type f -name "*.ts" | wc -l') == "42"

    def test_ps(self):
        assert simulated_output("ps aux").startswith("USER")

    def test_uptime(self):
        assert "load averages" in simulated_output("uptime")

    def test_date_is_current_timestamp(self):
        """Test date output is a non-empty timestamp string."""
        assert simulated_output("date").strip()

    def test_unknown_command(self):
        assert simulated_output("make build") == "Command executed successfully."
