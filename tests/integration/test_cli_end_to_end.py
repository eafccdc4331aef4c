# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""End-to-end tests driving the CLI commands on the real event loop."""

import csv
import logging
from pathlib import Path

import orjson
import pytest

from termbench.cli import ci, run

_CONFIG = """\
name: Integration Smoke
runs: 2
sessionCount: 2
commands:
  - date
  - echo hi
commandDelay: 10
duration: 200
simulateTyping: false
jitter: false
collectMemoryProfiles: false
runCooldown: 20
reportFormat:
  - json
  - csv
"""


@pytest.fixture(autouse=True)
def _restore_logging():
    logger = logging.getLogger("termbench")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "perf.yaml"
    path.write_text(_CONFIG)
    return path


@pytest.mark.integration
class TestCliEndToEnd:
    """Run real performance tests through the CLI entry points."""

    def test_run_writes_reports(self, config_file, tmp_path):
        report_dir = tmp_path / "reports"

        run(config_file=config_file, report_dir=report_dir)

        report = orjson.loads((report_dir / "integration_smoke_performance.json").read_bytes())
        result = report["result"]
        assert len(result["benchmarkResults"]) == 2
        assert result["aggregatedMetrics"]["avgCommandExecutionTime"] > 0
        assert set(result["confidence"]) >= {"avgCommandExecutionTime"}

        with open(report_dir / "integration_smoke_performance.csv", newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0][0] == "Metric"

    def test_ci_exits_on_violation(self, config_file, tmp_path, monkeypatch):
        monkeypatch.setenv("CI", "true")
        monkeypatch.setenv("GITHUB_ACTIONS", "true")
        config_file.write_text(_CONFIG + "budgets:\n  maxAvgCommandExecutionTime: 1\n")

        from termbench.common.environment import Environment

        Environment.reload()
        try:
            with pytest.raises(SystemExit) as exc_info:
                ci(config_file=config_file, report_dir=tmp_path)
        finally:
            monkeypatch.undo()
            Environment.reload()

        assert exc_info.value.code == 1
