# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line interface for termbench."""

from pathlib import Path
from typing import Annotated, Any

from cyclopts import App, Parameter

from termbench.cli_utils import exit_on_error
from termbench.common.config import (
    PerformanceTestConfig,
    load_performance_test_config,
    parse_config,
)
from termbench.common.environment import Environment

app = App(
    name="termbench",
    help="Synthetic multi-session terminal benchmarks with performance budgets.",
)


def _load_config(
    config_file: Path | None,
    runs: int | None,
    report_dir: Path | None,
) -> PerformanceTestConfig:
    if config_file is not None or Environment.CONFIG.FILE is not None:
        config = load_performance_test_config(config_file)
    else:
        config = PerformanceTestConfig()

    overrides: dict[str, Any] = {}
    if runs is not None:
        overrides["runs"] = runs
    if report_dir is not None:
        overrides["report_dir"] = report_dir
    if not overrides:
        return config
    return parse_config(PerformanceTestConfig, {**config.model_dump(), **overrides})


ConfigFileOption = Annotated[
    Path | None,
    Parameter(
        name="--config",
        help="Path to the performance test configuration file (JSON or YAML). "
        "Falls back to TERMBENCH_CONFIG_FILE, then to the built-in defaults.",
    ),
]
RunsOption = Annotated[
    int | None, Parameter(help="Override the number of benchmark runs.")
]
ReportDirOption = Annotated[
    Path | None, Parameter(help="Override the directory report files are written to.")
]


@app.command
def run(
    config_file: ConfigFileOption = None,
    runs: RunsOption = None,
    report_dir: ReportDirOption = None,
) -> None:
    """Run a performance test and report budget violations as warnings."""
    with exit_on_error(title="Error Running Performance Test"):
        from termbench.cli_runner import run_performance_test

        run_performance_test(_load_config(config_file, runs, report_dir))


@app.command
def ci(
    config_file: ConfigFileOption = None,
    runs: RunsOption = None,
    report_dir: ReportDirOption = None,
) -> None:
    """Run a performance test as a CI gate: exit non-zero on budget violations."""
    with exit_on_error(title="Performance Budget Check Failed"):
        from termbench.cli_runner import run_ci_performance_test

        run_ci_performance_test(_load_config(config_file, runs, report_dir))


if __name__ == "__main__":
    app()
