# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio
import logging
from pathlib import Path

from rich.console import Console

from termbench.common.config import PerformanceTestConfig
from termbench.common.enums import ReportFormat
from termbench.common.exceptions import BudgetViolationError
from termbench.common.logging import setup_rich_logging
from termbench.common.models import PerformanceTestResult
from termbench.exporters import (
    ConsoleReportExporter,
    ReportCsvExporter,
    ReportExporterConfig,
    ReportJsonExporter,
)
from termbench.orchestrator import FixedRunsStrategy, PerformanceTestRunner

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_REPORT_DIR",
    "export_reports",
    "run_ci_performance_test",
    "run_performance_test",
]

DEFAULT_REPORT_DIR = Path("performance_reports")

_FILE_EXPORTERS = {
    ReportFormat.JSON: ReportJsonExporter,
    ReportFormat.CSV: ReportCsvExporter,
}


def run_performance_test(
    config: PerformanceTestConfig, console: Console | None = None
) -> PerformanceTestResult:
    """Run a performance test, write its reports and print the summary."""
    setup_rich_logging()

    logger.info("=" * 80)
    logger.info(f"Starting Performance Test: {config.name}")
    if config.description:
        logger.info(f"  {config.description}")
    logger.info(f"  Number of runs: {config.runs}")
    logger.info(f"  Sessions per run: {config.session_count}")
    logger.info(f"  Run duration: {config.duration:.0f} ms")
    logger.info(f"  Cooldown between runs: {config.run_cooldown:.0f} ms")
    logger.info("=" * 80)

    return asyncio.run(_run_and_report(config, console or Console()))


def run_ci_performance_test(
    config: PerformanceTestConfig, console: Console | None = None
) -> PerformanceTestResult:
    """Run a performance test with the budget gate enabled.

    Raises:
        BudgetViolationError: If the gate tripped
    """
    config = config.model_copy(update={"fail_on_budget_violation": True})
    result = run_performance_test(config, console)
    if result.exit_code != 0:
        raise BudgetViolationError(
            f"{len(result.budget_violations)} performance budget violation(s) detected",
            violations=result.budget_violations,
        )
    return result


async def _run_and_report(
    config: PerformanceTestConfig, console: Console
) -> PerformanceTestResult:
    strategy = FixedRunsStrategy.from_config(config)
    runner = PerformanceTestRunner(config, strategy=strategy)
    try:
        result = await runner.run()
    except Exception:
        logger.exception("Error executing performance test")
        raise

    for path in await export_reports(result, strategy):
        logger.info(f"Report written to: {path}")
    await ConsoleReportExporter(result).export(console)
    return result


async def export_reports(
    result: PerformanceTestResult, strategy: FixedRunsStrategy | None = None
) -> list[Path]:
    """Write one report file per configured report format.

    Returns:
        Paths of the written files, in ``report_format`` order
    """
    config = result.config
    strategy = strategy or FixedRunsStrategy.from_config(config)
    stem = strategy.get_report_path(config.report_dir or DEFAULT_REPORT_DIR, config.name)
    exporter_config = ReportExporterConfig(
        result=result, output_dir=stem.parent, file_stem=stem.name
    )

    formats = list(dict.fromkeys(config.report_format))
    paths = await asyncio.gather(
        *(_FILE_EXPORTERS[fmt](exporter_config).export() for fmt in formats)
    )
    return list(paths)
