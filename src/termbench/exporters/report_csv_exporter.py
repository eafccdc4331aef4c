# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CSV exporter for performance test results."""

import csv
import io

from termbench.evaluation import BUDGET_TABLE
from termbench.exporters.report_base_exporter import ReportBaseExporter


class ReportCsvExporter(ReportBaseExporter):
    """Exports aggregated metrics with their baseline and budget status.

    Format:
    - Metrics table: ``Metric,Value,Baseline,Change,Change %,Budget,Status``
    - Blank line separator
    - Metadata section (key-value pairs)
    """

    HEADER = ["Metric", "Value", "Baseline", "Change", "Change %", "Budget", "Status"]

    def get_file_name(self) -> str:
        return f"{self._config.file_stem}.csv"

    def _generate_content(self) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf)

        self._write_metrics_section(writer)
        writer.writerow([])
        self._write_metadata_section(writer)

        return buf.getvalue()

    def _write_metrics_section(self, writer) -> None:
        comparisons = {c.metric: c for c in self._result.baseline_comparisons}
        violated = {v.metric for v in self._result.budget_violations}
        budgets = {
            BUDGET_TABLE[key].metric: budget
            for key, budget in self._result.config.budgets.items()
        }

        writer.writerow(self.HEADER)
        for metric, value in self._result.aggregated_metrics.items():
            comparison = comparisons.get(metric)
            writer.writerow(
                [
                    metric,
                    self._format_number(value),
                    self._format_number(comparison.baseline if comparison else None),
                    self._format_number(comparison.change if comparison else None),
                    self._format_number(
                        comparison.change_percentage if comparison else None
                    ),
                    self._format_number(budgets.get(metric)),
                    "FAIL" if metric in violated else "PASS",
                ]
            )

    def _write_metadata_section(self, writer) -> None:
        result = self._result
        writer.writerow(["Test Name", result.config.name])
        writer.writerow(["Runs", len(result.benchmark_results)])
        writer.writerow(["Passed Budgets", result.passed_budgets])
        writer.writerow(["Improved Over Baseline", result.improved_over_baseline])
        writer.writerow(["Total Duration (ms)", self._format_number(result.total_duration)])

    def _format_number(self, value, decimals: int = 2) -> str:
        """Format a number for CSV output; None becomes an empty cell."""
        if value is None:
            return ""
        if isinstance(value, float):
            if value == float("inf"):
                return "inf"
            if value == float("-inf"):
                return "-inf"
            return f"{value:.{decimals}f}"
        return str(value)
