# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from termbench.common.mixins import TermBenchLoggerMixin
from termbench.common.models import PerformanceTestResult


class ConsoleReportExporter(TermBenchLoggerMixin):
    """Print a performance test summary to the console.

    Shows a table of the aggregated metrics with their baseline change, a
    warning panel listing budget violations (if any) and a one-line summary.
    """

    def __init__(self, result: PerformanceTestResult, **kwargs) -> None:
        super().__init__(**kwargs)
        self._result = result

    async def export(self, console: Console) -> None:
        console.print()
        console.print(self._metrics_table())

        if self._result.budget_violations:
            console.print()
            console.print(
                Panel(
                    self._violations_text(),
                    title="Performance Budget Violations",
                    border_style="bold yellow",
                    title_align="center",
                    padding=(0, 2),
                    expand=False,
                )
            )

        console.print()
        console.print(self._summary_text())
        console.file.flush()

    def _metrics_table(self) -> Table:
        comparisons = {c.metric: c for c in self._result.baseline_comparisons}
        violated = {v.metric for v in self._result.budget_violations}

        table = Table(title=f"{self._result.config.name} (aggregated over runs)")
        table.add_column("Metric", style="cyan", no_wrap=True)
        table.add_column("Value", justify="right")
        table.add_column("Baseline", justify="right")
        table.add_column("Change %", justify="right")
        table.add_column("Status", justify="center")

        for metric, value in self._result.aggregated_metrics.items():
            comparison = comparisons.get(metric)
            if comparison is None:
                baseline, change = "", ""
            else:
                color = "green" if comparison.is_improvement else "red"
                baseline = f"{comparison.baseline:,.2f}"
                change = f"[{color}]{comparison.change_percentage:+.2f}%[/{color}]"
            status = "[bold red]FAIL[/bold red]" if metric in violated else "[green]PASS[/green]"
            table.add_row(metric, f"{value:,.2f}", baseline, change, status)
        return table

    def _violations_text(self) -> Text:
        text = Text()
        for i, v in enumerate(self._result.budget_violations):
            if i:
                text.append("\n")
            text.append(f"{v.metric}", style="bold")
            text.append(
                f" = {v.actual:,.2f} (budget: {v.budget:,.2f}, "
                f"overage: {v.overage:,.2f}, {v.overage_percentage:.2f}%)"
            )
        return text

    def _summary_text(self) -> Text:
        result = self._result
        text = Text()
        text.append("Test: ", style="bold")
        text.append(f"{result.config.name}  ")
        text.append("Duration: ", style="bold")
        text.append(f"{result.total_duration / 1000:.2f}s  ")
        text.append("Runs: ", style="bold")
        text.append(f"{len(result.benchmark_results)}  ")
        text.append("Violations: ", style="bold")
        text.append(
            f"{len(result.budget_violations)}  ",
            style="red" if result.budget_violations else "green",
        )
        text.append("Improved over baseline: ", style="bold")
        text.append("yes" if result.improved_over_baseline else "no")
        return text
