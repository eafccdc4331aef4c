# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for ReportCsvExporter."""

import csv

import pytest

from termbench.exporters import ReportCsvExporter, ReportExporterConfig


def _read_rows(path) -> list[list[str]]:
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


class TestReportCsvExporter:
    """Tests for the CSV report file."""

    @pytest.fixture
    def exporter(self, performance_result, tmp_path) -> ReportCsvExporter:
        return ReportCsvExporter(
            ReportExporterConfig(
                result=performance_result,
                output_dir=tmp_path,
                file_stem="nightly_smoke_performance",
            )
        )

    def test_get_file_name(self, exporter):
        assert exporter.get_file_name() == "nightly_smoke_performance.csv"

    async def test_metrics_section(self, exporter):
        rows = _read_rows(await exporter.export())

        assert rows[0] == ReportCsvExporter.HEADER
        assert rows[1] == ["avgRenderTime", "20.00", "", "", "", "16.00", "FAIL"]
        assert rows[2] == ["avgFps", "45.00", "30.00", "15.00", "50.00", "30.00", "PASS"]
        assert rows[3] == ["peakMemoryUsage", "3.00", "", "", "", "0.00", "FAIL"]

    async def test_metadata_section(self, exporter):
        rows = _read_rows(await exporter.export())

        blank = rows.index([])
        metadata = dict(rows[blank + 1 :])
        assert metadata == {
            "Test Name": "Nightly Smoke",
            "Runs": "2",
            "Passed Budgets": "False",
            "Improved Over Baseline": "True",
            "Total Duration (ms)": "2500.00",
        }

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, ""),
            (1.5, "1.50"),
            (float("inf"), "inf"),
            (float("-inf"), "-inf"),
            (3, "3"),
        ],
    )
    def test_format_number(self, exporter, value, expected):
        assert exporter._format_number(value) == expected
