# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Report exporters for performance test results."""

from termbench.exporters.console_report_exporter import (
    ConsoleReportExporter,
)
from termbench.exporters.report_base_exporter import (
    ReportBaseExporter,
    ReportExporterConfig,
)
from termbench.exporters.report_csv_exporter import (
    ReportCsvExporter,
)
from termbench.exporters.report_json_exporter import (
    ReportJsonExporter,
)

__all__ = [
    "ConsoleReportExporter",
    "ReportBaseExporter",
    "ReportCsvExporter",
    "ReportExporterConfig",
    "ReportJsonExporter",
]
