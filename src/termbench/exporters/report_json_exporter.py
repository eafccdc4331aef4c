# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""JSON exporter for performance test results."""

import orjson

from termbench.common.host_info import termbench_version
from termbench.exporters.report_base_exporter import ReportBaseExporter


class ReportJsonExporter(ReportBaseExporter):
    """Exports the full PerformanceTestResult as camelCase JSON.

    The result is wrapped in an envelope carrying the schema and termbench
    versions. Non-finite floats (an infinite overage percentage, for example)
    are written as ``null``.
    """

    SCHEMA_VERSION = "1.0"

    def get_file_name(self) -> str:
        return f"{self._config.file_stem}.json"

    def _generate_content(self) -> str:
        payload = {
            "schemaVersion": self.SCHEMA_VERSION,
            "termbenchVersion": termbench_version(),
            "result": self._result.model_dump(mode="json", by_alias=True),
        }
        # orjson writes NaN and +/-inf as null
        return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")
