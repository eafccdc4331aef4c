# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base class for performance report file exporters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import aiofiles

from termbench.common.mixins import TermBenchLoggerMixin
from termbench.common.models import PerformanceTestResult


@dataclass(slots=True)
class ReportExporterConfig:
    """Configuration for report exporters.

    Attributes:
        result: PerformanceTestResult to export
        output_dir: Directory where the report file will be written
        file_stem: Report file name without suffix, e.g. "nightly_performance"
    """

    result: PerformanceTestResult
    output_dir: Path
    file_stem: str


class ReportBaseExporter(TermBenchLoggerMixin, ABC):
    """Base class for all report file exporters.

    Subclasses implement:
    - _generate_content() - Format-specific content generation
    - get_file_name() - Output file name
    """

    def __init__(self, config: ReportExporterConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self._config = config
        self._result = config.result
        self._output_dir = Path(config.output_dir)

    @abstractmethod
    def get_file_name(self) -> str:
        """Return the output file name."""
        pass

    @abstractmethod
    def _generate_content(self) -> str:
        """Generate the complete file content."""
        pass

    async def export(self) -> Path:
        """Write the report, creating the output directory if needed.

        Returns:
            Path: Path to written file
        """
        self._output_dir.mkdir(parents=True, exist_ok=True)

        file_path = self._output_dir / self.get_file_name()

        self.debug(lambda: f"Exporting performance report to: {file_path}")

        try:
            content = self._generate_content()

            async with aiofiles.open(file_path, "w", newline="", encoding="utf-8") as f:
                await f.write(content)

            self.info(f"Exported performance report to: {file_path}")
            return file_path

        except Exception as e:
            self.error(f"Failed to export to {file_path}: {e}")
            raise
