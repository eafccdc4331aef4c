# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CI detection and budget violation annotations."""

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from termbench.common.environment import Environment
from termbench.common.models.result_models import BudgetViolation

logger = logging.getLogger(__name__)

__all__ = [
    "CIContext",
    "emit_annotations",
    "format_annotation",
]

ANNOTATION_TITLE = "Performance budget violation"


@dataclass(frozen=True, slots=True)
class CIContext:
    """Where the current process is running."""

    is_ci: bool = False
    is_github_actions: bool = False

    @classmethod
    def detect(cls) -> "CIContext":
        settings = Environment.CI
        return cls(is_ci=settings.is_ci, is_github_actions=settings.is_github_actions)


def format_annotation(violation: BudgetViolation) -> str:
    """Render a violation as a GitHub Actions ``::error`` workflow command."""
    return (
        f"::error title={ANNOTATION_TITLE}::{violation.metric} = {violation.actual} "
        f"(budget: {violation.budget}, overage: {violation.overage}, "
        f"{violation.overage_percentage:.2f}%)"
    )


def emit_annotations(
    violations: Sequence[BudgetViolation],
    stream: TextIO | None = None,
    context: CIContext | None = None,
) -> int:
    """Report violations in the form the CI provider understands.

    On GitHub Actions one workflow command per violation is written to
    ``stream`` (stdout by default). On other CI systems each violation is
    logged as an error.

    Returns:
        Number of violations reported
    """
    context = context or CIContext.detect()
    if not context.is_ci:
        return 0

    if context.is_github_actions:
        stream = stream or sys.stdout
        for violation in violations:
            stream.write(format_annotation(violation) + "\n")
        stream.flush()
    else:
        for violation in violations:
            logger.error(
                f"{ANNOTATION_TITLE}: {violation.metric} = {violation.actual} "
                f"(budget: {violation.budget})"
            )
    return len(violations)
