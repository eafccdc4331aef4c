# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Budget, baseline and CI evaluation of aggregated metrics."""

from termbench.evaluation.baseline import (
    compare_with_baseline,
    higher_is_better,
    improved_over_baseline,
)
from termbench.evaluation.budgets import (
    BUDGET_TABLE,
    BudgetRule,
    evaluate_budgets,
)
from termbench.evaluation.ci import (
    CIContext,
    emit_annotations,
    format_annotation,
)

__all__ = [
    "BUDGET_TABLE",
    "BudgetRule",
    "CIContext",
    "compare_with_baseline",
    "emit_annotations",
    "evaluate_budgets",
    "format_annotation",
    "higher_is_better",
    "improved_over_baseline",
]
