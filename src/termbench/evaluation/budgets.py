# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Performance budget evaluation.

Each budget key names the aggregate metric it bounds and the direction of the
bound. ``max*`` budgets are violated when the metric is strictly above the
budget, ``min*`` budgets when it is strictly below. A budget whose metric was
never produced is skipped.
"""

import logging
import math
from collections.abc import Mapping
from typing import NamedTuple

from termbench.common.enums import BudgetKey, Polarity
from termbench.common.exceptions import ConfigurationError
from termbench.common.models.result_models import BudgetViolation

logger = logging.getLogger(__name__)

__all__ = [
    "BUDGET_TABLE",
    "BudgetRule",
    "evaluate_budgets",
]


class BudgetRule(NamedTuple):
    """Aggregate metric a budget bounds and the direction of the bound."""

    metric: str
    polarity: Polarity


BUDGET_TABLE: dict[BudgetKey, BudgetRule] = {
    BudgetKey.MAX_AVG_COMMAND_EXECUTION_TIME: BudgetRule("avgCommandExecutionTime", Polarity.MAX),
    BudgetKey.MAX_P95_COMMAND_EXECUTION_TIME: BudgetRule("p95CommandExecutionTime", Polarity.MAX),
    BudgetKey.MAX_MAX_COMMAND_EXECUTION_TIME: BudgetRule("maxCommandExecutionTime", Polarity.MAX),
    BudgetKey.MAX_AVG_RENDER_TIME: BudgetRule("avgRenderTime", Polarity.MAX),
    BudgetKey.MAX_AVG_TOTAL_RESPONSE_TIME: BudgetRule("avgTotalResponseTime", Polarity.MAX),
    BudgetKey.MAX_TOTAL_RESPONSE_TIME: BudgetRule("totalResponseTime", Polarity.MAX),
    BudgetKey.MAX_AVG_MEMORY_USAGE: BudgetRule("avgMemoryUsage", Polarity.MAX),
    BudgetKey.MAX_PEAK_MEMORY_USAGE: BudgetRule("peakMemoryUsage", Polarity.MAX),
    BudgetKey.MAX_MEMORY_USAGE: BudgetRule("memoryUsage", Polarity.MAX),
    BudgetKey.MIN_AVG_FPS: BudgetRule("avgFps", Polarity.MIN),
    BudgetKey.MIN_MIN_FPS: BudgetRule("minFps", Polarity.MIN),
    BudgetKey.MAX_AVG_INPUT_LATENCY: BudgetRule("avgInputLatency", Polarity.MAX),
    BudgetKey.MAX_INPUT_LATENCY: BudgetRule("inputLatency", Polarity.MAX),
    BudgetKey.MAX_DOM_NODE_COUNT: BudgetRule("domNodeCount", Polarity.MAX),
}


def _violates(rule: BudgetRule, actual: float, budget: float) -> bool:
    if rule.polarity is Polarity.MAX:
        return actual > budget
    return actual < budget


def evaluate_budgets(
    metrics: Mapping[str, float], budgets: Mapping[BudgetKey | str, float]
) -> list[BudgetViolation]:
    """Compare aggregated metrics against budgets.

    Args:
        metrics: Aggregated metrics keyed by metric name
        budgets: Budget values keyed by budget name

    Returns:
        One BudgetViolation per breached budget, in budget order

    Raises:
        ConfigurationError: If a budget name is not a known BudgetKey
    """
    violations: list[BudgetViolation] = []
    for key, budget in budgets.items():
        try:
            rule = BUDGET_TABLE[BudgetKey(key)]
        except ValueError as e:
            raise ConfigurationError(f"Unknown budget '{key}'") from e

        actual = metrics.get(rule.metric)
        if actual is None:
            logger.debug(f"Skipping budget {key}: metric {rule.metric} was not produced")
            continue
        if not _violates(rule, actual, budget):
            continue

        overage = abs(actual - budget)
        violations.append(
            BudgetViolation(
                metric=rule.metric,
                budget=budget,
                actual=actual,
                overage=overage,
                overage_percentage=overage / budget * 100 if budget else math.inf,
            )
        )
    return violations
