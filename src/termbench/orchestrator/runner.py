# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Multi-run performance test runner."""

import random

from termbench.common.clock import Clock, LoopClock
from termbench.common.config import PerformanceTestConfig
from termbench.common.enums import RunnerState
from termbench.common.exceptions import AlreadyRunningError
from termbench.common.host_info import capture_environment_info
from termbench.common.mixins import TermBenchLoggerMixin
from termbench.common.models import (
    BenchmarkResult,
    BudgetViolation,
    PerformanceTestResult,
)
from termbench.evaluation import (
    CIContext,
    compare_with_baseline,
    emit_annotations,
    evaluate_budgets,
    improved_over_baseline,
)
from termbench.orchestrator.aggregation import ConfidenceAggregation, MeanAggregation
from termbench.orchestrator.benchmark import BenchmarkOrchestrator, HostFactory
from termbench.orchestrator.strategies import ExecutionStrategy, FixedRunsStrategy
from termbench.session import Mount

__all__ = ["PerformanceTestRunner"]


class PerformanceTestRunner(TermBenchLoggerMixin):
    """Runs a benchmark several times, merges the runs and evaluates the result.

    Runs execute one after another on the same mount with a cooldown between
    them. The first failing run aborts the whole test; nothing is retried.

    Args:
        config: Performance test configuration
        clock: Clock for every delay. Defaults to the running asyncio loop.
        mount: Mount the sessions attach to. A private one is created if omitted.
        host_factory: Builds the host for each session
        strategy: Run strategy. Defaults to ``FixedRunsStrategy.from_config(config)``.
        ci_context: CI environment. Detected from the process environment if omitted.
    """

    def __init__(
        self,
        config: PerformanceTestConfig,
        clock: Clock | None = None,
        mount: Mount | None = None,
        host_factory: HostFactory | None = None,
        strategy: ExecutionStrategy | None = None,
        ci_context: CIContext | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.config = config
        self.clock = clock or LoopClock()
        self.mount = mount or Mount()
        self.host_factory = host_factory
        self.strategy = strategy or FixedRunsStrategy.from_config(config)
        self.ci_context = ci_context
        self.current_run = 0
        self.results: list[BenchmarkResult] = []
        self._state = RunnerState.IDLE

    @property
    def state(self) -> RunnerState:
        return self._state

    async def run(self) -> PerformanceTestResult:
        """Execute every run, then aggregate and evaluate.

        Raises:
            AlreadyRunningError: If the runner is already executing
            Exception: Whatever a run raised; the test is aborted
        """
        if self._state in (RunnerState.RUNNING, RunnerState.AGGREGATING):
            raise AlreadyRunningError("Performance test is already running")

        self._state = RunnerState.RUNNING
        self.current_run = 0
        self.results = []
        start_time = self.clock.now()

        self.info(
            f"Starting performance test '{self.config.name}' "
            f"with strategy: {self.strategy.__class__.__name__}"
        )
        try:
            self.strategy.validate_config(self.config)
            await self._execute_runs()
        except Exception:
            self.exception(
                f"Performance test '{self.config.name}' failed during run {self.current_run}"
            )
            self._state = RunnerState.IDLE
            raise

        self._state = RunnerState.AGGREGATING
        result = self._evaluate(start_time)
        self._state = RunnerState.EVALUATED
        return result

    async def _execute_runs(self) -> None:
        run_index = 0
        while self.strategy.should_continue(self.results):
            run_config = self.strategy.get_next_config(self.config, self.results)
            label = self.strategy.get_run_label(run_index)
            self.current_run = run_index + 1
            self.info(f"[{self.current_run}/{self.config.runs}] Executing {label}...")

            orchestrator = BenchmarkOrchestrator(
                run_config,
                clock=self.clock,
                host_factory=self.host_factory,
                rng=random.Random(run_config.random_seed),
                label=label,
            )
            result = await orchestrator.run(self.mount)
            self.results.append(result)
            run_index += 1

            if self.strategy.should_continue(self.results):
                cooldown = self.strategy.get_cooldown()
                if cooldown > 0:
                    self.debug(lambda: f"Cooling down for {cooldown:.0f} ms")
                    await self.clock.sleep(cooldown)

        self.info(f"All {len(self.results)} runs complete")

    def _evaluate(self, start_time: float) -> PerformanceTestResult:
        aggregated = MeanAggregation().aggregate(self.results).metrics
        confidence = (
            ConfidenceAggregation().aggregate(self.results).metrics
            if len(self.results) >= 2
            else {}
        )

        violations = evaluate_budgets(aggregated, self.config.budgets)
        comparisons = compare_with_baseline(aggregated, self.config.baseline)
        exit_code = self._gate(violations)
        end_time = self.clock.now()

        return PerformanceTestResult(
            config=self.config,
            start_time=start_time,
            end_time=end_time,
            total_duration=end_time - start_time,
            benchmark_results=self.results,
            aggregated_metrics=aggregated,
            confidence=confidence,
            budget_violations=violations,
            baseline_comparisons=comparisons,
            passed_budgets=not violations,
            improved_over_baseline=improved_over_baseline(comparisons),
            environment=capture_environment_info(),
            exit_code=exit_code,
        )

    def _gate(self, violations: list[BudgetViolation]) -> int:
        """Annotate violations and return 1 when the CI budget gate trips, else 0."""
        if not violations:
            return 0

        ci = self.ci_context or CIContext.detect()
        if self.config.fail_on_budget_violation and ci.is_ci:
            emit_annotations(violations, context=ci)
            self.error(
                f"{len(violations)} performance budget violation(s) in "
                f"'{self.config.name}'"
            )
            return 1

        for v in violations:
            self.warning(
                f"Budget violation: {v.metric} = {v.actual:.2f} "
                f"(budget: {v.budget}, overage: {v.overage_percentage:.2f}%)"
            )
        return 0
