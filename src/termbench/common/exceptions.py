# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exceptions and warnings raised by termbench."""

__all__ = [
    "AggregationWarning",
    "AlreadyRunningError",
    "BudgetViolationError",
    "ConfigurationError",
    "MountInUseError",
    "TermBenchError",
]


class TermBenchError(Exception):
    """Base class for all termbench errors."""


class ConfigurationError(TermBenchError, ValueError):
    """Invalid or missing configuration, raised before any scheduling begins."""


class MountInUseError(ConfigurationError):
    """A mount point is already owned by another running benchmark."""


class AlreadyRunningError(TermBenchError, RuntimeError):
    """start() was called on an orchestrator that is already running."""


class BudgetViolationError(TermBenchError):
    """Performance budgets were violated while running in CI gate mode.

    Attributes:
        violations: The budget violations that tripped the gate
    """

    def __init__(self, message: str, violations: list | None = None) -> None:
        super().__init__(message)
        self.violations = violations or []


class AggregationWarning(UserWarning):
    """Non-fatal: a metric series was empty and its statistics were recorded as 0."""
