# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Simulated terminal sessions and the hosts that render them."""

from termbench.session.command_surface import (
    simulated_execution_time,
    simulated_output,
)
from termbench.session.host import (
    CommandSurface,
    HeadlessSessionHost,
    Mount,
    RenderedOutput,
    SessionHost,
)
from termbench.session.simulator import (
    ErrorHandler,
    SessionSimulator,
)

__all__ = [
    "CommandSurface",
    "ErrorHandler",
    "HeadlessSessionHost",
    "Mount",
    "RenderedOutput",
    "SessionHost",
    "SessionSimulator",
    "simulated_execution_time",
    "simulated_output",
]
