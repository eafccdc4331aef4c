# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Per-session metric time series."""

import logging
from enum import StrEnum

from pydantic import Field, PrivateAttr

from termbench.common.models.base_models import TermBenchBaseModel

logger = logging.getLogger(__name__)

__all__ = [
    "SessionMetrics",
    "SessionSeries",
]


class SessionSeries(StrEnum):
    """Names of the time series recorded for every session."""

    COMMAND_EXECUTION_TIME = "command_execution_time"
    TIME_TO_FIRST_OUTPUT = "time_to_first_output"
    RENDER_TIME = "render_time"
    TOTAL_RESPONSE_TIME = "total_response_time"
    MEMORY_USAGE = "memory_usage"
    FPS = "fps"
    INPUT_LATENCY = "input_latency"
    OUTPUT_UPDATE_DELAY = "output_update_delay"
    OUTPUT_DOM_NODE_COUNT = "output_dom_node_count"


class SessionMetrics(TermBenchBaseModel):
    """Append-only time series for one simulated session.

    Series only grow while the session is live. ``freeze()`` is called when the
    session is destroyed; every later ``record()`` is dropped.
    """

    session_id: str = Field(description="Session identifier, e.g. 'session-1'")
    command_execution_time: list[float] = Field(
        default_factory=list, description="Synthetic command execution time (ms)"
    )
    time_to_first_output: list[float] = Field(
        default_factory=list, description="Submit to first output (ms)"
    )
    render_time: list[float] = Field(
        default_factory=list, description="Output appended to next frame (ms)"
    )
    total_response_time: list[float] = Field(
        default_factory=list, description="Submit to render complete (ms)"
    )
    memory_usage: list[float] = Field(
        default_factory=list, description="Heap usage after each command (MB)"
    )
    fps: list[float] = Field(
        default_factory=list, description="Frames per second, sampled every ~1s"
    )
    input_latency: list[float] = Field(
        default_factory=list, description="Typing start to first character (ms)"
    )
    output_update_delay: list[float] = Field(
        default_factory=list, description="Gap between consecutive outputs (ms)"
    )
    output_dom_node_count: list[float] = Field(
        default_factory=list, description="Rendered output node count"
    )

    _frozen: bool = PrivateAttr(default=False)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def series(self, name: SessionSeries) -> list[float]:
        return getattr(self, SessionSeries(name).value)

    def record(self, name: SessionSeries, value: float) -> None:
        """Append a sample to a series unless the metrics are frozen."""
        if self._frozen:
            logger.debug(
                f"Dropping {SessionSeries(name).value} sample for frozen session {self.session_id}"
            )
            return
        self.series(name).append(float(value))
