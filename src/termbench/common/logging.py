# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logging setup for the termbench CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from termbench.common.environment import Environment

__all__ = ["setup_rich_logging"]

_LOG_FORMAT = "%(message)s"


def setup_rich_logging(level: str | int | None = None, console: Console | None = None) -> None:
    """Route the ``termbench`` logger hierarchy through a rich handler.

    Args:
        level: Log level name or number. Defaults to ``Environment.LOGGING.LEVEL``.
        console: Console to render to. Defaults to a stderr console.
    """
    if level is None:
        level = Environment.LOGGING.LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        log_time_format="%X",
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    root = logging.getLogger("termbench")
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
