# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Helpers shared by CLI commands."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

logger = logging.getLogger(__name__)

__all__ = ["exit_on_error"]


@contextmanager
def exit_on_error(
    title: str = "Error",
    console: Console | None = None,
    exit_code: int = 1,
) -> Iterator[None]:
    """Print any exception raised in the block as a red panel and exit.

    KeyboardInterrupt and SystemExit pass through untouched.
    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except Exception as e:
        logger.debug(f"{title}: {e!r}", exc_info=True)
        console = console or Console(stderr=True)
        console.print(
            Panel(
                Text(f"{type(e).__name__}: {e}"),
                title=title,
                border_style="bold red",
                title_align="left",
                expand=False,
            )
        )
        console.file.flush()
        sys.exit(exit_code)
