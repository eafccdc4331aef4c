# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logger mixin shared by termbench components."""

import logging
from collections.abc import Callable

__all__ = ["TermBenchLoggerMixin"]

Message = str | Callable[[], str]


class TermBenchLoggerMixin:
    """Adds level-named logging helpers bound to the subclass's module logger.

    Messages may be passed as a zero-argument callable so that expensive
    formatting only happens when the level is enabled::

        self.debug(lambda: f"Queue depth: {len(self._queue)}")
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.logger = logging.getLogger(logger_name or type(self).__module__)

    def _log(self, level: int, message: Message, exc_info: bool = False) -> None:
        if not self.logger.isEnabledFor(level):
            return
        if callable(message):
            message = message()
        self.logger.log(level, message, exc_info=exc_info, stacklevel=3)

    def debug(self, message: Message) -> None:
        self._log(logging.DEBUG, message)

    def info(self, message: Message) -> None:
        self._log(logging.INFO, message)

    def warning(self, message: Message) -> None:
        self._log(logging.WARNING, message)

    def error(self, message: Message) -> None:
        self._log(logging.ERROR, message)

    def exception(self, message: Message) -> None:
        self._log(logging.ERROR, message, exc_info=True)
