# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Process-level settings read from environment variables.

Settings are grouped by concern and exposed through the ``Environment``
singleton, e.g. ``Environment.CI.GITHUB_ACTIONS`` or ``Environment.CONFIG.FILE``.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Environment"]

_FALSY = {"", "0", "false", "no", "off"}


def _truthy(value: str) -> bool:
    return value.strip().lower() not in _FALSY


class _CISettings(BaseSettings):
    """CI provider detection (``CI`` and ``GITHUB_ACTIONS`` variables)."""

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    CI: str = ""
    GITHUB_ACTIONS: str = ""

    @property
    def is_ci(self) -> bool:
        return _truthy(self.CI) or self.is_github_actions

    @property
    def is_github_actions(self) -> bool:
        return _truthy(self.GITHUB_ACTIONS)


class _ConfigSettings(BaseSettings):
    """Config file discovery (``TERMBENCH_CONFIG_FILE``)."""

    model_config = SettingsConfigDict(env_prefix="TERMBENCH_CONFIG_", extra="ignore")

    FILE: Path | None = None


class _LoggingSettings(BaseSettings):
    """Logging defaults (``TERMBENCH_LOGGING_LEVEL``)."""

    model_config = SettingsConfigDict(env_prefix="TERMBENCH_LOGGING_", extra="ignore")

    LEVEL: str = "INFO"


class _Environment:
    """Namespace holding every settings group."""

    def __init__(self) -> None:
        self.CI = _CISettings()
        self.CONFIG = _ConfigSettings()
        self.LOGGING = _LoggingSettings()

    def reload(self) -> None:
        """Re-read every settings group from the current process environment."""
        self.__init__()


Environment = _Environment()
