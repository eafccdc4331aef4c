# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration loader for termbench."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import orjson
from pydantic import BaseModel, ValidationError
from ruamel.yaml import YAML

from termbench.common.config.base_config import describe_validation_error
from termbench.common.exceptions import ConfigurationError

if TYPE_CHECKING:
    from termbench.common.config.benchmark_config import PerformanceTestConfig

ModelT = TypeVar("ModelT", bound=BaseModel)


def _load_config_file(path: Path) -> dict[str, Any]:
    """Load a configuration file (JSON or YAML) and return its contents as a dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path, "rb") as f:
            data = orjson.loads(f.read())
    elif suffix in (".yaml", ".yml"):
        yaml = YAML(pure=True)
        with open(path) as f:
            data = yaml.load(f)
    else:
        raise ConfigurationError(
            f"Unsupported config file format: {suffix}. Use .json, .yaml, or .yml"
        )

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a mapping/object: {path}")

    return data


def parse_config(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate ``data`` into ``model``, reporting problems as ConfigurationError.

    Raises:
        ConfigurationError: If validation fails. The pydantic error is chained.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(describe_validation_error(model, e)) from e


def load_performance_test_config(path: Path | None = None) -> PerformanceTestConfig:
    """Load a performance test configuration from a file or environment variable.

    The configuration file path is resolved in this order:
    1. Explicit path argument (if provided)
    2. TERMBENCH_CONFIG_FILE environment variable
    3. Raises error if neither is set

    Args:
        path: Optional explicit path to the config file.

    Returns:
        PerformanceTestConfig instance.

    Raises:
        ConfigurationError: If the configuration is invalid or no path is available.
        FileNotFoundError: If the file does not exist.
    """
    from termbench.common.config.benchmark_config import PerformanceTestConfig
    from termbench.common.environment import Environment

    config_path = path or Environment.CONFIG.FILE

    if config_path is not None:
        data = _load_config_file(Path(config_path))
        return parse_config(PerformanceTestConfig, data)

    raise ConfigurationError(
        "Performance test configuration file is required. Provide a config path or set "
        "TERMBENCH_CONFIG_FILE=<path> environment variable."
    )
