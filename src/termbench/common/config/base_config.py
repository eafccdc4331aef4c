# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

__all__ = ["BaseConfig", "describe_validation_error"]


def describe_validation_error(model: type[BaseModel], error: ValidationError) -> str:
    """One-line summary of a pydantic error, e.g. ``Invalid X: sessionCount: ...``."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in error.errors()
    )
    return f"Invalid {model.__name__}: {problems}"


class BaseConfig(BaseModel):
    """Base for configuration models.

    Fields are declared in snake_case and accepted from config files in
    camelCase (``sessionCount``) as well.

    Constructing a model directly raises pydantic's ``ValidationError``.
    ``parse_config`` and ``load_performance_test_config`` are the validated
    entry points and raise ``ConfigurationError`` instead.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )
