# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base pydantic model for termbench records."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

__all__ = ["TermBenchBaseModel"]


class TermBenchBaseModel(BaseModel):
    """Base model for termbench records (session metrics and results).

    Fields are snake_case in Python and camelCase on the wire, so config files
    and exported reports read ``sessionCount`` / ``aggregateMetrics``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )
