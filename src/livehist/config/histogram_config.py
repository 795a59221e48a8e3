# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import math
from typing import Annotated

from pydantic import ConfigDict, Field, StrictInt, model_validator
from typing_extensions import Self

from livehist.common.constants import MAX_PERCENTILE, MIN_PERCENTILE
from livehist.common.exceptions import InvalidConfigError
from livehist.models.base_models import LiveHistBaseModel


class HistogramConfig(LiveHistBaseModel):
    """Immutable parameters of a time-decaying histogram.

    All fields are required. Range violations raise InvalidConfigError directly
    from the validator; malformed input (wrong types, NaN) still raises
    pydantic's ValidationError.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def validate_ranges(self) -> Self:
        """Check percentile bounds and the span/retention relationship, reporting every violation."""
        errors: list[str] = []
        for percentile in self.percentiles:
            if not MIN_PERCENTILE <= percentile <= MAX_PERCENTILE:
                errors.append(
                    f"'percentiles' must be within [{MIN_PERCENTILE}, {MAX_PERCENTILE}], got {percentile}"
                )
        if self.span_sec <= 0:
            errors.append(f"'span_sec' must be greater than 0, got {self.span_sec}")
        elif self.live_time_sec < self.span_sec:
            errors.append(
                f"'live_time_sec' ({self.live_time_sec}) must be at least 'span_sec' ({self.span_sec})"
            )
        if errors:
            raise InvalidConfigError(", ".join(errors))
        return self

    percentiles: Annotated[
        tuple[StrictInt, ...],
        Field(
            description="Percentile thresholds later addressable by value or by position via "
            "average_p() and sample_count_p(). Each must be within [0, 100].",
        ),
    ]

    span_sec: Annotated[
        float,
        Field(
            description="Width of one time bucket in seconds. Expiry happens at this granularity.",
            allow_inf_nan=False,
        ),
    ]

    live_time_sec: Annotated[
        float,
        Field(
            description="Retention horizon in seconds. Samples older than this are no longer visible.",
            allow_inf_nan=False,
        ),
    ]

    @property
    def ring_length(self) -> int:
        """Number of buckets needed to cover the retention horizon."""
        return math.ceil(self.live_time_sec / self.span_sec)
