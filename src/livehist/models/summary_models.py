# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Point-in-time summaries of a histogram's live window."""

from pydantic import Field

from livehist.models.base_models import LiveHistBaseModel


class PercentileSummary(LiveHistBaseModel):
    """Statistics for one configured percentile threshold."""

    percentile: int = Field(description="Configured percentile threshold (0-100)")
    sample_count: int = Field(
        description="Number of samples in the lower percentile slice of the window, floor(p * count / 100)"
    )
    average: int | None = Field(
        default=None,
        description="Mean of the lower percentile slice, rounded half up. None when the slice is empty",
    )


class HistogramSummary(LiveHistBaseModel):
    """All statistics of the live window, computed from a single snapshot."""

    count: int = Field(description="Number of samples in the live window")
    median: int | None = Field(
        default=None, description="Median value, None when the window is empty"
    )
    average: int | None = Field(
        default=None, description="Truncated mean value, None when the window is empty"
    )
    minimum: int | None = Field(
        default=None, description="Smallest live value, None when the window is empty"
    )
    maximum: int | None = Field(
        default=None, description="Largest live value, None when the window is empty"
    )
    percentiles: list[PercentileSummary] = Field(
        default_factory=list,
        description="One entry per configured percentile threshold, in configuration order",
    )
