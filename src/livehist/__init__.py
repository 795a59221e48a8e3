# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Time-decaying histogram of non-negative integer samples with exact order statistics."""

from livehist.common.exceptions import (
    EmptyWindowError,
    InvalidConfigError,
    InvalidSampleError,
    LiveHistError,
    UnknownPercentileError,
)
from livehist.config import HistogramConfig
from livehist.histogram import Histogram, Snapshot
from livehist.models import HistogramSummary, PercentileSummary

__version__ = "0.1.0"

__all__ = [
    "EmptyWindowError",
    "Histogram",
    "HistogramConfig",
    "HistogramSummary",
    "InvalidConfigError",
    "InvalidSampleError",
    "LiveHistError",
    "PercentileSummary",
    "Snapshot",
    "UnknownPercentileError",
]
