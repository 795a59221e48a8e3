# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from livehist.common.clock import MonotonicClock
from livehist.common.exceptions import (
    ConfigurationError,
    EmptyWindowError,
    InvalidConfigError,
    InvalidSampleError,
    LiveHistError,
    UnknownPercentileError,
)
from livehist.common.livehist_logger import LiveHistLogger
from livehist.common.types import TimeSourceT

__all__ = [
    "ConfigurationError",
    "EmptyWindowError",
    "InvalidConfigError",
    "InvalidSampleError",
    "LiveHistError",
    "LiveHistLogger",
    "MonotonicClock",
    "TimeSourceT",
    "UnknownPercentileError",
]
