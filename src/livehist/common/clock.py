# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import time

from livehist.common.constants import NANOS_PER_SECOND


class MonotonicClock:
    """Default time source: seconds from `time.monotonic_ns()`, never goes backwards."""

    __slots__ = ()

    def __call__(self) -> float:
        return time.monotonic_ns() / NANOS_PER_SECOND

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
