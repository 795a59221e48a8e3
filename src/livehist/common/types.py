# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared type aliases."""

from collections.abc import Callable
from typing import TypeAlias

TimeSourceT: TypeAlias = Callable[[], float]
"""A zero-argument callable returning the current time in seconds. Must be monotonic non-decreasing."""
