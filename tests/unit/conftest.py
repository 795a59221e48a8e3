# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for testing livehist histograms.

This file contains fixtures that are automatically discovered by pytest
and made available to test functions in the same directory and subdirectories.
"""

import pytest

from livehist.config import HistogramConfig
from livehist.histogram import Histogram
from tests.harness import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def default_config() -> HistogramConfig:
    """Config with no percentiles, one second buckets and a two minute horizon."""
    return HistogramConfig(percentiles=[], span_sec=1, live_time_sec=120)


@pytest.fixture
def p95_config() -> HistogramConfig:
    return HistogramConfig(percentiles=[95], span_sec=1, live_time_sec=100)


@pytest.fixture
def histogram(default_config: HistogramConfig, clock: FakeClock) -> Histogram:
    return Histogram(default_config, time_source=clock)


@pytest.fixture
def p95_histogram(p95_config: HistogramConfig, clock: FakeClock) -> Histogram:
    return Histogram(p95_config, time_source=clock)
