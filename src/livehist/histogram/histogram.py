# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Mapping
from numbers import Integral
from typing import Any

from pydantic import ValidationError

from livehist.common.clock import MonotonicClock
from livehist.common.exceptions import (
    EmptyWindowError,
    InvalidConfigError,
    UnknownPercentileError,
)
from livehist.common.mixins import LiveHistLoggerMixin
from livehist.common.types import TimeSourceT
from livehist.config.histogram_config import HistogramConfig
from livehist.histogram import statistics
from livehist.histogram.bucket_ring import BucketRing
from livehist.histogram.statistics import Snapshot
from livehist.models.summary_models import HistogramSummary, PercentileSummary


class Histogram(LiveHistLoggerMixin):
    """Time-decaying histogram of non-negative integer samples.

    Samples are visible to every statistic for ``live_time_sec`` seconds after
    they are appended, with expiry happening at ``span_sec`` granularity. Every
    query takes a fresh snapshot of the live window.

    Not thread-safe: callers sharing an instance across threads must serialize
    ``append`` against every other call themselves.

    Example:
    ```python
        hist = Histogram(HistogramConfig(percentiles=[95], span_sec=1, live_time_sec=60))
        hist.append(12)
        hist.append(30)
        hist.median()  # 21
        hist.sample_count_p(95)  # 1
    ```

    Args:
        config: A HistogramConfig, or a mapping of its fields.
        time_source: Zero-argument callable returning monotonic seconds. Defaults to MonotonicClock.

    Raises:
        InvalidConfigError: If the config is malformed or violates its constraints.
    """

    def __init__(
        self,
        config: HistogramConfig | Mapping[str, Any],
        time_source: TimeSourceT | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.config = self._coerce_config(config)
        self._time_source = time_source if time_source is not None else MonotonicClock()
        self._ring = BucketRing(self.config)
        self.debug(
            lambda: f"Created histogram: percentiles={list(self.config.percentiles)}, "
            f"span_sec={self.config.span_sec}, live_time_sec={self.config.live_time_sec}, "
            f"buckets={self._ring.ring_length}"
        )

    @staticmethod
    def _coerce_config(config: HistogramConfig | Mapping[str, Any]) -> HistogramConfig:
        if isinstance(config, HistogramConfig):
            return config
        try:
            return HistogramConfig.model_validate(config)
        except ValidationError as e:
            raise InvalidConfigError(str(e)) from e

    def append(self, value: int) -> None:
        """Record one sample at the current time.

        Raises:
            InvalidSampleError: If ``value`` is negative or not an integer.
        """
        self._ring.append(value, self._time_source())

    def snapshot(self) -> Snapshot:
        """Merged value -> count table of the live window right now."""
        return self._ring.snapshot(self._time_source())

    def resolve_percentile(self, selector: int) -> int:
        """Resolve a percentile selector to a configured threshold.

        A selector equal to a configured threshold resolves to itself. Otherwise it
        is taken as a zero-based index into the configured list.

        Raises:
            UnknownPercentileError: If the selector is neither, or is not an integer.
        """
        percentiles = self.config.percentiles
        if isinstance(selector, bool) or not isinstance(selector, Integral):
            raise UnknownPercentileError(selector, percentiles)
        if selector in percentiles:
            return selector
        if 0 <= selector < len(percentiles):
            return percentiles[selector]
        raise UnknownPercentileError(selector, percentiles)

    def median(self) -> int:
        return statistics.median(self.snapshot())

    def average(self) -> int:
        return statistics.mean(self.snapshot())

    def minimum(self) -> int:
        return statistics.minimum(self.snapshot())

    def maximum(self) -> int:
        return statistics.maximum(self.snapshot())

    def sample_count(self) -> int:
        return statistics.total(self.snapshot())

    def average_p(self, selector: int) -> int:
        """Mean (rounded half up) of the samples in the lower slice of the selected percentile."""
        percentile = self.resolve_percentile(selector)
        return statistics.percentile_average(self.snapshot(), percentile)

    def sample_count_p(self, selector: int) -> int:
        """Number of samples in the lower slice of the selected percentile."""
        percentile = self.resolve_percentile(selector)
        return statistics.percentile_rank_count(self.snapshot(), percentile)

    def bucket_count(self) -> int:
        """Number of non-empty buckets currently inside the retention window."""
        return self._ring.live_bucket_count(self._time_source())

    def summary(self) -> HistogramSummary:
        """Compute every statistic from one snapshot. Empty statistics are None."""
        snapshot = self.snapshot()
        percentiles = []
        for percentile in self.config.percentiles:
            try:
                average = statistics.percentile_average(snapshot, percentile)
            except EmptyWindowError:
                average = None
            percentiles.append(
                PercentileSummary(
                    percentile=percentile,
                    sample_count=statistics.percentile_rank_count(snapshot, percentile),
                    average=average,
                )
            )

        if not snapshot:
            return HistogramSummary(count=0, percentiles=percentiles)

        return HistogramSummary(
            count=snapshot.total,
            median=statistics.median(snapshot),
            average=statistics.mean(snapshot),
            minimum=statistics.minimum(snapshot),
            maximum=statistics.maximum(snapshot),
            percentiles=percentiles,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(percentiles={list(self.config.percentiles)}, "
            f"span_sec={self.config.span_sec}, live_time_sec={self.config.live_time_sec})"
        )
