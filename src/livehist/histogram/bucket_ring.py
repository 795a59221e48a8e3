# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Time-sliced frequency tables kept in a fixed-size ring.

Each slot of the ring holds the value counts of one epoch, the span-wide time
slot ``floor(now / span_sec)``. Expiry is lazy:

- Writes recycle a slot whose epoch no longer matches, clearing it first.
- Snapshots skip slots whose epoch has left the retention window, but never
  modify them.
"""

import math
from collections import defaultdict
from numbers import Integral

from livehist.common.exceptions import InvalidSampleError
from livehist.common.mixins import LiveHistLoggerMixin
from livehist.config.histogram_config import HistogramConfig
from livehist.histogram.statistics import Snapshot


class Bucket:
    """Value counts of a single epoch. ``epoch`` is None until the first write."""

    __slots__ = ("epoch", "counts")

    def __init__(self) -> None:
        self.epoch: int | None = None
        self.counts: defaultdict[int, int] = defaultdict(int)

    def reset(self, epoch: int) -> None:
        self.epoch = epoch
        self.counts.clear()

    def add(self, value: int) -> None:
        self.counts[value] += 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def is_live(self, oldest_epoch: int, current_epoch: int) -> bool:
        return self.epoch is not None and oldest_epoch <= self.epoch <= current_epoch

    def __repr__(self) -> str:
        return f"Bucket(epoch={self.epoch}, distinct={len(self.counts)}, total={self.total})"


class BucketRing(LiveHistLoggerMixin):
    """Fixed-length circular sequence of buckets covering the retention horizon.

    Not thread-safe. ``append`` mutates slots in place; ``snapshot`` only reads.
    """

    def __init__(self, config: HistogramConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self.span_sec = config.span_sec
        self.ring_length = config.ring_length
        self._buckets = [Bucket() for _ in range(self.ring_length)]
        # Newest epoch written so far; slot epochs never move backwards past it.
        self._latest_epoch: int | None = None

    def epoch_at(self, now: float) -> int:
        return math.floor(now / self.span_sec)

    def window_at(self, now: float) -> tuple[int, int]:
        """Return the inclusive ``(oldest, current)`` epoch range that is live at ``now``."""
        current_epoch = self.epoch_at(now)
        return current_epoch - self.ring_length + 1, current_epoch

    def append(self, value: int, now: float) -> None:
        """Count ``value`` in the bucket of the epoch containing ``now``.

        Raises:
            InvalidSampleError: If ``value`` is not a non-negative integer. The ring is left unchanged.
        """
        if isinstance(value, bool) or not isinstance(value, Integral) or value < 0:
            raise InvalidSampleError(value)

        epoch = self.epoch_at(now)
        if self._latest_epoch is not None and epoch < self._latest_epoch:
            self.warning(
                lambda: f"Time source went backwards (epoch {epoch} < {self._latest_epoch}), "
                f"counting sample in epoch {self._latest_epoch}"
            )
            epoch = self._latest_epoch

        idx = epoch % self.ring_length
        bucket = self._buckets[idx]
        if bucket.epoch != epoch:
            if bucket.epoch is not None:
                self.trace(
                    lambda: f"Recycling slot {idx}: epoch {bucket.epoch} -> {epoch}, dropping {bucket.total} samples"
                )
            bucket.reset(epoch)

        bucket.add(int(value))
        self._latest_epoch = epoch

    def live_buckets(self, now: float) -> list[Bucket]:
        """Buckets whose epoch lies within the retention window at ``now``, oldest first."""
        oldest_epoch, current_epoch = self.window_at(now)
        live = [b for b in self._buckets if b.is_live(oldest_epoch, current_epoch)]
        live.sort(key=lambda b: b.epoch)
        return live

    def live_bucket_count(self, now: float) -> int:
        """Number of non-empty buckets within the retention window at ``now``."""
        return sum(1 for b in self.live_buckets(now) if b.counts)

    def snapshot(self, now: float) -> Snapshot:
        """Merge every live bucket into a single read-only Snapshot. Has no side effects."""
        merged: defaultdict[int, int] = defaultdict(int)
        for bucket in self.live_buckets(now):
            for value, count in bucket.counts.items():
                merged[value] += count
        return Snapshot.from_frequencies(merged)

    def __len__(self) -> int:
        return self.ring_length
