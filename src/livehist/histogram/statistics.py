# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Exact order statistics over a merged value -> count table.

This module provides:
- Snapshot: the read-only merged frequency table of a live window
- Rank lookups: rank_value, median, minimum, maximum
- Moments: total, mean
- Percentile helpers: percentile_rank_count, percentile_average

All functions are pure. Values are kept as Python ints so sums never
overflow; counts and their running totals are NumPy int64 arrays so rank
lookups are a single binary search.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import numpy as np

from livehist.common.constants import MAX_PERCENTILE
from livehist.common.exceptions import EmptyWindowError

if TYPE_CHECKING:
    from numpy.typing import NDArray

# =============================================================================
# Snapshot
# =============================================================================


class Snapshot:
    """Merged frequency table of every non-stale bucket at one instant.

    Distinct values are stored in ascending order, with parallel counts and
    cumulative counts. Instances are never mutated after construction.
    """

    __slots__ = ("_values", "_counts", "_cumulative", "_total")

    def __init__(self, values: tuple[int, ...], counts: NDArray[np.int64]) -> None:
        self._values = values
        self._counts = counts
        self._counts.flags.writeable = False
        self._cumulative = np.cumsum(counts, dtype=np.int64)
        self._cumulative.flags.writeable = False
        self._total = int(self._cumulative[-1]) if len(values) else 0

    @classmethod
    def from_frequencies(cls, frequencies: Mapping[int, int]) -> Snapshot:
        """Build a snapshot from a value -> count mapping. Zero counts are dropped."""
        items = sorted((v, c) for v, c in frequencies.items() if c > 0)
        values = tuple(v for v, _ in items)
        counts = np.fromiter((c for _, c in items), dtype=np.int64, count=len(items))
        return cls(values, counts)

    @classmethod
    def empty(cls) -> Snapshot:
        return cls((), np.empty(0, dtype=np.int64))

    @property
    def values(self) -> tuple[int, ...]:
        return self._values

    @property
    def counts(self) -> NDArray[np.int64]:
        return self._counts

    @property
    def cumulative(self) -> NDArray[np.int64]:
        return self._cumulative

    @property
    def total(self) -> int:
        return self._total

    def as_dict(self) -> dict[int, int]:
        return dict(zip(self._values, self._counts.tolist(), strict=True))

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return self._total > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self._values == other._values and np.array_equal(
            self._counts, other._counts
        )

    def __repr__(self) -> str:
        return f"Snapshot(total={self._total}, distinct={len(self._values)})"


# =============================================================================
# Rank Lookups
# =============================================================================


def _require_samples(snapshot: Snapshot) -> None:
    if snapshot.total == 0:
        raise EmptyWindowError("No samples in the live window")


def total(snapshot: Snapshot) -> int:
    """Sum of all counts."""
    return snapshot.total


def rank_value(snapshot: Snapshot, rank: int) -> int:
    """Return the smallest value whose cumulative count reaches ``rank`` (1-indexed).

    Raises:
        EmptyWindowError: If the snapshot holds no samples.
        ValueError: If ``rank`` is outside ``[1, total]``.
    """
    _require_samples(snapshot)
    if not 1 <= rank <= snapshot.total:
        raise ValueError(f"rank must be within [1, {snapshot.total}], got {rank}")
    idx = int(np.searchsorted(snapshot.cumulative, rank, side="left"))
    return snapshot.values[idx]


def median(snapshot: Snapshot) -> int:
    """Middle order statistic; for an even population the truncated mean of the two middle ones."""
    _require_samples(snapshot)
    n = total(snapshot)
    if n % 2:
        return rank_value(snapshot, (n + 1) // 2)
    return (rank_value(snapshot, n // 2) + rank_value(snapshot, n // 2 + 1)) // 2


def minimum(snapshot: Snapshot) -> int:
    _require_samples(snapshot)
    return snapshot.values[0]


def maximum(snapshot: Snapshot) -> int:
    _require_samples(snapshot)
    return snapshot.values[-1]


# =============================================================================
# Moments
# =============================================================================


def _weighted_sum(values: tuple[int, ...], counts: list[int]) -> int:
    return sum(value * count for value, count in zip(values, counts, strict=True))


def mean(snapshot: Snapshot) -> int:
    """Truncated mean of all samples."""
    _require_samples(snapshot)
    return _weighted_sum(snapshot.values, snapshot.counts.tolist()) // snapshot.total


# =============================================================================
# Percentile Helpers
# =============================================================================


def percentile_rank_count(snapshot: Snapshot, percentile: int) -> int:
    """Number of samples in the lower ``percentile`` percent by population, floor(p * total / 100).

    This is a rank boundary and does not depend on the value distribution.
    """
    return percentile * snapshot.total // MAX_PERCENTILE


def _round_half_up(numerator: int, denominator: int) -> int:
    return (2 * numerator + denominator) // (2 * denominator)


def percentile_average(snapshot: Snapshot, percentile: int) -> int:
    """Mean of the values at ranks ``1 .. percentile_rank_count``, rounded half up.

    Raises:
        EmptyWindowError: If the lower percentile slice holds no samples.
    """
    rank_count = percentile_rank_count(snapshot, percentile)
    if rank_count == 0:
        raise EmptyWindowError(
            f"No samples in the lower {percentile}% of a window of {snapshot.total}"
        )

    # The slice ends inside the run of the value at `boundary`.
    boundary = int(np.searchsorted(snapshot.cumulative, rank_count, side="left"))
    counts = snapshot.counts[:boundary].tolist()
    slice_sum = _weighted_sum(snapshot.values[:boundary], counts)
    taken = int(snapshot.cumulative[boundary - 1]) if boundary else 0
    slice_sum += snapshot.values[boundary] * (rank_count - taken)

    return _round_half_up(slice_sum, rank_count)
