# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for Snapshot and the order statistic functions."""

import random

import numpy as np
import pytest

from livehist.common.exceptions import EmptyWindowError
from livehist.histogram import statistics
from livehist.histogram.statistics import Snapshot


def snapshot_of(*samples: int) -> Snapshot:
    frequencies: dict[int, int] = {}
    for sample in samples:
        frequencies[sample] = frequencies.get(sample, 0) + 1
    return Snapshot.from_frequencies(frequencies)


# =============================================================================
# Snapshot Tests
# =============================================================================


class TestSnapshot:
    """Tests for Snapshot construction and accessors."""

    def test_from_frequencies_sorts_values(self) -> None:
        snapshot = Snapshot.from_frequencies({30: 1, 10: 2, 20: 3})
        assert snapshot.values == (10, 20, 30)
        np.testing.assert_array_equal(snapshot.counts, [2, 3, 1])
        np.testing.assert_array_equal(snapshot.cumulative, [2, 5, 6])
        assert snapshot.total == 6
        assert len(snapshot) == 3

    def test_zero_counts_dropped(self) -> None:
        snapshot = Snapshot.from_frequencies({1: 0, 2: 4})
        assert snapshot.values == (2,)
        assert snapshot.total == 4

    def test_empty(self) -> None:
        snapshot = Snapshot.empty()
        assert snapshot.total == 0
        assert len(snapshot) == 0
        assert not snapshot
        assert snapshot.as_dict() == {}

    def test_as_dict_round_trips_frequencies(self) -> None:
        frequencies = {5: 1, 0: 7, 1_000_000: 2}
        assert Snapshot.from_frequencies(frequencies).as_dict() == frequencies

    def test_arrays_are_read_only(self) -> None:
        snapshot = snapshot_of(1, 2, 3)
        with pytest.raises(ValueError):
            snapshot.counts[0] = 10
        with pytest.raises(ValueError):
            snapshot.cumulative[0] = 10

    def test_equality(self) -> None:
        assert snapshot_of(1, 2, 2) == Snapshot.from_frequencies({2: 2, 1: 1})
        assert snapshot_of(1, 2) != snapshot_of(1, 2, 2)


# =============================================================================
# Rank Lookup Tests
# =============================================================================


class TestRankValue:
    """Tests for rank_value."""

    @pytest.mark.parametrize(
        "rank,expected",
        [(1, 10), (2, 10), (3, 20), (5, 20), (6, 30)],
    )
    def test_rank_value_walks_cumulative_counts(self, rank: int, expected: int) -> None:
        snapshot = Snapshot.from_frequencies({10: 2, 20: 3, 30: 1})
        assert statistics.rank_value(snapshot, rank) == expected

    def test_rank_value_empty_raises(self) -> None:
        with pytest.raises(EmptyWindowError):
            statistics.rank_value(Snapshot.empty(), 1)

    @pytest.mark.parametrize("rank", [0, -1, 4])
    def test_rank_value_out_of_range_raises(self, rank: int) -> None:
        with pytest.raises(ValueError, match="rank must be within"):
            statistics.rank_value(snapshot_of(1, 2, 3), rank)


class TestMedian:
    """Tests for median."""

    def test_single_sample(self) -> None:
        assert statistics.median(snapshot_of(0)) == 0

    def test_even_population_averages_middle_pair(self) -> None:
        assert statistics.median(snapshot_of(0, 2)) == 1

    def test_even_population_truncates(self) -> None:
        assert statistics.median(snapshot_of(1, 2)) == 1
        assert statistics.median(snapshot_of(0, 100)) == 50

    def test_odd_population_takes_middle(self) -> None:
        assert statistics.median(snapshot_of(7, 1, 1000)) == 7

    def test_middle_inside_repeated_value(self) -> None:
        assert statistics.median(Snapshot.from_frequencies({1: 1, 5: 10, 9: 1})) == 5

    def test_empty_raises(self) -> None:
        with pytest.raises(EmptyWindowError):
            statistics.median(Snapshot.empty())

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_matches_sorted_order_statistics(self, seed: int) -> None:
        rng = random.Random(seed)
        samples = [rng.randrange(0, 50) for _ in range(rng.randrange(1, 200))]
        ordered = sorted(samples)
        n = len(ordered)
        if n % 2:
            expected = ordered[n // 2]
        else:
            expected = (ordered[n // 2 - 1] + ordered[n // 2]) // 2

        assert statistics.median(snapshot_of(*samples)) == expected


class TestMinimumMaximum:
    def test_min_max(self) -> None:
        snapshot = snapshot_of(42, 3, 17)
        assert statistics.minimum(snapshot) == 3
        assert statistics.maximum(snapshot) == 42

    @pytest.mark.parametrize("func", [statistics.minimum, statistics.maximum])
    def test_empty_raises(self, func) -> None:
        with pytest.raises(EmptyWindowError):
            func(Snapshot.empty())


# =============================================================================
# Moment Tests
# =============================================================================


class TestMean:
    """Tests for total and mean."""

    def test_total(self) -> None:
        assert statistics.total(snapshot_of(1, 1, 2)) == 3
        assert statistics.total(Snapshot.empty()) == 0

    def test_mean_truncates(self) -> None:
        assert statistics.mean(snapshot_of(1, 2)) == 1
        assert statistics.mean(snapshot_of(1, 2, 2)) == 1

    def test_mean_weighted_by_count(self) -> None:
        assert statistics.mean(Snapshot.from_frequencies({0: 3, 100: 1})) == 25

    def test_mean_does_not_overflow(self) -> None:
        huge = 2**62
        assert statistics.mean(snapshot_of(huge, huge, huge)) == huge

    def test_mean_empty_raises(self) -> None:
        with pytest.raises(EmptyWindowError):
            statistics.mean(Snapshot.empty())


# =============================================================================
# Percentile Tests
# =============================================================================


class TestPercentileRankCount:
    """Tests for percentile_rank_count."""

    @pytest.mark.parametrize(
        "percentile,total,expected",
        [(95, 102, 96), (95, 101, 95), (50, 3, 1), (0, 50, 0), (100, 50, 50), (1, 99, 0)],
    )
    def test_floor_of_share(self, percentile: int, total: int, expected: int) -> None:
        snapshot = Snapshot.from_frequencies({7: total})
        assert statistics.percentile_rank_count(snapshot, percentile) == expected

    def test_independent_of_distribution(self) -> None:
        skewed = Snapshot.from_frequencies({0: 99, 1_000: 1})
        spread = snapshot_of(*range(100))
        assert statistics.percentile_rank_count(
            skewed, 90
        ) == statistics.percentile_rank_count(spread, 90)

    def test_empty_is_zero(self) -> None:
        assert statistics.percentile_rank_count(Snapshot.empty(), 95) == 0


class TestPercentileAverage:
    """Tests for percentile_average."""

    def test_averages_lower_slice(self) -> None:
        # Ranks 1..5 of 0..9 are 0..4
        assert statistics.percentile_average(snapshot_of(*range(10)), 50) == 2

    def test_slice_boundary_inside_repeated_value(self) -> None:
        # Lower 50% of {1: 2, 10: 4} is 1, 1, 10 -> 4
        snapshot = Snapshot.from_frequencies({1: 2, 10: 4})
        assert statistics.percentile_average(snapshot, 50) == 4

    def test_rounds_half_up(self) -> None:
        # 0, 100, then 1..100: lower 95% is ranks 1..96 = values 0..95, mean 47.5
        snapshot = snapshot_of(0, 100, *range(1, 101))
        assert statistics.percentile_rank_count(snapshot, 95) == 96
        assert statistics.percentile_average(snapshot, 95) == 48

    def test_rounds_to_nearest(self) -> None:
        # Lower 75% of 0, 1, 1, 5 is 0, 1, 1 -> 0.67 -> 1; all of 0, 0, 1 -> 0.33 -> 0
        snapshot = snapshot_of(0, 1, 1, 5)
        assert statistics.percentile_average(snapshot, 75) == 1
        assert statistics.percentile_average(snapshot_of(0, 0, 1), 100) == 0

    def test_full_percentile_matches_rounded_mean(self) -> None:
        snapshot = snapshot_of(3, 4)
        assert statistics.percentile_average(snapshot, 100) == 4
        assert statistics.mean(snapshot) == 3

    def test_zero_rank_count_raises(self) -> None:
        with pytest.raises(EmptyWindowError, match="lower 10%"):
            statistics.percentile_average(snapshot_of(1, 2, 3), 10)

    def test_zero_percentile_raises(self) -> None:
        with pytest.raises(EmptyWindowError):
            statistics.percentile_average(snapshot_of(1, 2, 3), 0)

    def test_empty_raises(self) -> None:
        with pytest.raises(EmptyWindowError):
            statistics.percentile_average(Snapshot.empty(), 95)
