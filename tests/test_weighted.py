"""Tests for weighted index selection."""

import random

import pytest

from gravity_model.sampling.weighted import choose_index_by_weight, cumulative_sum
from gravity_model.validation import InvalidArgumentError

# Largest double below 1.0, the top of random.random()'s range
ALMOST_ONE = 1.0 - 2.0**-53


class TestCumulativeSum:
    """Tests for the running sum helper."""

    def test_running_sum(self):
        assert cumulative_sum([1.0, 2.0, 3.0]).tolist() == [1.0, 3.0, 6.0]

    def test_empty(self):
        assert cumulative_sum([]).tolist() == []


class TestChooseIndexByWeight:
    """Tests for choose_index_by_weight."""

    def test_draw_lands_in_slices(self):
        """Each index owns a slice of [0, 1) as wide as its weight."""
        weights = [3.0, 2.0, 5.0]
        assert choose_index_by_weight(weights, 0.1) == 0
        assert choose_index_by_weight(weights, 0.4) == 1
        assert choose_index_by_weight(weights, 0.7) == 2

    def test_extremes_of_draw(self):
        assert choose_index_by_weight([1.0, 1.0], 0.0) == 0
        assert choose_index_by_weight([1.0, 1.0], ALMOST_ONE) == 1

    def test_draw_on_boundary_goes_to_next_index(self):
        """A draw equal to a cumulative value belongs to the next slice."""
        assert choose_index_by_weight([1.0, 1.0], 0.5) == 1
        assert choose_index_by_weight([1.0, 2.0, 1.0], 0.25) == 1
        assert choose_index_by_weight([1.0, 2.0, 1.0], 0.75) == 2

    def test_zero_weights_never_chosen(self):
        weights = [0.0, 1.0, 0.0]
        for rand in (0.0, 0.3, ALMOST_ONE):
            assert choose_index_by_weight(weights, rand) == 1

    def test_trailing_zero_weight_with_high_draw(self):
        assert choose_index_by_weight([1.0, 0.0], ALMOST_ONE) == 0

    def test_single_weight(self):
        assert choose_index_by_weight([42.0], 0.999) == 0

    def test_tiny_weights(self):
        """Normalization keeps the last slice ending at exactly 1.0."""
        weights = [1e-300, 3e-300, 1e-300]
        assert choose_index_by_weight(weights, ALMOST_ONE) == 2

    def test_frequencies_follow_weights(self):
        rng = random.Random(7)
        trials = 100_000
        hits = sum(choose_index_by_weight([1.0, 3.0], rng.random()) for _ in range(trials))
        assert hits / trials == pytest.approx(0.75, abs=0.01)

    @pytest.mark.parametrize(
        "weights",
        [
            [],
            [0.0, 0.0],
            [-1.0, 2.0],
            [float("nan"), 1.0],
            [float("inf"), 1.0],
        ],
    )
    def test_invalid_weights_raise(self, weights):
        with pytest.raises(InvalidArgumentError):
            choose_index_by_weight(weights, 0.5)

    @pytest.mark.parametrize("rand", [1.0, -0.1, float("nan")])
    def test_invalid_draw_raises(self, rand):
        with pytest.raises(InvalidArgumentError, match="random draw"):
            choose_index_by_weight([1.0], rand)
