# tests/test_sampling.py
"""
Weighted sampler (roulette wheel)

Covers:
- rejection of negative / NaN / empty weight vectors
- infinite weights (overflowed distances) win over finite ones
- uniform fallback when every weight is zero
- cumulative walk picks the first index whose cumulative probability exceeds r
- safety net when rounding leaves the walk short of r
- one draw consumed per call, empirical frequencies under a seeded generator
"""

from __future__ import annotations

import pytest
import torch

from greedykmeans import InvalidWeight
from greedykmeans.initialization.sampling import sample, uniform, uniform_index


@pytest.mark.parametrize("weights", [
    [1.0, -0.5, 2.0],
    [-1e-12],
    [0.0, float("nan")],
    [1.0, float("-inf")],
])
def test_invalid_weights_rejected(weights):
    with pytest.raises(InvalidWeight):
        sample(weights)


def test_negative_weight_does_not_consume_a_draw(scripted_draws):
    consumed = scripted_draws(0.5)
    with pytest.raises(InvalidWeight, match="index 1"):
        sample([1.0, -2.0])
    assert consumed == []


def test_empty_weights_rejected():
    with pytest.raises(InvalidWeight):
        sample([])


@pytest.mark.parametrize("r,expected", [(0.0, 0), (0.26, 1), (0.49, 1), (0.5, 2), (0.99, 2)])
def test_roulette_walk(scripted_draws, r, expected):
    # cumulative probabilities: 0.25, 0.5, 1.0
    scripted_draws(r)
    assert sample([1.0, 1.0, 2.0]) == expected


def test_zero_weight_is_never_selected(scripted_draws):
    scripted_draws(0.0, 0.0)
    assert sample([0.0, 3.0]) == 1
    assert sample([0.0, 0.0, 5.0, 0.0]) == 2


@pytest.mark.parametrize("r,expected", [(0.0, 0), (0.3, 1), (0.74, 2), (0.9999, 3)])
def test_all_zero_weights_fall_back_to_uniform(scripted_draws, r, expected):
    scripted_draws(r)
    assert sample([0.0, 0.0, 0.0, 0.0]) == expected


def test_overshoot_returns_last_positive_index(scripted_draws):
    # A draw at the very top of the range stands in for accumulated rounding
    # error that keeps the cumulative sum from exceeding r.
    scripted_draws(1.0)
    assert sample([1.0, 2.0, 0.0]) == 1


def test_exactly_one_draw_per_call(scripted_draws):
    consumed = scripted_draws(0.1, 0.9)
    sample([1.0, 1.0])
    assert consumed == [0.1]
    sample([0.0, 0.0])
    assert consumed == [0.1, 0.9]


def test_accepts_tensor_weights(scripted_draws):
    scripted_draws(0.6)
    assert sample(torch.tensor([1.0, 1.0], dtype=torch.float32)) == 1


def test_frequencies_follow_weights():
    generator = torch.Generator().manual_seed(7)
    n_draws = 4000
    hits = sum(sample([1.0, 3.0], generator) for _ in range(n_draws))
    assert abs(hits / n_draws - 0.75) < 0.03


def test_same_generator_seed_same_sequence():
    g1 = torch.Generator().manual_seed(11)
    g2 = torch.Generator().manual_seed(11)
    weights = [0.5, 1.0, 2.0, 0.0, 4.0]
    assert [sample(weights, g1) for _ in range(50)] == [sample(weights, g2) for _ in range(50)]


def test_uniform_range():
    generator = torch.Generator().manual_seed(3)
    values = [uniform(generator) for _ in range(200)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_uniform_index_stays_in_range(scripted_draws):
    scripted_draws(0.0, 0.999999, 1.0)
    assert uniform_index(5) == 0
    assert uniform_index(5) == 4
    assert uniform_index(5) == 4


@pytest.mark.parametrize("r,expected", [(0.0, 1), (0.49, 1), (0.5, 3), (0.99, 3)])
def test_infinite_weights_drawn_uniformly(scripted_draws, r, expected):
    scripted_draws(r)
    assert sample([5.0, float("inf"), 0.0, float("inf")]) == expected


def test_infinite_weight_consumes_one_draw(scripted_draws):
    consumed = scripted_draws(0.7)
    assert sample([0.0, float("inf")]) == 1
    assert consumed == [0.7]


def test_overflowing_total_still_samples(scripted_draws):
    # each weight is finite but their sum is not
    scripted_draws(0.0, 0.99)
    assert sample([1e308, 1e308, 0.0]) == 0
    assert sample([1e308, 1e308, 0.0]) == 1
