import math

import numpy as np
import pytest

from finite_size import (
    SCALING_EXPONENT,
    ThresholdExtrapolation,
    extrapolate_sweep,
    extrapolate_threshold,
    run_size_sweep,
)
from percolation_stats import PercolationStats
from validation import InvalidArgumentError


def test_recovers_intercept_of_exact_scaling():
    sizes = np.array([16, 32, 64, 128])
    means = 0.5927 + 0.12 * sizes ** SCALING_EXPONENT

    fit = extrapolate_threshold(sizes, means)

    assert isinstance(fit, ThresholdExtrapolation)
    assert fit.pc_inf == pytest.approx(0.5927)
    assert fit.slope == pytest.approx(0.12)
    assert fit.r_squared == pytest.approx(1.0)
    assert fit.exponent == SCALING_EXPONENT


def test_custom_exponent():
    sizes = [10, 20, 40]
    means = [0.6 - 0.3 / L for L in sizes]
    fit = extrapolate_threshold(sizes, means, exponent=-1)
    assert fit.pc_inf == pytest.approx(0.6)
    assert fit.slope == pytest.approx(-0.3)


@pytest.mark.parametrize(
    "sizes, means",
    [
        ([10], [0.59]),
        ([10, 10], [0.58, 0.59]),
        ([10, 20], [0.59]),
        ([0, 20], [0.5, 0.59]),
    ],
)
def test_rejects_unusable_fits(sizes, means):
    with pytest.raises(InvalidArgumentError):
        extrapolate_threshold(sizes, means)


def test_empty_sweep():
    with pytest.raises(InvalidArgumentError):
        run_size_sweep([], 5)


def test_sweep_runs_every_size():
    results = run_size_sweep([4, 8, 12], 5, seed=1)
    assert [stats.gridSize for stats in results] == [4, 8, 12]
    assert all(isinstance(stats, PercolationStats) for stats in results)
    assert all(stats.trialCount == 5 for stats in results)


def test_sweep_is_reproducible():
    first = run_size_sweep([5, 10], 4, seed=17)
    second = run_size_sweep([5, 10], 4, seed=17)
    for a, b in zip(first, second):
        assert np.array_equal(a.thresholds, b.thresholds)


def test_extrapolate_sweep():
    results = run_size_sweep([8, 16, 24], 6, seed=4)
    fit = extrapolate_sweep(results)
    assert math.isfinite(fit.pc_inf)
    assert 0.0 <= fit.r_squared <= 1.0
