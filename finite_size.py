"""
Finite-size scaling of the percolation threshold.

The mean threshold of an L by L grid drifts towards p_c(infinity) roughly as
L**(-1/nu) with nu = 4/3 in two dimensions, so fitting the means of several
grid sizes against L**(-3/4) and reading off the intercept extrapolates the
threshold of an infinite grid.
"""
import logging
from dataclasses import dataclass

import numpy as np
from scipy.stats import linregress

from percolation_stats import PercolationStats
from validation import InvalidArgumentError

logger = logging.getLogger(__name__)

SCALING_EXPONENT = -3 / 4


@dataclass(frozen=True)
class ThresholdExtrapolation:
    pc_inf: float
    slope: float
    r_squared: float
    exponent: float


def run_size_sweep(sizes, trials, seed=None):
    """
    Run PercolationStats for every grid size in ``sizes``.

    All sizes draw from one generator, so a fixed seed reproduces the whole
    sweep.
    """
    sizes = list(sizes)
    if not sizes:
        raise InvalidArgumentError("sizes must contain at least one grid size")

    rng = np.random.default_rng(seed)
    results = []
    for n in sizes:
        logger.info("simulate n = %s", n)
        results.append(PercolationStats(n, trials, rng=rng))
    return results


def extrapolate_threshold(sizes, means, exponent=SCALING_EXPONENT):
    """
    Linear fit of mean threshold against L**exponent.

    :param sizes: Grid sizes L.
    :param means: Mean threshold measured for each size.
    :return: ThresholdExtrapolation whose intercept estimates p_c(infinity).
    """
    L_values = np.asarray(sizes, dtype=float)
    means = np.asarray(means, dtype=float)

    if L_values.shape != means.shape or L_values.ndim != 1:
        raise InvalidArgumentError("sizes and means must be 1-D and of equal length")
    if np.unique(L_values).size < 2:
        raise InvalidArgumentError("at least two distinct grid sizes are needed for a fit")
    if np.any(L_values <= 0):
        raise InvalidArgumentError("grid sizes must be positive")

    X_scaling = L_values ** exponent
    fit = linregress(X_scaling, means)

    return ThresholdExtrapolation(
        pc_inf=float(fit.intercept),
        slope=float(fit.slope),
        r_squared=float(fit.rvalue ** 2),
        exponent=float(exponent),
    )


def extrapolate_sweep(results, exponent=SCALING_EXPONENT):
    """Extrapolate p_c(infinity) straight from the output of run_size_sweep."""
    sizes = [stats.gridSize for stats in results]
    means = [stats.mean() for stats in results]
    return extrapolate_threshold(sizes, means, exponent)
