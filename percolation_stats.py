import logging
import math

import numpy as np

from percolation import Percolation
from validation import (
    InvalidArgumentError,
    TrialLimitExceededError,
    validate_grid_size,
    validate_positive,
    validate_trials,
)

logger = logging.getLogger(__name__)

# z value of the two-sided 95% normal interval
CONFIDENCE_Z = 1.96

# random (row, col) pairs drawn from the generator at a time
DRAW_BATCH = 1024

PROGRESS_EVERY = 50


class PercolationStats:
    """
    Estimates the site percolation threshold of an n by n grid.

    Every trial opens uniformly random closed sites on a fresh grid until it
    percolates and records the fraction of open sites. All trials run in the
    constructor; the results below are fixed afterwards.

    :param n: The grid size.
    :param trials: The number of Monte Carlo trials.
    :param seed: Seed for a new numpy generator, ignored when ``rng`` is given.
    :param rng: An existing ``numpy.random.Generator`` to draw sites from.
    :param max_iterations: Optional cap on random draws per trial.
    """

    def __init__(self, n: int, trials: int, seed=None, rng=None, max_iterations=None):
        self.gridSize = validate_grid_size(n)
        self.trialCount = validate_trials(trials)
        if max_iterations is not None:
            max_iterations = validate_positive(max_iterations, "max_iterations")
        self.maxIterations = max_iterations

        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.trialResults = np.empty(self.trialCount, dtype=float)

        logger.debug("running %d trials on a %dx%d grid", self.trialCount, n, n)
        for t in range(self.trialCount):
            self.trialResults[t] = self._run_trial()
            logger.debug("trial %d: threshold %.6f", t + 1, self.trialResults[t])
            if (t + 1) % PROGRESS_EVERY == 0:
                logger.info("Progress: %d/%d trials", t + 1, self.trialCount)

        self._mean, self._stddev, (self._confidenceLo, self._confidenceHi) = \
            stats_from_samples(self.trialResults)

        logger.info(
            "n=%d trials=%d mean=%.6f stddev=%.6f 95%% CI=[%.6f, %.6f]",
            self.gridSize, self.trialCount, self._mean, self._stddev,
            self._confidenceLo, self._confidenceHi,
        )

    def _random_sites(self):
        n = self.gridSize
        while True:
            rows = self.rng.integers(1, n + 1, size=DRAW_BATCH)
            cols = self.rng.integers(1, n + 1, size=DRAW_BATCH)
            yield from zip(rows.tolist(), cols.tolist())

    def _run_trial(self) -> float:
        simulator = Percolation(self.gridSize)
        draws = 0
        for row, col in self._random_sites():
            if simulator.percolates():
                break
            if self.maxIterations is not None and draws >= self.maxIterations:
                raise TrialLimitExceededError(
                    f"no percolation after {draws} draws on a "
                    f"{self.gridSize}x{self.gridSize} grid"
                )
            draws += 1
            if not simulator.isOpen(row, col):
                simulator.open_site(row, col)

        return simulator.numberOfOpenSites() / (self.gridSize * self.gridSize)

    @property
    def thresholds(self):
        """The per-trial open-site fractions, as a read-only copy."""
        results = self.trialResults.copy()
        results.setflags(write=False)
        return results

    def mean(self) -> float:
        return self._mean

    def stddev(self) -> float:
        return self._stddev

    def confidenceLo(self) -> float:
        return self._confidenceLo

    def confidenceHi(self) -> float:
        return self._confidenceHi

    def confidence_interval(self):
        return self._confidenceLo, self._confidenceHi


def stats_from_samples(samples):
    """
    Mean, sample standard deviation and 95% interval of existing samples.

    Uses the same rules as PercolationStats: the deviation divides by
    len(samples) - 1 and is 0.0 for a single sample.
    """
    samples = np.asarray(samples, dtype=float)
    if samples.ndim != 1 or samples.size == 0:
        raise InvalidArgumentError("samples must be a non-empty 1-D sequence")

    mean = float(np.mean(samples))
    # a single sample has no spread to estimate
    stddev = float(np.std(samples, ddof=1)) if samples.size > 1 else 0.0
    halfWidth = CONFIDENCE_Z * stddev / math.sqrt(samples.size)
    return mean, stddev, (mean - halfWidth, mean + halfWidth)
