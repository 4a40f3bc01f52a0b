"""
Shared argument checks for the percolation engine and its Monte Carlo driver.
"""
import numbers


class PercolationError(Exception):
    """Base class for every error raised by this project."""


class InvalidArgumentError(PercolationError, ValueError):
    """A grid size, trial count or other setup argument is not usable."""


class SiteIndexError(PercolationError, IndexError):
    """A row or column index falls outside [1, n]."""


class TrialLimitExceededError(PercolationError, RuntimeError):
    """A trial ran out of random draws before the grid percolated."""


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_positive(value, name: str) -> int:
    if not _is_int(value) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def validate_grid_size(n) -> int:
    return validate_positive(n, "grid size n")


def validate_trials(trials) -> int:
    return validate_positive(trials, "trials count")


def validate_index(index, n: int, axis: str = "index"):
    if not _is_int(index) or index < 1 or index > n:
        raise SiteIndexError(f"{axis} {index!r} is not between 1 and {n}")
