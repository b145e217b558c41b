"""
Moment-based reductions: mean, variance, standard deviation, Pearson
correlation.

Single pass over the data with double-precision accumulation. Unlike the
selection kernels these never modify their input.
"""

from __future__ import annotations

import math
import warnings
from collections.abc import Sequence
from itertools import islice
from typing import Any

import numpy as np
from numpy.typing import NDArray

from robstats.core.validation import (
    check_consistent_length,
    check_min_samples,
    check_sample_size,
)


def _as_float(xs: Sequence[Any] | NDArray, n: int) -> NDArray[np.float64]:
    return np.fromiter(islice(xs, n), dtype=np.float64, count=n)


def mean(xs: Sequence[Any] | NDArray, n: int | None = None) -> float:
    """
    Arithmetic mean of the first n elements of xs.

    Raises
    ------
    ValidationError
        If the sample is empty or n exceeds len(xs).
    """
    n = check_sample_size(xs, n, 1, "mean")
    return float(np.sum(_as_float(xs, n)) / n)


def variance(
    xs: Sequence[Any] | NDArray,
    n: int | None = None,
    mean: float | None = None,
) -> float:
    """
    Sample variance with Bessel's correction (divides by n - 1).

    Parameters
    ----------
    xs : sequence or 1-D ndarray
    n : int, optional
        Number of leading elements to use. Default len(xs).
    mean : float, optional
        Precomputed mean of xs[:n]. Computed if not given.

    Raises
    ------
    ValidationError
        If n < 2 or n exceeds len(xs).
    """
    n = check_sample_size(xs, n, 2, "variance")
    x = _as_float(xs, n)
    m = float(np.sum(x) / n) if mean is None else float(mean)
    d = x - m
    return float(np.sum(d * d) / (n - 1))


def sd(
    xs: Sequence[Any] | NDArray,
    n: int | None = None,
    mean: float | None = None,
) -> float:
    """Sample standard deviation, sqrt(variance(xs, n, mean))."""
    return math.sqrt(variance(xs, n, mean))


def correlation(xs: Sequence[Any] | NDArray, ys: Sequence[Any] | NDArray) -> float:
    """
    Pearson correlation coefficient of two paired samples.

    Computed as

        r = (sum(x_i * y_i) - n * m_x * m_y) / ((n - 1) * s_x * s_y)

    where m are the sample means and s the sample standard deviations.

    Returns NaN (with a RuntimeWarning) if either sample has zero variance.

    Raises
    ------
    DimensionError
        If xs and ys differ in length.
    ValidationError
        If fewer than 2 pairs are given.
    """
    check_consistent_length(xs, ys, names=("x", "y"))
    check_min_samples(xs, 2, "correlation")
    n = len(xs)

    x = _as_float(xs, n)
    y = _as_float(ys, n)

    mean_x = float(np.sum(x) / n)
    sd_x = sd(x, n, mean_x)
    mean_y = float(np.sum(y) / n)
    sd_y = sd(y, n, mean_y)

    if sd_x == 0.0 or sd_y == 0.0:
        warnings.warn(
            "correlation: standard deviation is zero; correlation is undefined",
            RuntimeWarning,
            stacklevel=2,
        )
        return math.nan

    dotp = float(np.dot(x, y))
    return (dotp - n * mean_x * mean_y) / ((n - 1) * sd_x * sd_y)
