"""
Median and median absolute deviation via quickselect.

Both functions avoid a full sort and therefore rearrange their input.
Callers that need the original order must pass a copy.
"""

from __future__ import annotations

from itertools import islice

import numpy as np

from robstats.core.compute.random import RandomSource, as_generator
from robstats.core.validation import check_sample_size
from robstats.selection._common import MutableSample
from robstats.selection._select import select_range


def _median(xs: MutableSample, n: int, gen: np.random.Generator) -> float:
    if n % 2 == 0:
        # even number of elements: average the two middle order statistics
        lo = select_range(xs, n // 2 - 1, 0, n, gen)
        hi = select_range(xs, n // 2, 0, n, gen)
        return (float(lo) + float(hi)) / 2.0
    return float(select_range(xs, n // 2, 0, n, gen))


def median(
    xs: MutableSample,
    n: int | None = None,
    *,
    rng: RandomSource = None,
) -> float:
    """
    Median of the first n elements of xs.

    Side effect: xs[:n] is rearranged.

    Parameters
    ----------
    xs : mutable sequence or 1-D ndarray
        Numeric sample without missing values.
    n : int, optional
        Number of leading elements to use. Default len(xs).
    rng : None, int or numpy.random.Generator
        Source of random pivots.

    Returns
    -------
    float

    Raises
    ------
    ValidationError
        If the sample is empty or n exceeds len(xs).
    """
    n = check_sample_size(xs, n, 1, "median")
    return _median(xs, n, as_generator(rng))


def mad(
    xs: MutableSample,
    n: int | None = None,
    *,
    rng: RandomSource = None,
) -> float:
    """
    Median absolute deviation (unscaled) of the first n elements of xs.

    Computes m = median(xs), then the median of |xs[k] - m|. The deviations
    live in a private float64 buffer, so xs is rearranged only by the first
    median.

    Parameters
    ----------
    xs : mutable sequence or 1-D ndarray
        Numeric sample without missing values.
    n : int, optional
        Number of leading elements to use. Default len(xs).
    rng : None, int or numpy.random.Generator
        Source of random pivots.

    Returns
    -------
    float

    Raises
    ------
    ValidationError
        If the sample is empty or n exceeds len(xs).
    """
    n = check_sample_size(xs, n, 1, "mad")
    gen = as_generator(rng)

    m = _median(xs, n, gen)
    # islice instead of xs[:n]: deques and other MutableSequences do not slice
    head = np.fromiter(islice(xs, n), dtype=np.float64, count=n)
    deviations = np.abs(head - m)
    return _median(deviations, n, gen)
