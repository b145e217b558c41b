"""
Solver dispatch for descriptive statistics.

Provides describe() as the comprehensive entry point, plus robust() for
median/MAD only and cor() for Pearson correlation of two samples.

Unlike the kernels in robstats.selection, these functions never modify the
caller's data.
"""

from __future__ import annotations

import math
from typing import Literal
from numpy.typing import ArrayLike

from robstats.core.exceptions import ValidationError
from robstats.core.validation import check_consistent_length
from robstats.descriptive.design import SampleDesign
from robstats.descriptive.solution import DescriptiveSolution
from robstats.descriptive.backends.cpu import CPUDescriptiveBackend


BackendChoice = Literal['auto', 'cpu']

# Makes the MAD a consistent estimator of sigma for normal data (R's default)
NORMAL_MAD_CONSTANT = 1.4826


def _ensure_design(data: ArrayLike | SampleDesign) -> SampleDesign:
    """Convert raw array to SampleDesign if needed."""
    if isinstance(data, SampleDesign):
        return data
    return SampleDesign.from_array(data)


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUDescriptiveBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def _check_mad_constant(mad_constant: float) -> float:
    try:
        value = float(mad_constant)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"mad_constant: expected a number, got {mad_constant!r}") from e
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"mad_constant must be positive and finite, got {value}")
    return value


def describe(
    data: ArrayLike | SampleDesign,
    *,
    seed: int | None = None,
    mad_constant: float = 1.0,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Compute descriptive statistics of one sample.

    Computes: n, mean, variance, standard deviation, median, median
    absolute deviation, minimum and maximum.

    Parameters
    ----------
    data : array-like or SampleDesign
        1D numeric data without missing values.
    seed : int, optional
        Seed for quickselect pivots. Only the work done depends on it,
        never the returned values.
    mad_constant : float
        Scale factor for the MAD. 1.0 (default) gives the raw MAD;
        NORMAL_MAD_CONSTANT matches R's mad().
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    DescriptiveSolution with all univariate statistics populated.
    Variance and sd are None (with a warning) when n < 2.
    """
    design = _ensure_design(data)
    mad_constant = _check_mad_constant(mad_constant)
    be = _get_backend(backend)

    result = be.solve(
        design,
        compute={'mean', 'var', 'sd', 'median', 'mad', 'range'},
        rng=seed,
        mad_constant=mad_constant,
    )

    return DescriptiveSolution(_result=result, _design=design)


def robust(
    data: ArrayLike | SampleDesign,
    *,
    seed: int | None = None,
    mad_constant: float = 1.0,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Compute median and median absolute deviation.

    Parameters
    ----------
    data : array-like or SampleDesign
        1D numeric data without missing values.
    seed : int, optional
        Seed for quickselect pivots.
    mad_constant : float
        Scale factor for the MAD.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    DescriptiveSolution with median and mad populated.
    """
    design = _ensure_design(data)
    mad_constant = _check_mad_constant(mad_constant)
    be = _get_backend(backend)

    result = be.solve(
        design,
        compute={'median', 'mad'},
        rng=seed,
        mad_constant=mad_constant,
    )

    return DescriptiveSolution(_result=result, _design=design)


def cor(
    x: ArrayLike | SampleDesign,
    y: ArrayLike | SampleDesign,
    *,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Pearson correlation of two paired samples.

    Parameters
    ----------
    x, y : array-like or SampleDesign
        1D numeric samples of equal length (at least 2).
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    DescriptiveSolution with correlation populated. The correlation is
    NaN, and a warning is recorded, if either sample is constant.

    Raises
    ------
    DimensionError
        If x and y differ in length.
    """
    x_design = _ensure_design(x)
    y_design = _ensure_design(y)
    check_consistent_length(x_design.data, y_design.data, names=("x", "y"))
    if x_design.n < 2:
        raise ValidationError(
            f"cor: requires at least 2 samples, got {x_design.n}"
        )

    be = _get_backend(backend)
    result = be.solve(x_design, compute={'cor'}, other=y_design)

    return DescriptiveSolution(_result=result, _design=x_design)
