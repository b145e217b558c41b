"""
Randomized selection (quickselect) of an order statistic.

Expected linear time; quadratic in the worst case when pivots are
repeatedly extreme, which uniform random pivots make vanishingly unlikely.
The sub-range is shrunk in a loop instead of recursing, so stack depth is
constant regardless of how unbalanced the partitions are.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from robstats.core.compute.random import RandomSource, as_generator
from robstats.core.exceptions import ValidationError
from robstats.selection._common import MutableSample
from robstats.selection._partition import partition


def _check_bounds(xs: MutableSample, i: int, l: int, r: int) -> None:
    for label, value in (('i', i), ('l', l), ('r', r)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValidationError(
                f"select: {label} must be an integer, got {type(value).__name__}"
            )
    length = len(xs)
    if not 0 <= l < r <= length:
        raise ValidationError(
            f"select: sub-range [{l}, {r}) invalid for sequence of length {length}"
        )
    if not 0 <= i < r - l:
        raise ValidationError(
            f"select: rank i={i} outside [0, {r - l}) for sub-range [{l}, {r})"
        )


def select_range(
    xs: MutableSample,
    i: int,
    l: int,
    r: int,
    gen: np.random.Generator,
) -> Any:
    """Unchecked quickselect loop over [l, r); see select()."""
    while r - l > 1:
        j = partition(xs, int(gen.integers(r - l)), l, r)
        if j == i:
            return xs[l + j]
        if j > i:
            r = l + j
        else:
            j += 1
            l += j
            i -= j
    return xs[l]


def select(
    xs: MutableSample,
    i: int,
    *,
    l: int = 0,
    r: int | None = None,
    rng: RandomSource = None,
) -> Any:
    """
    Find the i-th order statistic of xs[l:r].

    Returns the element that would sit at position l + i if xs[l:r] were
    sorted ascending. If several elements tie for that rank, an arbitrary
    one of them is returned (the value is deterministic, the identity is not).

    Side effect: elements of xs[l:r] are rearranged.

    The rank comes first and the sub-range bounds are keyword-only, so
    select(xs, 2) and select(xs, 2, l=1, r=4) cannot be confused with a
    positional (l, r, i) call.

    Parameters
    ----------
    xs : mutable sequence or 1-D ndarray
        Sequence to select from.
    i : int
        Rank, 0-based and relative to l.
    l : int
        First index of the sub-range. Default 0.
    r : int, optional
        One past the last index. Default len(xs).
    rng : None, int or numpy.random.Generator
        Source of random pivots.

    Returns
    -------
    The selected element, with the element type of xs.

    Raises
    ------
    ValidationError
        If i, l or r is not an integer, [l, r) is empty or out of bounds,
        or i is not a valid rank.
    """
    if r is None:
        r = len(xs)
    _check_bounds(xs, i, l, r)
    return select_range(xs, int(i), int(l), int(r), as_generator(rng))
