"""
Order statistics by randomized in-place selection.

Public API:
    partition(xs, k, l, r)    - Lomuto partition of xs[l:r] around xs[l+k]
    select(xs, i, *, l=0, r=None) - i-th order statistic of xs[l:r] (quickselect)
    median(xs, n=None)        - median of xs[:n]
    mad(xs, n=None)           - median absolute deviation of xs[:n]

All functions rearrange their input in place; pass a copy to keep the
original order.
"""

from robstats.selection._partition import partition
from robstats.selection._select import select
from robstats.selection.robust import median, mad

__all__ = [
    "partition",
    "select",
    "median",
    "mad",
]
