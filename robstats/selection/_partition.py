"""
Single-pass (Lomuto) partition around a chosen pivot.

After partition(xs, k, l, r) returns j, the sub-range [l, r) holds three
contiguous zones:

    [l, l+j)      elements strictly less than the pivot (any order)
    l+j           the pivot
    [l+j+1, r)    elements greater than or equal to the pivot (any order)

so j is the pivot's rank within the sub-range. Elements equal to the pivot
always land in the right zone.
"""

from __future__ import annotations

from robstats.selection._common import MutableSample


def partition(xs: MutableSample, k: int, l: int, r: int) -> int:
    """
    Partition xs[l:r] in place around the element at local index k.

    Parameters
    ----------
    xs : mutable sequence or 1-D ndarray
        Sequence to rearrange. Only positions [l, r) are touched.
    k : int
        Pivot index relative to l, 0 <= k < r - l.
    l : int
        First index of the sub-range.
    r : int
        One past the last index of the sub-range, l < r <= len(xs).

    Returns
    -------
    int
        Rank of the pivot within [l, r), equal to the number of elements
        in the sub-range strictly smaller than the pivot.

    Notes
    -----
    Bounds are not checked; callers (select) validate once on entry.
    """
    k += l
    xs[l], xs[k] = xs[k], xs[l]
    p = xs[l]

    # [l+1, i) is the less-than-p zone; [i, j) is the greater-or-equal zone
    i = l + 1
    for j in range(l + 1, r):
        if xs[j] < p:
            xs[j], xs[i] = xs[i], xs[j]
            i += 1

    xs[l], xs[i - 1] = xs[i - 1], xs[l]
    return i - 1 - l
