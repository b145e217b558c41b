"""
Random source resolution.

Kernels that need randomness take an ``rng`` argument instead of drawing
from numpy's global state, so results are reproducible from a seed.
"""

from __future__ import annotations

import numpy as np

from robstats.core.exceptions import ValidationError


RandomSource = np.random.Generator | int | None


def as_generator(rng: RandomSource) -> np.random.Generator:
    """
    Resolve a random source to a numpy Generator.

    Args:
        rng: None (fresh OS-seeded generator), an integer seed, or an
            existing Generator (returned unchanged, so its state advances).

    Returns:
        numpy.random.Generator

    Raises:
        ValidationError: If rng is of any other type
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None:
        return np.random.default_rng()
    # bool is an int subclass; a True/False seed is almost certainly a bug
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        if rng < 0:
            raise ValidationError(f"rng: seed must be non-negative, got {rng}")
        return np.random.default_rng(int(rng))
    raise ValidationError(
        f"rng: expected None, an int seed or numpy.random.Generator, "
        f"got {type(rng).__name__}"
    )
