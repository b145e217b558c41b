"""
Shared compute infrastructure for robstats.

This module provides timing utilities and random source resolution shared
by the selection kernels and the descriptive backends.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/.

Submodules:
    timing: Execution timing utilities
    random: Random source resolution for randomized kernels
"""

from robstats.core.compute.timing import Timer, timed
from robstats.core.compute.random import RandomSource, as_generator

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Randomness
    "RandomSource",
    "as_generator",
]
