"""
robstats: robust descriptive statistics for Python.

Median and median absolute deviation by randomized in-place selection
(quickselect), plus mean, sample variance and Pearson correlation.

Submodules:
    selection: partition, select, median, mad (rearrange their input)
    descriptive: moments and the describe()/robust()/cor() pipeline
    core: exceptions, validation, Result envelope, timing
"""

__version__ = "0.1.0"

from robstats import selection
from robstats import descriptive
from robstats.selection import median, mad, select, partition
from robstats.descriptive import mean, variance, sd, correlation, describe

__all__ = [
    "__version__",
    "selection",
    "descriptive",
    "median",
    "mad",
    "select",
    "partition",
    "mean",
    "variance",
    "sd",
    "correlation",
    "describe",
]
