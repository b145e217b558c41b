"""
Descriptive statistics module.

Kernels (operate directly on a sequence, no wrapping):
    mean(xs)            - Arithmetic mean
    variance(xs)        - Sample variance (Bessel-corrected)
    sd(xs)              - Sample standard deviation
    correlation(xs, ys) - Pearson correlation coefficient

Pipeline (validated, never modifies the caller's data):
    describe(data)  - n, mean, variance, sd, median, MAD, min, max
    robust(data)    - Median and MAD
    cor(x, y)       - Pearson correlation
"""

from robstats.descriptive.moments import mean, variance, sd, correlation
from robstats.descriptive.design import SampleDesign
from robstats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from robstats.descriptive.solvers import (
    describe,
    robust,
    cor,
    NORMAL_MAD_CONSTANT,
)

__all__ = [
    "mean",
    "variance",
    "sd",
    "correlation",
    "describe",
    "robust",
    "cor",
    "NORMAL_MAD_CONSTANT",
    "SampleDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
