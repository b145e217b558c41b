"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from robstats.core.result import Result

if TYPE_CHECKING:
    from robstats.descriptive.design import SampleDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    All fields are optional (None if not computed). describe() populates
    all univariate fields; robust() only median and mad; cor() only
    correlation.
    """
    n: int | None = None

    # Location
    mean: float | None = None
    median: float | None = None

    # Spread
    variance: float | None = None
    sd: float | None = None
    mad: float | None = None
    mad_constant: float | None = None

    # Range
    minimum: float | None = None
    maximum: float | None = None

    # Bivariate
    correlation: float | None = None


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    For cor(), the wrapped design is the x sample.
    """
    _result: Result[DescriptiveParams]
    _design: 'SampleDesign'

    @property
    def n(self) -> int | None:
        """Number of observations used."""
        return self._result.params.n

    @property
    def mean(self) -> float | None:
        return self._result.params.mean

    @property
    def median(self) -> float | None:
        return self._result.params.median

    @property
    def variance(self) -> float | None:
        """Sample variance (Bessel-corrected, n-1)."""
        return self._result.params.variance

    @property
    def sd(self) -> float | None:
        """Sample standard deviation."""
        return self._result.params.sd

    @property
    def mad(self) -> float | None:
        """Median absolute deviation, multiplied by mad_constant."""
        return self._result.params.mad

    @property
    def mad_constant(self) -> float | None:
        return self._result.params.mad_constant

    @property
    def minimum(self) -> float | None:
        return self._result.params.minimum

    @property
    def maximum(self) -> float | None:
        return self._result.params.maximum

    @property
    def correlation(self) -> float | None:
        """Pearson correlation of x and y."""
        return self._result.params.correlation

    # --- Metadata ---

    @property
    def name(self) -> str | None:
        """Sample label from the design."""
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, Any]:
        return self._result.provenance

    def __repr__(self) -> str:
        return f"DescriptiveSolution(n={self.n}, backend={self.backend_name!r})"
