"""
SampleDesign: data wrapper for descriptive statistics.

Wraps a single numeric sample and provides validation and metadata for
the descriptive statistics pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from robstats.core.validation import check_array, check_1d, check_finite
from robstats.core.exceptions import ValidationError


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for descriptive statistics of one sample.

    Wraps a 1-D float64 array of n observations with no missing values.
    Immutable after construction; backends work on copies of the data.

    Construction:
        SampleDesign.from_array(data)
        SampleDesign.from_array(series)   # pandas Series, name is kept
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str | None

    @classmethod
    def from_array(cls, data, *, name: str | None = None) -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D numeric data. Can be a list, numpy array, or anything with a
            .values attribute (pandas Series). A 2D array with a single
            column is flattened.
        name : str, optional
            Label for the sample. Defaults to data.name when present.
        """
        if hasattr(data, 'values'):
            if name is None and getattr(data, 'name', None) is not None:
                name = str(data.name)
            data = data.values

        data_array = np.array(check_array(data, "data"), dtype=np.float64)

        if data_array.ndim == 2 and data_array.shape[1] == 1:
            data_array = data_array.ravel()

        return cls._build(data_array, name=name)

    @classmethod
    def _build(cls, data: NDArray, name: str | None = None) -> SampleDesign:
        """Internal builder with validation."""
        check_1d(data, "data")

        n = data.shape[0]
        if n < 1:
            raise ValidationError(f"Need at least 1 observation, got {n}")

        check_finite(data, "data")

        data.setflags(write=False)
        return cls(_data=data, _n=n, _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Sample values (read-only view)."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str | None:
        """Sample label, or None if not available."""
        return self._name

    def __repr__(self) -> str:
        label = f", name={self._name!r}" if self._name is not None else ""
        return f"SampleDesign(n={self._n}{label})"
