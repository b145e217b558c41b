"""
CPU reference backend for descriptive statistics.

Order statistics come from the quickselect kernels in robstats.selection;
moments from robstats.descriptive.moments.
"""

from __future__ import annotations

import warnings

from robstats.core.exceptions import ValidationError
from robstats.core.result import Result
from robstats.core.compute.timing import timed
from robstats.core.compute.random import RandomSource, as_generator
from robstats.descriptive.design import SampleDesign
from robstats.descriptive.solution import DescriptiveParams
from robstats.descriptive import moments
from robstats.selection import median, mad


VALID_STATISTICS = frozenset({
    'mean', 'var', 'sd', 'median', 'mad', 'range', 'cor',
})


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_quickselect'

    def solve(
        self,
        design: SampleDesign,
        *,
        compute: set[str],
        other: SampleDesign | None = None,
        rng: RandomSource = None,
        mad_constant: float = 1.0,
    ) -> Result[DescriptiveParams]:
        """
        Compute requested descriptive statistics.

        Parameters
        ----------
        design : SampleDesign
        compute : set of str
            Which statistics to compute. Valid entries:
            'mean', 'var', 'sd', 'median', 'mad', 'range', 'cor'
        other : SampleDesign, optional
            Second sample, required for 'cor'.
        rng : None, int or numpy.random.Generator
            Pivot source for the selection kernels.
        mad_constant : float
            Scale factor applied to the MAD.
        """
        unknown = set(compute) - VALID_STATISTICS
        if unknown:
            raise ValidationError(f"Unknown statistics requested: {sorted(unknown)}")
        if 'cor' in compute and other is None:
            raise ValidationError("'cor' requires a second sample")

        gen = as_generator(rng)
        data = design.data
        n = design.n
        warnings_list: list[str] = []

        mean = None
        variance = None
        sd = None
        med = None
        mad_value = None
        minimum = None
        maximum = None
        correlation = None

        with timed() as timer:
            if compute & {'mean', 'var', 'sd'}:
                with timer.section('mean'):
                    mean = moments.mean(data)

            if compute & {'var', 'sd'}:
                if n < 2:
                    warnings_list.append(
                        f"variance undefined for n={n}; need at least 2 observations"
                    )
                else:
                    with timer.section('variance'):
                        variance = moments.variance(data, n, mean)
                    if 'sd' in compute:
                        sd = variance ** 0.5

            # The kernels rearrange their input, so they get a private copy
            if 'median' in compute:
                with timer.section('median'):
                    med = median(data.copy(), rng=gen)

            if 'mad' in compute:
                with timer.section('mad'):
                    mad_value = mad_constant * mad(data.copy(), rng=gen)

            if 'range' in compute:
                with timer.section('range'):
                    minimum = float(data.min())
                    maximum = float(data.max())

            if 'cor' in compute:
                with timer.section('cor'):
                    with warnings.catch_warnings(record=True) as caught:
                        warnings.simplefilter('always')
                        correlation = moments.correlation(data, other.data)
                    warnings_list.extend(str(w.message) for w in caught)

        params = DescriptiveParams(
            n=n,
            mean=mean if 'mean' in compute else None,
            median=med,
            variance=variance if 'var' in compute else None,
            sd=sd,
            mad=mad_value,
            mad_constant=mad_constant if 'mad' in compute else None,
            minimum=minimum,
            maximum=maximum,
            correlation=correlation,
        )

        return Result(
            params=params,
            info={'computed': sorted(compute)},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
