"""
Tests for describe(), robust() and SampleDesign.
"""

import numpy as np
import pytest
from scipy import stats

from robstats.core.exceptions import DimensionError, ValidationError
from robstats.descriptive import (
    describe, robust, NORMAL_MAD_CONSTANT,
    SampleDesign, DescriptiveSolution,
)


class TestSampleDesign:
    """Test SampleDesign construction and validation."""

    def test_from_list(self):
        design = SampleDesign.from_array([6, 1, 2, 5, 9])
        assert design.n == 5
        assert design.name is None
        assert design.data.dtype == np.float64
        np.testing.assert_array_equal(design.data, [6.0, 1.0, 2.0, 5.0, 9.0])

    def test_column_vector_flattened(self):
        design = SampleDesign.from_array(np.array([[1.0], [2.0], [3.0]]))
        assert design.data.shape == (3,)

    def test_data_is_copied_and_read_only(self):
        source = np.array([3.0, 1.0, 2.0])
        design = SampleDesign.from_array(source)
        source[0] = 99.0
        assert design.data[0] == 3.0
        with pytest.raises(ValueError):
            design.data[0] = 0.0

    def test_name_keyword(self):
        design = SampleDesign.from_array([1, 2], name="height")
        assert design.name == "height"

    def test_pandas_series_name(self):
        pd = pytest.importorskip("pandas")
        design = SampleDesign.from_array(pd.Series([1.0, 2.0, 3.0], name="weight"))
        assert design.name == "weight"
        assert design.n == 3

    def test_rejects_matrix(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            SampleDesign.from_array(np.ones((3, 2)))

    def test_rejects_empty(self):
        with pytest.raises(ValidationError, match="at least 1 observation"):
            SampleDesign.from_array([])

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            SampleDesign.from_array([1.0, np.nan])

    def test_rejects_inf(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            SampleDesign.from_array([1.0, np.inf])

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            SampleDesign.from_array(["a", "b"])

    def test_repr(self):
        r = repr(SampleDesign.from_array([1, 2, 3], name="x"))
        assert "n=3" in r
        assert "'x'" in r


class TestDescribe:
    """Test the describe() front end."""

    def test_known_values(self):
        result = describe([6, 1, 2, 5, 9], seed=1)
        assert isinstance(result, DescriptiveSolution)
        assert result.n == 5
        assert result.median == 5.0
        assert result.mad == 3.0
        assert result.mean == pytest.approx(4.6)
        assert result.variance == pytest.approx(np.var([6, 1, 2, 5, 9], ddof=1))
        assert result.sd == pytest.approx(np.std([6, 1, 2, 5, 9], ddof=1))
        assert result.minimum == 1.0
        assert result.maximum == 9.0

    def test_even_length(self):
        result = describe([2, 1, 8, 6])
        assert result.median == 4.0
        assert result.mad == 2.5

    def test_does_not_modify_input(self):
        data = np.array([6.0, 1.0, 2.0, 5.0, 9.0])
        describe(data)
        np.testing.assert_array_equal(data, [6.0, 1.0, 2.0, 5.0, 9.0])

    def test_matches_numpy_and_scipy(self, normal_sample):
        result = describe(normal_sample, seed=0)
        assert result.median == np.median(normal_sample)
        np.testing.assert_allclose(
            result.mad, stats.median_abs_deviation(normal_sample), rtol=1e-14
        )
        np.testing.assert_allclose(result.mean, np.mean(normal_sample), rtol=1e-14)

    def test_normal_mad_constant(self, normal_sample):
        result = describe(normal_sample, mad_constant=NORMAL_MAD_CONSTANT)
        expected = stats.median_abs_deviation(normal_sample, scale=1 / NORMAL_MAD_CONSTANT)
        np.testing.assert_allclose(result.mad, expected, rtol=1e-12)
        assert result.mad_constant == NORMAL_MAD_CONSTANT

    def test_single_observation(self):
        result = describe([3.0])
        assert result.median == 3.0
        assert result.mad == 0.0
        assert result.mean == 3.0
        assert result.variance is None
        assert result.sd is None
        assert any("variance undefined" in w for w in result.warnings)

    def test_metadata(self):
        result = describe([1, 2, 3], seed=5)
        assert result.backend_name == 'cpu_quickselect'
        assert set(result.info['computed']) == {
            'mean', 'var', 'sd', 'median', 'mad', 'range',
        }
        assert 'total_seconds' in result.timing
        assert 'median' in result.timing
        assert 'robstats_version' in result.provenance
        assert result.warnings == ()
        assert result.correlation is None

    def test_accepts_design(self):
        design = SampleDesign.from_array([1, 2, 3], name="x")
        result = describe(design)
        assert result.name == "x"
        assert result.median == 2.0

    def test_invalid_mad_constant(self):
        with pytest.raises(ValidationError, match="mad_constant"):
            describe([1, 2, 3], mad_constant=0.0)
        with pytest.raises(ValidationError, match="mad_constant"):
            describe([1, 2, 3], mad_constant=float('inf'))
        with pytest.raises(ValidationError, match="mad_constant"):
            describe([1, 2, 3], mad_constant="wide")

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            describe([1, 2, 3], backend='gpu')


class TestRobust:
    """Test robust(): median and MAD only."""

    def test_only_median_and_mad(self):
        result = robust([6, 1, 2, 5, 9])
        assert result.median == 5.0
        assert result.mad == 3.0
        assert result.mean is None
        assert result.variance is None
        assert result.minimum is None

    def test_outlier_resistance(self):
        clean = robust([1.0, 2.0, 3.0, 4.0, 5.0])
        dirty = robust([1.0, 2.0, 3.0, 4.0, 1e9])
        assert clean.median == dirty.median
        assert clean.mad == dirty.mad

    def test_seed_does_not_change_values(self, tied_sample):
        values = {(r.median, r.mad) for r in (robust(tied_sample, seed=s) for s in range(5))}
        assert len(values) == 1
