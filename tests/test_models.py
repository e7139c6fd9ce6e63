"""Tests for the models module."""

import numpy as np
import pytest

from lipid_adducts.models import IonizationMode, Lipid, Peak, peaks_from_arrays


class TestIonizationMode:
    @pytest.mark.parametrize("value", ["positive", "POS", "+", " Positive "])
    def test_positive(self, value):
        assert IonizationMode.from_string(value) is IonizationMode.POSITIVE

    @pytest.mark.parametrize("value", ["negative", "neg", "-"])
    def test_negative(self, value):
        assert IonizationMode.from_string(value) is IonizationMode.NEGATIVE

    def test_invalid(self):
        with pytest.raises(ValueError):
            IonizationMode.from_string("neutral")


class TestPeak:
    def test_ordered_by_mz(self):
        peaks = sorted([Peak(501.25, 10.0), Peak(500.25, 100.0)])
        assert [p.mz for p in peaks] == [500.25, 501.25]

    def test_value_equality(self):
        assert Peak(500.25, 100.0) == Peak(500.25, 100.0)
        assert len({Peak(500.25, 100.0), Peak(500.25, 100.0)}) == 1

    def test_intensity_breaks_ties(self):
        assert Peak(500.25, 10.0) < Peak(500.25, 100.0)


class TestLipid:
    def test_str(self):
        assert str(Lipid("PC 34:1")) == "PC 34:1"

    def test_hashable(self):
        assert Lipid("PC 34:1", formula="C42H82NO8P") == Lipid("PC 34:1", formula="C42H82NO8P")
        assert len({Lipid("PC 34:1"), Lipid("PC 34:1")}) == 1


class TestPeaksFromArrays:
    def test_sorted_and_deduplicated(self):
        mz = np.array([501.2534, 500.25, 500.25])
        ints = np.array([40.0, 100.0, 100.0])
        peaks = peaks_from_arrays(mz, ints)
        assert peaks == (Peak(500.25, 100.0), Peak(501.2534, 40.0))

    def test_empty(self):
        assert peaks_from_arrays(np.array([]), np.array([])) == ()

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            peaks_from_arrays(np.array([500.0, 501.0]), np.array([1.0]))
