"""
Tests for spectral curves and tristimulus integration.
"""

import math

import numpy as np
import pytest

from cie_tables import METAL_TABLES
from prism_colorspace import HDTV, SRGB
from prism_spectral import (
    DAYLIGHT_S0,
    DAYLIGHT_S1,
    DAYLIGHT_S2,
    METAL_SYMBOLS,
    ChromaticSpectralCurve,
    ConstantSpectralCurve,
    IrregularSpectralCurve,
    RegularSpectralCurve,
    get_color_xyz,
    metal_spectral_curves,
    to_color_rgb,
    to_color_xyz,
)


def chromaticity(xyz):
    return np.asarray(xyz)[:2] / np.sum(xyz)


class TestRegularSpectralCurve:
    """Uniform-grid sampling."""

    @pytest.fixture
    def ramp(self):
        return RegularSpectralCurve(300.0, 830.0, [0.0, 1.0])

    def test_endpoints_and_midpoint(self, ramp):
        assert ramp.sample(300.0) == 0.0
        assert ramp.sample(830.0) == 1.0
        assert ramp.sample(565.0) == pytest.approx(0.5)

    def test_clamps_outside_range(self, ramp):
        assert ramp.sample(100.0) == 0.0
        assert ramp.sample(1000.0) == 1.0

    def test_array_sampling(self, ramp):
        out = ramp.sample(np.array([[300.0, 565.0], [830.0, 900.0]]))
        assert out.shape == (2, 2)
        np.testing.assert_allclose(out, [[0.0, 0.5], [1.0, 1.0]])

    def test_monotonic_between_points(self):
        curve = RegularSpectralCurve(400.0, 700.0, [0.0, 1.0, 3.0, 6.0])
        samples = curve.sample(np.linspace(400.0, 700.0, 301))
        assert np.all(np.diff(samples) >= 0.0)

    def test_hits_table_points(self):
        amplitudes = [0.5, 2.0, 1.0, 4.0]
        curve = RegularSpectralCurve(400.0, 700.0, amplitudes)
        np.testing.assert_allclose(curve.sample(curve.wavelengths), amplitudes, atol=1e-12)

    def test_empty_table_samples_zero(self):
        assert RegularSpectralCurve(400.0, 700.0, []).sample(550.0) == 0.0

    def test_nan_wavelength(self, ramp):
        assert math.isnan(ramp.sample(float("nan")))

    def test_defensive_copy(self):
        source = np.array([1.0, 2.0, 3.0])
        curve = RegularSpectralCurve(400.0, 700.0, source)
        source[:] = 0.0
        np.testing.assert_array_equal(curve.amplitudes, [1.0, 2.0, 3.0])
        with pytest.raises(ValueError):
            curve.amplitudes[0] = 5.0

    @pytest.mark.parametrize("start,end", [(700.0, 400.0), (500.0, 500.0)])
    def test_invalid_range(self, start, end):
        with pytest.raises(ValueError):
            RegularSpectralCurve(start, end, [1.0, 2.0])

    def test_rejects_2d_table(self):
        with pytest.raises(ValueError):
            RegularSpectralCurve(400.0, 700.0, np.ones((2, 2)))


class TestIrregularSpectralCurve:
    """Non-uniform grid sampling."""

    @pytest.fixture
    def curve(self):
        return IrregularSpectralCurve([1.0, 3.0, 2.0], [400.0, 500.0, 700.0])

    def test_exact_table_points(self, curve):
        assert curve.sample(400.0) == 1.0
        assert curve.sample(500.0) == 3.0
        assert curve.sample(700.0) == 2.0

    def test_interpolates(self, curve):
        assert curve.sample(450.0) == pytest.approx(2.0)
        assert curve.sample(600.0) == pytest.approx(2.5)

    def test_clamps_outside_range(self, curve):
        assert curve.sample(300.0) == 1.0
        assert curve.sample(800.0) == 2.0

    def test_array_sampling(self, curve):
        np.testing.assert_allclose(curve.sample([300.0, 450.0, 600.0, 800.0]),
                                   [1.0, 2.0, 2.5, 2.0])

    def test_single_entry(self):
        curve = IrregularSpectralCurve([4.0], [550.0])
        assert curve.sample(300.0) == 4.0
        assert curve.sample(900.0) == 4.0

    def test_empty(self):
        assert IrregularSpectralCurve([], []).sample(550.0) == 0.0

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            IrregularSpectralCurve([1.0, 2.0], [400.0, 500.0, 600.0])

    def test_non_monotonic_grid_warns(self):
        with pytest.warns(UserWarning):
            curve = IrregularSpectralCurve([1.0, 2.0, 3.0], [400.0, 600.0, 500.0])
        # Still deterministic: the first crossing in table order is used.
        assert curve.sample(450.0) == pytest.approx(1.25)

    def test_repeated_wavelength(self):
        """A step edge sampled exactly at the repeated wavelength."""
        curve = IrregularSpectralCurve([0.0, 0.0, 1.0, 1.0], [400.0, 500.0, 500.0, 600.0])
        assert curve.sample(500.0) == 1.0
        assert curve.sample(450.0) == 0.0


class TestConstantAndChromatic:
    """Constant and daylight-synthesis curves."""

    def test_constant(self):
        curve = ConstantSpectralCurve(0.7)
        assert curve.sample(555.0) == 0.7
        np.testing.assert_array_equal(curve.sample(np.array([400.0, 500.0])), [0.7, 0.7])

    def test_chromatic_is_basis_combination(self):
        curve = ChromaticSpectralCurve(0.31271, 0.32902)
        wavelengths = np.linspace(300.0, 830.0, 107)
        expected = (DAYLIGHT_S0.sample(wavelengths)
                    + curve.m1 * DAYLIGHT_S1.sample(wavelengths)
                    + curve.m2 * DAYLIGHT_S2.sample(wavelengths))
        np.testing.assert_allclose(curve.sample(wavelengths), expected)

    def test_chromatic_weights(self):
        curve = ChromaticSpectralCurve(0.31271, 0.32902)
        denominator = 0.0241 + 0.2562 * 0.31271 - 0.7341 * 0.32902
        assert curve.m1 == pytest.approx((-1.3515 - 1.7703 * 0.31271 + 5.9114 * 0.32902)
                                         / denominator)
        assert curve.m2 == pytest.approx((0.03 - 31.4424 * 0.31271 + 30.0717 * 0.32902)
                                         / denominator)


class TestTristimulus:
    """Integration against the CIE 1931 observer."""

    def test_result_shape(self):
        xyz = to_color_xyz(ConstantSpectralCurve(1.0))
        assert xyz.shape == (3,)
        assert xyz.dtype == np.float64

    def test_equal_energy_is_neutral(self):
        xyz = to_color_xyz(ConstantSpectralCurve(1.0))
        np.testing.assert_allclose(chromaticity(xyz), [1.0 / 3.0, 1.0 / 3.0], atol=1e-3)
        assert xyz[1] == pytest.approx(106.857, rel=1e-4)

    def test_linear_in_amplitude(self):
        one = to_color_xyz(ConstantSpectralCurve(1.0))
        np.testing.assert_allclose(to_color_xyz(ConstantSpectralCurve(2.5)), 2.5 * one)

    def test_zero_curve(self):
        np.testing.assert_array_equal(to_color_xyz(ConstantSpectralCurve(0.0)), np.zeros(3))

    @pytest.mark.parametrize("x,y", [
        (0.31271, 0.32902),  # D65
        (0.34567, 0.35850),  # D50
        (0.33242, 0.34743),  # D55
        (0.29902, 0.31485),  # D75
        (0.28480, 0.29320),  # ~10000 K
        (0.38050, 0.37680),  # ~4000 K
        (0.64000, 0.33000),  # red primary
        (0.30000, 0.60000),  # green primary
        (0.15000, 0.06000),  # blue primary
        (0.17000, 0.70000),  # spectral green edge
        (0.45000, 0.41000),  # incandescent
    ])
    def test_get_color_xyz_matches_integration(self, x, y):
        direct = get_color_xyz(x, y)
        integrated = to_color_xyz(ChromaticSpectralCurve(x, y))
        np.testing.assert_allclose(direct, integrated, rtol=1e-3, atol=1e-6)

    def test_daylight_chromaticity(self):
        xyz = to_color_xyz(ChromaticSpectralCurve(0.31271, 0.32902))
        np.testing.assert_allclose(chromaticity(xyz), [0.31271, 0.32902], atol=5e-3)

    def test_get_color_xyz_is_fresh(self):
        first = get_color_xyz(0.31271, 0.32902)
        first[:] = 0.0
        assert np.all(get_color_xyz(0.31271, 0.32902) != 0.0)

    @pytest.mark.parametrize("bad", ["D65", 1.0, None, np.ones(3)])
    def test_rejects_non_curves(self, bad):
        with pytest.raises(TypeError):
            to_color_xyz(bad)

    def test_to_color_rgb_default_srgb(self):
        curve = ChromaticSpectralCurve(0.31271, 0.32902)
        np.testing.assert_allclose(to_color_rgb(curve),
                                   SRGB.convert_xyz_to_rgb(to_color_xyz(curve)))

    def test_to_color_rgb_daylight_is_neutral(self):
        rgb = to_color_rgb(ChromaticSpectralCurve(0.31271, 0.32902))
        np.testing.assert_allclose(rgb / rgb.max(), [1.0, 1.0, 1.0], atol=0.05)

    def test_to_color_rgb_other_space(self):
        curve = ConstantSpectralCurve(1.0)
        np.testing.assert_allclose(to_color_rgb(curve, HDTV),
                                   HDTV.convert_xyz_to_rgb(to_color_xyz(curve)))

    def test_to_color_rgb_float32(self):
        rgb = to_color_rgb(ConstantSpectralCurve(1.0), SRGB.astype(np.float32))
        assert rgb.dtype == np.float32


class TestMetals:
    """Tabulated complex refractive indices."""

    def test_symbols(self):
        assert METAL_SYMBOLS == ("Ag", "Al", "Au", "Be", "Cr", "Cu", "Hg")

    @pytest.mark.parametrize("symbol", ["Ag", "Al", "Au", "Be", "Cr", "Cu", "Hg"])
    def test_curves_follow_tables(self, symbol):
        wavelength, eta, k = METAL_TABLES[symbol]
        eta_curve, k_curve = metal_spectral_curves(symbol)
        assert isinstance(eta_curve, IrregularSpectralCurve)
        np.testing.assert_array_equal(eta_curve.sample(wavelength), eta)
        np.testing.assert_array_equal(k_curve.sample(wavelength), k)

    def test_case_insensitive(self):
        assert metal_spectral_curves("au") is metal_spectral_curves("Au")

    def test_unknown_metal(self):
        with pytest.raises(KeyError):
            metal_spectral_curves("Xx")
