"""
Tests for RGB color spaces: matrix derivation, conversions, presets.
"""

import numpy as np
import pytest

from prism_colorspace import (
    ADOBE_RGB_1998,
    COLOR_SPACES,
    HDTV,
    SMPTE_C,
    SRGB,
    ColorSpace,
    build_primary_matrices,
    get_color_space,
)


def chromaticity(xyz):
    xyz = np.asarray(xyz, dtype=np.float64)
    return xyz[:2] / xyz.sum()


class TestPrimaryMatrices:
    """Algebraic derivation of the RGB <-> XYZ matrices."""

    def test_matrices_are_inverse(self):
        m = build_primary_matrices(0.64, 0.33, 0.30, 0.60, 0.15, 0.06, 0.31271, 0.32902)
        np.testing.assert_allclose(m.xyz_to_rgb @ m.rgb_to_xyz, np.eye(3), atol=1e-12)

    def test_white_chromaticity(self):
        m = build_primary_matrices(0.64, 0.33, 0.30, 0.60, 0.15, 0.06, 0.31271, 0.32902)
        np.testing.assert_allclose(m.white_chromaticity,
                                   [0.31271, 0.32902, 1.0 - 0.31271 - 0.32902])
        assert m.white_weights.shape == (3,)

    def test_white_weights(self, preset):
        """Each weight is the unnormalised row evaluated at the white point."""
        (x_r, y_r), (x_g, y_g), (x_b, y_b) = preset.primaries
        x_w, y_w = preset.white_point
        red = np.array([x_r, y_r, 1.0 - x_r - y_r])
        green = np.array([x_g, y_g, 1.0 - x_g - y_g])
        blue = np.array([x_b, y_b, 1.0 - x_b - y_b])
        white = np.array([x_w / y_w, 1.0, (1.0 - x_w - y_w) / y_w])
        rows = np.array([np.cross(green, blue), np.cross(blue, red), np.cross(red, green)])

        np.testing.assert_allclose(preset.white_weights, rows @ white, rtol=1e-9)
        np.testing.assert_allclose(
            preset.matrix_xyz_to_rgb * preset.white_weights[:, np.newaxis], rows,
            rtol=1e-9, atol=1e-12,
        )

    def test_srgb_luminance_row(self):
        """Y row of the sRGB RGB -> XYZ matrix is the Rec.709 luma weights."""
        np.testing.assert_allclose(SRGB.matrix_rgb_to_xyz[1], [0.2126, 0.7152, 0.0722],
                                   atol=1e-3)

    def test_degenerate_white_point_warns(self):
        with pytest.warns(RuntimeWarning):
            space = ColorSpace(0.0, 2.2, 0.64, 0.33, 0.30, 0.60, 0.15, 0.06, 0.3127, 0.0)
        assert not np.all(np.isfinite(space.matrix_rgb_to_xyz))


class TestConversions:
    """RGB <-> XYZ round trips and channel handling."""

    def test_round_trip_all_presets(self, preset, linear_colors):
        xyz = preset.convert_rgb_to_xyz(linear_colors)
        np.testing.assert_allclose(preset.convert_xyz_to_rgb(xyz), linear_colors, atol=1e-9)

    def test_white_maps_to_white_point(self, preset):
        xyz = preset.convert_rgb_to_xyz(np.ones(3))
        np.testing.assert_allclose(xyz, preset.white_point_xyz, rtol=1e-9)
        np.testing.assert_allclose(preset.convert_xyz_to_rgb(preset.white_point_xyz),
                                   np.ones(3), atol=1e-9)

    @pytest.mark.parametrize("channel", [0, 1, 2])
    def test_primaries_map_to_their_chromaticity(self, preset, channel):
        rgb = np.zeros(3)
        rgb[channel] = 1.0
        xy = chromaticity(preset.convert_rgb_to_xyz(rgb))
        np.testing.assert_allclose(xy, preset.primaries[channel], atol=1e-9)

    def test_primaries_round_trip(self, preset):
        primaries = np.eye(3)
        xyz = preset.convert_rgb_to_xyz(primaries)
        np.testing.assert_allclose(preset.convert_xyz_to_rgb(xyz), primaries, atol=1e-9)

    def test_alpha_passthrough(self):
        rgba = np.array([0.2, 0.4, 0.6, 0.3])
        xyza = SRGB.convert_rgb_to_xyz(rgba)
        assert xyza.shape == (4,)
        assert xyza[3] == 0.3
        np.testing.assert_allclose(xyza[:3], SRGB.convert_rgb_to_xyz(rgba[:3]))
        assert SRGB.redo_gamma_correction(rgba)[3] == 0.3
        assert SRGB.undo_gamma_correction(rgba)[3] == 0.3

    def test_batch_shape_preserved(self, rng):
        image = rng.uniform(0.0, 1.0, size=(8, 5, 4))
        assert SRGB.convert_rgb_to_xyz(image).shape == (8, 5, 4)
        assert SRGB.redo_gamma_correction(image).shape == (8, 5, 4)

    def test_input_not_modified(self):
        rgb = np.array([0.2, 0.4, 0.6])
        SRGB.convert_rgb_to_xyz(rgb)
        SRGB.redo_gamma_correction(rgb)
        np.testing.assert_array_equal(rgb, [0.2, 0.4, 0.6])

    def test_accepts_sequences(self):
        np.testing.assert_allclose(SRGB.convert_rgb_to_xyz([1.0, 1.0, 1.0]),
                                   SRGB.white_point_xyz)

    @pytest.mark.parametrize("bad", [np.zeros(2), np.zeros((4, 5)), 1.0])
    def test_bad_shape(self, bad):
        with pytest.raises(ValueError):
            SRGB.convert_rgb_to_xyz(bad)

    def test_none_rejected(self):
        with pytest.raises(TypeError):
            SRGB.convert_xyz_to_rgb(None)


class TestGammaCorrection:
    """Transfer function applied per channel."""

    def test_round_trip_all_presets(self, preset, linear_colors):
        encoded = preset.redo_gamma_correction(linear_colors)
        np.testing.assert_allclose(preset.undo_gamma_correction(encoded), linear_colors,
                                   atol=1e-9)

    def test_srgb_mid_grey(self):
        np.testing.assert_allclose(SRGB.redo_gamma_correction([0.5, 0.5, 0.5]),
                                   [0.735, 0.735, 0.735], atol=1e-3)

    def test_clip_opt_in(self):
        rgb = np.array([-0.25, 0.5, 1.5])
        unclipped = SRGB.redo_gamma_correction(rgb)
        assert unclipped[0] < 0.0 and unclipped[2] > 1.0
        clipped = SRGB.redo_gamma_correction(rgb, clip=True)
        assert clipped[0] == 0.0
        assert clipped[2] == 1.0

    def test_clipped_channels_stay_in_unit_range(self, preset):
        """Out-of-range channels land exactly on 0 or 1 in both directions."""
        rgb = np.array([[-0.5, 1.0, 2.0], [0.0, 1.5, -1.0]])
        expected = np.array([[0.0, 1.0, 1.0], [0.0, 1.0, 0.0]])
        np.testing.assert_array_equal(preset.redo_gamma_correction(rgb, clip=True), expected)
        np.testing.assert_array_equal(preset.undo_gamma_correction(rgb, clip=True), expected)


class TestPrecision:
    """float32 color spaces."""

    def test_astype_float32(self, linear_colors):
        space = SRGB.astype(np.float32)
        assert space.dtype == np.float32
        assert space.matrix_rgb_to_xyz.dtype == np.float32
        xyz = space.convert_rgb_to_xyz(linear_colors)
        assert xyz.dtype == np.float32
        np.testing.assert_allclose(xyz, SRGB.convert_rgb_to_xyz(linear_colors), rtol=1e-5,
                                   atol=1e-6)

    def test_float32_gamma(self):
        space = SRGB.astype(np.float32)
        out = space.redo_gamma_correction(np.array([0.5, 0.5, 0.5], dtype=np.float32))
        assert out.dtype == np.float32
        np.testing.assert_allclose(out, 0.735, atol=1e-3)

    def test_default_dtype(self):
        assert SRGB.dtype == np.float64


class TestColorSpaceState:
    """Immutability and accessors."""

    def test_matrices_read_only(self):
        with pytest.raises(ValueError):
            SRGB.matrix_rgb_to_xyz[0, 0] = 0.0
        with pytest.raises(ValueError):
            SRGB.matrix_xyz_to_rgb[0, 0] = 0.0

    def test_attributes_read_only(self):
        with pytest.raises(AttributeError):
            SRGB.gamma = 1.0

    def test_srgb_parameters(self):
        assert SRGB.break_point == 0.00304
        assert SRGB.gamma == 2.4
        assert SRGB.slope == pytest.approx(12.92, abs=0.01)
        assert SRGB.white_point == (0.31271, 0.32902)
        assert SRGB.primaries == ((0.64, 0.33), (0.30, 0.60), (0.15, 0.06))

    def test_invalid_gamma(self):
        with pytest.raises(ValueError):
            ColorSpace(0.0, 0.0, 0.64, 0.33, 0.30, 0.60, 0.15, 0.06, 0.31271, 0.32902)

    def test_repr_names_space(self):
        assert "sRGB" in repr(SRGB)


class TestPresetRegistry:
    """Lookup of the built-in color spaces."""

    def test_ten_presets(self):
        assert len(COLOR_SPACES) == 10

    @pytest.mark.parametrize("name,expected", [
        ("sRGB", SRGB),
        ("SRGB", SRGB),
        ("Adobe RGB (1998)", ADOBE_RGB_1998),
        ("adobe_rgb_1998", ADOBE_RGB_1998),
        ("SMPTE-C", SMPTE_C),
        ("hdtv", HDTV),
    ])
    def test_lookup(self, name, expected):
        assert get_color_space(name) is expected

    def test_unknown(self):
        with pytest.raises(KeyError):
            get_color_space("ProPhoto")
