# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""Tests for sRGB / XYZ / L*a*b* conversions and math helpers."""

import numpy as np
import pytest

from dynamictheme.utils import color_utils, math_utils


class TestPacking:
    """Packed ARGB integers split into and build from channels."""

    def test_argb_from_rgb(self):
        assert color_utils.argb_from_rgb(0x67, 0x50, 0xA4) == 0xFF6750A4

    def test_channels(self):
        argb = 0x80123456
        assert color_utils.alpha_from_argb(argb) == 0x80
        assert color_utils.red_from_argb(argb) == 0x12
        assert color_utils.green_from_argb(argb) == 0x34
        assert color_utils.blue_from_argb(argb) == 0x56

    def test_is_opaque(self):
        assert color_utils.is_opaque(0xFF000000)
        assert not color_utils.is_opaque(0xFE000000)


class TestHex:
    """Hex string helpers."""

    def test_hex_from_argb(self):
        assert color_utils.hex_from_argb(0xFF6750A4) == "#6750A4"

    def test_hex_drops_alpha(self):
        assert color_utils.hex_from_argb(0x806750A4) == "#6750A4"

    def test_argb_from_six_digits(self):
        assert color_utils.argb_from_hex("#6750a4") == 0xFF6750A4

    def test_argb_from_six_digits_without_hash(self):
        assert color_utils.argb_from_hex("6750A4") == 0xFF6750A4

    def test_argb_from_eight_digits(self):
        assert color_utils.argb_from_hex("#806750A4") == 0x806750A4

    @pytest.mark.parametrize("bad", ["", "#FFF", "#GGGGGG", "#12345", "#1234567"])
    def test_malformed_raises(self, bad):
        with pytest.raises(ValueError):
            color_utils.argb_from_hex(bad)


class TestLstar:
    """L* and relative luminance."""

    def test_y_from_lstar_midpoint(self):
        assert color_utils.y_from_lstar(50.0) == pytest.approx(18.418651851244416, abs=1e-8)

    def test_lstar_y_roundtrip(self):
        for lstar in np.linspace(0.0, 100.0, 21):
            y = color_utils.y_from_lstar(lstar)
            assert color_utils.lstar_from_y(y) == pytest.approx(lstar, abs=1e-8)

    def test_black_and_white(self):
        assert color_utils.lstar_from_argb(0xFF000000) == pytest.approx(0.0, abs=1e-6)
        assert color_utils.lstar_from_argb(0xFFFFFFFF) == pytest.approx(100.0, abs=1e-4)

    def test_argb_from_lstar_is_gray(self):
        argb = color_utils.argb_from_lstar(50.0)
        r = color_utils.red_from_argb(argb)
        assert color_utils.green_from_argb(argb) == r
        assert color_utils.blue_from_argb(argb) == r


class TestXyzLab:
    """XYZ and L*a*b* roundtrips through packed sRGB."""

    @pytest.mark.parametrize("argb", [0xFF000000, 0xFFFFFFFF, 0xFFFF0000, 0xFF00FF00, 0xFF0000FF, 0xFF6750A4])
    def test_xyz_roundtrip(self, argb):
        x, y, z = color_utils.xyz_from_argb(argb)
        assert color_utils.argb_from_xyz(x, y, z) == argb

    @pytest.mark.parametrize("argb", [0xFF000000, 0xFFFFFFFF, 0xFFFF0000, 0xFF00FF00, 0xFF0000FF, 0xFF6750A4])
    def test_lab_roundtrip(self, argb):
        l, a, b = color_utils.lab_from_argb(argb)
        assert color_utils.argb_from_lab(l, a, b) == argb

    def test_white_xyz_is_white_point(self):
        xyz = color_utils.xyz_from_argb(0xFFFFFFFF)
        np.testing.assert_allclose(xyz, color_utils.white_point_d65(), atol=1e-2)

    def test_linearized_delinearized(self):
        for component in (0, 1, 10, 128, 200, 255):
            assert color_utils.delinearized(color_utils.linearized(component)) == component


class TestArrays:
    """Vectorized conversions agree with the scalar ones."""

    def test_argb_array_from_rgb(self):
        rgb = np.array([[0x67, 0x50, 0xA4], [0, 0, 0]], dtype=np.uint8)
        packed = color_utils.argb_array_from_rgb(rgb)
        assert packed.dtype == np.uint32
        assert packed.tolist() == [0xFF6750A4, 0xFF000000]

    def test_rgb_array_roundtrip(self):
        argb = np.array([0xFF6750A4, 0xFF112233], dtype=np.uint32)
        rgb = color_utils.rgb_array_from_argb(argb)
        np.testing.assert_array_equal(color_utils.argb_array_from_rgb(rgb), argb)

    def test_lab_array_matches_scalar(self):
        colors = [0xFF6750A4, 0xFFFF0000, 0xFF00FF00, 0xFF808080]
        lab = color_utils.lab_from_argb_array(np.array(colors, dtype=np.uint32))
        expected = np.array([color_utils.lab_from_argb(c) for c in colors])
        np.testing.assert_allclose(lab, expected, atol=1e-9)

    def test_bad_shape_raises(self):
        with pytest.raises(ValueError):
            color_utils.argb_array_from_rgb(np.zeros((4, 2), dtype=np.uint8))


class TestMathUtils:
    """Degree and rounding helpers."""

    def test_sanitize_degrees(self):
        assert math_utils.sanitize_degrees_double(-30.0) == pytest.approx(330.0)
        assert math_utils.sanitize_degrees_double(360.0) == pytest.approx(0.0)
        assert math_utils.sanitize_degrees_int(725) == 5

    def test_difference_degrees(self):
        assert math_utils.difference_degrees(350.0, 10.0) == pytest.approx(20.0)
        assert math_utils.difference_degrees(10.0, 350.0) == pytest.approx(20.0)

    def test_rotation_direction(self):
        assert math_utils.rotation_direction(350.0, 10.0) == 1.0
        assert math_utils.rotation_direction(10.0, 350.0) == -1.0

    def test_round_half_up(self):
        assert math_utils.round_half_up(0.5) == 1
        assert math_utils.round_half_up(2.5) == 3
        assert math_utils.round_half_up(-0.5) == 0

    def test_clamp(self):
        assert math_utils.clamp_double(0.0, 1.0, 1.5) == 1.0
        assert math_utils.clamp_int(0, 10, -3) == 0
