# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""Tests for CAM16 and HCT."""

import itertools

import pytest

from dynamictheme.hct import Cam16, Hct, ViewingConditions
from dynamictheme.utils import color_utils


class TestCam16:
    """CAM16 coordinates of reference colors."""

    def test_red(self):
        cam = Cam16.from_int(0xFFFF0000)
        assert cam.hue == pytest.approx(27.408, abs=0.01)
        assert cam.chroma == pytest.approx(113.357, abs=0.01)
        assert cam.j == pytest.approx(46.445, abs=0.01)
        assert cam.m == pytest.approx(89.494, abs=0.01)
        assert cam.s == pytest.approx(91.889, abs=0.01)
        assert cam.q == pytest.approx(105.988, abs=0.01)

    def test_blue(self):
        cam = Cam16.from_int(0xFF0000FF)
        assert cam.hue == pytest.approx(282.788, abs=0.01)
        assert cam.chroma == pytest.approx(87.230, abs=0.01)
        assert cam.j == pytest.approx(25.465, abs=0.01)

    def test_white(self):
        cam = Cam16.from_int(0xFFFFFFFF)
        assert cam.hue == pytest.approx(209.492, abs=0.01)
        assert cam.chroma == pytest.approx(2.869, abs=0.01)
        assert cam.j == pytest.approx(100.0, abs=0.01)

    @pytest.mark.parametrize("argb", [0xFFFF0000, 0xFF00FF00, 0xFF0000FF, 0xFF6750A4, 0xFF000000, 0xFFFFFFFF])
    def test_to_int_roundtrip(self, argb):
        assert Cam16.from_int(argb).to_int() == argb

    def test_jch_roundtrip(self):
        cam = Cam16.from_int(0xFF6750A4)
        assert Cam16.from_jch(cam.j, cam.chroma, cam.hue).to_int() == 0xFF6750A4

    def test_ucs_roundtrip(self):
        cam = Cam16.from_int(0xFF6750A4)
        assert Cam16.from_ucs(cam.jstar, cam.astar, cam.bstar).to_int() == 0xFF6750A4

    def test_distance(self):
        red = Cam16.from_int(0xFFFF0000)
        blue = Cam16.from_int(0xFF0000FF)
        assert red.distance(red) == pytest.approx(0.0)
        assert red.distance(blue) == pytest.approx(blue.distance(red))
        assert red.distance(blue) > 10.0


class TestHctRoundtrip:
    """Every sRGB color survives a trip through HCT."""

    @pytest.mark.parametrize(
        "rgb", list(itertools.product(range(0, 256, 51), repeat=3))
    )
    def test_roundtrip(self, rgb):
        argb = color_utils.argb_from_rgb(*rgb)
        hct = Hct.from_argb(argb)
        assert Hct.from_hct(hct.hue, hct.chroma, hct.tone).to_argb() == argb


class TestHctGamut:
    """Out-of-gamut requests are mapped into sRGB at fixed hue and tone."""

    @pytest.mark.parametrize("hue", [0.0, 60.0, 120.0, 180.0, 240.0, 300.0])
    @pytest.mark.parametrize("chroma", [0.0, 50.0, 200.0])
    def test_tone_extremes(self, hue, chroma):
        assert Hct.from_hct(hue, chroma, 0.0).argb == 0xFF000000
        assert Hct.from_hct(hue, chroma, 100.0).argb == 0xFFFFFFFF

    @pytest.mark.parametrize("hue", [0.0, 90.0, 180.0, 270.0])
    @pytest.mark.parametrize("tone", [20.0, 50.0, 80.0])
    def test_tone_is_preserved(self, hue, tone):
        hct = Hct.from_hct(hue, 200.0, tone)
        assert hct.tone == pytest.approx(tone, abs=0.5)
        assert hct.chroma < 200.0

    def test_in_gamut_request_is_close(self):
        hct = Hct.from_hct(270.0, 36.0, 50.0)
        assert hct.hue == pytest.approx(270.0, abs=1.0)
        assert hct.chroma == pytest.approx(36.0, abs=1.0)
        assert hct.tone == pytest.approx(50.0, abs=0.5)

    def test_values_in_range(self):
        for argb in (0xFF000000, 0xFFFFFFFF, 0xFFFF0000, 0xFF00FFFF, 0xFF6750A4):
            hct = Hct.from_argb(argb)
            assert 0.0 <= hct.hue < 360.0
            assert hct.chroma >= 0.0
            assert 0.0 <= hct.tone <= 100.0


class TestHctImmutability:
    """with_* methods return new colors."""

    def test_with_tone(self):
        hct = Hct.from_argb(0xFF6750A4)
        lighter = hct.with_tone(80.0)
        assert lighter is not hct
        assert hct.argb == 0xFF6750A4
        assert lighter.tone == pytest.approx(80.0, abs=0.5)
        assert lighter.hue == pytest.approx(hct.hue, abs=2.0)

    def test_with_hue(self):
        hct = Hct.from_argb(0xFF6750A4)
        rotated = hct.with_hue(hct.hue + 180.0)
        assert rotated.tone == pytest.approx(hct.tone, abs=0.5)

    def test_with_chroma_zero_is_gray(self):
        gray = Hct.from_argb(0xFF6750A4).with_chroma(0.0)
        r = color_utils.red_from_argb(gray.argb)
        assert color_utils.green_from_argb(gray.argb) == r
        assert color_utils.blue_from_argb(gray.argb) == r

    def test_frozen(self):
        hct = Hct.from_argb(0xFF6750A4)
        with pytest.raises(AttributeError):
            hct.tone = 10.0

    def test_inconsistent_fields_rejected(self):
        with pytest.raises(ValueError, match="from_argb"):
            Hct(0.0, 0.0, 0.0, 0xFFFFFFFF)

    def test_consistent_fields_accepted(self):
        hct = Hct.from_argb(0xFF6750A4)
        assert Hct(hct.hue, hct.chroma, hct.tone, hct.argb) == hct


class TestViewingConditions:
    """Standard and custom viewing conditions."""

    def test_default_is_standard(self):
        assert ViewingConditions.DEFAULT == ViewingConditions.make()

    def test_same_conditions_roundtrip(self):
        hct = Hct.from_argb(0xFF6750A4)
        seen = hct.in_viewing_conditions(ViewingConditions.DEFAULT)
        assert seen.tone == pytest.approx(hct.tone, abs=0.5)
        assert seen.hue == pytest.approx(hct.hue, abs=1.0)

    def test_dark_background_changes_color(self):
        hct = Hct.from_argb(0xFF6750A4)
        dark_vc = ViewingConditions.default_with_background_lstar(10.0)
        assert hct.in_viewing_conditions(dark_vc).argb != hct.argb
