# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""Tests for tonal palettes, disliked colors and color temperature."""

import pytest

from dynamictheme.dislike import fix_if_disliked, is_disliked
from dynamictheme.hct import Hct
from dynamictheme.palettes import STANDARD_TONES, TonalPalette
from dynamictheme.temperature import TemperatureCache, raw_temperature


class TestTonalPalette:
    """Palette construction and tone lookup."""

    @pytest.mark.parametrize("hue,chroma", [(0.0, 0.0), (25.0, 84.0), (270.0, 36.0), (120.0, 200.0)])
    def test_extremes_are_black_and_white(self, hue, chroma):
        palette = TonalPalette.from_hue_and_chroma(hue, chroma)
        assert palette.tone(0) == 0xFF000000
        assert palette.tone(100) == 0xFFFFFFFF

    def test_standard_tones_precomputed(self):
        palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
        assert tuple(palette.tones) == STANDARD_TONES
        for tone in STANDARD_TONES:
            assert palette.tone(tone) == palette.tones[tone]

    def test_tones_read_only(self):
        palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
        with pytest.raises(TypeError):
            palette.tones[50] = 0

    def test_tone_increases_lightness(self):
        palette = TonalPalette.from_hue_and_chroma(150.0, 40.0)
        tones = [Hct.from_argb(palette.tone(t)).tone for t in (10, 30, 50, 70, 90)]
        assert tones == sorted(tones)

    def test_nonstandard_tone(self):
        palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
        argb = palette.tone(33)
        assert Hct.from_argb(argb).tone == pytest.approx(33.0, abs=0.5)
        assert palette.get_hct(33).argb == argb

    def test_from_argb_keeps_hue_and_chroma(self):
        source = Hct.from_argb(0xFF6750A4)
        palette = TonalPalette.from_argb(0xFF6750A4)
        assert palette.hue == pytest.approx(source.hue)
        assert palette.chroma == pytest.approx(source.chroma)

    def test_from_hct_reproduces_source_tone(self):
        source = Hct.from_argb(0xFF6750A4)
        palette = TonalPalette.from_hct(source)
        result = Hct.from_argb(palette.tone(source.tone))
        assert result.hue == pytest.approx(source.hue, abs=1.0)
        assert result.chroma == pytest.approx(source.chroma, abs=1.0)

    def test_key_color_matches_chroma(self):
        palette = TonalPalette.from_hue_and_chroma(270.0, 16.0)
        assert palette.key_color.chroma == pytest.approx(16.0, abs=1.0)

    def test_key_color_of_high_chroma(self):
        # Unreachable chroma: the key color is the most chromatic tone found
        palette = TonalPalette.from_hue_and_chroma(149.0, 200.0)
        assert palette.key_color.chroma > 60.0

    def test_equality(self):
        a = TonalPalette.from_hue_and_chroma(270.0, 36.0)
        b = TonalPalette.from_hue_and_chroma(270.0, 36.0)
        c = TonalPalette.from_hue_and_chroma(271.0, 36.0)
        assert a == b
        assert hash(a) == hash(b)
        assert a != c


class TestDislike:
    """Dark yellow-green detection and repair."""

    @pytest.mark.parametrize("argb", [0xFF95884B, 0xFF716B40, 0xFF4C4308])
    def test_disliked(self, argb):
        assert is_disliked(Hct.from_argb(argb))

    @pytest.mark.parametrize("argb", [0xFF008772, 0xFF6750A4, 0xFFFFFFFF, 0xFFF0E68C])
    def test_liked(self, argb):
        assert not is_disliked(Hct.from_argb(argb))

    @pytest.mark.parametrize("argb", [0xFF95884B, 0xFF716B40, 0xFF4C4308])
    def test_fix_lightens(self, argb):
        fixed = fix_if_disliked(Hct.from_argb(argb))
        assert fixed.tone == pytest.approx(70.0, abs=1.0)
        assert not is_disliked(fixed)

    def test_fix_leaves_liked_colors(self):
        hct = Hct.from_argb(0xFF008772)
        assert fix_if_disliked(hct) is hct


class TestTemperature:
    """Raw and relative color temperature."""

    @pytest.mark.parametrize(
        "argb,expected",
        [
            (0xFF0000FF, -1.393),
            (0xFFFF0000, 2.351),
            (0xFF00FF00, -0.267),
            (0xFFFFFFFF, -0.5),
            (0xFF000000, -0.5),
        ],
    )
    def test_raw_temperature(self, argb, expected):
        assert raw_temperature(Hct.from_argb(argb)) == pytest.approx(expected, abs=1e-3)

    def test_relative_temperature_range(self):
        cache = TemperatureCache(Hct.from_argb(0xFF6750A4))
        for hct in (cache.coldest, cache.warmest, cache.input):
            assert 0.0 <= cache.get_relative_temperature(hct) <= 1.0
        assert cache.get_relative_temperature(cache.coldest) == pytest.approx(0.0)
        assert cache.get_relative_temperature(cache.warmest) == pytest.approx(1.0)

    def test_complement_of_red_is_cooler(self):
        cache = TemperatureCache(Hct.from_argb(0xFFFF0000))
        complement = cache.get_complement()
        assert cache.get_relative_temperature(complement) < cache.get_relative_temperature(cache.input)

    def test_complement_is_memoized(self):
        cache = TemperatureCache(Hct.from_argb(0xFF0000FF))
        assert cache.get_complement() is cache.get_complement()

    def test_analogous_colors(self):
        source = Hct.from_argb(0xFF0000FF)
        analogous = TemperatureCache(source).get_analogous_colors()
        assert len(analogous) == 5
        assert analogous[2].argb == source.argb

    def test_analogous_colors_custom_count(self):
        source = Hct.from_argb(0xFF6750A4)
        analogous = TemperatureCache(source).get_analogous_colors(3, 6)
        assert len(analogous) == 3
        assert analogous[1].argb == source.argb
