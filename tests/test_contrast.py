# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""Tests for tone contrast ratios and contrast solvers."""

import numpy as np
import pytest

from dynamictheme.contrast import (
    UNREACHABLE,
    darker,
    darker_unsafe,
    lighter,
    lighter_unsafe,
    ratio_of_tones,
)
from dynamictheme.utils.color_utils import lstar_from_argb

TONES = np.linspace(0.0, 100.0, 11)
RATIOS = (1.0, 1.5, 3.0, 4.5, 7.0, 11.0, 21.0)


class TestRatioOfTones:
    """Contrast ratio bounds and symmetry."""

    def test_black_white_is_maximum(self):
        assert ratio_of_tones(0.0, 100.0) == pytest.approx(21.0)

    def test_same_tone_is_one(self):
        for tone in TONES:
            assert ratio_of_tones(tone, tone) == pytest.approx(1.0)

    def test_symmetric(self):
        for a in TONES:
            for b in TONES:
                assert ratio_of_tones(a, b) == ratio_of_tones(b, a)

    def test_bounds(self):
        for a in TONES:
            for b in TONES:
                assert 1.0 <= ratio_of_tones(a, b) <= 21.0 + 1e-9

    def test_out_of_range_tones_are_clamped(self):
        assert ratio_of_tones(-10.0, 120.0) == pytest.approx(21.0)

    def test_increases_with_distance(self):
        ratios = [ratio_of_tones(50.0, t) for t in (50.0, 60.0, 70.0, 80.0, 90.0, 100.0)]
        assert ratios == sorted(ratios)


class TestSolvers:
    """lighter / darker and their unsafe variants."""

    def test_reference_green(self):
        tone = lstar_from_argb(0xFF00AA00)
        assert tone == pytest.approx(60.56, abs=0.01)
        assert darker(tone, 3.0) == pytest.approx(29.63, abs=0.02)
        assert lighter(tone, 3.0) == pytest.approx(98.93, abs=0.02)

    def test_reference_green_unreachable(self):
        tone = lstar_from_argb(0xFF00AA00)
        assert darker(tone, 7.0) == UNREACHABLE
        assert lighter(tone, 7.0) == UNREACHABLE
        assert darker_unsafe(tone, 7.0) == 0.0
        assert lighter_unsafe(tone, 7.0) == 100.0

    def test_lighter_meets_ratio(self):
        for tone in TONES:
            for ratio in RATIOS:
                result = lighter(tone, ratio)
                if result != UNREACHABLE:
                    assert result >= tone
                    assert ratio_of_tones(tone, result) >= ratio

    def test_darker_meets_ratio(self):
        for tone in TONES:
            for ratio in RATIOS:
                result = darker(tone, ratio)
                if result != UNREACHABLE:
                    assert result <= tone
                    assert ratio_of_tones(tone, result) >= ratio

    def test_unsafe_never_unreachable(self):
        for tone in TONES:
            for ratio in RATIOS:
                assert 0.0 <= lighter_unsafe(tone, ratio) <= 100.0
                assert 0.0 <= darker_unsafe(tone, ratio) <= 100.0

    def test_invalid_tone_is_unreachable(self):
        assert lighter(-1.0, 3.0) == UNREACHABLE
        assert darker(101.0, 3.0) == UNREACHABLE

    def test_white_cannot_get_lighter(self):
        assert lighter(100.0, 3.0) == UNREACHABLE
        assert darker(0.0, 3.0) == UNREACHABLE
