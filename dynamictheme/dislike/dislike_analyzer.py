# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Detection and repair of universally disliked colors.

Dark yellow-greens (bile, mud) rank as the least liked colors across
cultures in color preference studies (Palmer & Schloss, "An ecological
valence theory of human color preference", PNAS 2010). Lightening them
turns them into pleasant khakis and limes.
"""

from __future__ import annotations

from dynamictheme.hct import Hct
from dynamictheme.utils.math_utils import round_half_up

DISLIKED_HUE_RANGE = (90, 111)
DISLIKED_CHROMA_ABOVE = 16
DISLIKED_TONE_BELOW = 65
FIXED_TONE = 70.0


def is_disliked(hct: Hct) -> bool:
    """True for dark, noticeably colorful yellow-greens."""
    hue = round_half_up(hct.hue)
    hue_passes = DISLIKED_HUE_RANGE[0] <= hue <= DISLIKED_HUE_RANGE[1]
    chroma_passes = round_half_up(hct.chroma) > DISLIKED_CHROMA_ABOVE
    tone_passes = round_half_up(hct.tone) < DISLIKED_TONE_BELOW
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Lighten a disliked color to tone 70; return any other color unchanged."""
    if is_disliked(hct):
        return Hct.from_hct(hct.hue, hct.chroma, FIXED_TONE)
    return hct
