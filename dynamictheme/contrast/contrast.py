# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Contrast ratios between tones.

Uses the WCAG relative-luminance formula, (Y_light + 5) / (Y_dark + 5),
with Y on a 0-100 scale. Ratios range from 1.0 (identical) to 21.0
(black on white).

Solvers for a target ratio return ``UNREACHABLE`` instead of raising
when no tone in [0, 100] gets there; the ``*_unsafe`` variants substitute
the extreme tone instead.
"""

from __future__ import annotations

from dynamictheme.utils.color_utils import lstar_from_y, y_from_lstar
from dynamictheme.utils.math_utils import clamp_double


# =============================================================================
# Constants
# =============================================================================

RATIO_MIN = 1.0
RATIO_MAX = 21.0
RATIO_30 = 3.0
RATIO_45 = 4.5
RATIO_70 = 7.0

# Returned by lighter()/darker() when the ratio cannot be reached.
# Never a valid tone.
UNREACHABLE = -1.0

# Tone added/removed beyond the exact answer so the result keeps its
# ratio after the color is gamut-mapped and quantized to 8 bits.
LUMINANCE_GAMUT_MAP_TOLERANCE = 0.4

# Computed ratios may fall short of the requested one by floating point
# error alone; shortfalls below this are accepted.
CONTRAST_RATIO_EPSILON = 0.04


# =============================================================================
# Ratios
# =============================================================================


def ratio_of_ys(y1: float, y2: float) -> float:
    """Contrast ratio of two relative luminances (0-100 scale)."""
    lighter_y = max(y1, y2)
    darker_y = y1 if lighter_y == y2 else y2
    return (lighter_y + 5.0) / (darker_y + 5.0)


def ratio_of_tones(tone_a: float, tone_b: float) -> float:
    """
    Contrast ratio of two tones.

    Symmetric in its arguments. Tones are clamped to [0, 100].

    Returns:
        A ratio in [1.0, 21.0]
    """
    tone_a = clamp_double(0.0, 100.0, tone_a)
    tone_b = clamp_double(0.0, 100.0, tone_b)
    return ratio_of_ys(y_from_lstar(tone_a), y_from_lstar(tone_b))


# =============================================================================
# Solvers
# =============================================================================


def lighter(tone: float, ratio: float) -> float:
    """
    Tone >= ``tone`` with at least ``ratio`` contrast against it.

    Returns:
        The tone, or ``UNREACHABLE`` if no tone up to 100 is enough
    """
    if tone < 0.0 or tone > 100.0:
        return UNREACHABLE

    dark_y = y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    if light_y < 0.0 or light_y > 100.0:
        return UNREACHABLE

    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return UNREACHABLE

    result = lstar_from_y(light_y) + LUMINANCE_GAMUT_MAP_TOLERANCE
    if result < 0 or result > 100:
        return UNREACHABLE
    return result


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like lighter(), but returns 100 when the ratio is unreachable."""
    lighter_safe = lighter(tone, ratio)
    return 100.0 if lighter_safe < 0.0 else lighter_safe


def darker(tone: float, ratio: float) -> float:
    """
    Tone <= ``tone`` with at least ``ratio`` contrast against it.

    Returns:
        The tone, or ``UNREACHABLE`` if no tone down to 0 is enough
    """
    if tone < 0.0 or tone > 100.0:
        return UNREACHABLE

    light_y = y_from_lstar(tone)
    dark_y = ((light_y + 5.0) / ratio) - 5.0
    if dark_y < 0.0 or dark_y > 100.0:
        return UNREACHABLE

    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return UNREACHABLE

    result = lstar_from_y(dark_y) - LUMINANCE_GAMUT_MAP_TOLERANCE
    if result < 0 or result > 100:
        return UNREACHABLE
    return result


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like darker(), but returns 0 when the ratio is unreachable."""
    darker_safe = darker(tone, ratio)
    return max(0.0, darker_safe)
