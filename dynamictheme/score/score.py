# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Ranking of quantized colors as theme source colors.

A good source color is both common in the image and colorful. Each
candidate is scored by the share of the image covered by nearby hues
(within a 30 degree window) and by how its chroma compares to a target.
The ranked list is then thinned so the chosen colors differ in hue.
"""

from __future__ import annotations

from typing import Mapping

from loguru import logger

from dynamictheme.hct import Hct
from dynamictheme.utils.math_utils import difference_degrees, round_half_up, sanitize_degrees_int


# =============================================================================
# Constants
# =============================================================================

TARGET_CHROMA = 48.0  # A1 chroma
WEIGHT_PROPORTION = 0.7
WEIGHT_CHROMA_ABOVE = 0.3
WEIGHT_CHROMA_BELOW = 0.1
CUTOFF_CHROMA = 5.0
CUTOFF_EXCITED_PROPORTION = 0.01

GOOGLE_BLUE = 0xFF4285F4

_MAX_HUE_DIFFERENCE = 90
_MIN_HUE_DIFFERENCE = 15


def score(
    colors_to_population: Mapping[int, int],
    desired: int = 4,
    fallback_argb: int = GOOGLE_BLUE,
    filter: bool = True,
) -> list[int]:
    """
    Rank colors by suitability as a theme source color.

    Args:
        colors_to_population: Quantizer output, color to pixel count
        desired: Maximum number of colors to return
        fallback_argb: Returned alone when no color qualifies
        filter: Drop colors with chroma below 5 or whose hue neighbourhood
            covers 1% of the image or less

    Returns:
        Colors, best first; never empty
    """
    colors_hct: list[Hct] = []
    hue_population = [0] * 360
    population_sum = 0.0
    for argb, population in colors_to_population.items():
        hct = Hct.from_argb(argb)
        colors_hct.append(hct)
        hue = int(hct.hue) % 360
        hue_population[hue] += population
        population_sum += population

    if population_sum <= 0.0:
        logger.warning(f"No population to score, using fallback {fallback_argb:#010x}")
        return [fallback_argb]

    hue_excited_proportions = [0.0] * 360
    for hue in range(360):
        proportion = hue_population[hue] / population_sum
        for i in range(hue - 14, hue + 16):
            neighbor_hue = sanitize_degrees_int(i)
            hue_excited_proportions[neighbor_hue] += proportion

    scored: list[tuple[Hct, float]] = []
    for hct in colors_hct:
        hue = sanitize_degrees_int(round_half_up(hct.hue))
        proportion = hue_excited_proportions[hue]
        if filter and (hct.chroma < CUTOFF_CHROMA or proportion <= CUTOFF_EXCITED_PROPORTION):
            continue

        proportion_score = proportion * 100.0 * WEIGHT_PROPORTION
        chroma_weight = WEIGHT_CHROMA_BELOW if hct.chroma < TARGET_CHROMA else WEIGHT_CHROMA_ABOVE
        chroma_score = (hct.chroma - TARGET_CHROMA) * chroma_weight
        scored.append((hct, proportion_score + chroma_score))

    # Stable: equal scores keep quantizer order
    scored.sort(key=lambda entry: entry[1], reverse=True)

    chosen: list[Hct] = []
    for min_difference in range(_MAX_HUE_DIFFERENCE, _MIN_HUE_DIFFERENCE - 1, -1):
        chosen = []
        for hct, _ in scored:
            if not any(
                difference_degrees(hct.hue, other.hue) < min_difference
                for other in chosen
            ):
                chosen.append(hct)
            if len(chosen) >= desired:
                break
        if len(chosen) >= desired:
            break

    if not chosen:
        logger.warning(f"No color qualified, using fallback {fallback_argb:#010x}")
        return [fallback_argb]

    logger.debug(f"Scored {len(colors_hct)} colors, chose {len(chosen)}")
    return [hct.argb for hct in chosen]
