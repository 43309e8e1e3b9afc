# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Two-stage image quantizer.

Wu's box cuts give fast, stable initial centroids; weighted k-means then
refines them in L*a*b* (M. Emre Celebi, "Improving the Performance of
K-Means for Color Quantization", 2011).
"""

from __future__ import annotations

from loguru import logger

from dynamictheme.quantize.quantizer_map import PixelArray
from dynamictheme.quantize.wsmeans import quantize_wsmeans
from dynamictheme.quantize.wu import QuantizerWu


def quantize_celebi(pixels: PixelArray, max_colors: int) -> dict[int, int]:
    """
    Reduce an image to at most ``max_colors`` representative colors.

    Args:
        pixels: Packed ARGB pixels, ideally pre-reduced to ~128x128
        max_colors: Maximum number of output colors (>= 1)

    Returns:
        Mapping of color to pixel count

    Raises:
        ValueError: If ``max_colors`` < 1 or there is no opaque pixel
    """
    wu_result = QuantizerWu().quantize(pixels, max_colors)
    starting_clusters = list(wu_result.keys())
    logger.debug(f"Celebi: {len(starting_clusters)} Wu seeds")
    return quantize_wsmeans(pixels, starting_clusters, max_colors)
