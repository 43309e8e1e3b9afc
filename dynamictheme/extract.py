# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Main extraction API.

Image to ranked source colors, and source color to scheme:

1. Decode and shrink the image to at most 128x128 pixels.
2. Quantize to a few representative colors (Wu, then weighted k-means).
3. Score them as theme seeds, best first.
4. The caller picks a source color and a variant; build the scheme.
"""

from __future__ import annotations

from typing import Optional, Union

from loguru import logger

from dynamictheme.config import ExtractionConfig
from dynamictheme.contrast import ratio_of_tones
from dynamictheme.dynamiccolor.contrast_level import ContrastLevel
from dynamictheme.dynamiccolor.variant import Variant
from dynamictheme.image import ImageInput, image_to_pixels
from dynamictheme.quantize import quantize_celebi
from dynamictheme.scheme import DynamicScheme
from dynamictheme.score import score
from dynamictheme.utils.color_utils import lstar_from_argb

WHITE_ARGB = 0xFFFFFFFF
BLACK_ARGB = 0xFF000000


def extract_colors(
    image: ImageInput,
    config: Optional[ExtractionConfig] = None,
) -> list[int]:
    """
    Extract theme source colors from an image.

    Args:
        image: File path, PIL image or (H, W, 3|4) uint8 array
        config: Extraction settings

    Returns:
        Packed ARGB colors sorted by suitability as a theme source, best
        first. Never empty: when no color in the image is suitable the
        fallback color (Google Blue by default) is returned alone.

    Raises:
        ValueError: If the image has no opaque pixel

    Example:
        >>> from dynamictheme import extract_colors
        >>> colors = extract_colors("wallpaper.png")
        >>> scheme = create_dynamic_color_scheme(colors[0], Variant.TONAL_SPOT, False)
    """
    cfg = config or ExtractionConfig()

    pixels = image_to_pixels(image, canvas_size=cfg.canvas_size)
    logger.debug(f"Extracting from {pixels.size} opaque pixels")

    quantized = quantize_celebi(pixels, cfg.max_colors)
    colors = score(
        quantized,
        desired=cfg.desired,
        fallback_argb=cfg.fallback_argb,
        filter=cfg.filter,
    )
    logger.debug(f"Ranked {len(colors)} source colors from {len(quantized)} clusters")
    return colors


def create_dynamic_color_scheme(
    source_argb: int,
    variant: Variant,
    is_dark: bool,
    contrast_level: Union[ContrastLevel, float] = ContrastLevel.NORMAL,
) -> DynamicScheme:
    """
    Build the scheme for a chosen source color.

    Args:
        source_argb: Seed color, packed ARGB
        variant: Palette derivation strategy
        is_dark: Dark scheme if True
        contrast_level: Named level or any float in [-1.0, 1.0]

    Returns:
        A new DynamicScheme
    """
    return DynamicScheme.create(source_argb, variant, is_dark, contrast_level)


def get_contrast_color(argb: int) -> int:
    """
    White or black, whichever contrasts more with ``argb``.

    Black wins ties.
    """
    tone = lstar_from_argb(argb)
    ratio_white = ratio_of_tones(tone, 100.0)
    ratio_black = ratio_of_tones(tone, 0.0)
    return WHITE_ARGB if ratio_white > ratio_black else BLACK_ARGB
