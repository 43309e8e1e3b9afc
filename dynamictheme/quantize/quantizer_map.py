# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Exact color counting.

The first pass of every quantizer: collapse a pixel array into its
distinct opaque colors and their pixel counts.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

PixelArray = Union[Sequence[int], NDArray[np.integer]]


def as_pixel_array(pixels: PixelArray) -> NDArray[np.uint32]:
    """
    Normalize a pixel sequence to a flat uint32 array of packed ARGB.

    Raises:
        ValueError: If the input is empty
    """
    arr = np.asarray(pixels)
    if arr.size == 0:
        raise ValueError("Cannot quantize empty pixel array")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Pixels must be packed ARGB integers, got dtype {arr.dtype}")
    return (arr.reshape(-1).astype(np.int64) & 0xFFFFFFFF).astype(np.uint32)


def opaque_pixels(pixels: PixelArray) -> NDArray[np.uint32]:
    """
    Keep only fully opaque pixels.

    Raises:
        ValueError: If the input is empty or has no opaque pixel
    """
    arr = as_pixel_array(pixels)
    opaque = arr[(arr >> np.uint32(24)) == 255]
    if opaque.size == 0:
        raise ValueError("Cannot quantize image without opaque pixels")
    return opaque


def count_colors(pixels: PixelArray) -> tuple[NDArray[np.uint32], NDArray[np.int64]]:
    """
    Distinct opaque colors and their counts, in order of first appearance.

    Returns:
        (colors, counts) as parallel arrays
    """
    opaque = opaque_pixels(pixels)
    colors, first_index, counts = np.unique(
        opaque, return_index=True, return_counts=True
    )
    order = np.argsort(first_index, kind="stable")
    return colors[order], counts[order].astype(np.int64)


def quantize_map(pixels: PixelArray) -> dict[int, int]:
    """
    Count every distinct opaque color.

    Pixels with alpha below 255 are ignored.

    Args:
        pixels: Packed ARGB pixels (list or array, any shape)

    Returns:
        Mapping of color to pixel count, ordered by first appearance
    """
    colors, counts = count_colors(pixels)
    return {int(c): int(n) for c, n in zip(colors, counts)}
