# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Configuration for color extraction and default themes.

Configs are frozen dataclasses passed explicitly to the functions that use
them. There is no global settings object.
"""

from __future__ import annotations

from dataclasses import dataclass

from dynamictheme.dynamiccolor.variant import Variant
from dynamictheme.scheme import DynamicScheme
from dynamictheme.score import GOOGLE_BLUE


@dataclass(frozen=True)
class ExtractionConfig:
    """Configuration for extracting source colors from an image."""

    # Images are resized so neither side exceeds this before quantizing
    canvas_size: int = 128

    # Colors kept by the quantizer
    max_colors: int = 4

    # Colors returned by the scorer
    desired: int = 4

    # Returned when no color in the image is usable as a source
    fallback_argb: int = GOOGLE_BLUE

    # Drop low-chroma and rare colors before ranking
    filter: bool = True

    def __post_init__(self) -> None:
        if self.canvas_size < 1:
            raise ValueError(f"canvas_size must be >= 1, got {self.canvas_size}")
        if self.max_colors < 1:
            raise ValueError(f"max_colors must be >= 1, got {self.max_colors}")
        if self.desired < 1:
            raise ValueError(f"desired must be >= 1, got {self.desired}")


@dataclass(frozen=True)
class ThemeDefaults:
    """The theme used before the user has picked a source color."""

    source_argb: int = GOOGLE_BLUE
    variant: Variant = Variant.TONAL_SPOT
    contrast_level: float = 0.0

    def build(self) -> tuple[DynamicScheme, DynamicScheme]:
        """
        Construct the default schemes.

        Returns:
            (light, dark) DynamicScheme pair
        """
        light = DynamicScheme.create(self.source_argb, self.variant, False, self.contrast_level)
        dark = DynamicScheme.create(self.source_argb, self.variant, True, self.contrast_level)
        return light, dark
