# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Variant palette rules.

Each variant derives five tonal palettes (primary, secondary, tertiary,
neutral, neutral variant) from the source color. VARIANT_RULES holds one
small rule object per variant and palette; a rule maps the source color
to a palette and can be tested on its own.

Notation in the rule docstrings: h is the source hue, c the source chroma.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Protocol

from dynamictheme.dislike import fix_if_disliked
from dynamictheme.dynamiccolor.variant import Variant
from dynamictheme.hct import Hct
from dynamictheme.palettes import TonalPalette
from dynamictheme.temperature import TemperatureCache
from dynamictheme.utils.math_utils import sanitize_degrees_double


class PaletteRule(Protocol):
    def apply(self, source: Hct) -> TonalPalette:
        ...


# =============================================================================
# Rules
# =============================================================================


@dataclass(frozen=True, slots=True)
class FixedChroma:
    """Palette at (h + hue_offset, chroma)."""
    chroma: float
    hue_offset: float = 0.0

    def apply(self, source: Hct) -> TonalPalette:
        hue = sanitize_degrees_double(source.hue + self.hue_offset)
        return TonalPalette.from_hue_and_chroma(hue, self.chroma)


@dataclass(frozen=True, slots=True)
class RotatedHue:
    """
    Palette at (h + rotation, chroma).

    The rotation depends on which hue band the source falls in:
    ``rotations[i]`` applies when hues[i] < h < hues[i + 1].
    """
    hues: tuple[float, ...]
    rotations: tuple[float, ...]
    chroma: float

    def apply(self, source: Hct) -> TonalPalette:
        hue = get_rotated_hue(source, self.hues, self.rotations)
        return TonalPalette.from_hue_and_chroma(hue, self.chroma)


@dataclass(frozen=True, slots=True)
class ScaledChroma:
    """Palette at (h, c * scale + offset)."""
    scale: float = 1.0
    offset: float = 0.0

    def apply(self, source: Hct) -> TonalPalette:
        return TonalPalette.from_hue_and_chroma(
            source.hue, source.chroma * self.scale + self.offset
        )


@dataclass(frozen=True, slots=True)
class ReducedChroma:
    """Palette at (h, max(c - reduction, c * floor_scale))."""
    reduction: float = 32.0
    floor_scale: float = 0.5

    def apply(self, source: Hct) -> TonalPalette:
        chroma = max(source.chroma - self.reduction, source.chroma * self.floor_scale)
        return TonalPalette.from_hue_and_chroma(source.hue, chroma)


@dataclass(frozen=True, slots=True)
class AnalogousColor:
    """
    Palette of one of the source's analogous colors, lightened if disliked.

    Attributes:
        count: Number of analogous colors to generate
        divisions: Temperature steps around the hue circle
        index: Which analogous color to use
    """
    count: int = 3
    divisions: int = 6
    index: int = 2

    def apply(self, source: Hct) -> TonalPalette:
        analogous = TemperatureCache(source).get_analogous_colors(self.count, self.divisions)
        return TonalPalette.from_hct(fix_if_disliked(analogous[self.index]))


@dataclass(frozen=True, slots=True)
class ComplementColor:
    """Palette of the source's temperature complement, lightened if disliked."""

    def apply(self, source: Hct) -> TonalPalette:
        complement = TemperatureCache(source).get_complement()
        return TonalPalette.from_hct(fix_if_disliked(complement))


def get_rotated_hue(
    source: Hct,
    hues: tuple[float, ...],
    rotations: tuple[float, ...],
) -> float:
    """
    Rotate the source hue by the rotation of the band it falls in.

    A single rotation applies everywhere. A source hue on a band edge is
    returned unrotated.
    """
    source_hue = source.hue
    if len(rotations) == 1:
        return sanitize_degrees_double(source_hue + rotations[0])
    for i in range(len(hues) - 1):
        if hues[i] < source_hue < hues[i + 1]:
            return sanitize_degrees_double(source_hue + rotations[i])
    return source_hue


# =============================================================================
# Variant table
# =============================================================================


@dataclass(frozen=True, slots=True)
class VariantRules:
    primary: PaletteRule
    secondary: PaletteRule
    tertiary: PaletteRule
    neutral: PaletteRule
    neutral_variant: PaletteRule

    def build(self, source: Hct) -> tuple[TonalPalette, ...]:
        """
        Returns:
            (primary, secondary, tertiary, neutral, neutral_variant)
        """
        return (
            self.primary.apply(source),
            self.secondary.apply(source),
            self.tertiary.apply(source),
            self.neutral.apply(source),
            self.neutral_variant.apply(source),
        )


VIBRANT_HUES = (0.0, 41.0, 61.0, 101.0, 131.0, 181.0, 251.0, 301.0, 360.0)
VIBRANT_SECONDARY_ROTATIONS = (18.0, 15.0, 10.0, 12.0, 15.0, 18.0, 15.0, 12.0, 12.0)
VIBRANT_TERTIARY_ROTATIONS = (35.0, 30.0, 20.0, 25.0, 30.0, 35.0, 30.0, 25.0, 25.0)

EXPRESSIVE_HUES = (0.0, 21.0, 51.0, 121.0, 151.0, 191.0, 271.0, 321.0, 360.0)
EXPRESSIVE_SECONDARY_ROTATIONS = (45.0, 95.0, 45.0, 20.0, 45.0, 90.0, 45.0, 45.0, 45.0)
EXPRESSIVE_TERTIARY_ROTATIONS = (120.0, 120.0, 20.0, 45.0, 20.0, 15.0, 20.0, 120.0, 120.0)

# Content and Fidelity keep the source color; they differ only in tertiary
_SOURCE_PRIMARY = ScaledChroma()
_SOURCE_SECONDARY = ReducedChroma(reduction=32.0, floor_scale=0.5)
_SOURCE_NEUTRAL = ScaledChroma(scale=1.0 / 8.0)
_SOURCE_NEUTRAL_VARIANT = ScaledChroma(scale=1.0 / 8.0, offset=4.0)

VARIANT_RULES: Mapping[Variant, VariantRules] = MappingProxyType({
    Variant.MONOCHROME: VariantRules(
        primary=FixedChroma(0.0),
        secondary=FixedChroma(0.0),
        tertiary=FixedChroma(0.0),
        neutral=FixedChroma(0.0),
        neutral_variant=FixedChroma(0.0),
    ),
    Variant.NEUTRAL: VariantRules(
        primary=FixedChroma(12.0),
        secondary=FixedChroma(8.0),
        tertiary=FixedChroma(16.0),
        neutral=FixedChroma(2.0),
        neutral_variant=FixedChroma(2.0),
    ),
    Variant.TONAL_SPOT: VariantRules(
        primary=FixedChroma(36.0),
        secondary=FixedChroma(16.0),
        tertiary=FixedChroma(24.0, hue_offset=60.0),
        neutral=FixedChroma(6.0),
        neutral_variant=FixedChroma(8.0),
    ),
    Variant.VIBRANT: VariantRules(
        primary=FixedChroma(200.0),
        secondary=RotatedHue(VIBRANT_HUES, VIBRANT_SECONDARY_ROTATIONS, 24.0),
        tertiary=RotatedHue(VIBRANT_HUES, VIBRANT_TERTIARY_ROTATIONS, 32.0),
        neutral=FixedChroma(10.0),
        neutral_variant=FixedChroma(12.0),
    ),
    Variant.EXPRESSIVE: VariantRules(
        primary=FixedChroma(40.0, hue_offset=240.0),
        secondary=RotatedHue(EXPRESSIVE_HUES, EXPRESSIVE_SECONDARY_ROTATIONS, 24.0),
        tertiary=RotatedHue(EXPRESSIVE_HUES, EXPRESSIVE_TERTIARY_ROTATIONS, 32.0),
        neutral=FixedChroma(8.0, hue_offset=15.0),
        neutral_variant=FixedChroma(12.0, hue_offset=15.0),
    ),
    Variant.FIDELITY: VariantRules(
        primary=_SOURCE_PRIMARY,
        secondary=_SOURCE_SECONDARY,
        tertiary=ComplementColor(),
        neutral=_SOURCE_NEUTRAL,
        neutral_variant=_SOURCE_NEUTRAL_VARIANT,
    ),
    Variant.CONTENT: VariantRules(
        primary=_SOURCE_PRIMARY,
        secondary=_SOURCE_SECONDARY,
        tertiary=AnalogousColor(count=3, divisions=6, index=2),
        neutral=_SOURCE_NEUTRAL,
        neutral_variant=_SOURCE_NEUTRAL_VARIANT,
    ),
    Variant.RAINBOW: VariantRules(
        primary=FixedChroma(48.0),
        secondary=FixedChroma(16.0),
        tertiary=FixedChroma(24.0, hue_offset=60.0),
        neutral=FixedChroma(0.0),
        neutral_variant=FixedChroma(0.0),
    ),
    Variant.FRUIT_SALAD: VariantRules(
        primary=FixedChroma(48.0, hue_offset=-50.0),
        secondary=FixedChroma(36.0, hue_offset=-50.0),
        tertiary=FixedChroma(36.0),
        neutral=FixedChroma(10.0),
        neutral_variant=FixedChroma(16.0),
    ),
})

# Error palette shared by every variant
ERROR_HUE = 25.0
ERROR_CHROMA = 84.0


def build_palettes(variant: Variant, source: Hct) -> tuple[TonalPalette, ...]:
    """
    The five palettes of ``variant`` for ``source``.

    Returns:
        (primary, secondary, tertiary, neutral, neutral_variant)
    """
    return VARIANT_RULES[variant].build(source)


def error_palette() -> TonalPalette:
    return TonalPalette.from_hue_and_chroma(ERROR_HUE, ERROR_CHROMA)
