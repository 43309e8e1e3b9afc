# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
The Material color roles.

Every role is a module-level DynamicColor. Roles are stateless rules;
resolving one against a DynamicScheme gives its color in that scheme.

Tone conventions: surfaces sit at tone 98 (light) or 6 (dark), accents at
40/80, containers at 90/30 and "on" roles at the far end of the tone
range from what they sit on.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from dynamictheme.dislike import fix_if_disliked
from dynamictheme.dynamiccolor.contrast_curve import ContrastCurve
from dynamictheme.dynamiccolor.dynamic_color import DynamicColor, foreground_tone
from dynamictheme.dynamiccolor.tone_delta_pair import ToneDeltaPair, TonePolarity
from dynamictheme.dynamiccolor.variant import Variant
from dynamictheme.hct import Hct

if TYPE_CHECKING:
    from dynamictheme.scheme.dynamic_scheme import DynamicScheme


# =============================================================================
# Helpers
# =============================================================================

_TEXT_CURVE = ContrastCurve(4.5, 7.0, 11.0, 21.0)
_ACCENT_CURVE = ContrastCurve(3.0, 4.5, 7.0, 7.0)
_CONTAINER_CURVE = ContrastCurve(1.0, 1.0, 3.0, 4.5)
_VARIANT_TEXT_CURVE = ContrastCurve(3.0, 4.5, 7.0, 11.0)


def _is_fidelity(scheme: "DynamicScheme") -> bool:
    return scheme.variant.keeps_source_color


def _is_monochrome(scheme: "DynamicScheme") -> bool:
    return scheme.variant is Variant.MONOCHROME


def _light_dark(light: float, dark: float):
    return lambda s: dark if s.is_dark else light


def highest_surface(scheme: "DynamicScheme") -> DynamicColor:
    """The surface accent roles are contrasted against."""
    return surface_bright if scheme.is_dark else surface_dim


def find_desired_chroma_by_tone(
    hue: float,
    chroma: float,
    tone: float,
    by_decreasing_tone: bool,
) -> float:
    """
    Tone near ``tone`` at which the palette gets closest to ``chroma``.

    Walks away from ``tone`` one step at a time while chroma keeps rising,
    stopping within 0.4 of the target or once chroma starts falling.
    """
    answer = tone
    closest_to_chroma = Hct.from_hct(hue, chroma, tone)
    if closest_to_chroma.chroma < chroma:
        chroma_peak = closest_to_chroma.chroma
        while closest_to_chroma.chroma < chroma:
            answer += -1.0 if by_decreasing_tone else 1.0
            if not 0.0 <= answer <= 100.0:
                break
            potential_solution = Hct.from_hct(hue, chroma, answer)
            if chroma_peak > potential_solution.chroma:
                break
            if abs(potential_solution.chroma - chroma) < 0.4:
                break

            potential_delta = abs(potential_solution.chroma - chroma)
            current_delta = abs(closest_to_chroma.chroma - chroma)
            if potential_delta < current_delta:
                closest_to_chroma = potential_solution
            chroma_peak = max(chroma_peak, potential_solution.chroma)
    return answer


# =============================================================================
# Palette key colors
# =============================================================================

primary_palette_key_color = DynamicColor.from_palette(
    "primary_palette_key_color",
    lambda s: s.primary_palette,
    lambda s: s.primary_palette.key_color.tone,
)

secondary_palette_key_color = DynamicColor.from_palette(
    "secondary_palette_key_color",
    lambda s: s.secondary_palette,
    lambda s: s.secondary_palette.key_color.tone,
)

tertiary_palette_key_color = DynamicColor.from_palette(
    "tertiary_palette_key_color",
    lambda s: s.tertiary_palette,
    lambda s: s.tertiary_palette.key_color.tone,
)

neutral_palette_key_color = DynamicColor.from_palette(
    "neutral_palette_key_color",
    lambda s: s.neutral_palette,
    lambda s: s.neutral_palette.key_color.tone,
)

neutral_variant_palette_key_color = DynamicColor.from_palette(
    "neutral_variant_palette_key_color",
    lambda s: s.neutral_variant_palette,
    lambda s: s.neutral_variant_palette.key_color.tone,
)


# =============================================================================
# Surfaces
# =============================================================================

background = DynamicColor(
    name="background",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(98.0, 6.0),
    is_background=True,
)

on_background = DynamicColor(
    name="on_background",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(10.0, 90.0),
    background=lambda s: background,
    contrast_curve=ContrastCurve(3.0, 3.0, 4.5, 7.0),
)

surface = DynamicColor(
    name="surface",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(98.0, 6.0),
    is_background=True,
)

surface_dim = DynamicColor(
    name="surface_dim",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(87.0, 6.0),
    is_background=True,
)

surface_bright = DynamicColor(
    name="surface_bright",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(98.0, 24.0),
    is_background=True,
)

surface_container_lowest = DynamicColor(
    name="surface_container_lowest",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(100.0, 4.0),
    is_background=True,
)

surface_container_low = DynamicColor(
    name="surface_container_low",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(96.0, 10.0),
    is_background=True,
)

surface_container = DynamicColor(
    name="surface_container",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(94.0, 12.0),
    is_background=True,
)

surface_container_high = DynamicColor(
    name="surface_container_high",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(92.0, 17.0),
    is_background=True,
)

surface_container_highest = DynamicColor(
    name="surface_container_highest",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(90.0, 22.0),
    is_background=True,
)

on_surface = DynamicColor(
    name="on_surface",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(10.0, 90.0),
    background=highest_surface,
    contrast_curve=_TEXT_CURVE,
)

surface_variant = DynamicColor(
    name="surface_variant",
    palette=lambda s: s.neutral_variant_palette,
    tone=_light_dark(90.0, 30.0),
    is_background=True,
)

on_surface_variant = DynamicColor(
    name="on_surface_variant",
    palette=lambda s: s.neutral_variant_palette,
    tone=_light_dark(30.0, 80.0),
    background=highest_surface,
    contrast_curve=_VARIANT_TEXT_CURVE,
)

inverse_surface = DynamicColor(
    name="inverse_surface",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(20.0, 90.0),
)

inverse_on_surface = DynamicColor(
    name="inverse_on_surface",
    palette=lambda s: s.neutral_palette,
    tone=_light_dark(95.0, 20.0),
    background=lambda s: inverse_surface,
    contrast_curve=_TEXT_CURVE,
)

outline = DynamicColor(
    name="outline",
    palette=lambda s: s.neutral_variant_palette,
    tone=_light_dark(50.0, 60.0),
    background=highest_surface,
    contrast_curve=ContrastCurve(1.5, 3.0, 4.5, 7.0),
)

outline_variant = DynamicColor(
    name="outline_variant",
    palette=lambda s: s.neutral_variant_palette,
    tone=_light_dark(80.0, 30.0),
    background=highest_surface,
    contrast_curve=_CONTAINER_CURVE,
)

shadow = DynamicColor(
    name="shadow",
    palette=lambda s: s.neutral_palette,
    tone=lambda s: 0.0,
)

scrim = DynamicColor(
    name="scrim",
    palette=lambda s: s.neutral_palette,
    tone=lambda s: 0.0,
)

surface_tint = DynamicColor(
    name="surface_tint",
    palette=lambda s: s.primary_palette,
    tone=_light_dark(40.0, 80.0),
    is_background=True,
)


# =============================================================================
# Primary
# =============================================================================


def _primary_tone(s: "DynamicScheme") -> float:
    if _is_monochrome(s):
        return 100.0 if s.is_dark else 0.0
    return 80.0 if s.is_dark else 40.0


def _on_primary_tone(s: "DynamicScheme") -> float:
    if _is_monochrome(s):
        return 10.0 if s.is_dark else 90.0
    return 20.0 if s.is_dark else 100.0


def _primary_container_tone(s: "DynamicScheme") -> float:
    if _is_fidelity(s):
        return s.source_color_hct.tone
    if _is_monochrome(s):
        return 85.0 if s.is_dark else 25.0
    return 30.0 if s.is_dark else 90.0


def _on_primary_container_tone(s: "DynamicScheme") -> float:
    if _is_fidelity(s):
        return foreground_tone(primary_container.tone(s), 4.5)
    if _is_monochrome(s):
        return 0.0 if s.is_dark else 100.0
    return 90.0 if s.is_dark else 10.0


def _primary_pair(s: "DynamicScheme") -> ToneDeltaPair:
    return ToneDeltaPair(primary_container, primary, 10.0, TonePolarity.NEARER, False)


primary = DynamicColor(
    name="primary",
    palette=lambda s: s.primary_palette,
    tone=_primary_tone,
    is_background=True,
    background=highest_surface,
    contrast_curve=_ACCENT_CURVE,
    tone_delta_pair=_primary_pair,
)

on_primary = DynamicColor(
    name="on_primary",
    palette=lambda s: s.primary_palette,
    tone=_on_primary_tone,
    background=lambda s: primary,
    contrast_curve=_TEXT_CURVE,
)

primary_container = DynamicColor(
    name="primary_container",
    palette=lambda s: s.primary_palette,
    tone=_primary_container_tone,
    is_background=True,
    background=highest_surface,
    contrast_curve=_CONTAINER_CURVE,
    tone_delta_pair=_primary_pair,
)

on_primary_container = DynamicColor(
    name="on_primary_container",
    palette=lambda s: s.primary_palette,
    tone=_on_primary_container_tone,
    background=lambda s: primary_container,
    contrast_curve=_TEXT_CURVE,
)

inverse_primary = DynamicColor(
    name="inverse_primary",
    palette=lambda s: s.primary_palette,
    tone=_light_dark(80.0, 40.0),
    background=lambda s: inverse_surface,
    contrast_curve=_ACCENT_CURVE,
)


# =============================================================================
# Secondary
# =============================================================================


def _on_secondary_tone(s: "DynamicScheme") -> float:
    if _is_monochrome(s):
        return 10.0 if s.is_dark else 100.0
    return 20.0 if s.is_dark else 100.0


def _secondary_container_tone(s: "DynamicScheme") -> float:
    initial_tone = 30.0 if s.is_dark else 90.0
    if _is_monochrome(s):
        return 30.0 if s.is_dark else 85.0
    if not _is_fidelity(s):
        return initial_tone
    return find_desired_chroma_by_tone(
        s.secondary_palette.hue,
        s.secondary_palette.chroma,
        initial_tone,
        not s.is_dark,
    )


def _on_secondary_container_tone(s: "DynamicScheme") -> float:
    if not _is_fidelity(s):
        return 90.0 if s.is_dark else 10.0
    return foreground_tone(secondary_container.tone(s), 4.5)


def _secondary_pair(s: "DynamicScheme") -> ToneDeltaPair:
    return ToneDeltaPair(secondary_container, secondary, 10.0, TonePolarity.NEARER, False)


secondary = DynamicColor(
    name="secondary",
    palette=lambda s: s.secondary_palette,
    tone=_light_dark(40.0, 80.0),
    is_background=True,
    background=highest_surface,
    contrast_curve=_ACCENT_CURVE,
    tone_delta_pair=_secondary_pair,
)

on_secondary = DynamicColor(
    name="on_secondary",
    palette=lambda s: s.secondary_palette,
    tone=_on_secondary_tone,
    background=lambda s: secondary,
    contrast_curve=_TEXT_CURVE,
)

secondary_container = DynamicColor(
    name="secondary_container",
    palette=lambda s: s.secondary_palette,
    tone=_secondary_container_tone,
    is_background=True,
    background=highest_surface,
    contrast_curve=_CONTAINER_CURVE,
    tone_delta_pair=_secondary_pair,
)

on_secondary_container = DynamicColor(
    name="on_secondary_container",
    palette=lambda s: s.secondary_palette,
    tone=_on_secondary_container_tone,
    background=lambda s: secondary_container,
    contrast_curve=_TEXT_CURVE,
)


# =============================================================================
# Tertiary
# =============================================================================


def _tertiary_tone(s: "DynamicScheme") -> float:
    if _is_monochrome(s):
        return 90.0 if s.is_dark else 25.0
    return 80.0 if s.is_dark else 40.0


def _on_tertiary_tone(s: "DynamicScheme") -> float:
    if _is_monochrome(s):
        return 10.0 if s.is_dark else 90.0
    return 20.0 if s.is_dark else 100.0


def _tertiary_container_tone(s: "DynamicScheme") -> float:
    if _is_monochrome(s):
        return 60.0 if s.is_dark else 49.0
    if not _is_fidelity(s):
        return 30.0 if s.is_dark else 90.0
    proposed_hct = s.tertiary_palette.get_hct(s.source_color_hct.tone)
    return fix_if_disliked(proposed_hct).tone


def _on_tertiary_container_tone(s: "DynamicScheme") -> float:
    if _is_monochrome(s):
        return 0.0 if s.is_dark else 100.0
    if not _is_fidelity(s):
        return 90.0 if s.is_dark else 10.0
    return foreground_tone(tertiary_container.tone(s), 4.5)


def _tertiary_pair(s: "DynamicScheme") -> ToneDeltaPair:
    return ToneDeltaPair(tertiary_container, tertiary, 10.0, TonePolarity.NEARER, False)


tertiary = DynamicColor(
    name="tertiary",
    palette=lambda s: s.tertiary_palette,
    tone=_tertiary_tone,
    is_background=True,
    background=highest_surface,
    contrast_curve=_ACCENT_CURVE,
    tone_delta_pair=_tertiary_pair,
)

on_tertiary = DynamicColor(
    name="on_tertiary",
    palette=lambda s: s.tertiary_palette,
    tone=_on_tertiary_tone,
    background=lambda s: tertiary,
    contrast_curve=_TEXT_CURVE,
)

tertiary_container = DynamicColor(
    name="tertiary_container",
    palette=lambda s: s.tertiary_palette,
    tone=_tertiary_container_tone,
    is_background=True,
    background=highest_surface,
    contrast_curve=_CONTAINER_CURVE,
    tone_delta_pair=_tertiary_pair,
)

on_tertiary_container = DynamicColor(
    name="on_tertiary_container",
    palette=lambda s: s.tertiary_palette,
    tone=_on_tertiary_container_tone,
    background=lambda s: tertiary_container,
    contrast_curve=_TEXT_CURVE,
)


# =============================================================================
# Error
# =============================================================================


def _error_pair(s: "DynamicScheme") -> ToneDeltaPair:
    return ToneDeltaPair(error_container, error, 10.0, TonePolarity.NEARER, False)


error = DynamicColor(
    name="error",
    palette=lambda s: s.error_palette,
    tone=_light_dark(40.0, 80.0),
    is_background=True,
    background=highest_surface,
    contrast_curve=_ACCENT_CURVE,
    tone_delta_pair=_error_pair,
)

on_error = DynamicColor(
    name="on_error",
    palette=lambda s: s.error_palette,
    tone=_light_dark(100.0, 20.0),
    background=lambda s: error,
    contrast_curve=_TEXT_CURVE,
)

error_container = DynamicColor(
    name="error_container",
    palette=lambda s: s.error_palette,
    tone=_light_dark(90.0, 30.0),
    is_background=True,
    background=highest_surface,
    contrast_curve=_CONTAINER_CURVE,
    tone_delta_pair=_error_pair,
)

on_error_container = DynamicColor(
    name="on_error_container",
    palette=lambda s: s.error_palette,
    tone=_light_dark(10.0, 90.0),
    background=lambda s: error_container,
    contrast_curve=_TEXT_CURVE,
)


# =============================================================================
# Fixed accents
# =============================================================================
#
# Fixed roles have the same tone in light and dark schemes.


def _fixed_roles(
    prefix: str,
    palette,
    fixed_tones: tuple[float, float],
    dim_tones: tuple[float, float],
    on_tones: tuple[float, float],
    on_variant_tones: tuple[float, float],
) -> tuple[DynamicColor, DynamicColor, DynamicColor, DynamicColor]:
    """
    Build (fixed, fixed_dim, on_fixed, on_fixed_variant) for one palette.

    Each tone pair is (monochrome tone, tone for every other variant).
    """

    def pick(tones: tuple[float, float]):
        return lambda s: tones[0] if _is_monochrome(s) else tones[1]

    def pair(s: "DynamicScheme") -> ToneDeltaPair:
        return ToneDeltaPair(fixed, fixed_dim, 10.0, TonePolarity.LIGHTER, True)

    fixed = DynamicColor(
        name=f"{prefix}_fixed",
        palette=palette,
        tone=pick(fixed_tones),
        is_background=True,
        background=highest_surface,
        contrast_curve=_CONTAINER_CURVE,
        tone_delta_pair=pair,
    )
    fixed_dim = DynamicColor(
        name=f"{prefix}_fixed_dim",
        palette=palette,
        tone=pick(dim_tones),
        is_background=True,
        background=highest_surface,
        contrast_curve=_CONTAINER_CURVE,
        tone_delta_pair=pair,
    )
    on_fixed = DynamicColor(
        name=f"on_{prefix}_fixed",
        palette=palette,
        tone=pick(on_tones),
        background=lambda s: fixed_dim,
        second_background=lambda s: fixed,
        contrast_curve=_TEXT_CURVE,
    )
    on_fixed_variant = DynamicColor(
        name=f"on_{prefix}_fixed_variant",
        palette=palette,
        tone=pick(on_variant_tones),
        background=lambda s: fixed_dim,
        second_background=lambda s: fixed,
        contrast_curve=_VARIANT_TEXT_CURVE,
    )
    return fixed, fixed_dim, on_fixed, on_fixed_variant


primary_fixed, primary_fixed_dim, on_primary_fixed, on_primary_fixed_variant = _fixed_roles(
    "primary",
    lambda s: s.primary_palette,
    fixed_tones=(40.0, 90.0),
    dim_tones=(30.0, 80.0),
    on_tones=(100.0, 10.0),
    on_variant_tones=(90.0, 30.0),
)

secondary_fixed, secondary_fixed_dim, on_secondary_fixed, on_secondary_fixed_variant = _fixed_roles(
    "secondary",
    lambda s: s.secondary_palette,
    fixed_tones=(80.0, 90.0),
    dim_tones=(70.0, 80.0),
    on_tones=(10.0, 10.0),
    on_variant_tones=(25.0, 30.0),
)

tertiary_fixed, tertiary_fixed_dim, on_tertiary_fixed, on_tertiary_fixed_variant = _fixed_roles(
    "tertiary",
    lambda s: s.tertiary_palette,
    fixed_tones=(40.0, 90.0),
    dim_tones=(30.0, 80.0),
    on_tones=(100.0, 10.0),
    on_variant_tones=(90.0, 30.0),
)


# =============================================================================
# Role tables
# =============================================================================

# The roles of a color scheme, in export order
SCHEME_ROLES: tuple[DynamicColor, ...] = (
    primary,
    on_primary,
    primary_container,
    on_primary_container,
    secondary,
    on_secondary,
    secondary_container,
    on_secondary_container,
    tertiary,
    on_tertiary,
    tertiary_container,
    on_tertiary_container,
    error,
    on_error,
    error_container,
    on_error_container,
    background,
    on_background,
    surface,
    on_surface,
    surface_variant,
    on_surface_variant,
    outline,
    outline_variant,
    scrim,
    inverse_surface,
    inverse_on_surface,
    inverse_primary,
    surface_dim,
    surface_bright,
    surface_container_lowest,
    surface_container_low,
    surface_container,
    surface_container_high,
    surface_container_highest,
)

SUPPLEMENTARY_ROLES: tuple[DynamicColor, ...] = (
    shadow,
    surface_tint,
    primary_palette_key_color,
    secondary_palette_key_color,
    tertiary_palette_key_color,
    neutral_palette_key_color,
    neutral_variant_palette_key_color,
    primary_fixed,
    primary_fixed_dim,
    on_primary_fixed,
    on_primary_fixed_variant,
    secondary_fixed,
    secondary_fixed_dim,
    on_secondary_fixed,
    on_secondary_fixed_variant,
    tertiary_fixed,
    tertiary_fixed_dim,
    on_tertiary_fixed,
    on_tertiary_fixed_variant,
)

ALL_ROLES: Mapping[str, DynamicColor] = MappingProxyType(
    {color.name: color for color in SCHEME_ROLES + SUPPLEMENTARY_ROLES}
)

SCHEME_ROLE_NAMES: tuple[str, ...] = tuple(color.name for color in SCHEME_ROLES)
