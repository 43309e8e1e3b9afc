# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Dynamic color schemes.

A DynamicScheme is the complete, resolved color scheme for one
(source color, variant, light/dark, contrast level) combination. It is
an immutable value: the palettes and every role's color are computed once
on construction, and a different source or variant means a new scheme.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Union

from loguru import logger

from dynamictheme.dynamiccolor import material_dynamic_colors
from dynamictheme.dynamiccolor.contrast_level import ContrastLevel
from dynamictheme.dynamiccolor.dynamic_color import DynamicColor
from dynamictheme.dynamiccolor.variant import Variant
from dynamictheme.hct import Hct
from dynamictheme.palettes import TonalPalette
from dynamictheme.scheme.rules import build_palettes
from dynamictheme.scheme.rules import error_palette as default_error_palette
from dynamictheme.utils.color_utils import hex_from_argb
from dynamictheme.utils.math_utils import clamp_double


class DynamicScheme:
    """
    A resolved Material color scheme.

    Build with ``DynamicScheme.create`` for the standard variant palettes,
    or pass palettes directly to the constructor.

    Attributes:
        source_color_hct: The seed color
        variant: Palette derivation strategy
        is_dark: Dark scheme if True
        contrast_level: -1.0 (reduced) to 1.0 (maximum); 0.0 is standard.
            Values outside the range are clamped.
        roles: Read-only mapping of every role name to its packed ARGB
    """

    __slots__ = (
        "_source_color_hct",
        "_variant",
        "_is_dark",
        "_contrast_level",
        "_primary_palette",
        "_secondary_palette",
        "_tertiary_palette",
        "_neutral_palette",
        "_neutral_variant_palette",
        "_error_palette",
        "_tones",
        "_roles",
    )

    def __init__(
        self,
        source_color_hct: Hct,
        variant: Variant,
        is_dark: bool,
        contrast_level: float,
        primary_palette: TonalPalette,
        secondary_palette: TonalPalette,
        tertiary_palette: TonalPalette,
        neutral_palette: TonalPalette,
        neutral_variant_palette: TonalPalette,
        error_palette: Optional[TonalPalette] = None,
    ) -> None:
        self._source_color_hct = source_color_hct
        self._variant = variant
        self._is_dark = is_dark
        self._contrast_level = clamp_double(-1.0, 1.0, contrast_level)
        self._primary_palette = primary_palette
        self._secondary_palette = secondary_palette
        self._tertiary_palette = tertiary_palette
        self._neutral_palette = neutral_palette
        self._neutral_variant_palette = neutral_variant_palette
        self._error_palette = error_palette if error_palette is not None else default_error_palette()

        # Role tones resolved so far; roles share backgrounds and pairs
        self._tones: dict[str, float] = {}
        self._roles: Mapping[str, int] = MappingProxyType({
            name: color.get_argb(self)
            for name, color in material_dynamic_colors.ALL_ROLES.items()
        })

    @classmethod
    def create(
        cls,
        source_argb: int,
        variant: Variant,
        is_dark: bool,
        contrast_level: Union[float, ContrastLevel] = 0.0,
    ) -> "DynamicScheme":
        """
        Build the scheme of ``variant`` for a source color.

        Args:
            source_argb: Seed color, packed ARGB
            variant: Palette derivation strategy
            is_dark: Dark scheme if True
            contrast_level: -1.0 to 1.0 (clamped) or a named ContrastLevel
        """
        if isinstance(contrast_level, ContrastLevel):
            contrast_level = contrast_level.value
        source_hct = Hct.from_argb(source_argb)
        palettes = build_palettes(variant, source_hct)
        scheme = cls(source_hct, variant, is_dark, contrast_level, *palettes)
        logger.debug(
            f"Created {variant.label} {'dark' if is_dark else 'light'} scheme "
            f"for {hex_from_argb(source_argb)} at contrast {scheme.contrast_level}"
        )
        return scheme

    # -------------------------------------------------------------------------
    # Inputs
    # -------------------------------------------------------------------------

    @property
    def source_color_hct(self) -> Hct:
        return self._source_color_hct

    @property
    def source_color_argb(self) -> int:
        return self._source_color_hct.argb

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def is_dark(self) -> bool:
        return self._is_dark

    @property
    def contrast_level(self) -> float:
        return self._contrast_level

    @property
    def primary_palette(self) -> TonalPalette:
        return self._primary_palette

    @property
    def secondary_palette(self) -> TonalPalette:
        return self._secondary_palette

    @property
    def tertiary_palette(self) -> TonalPalette:
        return self._tertiary_palette

    @property
    def neutral_palette(self) -> TonalPalette:
        return self._neutral_palette

    @property
    def neutral_variant_palette(self) -> TonalPalette:
        return self._neutral_variant_palette

    @property
    def error_palette(self) -> TonalPalette:
        return self._error_palette

    # -------------------------------------------------------------------------
    # Roles
    # -------------------------------------------------------------------------

    @property
    def roles(self) -> Mapping[str, int]:
        return self._roles

    def scheme_roles(self) -> dict[str, int]:
        """The 35 scheme roles in export order."""
        return {name: self._roles[name] for name in material_dynamic_colors.SCHEME_ROLE_NAMES}

    def __getitem__(self, role: str) -> int:
        """
        Packed ARGB of a role by name.

        Raises:
            KeyError: If ``role`` is not a known role
        """
        return self._roles[role]

    def get_tone(self, color: DynamicColor) -> float:
        """Resolved tone of ``color`` in this scheme."""
        tone = self._tones.get(color.name)
        if tone is None:
            tone = color.resolve_tone(self)
            self._tones[color.name] = tone
        return tone

    def get_argb(self, color: DynamicColor) -> int:
        return color.get_argb(self)

    def get_hct(self, color: DynamicColor) -> Hct:
        return color.get_hct(self)

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def _key(self) -> tuple:
        return (
            self.source_color_argb,
            self._variant,
            self._is_dark,
            self._contrast_level,
            self._primary_palette,
            self._secondary_palette,
            self._tertiary_palette,
            self._neutral_palette,
            self._neutral_variant_palette,
            self._error_palette,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicScheme):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"DynamicScheme(source={hex_from_argb(self.source_color_argb)}, "
            f"variant={self._variant.name}, is_dark={self._is_dark}, "
            f"contrast_level={self._contrast_level})"
        )
