# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Tonal palettes.

A tonal palette is every tone of one hue and chroma. Chroma is reduced
where the gamut cannot reach it, most visibly near black and white, so
tone 0 is always pure black and tone 100 pure white.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from dynamictheme.hct import Hct
from dynamictheme.utils.math_utils import round_half_up


# Tones precomputed for every palette: the Material tone stops plus the
# surface tones used by dynamic color roles.
STANDARD_TONES: tuple[int, ...] = (
    0, 4, 5, 6, 10, 12, 15, 17, 20, 22, 24, 25, 30, 35, 40, 45, 50,
    55, 60, 65, 70, 75, 80, 85, 87, 90, 92, 94, 95, 96, 98, 99, 100,
)


class TonalPalette:
    """
    The tone ramp of one hue and chroma.

    Immutable. The standard tones are computed on construction; any other
    tone is computed on request without being stored.
    """

    __slots__ = ("_hue", "_chroma", "_key_color", "_tones")

    def __init__(self, hue: float, chroma: float, key_color: Hct) -> None:
        self._hue = hue
        self._chroma = chroma
        self._key_color = key_color
        self._tones: Mapping[int, int] = MappingProxyType(
            {t: Hct.from_hct(hue, chroma, t).argb for t in STANDARD_TONES}
        )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_argb(cls, argb: int) -> "TonalPalette":
        """Palette with the hue and chroma of ``argb``."""
        return cls.from_hct(Hct.from_argb(argb))

    @classmethod
    def from_hct(cls, hct: Hct) -> "TonalPalette":
        return cls(hct.hue, hct.chroma, hct)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> "TonalPalette":
        return cls(hue, chroma, create_key_color(hue, chroma))

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def chroma(self) -> float:
        return self._chroma

    @property
    def key_color(self) -> Hct:
        return self._key_color

    @property
    def tones(self) -> Mapping[int, int]:
        """Read-only view of the precomputed standard tones."""
        return self._tones

    def tone(self, tone: float) -> int:
        """
        Packed ARGB of this palette at ``tone``.

        Args:
            tone: Tone in [0, 100]; fractional tones are supported
        """
        if tone in self._tones:
            return self._tones[tone]
        return Hct.from_hct(self._hue, self._chroma, tone).argb

    def get_hct(self, tone: float) -> Hct:
        return Hct.from_hct(self._hue, self._chroma, tone)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TonalPalette):
            return NotImplemented
        return self._hue == other._hue and self._chroma == other._chroma

    def __hash__(self) -> int:
        return hash((self._hue, self._chroma))

    def __repr__(self) -> str:
        return f"TonalPalette(hue={self._hue:.1f}, chroma={self._chroma:.1f})"


def create_key_color(hue: float, chroma: float) -> Hct:
    """
    The color of the palette whose chroma best matches ``chroma``.

    Searches outward from tone 50, one tone at a time, and stops as soon
    as the rounded chroma matches.
    """
    start_tone = 50.0
    smallest_delta_hct = Hct.from_hct(hue, chroma, start_tone)
    smallest_delta = abs(smallest_delta_hct.chroma - chroma)

    delta = 1.0
    while delta < 50.0:
        if round_half_up(chroma) == round_half_up(smallest_delta_hct.chroma):
            return smallest_delta_hct

        hct_add = Hct.from_hct(hue, chroma, start_tone + delta)
        hct_add_delta = abs(hct_add.chroma - chroma)
        if hct_add_delta < smallest_delta:
            smallest_delta = hct_add_delta
            smallest_delta_hct = hct_add

        hct_subtract = Hct.from_hct(hue, chroma, start_tone - delta)
        hct_subtract_delta = abs(hct_subtract.chroma - chroma)
        if hct_subtract_delta < smallest_delta:
            smallest_delta = hct_subtract_delta
            smallest_delta_hct = hct_subtract

        delta += 1.0

    return smallest_delta_hct
