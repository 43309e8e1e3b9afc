# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
HCT: Hue, Chroma, Tone.

A perceptual color space combining CAM16 hue and chroma with CIE L* as
tone. Tone maps directly onto contrast: any two colors whose tones differ
by 40 have at least a 3:1 contrast ratio, and a difference of 50 gives
4.5:1. That property lets schemes be designed around tone alone.

Every Hct is backed by the packed sRGB color it round-trips to. Requests
outside the sRGB gamut are gamut-mapped by reducing chroma at fixed hue
and tone, so the stored chroma may be lower than the requested one.
"""

from __future__ import annotations

from dataclasses import dataclass

from dynamictheme.hct import solver
from dynamictheme.hct.cam16 import Cam16
from dynamictheme.hct.viewing_conditions import ViewingConditions
from dynamictheme.utils import color_utils


@dataclass(frozen=True, slots=True)
class Hct:
    """
    An immutable color in HCT space.

    Construct with ``Hct.from_hct`` or ``Hct.from_argb``; the fields are
    derived from ``argb`` and kept for cheap access. The constructor only
    checks that ``tone`` is the L* of ``argb``; hue and chroma are trusted.

    Attributes:
        hue: Hue in degrees [0, 360)
        chroma: Chroma (>= 0); max depends on hue and tone
        tone: Tone in [0, 100], equal to L*
        argb: Packed sRGB value
    """
    hue: float
    chroma: float
    tone: float
    argb: int

    def __post_init__(self) -> None:
        if abs(self.tone - color_utils.lstar_from_argb(self.argb)) > 1e-6:
            raise ValueError(
                f"tone {self.tone} does not match argb {self.argb:#010x}; "
                "use Hct.from_argb or Hct.from_hct"
            )

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> "Hct":
        """
        Create from perceptual coordinates, gamut-mapping if needed.

        Args:
            hue: Hue in degrees; values outside [0, 360) wrap around
            chroma: Requested chroma
            tone: Tone in [0, 100]
        """
        return cls.from_argb(solver.solve_to_int(hue, chroma, tone))

    @classmethod
    def from_argb(cls, argb: int) -> "Hct":
        argb &= 0xFFFFFFFF
        cam = Cam16.from_int(argb)
        return cls(
            hue=cam.hue,
            chroma=cam.chroma,
            tone=color_utils.lstar_from_argb(argb),
            argb=argb,
        )

    def to_argb(self) -> int:
        return self.argb

    def with_hue(self, new_hue: float) -> "Hct":
        return Hct.from_hct(new_hue, self.chroma, self.tone)

    def with_chroma(self, new_chroma: float) -> "Hct":
        return Hct.from_hct(self.hue, new_chroma, self.tone)

    def with_tone(self, new_tone: float) -> "Hct":
        return Hct.from_hct(self.hue, self.chroma, new_tone)

    def in_viewing_conditions(self, vc: ViewingConditions) -> "Hct":
        """
        The color that looks like this one would under ``vc``.

        Useful for matching colors across backgrounds: converts this color
        to CAM16 under ``vc``, then reads the result back under the
        default conditions.
        """
        cam16 = Cam16.from_int(self.argb)
        viewed_in_vc = cam16.xyz_in_viewing_conditions(vc)
        recast_in_vc = Cam16.from_xyz_in_viewing_conditions(
            viewed_in_vc[0],
            viewed_in_vc[1],
            viewed_in_vc[2],
            ViewingConditions.DEFAULT,
        )
        return Hct.from_hct(
            recast_in_vc.hue,
            recast_in_vc.chroma,
            color_utils.lstar_from_y(viewed_in_vc[1]),
        )

    def __repr__(self) -> str:
        return (
            f"Hct(hue={self.hue:.1f}, chroma={self.chroma:.1f}, "
            f"tone={self.tone:.1f}, hex={color_utils.hex_from_argb(self.argb)})"
        )
