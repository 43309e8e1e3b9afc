# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Scheme variants.
"""

from __future__ import annotations

from enum import Enum


class Variant(Enum):
    """
    Strategy for deriving a scheme's palettes from its source color.

    The value is the ordinal used when a variant is persisted.
    """
    MONOCHROME = 0
    NEUTRAL = 1
    TONAL_SPOT = 2
    VIBRANT = 3
    EXPRESSIVE = 4
    FIDELITY = 5
    CONTENT = 6
    RAINBOW = 7
    FRUIT_SALAD = 8

    @property
    def label(self) -> str:
        """Display name, e.g. "Tonal spot"."""
        return self.name.replace("_", " ").capitalize()

    @property
    def keeps_source_color(self) -> bool:
        """Whether primary containers reproduce the source color itself."""
        return self in (Variant.FIDELITY, Variant.CONTENT)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Variant":
        """
        Raises:
            ValueError: If ``ordinal`` is not a known variant
        """
        return cls(ordinal)
