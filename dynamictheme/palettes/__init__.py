# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Tonal palettes.
"""

from dynamictheme.palettes.tonal_palette import STANDARD_TONES, TonalPalette

__all__ = ["STANDARD_TONES", "TonalPalette"]
