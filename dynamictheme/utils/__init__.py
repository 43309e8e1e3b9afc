# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Color space conversion and math helpers.
"""

from dynamictheme.utils.color_utils import (
    argb_from_hex,
    argb_from_lab,
    argb_from_lstar,
    argb_from_rgb,
    argb_from_xyz,
    hex_from_argb,
    lab_from_argb,
    lstar_from_argb,
    lstar_from_y,
    xyz_from_argb,
    y_from_lstar,
)

__all__ = [
    "argb_from_rgb",
    "argb_from_xyz",
    "xyz_from_argb",
    "argb_from_lab",
    "lab_from_argb",
    "argb_from_lstar",
    "lstar_from_argb",
    "y_from_lstar",
    "lstar_from_y",
    "hex_from_argb",
    "argb_from_hex",
]
