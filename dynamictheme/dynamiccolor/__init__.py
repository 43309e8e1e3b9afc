# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Scheme roles and the rules that resolve them.

``material_dynamic_colors`` holds one DynamicColor per role; resolve a
role against a DynamicScheme (see dynamictheme.scheme) to get its color.
"""

from dynamictheme.dynamiccolor import material_dynamic_colors
from dynamictheme.dynamiccolor.contrast_curve import ContrastCurve
from dynamictheme.dynamiccolor.contrast_level import ContrastLevel
from dynamictheme.dynamiccolor.dynamic_color import DynamicColor
from dynamictheme.dynamiccolor.tone_delta_pair import ToneDeltaPair, TonePolarity
from dynamictheme.dynamiccolor.variant import Variant

__all__ = [
    "ContrastCurve",
    "ContrastLevel",
    "DynamicColor",
    "ToneDeltaPair",
    "TonePolarity",
    "Variant",
    "material_dynamic_colors",
]
