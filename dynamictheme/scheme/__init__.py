# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Dynamic schemes and the per-variant palette rules behind them.
"""

from dynamictheme.scheme.rules import VARIANT_RULES, VariantRules, build_palettes
from dynamictheme.scheme.dynamic_scheme import DynamicScheme

__all__ = [
    "DynamicScheme",
    "VARIANT_RULES",
    "VariantRules",
    "build_palettes",
]
