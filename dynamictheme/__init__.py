# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Dynamictheme -- Material dynamic color themes from images.

Extracts theme source colors from an image and derives complete,
contrast-aware Material color schemes from a source color.

Quick start::

    from dynamictheme import Variant, create_dynamic_color_scheme, extract_colors

    colors = extract_colors("wallpaper.png")
    scheme = create_dynamic_color_scheme(colors[0], Variant.TONAL_SPOT, is_dark=False)
    scheme["primary"]        # Packed ARGB
    scheme.scheme_roles()    # All 35 roles

Logging uses loguru and is disabled by default; call
``logger.enable("dynamictheme")`` to see pipeline records.
"""

from __future__ import annotations

__version__ = "1.0.0"

from loguru import logger

from dynamictheme.config import ExtractionConfig, ThemeDefaults
from dynamictheme.dynamiccolor import ContrastLevel, DynamicColor, Variant
from dynamictheme.extract import (
    create_dynamic_color_scheme,
    extract_colors,
    get_contrast_color,
)
from dynamictheme.hct import Hct
from dynamictheme.image import image_to_pixels
from dynamictheme.palettes import TonalPalette
from dynamictheme.runtime import ExportFormat, export_json, export_kotlin
from dynamictheme.scheme import DynamicScheme
from dynamictheme.schema import Swatch, ThemeRecord, UserPreferences
from dynamictheme.utils import argb_from_hex, hex_from_argb

logger.disable("dynamictheme")

__all__ = [
    # Core API
    "extract_colors",
    "create_dynamic_color_scheme",
    "get_contrast_color",
    "image_to_pixels",
    # Types (commonly needed)
    "DynamicScheme",
    "DynamicColor",
    "Variant",
    "ContrastLevel",
    "Hct",
    "TonalPalette",
    # Records and export
    "ThemeRecord",
    "UserPreferences",
    "Swatch",
    "ExportFormat",
    "export_kotlin",
    "export_json",
    # Configuration
    "ExtractionConfig",
    "ThemeDefaults",
    # Helpers
    "hex_from_argb",
    "argb_from_hex",
    # Version
    "__version__",
]
