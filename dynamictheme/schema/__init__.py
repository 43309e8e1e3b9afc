# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Records for persisting and displaying themes.

All types are immutable (frozen dataclasses). A record stores a source
color and a variant; schemes are always regenerated from those.
"""

from dynamictheme.schema.theme import (
    CACHED_ROLES,
    INVALID_ID,
    NOT_SAVED_ID,
    Swatch,
    ThemeRecord,
    UserPreferences,
    swatches_from_colors,
)

__all__ = [
    "ThemeRecord",
    "UserPreferences",
    "Swatch",
    "swatches_from_colors",
    "CACHED_ROLES",
    "INVALID_ID",
    "NOT_SAVED_ID",
]
