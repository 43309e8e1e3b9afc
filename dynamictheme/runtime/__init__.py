# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Theme export runtime.

Renders a theme for use outside Python:

1. Kotlin -- Jetpack Compose ``Color`` constants
2. JSON -- hex color tokens

Export never alters the scheme; it only formats role colors.
"""

from dynamictheme.runtime.serializers import (
    EXPORT_SCHEMES,
    ExportFormat,
    export_json,
    export_kotlin,
    tokens_dict,
)

__all__ = [
    "export_kotlin",
    "export_json",
    "tokens_dict",
    "ExportFormat",
    "EXPORT_SCHEMES",
]
