# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Serializers for theme export.

Each serializer regenerates the six exported schemes of a (source color,
variant) theme and renders their roles in one output language.
"""

from dynamictheme.runtime.serializers.base import EXPORT_SCHEMES, ExportFormat
from dynamictheme.runtime.serializers.kotlin import export_kotlin
from dynamictheme.runtime.serializers.tokens import export_json, tokens_dict

__all__ = [
    "EXPORT_SCHEMES",
    "ExportFormat",
    "export_kotlin",
    "export_json",
    "tokens_dict",
]
