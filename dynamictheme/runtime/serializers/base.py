# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""Base types and utilities for export serializers."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from dynamictheme.dynamiccolor.contrast_level import ContrastLevel
from dynamictheme.dynamiccolor.variant import Variant
from dynamictheme.scheme import DynamicScheme


class ExportFormat(Enum):
    """Output format for theme export."""

    KOTLIN = "kotlin"
    JSON = "json"
    JSON_PRETTY = "json_pretty"


# (name postfix, is_dark, contrast level) of every exported scheme, in order
EXPORT_SCHEMES: tuple[tuple[str, bool, ContrastLevel], ...] = (
    ("Light", False, ContrastLevel.NORMAL),
    ("LightMediumContrast", False, ContrastLevel.MEDIUM),
    ("LightHighContrast", False, ContrastLevel.HIGH),
    ("Dark", True, ContrastLevel.NORMAL),
    ("DarkMediumContrast", True, ContrastLevel.MEDIUM),
    ("DarkHighContrast", True, ContrastLevel.HIGH),
)


def camel_case(name: str) -> str:
    """snake_case role name to camelCase ("on_primary" -> "onPrimary")."""
    first, *rest = name.split("_")
    return first + "".join(word.capitalize() for word in rest)


def export_schemes(source_argb: int, variant: Variant) -> Iterator[tuple[str, DynamicScheme]]:
    """Yield (postfix, scheme) for each entry of EXPORT_SCHEMES."""
    for postfix, is_dark, contrast_level in EXPORT_SCHEMES:
        yield postfix, DynamicScheme.create(source_argb, variant, is_dark, contrast_level)
