# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Kotlin source serializer.

Renders a theme as Jetpack Compose color constants: one ``val`` per scheme
role for each of the six exported schemes (light and dark, each at normal,
medium and high contrast).

Example output::

    package com.example.dynamictheme

    import androidx.compose.ui.graphics.Color

    val primaryLight = Color(0xFF415F91)
    val onPrimaryLight = Color(0xFFFFFFFF)
    ...
"""

from __future__ import annotations

from dynamictheme.dynamiccolor.variant import Variant
from dynamictheme.runtime.serializers.base import camel_case, export_schemes

DEFAULT_PACKAGE = "com.example.dynamictheme"


def kotlin_color_literal(argb: int) -> str:
    """``Color(0xAARRGGBB)`` with uppercase hex digits."""
    return f"Color(0x{argb & 0xFFFFFFFF:08X})"


def export_kotlin(
    source_argb: int,
    variant: Variant,
    *,
    package: str = DEFAULT_PACKAGE,
) -> str:
    """
    Export a theme as Kotlin source.

    Args:
        source_argb: Seed color, packed ARGB
        variant: Scheme variant
        package: Kotlin package declaration of the generated file

    Returns:
        Kotlin source text, newline terminated
    """
    lines = [
        f"package {package}",
        "",
        "import androidx.compose.ui.graphics.Color",
        "",
    ]
    for postfix, scheme in export_schemes(source_argb, variant):
        for role, argb in scheme.scheme_roles().items():
            lines.append(f"val {camel_case(role)}{postfix} = {kotlin_color_literal(argb)}")
        lines.append("")
    return "\n".join(lines)
