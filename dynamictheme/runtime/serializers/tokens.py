# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
JSON token serializer.

The same data as the Kotlin export, as a JSON document of hex strings
keyed by scheme and role.

Example output::

    {
      "source": "#6750A4",
      "variant": "tonal_spot",
      "schemes": {
        "light": { "primary": "#65558F", "onPrimary": "#FFFFFF", ... },
        "lightMediumContrast": { ... },
        ...
      }
    }
"""

from __future__ import annotations

import json

from dynamictheme.dynamiccolor.variant import Variant
from dynamictheme.runtime.serializers.base import ExportFormat, camel_case, export_schemes
from dynamictheme.utils.color_utils import hex_from_argb


def tokens_dict(source_argb: int, variant: Variant) -> dict:
    """Theme tokens as a plain dictionary."""
    schemes = {}
    for postfix, scheme in export_schemes(source_argb, variant):
        key = postfix[0].lower() + postfix[1:]
        schemes[key] = {
            camel_case(role): hex_from_argb(argb)
            for role, argb in scheme.scheme_roles().items()
        }
    return {
        "source": hex_from_argb(source_argb),
        "variant": variant.name.lower(),
        "schemes": schemes,
    }


def export_json(
    source_argb: int,
    variant: Variant,
    *,
    format: ExportFormat = ExportFormat.JSON_PRETTY,
) -> str:
    """
    Export a theme as JSON tokens.

    Args:
        source_argb: Seed color, packed ARGB
        variant: Scheme variant
        format: JSON (compact) or JSON_PRETTY

    Raises:
        ValueError: If ``format`` is not a JSON format
    """
    data = tokens_dict(source_argb, variant)
    if format is ExportFormat.JSON:
        return json.dumps(data, separators=(",", ":"))
    if format is ExportFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    raise ValueError(f"Token export supports JSON formats only, got {format}")
