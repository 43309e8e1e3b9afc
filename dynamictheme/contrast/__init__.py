# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Contrast evaluation between tones.
"""

from dynamictheme.contrast.contrast import (
    UNREACHABLE,
    darker,
    darker_unsafe,
    lighter,
    lighter_unsafe,
    ratio_of_tones,
    ratio_of_ys,
)

__all__ = [
    "UNREACHABLE",
    "ratio_of_tones",
    "ratio_of_ys",
    "lighter",
    "lighter_unsafe",
    "darker",
    "darker_unsafe",
]
