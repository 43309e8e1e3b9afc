# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Named contrast levels.
"""

from __future__ import annotations

from enum import Enum


class ContrastLevel(Enum):
    """
    Control points of the contrast level range.

    Any float in [-1.0, 1.0] is a valid contrast level; these are the ones
    with names.
    """
    LOW = -1.0
    NORMAL = 0.0
    MEDIUM = 0.5
    HIGH = 1.0
