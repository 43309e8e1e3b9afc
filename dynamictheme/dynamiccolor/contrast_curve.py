# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Contrast ratio targets as a function of contrast level.
"""

from __future__ import annotations

from dataclasses import dataclass

from dynamictheme.utils.math_utils import lerp


@dataclass(frozen=True, slots=True)
class ContrastCurve:
    """
    Piecewise-linear contrast ratio target.

    Attributes:
        low: Ratio at contrast level -1.0
        normal: Ratio at contrast level 0.0
        medium: Ratio at contrast level 0.5
        high: Ratio at contrast level 1.0
    """
    low: float
    normal: float
    medium: float
    high: float

    def get(self, contrast_level: float) -> float:
        """
        Ratio target at ``contrast_level``.

        Levels outside [-1, 1] return the end values.
        """
        if contrast_level <= -1.0:
            return self.low
        if contrast_level < 0.0:
            return lerp(self.low, self.normal, contrast_level + 1.0)
        if contrast_level < 0.5:
            return lerp(self.normal, self.medium, contrast_level / 0.5)
        if contrast_level < 1.0:
            return lerp(self.medium, self.high, (contrast_level - 0.5) / 0.5)
        return self.high
