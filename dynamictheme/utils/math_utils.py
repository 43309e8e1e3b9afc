# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Scalar math helpers shared by the color science modules.

Hue arithmetic is always done in degrees and normalized into [0, 360).
"""

from __future__ import annotations

import math
from typing import Sequence


def signum(num: float) -> int:
    """Return -1, 0 or 1 matching the sign of ``num``."""
    if num < 0:
        return -1
    if num == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation; ``amount`` 0 gives ``start``, 1 gives ``stop``."""
    return (1.0 - amount) * start + amount * stop


def clamp_int(low: int, high: int, value: int) -> int:
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp_double(low: float, high: float, value: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves towards positive infinity.

    Python's ``round`` uses banker's rounding, which would make channel
    quantization and tone rounding depend on the parity of the value.
    """
    return math.floor(value + 0.5)


def sanitize_degrees_int(degrees: int) -> int:
    return degrees % 360


def sanitize_degrees_double(degrees: float) -> float:
    degrees = degrees % 360.0
    if degrees >= 360.0:
        degrees -= 360.0
    return degrees


def rotation_direction(from_degrees: float, to_degrees: float) -> float:
    """
    Sign of the shortest rotation from one hue to another.

    Returns:
        1.0 for a counter-clockwise (increasing) rotation, -1.0 otherwise.
    """
    increasing_difference = sanitize_degrees_double(to_degrees - from_degrees)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def difference_degrees(a: float, b: float) -> float:
    """Distance between two hues along the shorter arc, in [0, 180]."""
    return 180.0 - abs(abs(a - b) - 180.0)


def matrix_multiply(
    row: Sequence[float],
    matrix: Sequence[Sequence[float]],
) -> list[float]:
    """Multiply a 3x3 matrix by a column vector."""
    return [
        row[0] * matrix[0][0] + row[1] * matrix[0][1] + row[2] * matrix[0][2],
        row[0] * matrix[1][0] + row[1] * matrix[1][1] + row[2] * matrix[1][2],
        row[0] * matrix[2][0] + row[1] * matrix[2][1] + row[2] * matrix[2][2],
    ]
