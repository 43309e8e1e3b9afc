# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Wu color quantization.

Greedy variance-minimizing box cuts in RGB space (Xiaolin Wu, "Efficient
Statistical Computations for Optimal Color Quantization", Graphics Gems II,
1991).

Colors are bucketed into a 33x33x33 histogram over the top 5 bits of each
channel. Cumulative moments let the weight, channel sums and squared norm
of any box be read off with 8 lookups, so every candidate cut is evaluated
in constant time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
from loguru import logger
from numpy.typing import NDArray

from dynamictheme.quantize.quantizer_map import PixelArray, count_colors
from dynamictheme.utils.color_utils import argb_from_rgb


# =============================================================================
# Constants
# =============================================================================

INDEX_BITS = 5
SIDE_LENGTH = (1 << INDEX_BITS) + 1  # 33: index 0 is the empty border


class Direction(Enum):
    RED = 0
    GREEN = 1
    BLUE = 2


@dataclass
class _Box:
    """Half-open box (r0, r1] x (g0, g1] x (b0, b1] in histogram indices."""
    r0: int = 0
    r1: int = 0
    g0: int = 0
    g1: int = 0
    b0: int = 0
    b1: int = 0
    vol: int = 0

    def update_volume(self) -> None:
        self.vol = (self.r1 - self.r0) * (self.g1 - self.g0) * (self.b1 - self.b0)


@dataclass(frozen=True, slots=True)
class _MaximizeResult:
    cut_location: int  # -1 when no valid cut exists
    maximum: float


# =============================================================================
# Quantizer
# =============================================================================


class QuantizerWu:
    """
    Wu box-cut quantizer.

    One instance holds the moment tables of a single quantize() call;
    quantize() rebuilds them on every call.
    """

    def __init__(self) -> None:
        shape = (SIDE_LENGTH, SIDE_LENGTH, SIDE_LENGTH)
        self.weights: NDArray[np.float64] = np.zeros(shape)
        self.moments_r: NDArray[np.float64] = np.zeros(shape)
        self.moments_g: NDArray[np.float64] = np.zeros(shape)
        self.moments_b: NDArray[np.float64] = np.zeros(shape)
        self.moments: NDArray[np.float64] = np.zeros(shape)
        self.cubes: list[_Box] = []

    def quantize(self, pixels: PixelArray, max_colors: int) -> dict[int, int]:
        """
        Reduce pixels to at most ``max_colors`` box averages.

        Args:
            pixels: Packed ARGB pixels; non-opaque pixels are ignored
            max_colors: Maximum number of output colors (>= 1)

        Returns:
            Mapping of box-average color to the number of pixels in the box,
            in box creation order

        Raises:
            ValueError: If ``max_colors`` < 1 or there is no opaque pixel
        """
        if max_colors < 1:
            raise ValueError(f"max_colors must be >= 1, got {max_colors}")

        colors, counts = count_colors(pixels)
        self._construct_histogram(colors, counts)
        self._create_moments()
        result_count = self._create_boxes(max_colors)
        result = self._create_result(result_count)
        logger.debug(
            f"Wu: {len(colors)} distinct colors -> {len(result)} boxes "
            f"(max {max_colors})"
        )
        return result

    # -------------------------------------------------------------------------
    # Histogram
    # -------------------------------------------------------------------------

    def _construct_histogram(
        self,
        colors: NDArray[np.uint32],
        counts: NDArray[np.int64],
    ) -> None:
        shape = (SIDE_LENGTH, SIDE_LENGTH, SIDE_LENGTH)
        self.weights = np.zeros(shape)
        self.moments_r = np.zeros(shape)
        self.moments_g = np.zeros(shape)
        self.moments_b = np.zeros(shape)
        self.moments = np.zeros(shape)

        red = ((colors >> 16) & 0xFF).astype(np.int64)
        green = ((colors >> 8) & 0xFF).astype(np.int64)
        blue = (colors & 0xFF).astype(np.int64)

        bits_to_remove = 8 - INDEX_BITS
        index = (
            (red >> bits_to_remove) + 1,
            (green >> bits_to_remove) + 1,
            (blue >> bits_to_remove) + 1,
        )
        weight = counts.astype(np.float64)
        np.add.at(self.weights, index, weight)
        np.add.at(self.moments_r, index, red * weight)
        np.add.at(self.moments_g, index, green * weight)
        np.add.at(self.moments_b, index, blue * weight)
        np.add.at(self.moments, index, weight * (red * red + green * green + blue * blue))

    def _create_moments(self) -> None:
        """Turn the histogram into cumulative moments over all three axes."""
        for name in ("weights", "moments_r", "moments_g", "moments_b", "moments"):
            table = getattr(self, name)
            table = np.cumsum(table, axis=0)
            table = np.cumsum(table, axis=1)
            table = np.cumsum(table, axis=2)
            setattr(self, name, table)

    # -------------------------------------------------------------------------
    # Box splitting
    # -------------------------------------------------------------------------

    def _create_boxes(self, max_color_count: int) -> int:
        """
        Split the full histogram into up to ``max_color_count`` boxes.

        Returns:
            Number of boxes actually produced
        """
        self.cubes = [_Box() for _ in range(max_color_count)]
        volume_variance = [0.0] * max_color_count

        first = self.cubes[0]
        first.r1 = first.g1 = first.b1 = SIDE_LENGTH - 1
        first.update_volume()

        generated_color_count = max_color_count
        next_index = 0
        i = 1
        while i < max_color_count:
            if self._cut(self.cubes[next_index], self.cubes[i]):
                current = self.cubes[next_index]
                volume_variance[next_index] = self._variance(current) if current.vol > 1 else 0.0
                new_box = self.cubes[i]
                volume_variance[i] = self._variance(new_box) if new_box.vol > 1 else 0.0
            else:
                volume_variance[next_index] = 0.0
                i -= 1

            next_index = 0
            temp = volume_variance[0]
            for j in range(1, i + 1):
                if volume_variance[j] > temp:
                    temp = volume_variance[j]
                    next_index = j
            if temp <= 0.0:
                generated_color_count = i + 1
                break
            i += 1

        return generated_color_count

    def _create_result(self, color_count: int) -> dict[int, int]:
        result: dict[int, int] = {}
        for cube in self.cubes[:color_count]:
            weight = self._volume(cube, self.weights)
            if weight <= 0:
                continue
            r = int(self._volume(cube, self.moments_r) / weight)
            g = int(self._volume(cube, self.moments_g) / weight)
            b = int(self._volume(cube, self.moments_b) / weight)
            color = argb_from_rgb(r, g, b)
            result[color] = result.get(color, 0) + int(round(weight))
        return result

    def _variance(self, cube: _Box) -> float:
        dr = self._volume(cube, self.moments_r)
        dg = self._volume(cube, self.moments_g)
        db = self._volume(cube, self.moments_b)
        xx = self._volume(cube, self.moments)
        hypotenuse = dr * dr + dg * dg + db * db
        volume = self._volume(cube, self.weights)
        return xx - hypotenuse / volume

    def _cut(self, one: _Box, two: _Box) -> bool:
        """
        Split ``one`` in place, writing the upper half into ``two``.

        Returns:
            False if ``one`` cannot be split
        """
        whole_r = self._volume(one, self.moments_r)
        whole_g = self._volume(one, self.moments_g)
        whole_b = self._volume(one, self.moments_b)
        whole_w = self._volume(one, self.weights)

        max_r_result = self._maximize(
            one, Direction.RED, one.r0 + 1, one.r1, whole_r, whole_g, whole_b, whole_w
        )
        max_g_result = self._maximize(
            one, Direction.GREEN, one.g0 + 1, one.g1, whole_r, whole_g, whole_b, whole_w
        )
        max_b_result = self._maximize(
            one, Direction.BLUE, one.b0 + 1, one.b1, whole_r, whole_g, whole_b, whole_w
        )
        max_r = max_r_result.maximum
        max_g = max_g_result.maximum
        max_b = max_b_result.maximum

        # Ties go to red, then green
        if max_r >= max_g and max_r >= max_b:
            if max_r_result.cut_location < 0:
                return False
            cut_direction = Direction.RED
        elif max_g >= max_r and max_g >= max_b:
            cut_direction = Direction.GREEN
        else:
            cut_direction = Direction.BLUE

        two.r1 = one.r1
        two.g1 = one.g1
        two.b1 = one.b1

        if cut_direction is Direction.RED:
            one.r1 = max_r_result.cut_location
            two.r0 = one.r1
            two.g0 = one.g0
            two.b0 = one.b0
        elif cut_direction is Direction.GREEN:
            one.g1 = max_g_result.cut_location
            two.r0 = one.r0
            two.g0 = one.g1
            two.b0 = one.b0
        else:
            one.b1 = max_b_result.cut_location
            two.r0 = one.r0
            two.g0 = one.g0
            two.b0 = one.b1

        one.update_volume()
        two.update_volume()
        return True

    def _maximize(
        self,
        cube: _Box,
        direction: Direction,
        first: int,
        last: int,
        whole_r: float,
        whole_g: float,
        whole_b: float,
        whole_w: float,
    ) -> _MaximizeResult:
        """
        Best cut position along one axis.

        Evaluates every position in [first, last) at once and picks the
        first one with the largest between-box variance.
        """
        if last <= first:
            return _MaximizeResult(-1, 0.0)

        positions = np.arange(first, last)
        half_r = self._bottom(cube, direction, self.moments_r) + self._top(
            cube, direction, positions, self.moments_r
        )
        half_g = self._bottom(cube, direction, self.moments_g) + self._top(
            cube, direction, positions, self.moments_g
        )
        half_b = self._bottom(cube, direction, self.moments_b) + self._top(
            cube, direction, positions, self.moments_b
        )
        half_w = self._bottom(cube, direction, self.weights) + self._top(
            cube, direction, positions, self.weights
        )
        other_r = whole_r - half_r
        other_g = whole_g - half_g
        other_b = whole_b - half_b
        other_w = whole_w - half_w

        valid = (half_w != 0) & (other_w != 0)
        with np.errstate(divide="ignore", invalid="ignore"):
            temp = (half_r * half_r + half_g * half_g + half_b * half_b) / half_w
            temp = temp + (other_r * other_r + other_g * other_g + other_b * other_b) / other_w
        temp = np.where(valid, temp, -np.inf)

        best = int(np.argmax(temp))
        if not temp[best] > 0.0:
            return _MaximizeResult(-1, 0.0)
        return _MaximizeResult(int(positions[best]), float(temp[best]))

    # -------------------------------------------------------------------------
    # Moment lookups
    # -------------------------------------------------------------------------

    @staticmethod
    def _volume(cube: _Box, moment: NDArray[np.float64]) -> float:
        return float(
            moment[cube.r1, cube.g1, cube.b1]
            - moment[cube.r1, cube.g1, cube.b0]
            - moment[cube.r1, cube.g0, cube.b1]
            + moment[cube.r1, cube.g0, cube.b0]
            - moment[cube.r0, cube.g1, cube.b1]
            + moment[cube.r0, cube.g1, cube.b0]
            + moment[cube.r0, cube.g0, cube.b1]
            - moment[cube.r0, cube.g0, cube.b0]
        )

    @staticmethod
    def _bottom(cube: _Box, direction: Direction, moment: NDArray[np.float64]) -> float:
        """Moment of the box face at the lower bound of ``direction``, negated."""
        if direction is Direction.RED:
            return float(
                -moment[cube.r0, cube.g1, cube.b1]
                + moment[cube.r0, cube.g1, cube.b0]
                + moment[cube.r0, cube.g0, cube.b1]
                - moment[cube.r0, cube.g0, cube.b0]
            )
        if direction is Direction.GREEN:
            return float(
                -moment[cube.r1, cube.g0, cube.b1]
                + moment[cube.r1, cube.g0, cube.b0]
                + moment[cube.r0, cube.g0, cube.b1]
                - moment[cube.r0, cube.g0, cube.b0]
            )
        return float(
            -moment[cube.r1, cube.g1, cube.b0]
            + moment[cube.r1, cube.g0, cube.b0]
            + moment[cube.r0, cube.g1, cube.b0]
            - moment[cube.r0, cube.g0, cube.b0]
        )

    @staticmethod
    def _top(
        cube: _Box,
        direction: Direction,
        position: NDArray[np.int64],
        moment: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """Moment of the box face at each cut ``position`` along ``direction``."""
        if direction is Direction.RED:
            return (
                moment[position, cube.g1, cube.b1]
                - moment[position, cube.g1, cube.b0]
                - moment[position, cube.g0, cube.b1]
                + moment[position, cube.g0, cube.b0]
            )
        if direction is Direction.GREEN:
            return (
                moment[cube.r1, position, cube.b1]
                - moment[cube.r1, position, cube.b0]
                - moment[cube.r0, position, cube.b1]
                + moment[cube.r0, position, cube.b0]
            )
        return (
            moment[cube.r1, cube.g1, position]
            - moment[cube.r1, cube.g0, position]
            - moment[cube.r0, cube.g1, position]
            + moment[cube.r0, cube.g0, position]
        )
