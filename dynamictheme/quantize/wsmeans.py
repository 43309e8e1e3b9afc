# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Weighted k-means in L*a*b* (WSMeans).

Refines a set of starting centroids against the distinct colors of an
image, each weighted by its pixel count. Distances are squared Euclidean
in L*a*b*.

A point is reassigned only when the move shortens its distance by more
than MIN_MOVEMENT_DISTANCE, which stops clusters from oscillating over
near-ties. Iteration ends when no point moves, or after MAX_ITERATIONS.

The initial assignment is each point's nearest starting centroid, so the
result is a pure function of the input.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from loguru import logger
from numpy.typing import NDArray

from dynamictheme.quantize.quantizer_map import PixelArray, count_colors
from dynamictheme.utils.color_utils import argb_from_lab, lab_from_argb_array


MAX_ITERATIONS = 10
MIN_MOVEMENT_DISTANCE = 3.0


def _squared_distances(
    points: NDArray[np.float64],
    clusters: NDArray[np.float64],
) -> NDArray[np.float64]:
    """(N, K) squared distances between points and clusters."""
    diff = points[:, np.newaxis, :] - clusters[np.newaxis, :, :]
    return np.einsum('nkj,nkj->nk', diff, diff)


def quantize_wsmeans(
    pixels: PixelArray,
    starting_clusters: Sequence[int],
    max_colors: int,
) -> dict[int, int]:
    """
    Cluster pixels with weighted k-means.

    Args:
        pixels: Packed ARGB pixels; non-opaque pixels are ignored
        starting_clusters: Initial centroid colors (packed ARGB). When
            empty, the first ``max_colors`` distinct colors are used.
        max_colors: Maximum number of clusters (>= 1)

    Returns:
        Mapping of centroid color to total pixel count, in cluster order.
        Empty clusters and duplicate centroid colors are dropped.

    Raises:
        ValueError: If ``max_colors`` < 1 or there is no opaque pixel
    """
    if max_colors < 1:
        raise ValueError(f"max_colors must be >= 1, got {max_colors}")

    colors, counts = count_colors(pixels)
    points = lab_from_argb_array(colors)
    point_count = len(points)

    cluster_count = min(max_colors, point_count)
    if len(starting_clusters) > 0:
        cluster_count = min(cluster_count, len(starting_clusters))
        seeds = np.asarray(list(starting_clusters[:cluster_count]), dtype=np.int64)
        clusters = lab_from_argb_array(seeds & 0xFFFFFFFF)
    else:
        clusters = points[:cluster_count].copy()

    distances = _squared_distances(points, clusters)
    cluster_indices = np.argmin(distances, axis=1)
    rows = np.arange(point_count)
    weights = counts.astype(np.float64)
    pixel_count_sums = np.zeros(cluster_count, dtype=np.int64)

    for iteration in range(MAX_ITERATIONS):
        distances = _squared_distances(points, clusters)
        previous_distance = distances[rows, cluster_indices]
        nearest = np.argmin(distances, axis=1)
        minimum_distance = distances[rows, nearest]

        closer = minimum_distance < previous_distance
        change = np.abs(np.sqrt(minimum_distance) - np.sqrt(previous_distance))
        moved = closer & (change > MIN_MOVEMENT_DISTANCE)
        points_moved = int(np.count_nonzero(moved))
        cluster_indices = np.where(moved, nearest, cluster_indices)

        if points_moved == 0 and iteration != 0:
            logger.debug(f"WSMeans converged after {iteration} iterations")
            break

        pixel_count_sums = np.bincount(
            cluster_indices, weights=counts, minlength=cluster_count
        ).astype(np.int64)
        component_sums = np.zeros((cluster_count, 3))
        np.add.at(component_sums, cluster_indices, points * weights[:, np.newaxis])

        for i in range(cluster_count):
            if pixel_count_sums[i] == 0:
                clusters[i] = 0.0
            else:
                clusters[i] = component_sums[i] / pixel_count_sums[i]

    result: dict[int, int] = {}
    for i in range(cluster_count):
        count = int(pixel_count_sums[i])
        if count == 0:
            continue
        l, a, b = clusters[i]
        color = argb_from_lab(float(l), float(a), float(b))
        if color in result:
            continue
        result[color] = count

    logger.debug(
        f"WSMeans: {point_count} distinct colors, {cluster_count} clusters "
        f"-> {len(result)} colors"
    )
    return result
