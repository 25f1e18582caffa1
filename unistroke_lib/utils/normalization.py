"""Stroke normalization pipeline.

Every template and every query stroke goes through the same steps so that
distances between them are meaningful:

    1. resample to NUM_POINTS points evenly spaced by arc length
    2. rotate about the centroid by minus the indicative angle
    3. scale the bounding box to SQUARE_SIZE x SQUARE_SIZE
    4. translate the centroid to ORIGIN
    5. vectorize into a unit-length flat vector

Example usage:
    Normalizing a raw stroke::

        from unistroke_lib.utils.normalization import normalize

        points, vector = normalize(raw_points)
        assert len(points) == 64
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from ..config import NUM_POINTS, ORIGIN, SQUARE_SIZE
from ..domain.geometry import Point
from .geometry import centroid, path_length, rotate_by, scale_to, translate_to

_logger = logging.getLogger(__name__)


def resample(points: Sequence[Point], n: int = NUM_POINTS) -> list[Point]:
    """Resample a path to ``n`` points evenly spaced along its arc length.

    Walks the path accumulating distance since the last emitted point. When
    the next segment would reach the interval length, a point is
    interpolated on it, emitted, and inserted into the working path at the
    current index so that the remainder of the segment is measured from the
    new point.

    Args:
        points: Raw points, at least two, with non-zero path length.
        n: Number of output points.

    Returns:
        List of exactly ``n`` points. The first is the original first point.

    Raises:
        ValueError: If fewer than two points are given or the path length
            is zero or not finite.
    """
    if len(points) < 2:
        raise ValueError(f"Need at least 2 points to resample, got {len(points)}")

    interval = path_length(points) / (n - 1)
    if not math.isfinite(interval):
        raise ValueError("Cannot resample a stroke whose path length overflows")
    if interval <= 0.0:
        raise ValueError("Cannot resample a stroke with zero path length")

    src = list(points)
    new_points = [src[0]]
    big_d = 0.0
    i = 1
    while i < len(src):
        prev, cur = src[i - 1], src[i]
        d = prev.distance_to(cur)
        if big_d + d >= interval:
            t = (interval - big_d) / d
            q = Point(prev.x + t * (cur.x - prev.x), prev.y + t * (cur.y - prev.y))
            new_points.append(q)
            src.insert(i, q)
            big_d = 0.0
        else:
            big_d += d
        i += 1

    # rounding can leave the walk one short of the end
    while len(new_points) < n:
        new_points.append(src[-1])
    return new_points[:n]


def indicative_angle(points: Sequence[Point]) -> float:
    """Angle in radians from the first point to the centroid."""
    c = centroid(points)
    return math.atan2(c.y - points[0].y, c.x - points[0].x)


def vectorize(points: Sequence[Point]) -> np.ndarray:
    """Flatten points into ``[x0, y0, x1, y1, ...]`` scaled to unit length.

    A zero-magnitude vector is returned unchanged (all zeros).
    """
    vector = np.empty(2 * len(points), dtype=np.float64)
    for i, p in enumerate(points):
        vector[2 * i] = p.x
        vector[2 * i + 1] = p.y
    magnitude = float(np.linalg.norm(vector))
    if magnitude == 0.0:
        _logger.debug("Zero-magnitude vector for %d points, left unnormalized", len(points))
        return vector
    return vector / magnitude


def normalize(points: Sequence[Point]) -> tuple[list[Point], np.ndarray]:
    """Run the full pipeline on raw points.

    Args:
        points: Raw captured points.

    Returns:
        Tuple of (normalized points, unit vector).

    Raises:
        ValueError: If the points cannot be resampled.
    """
    pts = resample(points, NUM_POINTS)
    radians = indicative_angle(pts)
    pts = rotate_by(pts, -radians)
    pts = scale_to(pts, SQUARE_SIZE)
    pts = translate_to(pts, ORIGIN)
    return pts, vectorize(pts)
