"""Geometric utility functions.

This module provides the stateless geometry used by the normalization
pipeline and the distance metrics. Every function takes a sequence of
``Point`` objects and returns new values; inputs are never mutated.

The module provides the following functions:
    centroid: Arithmetic mean of a point sequence.
    bounding_box: Axis-aligned bounding box of a point sequence.
    path_length: Arc length along a point sequence.
    path_distance: Sum of per-index distances between two sequences.
    rotate_by: Rotate a sequence about its centroid.
    scale_to: Non-uniformly scale a sequence to a reference square.
    translate_to: Move a sequence so its centroid lands on a target.

Example usage:
    Basic measurements::

        from unistroke_lib.domain import Point
        from unistroke_lib.utils.geometry import centroid, path_length

        pts = [Point(0, 0), Point(3, 4), Point(6, 8)]
        centroid(pts)      # Point(x=3.0, y=4.0)
        path_length(pts)   # 10.0
"""

from __future__ import annotations

import math
from typing import Sequence

from ..config import DEGENERATE_EPSILON
from ..domain.geometry import BBox, Point


def centroid(points: Sequence[Point]) -> Point:
    """Arithmetic mean of all point coordinates.

    Args:
        points: Non-empty sequence of points.

    Returns:
        The mean point.

    Raises:
        ValueError: If ``points`` is empty.
    """
    if not points:
        raise ValueError("Cannot compute the centroid of zero points")
    sx = 0.0
    sy = 0.0
    for p in points:
        sx += p.x
        sy += p.y
    n = len(points)
    return Point(sx / n, sy / n)


def bounding_box(points: Sequence[Point]) -> BBox:
    """Axis-aligned bounding box of ``points``.

    Raises:
        ValueError: If ``points`` is empty.
    """
    return BBox.from_points(points)


def path_length(points: Sequence[Point]) -> float:
    """Sum of distances between consecutive points; 0 for a single point."""
    d = 0.0
    for i in range(1, len(points)):
        d += points[i - 1].distance_to(points[i])
    return d


def path_distance(pts1: Sequence[Point], pts2: Sequence[Point]) -> float:
    """Sum of Euclidean distances between points at the same index.

    The result is the raw sum, not an average.

    Raises:
        ValueError: If the sequences differ in length.
    """
    if len(pts1) != len(pts2):
        raise ValueError(
            f"Path distance needs equal-length sequences, got {len(pts1)} and {len(pts2)}"
        )
    d = 0.0
    for p, q in zip(pts1, pts2):
        d += p.distance_to(q)
    return d


def rotate_by(points: Sequence[Point], radians: float) -> list[Point]:
    """Rotate ``points`` counter-clockwise by ``radians`` about their centroid."""
    c = centroid(points)
    cos = math.cos(radians)
    sin = math.sin(radians)
    new_points = []
    for p in points:
        qx = (p.x - c.x) * cos - (p.y - c.y) * sin + c.x
        qy = (p.x - c.x) * sin + (p.y - c.y) * cos + c.y
        new_points.append(Point(qx, qy))
    return new_points


def scale_to(points: Sequence[Point], size: float) -> list[Point]:
    """Scale ``points`` so their bounding box becomes ``size`` x ``size``.

    Scaling is anisotropic: x and y are scaled independently. Coordinates
    are multiplied in place (not shifted to the box corner); the later
    translation step recentres them. An axis whose extent is effectively
    zero, such as the height of a horizontal line, is left unscaled.

    Args:
        points: Sequence of points.
        size: Side of the target square.

    Returns:
        New list of scaled points.
    """
    b = bounding_box(points)
    sx = size / b.width if b.width > DEGENERATE_EPSILON else 1.0
    sy = size / b.height if b.height > DEGENERATE_EPSILON else 1.0
    return [Point(p.x * sx, p.y * sy) for p in points]


def translate_to(points: Sequence[Point], target: Point) -> list[Point]:
    """Shift ``points`` so that their centroid sits at ``target``."""
    c = centroid(points)
    offset = target - c
    return [p + offset for p in points]
