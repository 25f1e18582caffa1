"""Distance metrics between a query stroke and a template.

Two interchangeable metrics are provided:

    distance_at_best_angle: Euclidean path distance minimized over a
        bounded rotation using golden-section search. Works on points.
    optimal_cosine_distance: Protractor's closed-form optimal angular
        distance between unit vectors. Works on vectors.

Scores convert raw distances into the similarity reported to callers. They
are not clamped to [0, 1].

Example usage:
    Comparing a query against a template::

        from unistroke_lib.matching.distance import (
            distance_at_best_angle, euclidean_score,
        )

        d = distance_at_best_angle(query.points, template)
        print(euclidean_score(d))
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..config import ANGLE_PRECISION, ANGLE_RANGE, HALF_DIAGONAL, PHI
from ..domain.geometry import Point
from ..domain.gesture import Unistroke
from ..utils.geometry import path_distance, rotate_by


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def distance_at_angle(points: Sequence[Point], template: Unistroke, radians: float) -> float:
    """Path distance after rotating ``points`` by ``radians`` about their centroid."""
    return path_distance(rotate_by(points, radians), template.points)


def distance_at_best_angle(
    points: Sequence[Point],
    template: Unistroke,
    a: float = -ANGLE_RANGE,
    b: float = ANGLE_RANGE,
    threshold: float = ANGLE_PRECISION,
) -> float:
    """Minimum path distance over rotations in ``[a, b]``.

    Golden-section search: two interior angles are kept at golden-ratio
    positions of the bracket, and each step discards the part of the
    bracket beyond the worse one, reusing the better evaluation. Stops once
    the bracket is no wider than ``threshold``.

    Args:
        points: Normalized query points (NUM_POINTS long).
        template: Template to compare against.
        a: Lower rotation bound in radians.
        b: Upper rotation bound in radians.
        threshold: Bracket width in radians at which the search stops.

    Returns:
        The lower of the last two evaluated distances.
    """
    x1 = _lerp(b, a, PHI)
    f1 = distance_at_angle(points, template, x1)
    x2 = _lerp(a, b, PHI)
    f2 = distance_at_angle(points, template, x2)
    while abs(b - a) > threshold:
        if f1 < f2:
            b = x2
            x2 = x1
            f2 = f1
            x1 = _lerp(b, a, PHI)
            f1 = distance_at_angle(points, template, x1)
        else:
            a = x1
            x1 = x2
            f1 = f2
            x2 = _lerp(a, b, PHI)
            f2 = distance_at_angle(points, template, x2)
    return min(f1, f2)


def optimal_cosine_distance(v1: np.ndarray, v2: np.ndarray) -> float:
    """Protractor distance between two vectorized strokes.

    Finds the rotation that best aligns the two vectors analytically and
    returns the angle between them at that rotation, in radians.

    Args:
        v1: Unit vector of interleaved x, y coordinates.
        v2: Unit vector of the same length.

    Returns:
        Distance in ``[0, pi]``. A zero vector on either side is as far as
        possible (``pi``).
    """
    if not np.any(v1) or not np.any(v2):
        return math.pi

    x1, y1 = v1[0::2], v1[1::2]
    x2, y2 = v2[0::2], v2[1::2]
    a = float(np.dot(x1, x2) + np.dot(y1, y2))
    b = float(np.dot(x1, y2) - np.dot(y1, x2))

    if a == 0.0:
        angle = math.copysign(math.pi / 2, b) if b != 0.0 else math.pi / 2
    else:
        angle = math.atan(b / a)
    cos_sim = a * math.cos(angle) + b * math.sin(angle)
    return math.acos(max(-1.0, min(1.0, cos_sim)))


def euclidean_score(distance: float) -> float:
    """Score for a path distance: ``1 - distance / HALF_DIAGONAL``."""
    return 1.0 - distance / HALF_DIAGONAL


def protractor_score(distance: float) -> float:
    """Score for a cosine distance: ``1 - distance``."""
    return 1.0 - distance
