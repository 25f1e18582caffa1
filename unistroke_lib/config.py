"""Shared constants for the unistroke recognizer.

These values are part of the template contract: templates built with
different constants are not comparable, so every module reads them from
here rather than taking them as parameters.

Attributes:
    NUM_POINTS (int): Number of points every stroke is resampled to (64).
    SQUARE_SIZE (float): Side of the reference square strokes are scaled to.
    ORIGIN (Point): Target position of the centroid after translation.
    DIAGONAL (float): Diagonal of the reference square.
    HALF_DIAGONAL (float): Normalizer for Euclidean path distance scores.
    ANGLE_RANGE (float): Rotation search bound in radians (+/- 45 degrees).
    ANGLE_PRECISION (float): Golden-section termination width (2 degrees).
    PHI (float): Golden ratio conjugate, (sqrt(5) - 1) / 2.
    DEGENERATE_EPSILON (float): Bounding box extents below this are treated
        as zero and that axis is left unscaled.
    NO_MATCH_NAME (str): Name reported when the template store is empty.
"""

import math

from .domain.geometry import Point

NUM_POINTS = 64
SQUARE_SIZE = 250.0
ORIGIN = Point(0.0, 0.0)
DIAGONAL = math.sqrt(SQUARE_SIZE * SQUARE_SIZE + SQUARE_SIZE * SQUARE_SIZE)
HALF_DIAGONAL = 0.5 * DIAGONAL

ANGLE_RANGE = math.radians(45.0)
ANGLE_PRECISION = math.radians(2.0)
PHI = 0.5 * (-1.0 + math.sqrt(5.0))

DEGENERATE_EPSILON = 1e-6

NO_MATCH_NAME = 'No match.'
