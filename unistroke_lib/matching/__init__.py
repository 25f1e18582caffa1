"""Distance metrics and scoring.

The module exports:
    distance_at_angle: Path distance at a fixed trial rotation.
    distance_at_best_angle: Golden-section search over +/- ANGLE_RANGE.
    optimal_cosine_distance: Protractor closed-form cosine distance.
    euclidean_score, protractor_score: Distance to similarity conversions.
"""

from .distance import (
    distance_at_angle,
    distance_at_best_angle,
    euclidean_score,
    optimal_cosine_distance,
    protractor_score,
)

__all__ = [
    'distance_at_angle', 'distance_at_best_angle', 'optimal_cosine_distance',
    'euclidean_score', 'protractor_score',
]
