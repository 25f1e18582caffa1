"""Utility functions for unistroke recognition.

This module provides the stateless geometry and the normalization pipeline
shared by templates and query strokes.

The module exports the following functions:

Geometry utilities:
    centroid, bounding_box, path_length, path_distance: Measurements.
    rotate_by, scale_to, translate_to: Transforms about the centroid.

Normalization:
    resample: Resample a stroke to evenly spaced points.
    indicative_angle: Angle from the first point to the centroid.
    vectorize: Flatten and unit-normalize points.
    normalize: The full resample/rotate/scale/translate/vectorize pipeline.
"""

from .geometry import (
    bounding_box,
    centroid,
    path_distance,
    path_length,
    rotate_by,
    scale_to,
    translate_to,
)
from .normalization import indicative_angle, normalize, resample, vectorize

__all__ = [
    'centroid', 'bounding_box', 'path_length', 'path_distance',
    'rotate_by', 'scale_to', 'translate_to',
    'resample', 'indicative_angle', 'vectorize', 'normalize',
]
