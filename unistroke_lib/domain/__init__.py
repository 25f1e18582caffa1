"""Domain objects for unistroke recognition.

This module provides the value objects used throughout the package:

Geometry classes:
    Point: Immutable 2D point with vector addition and subtraction.
    BBox: Immutable axis-aligned bounding box.

Gesture classes:
    Unistroke: Named template with normalized points and unit vector.
    RecognitionResult: Winning template name, score and timing.

Example usage:
    Building a template::

        from unistroke_lib.domain import BBox, Unistroke

        template = Unistroke.from_points('v', [(89, 164), (130, 238), (175, 162)])
        box = BBox.from_points(template.points)
        print(box.width, box.height)   # 250.0 250.0
"""

from .geometry import BBox, Point
from .gesture import RecognitionResult, Unistroke

__all__ = [
    'Point', 'BBox',
    'Unistroke', 'RecognitionResult',
]
