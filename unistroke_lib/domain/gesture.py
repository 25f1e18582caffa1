"""Gesture templates and recognition results.

This module provides the two value objects that flow through recognition:

    Unistroke: A named template holding the normalized 64-point form of a
        stroke and its unit-length vector form.
    RecognitionResult: The outcome of matching a query stroke against a
        template store.

Example usage:
    Building a template from raw points::

        from unistroke_lib.domain.gesture import Unistroke

        template = Unistroke.from_points('caret', [(79, 245), (124, 125), (182, 257)])
        print(len(template.points))   # 64
        print(template.vector.shape)  # (128,)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Sequence, Tuple

import numpy as np

from .geometry import Point


@dataclass(frozen=True)
class Unistroke:
    """A named, normalized gesture template.

    Query strokes are wrapped in an unnamed Unistroke so that templates and
    queries go through exactly the same normalization code path.

    Attributes:
        name: Free-form label. Not unique; several templates may share a
            name to cover drawing variations.
        points: The stroke after resample, rotate, scale and translate.
            Always NUM_POINTS long.
        vector: Flattened (x, y) pairs of ``points`` divided by their
            Euclidean norm. All zeros when the points collapse to the origin.
    """
    name: str
    points: Tuple[Point, ...]
    vector: np.ndarray = field(repr=False, compare=False)

    @classmethod
    def from_points(cls, name: str, points: Iterable[Point | Sequence[float]]) -> Unistroke:
        """Normalize raw points into a template.

        Args:
            name: Template label ('' for query strokes).
            points: Raw captured points, at least two, with non-zero path
                length.

        Returns:
            New Unistroke with normalized points and vector.

        Raises:
            ValueError: If the points cannot be resampled.
        """
        from ..utils.normalization import normalize

        normalized, vector = normalize(
            [p if isinstance(p, Point) else Point.from_tuple(p) for p in points]
        )
        return cls(name, tuple(normalized), vector)

    @property
    def is_degenerate(self) -> bool:
        """True when the vector could not be normalized to unit length."""
        return not np.any(self.vector)


@dataclass(frozen=True)
class RecognitionResult:
    """Best match for a query stroke.

    The score is a monotonic similarity derived from distance, not a
    probability, and is not clamped: poor matches can go
    negative.

    Attributes:
        name: Name of the winning template, or NO_MATCH_NAME.
        score: Similarity score. 0.0 for the no-match sentinel.
        elapsed: Wall-clock seconds spent in recognition.
        distance: Raw distance of the winner (inf when nothing matched).
        use_protractor: Which metric produced the score.
    """
    name: str
    score: float
    elapsed: float
    distance: float = float('inf')
    use_protractor: bool = False

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0

    @property
    def is_match(self) -> bool:
        return self.distance != float('inf')

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'name': self.name,
            'score': float(self.score),
            'elapsed_ms': self.elapsed_ms,
            'distance': float(self.distance) if self.is_match else None,
            'protractor': self.use_protractor,
        }
