"""Service layer for gesture recognition.

This module provides the GestureRecognizer class, the in-process API
consumed by input-capture and UI code. It validates raw strokes, wraps them
in throwaway templates, and runs the nearest-neighbour scan over its
template store.

Example usage:
    Recognizing and registering gestures::

        from unistroke_lib.api.services import GestureRecognizer

        recognizer = GestureRecognizer()

        result = recognizer.recognize(points)
        print(f"{result.name}: {result.score:.2f} in {result.elapsed_ms:.1f} ms")

        # Protractor metric
        result = recognizer.recognize(points, use_protractor=True)

        # Register a user gesture, then drop all user gestures
        recognizer.add_gesture('loop', points)
        recognizer.reset_user_gestures()
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from ..config import NO_MATCH_NAME
from ..domain.geometry import Point
from ..domain.gesture import RecognitionResult, Unistroke
from ..matching.distance import (
    distance_at_best_angle,
    euclidean_score,
    optimal_cosine_distance,
    protractor_score,
)
from ..templates.repository import TemplateRepository
from ..utils.geometry import path_length

# Logger for recognition events
_logger = logging.getLogger(__name__)


def coerce_points(points: Iterable) -> List[Point]:
    """Validate raw input and convert it to a list of Points.

    Accepts ``Point`` objects, ``(x, y)`` tuples or ``[x, y]`` lists.

    Args:
        points: Raw stroke coordinates.

    Returns:
        List of Points.

    Raises:
        ValueError: If the input is not a sequence of finite coordinate
            pairs, has fewer than two points, or its path length is zero or
            overflows.
    """
    if points is None or isinstance(points, (str, bytes)):
        raise ValueError("Points must be a sequence of (x, y) pairs")

    result = []
    for i, p in enumerate(points):
        if isinstance(p, Point):
            result.append(p)
            continue
        try:
            x, y = p
            pt = Point(float(x), float(y))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid point at index {i}: expected an (x, y) pair, got {p!r}") from e
        if not (math.isfinite(pt.x) and math.isfinite(pt.y)):
            raise ValueError(f"Invalid point at index {i}: coordinates must be finite")
        result.append(pt)

    if len(result) < 2:
        raise ValueError(f"A stroke needs at least 2 points, got {len(result)}")
    length = path_length(result)
    if length == 0.0:
        raise ValueError("A stroke must not have zero path length")
    if not math.isfinite(length):
        raise ValueError("Stroke coordinates are too large: path length overflows")
    return result


@dataclass
class GestureRecognizer:
    """Nearest-neighbour unistroke recognizer.

    Owns a TemplateRepository; independent recognizers (for example one per
    user session) do not share user gestures.

    Attributes:
        repository: Template store scanned by ``recognize``. Defaults to a
            store seeded with the built-in gestures.

    Example:
        >>> recognizer = GestureRecognizer()
        >>> recognizer.recognize(points).name
        'triangle'
    """
    repository: TemplateRepository = field(default_factory=TemplateRepository.with_defaults)

    def recognize(self, points: Sequence, use_protractor: bool = False) -> RecognitionResult:
        """Classify a stroke against every stored template.

        Templates are scanned in insertion order; on equal distances the
        first template wins.

        Args:
            points: Raw stroke, at least two points with non-zero length.
            use_protractor: Use the closed-form cosine metric instead of
                the golden-section Euclidean search.

        Returns:
            RecognitionResult for the closest template, or the no-match
            sentinel (score 0.0) when the store is empty.

        Raises:
            ValueError: If ``points`` is not a valid stroke.
        """
        t0 = time.perf_counter()
        candidate = Unistroke.from_points('', coerce_points(points))
        templates = self.repository.snapshot()

        best_index = -1
        best = math.inf
        for i, template in enumerate(templates):
            if use_protractor:
                d = optimal_cosine_distance(template.vector, candidate.vector)
            else:
                d = distance_at_best_angle(candidate.points, template)
            if d < best:
                best = d
                best_index = i

        elapsed = time.perf_counter() - t0
        if best_index == -1:
            _logger.debug("No templates to match against (%.2f ms)", elapsed * 1000)
            return RecognitionResult(NO_MATCH_NAME, 0.0, elapsed, use_protractor=use_protractor)

        score = protractor_score(best) if use_protractor else euclidean_score(best)
        name = templates[best_index].name
        _logger.debug("Recognized '%s' score=%.4f distance=%.4f protractor=%s (%.2f ms)",
                      name, score, best, use_protractor, elapsed * 1000)
        return RecognitionResult(name, score, elapsed, best, use_protractor)

    def add_gesture(self, name: str, points: Sequence) -> int:
        """Normalize ``points`` and store them as a template named ``name``.

        Args:
            name: Gesture label. May repeat an existing name.
            points: Raw stroke.

        Returns:
            Number of stored templates with this name.

        Raises:
            ValueError: If the name is empty or the points are invalid.
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Gesture name must be a non-empty string")
        template = Unistroke.from_points(name, coerce_points(points))
        return self.repository.add(template)

    def reset_user_gestures(self) -> int:
        """Drop every user-added template.

        Returns:
            Resulting number of templates (the built-in count).
        """
        return self.repository.reset()

    def list_gestures(self) -> Dict[str, int]:
        """Template counts keyed by gesture name."""
        return self.repository.names()
