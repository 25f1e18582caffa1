"""Unistroke gesture recognition package.

A template-based classifier for single-stroke gestures in the $1 family.
A stroke is resampled, rotated to its indicative angle, scaled and
translated into a canonical frame, then compared with every stored template
using either a golden-section rotation search over Euclidean path distance
or Protractor's closed-form cosine distance.

The package is organized into the following modules:
    config: Algorithm constants shared by templates and queries.
    domain: Value objects (Point, BBox, Unistroke, RecognitionResult).
    utils: Geometry helpers and the normalization pipeline.
    matching: Distance metrics and scoring.
    templates: Built-in seed gestures and the template repository.
    api: GestureRecognizer service for external consumers.

Example usage:
    Recognizing a stroke::

        from unistroke_lib import GestureRecognizer

        recognizer = GestureRecognizer()
        result = recognizer.recognize(points, use_protractor=True)
        print(f"{result.name} ({result.score:.2f})")

    Working with templates directly::

        from unistroke_lib import TemplateRepository, Unistroke

        repo = TemplateRepository.with_defaults()
        repo.add(Unistroke.from_points('loop', points))

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .api import GestureRecognizer
from .domain import BBox, Point, RecognitionResult, Unistroke
from .templates import TemplateRepository

__all__ = [
    # Domain objects
    'Point', 'BBox', 'Unistroke', 'RecognitionResult',
    # Templates
    'TemplateRepository',
    # Services
    'GestureRecognizer',
]

__version__ = '1.0.0'
