"""API layer for gesture recognition.

This module provides the high-level interface used by input-capture code
and by the Flask routes.

Classes:
    GestureRecognizer: Recognize strokes and manage user gestures.

Functions:
    coerce_points: Validate raw stroke input.

Example:
    Basic usage::

        from unistroke_lib.api import GestureRecognizer

        recognizer = GestureRecognizer()
        result = recognizer.recognize([(10, 10), (60, 80), (110, 10)])
        print(result.to_dict())
"""

from .services import GestureRecognizer, coerce_points

__all__ = ['GestureRecognizer', 'coerce_points']
