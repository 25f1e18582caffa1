"""Gesture templates and the template store.

The module exports:
    DEFAULT_GESTURES: Raw seed points of the 16 built-in gestures.
    DEFAULT_GESTURE_NAMES: Their names, in store order.
    TemplateRepository: Thread-safe ordered template store.

Example usage:
    Seeding a store::

        from unistroke_lib.templates import TemplateRepository

        repo = TemplateRepository.with_defaults()
        print(repo.names())
"""

from .defaults import DEFAULT_GESTURE_NAMES, DEFAULT_GESTURES
from .repository import TemplateRepository

__all__ = ['DEFAULT_GESTURES', 'DEFAULT_GESTURE_NAMES', 'TemplateRepository']
