"""Template repository for gesture templates.

This module provides the TemplateRepository class, the ordered collection
of templates a recognizer scans. The repository is seeded with built-in
templates at construction, grows by appending user templates, and can be
reset back to the built-ins in one operation. Individual templates cannot
be removed or replaced.

The repository is safe to share between threads: mutations hold a lock,
and readers iterate an immutable snapshot taken under the same lock.

Example usage:
    Basic repository operations::

        from unistroke_lib.domain.gesture import Unistroke
        from unistroke_lib.templates.repository import TemplateRepository

        repo = TemplateRepository.with_defaults()
        len(repo)                      # 16

        repo.add(Unistroke.from_points('zig-zag', points))
        repo.count('zig-zag')          # 2

        repo.reset()                   # 16
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Sequence

from ..domain.gesture import Unistroke
from .defaults import DEFAULT_GESTURES

_logger = logging.getLogger(__name__)


class TemplateRepository:
    """Ordered, append-only store of gesture templates.

    The first ``builtin_count`` templates are the seeds given at
    construction; everything after them was added with ``add`` and is
    discarded by ``reset``.

    Attributes:
        _templates: Internal list of templates in insertion order.
        _builtin_count: Number of leading seed templates.
        _lock: Guards ``_templates`` against concurrent mutation.

    Example:
        >>> repo = TemplateRepository()
        >>> len(repo)
        0
        >>> repo.add(Unistroke.from_points('line', [(0, 0), (10, 10)]))
        1
    """

    def __init__(self, seeds: Iterable[Unistroke] = ()):
        """Initialize the repository.

        Args:
            seeds: Built-in templates. They survive ``reset``.
        """
        self._templates: list[Unistroke] = []
        self._lock = threading.Lock()
        for template in seeds:
            self._warn_if_degenerate(template)
            self._templates.append(template)
        self._builtin_count = len(self._templates)

    def __len__(self) -> int:
        with self._lock:
            return len(self._templates)

    @property
    def builtin_count(self) -> int:
        """Number of built-in templates, the size ``reset`` returns to."""
        return self._builtin_count

    def add(self, template: Unistroke) -> int:
        """Append a template.

        Args:
            template: Normalized template to store.

        Returns:
            Number of stored templates sharing ``template.name`` after the
            append.
        """
        self._warn_if_degenerate(template)
        with self._lock:
            self._templates.append(template)
            count = sum(1 for t in self._templates if t.name == template.name)
            total = len(self._templates)
        _logger.info("Added template '%s' (%d with this name, %d total)",
                     template.name, count, total)
        return count

    def reset(self) -> int:
        """Discard every template added after construction.

        Returns:
            Resulting number of templates, always ``builtin_count``.
        """
        with self._lock:
            removed = len(self._templates) - self._builtin_count
            del self._templates[self._builtin_count:]
            total = len(self._templates)
        _logger.info("Reset templates: removed %d user template(s)", removed)
        return total

    def snapshot(self) -> tuple[Unistroke, ...]:
        """Immutable view of the current templates in insertion order."""
        with self._lock:
            return tuple(self._templates)

    def count(self, name: str) -> int:
        """Number of templates named exactly ``name``."""
        return sum(1 for t in self.snapshot() if t.name == name)

    def names(self) -> dict[str, int]:
        """Template counts keyed by name, in first-insertion order."""
        counts: dict[str, int] = {}
        for t in self.snapshot():
            counts[t.name] = counts.get(t.name, 0) + 1
        return counts

    @staticmethod
    def _warn_if_degenerate(template: Unistroke) -> None:
        if template.is_degenerate:
            _logger.warning("Template '%s' has a zero-magnitude vector; "
                            "it will never win under cosine distance", template.name)

    @classmethod
    def from_points(
        cls,
        gestures: Iterable[tuple[str, Sequence[Sequence[float]]]],
    ) -> TemplateRepository:
        """Create a repository whose built-ins are built from raw points.

        Args:
            gestures: ``(name, points)`` pairs of raw captured coordinates.

        Returns:
            Populated TemplateRepository.
        """
        return cls(Unistroke.from_points(name, points) for name, points in gestures)

    @classmethod
    def with_defaults(cls) -> TemplateRepository:
        """Create a repository seeded with the 16 built-in gestures."""
        repo = cls.from_points(DEFAULT_GESTURES)
        _logger.debug("Loaded %d built-in templates", repo.builtin_count)
        return repo
