"""Shared pytest fixtures for the gesture recognizer test suite.

Fixtures:
    recognizer: GestureRecognizer seeded with the built-in gestures
    empty_recognizer: GestureRecognizer over an empty template store
    seed_points: Raw seed points of the built-in gestures, keyed by name
    horizontal_line: Straight horizontal stroke with uneven sampling
    spiral_points: A stroke unlike any built-in gesture

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
    integration: Mark test as integration test
"""

import math
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from unistroke_lib.api import GestureRecognizer
from unistroke_lib.templates import DEFAULT_GESTURES, TemplateRepository


def make_spiral(turns: float = 2.5, n: int = 80, scale: float = 40.0):
    """Archimedean spiral around (200, 200) as a list of (x, y) tuples."""
    pts = []
    for i in range(n):
        t = turns * 2 * math.pi * i / (n - 1)
        r = scale * t / (2 * math.pi)
        pts.append((200 + r * math.cos(t), 200 + r * math.sin(t)))
    return pts


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# -----------------------------------------------------------------------------
# Recognizer Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def recognizer():
    """Return a fresh recognizer seeded with the 16 built-in gestures."""
    return GestureRecognizer()


@pytest.fixture
def empty_recognizer():
    """Return a recognizer whose template store is empty."""
    return GestureRecognizer(TemplateRepository())


# -----------------------------------------------------------------------------
# Stroke Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def seed_points():
    """Return the raw built-in seed points keyed by gesture name."""
    return {name: list(points) for name, points in DEFAULT_GESTURES}


@pytest.fixture
def horizontal_line():
    """Return a horizontal stroke sampled at uneven intervals.

    Returns:
        list[tuple]: Points from (10, 50) to (110, 50).
    """
    return [(10, 50), (13, 50), (30, 50), (31, 50), (75, 50), (110, 50)]


@pytest.fixture
def spiral_points():
    """Return a spiral stroke that resembles none of the built-ins."""
    return make_spiral()

