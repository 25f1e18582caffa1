"""Unit tests for the normalization pipeline.

Tests resample, indicative_angle, vectorize and normalize from
unistroke_lib.utils.normalization, and Unistroke.from_points which wraps
them.
"""

import math

import numpy as np
import pytest

from unistroke_lib.config import NUM_POINTS, SQUARE_SIZE
from unistroke_lib.domain.geometry import Point
from unistroke_lib.domain.gesture import Unistroke
from unistroke_lib.templates.defaults import DEFAULT_GESTURES
from unistroke_lib.utils.geometry import bounding_box, centroid, rotate_by
from unistroke_lib.utils.normalization import (
    indicative_angle,
    normalize,
    resample,
    vectorize,
)


def as_points(raw):
    return [Point(float(x), float(y)) for x, y in raw]


# ---------------------------------------------------------------------------
# resample
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name,raw", DEFAULT_GESTURES, ids=[n for n, _ in DEFAULT_GESTURES])
def test_resample_always_returns_num_points(name, raw):
    """Every seed gesture resamples to exactly NUM_POINTS points."""
    pts = resample(as_points(raw))
    assert len(pts) == NUM_POINTS
    assert pts[0] == Point(float(raw[0][0]), float(raw[0][1]))


def test_resample_even_spacing_on_straight_line(horizontal_line):
    """Points on a straight stroke are equally spaced regardless of input sampling."""
    pts = resample(as_points(horizontal_line))
    spacing = [pts[i].distance_to(pts[i - 1]) for i in range(1, len(pts))]
    expected = 100.0 / (NUM_POINTS - 1)
    assert max(abs(s - expected) for s in spacing) < 1e-6


def test_resample_single_segment_interpolates():
    """A single long segment is split into points on every interval."""
    pts = resample([Point(0, 0), Point(63, 0)])
    assert len(pts) == NUM_POINTS
    for i, p in enumerate(pts):
        assert p.x == pytest.approx(i, abs=1e-9)
        assert p.y == 0.0


def test_resample_ends_at_last_point():
    pts = resample(as_points([(0, 0), (40, 30), (80, 0)]))
    assert pts[-1].x == pytest.approx(80, abs=1e-6)
    assert pts[-1].y == pytest.approx(0, abs=1e-6)


def test_resample_custom_count():
    pts = resample(as_points([(0, 0), (10, 0), (10, 10)]), n=5)
    assert len(pts) == 5
    assert pts[2].x == pytest.approx(10.0)
    assert pts[2].y == pytest.approx(0.0)


def test_resample_skips_duplicate_points():
    """Repeated samples contribute nothing and do not break the walk."""
    pts = resample(as_points([(0, 0), (0, 0), (10, 0), (10, 0), (20, 0)]))
    assert len(pts) == NUM_POINTS
    assert pts[-1].x == pytest.approx(20.0)


def test_resample_rejects_single_point():
    with pytest.raises(ValueError):
        resample([Point(1, 1)])


def test_resample_rejects_zero_length():
    with pytest.raises(ValueError):
        resample([Point(5, 5), Point(5, 5), Point(5, 5)])


def test_resample_rejects_overflowing_length():
    """Finite coordinates whose segment lengths overflow are refused."""
    with pytest.raises(ValueError, match="overflows"):
        resample([Point(0, 0), Point(1e200, 5e199), Point(2e200, 0)])


# ---------------------------------------------------------------------------
# indicative_angle and vectorize
# ---------------------------------------------------------------------------

def test_indicative_angle_points_at_centroid():
    assert indicative_angle([Point(0, 0), Point(2, 2)]) == pytest.approx(math.pi / 4)
    assert indicative_angle([Point(2, 0), Point(0, 0)]) == pytest.approx(math.pi)


def test_vectorize_interleaves_and_normalizes():
    v = vectorize([Point(3, 0), Point(0, 4)])
    np.testing.assert_allclose(v, [0.6, 0.0, 0.0, 0.8])
    assert np.linalg.norm(v) == pytest.approx(1.0)


def test_vectorize_zero_vector_left_alone():
    v = vectorize([Point(0, 0)] * 4)
    assert v.shape == (8,)
    assert not np.any(v)


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name,raw", DEFAULT_GESTURES, ids=[n for n, _ in DEFAULT_GESTURES])
def test_normalize_canonical_frame(name, raw):
    """Normalized seeds are centred on the origin inside the reference square."""
    pts, vector = normalize(as_points(raw))
    c = centroid(pts)
    bbox = bounding_box(pts)
    assert len(pts) == NUM_POINTS
    assert abs(c.x) < 1e-9 and abs(c.y) < 1e-9
    assert bbox.width == pytest.approx(SQUARE_SIZE)
    assert bbox.height == pytest.approx(SQUARE_SIZE)
    assert vector.shape == (2 * NUM_POINTS,)
    assert float(np.sum(vector ** 2)) == pytest.approx(1.0, abs=1e-5)


def test_normalize_first_point_left_of_centroid(seed_points):
    """After rotation the first point lies horizontally left of the centroid."""
    pts, _ = normalize(as_points(seed_points['check']))
    assert pts[0].y == pytest.approx(0.0, abs=1e-6)
    assert pts[0].x < 0


def test_normalize_straight_line_is_idempotent(horizontal_line):
    """Re-running the pipeline on a normalized straight stroke changes nothing."""
    first, v1 = normalize(as_points(horizontal_line))
    second, v2 = normalize(first)
    for p, q in zip(first, second):
        assert p.x == pytest.approx(q.x, abs=1e-6)
        assert p.y == pytest.approx(q.y, abs=1e-6)
    np.testing.assert_allclose(v1, v2, atol=1e-9)
    assert float(np.sum(v2 ** 2)) == pytest.approx(1.0, abs=1e-5)


def test_normalize_straight_line_keeps_zero_height(horizontal_line):
    """The degenerate axis is not scaled, so the line stays flat."""
    pts, _ = normalize(as_points(horizontal_line))
    bbox = bounding_box(pts)
    assert bbox.width == pytest.approx(SQUARE_SIZE)
    assert bbox.height == pytest.approx(0.0, abs=1e-9)
    assert all(math.isfinite(p.x) and math.isfinite(p.y) for p in pts)


def test_renormalized_template_keeps_unit_vector(seed_points):
    template = Unistroke.from_points('circle', seed_points['circle'])
    again = Unistroke.from_points('circle', template.points)
    assert len(again.points) == NUM_POINTS
    assert float(np.sum(again.vector ** 2)) == pytest.approx(1.0, abs=1e-5)


@pytest.mark.parametrize("degrees", [-45, -30, -10, 0, 5, 20, 45])
def test_normalize_cancels_rotation(seed_points, degrees):
    """A rotated stroke normalizes to the same points as the original."""
    raw = as_points(seed_points['triangle'])
    base, _ = normalize(raw)
    rotated, _ = normalize(rotate_by(raw, math.radians(degrees)))
    for p, q in zip(base, rotated):
        assert p.x == pytest.approx(q.x, abs=1e-6)
        assert p.y == pytest.approx(q.y, abs=1e-6)


def test_unistroke_from_points_accepts_tuples_and_points():
    a = Unistroke.from_points('a', [(0, 0), (10, 20), (30, 5)])
    b = Unistroke.from_points('b', [Point(0, 0), Point(10, 20), Point(30, 5)])
    assert a.points == b.points
    assert not a.is_degenerate
