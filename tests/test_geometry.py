import pytest

from pang.geometry import distance, segment_distance_sq


def test_distance_pythagorean():
    assert distance(0, 0, 3, 4) == pytest.approx(5.0)


def test_distance_symmetric_and_zero():
    assert distance(1.5, -2, 7, 3) == pytest.approx(distance(7, 3, 1.5, -2))
    assert distance(2, 2, 2, 2) == 0.0


def test_segment_projection_inside():
    assert segment_distance_sq(0, 1, -1, 0, 1, 0) == pytest.approx(1.0)


def test_segment_point_on_segment():
    assert segment_distance_sq(0.5, 0, -1, 0, 1, 0) == pytest.approx(0.0)


def test_segment_past_end_uses_b():
    result = segment_distance_sq(3, 14, 0, 0, 0, 10)
    assert result == pytest.approx(distance(3, 14, 0, 10) ** 2)


def test_degenerate_segment():
    result = segment_distance_sq(4, 6, 1, 2, 1, 2)
    assert result == pytest.approx(distance(4, 6, 1, 2) ** 2)


def test_segment_never_exceeds_endpoint_distances():
    p = (2.0, 3.0)
    a = (-1.0, -1.0)
    b = (4.0, 0.5)
    d = segment_distance_sq(*p, *a, *b)
    assert d <= distance(*p, *a) ** 2 + 1e-12
    assert d <= distance(*p, *b) ** 2 + 1e-12