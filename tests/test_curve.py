import math

import pytest

from sweepkit.curve import CurvePoint, eval_bezier, eval_bspline, eval_circle
from sweepkit.vecmath.vectors import Vector3

CURVY = [
    Vector3(0.0, 0.0, 0.0),
    Vector3(1.0, 2.0, 0.0),
    Vector3(3.0, -1.0, 1.0),
    Vector3(4.0, 0.0, 2.0),
]


def _line(n):
    return [Vector3(float(k), 0.0, 0.0) for k in range(n)]


def _assert_orthonormal(point: CurvePoint):
    for v in (point.tangent, point.normal, point.binormal):
        assert v.length() == pytest.approx(1.0, abs=1e-9)
    assert Vector3.dot(point.tangent, point.normal) == pytest.approx(0.0, abs=1e-9)
    assert Vector3.dot(point.tangent, point.binormal) == pytest.approx(0.0, abs=1e-9)
    assert Vector3.dot(point.normal, point.binormal) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("count", [0, 1, 2, 3, 5, 6, 8])
def test_bezier_rejects_bad_point_counts(count):
    with pytest.raises(ValueError):
        eval_bezier(_line(count), 4)


def test_bezier_sample_count():
    assert len(eval_bezier(_line(4), 5)) == 5
    assert eval_bezier(_line(4), 0) == []


def test_bezier_starts_at_first_control_point():
    curve = eval_bezier(CURVY, 8)
    assert list(curve[0].position) == pytest.approx(list(CURVY[0]), abs=1e-12)


def test_bezier_frames_are_orthonormal():
    for point in eval_bezier(CURVY, 10):
        _assert_orthonormal(point)


def test_bezier_straight_line():
    curve = eval_bezier(_line(4), 6)
    xs = [p.position.x for p in curve]
    assert xs == sorted(xs)
    assert len(set(xs)) == len(xs)
    assert all(x < 3.0 for x in xs)
    for point in curve:
        assert point.position.y == pytest.approx(0.0, abs=1e-12)
        assert point.position.z == pytest.approx(0.0, abs=1e-12)
        assert list(point.tangent) == pytest.approx([1.0, 0.0, 0.0], abs=1e-12)


def test_bezier_samples_first_segment_only():
    seven = CURVY + [Vector3(5.0, 1.0, 1.0), Vector3(6.0, 3.0, 0.0), Vector3(7.0, 0.0, 0.0)]
    full = eval_bezier(seven, 4)
    first = eval_bezier(CURVY, 4)
    assert [list(p.position) for p in full] == [list(p.position) for p in first]


def test_bspline_rejects_fewer_than_four_points():
    with pytest.raises(ValueError):
        eval_bspline(_line(3), 4)


def test_bspline_sample_count():
    points = CURVY + [Vector3(5.0, 1.0, 1.0), Vector3(6.0, 3.0, 0.0)]
    steps = 5
    assert len(eval_bspline(points, steps)) == (len(points) - 3) * steps


def test_bspline_start_point_is_weighted_average():
    curve = eval_bspline(CURVY, 4)
    expected = (CURVY[0] + 4.0 * CURVY[1] + CURVY[2]) / 6.0
    assert list(curve[0].position) == pytest.approx(list(expected), abs=1e-9)


def test_bspline_frames_are_orthonormal():
    points = CURVY + [Vector3(5.0, 1.0, 1.0)]
    for point in eval_bspline(points, 7):
        _assert_orthonormal(point)


def test_circle_samples():
    radius = 2.5
    steps = 16
    curve = eval_circle(radius, steps)
    assert len(curve) == steps + 1
    assert list(curve[0].position) == pytest.approx([radius, 0.0, 0.0])
    assert list(curve[-1].position) == pytest.approx(list(curve[0].position), abs=1e-9)
    for point in curve:
        assert point.position.length() == pytest.approx(radius)
        assert list(point.binormal) == [0.0, 0.0, 1.0]
        assert Vector3.dot(point.tangent, point.position) == pytest.approx(0.0, abs=1e-9)
        _assert_orthonormal(point)


def test_circle_normal_points_to_center():
    for point in eval_circle(3.0, 8):
        inward = (-point.position).normalized()
        assert list(point.normal) == pytest.approx(list(inward), abs=1e-9)
        assert math.isclose(point.normal.z, 0.0)