"""Sampling of cubic Bezier curves, cubic B-splines and circles with moving frames."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from .vecmath.matrix4 import Matrix4
from .vecmath.vector4 import Vector4
from .vecmath.vectors import Vector3

_BEZIER = Matrix4(
    1.0, -3.0, 3.0, -1.0,
    0.0, 3.0, -6.0, 3.0,
    0.0, 0.0, 3.0, -3.0,
    0.0, 0.0, 0.0, 1.0,
)

_BEZIER_DERIVATIVE = Matrix4(
    -3.0, 6.0, -3.0, 0.0,
    3.0, -12.0, 9.0, 0.0,
    0.0, 6.0, -9.0, 0.0,
    0.0, 0.0, 3.0, 0.0,
)

_BSPLINE = Matrix4(
    1.0 / 6, -3.0 / 6, 3.0 / 6, -1.0 / 6,
    4.0 / 6, 0.0, -1.0, 3.0 / 6,
    1.0 / 6, 3.0 / 6, 3.0 / 6, -3.0 / 6,
    0.0, 0.0, 0.0, 1.0 / 6,
)


@dataclass
class CurvePoint:
    """A sample on a curve: its position and the unit tangent, normal and binormal."""

    position: Vector3 = field(default_factory=Vector3)
    tangent: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = field(default_factory=Vector3)
    binormal: Vector3 = field(default_factory=Vector3)


def _geometry(points: list[Vector3]) -> Matrix4:
    """Matrix whose columns are the four control points (with w = 0)."""
    return Matrix4.from_vectors(*(Vector4.from_xyz(p, 0.0) for p in points))


def eval_bezier(points: Iterable[Vector3], steps: int) -> list[CurvePoint]:
    """Sample a cubic Bezier curve ``steps`` times for t in [0, 1).

    The control points must number 3n+1. The samples are taken from the
    cubic defined by the first four control points.
    """
    points = list(points)
    if len(points) < 4 or len(points) % 3 != 1:
        raise ValueError("a Bezier curve needs 3n+1 control points (n >= 1)")

    geometry = _geometry(points[:4])
    basis = geometry * _BEZIER
    derivative_basis = geometry * _BEZIER_DERIVATIVE

    curve: list[CurvePoint] = []
    for i in range(steps):
        t = (1.0 / steps) * i
        powers = Vector4(1.0, t, t * t, t * t * t)
        position = (basis * powers).xyz()
        tangent = (derivative_basis * powers).normalized().xyz()
        if curve:
            reference = curve[-1].binormal
        else:
            reference = tangent + Vector3(0.0, 0.0, 1.0)
        normal = Vector3.cross(reference, tangent).normalized()
        binormal = Vector3.cross(tangent, normal).normalized()
        curve.append(CurvePoint(position, tangent, normal, binormal))
    return curve


def eval_bspline(points: Iterable[Vector3], steps: int) -> list[CurvePoint]:
    """Sample a uniform cubic B-spline, ``steps`` samples per cubic piece."""
    points = list(points)
    if len(points) < 4:
        raise ValueError("a B-spline needs at least 4 control points")

    bezier_inverse = _BEZIER.inverse()
    curve: list[CurvePoint] = []
    for start in range(len(points) - 3):
        converted = _geometry(points[start:start + 4]) * _BSPLINE * bezier_inverse
        controls = [converted.get_col(j).xyz() for j in range(4)]
        curve.extend(eval_bezier(controls, steps))
    return curve


def eval_circle(radius: float, steps: int) -> list[CurvePoint]:
    """Return ``steps + 1`` samples of a circle in the xy-plane, counterclockwise."""
    curve = []
    for i in range(steps + 1):
        t = 2.0 * math.pi * i / steps
        c, s = math.cos(t), math.sin(t)
        curve.append(
            CurvePoint(
                position=radius * Vector3(c, s, 0.0),
                tangent=Vector3(-s, c, 0.0),
                normal=Vector3(-c, -s, 0.0),
                binormal=Vector3(0.0, 0.0, 1.0),
            )
        )
    return curve