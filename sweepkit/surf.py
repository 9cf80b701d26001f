"""Swept surfaces built from sampled curves, and OBJ output."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, TextIO

from .curve import CurvePoint
from .vecmath.matrix3 import Matrix3
from .vecmath.matrix4 import Matrix4
from .vecmath.vector4 import Vector4
from .vecmath.vectors import Vector3

_PI = 3.14159265
_REVOLUTION_STEPS = 360

Face = tuple[int, int, int]


@dataclass
class Surface:
    """A triangle mesh; face indices refer to both a vertex and its normal."""

    vertices: list[Vector3] = field(default_factory=list)
    normals: list[Vector3] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)


def is_flat(profile: Sequence[CurvePoint]) -> bool:
    """True when every point, tangent and normal of the curve lies in the xy-plane."""
    return all(
        p.position.z == 0.0 and p.tangent.z == 0.0 and p.normal.z == 0.0
        for p in profile
    )


def _stitch(faces: list[Face], ring: int, previous: int, size: int) -> None:
    """Join ring ``ring`` to ring ``previous`` with two triangles per quad."""
    for j in range(1, size):
        a = (previous * size + j - 1, previous * size + j, ring * size + j)
        faces.append(a)
        faces.append((a[0], a[2], a[2] - 1))


def make_surf_rev(profile: Sequence[CurvePoint], steps: int) -> Surface:
    """Revolve a profile lying in the xy-plane around the y-axis.

    The sweep is made in 360 one-degree increments; ``steps`` does not
    change the resolution.
    """
    if not is_flat(profile):
        raise ValueError("surface of revolution profile must be flat on the xy plane")

    surface = Surface()
    size = len(profile)
    for ring in range(_REVOLUTION_STEPS):
        angle = ring * _PI / 180
        c, s = math.cos(angle), math.sin(angle)
        rotation = Matrix3(c, 0.0, s, 0.0, 1.0, 0.0, -s, 0.0, c)
        for point in profile:
            surface.vertices.append(rotation * point.position)
            surface.normals.append(rotation * (-point.normal))
        _stitch(surface.faces, ring, (ring - 1) % _REVOLUTION_STEPS, size)
    return surface


def _frame(normal: Vector3, binormal: Vector3, tangent: Vector3, position: Vector3) -> Matrix4:
    return Matrix4.from_vectors(
        Vector4.from_xyz(normal, 0.0),
        Vector4.from_xyz(binormal, 0.0),
        Vector4.from_xyz(tangent, 0.0),
        Vector4.from_xyz(position, 1.0),
    )


def make_gen_cyl(profile: Sequence[CurvePoint], sweep: Sequence[CurvePoint]) -> Surface:
    """Sweep a profile lying in the xy-plane along the frames of ``sweep``."""
    if not is_flat(profile):
        raise ValueError("generalized cylinder profile must be flat on the xy plane")

    surface = Surface()
    size = len(profile)
    rings = len(sweep)
    for ring, frame in enumerate(sweep):
        placement = _frame(frame.normal, frame.binormal, frame.tangent, frame.position)
        for point in profile:
            local = _frame(-point.normal, point.binormal, point.tangent, point.position)
            result = placement * local
            surface.vertices.append(result.get_col(3).xyz())
            surface.normals.append(result.get_col(0).xyz())
        _stitch(surface.faces, ring, (ring - 1) % rings, size)
    return surface


def _num(value: float) -> str:
    return f"{value:g}"


def write_obj(out: TextIO, surface: Surface) -> None:
    """Write ``surface`` to ``out`` in Wavefront OBJ form."""
    for v in surface.vertices:
        out.write(f"v  {_num(v.x)} {_num(v.y)} {_num(v.z)}\n")
    for n in surface.normals:
        out.write(f"vn {_num(n.x)} {_num(n.y)} {_num(n.z)}\n")
    out.write("vt  0 0 0\n")
    for face in surface.faces:
        corners = "".join(f"{i + 1}/1/{i + 1} " for i in face)
        out.write(f"f  {corners}\n")