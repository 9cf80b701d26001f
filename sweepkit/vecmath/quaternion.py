"""Quaternions for representing and interpolating 3D rotations."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from .matrix3 import Matrix3
from .vector4 import Vector4
from .vectors import Vector3


def _clamped_acos(value: float) -> float:
    return math.acos(max(-1.0, min(1.0, value)))


class Quaternion:
    """A mutable quaternion ``w + x i + y j + z k``, indexed as (w, x, y, z)."""

    __slots__ = ("_e",)

    def __init__(
        self, w: float = 0.0, x: float = 0.0, y: float = 0.0, z: float = 0.0
    ) -> None:
        self._e = [float(w), float(x), float(y), float(z)]

    @classmethod
    def from_vector3(cls, v: Vector3) -> Quaternion:
        """Return the pure quaternion with zero real part and imaginary part ``v``."""
        return cls(0.0, v.x, v.y, v.z)

    @classmethod
    def from_vector4(cls, v: Vector4) -> Quaternion:
        """Copy the components of ``v`` directly, in order, as (w, x, y, z)."""
        return cls(v[0], v[1], v[2], v[3])

    @property
    def w(self) -> float:
        return self._e[0]

    @property
    def x(self) -> float:
        return self._e[1]

    @property
    def y(self) -> float:
        return self._e[2]

    @property
    def z(self) -> float:
        return self._e[3]

    def __getitem__(self, index: int) -> float:
        return self._e[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._e[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._e)

    def __len__(self) -> int:
        return 4

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self._e == other._e

    __hash__ = None  # type: ignore[assignment]

    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def wxyz(self) -> Vector4:
        return Vector4(self.w, self.x, self.y, self.z)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return sum(c * c for c in self._e)

    def normalize(self) -> None:
        """Scale this quaternion in place to unit length."""
        reciprocal = 1.0 / self.length()
        self._e = [c * reciprocal for c in self._e]

    def normalized(self) -> Quaternion:
        q = Quaternion(*self._e)
        q.normalize()
        return q

    def conjugate(self) -> None:
        w, x, y, z = self._e
        self._e = [w, -x, -y, -z]

    def conjugated(self) -> Quaternion:
        w, x, y, z = self._e
        return Quaternion(w, -x, -y, -z)

    def invert(self) -> None:
        self._e = list(self.inverse())

    def inverse(self) -> Quaternion:
        return self.conjugated() * (1.0 / self.length_squared())

    def log(self) -> Quaternion:
        """Logarithm map of a unit quaternion."""
        w, x, y, z = self._e
        length = math.sqrt(x * x + y * y + z * z)
        if length < 1e-6:
            return Quaternion(0.0, x, y, z)
        coeff = _clamped_acos(w) / length
        return Quaternion(0.0, x * coeff, y * coeff, z * coeff)

    def exp(self) -> Quaternion:
        """Exponential map; the real part is ignored."""
        _, x, y, z = self._e
        theta = math.sqrt(x * x + y * y + z * z)
        if theta < 1e-6:
            return Quaternion(math.cos(theta), x, y, z)
        coeff = math.sin(theta) / theta
        return Quaternion(math.cos(theta), x * coeff, y * coeff, z * coeff)

    def axis_angle(self) -> tuple[Vector3, float]:
        """Return the unit rotation axis and the angle in radians about it."""
        theta = _clamped_acos(self.w) * 2.0
        reciprocal = 1.0 / math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)
        return (
            Vector3(self.x * reciprocal, self.y * reciprocal, self.z * reciprocal),
            theta,
        )

    def set_axis_angle(self, radians: float, axis: Vector3) -> None:
        """Set this to a rotation of ``radians`` about ``axis`` (any nonzero length)."""
        half_sin = math.sin(radians / 2.0)
        reciprocal = 1.0 / axis.length()
        self._e = [
            math.cos(radians / 2.0),
            axis.x * half_sin * reciprocal,
            axis.y * half_sin * reciprocal,
            axis.z * half_sin * reciprocal,
        ]

    def __str__(self) -> str:
        return "< %.4f + %.4f i + %.4f j + %.4f k >" % tuple(self._e)

    def __repr__(self) -> str:
        return "Quaternion({!r}, {!r}, {!r}, {!r})".format(*self._e)

    def __add__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a + b for a, b in zip(self._e, other._e)))

    def __sub__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a - b for a, b in zip(self._e, other._e)))

    def __neg__(self) -> Quaternion:
        return Quaternion(*(-c for c in self._e))

    def __mul__(self, other: object) -> Quaternion:
        if isinstance(other, Quaternion):
            w0, x0, y0, z0 = self._e
            w1, x1, y1, z1 = other._e
            return Quaternion(
                w0 * w1 - x0 * x1 - y0 * y1 - z0 * z1,
                w0 * x1 + x0 * w1 + y0 * z1 - z0 * y1,
                w0 * y1 - x0 * z1 + y0 * w1 + z0 * x1,
                w0 * z1 + x0 * y1 - y0 * x1 + z0 * w1,
            )
        if isinstance(other, Real):
            return Quaternion(*(other * c for c in self._e))
        return NotImplemented

    def __rmul__(self, other: object) -> Quaternion:
        if isinstance(other, Real):
            return Quaternion(*(other * c for c in self._e))
        return NotImplemented

    @staticmethod
    def dot(q0: Quaternion, q1: Quaternion) -> float:
        return sum(a * b for a, b in zip(q0._e, q1._e))

    @staticmethod
    def lerp(q0: Quaternion, q1: Quaternion, alpha: float) -> Quaternion:
        """Linear interpolation, renormalized."""
        return (q0 + alpha * (q1 - q0)).normalized()

    @staticmethod
    def slerp(
        a: Quaternion, b: Quaternion, t: float, allow_flip: bool = True
    ) -> Quaternion:
        """Spherical linear interpolation from ``a`` (t=0) to ``b`` (t=1)."""
        cos_angle = Quaternion.dot(a, b)
        if 1.0 - abs(cos_angle) < 0.01:
            c1 = 1.0 - t
            c2 = t
        else:
            angle = _clamped_acos(abs(cos_angle))
            sin_angle = math.sin(angle)
            c1 = math.sin(angle * (1.0 - t)) / sin_angle
            c2 = math.sin(angle * t) / sin_angle
        if allow_flip and cos_angle < 0.0:
            c1 = -c1
        return Quaternion(*(c1 * p + c2 * q for p, q in zip(a._e, b._e)))

    @staticmethod
    def squad(
        a: Quaternion, tan_a: Quaternion, tan_b: Quaternion, b: Quaternion, t: float
    ) -> Quaternion:
        """Spherical quadratic interpolation between ``a`` and ``b`` with tangents."""
        ab = Quaternion.slerp(a, b, t)
        tangent = Quaternion.slerp(tan_a, tan_b, t, False)
        return Quaternion.slerp(ab, tangent, 2.0 * t * (1.0 - t), False)

    @staticmethod
    def cubic_interpolate(
        q0: Quaternion, q1: Quaternion, q2: Quaternion, q3: Quaternion, t: float
    ) -> Quaternion:
        """Catmull-Rom style interpolation between ``q1`` (t=0) and ``q2`` (t=1)."""
        q0q1 = Quaternion.slerp(q0, q1, t + 1)
        q1q2 = Quaternion.slerp(q1, q2, t)
        q2q3 = Quaternion.slerp(q2, q3, t - 1)
        left = Quaternion.slerp(q0q1, q1q2, 0.5 * (t + 1))
        right = Quaternion.slerp(q1q2, q2q3, 0.5 * t)
        return Quaternion.slerp(left, right, t)

    @staticmethod
    def log_difference(a: Quaternion, b: Quaternion) -> Quaternion:
        """Return ``log(a^-1 b)``."""
        diff = a.inverse() * b
        diff.normalize()
        return diff.log()

    @staticmethod
    def squad_tangent(
        before: Quaternion, center: Quaternion, after: Quaternion
    ) -> Quaternion:
        """Tangent at ``center`` for use with :meth:`squad`."""
        l1 = Quaternion.log_difference(center, before)
        l2 = Quaternion.log_difference(center, after)
        e = Quaternion(*(-0.25 * (p + q) for p, q in zip(l1._e, l2._e)))
        return center * e.exp()

    @classmethod
    def from_rotation_matrix(cls, m: Matrix3) -> Quaternion:
        """Return the unit quaternion of the rotation matrix ``m``."""
        one_plus_trace = 1.0 + m[0, 0] + m[1, 1] + m[2, 2]
        if one_plus_trace > 1e-5:
            s = math.sqrt(one_plus_trace) * 2.0
            x = (m[2, 1] - m[1, 2]) / s
            y = (m[0, 2] - m[2, 0]) / s
            z = (m[1, 0] - m[0, 1]) / s
            w = 0.25 * s
        elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
            s = math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2]) * 2.0
            x = 0.25 * s
            y = (m[0, 1] + m[1, 0]) / s
            z = (m[0, 2] + m[2, 0]) / s
            w = (m[1, 2] - m[2, 1]) / s
        elif m[1, 1] > m[2, 2]:
            s = math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2]) * 2.0
            x = (m[0, 1] + m[1, 0]) / s
            y = 0.25 * s
            z = (m[1, 2] + m[2, 1]) / s
            w = (m[0, 2] - m[2, 0]) / s
        else:
            s = math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1]) * 2.0
            x = (m[0, 2] + m[2, 0]) / s
            y = (m[1, 2] + m[2, 1]) / s
            z = 0.25 * s
            w = (m[0, 1] - m[1, 0]) / s
        return cls(w, x, y, z).normalized()

    @classmethod
    def from_rotated_basis(cls, x: Vector3, y: Vector3, z: Vector3) -> Quaternion:
        """Rotation taking the standard axes onto the basis vectors ``x``, ``y``, ``z``."""
        return cls.from_rotation_matrix(Matrix3.from_vectors(x, y, z))

    @classmethod
    def random_rotation(cls, u0: float, u1: float, u2: float) -> Quaternion:
        """Uniformly distributed rotation given three uniform samples in [0, 1]."""
        z = u0
        theta = 2.0 * math.pi * u1
        r = math.sqrt(1.0 - z * z)
        w = math.pi * u2
        sw = math.sin(w)
        return cls(
            math.cos(w),
            sw * math.cos(theta) * r,
            sw * math.sin(theta) * r,
            sw * z,
        )