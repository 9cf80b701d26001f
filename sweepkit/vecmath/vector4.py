"""A mutable four-component float vector."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from .vectors import Vector2, Vector3


class Vector4:
    """A mutable 4D vector of floats."""

    __slots__ = ("_e",)

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0
    ) -> None:
        self._e = [float(x), float(y), float(z), float(w)]

    @classmethod
    def filled(cls, value: float) -> Vector4:
        """Return a vector with all components set to ``value``."""
        return cls(value, value, value, value)

    @classmethod
    def from_xy(cls, xy: Vector2, z: float, w: float) -> Vector4:
        return cls(xy.x, xy.y, z, w)

    @classmethod
    def from_xy_zw(cls, xy: Vector2, zw: Vector2) -> Vector4:
        return cls(xy.x, xy.y, zw.x, zw.y)

    @classmethod
    def from_xyz(cls, xyz: Vector3, w: float) -> Vector4:
        return cls(xyz.x, xyz.y, xyz.z, w)

    @classmethod
    def from_yzw(cls, x: float, yzw: Vector3) -> Vector4:
        return cls(x, yzw.x, yzw.y, yzw.z)

    @property
    def x(self) -> float:
        return self._e[0]

    @x.setter
    def x(self, value: float) -> None:
        self._e[0] = float(value)

    @property
    def y(self) -> float:
        return self._e[1]

    @y.setter
    def y(self, value: float) -> None:
        self._e[1] = float(value)

    @property
    def z(self) -> float:
        return self._e[2]

    @z.setter
    def z(self, value: float) -> None:
        self._e[2] = float(value)

    @property
    def w(self) -> float:
        return self._e[3]

    @w.setter
    def w(self, value: float) -> None:
        self._e[3] = float(value)

    def __getitem__(self, index: int) -> float:
        return self._e[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._e[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._e)

    def __len__(self) -> int:
        return 4

    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def yz(self) -> Vector2:
        return Vector2(self.y, self.z)

    def zw(self) -> Vector2:
        return Vector2(self.z, self.w)

    def wx(self) -> Vector2:
        return Vector2(self.w, self.x)

    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def yzw(self) -> Vector3:
        return Vector3(self.y, self.z, self.w)

    def zwx(self) -> Vector3:
        return Vector3(self.z, self.w, self.x)

    def wxy(self) -> Vector3:
        return Vector3(self.w, self.x, self.y)

    def xyw(self) -> Vector3:
        return Vector3(self.x, self.y, self.w)

    def yzx(self) -> Vector3:
        return Vector3(self.y, self.z, self.x)

    def zwy(self) -> Vector3:
        return Vector3(self.z, self.w, self.y)

    def wxz(self) -> Vector3:
        return Vector3(self.w, self.x, self.z)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return sum(c * c for c in self._e)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        norm = self.length()
        self._e = [c / norm for c in self._e]

    def normalized(self) -> Vector4:
        norm = self.length()
        return Vector4(*(c / norm for c in self._e))

    def homogenize(self) -> None:
        """Divide by w in place, unless w is zero."""
        if self.w != 0:
            w = self.w
            self._e = [self.x / w, self.y / w, self.z / w, 1.0]

    def homogenized(self) -> Vector4:
        if self.w != 0:
            w = self.w
            return Vector4(self.x / w, self.y / w, self.z / w, 1.0)
        return Vector4(*self._e)

    def negate(self) -> None:
        self._e = [-c for c in self._e]

    def __add__(self, other: object) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(*(a + b for a, b in zip(self._e, other._e)))

    def __sub__(self, other: object) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(*(a - b for a, b in zip(self._e, other._e)))

    def __mul__(self, other: object) -> Vector4:
        if isinstance(other, Vector4):
            return Vector4(*(a * b for a, b in zip(self._e, other._e)))
        if isinstance(other, Real):
            return Vector4(*(c * other for c in self._e))
        return NotImplemented

    def __rmul__(self, other: object) -> Vector4:
        if isinstance(other, Real):
            return Vector4(*(other * c for c in self._e))
        return NotImplemented

    def __truediv__(self, other: object) -> Vector4:
        if isinstance(other, Vector4):
            return Vector4(*(a / b for a, b in zip(self._e, other._e)))
        if isinstance(other, Real):
            return Vector4(*(c / other for c in self._e))
        return NotImplemented

    def __neg__(self) -> Vector4:
        return Vector4(*(-c for c in self._e))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return self._e == other._e

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "< %.4f, %.4f, %.4f, %.4f >" % tuple(self._e)

    def __repr__(self) -> str:
        return "Vector4({!r}, {!r}, {!r}, {!r})".format(*self._e)

    @staticmethod
    def dot(v0: Vector4, v1: Vector4) -> float:
        return sum(a * b for a, b in zip(v0._e, v1._e))

    @staticmethod
    def lerp(v0: Vector4, v1: Vector4, alpha: float) -> Vector4:
        return alpha * (v1 - v0) + v0