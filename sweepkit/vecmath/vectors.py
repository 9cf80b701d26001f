"""Mutable two- and three-component float vectors."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator


class Vector2:
    """A mutable 2D vector of floats."""

    __slots__ = ("_e",)

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self._e = [float(x), float(y)]

    @classmethod
    def filled(cls, value: float) -> Vector2:
        """Return a vector with both components set to ``value``."""
        return cls(value, value)

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

    def __getitem__(self, index: int) -> float:
        return self._e[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._e[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._e)

    def __len__(self) -> int:
        return 2

    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def yx(self) -> Vector2:
        return Vector2(self.y, self.x)

    def xx(self) -> Vector2:
        return Vector2(self.x, self.x)

    def yy(self) -> Vector2:
        return Vector2(self.y, self.y)

    def normal(self) -> Vector2:
        """Return the perpendicular vector ``(-y, x)``."""
        return Vector2(-self.y, self.x)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        norm = self.length()
        self._e = [c / norm for c in self._e]

    def normalized(self) -> Vector2:
        norm = self.length()
        return Vector2(self.x / norm, self.y / norm)

    def negate(self) -> None:
        self._e = [-c for c in self._e]

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector2:
        if isinstance(other, Real):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: object) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, Real):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self._e == other._e

    __hash__ = None  # type: ignore[assignment]

    def __iadd__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self._e = [a + b for a, b in zip(self._e, other._e)]
        return self

    def __isub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self._e = [a - b for a, b in zip(self._e, other._e)]
        return self

    def __imul__(self, other: object) -> Vector2:
        if not isinstance(other, Real):
            return NotImplemented
        self._e = [c * other for c in self._e]
        return self

    def __str__(self) -> str:
        return "< %.4f, %.4f >" % (self.x, self.y)

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    @staticmethod
    def dot(v0: Vector2, v1: Vector2) -> float:
        return v0.x * v1.x + v0.y * v1.y

    @staticmethod
    def cross(v0: Vector2, v1: Vector2) -> Vector3:
        """Return the cross product of the vectors embedded in the xy-plane."""
        return Vector3(0.0, 0.0, v0.x * v1.y - v0.y * v1.x)

    @staticmethod
    def lerp(v0: Vector2, v1: Vector2, alpha: float) -> Vector2:
        return alpha * (v1 - v0) + v0


class Vector3:
    """A mutable 3D vector of floats."""

    __slots__ = ("_e",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._e = [float(x), float(y), float(z)]

    @classmethod
    def filled(cls, value: float) -> Vector3:
        """Return a vector with all components set to ``value``."""
        return cls(value, value, value)

    @classmethod
    def from_xy(cls, xy: Vector2, z: float) -> Vector3:
        return cls(xy.x, xy.y, z)

    @classmethod
    def from_yz(cls, x: float, yz: Vector2) -> Vector3:
        return cls(x, yz.x, yz.y)

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

    def __getitem__(self, index: int) -> float:
        return self._e[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._e[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._e)

    def __len__(self) -> int:
        return 3

    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def xz(self) -> Vector2:
        return Vector2(self.x, self.z)

    def yz(self) -> Vector2:
        return Vector2(self.y, self.z)

    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def yzx(self) -> Vector3:
        return Vector3(self.y, self.z, self.x)

    def zxy(self) -> Vector3:
        return Vector3(self.z, self.x, self.y)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        norm = self.length()
        self._e = [c / norm for c in self._e]

    def normalized(self) -> Vector3:
        norm = self.length()
        return Vector3(self.x / norm, self.y / norm, self.z / norm)

    def homogenized(self) -> Vector2:
        """Divide x and y by z."""
        return Vector2(self.x / self.z, self.y / self.z)

    def negate(self) -> None:
        self._e = [-c for c in self._e]

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector3:
        if isinstance(other, Real):
            return Vector3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, Real):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._e == other._e

    __hash__ = None  # type: ignore[assignment]

    def __iadd__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self._e = [a + b for a, b in zip(self._e, other._e)]
        return self

    def __isub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self._e = [a - b for a, b in zip(self._e, other._e)]
        return self

    def __imul__(self, other: object) -> Vector3:
        if not isinstance(other, Real):
            return NotImplemented
        self._e = [c * other for c in self._e]
        return self

    def __str__(self) -> str:
        return "< %.4f, %.4f, %.4f >" % (self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"

    @staticmethod
    def dot(v0: Vector3, v1: Vector3) -> float:
        return v0.x * v1.x + v0.y * v1.y + v0.z * v1.z

    @staticmethod
    def cross(v0: Vector3, v1: Vector3) -> Vector3:
        return Vector3(
            v0.y * v1.z - v0.z * v1.y,
            v0.z * v1.x - v0.x * v1.z,
            v0.x * v1.y - v0.y * v1.x,
        )

    @staticmethod
    def lerp(v0: Vector3, v1: Vector3, alpha: float) -> Vector3:
        return alpha * (v1 - v0) + v0

    @staticmethod
    def cubic_interpolate(
        p0: Vector3, p1: Vector3, p2: Vector3, p3: Vector3, t: float
    ) -> Vector3:
        """Catmull-Rom interpolation between ``p1`` (t=0) and ``p2`` (t=1)."""
        p0p1 = Vector3.lerp(p0, p1, t + 1)
        p1p2 = Vector3.lerp(p1, p2, t)
        p2p3 = Vector3.lerp(p2, p3, t - 1)
        left = Vector3.lerp(p0p1, p1p2, 0.5 * (t + 1))
        right = Vector3.lerp(p1p2, p2p3, 0.5 * t)
        return Vector3.lerp(left, right, t)