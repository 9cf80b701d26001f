"""A mutable 2x2 float matrix."""

from __future__ import annotations

import math
from numbers import Real

from .vectors import Vector2


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix cannot be inverted."""


def _check_index(i: int, j: int, size: int) -> None:
    if not (0 <= i < size and 0 <= j < size):
        raise IndexError(f"matrix index ({i}, {j}) out of range")


class Matrix2:
    """A 2x2 matrix indexed as ``m[row, col]``."""

    __slots__ = ("_e",)

    def __init__(
        self, m00: float = 0.0, m01: float = 0.0, m10: float = 0.0, m11: float = 0.0
    ) -> None:
        self._e = [float(m00), float(m01), float(m10), float(m11)]

    @classmethod
    def filled(cls, value: float) -> Matrix2:
        return cls(value, value, value, value)

    @classmethod
    def from_vectors(
        cls, v0: Vector2, v1: Vector2, set_columns: bool = True
    ) -> Matrix2:
        """Build a matrix whose columns (or rows) are ``v0`` and ``v1``."""
        m = cls()
        setter = m.set_col if set_columns else m.set_row
        setter(0, v0)
        setter(1, v1)
        return m

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        _check_index(i, j, 2)
        return self._e[i * 2 + j]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        _check_index(i, j, 2)
        self._e[i * 2 + j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix2):
            return NotImplemented
        return self._e == other._e

    __hash__ = None  # type: ignore[assignment]

    def get_row(self, i: int) -> Vector2:
        return Vector2(self[i, 0], self[i, 1])

    def set_row(self, i: int, v: Vector2) -> None:
        self[i, 0] = v.x
        self[i, 1] = v.y

    def get_col(self, j: int) -> Vector2:
        return Vector2(self[0, j], self[1, j])

    def set_col(self, j: int, v: Vector2) -> None:
        self[0, j] = v.x
        self[1, j] = v.y

    def determinant(self) -> float:
        return Matrix2.determinant2x2(*self._e)

    def inverse(self, epsilon: float = 0.0) -> Matrix2:
        """Return the inverse; raise SingularMatrixError if |det| < epsilon or det is 0."""
        m00, m01, m10, m11 = self._e
        det = m00 * m11 - m01 * m10
        if det == 0 or abs(det) < epsilon:
            raise SingularMatrixError(f"matrix is singular (determinant {det})")
        r = 1.0 / det
        return Matrix2(m11 * r, -m01 * r, -m10 * r, m00 * r)

    def transpose(self) -> None:
        self._e[1], self._e[2] = self._e[2], self._e[1]

    def transposed(self) -> Matrix2:
        m00, m01, m10, m11 = self._e
        return Matrix2(m00, m10, m01, m11)

    def __str__(self) -> str:
        return "[ %.4f %.4f ]\n[ %.4f %.4f ]" % tuple(self._e)

    def __repr__(self) -> str:
        return "Matrix2({!r}, {!r}, {!r}, {!r})".format(*self._e)

    def __mul__(self, other: object):
        if isinstance(other, Matrix2):
            product = Matrix2()
            for i in range(2):
                for k in range(2):
                    product[i, k] = sum(self[i, j] * other[j, k] for j in range(2))
            return product
        if isinstance(other, Vector2):
            return Vector2(
                self[0, 0] * other.x + self[0, 1] * other.y,
                self[1, 0] * other.x + self[1, 1] * other.y,
            )
        if isinstance(other, Real):
            return Matrix2(*(other * c for c in self._e))
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix2:
        if isinstance(other, Real):
            return Matrix2(*(other * c for c in self._e))
        return NotImplemented

    @staticmethod
    def determinant2x2(m00: float, m01: float, m10: float, m11: float) -> float:
        return m00 * m11 - m01 * m10

    @classmethod
    def ones(cls) -> Matrix2:
        return cls.filled(1.0)

    @classmethod
    def identity(cls) -> Matrix2:
        return cls(1.0, 0.0, 0.0, 1.0)

    @classmethod
    def rotation(cls, radians: float) -> Matrix2:
        c = math.cos(radians)
        s = math.sin(radians)
        return cls(c, -s, s, c)