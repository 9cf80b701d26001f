"""A mutable 3x3 float matrix."""

from __future__ import annotations

import math

from .matrix2 import Matrix2, SingularMatrixError
from .vectors import Vector3


def _check_index(i: int, j: int) -> None:
    if not (0 <= i < 3 and 0 <= j < 3):
        raise IndexError(f"matrix index ({i}, {j}) out of range")


class Matrix3:
    """A 3x3 matrix indexed as ``m[row, col]``."""

    __slots__ = ("_e",)

    def __init__(
        self,
        m00: float = 0.0,
        m01: float = 0.0,
        m02: float = 0.0,
        m10: float = 0.0,
        m11: float = 0.0,
        m12: float = 0.0,
        m20: float = 0.0,
        m21: float = 0.0,
        m22: float = 0.0,
    ) -> None:
        self._e = [
            float(v) for v in (m00, m01, m02, m10, m11, m12, m20, m21, m22)
        ]

    @classmethod
    def filled(cls, value: float) -> Matrix3:
        return cls(*([value] * 9))

    @classmethod
    def from_vectors(
        cls, v0: Vector3, v1: Vector3, v2: Vector3, set_columns: bool = True
    ) -> Matrix3:
        """Build a matrix whose columns (or rows) are ``v0``, ``v1``, ``v2``."""
        m = cls()
        setter = m.set_col if set_columns else m.set_row
        for index, v in enumerate((v0, v1, v2)):
            setter(index, v)
        return m

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        _check_index(i, j)
        return self._e[i * 3 + j]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        _check_index(i, j)
        self._e[i * 3 + j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self._e == other._e

    __hash__ = None  # type: ignore[assignment]

    def get_row(self, i: int) -> Vector3:
        return Vector3(self[i, 0], self[i, 1], self[i, 2])

    def set_row(self, i: int, v: Vector3) -> None:
        for j, c in enumerate(v):
            self[i, j] = c

    def get_col(self, j: int) -> Vector3:
        return Vector3(self[0, j], self[1, j], self[2, j])

    def set_col(self, j: int, v: Vector3) -> None:
        for i, c in enumerate(v):
            self[i, j] = c

    def get_submatrix2x2(self, i0: int, j0: int) -> Matrix2:
        """Return the 2x2 block whose upper-left corner is at ``(i0, j0)``."""
        out = Matrix2()
        for i in range(2):
            for j in range(2):
                out[i, j] = self[i + i0, j + j0]
        return out

    def set_submatrix2x2(self, i0: int, j0: int, m: Matrix2) -> None:
        """Overwrite the 2x2 block whose upper-left corner is at ``(i0, j0)``."""
        for i in range(2):
            for j in range(2):
                self[i + i0, j + j0] = m[i, j]

    def determinant(self) -> float:
        return Matrix3.determinant3x3(*self._e)

    def inverse(self, epsilon: float = 0.0) -> Matrix3:
        """Return the inverse; raise SingularMatrixError if |det| < epsilon or det is 0."""
        m00, m01, m02, m10, m11, m12, m20, m21, m22 = self._e
        det2 = Matrix2.determinant2x2

        c00 = det2(m11, m12, m21, m22)
        c01 = -det2(m10, m12, m20, m22)
        c02 = det2(m10, m11, m20, m21)

        c10 = -det2(m01, m02, m21, m22)
        c11 = det2(m00, m02, m20, m22)
        c12 = -det2(m00, m01, m20, m21)

        c20 = det2(m01, m02, m11, m12)
        c21 = -det2(m00, m02, m10, m12)
        c22 = det2(m00, m01, m10, m11)

        det = m00 * c00 + m01 * c01 + m02 * c02
        if det == 0 or abs(det) < epsilon:
            raise SingularMatrixError(f"matrix is singular (determinant {det})")
        r = 1.0 / det
        return Matrix3(
            c00 * r, c10 * r, c20 * r,
            c01 * r, c11 * r, c21 * r,
            c02 * r, c12 * r, c22 * r,
        )

    def transpose(self) -> None:
        for i in range(2):
            for j in range(i + 1, 3):
                self[i, j], self[j, i] = self[j, i], self[i, j]

    def transposed(self) -> Matrix3:
        out = Matrix3()
        for i in range(3):
            for j in range(3):
                out[j, i] = self[i, j]
        return out

    def __str__(self) -> str:
        return "\n".join(
            "[ %.4f %.4f %.4f ]" % tuple(self._e[r * 3:r * 3 + 3]) for r in range(3)
        )

    def __repr__(self) -> str:
        return "Matrix3({})".format(", ".join(repr(c) for c in self._e))

    def __mul__(self, other: object):
        if isinstance(other, Matrix3):
            product = Matrix3()
            for i in range(3):
                for k in range(3):
                    product[i, k] = sum(self[i, j] * other[j, k] for j in range(3))
            return product
        if isinstance(other, Vector3):
            return Vector3(*(Vector3.dot(self.get_row(i), other) for i in range(3)))
        return NotImplemented

    @staticmethod
    def determinant3x3(
        m00: float, m01: float, m02: float,
        m10: float, m11: float, m12: float,
        m20: float, m21: float, m22: float,
    ) -> float:
        return (
            m00 * (m11 * m22 - m12 * m21)
            - m01 * (m10 * m22 - m12 * m20)
            + m02 * (m10 * m21 - m11 * m20)
        )

    @classmethod
    def ones(cls) -> Matrix3:
        return cls.filled(1.0)

    @classmethod
    def identity(cls) -> Matrix3:
        return cls.uniform_scaling(1.0)

    @classmethod
    def rotate_x(cls, radians: float) -> Matrix3:
        c = math.cos(radians)
        s = math.sin(radians)
        return cls(1, 0, 0, 0, c, -s, 0, s, c)

    @classmethod
    def rotate_y(cls, radians: float) -> Matrix3:
        c = math.cos(radians)
        s = math.sin(radians)
        return cls(c, 0, s, 0, 1, 0, -s, 0, c)

    @classmethod
    def rotate_z(cls, radians: float) -> Matrix3:
        c = math.cos(radians)
        s = math.sin(radians)
        return cls(c, -s, 0, s, c, 0, 0, 0, 1)

    @classmethod
    def scaling(cls, sx: float, sy: float, sz: float) -> Matrix3:
        return cls(sx, 0, 0, 0, sy, 0, 0, 0, sz)

    @classmethod
    def uniform_scaling(cls, s: float) -> Matrix3:
        return cls.scaling(s, s, s)

    @classmethod
    def rotation(cls, direction: Vector3, radians: float) -> Matrix3:
        """Rotation by ``radians`` about the (normalized) axis ``direction``."""
        x, y, z = direction.normalized()
        c = math.cos(radians)
        s = math.sin(radians)
        t = 1.0 - c
        return cls(
            x * x * t + c, y * x * t - z * s, z * x * t + y * s,
            x * y * t + z * s, y * y * t + c, z * y * t - x * s,
            x * z * t - y * s, y * z * t + x * s, z * z * t + c,
        )

    @classmethod
    def from_quaternion(cls, q) -> Matrix3:
        """Rotation represented by quaternion ``q`` (indexed w, x, y, z), normalized first."""
        qn = q.normalized()
        w, x, y, z = qn[0], qn[1], qn[2], qn[3]
        xx, yy, zz = x * x, y * y, z * z
        xy, zw = x * y, z * w
        xz, yw = x * z, y * w
        yz, xw = y * z, x * w
        return cls(
            1.0 - 2.0 * (yy + zz), 2.0 * (xy - zw), 2.0 * (xz + yw),
            2.0 * (xy + zw), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - xw),
            2.0 * (xz - yw), 2.0 * (yz + xw), 1.0 - 2.0 * (xx + yy),
        )