"""A mutable 4x4 float matrix with common graphics transforms."""

from __future__ import annotations

import math
from numbers import Real

from .matrix2 import Matrix2, SingularMatrixError
from .matrix3 import Matrix3
from .quaternion import Quaternion
from .vector4 import Vector4
from .vectors import Vector3


def _check_index(i: int, j: int) -> None:
    if not (0 <= i < 4 and 0 <= j < 4):
        raise IndexError(f"matrix index ({i}, {j}) out of range")


class Matrix4:
    """A 4x4 matrix indexed as ``m[row, col]``."""

    __slots__ = ("_e",)

    def __init__(
        self,
        m00: float = 0.0, m01: float = 0.0, m02: float = 0.0, m03: float = 0.0,
        m10: float = 0.0, m11: float = 0.0, m12: float = 0.0, m13: float = 0.0,
        m20: float = 0.0, m21: float = 0.0, m22: float = 0.0, m23: float = 0.0,
        m30: float = 0.0, m31: float = 0.0, m32: float = 0.0, m33: float = 0.0,
    ) -> None:
        self._e = [
            float(v)
            for v in (
                m00, m01, m02, m03,
                m10, m11, m12, m13,
                m20, m21, m22, m23,
                m30, m31, m32, m33,
            )
        ]

    @classmethod
    def filled(cls, value: float) -> Matrix4:
        return cls(*([value] * 16))

    @classmethod
    def from_vectors(
        cls,
        v0: Vector4,
        v1: Vector4,
        v2: Vector4,
        v3: Vector4,
        set_columns: bool = True,
    ) -> Matrix4:
        """Build a matrix whose columns (or rows) are the four vectors."""
        m = cls()
        setter = m.set_col if set_columns else m.set_row
        for index, v in enumerate((v0, v1, v2, v3)):
            setter(index, v)
        return m

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        _check_index(i, j)
        return self._e[i * 4 + j]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        _check_index(i, j)
        self._e[i * 4 + j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._e == other._e

    __hash__ = None  # type: ignore[assignment]

    def __itruediv__(self, d: object) -> Matrix4:
        if not isinstance(d, Real):
            return NotImplemented
        self._e = [c / d for c in self._e]
        return self

    def get_row(self, i: int) -> Vector4:
        return Vector4(*(self[i, j] for j in range(4)))

    def set_row(self, i: int, v: Vector4) -> None:
        for j, c in enumerate(v):
            self[i, j] = c

    def get_col(self, j: int) -> Vector4:
        return Vector4(*(self[i, j] for i in range(4)))

    def set_col(self, j: int, v: Vector4) -> None:
        for i, c in enumerate(v):
            self[i, j] = c

    def get_submatrix2x2(self, i0: int, j0: int) -> Matrix2:
        """Return the 2x2 block whose upper-left corner is at ``(i0, j0)``."""
        out = Matrix2()
        for i in range(2):
            for j in range(2):
                out[i, j] = self[i + i0, j + j0]
        return out

    def get_submatrix3x3(self, i0: int, j0: int) -> Matrix3:
        """Return the 3x3 block whose upper-left corner is at ``(i0, j0)``."""
        out = Matrix3()
        for i in range(3):
            for j in range(3):
                out[i, j] = self[i + i0, j + j0]
        return out

    def set_submatrix2x2(self, i0: int, j0: int, m: Matrix2) -> None:
        """Overwrite the 2x2 block whose upper-left corner is at ``(i0, j0)``."""
        for i in range(2):
            for j in range(2):
                self[i + i0, j + j0] = m[i, j]

    def set_submatrix3x3(self, i0: int, j0: int, m: Matrix3) -> None:
        """Overwrite the 3x3 block whose upper-left corner is at ``(i0, j0)``."""
        for i in range(3):
            for j in range(3):
                self[i + i0, j + j0] = m[i, j]

    def _cofactors(self) -> list[list[float]]:
        (m00, m01, m02, m03,
         m10, m11, m12, m13,
         m20, m21, m22, m23,
         m30, m31, m32, m33) = self._e
        d = Matrix3.determinant3x3
        return [
            [
                d(m11, m12, m13, m21, m22, m23, m31, m32, m33),
                -d(m12, m13, m10, m22, m23, m20, m32, m33, m30),
                d(m13, m10, m11, m23, m20, m21, m33, m30, m31),
                -d(m10, m11, m12, m20, m21, m22, m30, m31, m32),
            ],
            [
                -d(m21, m22, m23, m31, m32, m33, m01, m02, m03),
                d(m22, m23, m20, m32, m33, m30, m02, m03, m00),
                -d(m23, m20, m21, m33, m30, m31, m03, m00, m01),
                d(m20, m21, m22, m30, m31, m32, m00, m01, m02),
            ],
            [
                d(m31, m32, m33, m01, m02, m03, m11, m12, m13),
                -d(m32, m33, m30, m02, m03, m00, m12, m13, m10),
                d(m33, m30, m31, m03, m00, m01, m13, m10, m11),
                -d(m30, m31, m32, m00, m01, m02, m10, m11, m12),
            ],
            [
                -d(m01, m02, m03, m11, m12, m13, m21, m22, m23),
                d(m02, m03, m00, m12, m13, m10, m22, m23, m20),
                -d(m03, m00, m01, m13, m10, m11, m23, m20, m21),
                d(m00, m01, m02, m10, m11, m12, m20, m21, m22),
            ],
        ]

    def determinant(self) -> float:
        first = self._cofactors()[0]
        return sum(self[0, j] * first[j] for j in range(4))

    def inverse(self, epsilon: float = 0.0) -> Matrix4:
        """Return the inverse; raise SingularMatrixError if |det| < epsilon or det is 0."""
        cof = self._cofactors()
        det = sum(self[0, j] * cof[0][j] for j in range(4))
        if det == 0 or abs(det) < epsilon:
            raise SingularMatrixError(f"matrix is singular (determinant {det})")
        r = 1.0 / det
        return Matrix4(*(cof[j][i] * r for i in range(4) for j in range(4)))

    def transpose(self) -> None:
        for i in range(3):
            for j in range(i + 1, 4):
                self[i, j], self[j, i] = self[j, i], self[i, j]

    def transposed(self) -> Matrix4:
        return Matrix4(*(self[j, i] for i in range(4) for j in range(4)))

    def column_major(self) -> list[float]:
        """Return the 16 entries in column-major order, as graphics APIs expect."""
        return [self[i, j] for j in range(4) for i in range(4)]

    def __str__(self) -> str:
        return "\n".join(
            "[ %.4f %.4f %.4f %.4f ]" % tuple(self._e[r * 4:r * 4 + 4])
            for r in range(4)
        )

    def __repr__(self) -> str:
        return "Matrix4({})".format(", ".join(repr(c) for c in self._e))

    def __mul__(self, other: object):
        if isinstance(other, Matrix4):
            product = Matrix4()
            for i in range(4):
                for k in range(4):
                    product[i, k] = sum(self[i, j] * other[j, k] for j in range(4))
            return product
        if isinstance(other, Vector4):
            return Vector4(*(Vector4.dot(self.get_row(i), other) for i in range(4)))
        return NotImplemented

    @classmethod
    def ones(cls) -> Matrix4:
        return cls.filled(1.0)

    @classmethod
    def identity(cls) -> Matrix4:
        return cls.uniform_scaling(1.0)

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix4:
        return cls(
            1, 0, 0, x,
            0, 1, 0, y,
            0, 0, 1, z,
            0, 0, 0, 1,
        )

    @classmethod
    def translation_by(cls, offset: Vector3) -> Matrix4:
        return cls.translation(offset.x, offset.y, offset.z)

    @classmethod
    def rotate_x(cls, radians: float) -> Matrix4:
        c = math.cos(radians)
        s = math.sin(radians)
        return cls(
            1, 0, 0, 0,
            0, c, -s, 0,
            0, s, c, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def rotate_y(cls, radians: float) -> Matrix4:
        c = math.cos(radians)
        s = math.sin(radians)
        return cls(
            c, 0, s, 0,
            0, 1, 0, 0,
            -s, 0, c, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def rotate_z(cls, radians: float) -> Matrix4:
        c = math.cos(radians)
        s = math.sin(radians)
        return cls(
            c, -s, 0, 0,
            s, c, 0, 0,
            0, 0, 1, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def _embed(cls, m: Matrix3) -> Matrix4:
        out = cls.identity()
        out.set_submatrix3x3(0, 0, m)
        return out

    @classmethod
    def rotation(cls, direction: Vector3, radians: float) -> Matrix4:
        """Rotation by ``radians`` about the (normalized) axis ``direction``."""
        return cls._embed(Matrix3.rotation(direction, radians))

    @classmethod
    def from_quaternion(cls, q: Quaternion) -> Matrix4:
        """Rotation represented by ``q``, normalized first."""
        return cls._embed(Matrix3.from_quaternion(q))

    @classmethod
    def scaling(cls, sx: float, sy: float, sz: float) -> Matrix4:
        return cls(
            sx, 0, 0, 0,
            0, sy, 0, 0,
            0, 0, sz, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def uniform_scaling(cls, s: float) -> Matrix4:
        return cls.scaling(s, s, s)

    @classmethod
    def random_rotation(cls, u0: float, u1: float, u2: float) -> Matrix4:
        """Uniformly distributed rotation given three uniform samples in [0, 1]."""
        return cls.from_quaternion(Quaternion.random_rotation(u0, u1, u2))

    @classmethod
    def look_at(cls, eye: Vector3, center: Vector3, up: Vector3) -> Matrix4:
        """View matrix looking from ``eye`` towards ``center``."""
        z = (eye - center).normalized()
        y = up
        x = Vector3.cross(y, z)
        view = cls()
        view.set_row(0, Vector4.from_xyz(x, -Vector3.dot(x, eye)))
        view.set_row(1, Vector4.from_xyz(y, -Vector3.dot(y, eye)))
        view.set_row(2, Vector4.from_xyz(z, -Vector3.dot(z, eye)))
        view.set_row(3, Vector4(0, 0, 0, 1))
        return view

    @staticmethod
    def _depth_terms(m: Matrix4, z_near: float, z_far: float, direct_x: bool) -> None:
        if direct_x:
            m[2, 2] = 1.0 / (z_near - z_far)
            m[2, 3] = z_near / (z_near - z_far)
        else:
            m[2, 2] = 2.0 / (z_near - z_far)
            m[2, 3] = (z_near + z_far) / (z_near - z_far)

    @classmethod
    def orthographic_projection(
        cls, width: float, height: float, z_near: float, z_far: float,
        direct_x: bool = False,
    ) -> Matrix4:
        m = cls()
        m[0, 0] = 2.0 / width
        m[1, 1] = 2.0 / height
        m[3, 3] = 1.0
        m[0, 3] = -1.0
        m[1, 3] = -1.0
        cls._depth_terms(m, z_near, z_far, direct_x)
        return m

    @classmethod
    def orthographic_projection_bounds(
        cls, left: float, right: float, bottom: float, top: float,
        z_near: float, z_far: float, direct_x: bool = False,
    ) -> Matrix4:
        m = cls()
        m[0, 0] = 2.0 / (right - left)
        m[1, 1] = 2.0 / (top - bottom)
        m[3, 3] = 1.0
        m[0, 3] = (left + right) / (left - right)
        m[1, 3] = (top + bottom) / (bottom - top)
        cls._depth_terms(m, z_near, z_far, direct_x)
        return m

    @classmethod
    def perspective_projection(
        cls, fov_y_radians: float, aspect: float, z_near: float, z_far: float,
        direct_x: bool = False,
    ) -> Matrix4:
        m = cls()
        y_scale = 1.0 / math.tan(0.5 * fov_y_radians)
        m[0, 0] = y_scale / aspect
        m[1, 1] = y_scale
        m[3, 2] = -1.0
        if direct_x:
            m[2, 2] = z_far / (z_near - z_far)
            m[2, 3] = z_near * z_far / (z_near - z_far)
        else:
            m[2, 2] = (z_far + z_near) / (z_near - z_far)
            m[2, 3] = 2.0 * z_far * z_near / (z_near - z_far)
        return m

    @classmethod
    def _frustum_base(
        cls, left: float, right: float, bottom: float, top: float, z_near: float
    ) -> Matrix4:
        m = cls()
        m[0, 0] = (2.0 * z_near) / (right - left)
        m[1, 1] = (2.0 * z_near) / (top - bottom)
        m[0, 2] = (right + left) / (right - left)
        m[1, 2] = (top + bottom) / (top - bottom)
        m[3, 2] = -1.0
        return m

    @classmethod
    def frustum_projection(
        cls, left: float, right: float, bottom: float, top: float,
        z_near: float, z_far: float, direct_x: bool = False,
    ) -> Matrix4:
        m = cls._frustum_base(left, right, bottom, top, z_near)
        if direct_x:
            m[2, 2] = z_far / (z_near - z_far)
            m[2, 3] = (z_near * z_far) / (z_near - z_far)
        else:
            m[2, 2] = (z_near + z_far) / (z_near - z_far)
            m[2, 3] = (2.0 * z_near * z_far) / (z_near - z_far)
        return m

    @classmethod
    def infinite_perspective_projection(
        cls, left: float, right: float, bottom: float, top: float,
        z_near: float, direct_x: bool = False,
    ) -> Matrix4:
        """Frustum projection in the limit of an infinitely distant far plane."""
        m = cls._frustum_base(left, right, bottom, top, z_near)
        m[2, 2] = -1.0
        m[2, 3] = -z_near if direct_x else -2.0 * z_near
        return m