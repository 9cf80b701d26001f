import math

import pytest

from sweepkit.vecmath.matrix2 import Matrix2, SingularMatrixError
from sweepkit.vecmath.matrix3 import Matrix3
from sweepkit.vecmath.matrix4 import Matrix4
from sweepkit.vecmath.quaternion import Quaternion
from sweepkit.vecmath.vector4 import Vector4
from sweepkit.vecmath.vectors import Vector3


def _entries(m):
    return [m[i, j] for i in range(4) for j in range(4)]


def _sample():
    return Matrix4(2, 1, 0, 3, 0, 4, 1, 1, 1, 0, 5, 2, 3, 1, 0, 6)


def test_constructor_is_row_major():
    m = Matrix4(*range(16))
    assert m[0, 1] == 1
    assert m[1, 0] == 4
    assert m[3, 3] == 15


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Matrix4()[4, 0]


def test_column_major_order():
    m = Matrix4(*range(16))
    assert m.column_major() == [0, 4, 8, 12, 1, 5, 9, 13, 2, 6, 10, 14, 3, 7, 11, 15]


def test_rows_and_columns():
    m = Matrix4(*range(16))
    assert m.get_row(1) == Vector4(4, 5, 6, 7)
    assert m.get_col(2) == Vector4(2, 6, 10, 14)
    m.set_row(0, Vector4(9, 9, 9, 9))
    assert m.get_row(0) == Vector4(9, 9, 9, 9)
    m.set_col(3, Vector4(1, 2, 3, 4))
    assert m.get_col(3) == Vector4(1, 2, 3, 4)


def test_from_vectors_columns_and_rows():
    vs = [Vector4(1, 2, 3, 4), Vector4(5, 6, 7, 8), Vector4(9, 10, 11, 12),
          Vector4(13, 14, 15, 16)]
    by_cols = Matrix4.from_vectors(*vs)
    by_rows = Matrix4.from_vectors(*vs, set_columns=False)
    assert by_cols.get_col(1) == vs[1]
    assert by_rows.get_row(1) == vs[1]
    assert by_cols == by_rows.transposed()


def test_itruediv():
    m = Matrix4.filled(4)
    m /= 2
    assert m == Matrix4.filled(2)


def test_submatrices_round_trip():
    m = Matrix4(*range(16))
    sub3 = m.get_submatrix3x3(1, 1)
    assert sub3 == Matrix3(5, 6, 7, 9, 10, 11, 13, 14, 15)
    sub2 = m.get_submatrix2x2(2, 0)
    assert sub2 == Matrix2(8, 9, 12, 13)
    target = Matrix4()
    target.set_submatrix3x3(1, 1, sub3)
    target.set_submatrix2x2(2, 0, sub2)
    assert target[3, 3] == 15
    assert target[2, 0] == 8
    assert target[0, 0] == 0


def test_identity_and_ones():
    m = _sample()
    assert Matrix4.identity() * m == m
    assert m * Matrix4.identity() == m
    assert Matrix4.identity().determinant() == 1
    assert Matrix4.ones().determinant() == 0


def test_inverse_gives_identity():
    m = _sample()
    product = m * m.inverse()
    assert _entries(product) == pytest.approx(_entries(Matrix4.identity()), abs=1e-9)


def test_singular_inverse_raises():
    with pytest.raises(SingularMatrixError):
        Matrix4.ones().inverse()


def test_inverse_epsilon_threshold():
    m = Matrix4.uniform_scaling(0.01)
    with pytest.raises(SingularMatrixError):
        m.inverse(epsilon=1.0)
    assert m.inverse()[0, 0] == pytest.approx(100.0)


def test_determinant_is_multiplicative():
    a = _sample()
    b = Matrix4.rotate_x(0.3) * Matrix4.scaling(2, 3, 4)
    assert (a * b).determinant() == pytest.approx(a.determinant() * b.determinant())


def test_transpose_in_place_matches_transposed():
    m = _sample()
    t = m.transposed()
    m.transpose()
    assert m == t
    assert t.transposed() == _sample()


def test_translation_moves_points_not_directions():
    t = Matrix4.translation(1, 2, 3)
    assert t * Vector4(0, 0, 0, 1) == Vector4(1, 2, 3, 1)
    assert t * Vector4(5, 6, 7, 0) == Vector4(5, 6, 7, 0)
    assert Matrix4.translation_by(Vector3(1, 2, 3)) == t


def test_rotate_z_quarter_turn():
    v = Matrix4.rotate_z(math.pi / 2) * Vector4(1, 0, 0, 0)
    assert list(v) == pytest.approx([0, 1, 0, 0], abs=1e-12)


def test_axis_rotation_matches_named_rotations():
    for axis, named in ((Vector3(1, 0, 0), Matrix4.rotate_x),
                        (Vector3(0, 1, 0), Matrix4.rotate_y),
                        (Vector3(0, 0, 2), Matrix4.rotate_z)):
        assert _entries(Matrix4.rotation(axis, 0.7)) == pytest.approx(
            _entries(named(0.7)), abs=1e-12
        )


def test_from_quaternion_embeds_matrix3():
    q = Quaternion(1, 2, 3, 4)
    m = Matrix4.from_quaternion(q)
    assert m.get_submatrix3x3(0, 0) == Matrix3.from_quaternion(q)
    assert m.get_row(3) == Vector4(0, 0, 0, 1)


def test_random_rotation_is_orthogonal():
    r = Matrix4.random_rotation(0.2, 0.5, 0.9)
    assert _entries(r * r.transposed()) == pytest.approx(
        _entries(Matrix4.identity()), abs=1e-9
    )
    assert r.determinant() == pytest.approx(1.0)


def test_look_at_maps_eye_to_origin():
    eye = Vector3(0, 0, 5)
    view = Matrix4.look_at(eye, Vector3(0, 0, 0), Vector3(0, 1, 0))
    assert list(view * Vector4.from_xyz(eye, 1)) == pytest.approx([0, 0, 0, 1])
    target = view * Vector4(0, 0, 0, 1)
    assert target.z == pytest.approx(-5)


def test_perspective_near_plane_maps_to_minus_one():
    m = Matrix4.perspective_projection(math.pi / 2, 1.0, 1.0, 10.0)
    p = (m * Vector4(0, 0, -1.0, 1)).homogenized()
    assert p.z == pytest.approx(-1.0)
    far = (m * Vector4(0, 0, -10.0, 1)).homogenized()
    assert far.z == pytest.approx(1.0)


def test_frustum_matches_symmetric_perspective():
    sym = Matrix4.perspective_projection(math.pi / 2, 1.0, 1.0, 10.0)
    fr = Matrix4.frustum_projection(-1, 1, -1, 1, 1.0, 10.0)
    assert _entries(sym) == pytest.approx(_entries(fr))
    dx = Matrix4.perspective_projection(math.pi / 2, 1.0, 1.0, 10.0, True)
    fr_dx = Matrix4.frustum_projection(-1, 1, -1, 1, 1.0, 10.0, True)
    assert _entries(dx) == pytest.approx(_entries(fr_dx))


def test_infinite_perspective_is_far_limit():
    inf = Matrix4.infinite_perspective_projection(-1, 1, -1, 1, 0.5)
    big = Matrix4.frustum_projection(-1, 1, -1, 1, 0.5, 1e12)
    assert _entries(inf) == pytest.approx(_entries(big), rel=1e-6)
    inf_dx = Matrix4.infinite_perspective_projection(-1, 1, -1, 1, 0.5, True)
    big_dx = Matrix4.frustum_projection(-1, 1, -1, 1, 0.5, 1e12, True)
    assert _entries(inf_dx) == pytest.approx(_entries(big_dx), rel=1e-6)


def test_orthographic_bounds_match_width_height_form():
    a = Matrix4.orthographic_projection(4, 2, 1, 5)
    b = Matrix4.orthographic_projection_bounds(0, 4, 0, 2, 1, 5)
    assert _entries(a) == pytest.approx(_entries(b))
    corner = a * Vector4(4, 2, -1, 1)
    assert corner.x == pytest.approx(1.0)
    assert corner.y == pytest.approx(1.0)


def test_str_format():
    lines = str(Matrix4.identity()).splitlines()
    assert len(lines) == 4
    assert lines[0] == "[ 1.0000 0.0000 0.0000 0.0000 ]"