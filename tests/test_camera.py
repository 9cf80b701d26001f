import math

import pytest

from sweepkit.camera import Button, Camera
from sweepkit.vecmath.matrix4 import Matrix4
from sweepkit.vecmath.vectors import Vector3


def _camera(distance=10.0):
    cam = Camera()
    cam.set_dimensions(600, 600)
    cam.set_viewport(0, 0, 600, 600)
    cam.set_perspective(50)
    cam.set_distance(distance)
    cam.set_center(Vector3(0, 0, 0))
    return cam


def _entries(m):
    return [m[i, j] for i in range(4) for j in range(4)]


def test_initial_state():
    cam = Camera()
    assert cam.rotation == Matrix4.identity()
    assert cam.center == Vector3()


def test_setters_are_reflected():
    cam = _camera()
    cam.set_center(Vector3(1, 2, 3))
    cam.set_rotation(Matrix4.rotate_z(0.5))
    assert cam.center == Vector3(1, 2, 3)
    assert cam.rotation == Matrix4.rotate_z(0.5)
    assert cam.distance == 10.0


def test_returned_values_are_copies():
    cam = _camera()
    c = cam.center
    c.x = 9.0
    r = cam.rotation
    r[0, 0] = 5.0
    assert cam.center == Vector3(0, 0, 0)
    assert cam.rotation == Matrix4.identity()


def test_left_drag_without_motion_keeps_rotation():
    cam = _camera()
    cam.mouse_click(Button.LEFT, 300, 300)
    cam.mouse_drag(300, 300)
    assert cam.rotation == Matrix4.identity()


def test_left_drag_gives_proper_rotation_about_y():
    cam = _camera()
    cam.mouse_click(Button.LEFT, 300, 300)
    cam.mouse_drag(400, 300)
    r = cam.rotation
    assert _entries(r * r.transposed()) == pytest.approx(_entries(Matrix4.identity()), abs=1e-9)
    assert r.determinant() == pytest.approx(1.0)
    assert r[1, 1] == pytest.approx(1.0)
    assert r[0, 1] == pytest.approx(0.0, abs=1e-12)
    assert r[0, 0] < 1.0


def test_release_commits_rotation():
    cam = _camera()
    cam.mouse_click(Button.LEFT, 300, 300)
    cam.mouse_drag(350, 250)
    committed = cam.rotation
    cam.mouse_release(350, 250)
    cam.mouse_click(Button.LEFT, 300, 300)
    cam.mouse_drag(300, 300)
    assert cam.rotation == committed


def test_click_without_release_discards_rotation():
    cam = _camera()
    cam.mouse_click(Button.LEFT, 300, 300)
    cam.mouse_drag(350, 250)
    cam.mouse_click(Button.LEFT, 300, 300)
    assert cam.rotation == Matrix4.identity()


def test_right_drag_zooms_exponentially():
    down = _camera()
    down.mouse_click(Button.RIGHT, 300, 300)
    down.mouse_drag(300, 400)
    up = _camera()
    up.mouse_click(Button.RIGHT, 300, 300)
    up.mouse_drag(300, 200)
    assert down.distance > 10.0
    assert up.distance < 10.0
    assert down.distance * up.distance == pytest.approx(100.0)


def test_right_click_resets_uncommitted_zoom():
    cam = _camera()
    cam.mouse_click(Button.RIGHT, 300, 300)
    cam.mouse_drag(300, 450)
    cam.mouse_click(Button.RIGHT, 300, 300)
    assert cam.distance == 10.0


def test_right_release_commits_zoom():
    cam = _camera()
    cam.mouse_click(Button.RIGHT, 300, 300)
    cam.mouse_drag(300, 450)
    zoomed = cam.distance
    cam.mouse_release(300, 450)
    cam.mouse_click(Button.RIGHT, 0, 0)
    assert cam.distance == zoomed


def test_middle_drag_pans_against_mouse():
    cam = _camera()
    cam.mouse_click(Button.MIDDLE, 300, 300)
    cam.mouse_drag(400, 300)
    c = cam.center
    assert c.x < 0.0
    assert c.y == pytest.approx(0.0, abs=1e-12)
    assert c.z == pytest.approx(0.0, abs=1e-12)

    cam.mouse_drag(300, 400)
    c = cam.center
    assert c.y > 0.0
    assert c.x == pytest.approx(0.0, abs=1e-12)


def test_pan_scales_with_distance():
    near = _camera(10.0)
    far = _camera(20.0)
    for cam in (near, far):
        cam.mouse_click(Button.MIDDLE, 300, 300)
        cam.mouse_drag(350, 320)
    assert far.center.x == pytest.approx(2.0 * near.center.x)
    assert far.center.y == pytest.approx(2.0 * near.center.y)


def test_drag_without_button_changes_nothing():
    cam = _camera()
    cam.mouse_drag(100, 100)
    assert cam.rotation == Matrix4.identity()
    assert cam.center == Vector3(0, 0, 0)
    assert cam.distance == 10.0


def test_release_ends_interaction():
    cam = _camera()
    cam.mouse_click(Button.RIGHT, 300, 300)
    cam.mouse_release(300, 300)
    cam.mouse_drag(300, 500)
    assert cam.distance == 10.0
    assert math.isfinite(cam.distance)