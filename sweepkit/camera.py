"""An arcball camera driven by mouse clicks and drags."""

from __future__ import annotations

import math
from enum import Enum

from .vecmath.matrix4 import Matrix4
from .vecmath.vectors import Vector3


class Button(Enum):
    """Mouse button that starts a camera interaction."""

    NONE = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


def _copy_matrix(m: Matrix4) -> Matrix4:
    return Matrix4(*(m[i, j] for i in range(4) for j in range(4)))


def _onto_disc(x: float, y: float) -> tuple[float, float, float]:
    length = math.hypot(x, y)
    if length > 1.0:
        return x / length, y / length, 1.0
    return x, y, length


class Camera:
    """Rotates (left), pans (middle) and zooms (right) around a center point.

    Dimensions, viewport and perspective must be set before dragging.
    """

    def __init__(self) -> None:
        self._dimensions = (0, 0)
        self._start_click = (0, 0)
        self._button = Button.NONE
        self._start_rot = Matrix4.identity()
        self._current_rot = Matrix4.identity()
        self._fovy = 0.0
        self._aspect = 0.0
        self._viewport = (0, 0, 0, 0)
        self._start_center = Vector3()
        self._current_center = Vector3()
        self._start_distance = 0.0
        self._current_distance = 0.0

    def set_dimensions(self, w: int, h: int) -> None:
        self._dimensions = (w, h)

    def set_viewport(self, x: int, y: int, w: int, h: int) -> None:
        self._viewport = (x, y, w, h)
        self._aspect = w / h

    def set_perspective(self, fovy: float) -> None:
        """Set the vertical field of view in degrees."""
        self._fovy = float(fovy)

    def set_center(self, center: Vector3) -> None:
        self._start_center = center.xyz()
        self._current_center = center.xyz()

    def set_rotation(self, rotation: Matrix4) -> None:
        self._start_rot = _copy_matrix(rotation)
        self._current_rot = _copy_matrix(rotation)

    def set_distance(self, distance: float) -> None:
        self._start_distance = float(distance)
        self._current_distance = float(distance)

    @property
    def center(self) -> Vector3:
        return self._current_center.xyz()

    @property
    def rotation(self) -> Matrix4:
        return _copy_matrix(self._current_rot)

    @property
    def distance(self) -> float:
        return self._current_distance

    def mouse_click(self, button: Button, x: int, y: int) -> None:
        """Start an interaction, discarding any uncommitted change it controls."""
        self._start_click = (x, y)
        self._button = button
        if button is Button.LEFT:
            self._current_rot = _copy_matrix(self._start_rot)
        elif button is Button.MIDDLE:
            self._current_center = self._start_center.xyz()
        elif button is Button.RIGHT:
            self._current_distance = self._start_distance

    def mouse_drag(self, x: int, y: int) -> None:
        if self._button is Button.LEFT:
            self._arcball_rotation(x, y)
        elif self._button is Button.MIDDLE:
            self._plane_translation(x, y)
        elif self._button is Button.RIGHT:
            self._distance_zoom(x, y)

    def mouse_release(self, x: int, y: int) -> None:
        """Commit the current rotation, center and distance."""
        self._start_rot = _copy_matrix(self._current_rot)
        self._start_center = self._current_center.xyz()
        self._start_distance = self._current_distance
        self._button = Button.NONE

    def _arcball_rotation(self, x: int, y: int) -> None:
        w, h = self._dimensions
        scale = 1.0 / (h if w > h else w)

        sx = (self._start_click[0] - w / 2.0) * scale
        sy = -(self._start_click[1] - h / 2.0) * scale
        ex = (x - w / 2.0) * scale
        ey = -(y - h / 2.0) * scale

        sx, sy, sl = _onto_disc(sx, sy)
        ex, ey, el = _onto_disc(ex, ey)
        sz = math.sqrt(max(0.0, 1.0 - sl * sl))
        ez = math.sqrt(max(0.0, 1.0 - el * el))

        dot = sx * ex + sy * ey + sz * ez
        if dot != 1:
            axis = Vector3(sy * ez - ey * sz, sz * ex - ez * sx, sx * ey - ex * sy)
            if axis.length_squared() > 0.0:
                angle = 2.0 * math.acos(max(-1.0, min(1.0, dot)))
                self._current_rot = Matrix4.rotation(axis, angle) * self._start_rot
                return
        self._current_rot = _copy_matrix(self._start_rot)

    def _plane_translation(self, x: int, y: int) -> None:
        vx, vy, vw, vh = self._viewport
        sx = self._start_click[0] - vx
        sy = self._start_click[1] - vy
        cx = x - vx
        cy = y - vy

        d = vh / 2.0 / math.tan(self._fovy * math.pi / 180.0 / 2.0)
        su = -sy + vh / 2.0
        cu = -cy + vh / 2.0
        sr = sx - vw / 2.0
        cr = cx - vw / 2.0

        factor = -self._current_distance / d
        move_right = (cr - sr) * factor
        move_up = (cu - su) * factor

        rot = self._current_rot
        self._current_center = (
            self._start_center
            + move_right * rot.get_row(0).xyz()
            + move_up * rot.get_row(1).xyz()
        )

    def _distance_zoom(self, x: int, y: int) -> None:
        vy, vh = self._viewport[1], self._viewport[3]
        sy = self._start_click[1] - vy
        cy = y - vy
        delta = (cy - sy) / vh
        self._current_distance = self._start_distance * math.exp(delta)