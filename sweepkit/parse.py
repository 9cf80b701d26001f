"""Reader for SWP files describing spline curves and swept surfaces.

An SWP file is a whitespace-separated sequence of objects::

    bez2|bez3|bsp2|bsp3 NAME STEPS NUMPOINTS [ x y (z) ] ...
    circ NAME STEPS RADIUS
    srev NAME STEPS PROFILE
    gcyl NAME PROFILE SWEEP

A name of ``.`` makes the object anonymous; anonymous objects cannot be
referred to later. Profiles of surfaces must name 2D curves, while the
sweep of a generalized cylinder may be 2D or 3D.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, TextIO

from .curve import CurvePoint, eval_bezier, eval_bspline, eval_circle
from .surf import Surface, make_gen_cyl, make_surf_rev
from .vecmath.vectors import Vector3

log = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s*")
_WORD = re.compile(r"\S+")
_UNSIGNED = re.compile(r"\+?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_CURVE_TYPES: dict[str, tuple[Callable[..., list[CurvePoint]], int]] = {
    "bez2": (eval_bezier, 2),
    "bsp2": (eval_bspline, 2),
    "bez3": (eval_bezier, 3),
    "bsp3": (eval_bspline, 3),
}

ANONYMOUS = "."


class SwpParseError(ValueError):
    """Raised when an SWP file is malformed or refers to unknown objects."""


@dataclass
class SwpScene:
    """Everything read from one SWP file.

    ``control_points`` holds one list per object in file order (empty for
    objects that have no control points). Names are kept parallel to
    ``curves`` and ``surfaces``.
    """

    control_points: list[list[Vector3]] = field(default_factory=list)
    curves: list[list[CurvePoint]] = field(default_factory=list)
    curve_names: list[str] = field(default_factory=list)
    surfaces: list[Surface] = field(default_factory=list)
    surface_names: list[str] = field(default_factory=list)


class _Reader:
    """Pulls whitespace-separated words and numbers out of a text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip(self) -> None:
        self._pos = _WHITESPACE.match(self._text, self._pos).end()

    def at_end(self) -> bool:
        self._skip()
        return self._pos >= len(self._text)

    def _match(self, pattern: re.Pattern[str], what: str) -> str:
        if self.at_end():
            raise SwpParseError(f"unexpected end of input, expected {what}")
        m = pattern.match(self._text, self._pos)
        if m is None:
            found = _WORD.match(self._text, self._pos).group()
            raise SwpParseError(f"expected {what}, found {found!r}")
        self._pos = m.end()
        return m.group()

    def word(self) -> str:
        return self._match(_WORD, "a word")

    def char(self) -> str:
        if self.at_end():
            raise SwpParseError("unexpected end of input, expected a delimiter")
        c = self._text[self._pos]
        self._pos += 1
        return c

    def unsigned(self) -> int:
        return int(self._match(_UNSIGNED, "a non-negative integer"))

    def real(self) -> float:
        return float(self._match(_FLOAT, "a number"))


def _read_control_points(reader: _Reader, dim: int) -> list[Vector3]:
    count = reader.unsigned()
    log.info("  %d cps", count)
    points = []
    for _ in range(count):
        reader.char()
        coords = [reader.real() for _ in range(dim)]
        reader.char()
        if dim == 2:
            coords.append(0.0)
        points.append(Vector3(*coords))
    return points


def _build(function: Callable, *args):
    try:
        return function(*args)
    except (ValueError, ZeroDivisionError) as err:
        raise SwpParseError(str(err)) from err


def _lookup(
    name: str, curve_index: dict[str, int], dims: list[int], require_2d: bool
) -> int:
    if name not in curve_index:
        raise SwpParseError(f"[{name}] doesn't exist")
    index = curve_index[name]
    if require_2d and dims[index] != 2:
        raise SwpParseError(f"[{name}] isn't 2d")
    return index


def parse_swp(stream: TextIO) -> SwpScene:
    """Read an SWP description from ``stream`` and build its curves and surfaces."""
    reader = _Reader(stream.read())
    scene = SwpScene()
    curve_index: dict[str, int] = {}
    surface_index: dict[str, int] = {}
    dims: list[int] = []

    def add_curve(name: str, curve: list[CurvePoint], dim: int) -> None:
        scene.curves.append(curve)
        scene.curve_names.append(name)
        dims.append(dim)
        if name != ANONYMOUS:
            curve_index[name] = len(dims) - 1

    def add_surface(name: str, surface: Surface) -> None:
        scene.surfaces.append(surface)
        scene.surface_names.append(name)
        if name != ANONYMOUS:
            surface_index[name] = len(scene.surface_names) - 1

    counter = 0
    while not reader.at_end():
        obj_type = reader.word()
        log.info(">object %d", counter)
        counter += 1
        name = reader.word()

        if name in curve_index or name in surface_index:
            raise SwpParseError(f"[{name}] already exists")

        control_points: list[Vector3] = []

        if obj_type in _CURVE_TYPES:
            evaluate, dim = _CURVE_TYPES[obj_type]
            log.info(" reading %s [%s]", obj_type, name)
            steps = reader.unsigned()
            control_points = _read_control_points(reader, dim)
            add_curve(name, _build(evaluate, control_points, steps), dim)
        elif obj_type == "srev":
            log.info(" reading srev [%s]", name)
            steps = reader.unsigned()
            profile_name = reader.word()
            index = _lookup(profile_name, curve_index, dims, require_2d=True)
            add_surface(name, _build(make_surf_rev, scene.curves[index], steps))
        elif obj_type == "gcyl":
            log.info(" reading gcyl [%s]", name)
            profile_name = reader.word()
            sweep_name = reader.word()
            profile = _lookup(profile_name, curve_index, dims, require_2d=True)
            sweep = _lookup(sweep_name, curve_index, dims, require_2d=False)
            add_surface(
                name, _build(make_gen_cyl, scene.curves[profile], scene.curves[sweep])
            )
        elif obj_type == "circ":
            log.info(" reading circ [%s]", name)
            steps = reader.unsigned()
            radius = reader.real()
            add_curve(name, _build(eval_circle, radius, steps), 2)
        else:
            raise SwpParseError(f"type {obj_type} unrecognized")

        scene.control_points.append(control_points)

    return scene