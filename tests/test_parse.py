import io

import pytest

from sweepkit.parse import SwpParseError, SwpScene, parse_swp
from sweepkit.vecmath.vectors import Vector3

BEZ2 = "bez2 arc 4 4\n[ 0 0 ]\n[ 1 1 ]\n[ 2 1 ]\n[ 3 0 ]\n"


def parse(text: str) -> SwpScene:
    return parse_swp(io.StringIO(text))


def test_empty_input_gives_empty_scene():
    scene = parse("   \n")
    assert scene == SwpScene()


def test_bezier_2d_control_points_and_samples():
    scene = parse(BEZ2)
    assert scene.curve_names == ["arc"]
    assert scene.control_points == [
        [Vector3(0, 0, 0), Vector3(1, 1, 0), Vector3(2, 1, 0), Vector3(3, 0, 0)]
    ]
    assert len(scene.curves[0]) == 4
    first = scene.curves[0][0].position
    assert first.x == pytest.approx(0.0)
    assert first.y == pytest.approx(0.0)


def test_brackets_without_spaces_parse_the_same():
    compact = "bez2 arc 4 4\n[0 0]\n[1 1]\n[2 1]\n[3 0]\n"
    assert parse(compact).control_points == parse(BEZ2).control_points


def test_bezier_3d_keeps_z():
    scene = parse("bez3 c 2 4 [0 0 1] [1 0 2] [2 0 3] [3 0 4]")
    assert [p.z for p in scene.control_points[0]] == [1.0, 2.0, 3.0, 4.0]


def test_bspline_samples_per_piece():
    scene = parse("bsp3 s 3 5 [0 0 0] [1 1 0] [2 0 1] [3 1 1] [4 0 0]")
    assert len(scene.curves[0]) == 2 * 3


def test_circle_has_no_control_points():
    scene = parse("circ ring 8 2")
    assert scene.control_points == [[]]
    assert len(scene.curves[0]) == 9
    assert scene.curves[0][0].position == Vector3(2, 0, 0)


def test_surface_of_revolution_from_named_profile():
    scene = parse("circ prof 4 0.5\nsrev vase 10 prof\n")
    assert scene.surface_names == ["vase"]
    surface = scene.surfaces[0]
    profile = scene.curves[0]
    assert len(surface.vertices) == 360 * len(profile)
    assert len(surface.normals) == len(surface.vertices)
    assert scene.control_points == [[], []]


def test_generalized_cylinder():
    text = "circ prof 4 0.5\nbez3 sw 5 4 [0 0 0] [1 0 0] [2 0 0] [3 0 0]\ngcyl tube prof sw\n"
    scene = parse(text)
    surface = scene.surfaces[0]
    assert len(surface.vertices) == len(scene.curves[0]) * len(scene.curves[1])
    assert len(surface.faces) == 2 * (len(scene.curves[0]) - 1) * len(scene.curves[1])


def test_anonymous_names_may_repeat():
    scene = parse("circ . 4 1\ncirc . 4 2\n")
    assert scene.curve_names == [".", "."]


def test_anonymous_curve_cannot_be_referenced():
    with pytest.raises(SwpParseError):
        parse("circ . 4 1\nsrev s 4 .\n")


def test_duplicate_name_is_an_error():
    with pytest.raises(SwpParseError, match="already exists"):
        parse("circ a 4 1\ncirc a 4 2\n")


def test_unknown_type_is_an_error():
    with pytest.raises(SwpParseError, match="unrecognized"):
        parse("Bez2 a 4 4 [0 0] [1 1] [2 1] [3 0]")


def test_missing_profile_is_an_error():
    with pytest.raises(SwpParseError, match="doesn't exist"):
        parse("srev s 4 nothing")


def test_profile_must_be_2d():
    with pytest.raises(SwpParseError, match="isn't 2d"):
        parse("bez3 c 2 4 [0 0 1] [1 0 2] [2 0 3] [3 0 4]\nsrev s 4 c\n")


def test_gcyl_profile_must_be_2d():
    text = "bez3 c 2 4 [0 0 0] [1 0 0] [2 0 0] [3 0 0]\ngcyl g c c\n"
    with pytest.raises(SwpParseError, match="isn't 2d"):
        parse(text)


def test_wrong_bezier_count_is_an_error():
    with pytest.raises(SwpParseError):
        parse("bez2 a 4 5 [0 0] [1 1] [2 1] [3 0] [4 0]")


def test_truncated_input_is_an_error():
    with pytest.raises(SwpParseError, match="end of input"):
        parse("circ c")


def test_bad_number_is_an_error():
    with pytest.raises(SwpParseError, match="expected"):
        parse("circ c many 2")