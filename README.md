# sweepkit

Evaluate spline curves and swept surfaces described in SWP scene files,
and write the surfaces out as Wavefront OBJ meshes. The package also holds
a small set of vector, matrix and quaternion types and an arcball camera
model.

## Installing

    pip install .

For running the tests:

    pip install .[test]
    pytest

## Command line

    sweepkit SCENE.swp [OBJPREFIX]

The scene file is read and every curve and surface in it is built. When
`OBJPREFIX` is given, each named surface (not those named `.`) is written to
`OBJPREFIX_<name>.obj`; a file that cannot be opened is reported and
skipped. At the end the number of curves and surfaces is printed to
standard error.

The exit status is 0 on success and 1 when the scene file is missing,
cannot be read, or is malformed.

## The SWP format

An SWP file is a whitespace-separated sequence of objects.

Curves:

    bez2 NAME STEPS NUMPOINTS [ x y ] [ x y ] ...
    bez3 NAME STEPS NUMPOINTS [ x y z ] ...
    bsp2 NAME STEPS NUMPOINTS [ x y ] ...
    bsp3 NAME STEPS NUMPOINTS [ x y z ] ...
    circ NAME STEPS RADIUS

- `bez2`/`bez3`: cubic Bezier curves. The number of control points must be
  3n+1 (n >= 1). `STEPS` samples are taken for t in [0, 1) from the cubic
  given by the first four control points.
- `bsp2`/`bsp3`: uniform cubic B-splines with at least 4 control points;
  `STEPS` samples are taken for each cubic piece.
- `circ`: a circle of the given radius in the xy-plane, `STEPS + 1` samples.

Surfaces:

    srev NAME STEPS PROFILE
    gcyl NAME PROFILE SWEEP

- `srev`: revolves `PROFILE` about the y-axis in 360 one-degree steps;
  `STEPS` is read but does not change the resolution.
- `gcyl`: sweeps `PROFILE` along the frames of `SWEEP`.

`PROFILE` must name an earlier 2D curve that lies flat in the xy-plane;
`SWEEP` may name any earlier curve. A name of `.` makes an object anonymous:
it is built but cannot be referred to later. Names may not be reused.

Any error — an unknown type, a reused or missing name, a 3D profile, a
wrong number of control points, or malformed numbers — raises
`sweepkit.parse.SwpParseError`. Progress is reported through the standard
`logging` module at INFO level.

## Library use

```python
from sweepkit.vecmath.vectors import Vector3
from sweepkit.curve import eval_bezier, eval_circle
from sweepkit.surf import make_gen_cyl, write_obj
from sweepkit.parse import parse_swp

profile = eval_circle(0.2, 24)
sweep = eval_bezier(
    [Vector3(0, 0, 0), Vector3(1, 1, 0), Vector3(2, -1, 0), Vector3(3, 0, 0)],
    30,
)
surface = make_gen_cyl(profile, sweep)

with open("tube.obj", "w") as out:
    write_obj(out, surface)

with open("scene.swp") as stream:
    scene = parse_swp(stream)
print(scene.curve_names, scene.surface_names)
```

### Modules

- `sweepkit.curve`: `CurvePoint` (position, tangent, normal, binormal) and
  `eval_bezier`, `eval_bspline`, `eval_circle`, which return lists of
  `CurvePoint` and raise `ValueError` for too few control points.
- `sweepkit.surf`: `Surface` (vertices, normals, triangle faces),
  `is_flat`, `make_surf_rev`, `make_gen_cyl` (both raise `ValueError` for a
  profile not flat in the xy-plane) and `write_obj`.
- `sweepkit.parse`: `parse_swp(stream)` returning an `SwpScene` with
  `control_points`, `curves`, `curve_names`, `surfaces` and
  `surface_names`.
- `sweepkit.cli`: `load_objects(path, prefix=None)` and `main(argv=None)`.
- `sweepkit.camera`: `Camera` and `Button`. The camera turns mouse events
  into rotation (left button, arcball), panning (middle) and zoom (right):
  set it up with `set_dimensions`, `set_viewport`, `set_perspective`,
  `set_distance` and `set_center`, then feed it `mouse_click`,
  `mouse_drag` and `mouse_release`; read the result from its `center`,
  `rotation` and `distance` properties.
- `sweepkit.vecmath`: `vectors.Vector2`, `vectors.Vector3`,
  `vector4.Vector4`, `matrix2.Matrix2`, `matrix3.Matrix3`,
  `matrix4.Matrix4` and `quaternion.Quaternion`, with arithmetic
  operators, normalization, determinants, inverses (raising
  `matrix2.SingularMatrixError` for singular matrices), rotations,
  look-at and projection matrices, and quaternion slerp, squad and
  conversions to and from rotation matrices. Matrices are indexed as
  `m[row, col]`; `Matrix4.column_major()` returns the entries in
  column-major order.

## What it does not do

There is no viewer: nothing here opens a window or draws. The `Camera`
only keeps and updates its rotation, center and distance; applying them
to a rendering API is left to the caller.