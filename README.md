# gmengine

Core building blocks for a small game engine, in plain Python with no
third-party dependencies.

## What is inside

- `gmengine.mathutil` holds the scalar helpers.
  - The constants are `PI`, `PI2`, `D2R` and `R2D`.
  - The functions are `sqrt`, `clamp`, `clamp_min`, `clamp_max` and `lerp`.
- `gmengine.vector` holds three types.
  - `Vector` has x, y, z and w, with w defaulting to 1. It supports arithmetic on x, y and z, dot and cross products, normalization, rotation about each axis, angle helpers and named constants such as `Vector.UP` and `Vector.RED`. Equality compares x and y only.
  - `IntPoint` is an integer grid point.
  - `Color` is an RGBA colour that converts to and from a packed 32-bit integer with `from_int` and `to_int`.
- `gmengine.matrix` provides `Matrix` (an immutable, row-major 4x4) and `Quat`.
  - Factories build scaling, translation, Euler and quaternion rotation, per-axis rotation, `look_to_lh`, `orthographic_lh`, `perspective_fov_deg`/`_rad` and `viewport` matrices.
  - Methods cover `inverse` (raises `ValueError` when the matrix is singular), `transposed` and `decompose` into scale, quaternion and translation.
  - Vectors are row vectors, so `vector @ matrix` and `matrix @ matrix` apply transforms.
  - `transform`, `transform_coord` (w = 1) and `transform_normal` (w = 0) are module functions.
- `gmengine.bounds` provides `BoundingSphere`, `BoundingBox` and `BoundingOrientedBox`.
  - `intersects` works between any pair of them.
  - Touching counts as intersecting.
- `gmengine.transform` centres on `Transform`, which holds scale, rotation (degrees) and location.
  - `update(absolute)` rebuilds the local and world matrices and decomposes them into relative and world values.
  - `collision_data()` returns the world volumes as a `CollisionData` with `sphere`, `aabb` and `obb`.
  - `collide(left_type, left, right_type, right)` dispatches on `CollisionType` to the pairwise tests, such as `rect_to_rect`, `circle_to_circle`, `obb2d_to_point` and `obb_to_obb`. A pair without a test raises `EngineError`.
  - The 2D tests (rect, circle, OBB2D, point) flatten both centres onto z = 0.
- `gmengine.serializer` provides `Serializer`, a little-endian byte buffer.
  - Typed `write_*` / `read_*` pairs handle ints (32-bit), bools, vectors, int points, UTF-8 strings and lists.
  - `written()` returns the bytes written so far.
  - Reading past the end raises `EngineError`.
  - Subclass `SerializableObject` for your own types.
- `gmengine.paths`, `gmengine.file` and `gmengine.directory` cover the file system.
  - `EnginePath` is a movable path. Among its methods is `move_parent_to_directory`, which walks up to find, for example, a resource folder.
  - `EngineFile` reads and writes binary data. This includes whole serializer buffers and `all_text()`. It works as a context manager.
  - `EngineDirectory` lists files by extension, optionally recursively, and lists subdirectories, both in name order.
- `gmengine.strings` holds the text helpers.
  - `to_upper` upper-cases ASCII letters.
  - `inter_string` extracts delimited text and returns the next offset.
  - `ansi_to_unicode`, `unicode_to_utf8` and `ansi_to_utf8` convert encodings.
- `gmengine.rng` provides `EngineRandom`. It is seedable, and bounds may be given in either order.
  - `random_int` returns values in a closed range.
  - `random_float` returns values in a half-open range.
- `gmengine.timer` provides `EngineTimer`, which measures scaled time between checks through `delta_time` and `double_delta_time`.
- `gmengine.objects` provides `EngineObject`. It tracks name, order, active state, debug state, and immediate or timed destruction via `destroy(time)` and `release_time_check(delta_time)`.
- `gmengine.debug` provides `EngineError` and `output_string`, which writes a line to standard error.

## Install

```
pip install .
```

## Example

```python
from gmengine.vector import Vector
from gmengine.matrix import Matrix
from gmengine.transform import Transform, CollisionType, collide
from gmengine.serializer import Serializer

a = Transform()
a.scale = Vector(50.0, 50.0, 1.0)
a.update(False)

b = Transform()
b.scale = Vector(50.0, 50.0, 1.0)
b.location = Vector(30.0, 0.0, 0.0)
b.update(False)

print(collide(CollisionType.RECT, a, CollisionType.RECT, b))  # True

moved = Vector(1.0, 2.0, 3.0) @ Matrix.translation(Vector(10.0, 0.0, 0.0))
print(moved)  # X : [11.000000] Y : [2.000000] Z : [3.000000] W : [1.000000]

ser = Serializer()
ser.write_int(3)
ser.write_str("monster")
ser.write_vector(Vector(1.0, 2.0, 3.0))
print(ser.read_int(), ser.read_str(), ser.read_vector())
```

Errors such as an unsupported collision pair, an unopened file or reading past the end of a serializer raise `EngineError`.

## What it does not do

This is a library of building blocks only. It has the following gaps:

- It has no window, renderer, input handling, sound or GUI.
- It has no actors, components, levels or game loop.
- It provides no command to run.

Those parts would be built on top of these modules.

## Tests

```
pip install .[test]
pytest
```