import math

import pytest

from gmengine import mathutil
from gmengine.matrix import Matrix, Quat, transform, transform_coord, transform_normal
from gmengine.vector import Vector

ANGLE_SETS = [
    (0.0, 0.0, 0.0),
    (30.0, 0.0, 0.0),
    (0.0, 45.0, 0.0),
    (0.0, 0.0, 60.0),
    (20.0, 35.0, -50.0),
    (-40.0, 120.0, 75.0),
]


def assert_matrix_close(a, b, tol=1e-9):
    for row_a, row_b in zip(a.rows, b.rows):
        assert row_a == pytest.approx(row_b, abs=tol)


def xyz(v):
    return (v.x, v.y, v.z)


def sample_matrix():
    return (
        Matrix.scaling(Vector(2.0, 3.0, 4.0))
        @ Matrix.rotation_deg(Vector(30.0, 45.0, 60.0))
        @ Matrix.translation(Vector(5.0, -6.0, 7.0))
    )


def test_default_is_identity():
    assert Matrix().rows == (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    assert Matrix.identity() == Matrix()


def test_bad_shape_is_rejected():
    with pytest.raises(ValueError):
        Matrix(((1.0, 0.0), (0.0, 1.0)))


def test_identity_is_neutral():
    m = sample_matrix()
    assert_matrix_close(m @ Matrix.identity(), m)
    assert_matrix_close(Matrix.identity() @ m, m)


def test_translation_moves_points_but_not_directions():
    t = Matrix.translation(Vector(5.0, -6.0, 7.0))
    v = Vector(1.0, 2.0, 3.0)
    moved = transform_coord(v, t)
    assert xyz(moved - v) == pytest.approx((5.0, -6.0, 7.0))
    assert xyz(transform_normal(v, t)) == pytest.approx(xyz(v))


def test_transform_uses_w_of_the_vector():
    m = sample_matrix()
    v = Vector(1.0, 2.0, 3.0, 0.0)
    assert tuple(transform(v, m)) == pytest.approx(tuple(transform_normal(v, m)))
    p = Vector(1.0, 2.0, 3.0, 1.0)
    assert tuple(transform(p, m)) == pytest.approx(tuple(transform_coord(p, m)))


def test_vector_product_is_associative():
    a = Matrix.rotation_deg(Vector(10.0, 20.0, 30.0))
    b = Matrix.translation(Vector(1.0, 2.0, 3.0))
    v = Vector(4.0, 5.0, 6.0)
    assert tuple((v @ a) @ b) == pytest.approx(tuple(v @ (a @ b)))


@pytest.mark.parametrize("angles", ANGLE_SETS)
def test_euler_round_trip(angles):
    q = Quat.from_euler_deg(Vector(*angles))
    assert xyz(q.to_euler_deg()) == pytest.approx(angles, abs=1e-9)


@pytest.mark.parametrize("angles", ANGLE_SETS)
def test_quaternion_matrix_matches_euler_matrix(angles):
    v = Vector(*angles)
    assert_matrix_close(Matrix.rotation_quat(Quat.from_euler_deg(v)), Matrix.rotation_deg(v))


def test_identity_quaternion_has_no_angles():
    assert xyz(Quat().to_euler_rad()) == pytest.approx((0.0, 0.0, 0.0))


def test_pitch_is_pinned_at_the_pole():
    q = Quat.from_euler_rad(Vector(mathutil.PI / 2, 0.0, 0.0))
    assert q.to_euler_rad().x == 0.5 * mathutil.PI
    q = Quat.from_euler_rad(Vector(-mathutil.PI / 2, 0.0, 0.0))
    assert q.to_euler_rad().x == -0.5 * mathutil.PI


def test_quaternion_is_unit_length():
    q = Quat.from_euler_deg(Vector(20.0, 35.0, -50.0))
    assert sum(c * c for c in q) == pytest.approx(1.0)


def test_rotation_deg_matches_rad():
    angles = Vector(20.0, 35.0, -50.0)
    assert_matrix_close(Matrix.rotation_deg(angles), Matrix.rotation_rad(angles * mathutil.D2R))


@pytest.mark.parametrize(
    "axis_matrix, index",
    [(Matrix.rotation_x_rad, 0), (Matrix.rotation_y_rad, 1), (Matrix.rotation_z_rad, 2)],
)
def test_axis_rotations_are_column_layout(axis_matrix, index):
    angle = 0.7
    angles = [0.0, 0.0, 0.0]
    angles[index] = angle
    assert_matrix_close(axis_matrix(angle).transposed(), Matrix.rotation_rad(Vector(*angles)))


def test_axis_rotation_deg_matches_rad():
    assert_matrix_close(Matrix.rotation_z_deg(40.0), Matrix.rotation_z_rad(40.0 * mathutil.D2R))
    assert_matrix_close(Matrix.rotation_x_deg(40.0), Matrix.rotation_x_rad(40.0 * mathutil.D2R))
    assert_matrix_close(Matrix.rotation_y_deg(40.0), Matrix.rotation_y_rad(40.0 * mathutil.D2R))


def test_rotation_preserves_length():
    v = Vector(3.0, -4.0, 12.0, 0.0)
    rotated = transform_normal(v, Matrix.rotation_deg(Vector(20.0, 35.0, -50.0)))
    assert rotated.length() == pytest.approx(v.length())


def test_inverse_undoes_matrix():
    m = sample_matrix()
    assert_matrix_close(m @ m.inverse(), Matrix.identity())
    assert_matrix_close(m.inverse() @ m, Matrix.identity())


def test_singular_matrix_has_no_inverse():
    with pytest.raises(ValueError):
        Matrix.scaling(Vector(0.0, 1.0, 1.0)).inverse()


def test_scaling_round_trip_through_inverse():
    s = Matrix.scaling(Vector(2.0, 3.0, 4.0))
    v = Vector(1.0, 2.0, 3.0)
    assert xyz(transform_coord(transform_coord(v, s), s.inverse())) == pytest.approx(xyz(v))


def test_transpose():
    m = sample_matrix()
    t = m.transposed()
    assert t[1, 2] == m[2, 1]
    assert t[3, 0] == m[0, 3]
    assert t.transposed() == m


def test_decompose_recovers_parts():
    scale, quat, translation = sample_matrix().decompose()
    assert xyz(scale) == pytest.approx((2.0, 3.0, 4.0))
    assert xyz(translation) == pytest.approx((5.0, -6.0, 7.0))
    assert_matrix_close(Matrix.rotation_quat(quat), Matrix.rotation_deg(Vector(30.0, 45.0, 60.0)))


def test_decompose_negative_scale_rebuilds():
    m = Matrix.scaling(Vector(-2.0, 3.0, 4.0)) @ Matrix.translation(Vector(1.0, 2.0, 3.0))
    scale, quat, translation = m.decompose()
    rebuilt = Matrix.scaling(scale) @ Matrix.rotation_quat(quat) @ Matrix.translation(translation)
    assert_matrix_close(rebuilt, m)


def test_decompose_zero_scale():
    m = Matrix.scaling(Vector(0.0, 2.0, 3.0)) @ Matrix.translation(Vector(1.0, 2.0, 3.0))
    scale, quat, translation = m.decompose()
    assert scale.x == 0.0
    assert sum(c * c for c in quat) == pytest.approx(1.0)
    rebuilt = Matrix.scaling(scale) @ Matrix.rotation_quat(quat) @ Matrix.translation(translation)
    assert_matrix_close(rebuilt, m)


def test_row_axes_are_normalised():
    rotation = Matrix.rotation_deg(Vector(20.0, 35.0, -50.0))
    scaled = Matrix.scaling(Vector(2.0, 3.0, 4.0)) @ rotation
    assert xyz(scaled.forward()) == pytest.approx(xyz(transform_normal(Vector.FORWARD, rotation)))
    assert xyz(scaled.right()) == pytest.approx(xyz(transform_normal(Vector.RIGHT, rotation)))
    assert xyz(scaled.up()) == pytest.approx(xyz(transform_normal(Vector.UP, rotation)))
    assert scaled.forward().length() == pytest.approx(1.0)


def test_row_returns_all_four_values():
    m = Matrix.translation(Vector(5.0, -6.0, 7.0))
    assert tuple(m.row(3)) == m.rows[3]


@pytest.mark.parametrize("direction", [Vector(0.0, 0.0, 1.0), Vector(1.0, 0.0, 0.0), Vector(1.0, 0.0, 1.0)])
def test_look_to_puts_eye_at_origin(direction):
    eye = Vector(1.0, 2.0, 3.0)
    view = Matrix.look_to_lh(eye, direction, Vector(0.0, 1.0, 0.0))
    assert xyz(transform_coord(eye, view)) == pytest.approx((0.0, 0.0, 0.0), abs=1e-12)
    ahead = eye + direction.normalized() * 5.0
    assert xyz(transform_coord(ahead, view)) == pytest.approx((0.0, 0.0, 5.0), abs=1e-12)


def test_orthographic_maps_volume_to_unit_cube():
    proj = Matrix.orthographic_lh(200.0, 100.0, 1.0, 11.0)
    corner = transform_coord(Vector(100.0, 50.0, 11.0), proj)
    assert xyz(corner) == pytest.approx((1.0, 1.0, 1.0))
    near = transform_coord(Vector(-100.0, -50.0, 1.0), proj)
    assert xyz(near) == pytest.approx((-1.0, -1.0, 0.0))


def test_perspective_depth_range():
    proj = Matrix.perspective_fov_deg(90.0, 100.0, 100.0, 1.0, 100.0)
    near = transform_coord(Vector(1.0, 0.0, 1.0), proj)
    assert near.z / near.w == pytest.approx(0.0, abs=1e-12)
    assert near.x / near.w == pytest.approx(1.0)
    far = transform_coord(Vector(0.0, 0.0, 100.0), proj)
    assert far.z / far.w == pytest.approx(1.0)
    assert_matrix_close(proj, Matrix.perspective_fov_rad(mathutil.PI / 2, 100.0, 100.0, 1.0, 100.0))


def test_viewport_maps_ndc_corners_to_screen():
    vp = Matrix.viewport(1280.0, 720.0, 0.0, 0.0, 0.0, 1.0)
    top_left = transform_coord(Vector(-1.0, 1.0, 0.0), vp)
    assert (top_left.x, top_left.y) == pytest.approx((0.0, 0.0))
    bottom_right = transform_coord(Vector(1.0, -1.0, 0.0), vp)
    assert (bottom_right.x, bottom_right.y) == pytest.approx((1280.0, 720.0))


def test_viewport_depth_entries():
    vp = Matrix.viewport(1280.0, 720.0, 0.0, 0.0, 0.0, 1.0)
    assert (vp[2, 2], vp[3, 2]) == (1.0, 1.0)


def test_viewport_with_zero_depth_range():
    vp = Matrix.viewport(1280.0, 720.0, 0.0, 0.0, 0.0, 0.0)
    assert [math.isnan(vp[2, 2]), math.isnan(vp[3, 2])] == [True, True]
    assert (vp[0, 0], vp[1, 1]) == (640.0, -360.0)