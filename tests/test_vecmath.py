import math

import pytest

from railshot.vecmath import (
    Matrix4x4,
    Vector2,
    Vector3,
    add,
    cot,
    distance_squared,
    dot,
    inverse,
    length,
    make_affine,
    make_identity,
    make_orthographic,
    make_perspective_fov,
    make_rotate_x,
    make_rotate_xyz,
    make_rotate_xyz_from,
    make_rotate_y,
    make_rotate_z,
    make_scale,
    make_translate,
    make_viewport,
    multiply,
    normalize,
    subtract,
    transform,
    transform_normal,
    transpose,
)


def _flat(m):
    return [value for row in m.m for value in row]


def _xyz(v):
    return (v.x, v.y, v.z)


IDENTITY_FLAT = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]


SAMPLE = Matrix4x4(
    ((2, 1, 0, 3), (0, 1, 4, 1), (5, 0, 1, 2), (1, 2, 3, 4))
)


def test_vector2_elementwise_multiply():
    v = Vector2(2.5, -3.0)
    assert v * Vector2(1, 1) == v
    assert v * Vector2(3, 4) == Vector2(3, 4) * v


def test_vector3_operators_round_trip():
    v = Vector3(1.5, -2.0, 4.0)
    w = Vector3(0.5, 3.0, -1.0)
    assert (v + w) - w == v
    assert v * 2 == v + v
    assert _xyz((v * w) / w) == pytest.approx(_xyz(v), abs=1e-9)
    assert _xyz((v / 4) * 4) == pytest.approx(_xyz(v), abs=1e-9)


def test_vector3_rejects_unsupported_operand():
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) + 1


def test_free_functions_match_operators():
    v = Vector3(1, 2, 3)
    w = Vector3(-4, 5, 0.5)
    assert add(v, w) == v + w
    assert subtract(v, w) == v - w
    assert multiply(3.0, v) == v * 3.0
    assert multiply(SAMPLE, make_identity()) == SAMPLE * make_identity()
    assert add(SAMPLE, SAMPLE) == SAMPLE + SAMPLE
    assert subtract(SAMPLE, SAMPLE) == SAMPLE - SAMPLE


def test_multiply_rejects_mixed_types():
    with pytest.raises(TypeError):
        multiply(Vector3(1, 2, 3), SAMPLE)
    with pytest.raises(TypeError):
        add(Vector3(1, 2, 3), SAMPLE)


def test_matrix_add_subtract_round_trip():
    other = make_rotate_xyz(0.3, -0.2, 1.1)
    result = (SAMPLE + other) - other
    assert _flat(result) == pytest.approx(_flat(SAMPLE), abs=1e-9)


def test_matrix_identity_is_neutral():
    assert SAMPLE * make_identity() == SAMPLE
    assert make_identity() * SAMPLE == SAMPLE


def test_matrix_requires_four_by_four():
    with pytest.raises(ValueError):
        Matrix4x4(((1, 2, 3), (4, 5, 6), (7, 8, 9)))


def test_dot_and_length():
    v = Vector3(3, 4, 0)
    assert length(v) == pytest.approx(5.0)
    assert length(v) ** 2 == pytest.approx(dot(v, v))
    assert length(Vector3(0, 0, 0)) == 0


def test_distance_squared_is_squared_length_of_difference():
    a = Vector3(1, -2, 3)
    b = Vector3(4, 0.5, -1)
    assert distance_squared(a, b) == pytest.approx(dot(b - a, b - a))
    assert distance_squared(a, b) == pytest.approx(distance_squared(b, a))


def test_normalize_gives_unit_length_in_same_direction():
    v = Vector3(2, -3, 6)
    n = normalize(v)
    assert length(n) == pytest.approx(1.0)
    assert _xyz(n * length(v)) == pytest.approx(_xyz(v), abs=1e-9)


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(Vector3(0, 0, 0))


def test_cot_is_reciprocal_of_tan():
    for angle in (0.3, 1.0, 2.5):
        assert cot(angle) * math.tan(angle) == pytest.approx(1.0)


def test_inverse_of_general_matrix():
    assert _flat(SAMPLE * inverse(SAMPLE)) == pytest.approx(IDENTITY_FLAT, abs=1e-9)
    assert _flat(inverse(SAMPLE) * SAMPLE) == pytest.approx(IDENTITY_FLAT, abs=1e-9)


def test_inverse_of_affine_matrix():
    m = make_affine(Vector3(2, 1, 0.5), Vector3(0.4, -1.2, 0.7), Vector3(5, -3, 10))
    assert _flat(m * inverse(m)) == pytest.approx(IDENTITY_FLAT, abs=1e-9)
    assert _flat(inverse(inverse(m))) == pytest.approx(_flat(m), abs=1e-9)


def test_inverse_of_singular_matrix_raises():
    singular = Matrix4x4(((1, 2, 3, 4), (2, 4, 6, 8), (0, 1, 0, 1), (1, 0, 1, 0)))
    with pytest.raises(ValueError):
        inverse(singular)


def test_transpose():
    t = transpose(SAMPLE)
    for r in range(4):
        for c in range(4):
            assert t.m[r][c] == SAMPLE.m[c][r]
    assert transpose(t) == SAMPLE


@pytest.mark.parametrize("maker", [make_rotate_x, make_rotate_y, make_rotate_z])
def test_rotation_inverse_is_negative_angle(maker):
    assert _flat(maker(0.8) * maker(-0.8)) == pytest.approx(IDENTITY_FLAT, abs=1e-9)
    assert _flat(transpose(maker(0.8))) == pytest.approx(
        _flat(inverse(maker(0.8))), abs=1e-9
    )


def test_rotations_keep_their_axis_and_length():
    v = Vector3(1.0, 2.0, -3.0)
    assert _xyz(transform(Vector3(1, 0, 0), make_rotate_x(1.3))) == pytest.approx(
        (1.0, 0.0, 0.0), abs=1e-9
    )
    assert _xyz(transform(Vector3(0, 1, 0), make_rotate_y(1.3))) == pytest.approx(
        (0.0, 1.0, 0.0), abs=1e-9
    )
    assert _xyz(transform(Vector3(0, 0, 1), make_rotate_z(1.3))) == pytest.approx(
        (0.0, 0.0, 1.0), abs=1e-9
    )
    rotated = transform(v, make_rotate_xyz(0.2, 0.9, -0.4))
    assert length(rotated) == pytest.approx(length(v))


def test_rotate_xyz_order_and_vector_form():
    expected = _flat(make_rotate_x(0.1) * (make_rotate_y(0.2) * make_rotate_z(0.3)))
    assert _flat(make_rotate_xyz(0.1, 0.2, 0.3)) == pytest.approx(expected, abs=1e-9)
    assert _flat(make_rotate_xyz_from(Vector3(0.1, 0.2, 0.3))) == pytest.approx(
        expected, abs=1e-9
    )


def test_translate_and_scale_transform():
    v = Vector3(1, 2, 3)
    offset = Vector3(4, -5, 6)
    factor = Vector3(2, 3, -1)
    assert _xyz(transform(v, make_translate(offset))) == pytest.approx(
        (5.0, -3.0, 9.0), abs=1e-9
    )
    assert _xyz(transform(v, make_scale(factor))) == pytest.approx(
        (2.0, 6.0, -3.0), abs=1e-9
    )
    assert _xyz(transform(v, make_identity())) == pytest.approx((1.0, 2.0, 3.0), abs=1e-9)


def test_affine_equals_scale_rotate_translate():
    scale = Vector3(2, 0.5, 3)
    rotate = Vector3(0.3, -0.7, 1.2)
    translate = Vector3(-4, 8, 1)
    expected = make_scale(scale) * make_rotate_xyz_from(rotate) * make_translate(translate)
    assert _flat(make_affine(scale, rotate, translate)) == pytest.approx(
        _flat(expected), abs=1e-9
    )


def test_transform_with_zero_w_raises():
    zero_w = Matrix4x4(((1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0), (0, 0, 0, 0)))
    with pytest.raises(ValueError):
        transform(Vector3(1, 2, 3), zero_w)


def test_perspective_maps_clip_planes_to_unit_depth():
    projection = make_perspective_fov(0.45, 16 / 9, 0.1, 1000.0)
    assert transform(Vector3(0, 0, 0.1), projection).z == pytest.approx(0.0, abs=1e-9)
    assert transform(Vector3(0, 0, 1000.0), projection).z == pytest.approx(1.0)


def test_orthographic_is_symmetric_between_corners():
    projection = make_orthographic(-160, 90, 160, -90, 0, 100)
    top_left = transform(Vector3(-160, 90, 0), projection)
    bottom_right = transform(Vector3(160, -90, 100), projection)
    assert top_left.x == pytest.approx(-bottom_right.x)
    assert top_left.y == pytest.approx(-bottom_right.y)
    centre = transform(Vector3(0, 0, 0), projection)
    assert (centre.x, centre.y) == pytest.approx((0.0, 0.0))


def test_viewport_maps_origin_to_screen_centre():
    viewport = make_viewport(10, 20, 1280, 720, 0.25, 1.0)
    centre = transform(Vector3(0, 0, 0), viewport)
    assert _xyz(centre) == pytest.approx((650.0, 380.0, 0.25), abs=1e-9)


def test_transform_normal_ignores_translation():
    v = Vector3(1, -2, 0.5)
    assert _xyz(transform_normal(v, make_translate(Vector3(7, 8, 9)))) == pytest.approx(
        (1.0, -2.0, 0.5), abs=1e-9
    )
    rotation = make_rotate_xyz(0.5, 0.1, -0.3)
    moved = rotation * make_translate(Vector3(3, 3, 3))
    assert _xyz(transform_normal(v, moved)) == pytest.approx(
        _xyz(transform(v, rotation)), abs=1e-9
    )