"""Vectors, 4x4 matrices and the transforms built from them.

Matrices use the row-vector convention: a point is a row ``(x, y, z, 1)``
multiplied on the left of the matrix, and translation lives in the last row.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Sequence, Union

Rows = tuple[tuple[float, float, float, float], ...]


@dataclass
class Vector2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __mul__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x * other.x, self.y * other.y)


@dataclass
class Vector3:
    """A three-component vector with component-wise and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vector3, float]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: Union[Vector3, float]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, Real):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented


@dataclass
class Vector4:
    """A four-component vector, used for colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(frozen=True)
class Matrix4x4:
    """An immutable 4x4 matrix stored as rows in ``m``."""

    m: Rows

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.m)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Matrix4x4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "m", rows)

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            tuple(
                tuple(a + b for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(self.m, other.m)
            )
        )

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            tuple(
                tuple(a - b for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(self.m, other.m)
            )
        )

    def __mul__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        columns = list(zip(*other.m))
        return Matrix4x4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.m
            )
        )


def cot(a: float) -> float:
    """Cotangent: ``cos(a) / sin(a)``."""
    return math.cos(a) / math.sin(a)


def add(a, b):
    """Sum of two vectors or two matrices."""
    if isinstance(a, Vector3) and isinstance(b, Vector3):
        return a + b
    if isinstance(a, Matrix4x4) and isinstance(b, Matrix4x4):
        return a + b
    raise TypeError("add expects two Vector3 or two Matrix4x4 values")


def subtract(a, b):
    """Difference of two vectors or two matrices."""
    if isinstance(a, Vector3) and isinstance(b, Vector3):
        return a - b
    if isinstance(a, Matrix4x4) and isinstance(b, Matrix4x4):
        return a - b
    raise TypeError("subtract expects two Vector3 or two Matrix4x4 values")


def multiply(a, b):
    """Scale a vector (``multiply(scalar, vector)``) or multiply two matrices."""
    if isinstance(a, Real) and isinstance(b, Vector3):
        return b * a
    if isinstance(a, Matrix4x4) and isinstance(b, Matrix4x4):
        return a * b
    raise TypeError("multiply expects (scalar, Vector3) or (Matrix4x4, Matrix4x4)")


def dot(v1: Vector3, v2: Vector3) -> float:
    """Dot product."""
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def length(v: Vector3) -> float:
    """Euclidean length; exactly 0 for the zero vector."""
    if v.x == 0 and v.y == 0 and v.z == 0:
        return 0.0
    return math.sqrt(dot(v, v))


def distance_squared(start: Vector3, end: Vector3) -> float:
    """Squared distance between two points (no square root is taken)."""
    dx = end.x - start.x
    dy = end.y - start.y
    dz = end.z - start.z
    return dx * dx + dy * dy + dz * dz


def normalize(v: Vector3) -> Vector3:
    """Unit vector in the direction of ``v``; the zero vector cannot be normalized."""
    size = length(v)
    if size == 0:
        raise ZeroDivisionError("cannot normalize a zero-length vector")
    return v / size


def _det3(rows: Sequence[Sequence[float]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = rows
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def _minor(m: Rows, row: int, col: int) -> list[list[float]]:
    return [
        [value for c, value in enumerate(values) if c != col]
        for r, values in enumerate(m)
        if r != row
    ]


def inverse(m: Matrix4x4) -> Matrix4x4:
    """Inverse of ``m``; raises ValueError for a singular matrix."""
    cofactors = [
        [(-1) ** (r + c) * _det3(_minor(m.m, r, c)) for c in range(4)]
        for r in range(4)
    ]
    determinant = sum(value * cof for value, cof in zip(m.m[0], cofactors[0]))
    if determinant == 0:
        raise ValueError("matrix is singular and has no inverse")
    # The inverse is the transposed cofactor matrix over the determinant.
    return Matrix4x4(
        tuple(tuple(cof / determinant for cof in column) for column in zip(*cofactors))
    )


def transpose(m: Matrix4x4) -> Matrix4x4:
    """Transpose of ``m``."""
    return Matrix4x4(tuple(zip(*m.m)))


def make_identity() -> Matrix4x4:
    """The 4x4 identity matrix."""
    return Matrix4x4(((1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1)))


def make_rotate_x(radian: float) -> Matrix4x4:
    """Rotation about the X axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(((1, 0, 0, 0), (0, c, s, 0), (0, -s, c, 0), (0, 0, 0, 1)))


def make_rotate_y(radian: float) -> Matrix4x4:
    """Rotation about the Y axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(((c, 0, -s, 0), (0, 1, 0, 0), (s, 0, c, 0), (0, 0, 0, 1)))


def make_rotate_z(radian: float) -> Matrix4x4:
    """Rotation about the Z axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(((c, s, 0, 0), (-s, c, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1)))


def make_rotate_xyz(radian_x: float, radian_y: float, radian_z: float) -> Matrix4x4:
    """Combined rotation ``X * (Y * Z)``."""
    return make_rotate_x(radian_x) * (make_rotate_y(radian_y) * make_rotate_z(radian_z))


def make_rotate_xyz_from(rotate: Vector3) -> Matrix4x4:
    """Combined rotation from a vector of Euler angles."""
    return make_rotate_xyz(rotate.x, rotate.y, rotate.z)


def make_translate(translate: Vector3) -> Matrix4x4:
    """Translation matrix."""
    return Matrix4x4(
        (
            (1, 0, 0, 0),
            (0, 1, 0, 0),
            (0, 0, 1, 0),
            (translate.x, translate.y, translate.z, 1),
        )
    )


def make_scale(scale: Vector3) -> Matrix4x4:
    """Scaling matrix."""
    return Matrix4x4(
        ((scale.x, 0, 0, 0), (0, scale.y, 0, 0), (0, 0, scale.z, 0), (0, 0, 0, 1))
    )


def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point, including the perspective divide by ``w``."""
    point = (vector.x, vector.y, vector.z, 1.0)
    x, y, z, w = (sum(p * value for p, value in zip(point, column)) for column in zip(*matrix.m))
    if w == 0:
        raise ValueError("transformed point has w == 0")
    return Vector3(x / w, y / w, z / w)


def make_affine(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
    """Scale, then rotate (X, Y, Z), then translate."""
    rotation = make_rotate_xyz_from(rotate)
    scaled_rows = tuple(
        (factor * row[0], factor * row[1], factor * row[2], 0.0)
        for factor, row in zip((scale.x, scale.y, scale.z), rotation.m)
    )
    return Matrix4x4(scaled_rows + ((translate.x, translate.y, translate.z, 1.0),))


def make_perspective_fov(
    fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Perspective projection mapping depth ``near..far`` to ``0..1``."""
    focal = cot(fov_y / 2.0)
    depth = far_clip - near_clip
    return Matrix4x4(
        (
            (focal / aspect_ratio, 0, 0, 0),
            (0, focal, 0, 0),
            (0, 0, far_clip / depth, 1),
            (0, 0, -near_clip * far_clip / depth, 0),
        )
    )


def make_orthographic(
    left: float, top: float, right: float, bottom: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Orthographic projection."""
    return Matrix4x4(
        (
            (2 / (right - left), 0, 0, 0),
            (0, 2 / (top - bottom), 0, 0),
            (0, 0, 1 / (far_clip - near_clip), 0),
            (
                (left + right) / (left - right),
                (top + bottom) / (bottom - top),
                near_clip / (near_clip - far_clip),
                1,
            ),
        )
    )


def make_viewport(
    left: float, top: float, width: float, height: float, min_depth: float, max_depth: float
) -> Matrix4x4:
    """Viewport transform from normalized device coordinates to screen space."""
    return Matrix4x4(
        (
            (width / 2.0, 0, 0, 0),
            (0, -height / 2.0, 0, 0),
            (0, 0, max_depth - min_depth, 0),
            (left + width / 2.0, top + height / 2.0, min_depth, 1),
        )
    )


def transform_normal(v: Vector3, m: Matrix4x4) -> Vector3:
    """Transform a direction, ignoring translation."""
    (a, b, c, _), (d, e, f, _), (g, h, i, _), _ = m.m
    return Vector3(
        v.x * a + v.y * d + v.z * g,
        v.x * b + v.y * e + v.z * h,
        v.x * c + v.y * f + v.z * i,
    )