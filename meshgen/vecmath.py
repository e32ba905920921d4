"""Vector, matrix, quaternion and Bezier helpers working on plain float tuples.

Vectors are tuples of floats. Matrices are tuples of rows. Quaternions are
``(w, x, y, z)`` tuples.
"""
from __future__ import annotations

import math
import sys
from collections.abc import Sequence

Vec = tuple[float, ...]
Mat = tuple[tuple[float, ...], ...]

_EPSILON = sys.float_info.epsilon


def radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return math.radians(degrees)


def add(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Component-wise sum."""
    return tuple(x + y for x, y in zip(a, b))


def sub(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Component-wise difference."""
    return tuple(x - y for x, y in zip(a, b))


def scale(v: Sequence[float], s: float) -> Vec:
    """Multiply every component by a scalar."""
    return tuple(x * s for x in v)


def mul(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Component-wise product."""
    return tuple(x * y for x, y in zip(a, b))


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product."""
    return sum(x * y for x, y in zip(a, b))


def cross(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Cross product of two 3D vectors."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def cross2(v: Sequence[float]) -> Vec:
    """The 2D vector perpendicular to ``v`` (rotated 90 degrees counterclockwise)."""
    return (-v[1], v[0])


def length(v: Sequence[float]) -> float:
    """Euclidean length."""
    return math.sqrt(dot(v, v))


def normalize(v: Sequence[float]) -> Vec:
    """Unit vector in the direction of ``v``; a zero vector yields NaNs."""
    magnitude = length(v)
    if magnitude == 0.0:
        return tuple(math.nan for _ in v)
    return tuple(x / magnitude for x in v)


def mix(a, b, t: float):
    """Linear interpolation ``a * (1 - t) + b * t`` of scalars or vectors."""
    if isinstance(a, (int, float)):
        return a * (1.0 - t) + b * t
    return tuple(x * (1.0 - t) + y * t for x, y in zip(a, b))


def normal(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> Vec:
    """Unit normal of the triangle ``p1, p2, p3`` (counterclockwise front)."""
    return normalize(cross(sub(p2, p1), sub(p3, p1)))


def angle(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Angle between two vectors; zero if either is (nearly) zero length."""
    magnitude = math.sqrt(dot(v1, v1) * dot(v2, v2))
    if magnitude <= _EPSILON:
        return 0.0
    return math.acos(min(max(dot(v1, v2) / magnitude, -1.0), 1.0))


def slerp(v1: Sequence[float], v2: Sequence[float], a: float) -> Vec:
    """Spherical linear interpolation between two vectors."""
    theta = angle(v1, v2)
    sine = math.sin(theta)
    return add(
        scale(v1, math.sin((1.0 - a) * theta) / sine),
        scale(v2, math.sin(a * theta) / sine),
    )


def qrotate(angle: float, axis: Sequence[float]) -> Vec:
    """Quaternion ``(w, x, y, z)`` rotating ``angle`` radians around a unit ``axis``."""
    half = angle / 2.0
    return (math.cos(half), *scale(axis, math.sin(half)))


def transform_quat(q: Sequence[float], v: Sequence[float]) -> Vec:
    """Rotate the 3D vector ``v`` by the unit quaternion ``q``."""
    w = q[0]
    u = tuple(q[1:4])
    temp = scale(cross(u, v), 2.0)
    return add(add(v, scale(temp, w)), cross(u, temp))


def rotate2(angle: float) -> Mat:
    """3x3 homogeneous matrix rotating 2D points counterclockwise."""
    s = math.sin(angle)
    c = math.cos(angle)
    return (
        (c, -s, 0.0),
        (s, c, 0.0),
        (0.0, 0.0, 1.0),
    )


def _mat_vec(m: Mat, v: Sequence[float]) -> Vec:
    return tuple(dot(row, v) for row in m)


def transform2(m: Mat, v: Sequence[float]) -> Vec:
    """Apply a 3x3 homogeneous matrix to a 2D point."""
    result = _mat_vec(m, (v[0], v[1], 1.0))
    return (result[0], result[1])


def rotate3(angles: Sequence[float]) -> Mat:
    """4x4 rotation matrix from roll, pitch and yaw angles (x, y, z)."""
    sy = math.sin(angles[2])
    cy = math.cos(angles[2])
    sp = math.sin(angles[1])
    cp = math.cos(angles[1])
    sr = math.sin(angles[0])
    cr = math.cos(angles[0])
    return (
        (cp * cy, sr * sp * cy + cr * -sy, cr * sp * cy + -sr * -sy, 0.0),
        (cp * sy, sr * sp * sy + cr * cy, cr * sp * sy + -sr * cy, 0.0),
        (-sp, sr * cp, cr * cp, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def translate(delta: Sequence[float]) -> Mat:
    """4x4 translation matrix."""
    return (
        (1.0, 0.0, 0.0, float(delta[0])),
        (0.0, 1.0, 0.0, float(delta[1])),
        (0.0, 0.0, 1.0, float(delta[2])),
        (0.0, 0.0, 0.0, 1.0),
    )


def mat_mul(a: Mat, b: Mat) -> Mat:
    """Matrix product ``a @ b``."""
    columns = list(zip(*b))
    return tuple(tuple(dot(row, col) for col in columns) for row in a)


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat:
    """Orthographic projection matrix mapping the box to the [-1, 1] cube."""
    width = right - left
    height = top - bottom
    depth = far - near
    return (
        (2.0 / width, 0.0, 0.0, -(right + left) / width),
        (0.0, 2.0 / height, 0.0, -(top + bottom) / height),
        (0.0, 0.0, -2.0 / depth, -(far + near) / depth),
        (0.0, 0.0, 0.0, 1.0),
    )


def ortho2d(left: float, right: float, bottom: float, top: float) -> Mat:
    """Orthographic projection with depth range -1..1."""
    return ortho(left, right, bottom, top, -1.0, 1.0)


def project(
    v: Sequence[float],
    model_view_proj: Mat,
    viewport_origin: Sequence[float],
    viewport_size: Sequence[float],
) -> Vec:
    """Map a 3D point to window coordinates; z is the depth in 0..1."""
    x, y, z, w = _mat_vec(model_view_proj, (v[0], v[1], v[2], 1.0))
    x, y, z = x / w, y / w, z / w
    x = x * 0.5 + 0.5
    y = y * 0.5 + 0.5
    z = z * 0.5 + 0.5
    return (
        x * viewport_size[0] + viewport_origin[0],
        y * viewport_size[1] + viewport_origin[1],
        z,
    )


def bezier(points: Sequence[Sequence[float]], t: float) -> Vec:
    """Evaluate the Bezier curve with the given control points at ``t``."""
    if not points:
        raise ValueError("At least one control point needed.")
    level = [tuple(p) for p in points]
    t1 = 1.0 - t
    while len(level) > 1:
        level = [
            tuple(t1 * x + t * y for x, y in zip(a, b))
            for a, b in zip(level, level[1:])
        ]
    return level[0]


def bezier_derivative(
    points: Sequence[Sequence[float]], t: float, order: int = 1
) -> Vec:
    """The ``order``-th derivative of a Bezier curve at ``t``."""
    if order < 1:
        raise ValueError("The derivative order must be at least one.")
    if not points:
        raise ValueError("At least one control point needed.")
    level = [tuple(p) for p in points]
    for _ in range(order):
        if len(level) == 1:
            return tuple(0.0 for _ in level[0])
        factor = float(len(level) - 1)
        level = [scale(sub(b, a), factor) for a, b in zip(level, level[1:])]
    return bezier(level, t)


def bezier2(points: Sequence[Sequence[Sequence[float]]], t: Sequence[float]) -> Vec:
    """Evaluate a Bezier patch given as rows of control points at ``(u, v)``."""
    if not points:
        raise ValueError("At least one control point needed.")
    return bezier([bezier(row, t[0]) for row in points], t[1])


def bezier2_jacobian(
    points: Sequence[Sequence[Sequence[float]]], t: Sequence[float], order: int = 1
) -> tuple[Vec, Vec]:
    """Partial derivatives of a Bezier patch along u and v at ``t``."""
    if order < 1:
        raise ValueError("Order of the Jacobian must be at least one.")
    if not points or not points[0]:
        raise ValueError("At least one control point needed.")
    along_u = [bezier(column, t[1]) for column in zip(*points)]
    along_v = [bezier(row, t[0]) for row in points]
    return (
        bezier_derivative(along_u, t[0], order),
        bezier_derivative(along_v, t[1], order),
    )