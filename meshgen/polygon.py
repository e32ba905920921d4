"""Convex polygon disks and the dodecahedron built from them."""
from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import replace

from .primitives import MeshVertex, Triangle
from .shapes import CircleShape
from .vecmath import Vec, add, cross, dot, mix, normal, normalize, scale, sub


def _to3(point: Sequence[float]) -> Vec:
    if len(point) == 2:
        return (float(point[0]), float(point[1]), 0.0)
    return (float(point[0]), float(point[1]), float(point[2]))


def _ieee_div(a: float, b: float) -> float:
    """Division that yields inf or NaN instead of raising on a zero divisor."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _regular_corners(radius: float, sides: int) -> list[Vec]:
    corners = [
        (v.position[0], v.position[1], 0.0)
        for v in CircleShape(radius, sides).vertices()
    ]
    # The last circle vertex coincides with the first one.
    return corners[:-1]


class ConvexPolygonMesh:
    """A flat convex polygon subdivided along each side and radially into rings.

    ``vertices`` are the corners, as 2D points (on the xy-plane) or coplanar 3D
    points. Fewer than three corners, or zero segments or rings, give an empty
    mesh.
    """

    def __init__(
        self,
        vertices: Sequence[Sequence[float]],
        segments: int = 1,
        rings: int = 1,
    ) -> None:
        corners = [_to3(p) for p in vertices]
        self._corners = corners
        self._segments = segments
        self._rings = rings

        count = len(corners)
        if count:
            total = (0.0, 0.0, 0.0)
            for corner in corners:
                total = add(total, corner)
            center = scale(total, 1.0 / count)
        else:
            center = (0.0, 0.0, 0.0)
        self._center = center

        normal_sum = (0.0, 0.0, 0.0)
        for i, corner in enumerate(corners):
            normal_sum = add(
                normal_sum, normal(center, corner, corners[(i + 1) % count])
            )
        self._normal = normalize(normal_sum)

        self._tangent: Vec = (0.0, 0.0, 0.0)
        self._bitangent: Vec = (0.0, 0.0, 0.0)
        self._tex_delta: Vec = (0.0, 0.0)

        if count >= 3:
            tangent = normalize(sub(corners[0], center))
            bitangent = cross(self._normal, tangent)
            tex_min = [0.0, 0.0]
            tex_max = [0.0, 0.0]
            for corner in corners:
                delta = sub(corner, center)
                uv = (dot(tangent, delta), dot(bitangent, delta))
                for axis in range(2):
                    tex_min[axis] = min(tex_min[axis], uv[axis])
                    tex_max[axis] = max(tex_max[axis], uv[axis])
            size = (tex_max[0] - tex_min[0], tex_max[1] - tex_min[1])
            self._tangent = tuple(_ieee_div(x, size[0]) for x in tangent)
            self._bitangent = tuple(_ieee_div(x, size[1]) for x in bitangent)
            self._tex_delta = (
                _ieee_div(tex_min[0], size[0]),
                _ieee_div(tex_min[1], size[1]),
            )

    @classmethod
    def regular(
        cls,
        radius: float = 1.0,
        sides: int = 5,
        segments: int = 4,
        rings: int = 4,
    ) -> ConvexPolygonMesh:
        """A regular polygon with ``sides`` corners on a circle of ``radius``."""
        return cls(_regular_corners(radius, sides), segments, rings)

    def _empty(self) -> bool:
        return self._segments <= 0 or self._rings <= 0 or len(self._corners) < 3

    def _make_vertex(self, position: Vec) -> MeshVertex:
        delta = sub(position, self._center)
        return MeshVertex(
            position=position,
            normal=self._normal,
            tex_coord=(
                dot(self._tangent, delta) - self._tex_delta[0],
                dot(self._bitangent, delta) - self._tex_delta[1],
            ),
        )

    def triangles(self) -> Iterator[Triangle]:
        if self._empty():
            return
        per_ring = self._segments * len(self._corners)
        for ring in range(self._rings):
            delta = ring * per_ring + 1
            last = ring == self._rings - 1
            for n1 in range(per_ring):
                n2 = (n1 + 1) % per_ring
                if last:
                    yield Triangle((0, n1 + delta, n2 + delta))
                else:
                    yield Triangle((n1 + delta, n2 + delta, n1 + per_ring + delta))
                    yield Triangle(
                        (n2 + delta, n2 + per_ring + delta, n1 + per_ring + delta)
                    )

    def vertices(self) -> Iterator[MeshVertex]:
        if self._empty():
            return
        corners = self._corners
        count = len(corners)
        yield self._make_vertex(self._center)
        for ring in range(self._rings):
            ring_delta = ring / self._rings
            for side in range(count):
                a = mix(corners[side], self._center, ring_delta)
                b = mix(corners[(side + 1) % count], self._center, ring_delta)
                for segment in range(self._segments):
                    yield self._make_vertex(mix(a, b, segment / self._segments))


_PHI = (1.0 + math.sqrt(5.0)) / 2.0

_DODECAHEDRON_VERTICES: tuple[Vec, ...] = (
    (1.0, 1.0, -1.0),
    (-1.0, 1.0, -1.0),
    (1.0, -1.0, -1.0),
    (-1.0, -1.0, -1.0),
    (1.0, 1.0, 1.0),
    (-1.0, 1.0, 1.0),
    (1.0, -1.0, 1.0),
    (-1.0, -1.0, 1.0),
    (0.0, 1.0 / _PHI, -_PHI),
    (0.0, -1.0 / _PHI, -_PHI),
    (0.0, 1.0 / _PHI, _PHI),
    (0.0, -1.0 / _PHI, _PHI),
    (1.0 / _PHI, _PHI, 0.0),
    (-1.0 / _PHI, _PHI, 0.0),
    (1.0 / _PHI, -_PHI, 0.0),
    (-1.0 / _PHI, -_PHI, 0.0),
    (_PHI, 0.0, -1.0 / _PHI),
    (-_PHI, 0.0, -1.0 / _PHI),
    (_PHI, 0.0, 1.0 / _PHI),
    (-_PHI, 0.0, 1.0 / _PHI),
)

_DODECAHEDRON_FACES: tuple[tuple[int, int, int, int, int], ...] = (
    (0, 12, 4, 18, 16),
    (18, 6, 14, 2, 16),
    (4, 10, 11, 6, 18),
    (11, 7, 15, 14, 6),
    (7, 11, 10, 5, 19),
    (17, 3, 15, 7, 19),
    (9, 2, 14, 15, 3),
    (1, 8, 9, 3, 17),
    (10, 4, 12, 13, 5),
    (5, 13, 1, 17, 19),
    (0, 8, 1, 13, 12),
    (0, 16, 2, 9, 8),
)


class DodecahedronMesh:
    """Regular dodecahedron centered at the origin inside a sphere of ``radius``.

    Each pentagonal face is a :class:`ConvexPolygonMesh` with ``segments``
    subdivisions per side and ``rings`` radial subdivisions.
    """

    def __init__(self, radius: float = 1.0, segments: int = 1, rings: int = 1) -> None:
        self._radius = radius
        self._faces = [
            ConvexPolygonMesh(
                [normalize(_DODECAHEDRON_VERTICES[i]) for i in face], segments, rings
            )
            for face in _DODECAHEDRON_FACES
        ]
        self._face_vertex_count = sum(
            1 for _ in ConvexPolygonMesh.regular(1.0, 5, segments, rings).vertices()
        )

    def triangles(self) -> Iterator[Triangle]:
        for index, face in enumerate(self._faces):
            base = index * self._face_vertex_count
            for triangle in face.triangles():
                yield triangle.offset(base)

    def vertices(self) -> Iterator[MeshVertex]:
        for face in self._faces:
            for vertex in face.vertices():
                yield replace(vertex, position=scale(vertex.position, self._radius))