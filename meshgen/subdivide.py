"""Subdivision of triangle meshes by splitting every edge in half."""
from __future__ import annotations

from collections.abc import Iterator

from .primitives import MeshVertex, Triangle
from .vecmath import mix, normalize


class SubdivideMesh:
    """Splits each triangle into four, ``iterations`` times over.

    The source mesh is read once when the object is built. Vertices of the
    source come first, followed by one new vertex per unique edge.
    """

    def __init__(self, mesh, iterations: int = 1) -> None:
        if iterations < 0:
            raise ValueError("Iterations must not be negative.")
        if iterations > 1:
            mesh = SubdivideMesh(mesh, iterations - 1)
        self._mesh = mesh
        self._passthrough = iterations == 0
        self._vertex_cache: list[MeshVertex] = []
        self._edge_cache: list[tuple[int, int]] = []
        self._edge_map: dict[tuple[int, int], int] = {}
        if self._passthrough:
            return

        self._vertex_cache = list(mesh.vertices())
        for triangle in mesh.triangles():
            indices = triangle.vertices
            for i in range(3):
                edge = tuple(sorted((indices[i], indices[(i + 1) % 3])))
                if edge not in self._edge_map:
                    self._edge_map[edge] = len(self._edge_cache)
                    self._edge_cache.append(edge)

    def _vertex_from_edge(self, a: int, b: int) -> int:
        key = (a, b) if a <= b else (b, a)
        return len(self._vertex_cache) + self._edge_map[key]

    def triangles(self) -> Iterator[Triangle]:
        if self._passthrough:
            yield from self._mesh.triangles()
            return
        mid = self._vertex_from_edge
        for triangle in self._mesh.triangles():
            v = triangle.vertices
            for i in range(3):
                j = (i + 1) % 3
                k = (i + 2) % 3
                yield Triangle((v[i], mid(v[i], v[j]), mid(v[k], v[i])))
            yield Triangle((mid(v[0], v[1]), mid(v[1], v[2]), mid(v[2], v[0])))

    def vertices(self) -> Iterator[MeshVertex]:
        if self._passthrough:
            yield from self._mesh.vertices()
            return
        yield from self._vertex_cache
        for a, b in self._edge_cache:
            v1 = self._vertex_cache[a]
            v2 = self._vertex_cache[b]
            yield MeshVertex(
                position=mix(v1.position, v2.position, 0.5),
                normal=normalize(mix(v1.normal, v2.normal, 0.5)),
                tex_coord=mix(v1.tex_coord, v2.tex_coord, 0.5),
            )