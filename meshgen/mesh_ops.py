"""Modifiers that combine or transform 3D meshes.

A mesh is any object with ``triangles()`` and ``vertices()`` methods that
return fresh iterators of :class:`Triangle` and :class:`MeshVertex` on every
call.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import replace
from typing import Protocol

from .primitives import Axis, MeshVertex, Triangle
from .vecmath import mix, mul, normalize, scale


class Mesh(Protocol):
    def triangles(self) -> Iterator[Triangle]: ...

    def vertices(self) -> Iterator[MeshVertex]: ...


def _count(items: Iterable[object]) -> int:
    return sum(1 for _ in items)


def _reversed(triangle: Triangle) -> Triangle:
    a, b, c = triangle.vertices
    return Triangle((c, b, a))


class TransformMesh:
    """Applies ``mutate`` to a copy of every vertex; ``mutate`` edits it in place."""

    def __init__(self, mesh: Mesh, mutate: Callable[[MeshVertex], None]) -> None:
        self._mesh = mesh
        self._mutate = mutate

    def triangles(self) -> Iterator[Triangle]:
        return self._mesh.triangles()

    def vertices(self) -> Iterator[MeshVertex]:
        for vertex in self._mesh.vertices():
            copy = replace(vertex)
            self._mutate(copy)
            yield copy


def _negate_normal(vertex: MeshVertex) -> None:
    vertex.normal = scale(vertex.normal, -1.0)


class FlipMesh:
    """Turns a mesh inside out: triangle winding and normals are reversed."""

    def __init__(self, mesh: Mesh) -> None:
        self._impl = TransformMesh(mesh, _negate_normal)

    def triangles(self) -> Iterator[Triangle]:
        for triangle in self._impl.triangles():
            yield _reversed(triangle)

    def vertices(self) -> Iterator[MeshVertex]:
        return self._impl.vertices()


class AxisSwapMesh:
    """Rearranges the axes of positions and normals.

    ``x``, ``y`` and ``z`` name the source axis used for each output axis.
    Triangle winding is reversed when the rearrangement requires it.
    """

    def __init__(self, mesh: Mesh, x: Axis, y: Axis, z: Axis) -> None:
        order = (int(x), int(y), int(z))

        def swap(vertex: MeshVertex) -> None:
            vertex.position = tuple(vertex.position[i] for i in order)
            vertex.normal = tuple(vertex.normal[i] for i in order)

        self._impl = TransformMesh(mesh, swap)
        flip = True
        for chosen, axis in zip((x, y, z), (Axis.X, Axis.Y, Axis.Z)):
            if chosen != axis:
                flip = not flip
        self._flip = flip

    def triangles(self) -> Iterator[Triangle]:
        for triangle in self._impl.triangles():
            yield _reversed(triangle) if self._flip else triangle

    def vertices(self) -> Iterator[MeshVertex]:
        return self._impl.vertices()


class MergeMesh:
    """Concatenates meshes; triangle indices of later meshes are shifted accordingly."""

    def __init__(self, *meshes: Mesh) -> None:
        self._meshes = meshes

    def triangles(self) -> Iterator[Triangle]:
        base = 0
        for mesh in self._meshes:
            for triangle in mesh.triangles():
                yield triangle.offset(base)
            base += _count(mesh.vertices())

    def vertices(self) -> Iterator[MeshVertex]:
        for mesh in self._meshes:
            yield from mesh.vertices()


class ScaleMesh:
    """Scales positions component-wise while keeping normals unit length.

    No component of ``scale`` may be zero.
    """

    def __init__(self, mesh: Mesh, scale: Sequence[float]) -> None:
        factors = tuple(float(v) for v in scale)

        def apply(vertex: MeshVertex) -> None:
            vertex.position = mul(vertex.position, factors)
            vertex.normal = normalize(mul(factors, vertex.normal))

        self._impl = TransformMesh(mesh, apply)

    def triangles(self) -> Iterator[Triangle]:
        return self._impl.triangles()

    def vertices(self) -> Iterator[MeshVertex]:
        return self._impl.vertices()


class SpherifyMesh:
    """Moves vertices towards a sphere of ``radius`` centered at the origin.

    ``factor`` 0 leaves the mesh unchanged, 1 projects it fully onto the sphere.
    """

    def __init__(self, mesh: Mesh, radius: float, factor: float) -> None:
        def apply(vertex: MeshVertex) -> None:
            vertex.position = mix(
                vertex.position, scale(normalize(vertex.position), radius), factor
            )
            vertex.normal = normalize(
                mix(vertex.normal, normalize(vertex.position), factor)
            )

        self._impl = TransformMesh(mesh, apply)

    def triangles(self) -> Iterator[Triangle]:
        return self._impl.triangles()

    def vertices(self) -> Iterator[MeshVertex]:
        return self._impl.vertices()


def _swap_uv(vertex: MeshVertex) -> None:
    vertex.tex_coord = (vertex.tex_coord[1], vertex.tex_coord[0])


class UvSwapMesh:
    """Swaps the u and v texture coordinates."""

    def __init__(self, mesh: Mesh) -> None:
        self._impl = TransformMesh(mesh, _swap_uv)

    def triangles(self) -> Iterator[Triangle]:
        return self._impl.triangles()

    def vertices(self) -> Iterator[MeshVertex]:
        return self._impl.vertices()


def transform_mesh(mesh: Mesh, mutate: Callable[[MeshVertex], None]) -> TransformMesh:
    """Apply ``mutate`` to every vertex of ``mesh``."""
    return TransformMesh(mesh, mutate)


def flip_mesh(mesh: Mesh) -> FlipMesh:
    """Turn ``mesh`` inside out."""
    return FlipMesh(mesh)


def axis_swap_mesh(mesh: Mesh, x: Axis, y: Axis, z: Axis) -> AxisSwapMesh:
    """Rearrange the axes of ``mesh``."""
    return AxisSwapMesh(mesh, x, y, z)


def merge_mesh(*args: Mesh) -> MergeMesh:
    """Concatenate the given meshes."""
    return MergeMesh(*args)


def scale_mesh(mesh: Mesh, scale: Sequence[float]) -> ScaleMesh:
    """Scale ``mesh`` component-wise."""
    return ScaleMesh(mesh, scale)


def spherify_mesh(mesh: Mesh, radius: float, factor: float) -> SpherifyMesh:
    """Move ``mesh`` towards a sphere of ``radius``."""
    return SpherifyMesh(mesh, radius, factor)


def uv_swap_mesh(mesh: Mesh) -> UvSwapMesh:
    """Swap the texture coordinate axes of ``mesh``."""
    return UvSwapMesh(mesh)