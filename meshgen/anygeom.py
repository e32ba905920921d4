"""Uniform wrappers that hold any shape, path or mesh behind one type."""
from __future__ import annotations

from collections.abc import Iterator

from .primitives import Edge, MeshVertex, PathVertex, ShapeVertex, Triangle


class AnyShape:
    """Holds any shape and exposes its edges and vertices."""

    __slots__ = ("_shape",)

    def __init__(self, shape) -> None:
        self._shape = shape

    def edges(self) -> Iterator[Edge]:
        return iter(self._shape.edges())

    def vertices(self) -> Iterator[ShapeVertex]:
        return iter(self._shape.vertices())


class AnyPath:
    """Holds any path and exposes its edges and vertices."""

    __slots__ = ("_path",)

    def __init__(self, path) -> None:
        self._path = path

    def edges(self) -> Iterator[Edge]:
        return iter(self._path.edges())

    def vertices(self) -> Iterator[PathVertex]:
        return iter(self._path.vertices())


class AnyMesh:
    """Holds any mesh and exposes its triangles and vertices."""

    __slots__ = ("_mesh",)

    def __init__(self, mesh) -> None:
        self._mesh = mesh

    def triangles(self) -> Iterator[Triangle]:
        return iter(self._mesh.triangles())

    def vertices(self) -> Iterator[MeshVertex]:
        return iter(self._mesh.vertices())