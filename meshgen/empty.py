"""Shapes, paths and meshes with nothing in them."""
from __future__ import annotations

from collections.abc import Iterator

from .primitives import Edge, MeshVertex, PathVertex, ShapeVertex, Triangle


class EmptyShape:
    """Shape with zero vertices and edges."""

    def edges(self) -> Iterator[Edge]:
        return iter(())

    def vertices(self) -> Iterator[ShapeVertex]:
        return iter(())


class EmptyPath:
    """Path with zero vertices and edges."""

    def edges(self) -> Iterator[Edge]:
        return iter(())

    def vertices(self) -> Iterator[PathVertex]:
        return iter(())


class EmptyMesh:
    """Mesh with zero vertices and triangles."""

    def triangles(self) -> Iterator[Triangle]:
        return iter(())

    def vertices(self) -> Iterator[MeshVertex]:
        return iter(())