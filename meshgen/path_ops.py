"""Modifiers that transform 3D paths or turn shapes into paths.

A path is any object with ``edges()`` and ``vertices()`` methods that return
fresh iterators of :class:`Edge` and :class:`PathVertex` on every call.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import replace
from typing import Protocol

from .primitives import Edge, PathVertex
from .vecmath import add, mul, normalize, scale


class Path(Protocol):
    def edges(self) -> Iterator[Edge]: ...

    def vertices(self) -> Iterator[PathVertex]: ...


def _count(items: Iterable[object]) -> int:
    return sum(1 for _ in items)


class _TransformPath:
    """Applies ``mutate`` to a copy of every vertex; ``mutate`` edits it in place."""

    def __init__(self, path: Path, mutate: Callable[[PathVertex], None]) -> None:
        self._path = path
        self._mutate = mutate

    def edges(self) -> Iterator[Edge]:
        return self._path.edges()

    def vertices(self) -> Iterator[PathVertex]:
        for vertex in self._path.vertices():
            copy = replace(vertex)
            self._mutate(copy)
            yield copy


def _flip(vertex: PathVertex) -> None:
    vertex.tangent = scale(vertex.tangent, -1.0)
    vertex.normal = scale(vertex.normal, -1.0)


class FlipPath:
    """Reverses a path: edges are reversed, tangents and normals negated."""

    def __init__(self, path: Path) -> None:
        self._impl = _TransformPath(path, _flip)

    def edges(self) -> Iterator[Edge]:
        for edge in self._impl.edges():
            first, second = edge.vertices
            yield Edge((second, first))

    def vertices(self) -> Iterator[PathVertex]:
        return self._impl.vertices()


class ScalePath:
    """Scales positions component-wise; tangents and normals stay unit length.

    No component of ``scale`` may be zero.
    """

    def __init__(self, path: Path, scale: Sequence[float]) -> None:
        factors = tuple(float(x) for x in scale)

        def apply(vertex: PathVertex) -> None:
            vertex.position = mul(vertex.position, factors)
            vertex.tangent = normalize(mul(factors, vertex.tangent))
            vertex.normal = normalize(mul(factors, vertex.normal))

        self._impl = _TransformPath(path, apply)

    def edges(self) -> Iterator[Edge]:
        return self._impl.edges()

    def vertices(self) -> Iterator[PathVertex]:
        return self._impl.vertices()


class TranslatePath:
    """Moves every vertex position by ``delta``."""

    def __init__(self, path: Path, delta: Sequence[float]) -> None:
        offset = tuple(float(x) for x in delta)

        def apply(vertex: PathVertex) -> None:
            vertex.position = add(vertex.position, offset)

        self._impl = _TransformPath(path, apply)

    def edges(self) -> Iterator[Edge]:
        return self._impl.edges()

    def vertices(self) -> Iterator[PathVertex]:
        return self._impl.vertices()


class RepeatPath:
    """Repeats a path ``instances`` times, each copy moved by ``delta`` more.

    Fewer than one instance, or a path without vertices, gives an empty path.
    """

    def __init__(self, path: Path, instances: int, delta: Sequence[float]) -> None:
        self._path = path
        self._instances = instances
        self._delta = tuple(float(x) for x in delta)
        self._vertex_count = _count(path.vertices())

    def _copies(self) -> range:
        if self._vertex_count <= 0:
            return range(0)
        return range(max(self._instances, 0))

    def edges(self) -> Iterator[Edge]:
        base = 0
        for _ in self._copies():
            for edge in self._path.edges():
                yield edge.offset(base)
            base += self._vertex_count

    def vertices(self) -> Iterator[PathVertex]:
        offset = tuple(0.0 for _ in self._delta)
        for _ in self._copies():
            for vertex in self._path.vertices():
                yield replace(vertex, position=add(vertex.position, offset))
            offset = add(offset, self._delta)


class ShapeToPath:
    """Turns a 2D shape into a path on the xy-plane.

    Positions and tangents get z = 0, the normal is the z-axis, so the shape
    normal becomes the path binormal.
    """

    def __init__(self, shape) -> None:
        self._shape = shape

    def edges(self) -> Iterator[Edge]:
        return self._shape.edges()

    def vertices(self) -> Iterator[PathVertex]:
        for vertex in self._shape.vertices():
            yield PathVertex(
                position=(vertex.position[0], vertex.position[1], 0.0),
                tangent=(vertex.tangent[0], vertex.tangent[1], 0.0),
                normal=(0.0, 0.0, 1.0),
                tex_coord=vertex.tex_coord,
            )


def flip_path(path: Path) -> FlipPath:
    """Reverse ``path``."""
    return FlipPath(path)


def scale_path(path: Path, scale: Sequence[float]) -> ScalePath:
    """Scale ``path`` component-wise."""
    return ScalePath(path, scale)


def translate_path(path: Path, delta: Sequence[float]) -> TranslatePath:
    """Move ``path`` by ``delta``."""
    return TranslatePath(path, delta)


def repeat_path(path: Path, instances: int, delta: Sequence[float]) -> RepeatPath:
    """Repeat ``path`` at intervals of ``delta``."""
    return RepeatPath(path, instances, delta)


def shape_to_path(shape) -> ShapeToPath:
    """Convert a 2D shape into a path on the xy-plane."""
    return ShapeToPath(shape)