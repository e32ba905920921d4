"""Modifiers that combine or transform 2D shapes.

A shape is any object with ``edges()`` and ``vertices()`` methods that return
fresh iterators of :class:`Edge` and :class:`ShapeVertex` on every call.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import replace
from typing import Protocol

from .primitives import Edge, ShapeVertex
from .vecmath import add, rotate2, scale, transform2


class Shape(Protocol):
    def edges(self) -> Iterator[Edge]: ...

    def vertices(self) -> Iterator[ShapeVertex]: ...


def _count(items: Iterable[object]) -> int:
    return sum(1 for _ in items)


class MergeShape:
    """Concatenates shapes; edge indices of later shapes are shifted accordingly."""

    def __init__(self, *shapes: Shape) -> None:
        self._shapes = shapes

    def edges(self) -> Iterator[Edge]:
        base = 0
        for shape in self._shapes:
            for edge in shape.edges():
                yield edge.offset(base)
            base += _count(shape.vertices())

    def vertices(self) -> Iterator[ShapeVertex]:
        for shape in self._shapes:
            yield from shape.vertices()


class RepeatShape:
    """Repeats a shape ``instances`` times, each copy moved by ``delta`` more."""

    def __init__(self, shape: Shape, instances: int, delta: Sequence[float]) -> None:
        self._shape = shape
        self._instances = instances
        self._delta = tuple(float(x) for x in delta)
        self._vertex_count = _count(shape.vertices())

    def _copies(self) -> range:
        if self._vertex_count <= 0:
            return range(0)
        return range(max(self._instances, 0))

    def edges(self) -> Iterator[Edge]:
        base = 0
        for _ in self._copies():
            for edge in self._shape.edges():
                yield edge.offset(base)
            base += self._vertex_count

    def vertices(self) -> Iterator[ShapeVertex]:
        offset = tuple(0.0 for _ in self._delta)
        for _ in self._copies():
            for vertex in self._shape.vertices():
                yield replace(vertex, position=add(vertex.position, offset))
            offset = add(offset, self._delta)


class TransformShape:
    """Applies ``mutate`` to a copy of every vertex; ``mutate`` edits it in place."""

    def __init__(self, shape: Shape, mutate: Callable[[ShapeVertex], None]) -> None:
        self._shape = shape
        self._mutate = mutate

    def edges(self) -> Iterator[Edge]:
        return self._shape.edges()

    def vertices(self) -> Iterator[ShapeVertex]:
        for vertex in self._shape.vertices():
            copy = replace(vertex)
            self._mutate(copy)
            yield copy


def _negate_tangent(vertex: ShapeVertex) -> None:
    vertex.tangent = scale(vertex.tangent, -1.0)


def _swap_xy(vertex: ShapeVertex) -> None:
    vertex.position = (vertex.position[1], vertex.position[0])
    vertex.tangent = (vertex.tangent[1], vertex.tangent[0])


class FlipShape:
    """Reverses the direction of a shape: edges and tangents are reversed."""

    def __init__(self, shape: Shape) -> None:
        self._impl = TransformShape(shape, _negate_tangent)

    def edges(self) -> Iterator[Edge]:
        for edge in self._impl.edges():
            first, second = edge.vertices
            yield Edge((second, first))

    def vertices(self) -> Iterator[ShapeVertex]:
        return self._impl.vertices()


class AxisSwapShape:
    """Swaps the x and y axes of positions and tangents."""

    def __init__(self, shape: Shape) -> None:
        self._impl = TransformShape(shape, _swap_xy)

    def edges(self) -> Iterator[Edge]:
        return self._impl.edges()

    def vertices(self) -> Iterator[ShapeVertex]:
        return self._impl.vertices()


class RotateShape:
    """Rotates a shape counterclockwise by ``angle`` radians around the origin."""

    def __init__(self, shape: Shape, angle: float) -> None:
        rotation = rotate2(angle)

        def rotate(vertex: ShapeVertex) -> None:
            vertex.position = transform2(rotation, vertex.position)
            vertex.tangent = transform2(rotation, vertex.tangent)

        self._impl = TransformShape(shape, rotate)

    def edges(self) -> Iterator[Edge]:
        return self._impl.edges()

    def vertices(self) -> Iterator[ShapeVertex]:
        return self._impl.vertices()


def merge_shape(*args: Shape) -> MergeShape:
    """Concatenate the given shapes."""
    return MergeShape(*args)


def repeat_shape(shape: Shape, instances: int, delta: Sequence[float]) -> RepeatShape:
    """Repeat ``shape`` at intervals of ``delta``."""
    return RepeatShape(shape, instances, delta)


def transform_shape(
    shape: Shape, mutate: Callable[[ShapeVertex], None]
) -> TransformShape:
    """Apply ``mutate`` to every vertex of ``shape``."""
    return TransformShape(shape, mutate)


def flip_shape(shape: Shape) -> FlipShape:
    """Reverse the direction of ``shape``."""
    return FlipShape(shape)


def axis_swap_shape(shape: Shape) -> AxisSwapShape:
    """Swap the x and y axes of ``shape``."""
    return AxisSwapShape(shape)


def rotate_shape(shape: Shape, angle: float) -> RotateShape:
    """Rotate ``shape`` by ``angle`` radians."""
    return RotateShape(shape, angle)