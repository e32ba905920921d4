"""Primitive 2D shapes: circle, line, Bezier curve and grid."""
from __future__ import annotations

import math
import sys
from collections.abc import Callable, Iterator, Sequence

from .primitives import Edge, ShapeVertex
from .shape_ops import MergeShape, RepeatShape
from .vecmath import add, bezier, bezier_derivative, dot, normalize, scale, sub

_EPSILON = sys.float_info.epsilon


class _ParametricShape:
    """Shape sampled from ``eval(t)`` at ``segments + 1`` even steps of t in 0..1."""

    def __init__(self, evaluate: Callable[[float], ShapeVertex], segments: int) -> None:
        self._evaluate = evaluate
        self._segments = segments

    def edges(self) -> Iterator[Edge]:
        for i in range(max(self._segments, 0)):
            yield Edge((i, i + 1))

    def vertices(self) -> Iterator[ShapeVertex]:
        if self._segments <= 0:
            return
        delta = 1.0 / self._segments
        for i in range(self._segments + 1):
            yield self._evaluate(i * delta)


class CircleShape:
    """A circle (or arc) centered at the origin."""

    def __init__(
        self,
        radius: float = 1.0,
        segments: int = 32,
        start: float = 0.0,
        sweep: float = math.radians(360.0),
    ) -> None:
        def evaluate(t: float) -> ShapeVertex:
            angle = t * sweep + start
            sine = math.sin(angle)
            cosine = math.cos(angle)
            return ShapeVertex(
                position=(radius * cosine, radius * sine),
                tangent=(-sine, cosine),
                tex_coord=t,
            )

        self._impl = _ParametricShape(evaluate, segments)

    def edges(self) -> Iterator[Edge]:
        return self._impl.edges()

    def vertices(self) -> Iterator[ShapeVertex]:
        return self._impl.vertices()


class LineShape:
    """A straight line from ``start`` to ``end``."""

    def __init__(
        self,
        start: Sequence[float] = (0.0, -1.0),
        end: Sequence[float] = (0.0, 1.0),
        segments: int = 8,
    ) -> None:
        start = tuple(float(x) for x in start)
        end = tuple(float(x) for x in end)
        direction = sub(end, start)
        tangent = normalize(direction)

        def evaluate(t: float) -> ShapeVertex:
            return ShapeVertex(
                position=add(start, scale(direction, t)),
                tangent=tangent,
                tex_coord=t,
            )

        self._impl = _ParametricShape(evaluate, segments)

    def edges(self) -> Iterator[Edge]:
        return self._impl.edges()

    def vertices(self) -> Iterator[ShapeVertex]:
        return self._impl.vertices()


class BezierShape:
    """A Bezier curve through the given control points (four gives a cubic)."""

    def __init__(self, points: Sequence[Sequence[float]], segments: int = 16) -> None:
        control = [tuple(float(x) for x in p) for p in points]
        if len(control) < 2:
            raise ValueError("A Bezier shape needs more than one control point.")

        def evaluate(t: float) -> ShapeVertex:
            tangent = bezier_derivative(control, t, 1)
            # A zero tangent (coincident control points): sample close by.
            if dot(tangent, tangent) < _EPSILON:
                tangent = bezier_derivative(control, t + 10.0 * _EPSILON, 1)
            return ShapeVertex(
                position=bezier(control, t),
                tangent=normalize(tangent),
                tex_coord=t,
            )

        self._impl = _ParametricShape(evaluate, segments)

    def edges(self) -> Iterator[Edge]:
        return self._impl.edges()

    def vertices(self) -> Iterator[ShapeVertex]:
        return self._impl.vertices()


class GridShape:
    """A rectangular grid of lines centered at the origin.

    ``size`` is half the extent in x and y, ``segments`` the number of cells in
    each direction and ``sub_segments`` the subdivisions of each cell side.
    """

    def __init__(
        self,
        size: Sequence[float] = (1.0, 1.0),
        segments: Sequence[int] = (4, 4),
        sub_segments: Sequence[int] = (2, 2),
    ) -> None:
        sx, sy = float(size[0]), float(size[1])
        nx, ny = int(segments[0]), int(segments[1])
        horizontal = RepeatShape(
            LineShape((-sx, -sy), (sx, -sy), nx * sub_segments[0]),
            0 if ny < 1 else ny + 1,
            (0.0, 2.0 * sy / max(ny, 1)),
        )
        vertical = RepeatShape(
            LineShape((-sx, -sy), (-sx, sy), ny * sub_segments[1]),
            0 if nx < 1 else nx + 1,
            (2.0 * sx / max(nx, 1), 0.0),
        )
        self._impl = MergeShape(horizontal, vertical)

    def edges(self) -> Iterator[Edge]:
        return self._impl.edges()

    def vertices(self) -> Iterator[ShapeVertex]:
        return self._impl.vertices()