"""Primitive 3D paths: parametric, straight line, helix and torus knot."""
from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Sequence

from .primitives import Edge, PathVertex
from .vecmath import add, cross, normalize, scale, sub


class ParametricPath:
    """Path sampled from ``evaluate(t)`` at ``segments + 1`` even steps of t in 0..1.

    Zero (or negative) segments yield an empty path.
    """

    def __init__(
        self, evaluate: Callable[[float], PathVertex], segments: int = 16
    ) -> None:
        self._evaluate = evaluate
        self._segments = segments

    def edges(self) -> Iterator[Edge]:
        for i in range(max(self._segments, 0)):
            yield Edge((i, i + 1))

    def vertices(self) -> Iterator[PathVertex]:
        if self._segments <= 0:
            return
        delta = 1.0 / self._segments
        for i in range(self._segments + 1):
            yield self._evaluate(i * delta)


class LinePath:
    """A straight path from ``start`` to ``end`` with a constant ``normal``."""

    def __init__(
        self,
        start: Sequence[float] = (0.0, 0.0, -1.0),
        end: Sequence[float] = (0.0, 0.0, 1.0),
        normal: Sequence[float] = (1.0, 0.0, 0.0),
        segments: int = 8,
    ) -> None:
        start = tuple(float(x) for x in start)
        end = tuple(float(x) for x in end)
        normal = tuple(float(x) for x in normal)
        direction = sub(end, start)
        tangent = normalize(direction)

        def evaluate(t: float) -> PathVertex:
            return PathVertex(
                position=add(start, scale(direction, t)),
                tangent=tangent,
                normal=normal,
                tex_coord=t,
            )

        self._impl = ParametricPath(evaluate, segments)

    def edges(self) -> Iterator[Edge]:
        return self._impl.edges()

    def vertices(self) -> Iterator[PathVertex]:
        return self._impl.vertices()


class HelixPath:
    """A helix around the z-axis rising from ``-size`` to ``size``.

    ``start`` is the counterclockwise start angle relative to the x-axis and
    ``sweep`` the total counterclockwise angle travelled.
    """

    def __init__(
        self,
        radius: float = 1.0,
        size: float = 1.0,
        segments: int = 32,
        start: float = 0.0,
        sweep: float = math.radians(720.0),
    ) -> None:
        def evaluate(t: float) -> PathVertex:
            angle = start + t * sweep
            sine = math.sin(angle)
            cosine = math.cos(angle)
            return PathVertex(
                position=(radius * cosine, radius * sine, 2.0 * t * size - size),
                tangent=normalize(
                    (-radius * sine, radius * cosine, 2.0 * size / sweep)
                ),
                normal=(cosine, sine, 0.0),
                tex_coord=t,
            )

        self._impl = ParametricPath(evaluate, segments)

    def edges(self) -> Iterator[Edge]:
        return self._impl.edges()

    def vertices(self) -> Iterator[PathVertex]:
        return self._impl.vertices()


def _knot(p: int, q: int, t: float) -> tuple[float, float, float]:
    t *= math.radians(360.0)
    pt = p * t
    qt = q * t
    r = 0.5 * (2.0 + math.sin(qt))
    return (r * math.cos(pt), r * math.sin(pt), r * math.cos(qt))


class KnotPath:
    """A (p, q) torus knot: winds ``p`` times around the z-axis and ``q`` times around a circle."""

    def __init__(self, p: int = 2, q: int = 3, segments: int = 96) -> None:
        def evaluate(t: float) -> PathVertex:
            prev = _knot(p, q, t - 0.01)
            nxt = _knot(p, q, t + 0.01)
            return PathVertex(
                position=_knot(p, q, t),
                tangent=normalize(sub(nxt, prev)),
                normal=normalize(cross(sub(nxt, prev), add(nxt, prev))),
                tex_coord=t,
            )

        self._impl = ParametricPath(evaluate, segments)

    def edges(self) -> Iterator[Edge]:
        return self._impl.edges()

    def vertices(self) -> Iterator[PathVertex]:
        return self._impl.vertices()