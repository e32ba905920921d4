"""Mesh sampled from a function of two parameters on a regular grid."""
from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from .primitives import MeshVertex, Triangle


class ParametricMesh:
    """Mesh built by evaluating ``evaluate((u, v))`` on an even grid over 0..1.

    ``segments`` gives the number of subdivisions along u and v; if either
    is zero (or less) the mesh is empty.
    """

    def __init__(
        self,
        evaluate: Callable[[tuple[float, float]], MeshVertex],
        segments: Sequence[int],
    ) -> None:
        self._evaluate = evaluate
        self._segments = (int(segments[0]), int(segments[1]))

    def _empty(self) -> bool:
        return self._segments[0] <= 0 or self._segments[1] <= 0

    def triangles(self) -> Iterator[Triangle]:
        if self._empty():
            return
        su, sv = self._segments
        for j in range(sv):
            for i in range(su):
                base = j * (su + 1) + i
                yield Triangle((base, base + 1, base + su + 1))
                yield Triangle((base + 1, base + su + 2, base + su + 1))

    def vertices(self) -> Iterator[MeshVertex]:
        if self._empty():
            return
        su, sv = self._segments
        du = 1.0 / su
        dv = 1.0 / sv
        for j in range(sv + 1):
            for i in range(su + 1):
                yield self._evaluate((i * du, j * dv))