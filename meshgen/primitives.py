"""Basic geometry records: axes, edges, triangles and vertex types."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .vecmath import Vec, cross


class Axis(IntEnum):
    """Coordinate axis; the value is the component index."""

    X = 0
    Y = 1
    Z = 2


@dataclass(frozen=True)
class Edge:
    """A line segment given by two zero-based vertex indices."""

    vertices: tuple[int, int] = (0, 0)

    def offset(self, delta: int) -> Edge:
        """A copy with ``delta`` added to both indices."""
        return Edge(tuple(v + delta for v in self.vertices))


@dataclass(frozen=True)
class Triangle:
    """Three zero-based vertex indices in counterclockwise order."""

    vertices: tuple[int, int, int] = (0, 0, 0)

    def offset(self, delta: int) -> Triangle:
        """A copy with ``delta`` added to every index."""
        return Triangle(tuple(v + delta for v in self.vertices))


@dataclass
class ShapeVertex:
    """A point on a 2D shape."""

    position: Vec = (0.0, 0.0)
    tangent: Vec = (0.0, 0.0)
    tex_coord: float = 0.0

    def normal(self) -> Vec:
        """Unit vector perpendicular to the tangent, to its right-hand side."""
        return (self.tangent[1], -self.tangent[0])


@dataclass
class PathVertex:
    """A point on a 3D path with its local coordinate frame."""

    position: Vec = (0.0, 0.0, 0.0)
    tangent: Vec = (0.0, 0.0, 0.0)
    normal: Vec = (0.0, 0.0, 0.0)
    tex_coord: float = 0.0

    def binormal(self) -> Vec:
        """Tangent cross normal: the y-axis of the path frame."""
        return cross(self.tangent, self.normal)


@dataclass
class MeshVertex:
    """A mesh vertex with position, normal and texture coordinate."""

    position: Vec = (0.0, 0.0, 0.0)
    normal: Vec = (0.0, 0.0, 0.0)
    tex_coord: Vec = (0.0, 0.0)