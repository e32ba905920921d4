"""Wavefront OBJ text output for previewing meshes."""
from __future__ import annotations

import io

from .primitives import MeshVertex, Triangle


def _fmt(value: float) -> str:
    return format(value, "g")


class ObjWriter:
    """Accumulates meshes as OBJ text; indices continue across meshes."""

    def __init__(self) -> None:
        self._base = 1
        self._out = io.StringIO()

    def write_mesh(self, mesh) -> None:
        """Append all vertices and faces of ``mesh``."""
        new_base = self._base
        vertex: MeshVertex
        for vertex in mesh.vertices():
            new_base += 1
            self._out.write("v " + " ".join(_fmt(x) for x in vertex.position[:3]) + "\n")
            self._out.write("vn " + " ".join(_fmt(x) for x in vertex.normal[:3]) + "\n")
            self._out.write("vt " + " ".join(_fmt(x) for x in vertex.tex_coord[:2]) + "\n")

        triangle: Triangle
        for triangle in mesh.triangles():
            indices = triangle.offset(self._base).vertices
            self._out.write(
                "f " + " ".join(f"{i}/{i}/{i}" for i in indices) + "\n"
            )

        self._base = new_base

    def text(self) -> str:
        """The OBJ text written so far."""
        return self._out.getvalue()