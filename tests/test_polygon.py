import math

import pytest

from meshgen.polygon import ConvexPolygonMesh, DodecahedronMesh
from meshgen.vecmath import cross, dot, length, normalize, sub

SQUARE = [(-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0)]


def _approx_vec(a, b, tol=1e-9):
    return all(abs(x - y) <= tol for x, y in zip(a, b))


def test_square_single_ring_triangles():
    mesh = ConvexPolygonMesh(SQUARE, 1, 1)
    triangles = [t.vertices for t in mesh.triangles()]
    assert triangles == [(0, 1, 2), (0, 2, 3), (0, 3, 4), (0, 4, 1)]


def test_square_first_vertex_is_center_and_corners_follow():
    mesh = ConvexPolygonMesh(SQUARE, 1, 1)
    vertices = list(mesh.vertices())
    assert _approx_vec(vertices[0].position, (0.0, 0.0, 0.0))
    corners = [v.position for v in vertices[1:]]
    assert [c[:2] for c in corners] == SQUARE


def test_two_and_three_dimensional_input_agree():
    flat = ConvexPolygonMesh(SQUARE, 2, 3)
    spatial = ConvexPolygonMesh([(x, y, 0.0) for x, y in SQUARE], 2, 3)
    assert list(flat.vertices()) == list(spatial.vertices())
    assert list(flat.triangles()) == list(spatial.triangles())


def test_regular_polygon_indices_cover_all_vertices():
    mesh = ConvexPolygonMesh.regular(1.0, 5, 4, 4)
    count = sum(1 for _ in mesh.vertices())
    used = {i for t in mesh.triangles() for i in t.vertices}
    assert used == set(range(count))


def test_regular_polygon_normals_point_up():
    mesh = ConvexPolygonMesh.regular()
    normals = [list(vertex.normal) for vertex in mesh.vertices()]
    assert len(normals) == 81
    for n in normals:
        assert n == pytest.approx([0.0, 0.0, 1.0], abs=1e-9)


def test_regular_polygon_triangles_are_counterclockwise():
    mesh = ConvexPolygonMesh.regular(2.0, 6, 3, 3)
    positions = [v.position for v in mesh.vertices()]
    for triangle in mesh.triangles():
        a, b, c = (positions[i] for i in triangle.vertices)
        assert cross(sub(b, a), sub(c, a))[2] > 0.0


def test_regular_polygon_stays_inside_radius():
    radius = 1.5
    mesh = ConvexPolygonMesh.regular(radius, 7, 3, 2)
    for vertex in mesh.vertices():
        assert length(vertex.position) <= radius + 1e-9


def test_tex_coords_span_unit_square():
    mesh = ConvexPolygonMesh.regular(1.0, 5, 2, 2)
    us = [v.tex_coord[0] for v in mesh.vertices()]
    vs = [v.tex_coord[1] for v in mesh.vertices()]
    assert min(us) == pytest.approx(0.0, abs=1e-9)
    assert max(us) == pytest.approx(1.0)
    assert min(vs) == pytest.approx(0.0, abs=1e-9)
    assert max(vs) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "mesh",
    [
        ConvexPolygonMesh([(0.0, 0.0), (1.0, 0.0)], 1, 1),
        ConvexPolygonMesh([], 1, 1),
        ConvexPolygonMesh(SQUARE, 0, 1),
        ConvexPolygonMesh(SQUARE, 1, 0),
        ConvexPolygonMesh.regular(1.0, 2, 4, 4),
    ],
)
def test_degenerate_polygons_are_empty(mesh):
    assert list(mesh.vertices()) == []
    assert list(mesh.triangles()) == []


def test_iteration_is_repeatable():
    mesh = ConvexPolygonMesh.regular()
    first_vertices = list(mesh.vertices())
    second_vertices = list(mesh.vertices())
    first_triangles = [t.vertices for t in mesh.triangles()]
    second_triangles = [t.vertices for t in mesh.triangles()]
    assert len(first_vertices) == 81
    assert len(first_triangles) == 140
    assert second_vertices == first_vertices
    assert second_triangles == first_triangles


def test_dodecahedron_vertex_count_is_twelve_faces():
    mesh = DodecahedronMesh(1.0, 2, 2)
    face = ConvexPolygonMesh.regular(1.0, 5, 2, 2)
    face_vertices = sum(1 for _ in face.vertices())
    face_triangles = sum(1 for _ in face.triangles())
    assert sum(1 for _ in mesh.vertices()) == 12 * face_vertices
    assert sum(1 for _ in mesh.triangles()) == 12 * face_triangles


def test_dodecahedron_triangle_indices_cover_vertices():
    mesh = DodecahedronMesh(2.0, 2, 3)
    count = sum(1 for _ in mesh.vertices())
    used = {i for t in mesh.triangles() for i in t.vertices}
    assert used == set(range(count))


def test_dodecahedron_corners_lie_on_sphere():
    radius = 3.0
    vertices = list(DodecahedronMesh(radius, 1, 1).vertices())
    for face_start in range(0, len(vertices), 6):
        center, *corners = vertices[face_start:face_start + 6]
        assert length(center.position) < radius
        for corner in corners:
            assert length(corner.position) == pytest.approx(radius)


def test_dodecahedron_face_normals_are_radial():
    vertices = list(DodecahedronMesh(1.0, 1, 1).vertices())
    for face_start in range(0, len(vertices), 6):
        center = vertices[face_start]
        assert length(center.normal) == pytest.approx(1.0)
        alignment = dot(center.normal, normalize(center.position))
        assert abs(alignment) == pytest.approx(1.0)
        assert not math.isnan(alignment)