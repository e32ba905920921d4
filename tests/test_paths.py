import math

import pytest

from meshgen.paths import HelixPath, KnotPath, LinePath, ParametricPath
from meshgen.primitives import Edge, PathVertex
from meshgen.vecmath import dot, length


def _close(a, b, tol=1e-9):
    return all(math.isclose(x, y, abs_tol=tol) for x, y in zip(a, b))


def test_parametric_path_counts_and_parameters():
    path = ParametricPath(lambda t: PathVertex(tex_coord=t), 4)
    vertices = list(path.vertices())
    edges = list(path.edges())
    assert len(vertices) == 5
    assert len(edges) == 4
    assert [v.tex_coord for v in vertices] == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
    assert edges[0] == Edge((0, 1))
    assert edges[-1] == Edge((3, 4))


def test_parametric_path_zero_segments_is_empty():
    path = ParametricPath(lambda t: PathVertex(tex_coord=t), 0)
    assert list(path.vertices()) == []
    assert list(path.edges()) == []


def test_parametric_path_iterators_are_fresh():
    path = ParametricPath(lambda t: PathVertex(tex_coord=t), 3)
    first = [v.tex_coord for v in path.vertices()]
    second = [v.tex_coord for v in path.vertices()]
    assert first == pytest.approx([0.0, 1.0 / 3.0, 2.0 / 3.0, 1.0])
    assert second == pytest.approx([0.0, 1.0 / 3.0, 2.0 / 3.0, 1.0])


def test_line_path_default_endpoints():
    vertices = list(LinePath().vertices())
    assert len(vertices) == 9
    assert _close(vertices[0].position, (0.0, 0.0, -1.0))
    assert _close(vertices[-1].position, (0.0, 0.0, 1.0))
    for v in vertices:
        assert _close(v.tangent, (0.0, 0.0, 1.0))
        assert _close(v.normal, (1.0, 0.0, 0.0))


def test_line_path_custom_points_are_evenly_spaced():
    path = LinePath((1.0, 2.0, 3.0), (3.0, 2.0, 3.0), (0.0, 1.0, 0.0), 2)
    vertices = list(path.vertices())
    assert _close(vertices[0].position, (1.0, 2.0, 3.0))
    assert _close(vertices[2].position, (3.0, 2.0, 3.0))
    midpoint = tuple((a + b) / 2 for a, b in zip(vertices[0].position, vertices[2].position))
    assert _close(vertices[1].position, midpoint)
    assert length(vertices[1].tangent) == pytest.approx(1.0)


def test_helix_path_stays_on_cylinder():
    radius, size = 2.0, 3.0
    vertices = list(HelixPath(radius, size, 16).vertices())
    assert len(vertices) == 17
    for v in vertices:
        x, y, _ = v.position
        assert math.hypot(x, y) == pytest.approx(radius)
        assert length(v.tangent) == pytest.approx(1.0)
        assert length(v.normal) == pytest.approx(1.0)
        assert dot(v.normal, v.tangent) == pytest.approx(0.0, abs=1e-9)
    assert vertices[0].position[2] == pytest.approx(-size)
    assert vertices[-1].position[2] == pytest.approx(size)


def test_helix_path_normal_points_outward():
    for v in HelixPath().vertices():
        x, y, _ = v.position
        assert v.normal[0] * x + v.normal[1] * y > 0.0


def test_knot_path_is_closed_and_unit_frames():
    path = KnotPath()
    vertices = list(path.vertices())
    assert len(vertices) == 97
    assert len(list(path.edges())) == 96
    assert _close(vertices[0].position, vertices[-1].position, 1e-9)
    for v in vertices:
        assert length(v.tangent) == pytest.approx(1.0)
        assert length(v.normal) == pytest.approx(1.0)


def test_knot_path_start_position():
    first = next(KnotPath(2, 3, 8).vertices())
    assert list(first.position) == pytest.approx([1.0, 0.0, 1.0], abs=1e-9)