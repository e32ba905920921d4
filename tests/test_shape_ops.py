import math

import pytest

from meshgen.primitives import Edge, ShapeVertex
from meshgen.shape_ops import (
    AxisSwapShape,
    FlipShape,
    MergeShape,
    RepeatShape,
    RotateShape,
    TransformShape,
    axis_swap_shape,
    flip_shape,
    merge_shape,
    repeat_shape,
    rotate_shape,
    transform_shape,
)


class _FixedShape:
    def __init__(self, vertices, edges):
        self._vertices = vertices
        self._edges = edges

    def edges(self):
        return iter([Edge(e) for e in self._edges])

    def vertices(self):
        return iter(
            [ShapeVertex(position=p, tangent=t, tex_coord=c) for p, t, c in self._vertices]
        )


TRIANGLE_VERTS = [
    ((1.0, 0.0), (0.0, 1.0), 0.0),
    ((0.0, 2.0), (-1.0, 0.0), 0.5),
    ((-3.0, 0.5), (0.0, -1.0), 1.0),
]
TRIANGLE_EDGES = [(0, 1), (1, 2), (2, 0)]
SEGMENT_VERTS = [((5.0, 5.0), (1.0, 0.0), 0.0), ((6.0, 5.0), (1.0, 0.0), 1.0)]
SEGMENT_EDGES = [(0, 1)]


def _triangle():
    return _FixedShape(TRIANGLE_VERTS, TRIANGLE_EDGES)


def _segment():
    return _FixedShape(SEGMENT_VERTS, SEGMENT_EDGES)


def _positions(shape):
    return [v.position for v in shape.vertices()]


def _edges(shape):
    return [e.vertices for e in shape.edges()]


def test_merge_concatenates_vertices():
    merged = MergeShape(_triangle(), _segment())
    assert _positions(merged) == [p for p, _, _ in TRIANGLE_VERTS + SEGMENT_VERTS]


def test_merge_offsets_later_edges():
    merged = merge_shape(_triangle(), _segment(), _segment())
    n = len(TRIANGLE_VERTS)
    m = len(SEGMENT_VERTS)
    expected = TRIANGLE_EDGES + [(a + n, b + n) for a, b in SEGMENT_EDGES]
    expected += [(a + n + m, b + n + m) for a, b in SEGMENT_EDGES]
    assert _edges(merged) == expected


def test_merge_of_nothing_is_empty():
    merged = merge_shape()
    assert list(merged.vertices()) == []
    assert list(merged.edges()) == []


def test_merge_is_reiterable():
    merged = merge_shape(_triangle(), _segment())
    expected = [(0, 1), (1, 2), (2, 0), (3, 4)]
    first = _edges(merged)
    second = _edges(merged)
    assert first == expected
    assert second == expected


def test_repeat_offsets_positions_and_edges():
    instances = 3
    delta = (1.0, 2.0)
    repeated = RepeatShape(_triangle(), instances, delta)
    n = len(TRIANGLE_VERTS)
    expected_positions = [
        (p[0] + i * delta[0], p[1] + i * delta[1])
        for i in range(instances)
        for p, _, _ in TRIANGLE_VERTS
    ]
    assert _positions(repeated) == pytest.approx(expected_positions)
    expected_edges = [
        (a + i * n, b + i * n) for i in range(instances) for a, b in TRIANGLE_EDGES
    ]
    assert _edges(repeated) == expected_edges


def test_repeat_zero_or_negative_instances_is_empty():
    for instances in (0, -2):
        repeated = repeat_shape(_triangle(), instances, (1.0, 0.0))
        assert list(repeated.vertices()) == []
        assert list(repeated.edges()) == []


def test_repeat_of_empty_shape_is_empty():
    repeated = repeat_shape(_FixedShape([], []), 4, (1.0, 0.0))
    assert list(repeated.vertices()) == []
    assert list(repeated.edges()) == []


def test_transform_mutates_copies_only():
    def double_tex(vertex):
        vertex.tex_coord *= 2.0

    source = _triangle()
    transformed = TransformShape(source, double_tex)
    assert [v.tex_coord for v in transformed.vertices()] == [
        c * 2.0 for _, _, c in TRIANGLE_VERTS
    ]
    assert [v.tex_coord for v in source.vertices()] == [c for _, _, c in TRIANGLE_VERTS]
    assert _edges(transformed) == TRIANGLE_EDGES


def test_transform_function_helper():
    def shift(vertex):
        vertex.position = (vertex.position[0] + 10.0, vertex.position[1])

    shifted = transform_shape(_segment(), shift)
    assert _positions(shifted) == [(p[0] + 10.0, p[1]) for p, _, _ in SEGMENT_VERTS]


def test_flip_reverses_edges_and_tangents():
    flipped = FlipShape(_triangle())
    assert _edges(flipped) == [(b, a) for a, b in TRIANGLE_EDGES]
    assert [v.tangent for v in flipped.vertices()] == [
        (-t[0], -t[1]) for _, t, _ in TRIANGLE_VERTS
    ]
    assert _positions(flipped) == [p for p, _, _ in TRIANGLE_VERTS]


def test_flip_twice_restores():
    twice = flip_shape(flip_shape(_triangle()))
    assert _edges(twice) == TRIANGLE_EDGES
    assert [v.tangent for v in twice.vertices()] == [t for _, t, _ in TRIANGLE_VERTS]


def test_axis_swap_swaps_position_and_tangent():
    swapped = AxisSwapShape(_triangle())
    assert _positions(swapped) == [(p[1], p[0]) for p, _, _ in TRIANGLE_VERTS]
    assert [v.tangent for v in swapped.vertices()] == [
        (t[1], t[0]) for _, t, _ in TRIANGLE_VERTS
    ]
    assert _edges(swapped) == TRIANGLE_EDGES


def test_axis_swap_twice_is_identity():
    twice = axis_swap_shape(axis_swap_shape(_triangle()))
    assert _positions(twice) == [p for p, _, _ in TRIANGLE_VERTS]


def test_rotate_quarter_turn():
    rotated = RotateShape(_segment(), math.pi / 2)
    first = next(rotated.vertices())
    assert first.position == pytest.approx((-5.0, 5.0))
    assert first.tangent == pytest.approx((0.0, 1.0))


def test_rotate_preserves_lengths_and_inverts():
    angle = 0.7
    rotated = rotate_shape(_triangle(), angle)
    for original, turned in zip(_triangle().vertices(), rotated.vertices()):
        assert math.hypot(*turned.position) == pytest.approx(
            math.hypot(*original.position)
        )
    back = rotate_shape(rotated, -angle)
    for original, restored in zip(_triangle().vertices(), back.vertices()):
        assert restored.position == pytest.approx(original.position)
        assert restored.tangent == pytest.approx(original.tangent)
    assert _edges(back) == TRIANGLE_EDGES