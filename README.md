# meshgen

Procedural geometry in pure Python: 2D shapes, 3D paths and triangle meshes,
built from small composable pieces. Only the standard library is used.

## Install

```
pip install meshgen
```

## Concepts

Three kinds of geometry share one idea: each object produces its data lazily,
returning a fresh iterator on every call.

* **Shapes** (2D outlines) provide `edges()` and `vertices()`, yielding `Edge`
  and `ShapeVertex` values.
* **Paths** (3D curves) provide `edges()` and `vertices()`, yielding `Edge` and
  `PathVertex` values.
* **Meshes** provide `triangles()` and `vertices()`, yielding `Triangle` and
  `MeshVertex` values.

Edges and triangles hold zero-based indices into the vertex sequence. The
record types live in `meshgen.primitives`, together with the `Axis` enum.
Vectors are plain tuples of floats.

## Building blocks

* Shapes (`meshgen.shapes`): `CircleShape`, `LineShape`, `BezierShape`,
  `GridShape`.
* Shape operations (`meshgen.shape_ops`): `merge_shape`, `repeat_shape`,
  `transform_shape`, `flip_shape`, `axis_swap_shape`, `rotate_shape`, and the
  classes behind them (`MergeShape`, `RepeatShape`, ...).
* Paths (`meshgen.paths`): `ParametricPath`, `LinePath`, `HelixPath`, `KnotPath`.
* Path operations (`meshgen.path_ops`): `flip_path`, `scale_path`,
  `translate_path`, `repeat_path`, `shape_to_path`.
* Meshes: `ParametricMesh` (`meshgen.parametric_mesh`), `ConvexPolygonMesh` and
  `DodecahedronMesh` (`meshgen.polygon`).
* Mesh operations (`meshgen.mesh_ops`): `transform_mesh`, `flip_mesh`,
  `axis_swap_mesh`, `merge_mesh`, `scale_mesh`, `spherify_mesh`,
  `uv_swap_mesh`; and `SubdivideMesh(mesh, iterations)` in `meshgen.subdivide`.
* Empty geometry (`meshgen.empty`): `EmptyShape`, `EmptyPath`, `EmptyMesh`.
* Uniform wrappers (`meshgen.anygeom`): `AnyShape`, `AnyPath`, `AnyMesh`.
* Vector helpers (`meshgen.vecmath`): `dot`, `cross`, `normalize`, `mix`,
  `bezier`, `bezier_derivative`, `rotate3`, `translate`, `mat_mul`, `ortho`,
  `project` and more.

The `transform_*` operations call your function on a copy of each vertex; the
function edits that copy in place.

## Example

```python
from meshgen.shapes import CircleShape
from meshgen.polygon import ConvexPolygonMesh, DodecahedronMesh
from meshgen.mesh_ops import merge_mesh, scale_mesh
from meshgen.objwriter import ObjWriter

circle = CircleShape(radius=2.0, segments=16)
points = [v.position for v in circle.vertices()]

hexagon = ConvexPolygonMesh.regular(1.0, 6, 2, 2)
solid = scale_mesh(DodecahedronMesh(), (0.5, 0.5, 0.5))

writer = ObjWriter()
writer.write_mesh(merge_mesh(hexagon, solid))
with open("model.obj", "w") as fh:
    fh.write(writer.text())
```

`ObjWriter` (`meshgen.objwriter`) produces Wavefront OBJ text with positions,
normals and texture coordinates; several meshes can be written into one text,
with indices continuing across them.

## What it does not do

* There is no image output: OBJ text is the only file format written.
* Ready-made solids are limited to polygon disks and the dodecahedron. Other
  solids (spheres, boxes, cylinders, tori) are not included; build them with
  `ParametricMesh` and the mesh operations.
* There is no command-line tool; the package is a library only.

## Running the tests

```
pip install "meshgen[test]"
pytest
```