# hellkit

Engine-side building blocks for a small 3D game that work without a
graphics context. Vectors and matrices are numpy arrays; 4x4 matrices are
row-major with the translation in the last column.

## Modules

- `hellkit.common`: core types (`Vertex`, `Transform`, `Triangle`, `Light`,
  `Point`, `Line`, `VoxelFace`, `FileInfo`, `Material`, `Vec3`, `Vec3i`, ...),
  engine enums (`EngineMode`, `ViewportMode`, `Weapon`, `WeaponAction`,
  `PhysicsObjectType`, `CollisionGroup`, ...), key and controller codes
  (`Key`, `MouseButton`, `WindowsKey`, `PS4Button`, `XboxButton`), gameplay
  `Settings`, shared constants and `to_radians` / `to_degrees`.
  `Vertex` compares and hashes by position, normal and uv only.
- `hellkit.engine_state`: `EngineState` holds the engine mode, viewport mode
  and current player; `next_player()` and `next_viewport_mode()` cycle them
  and print the current player.
- `hellkit.timer`: `Timer(name, results=None)` is a context manager that
  prints how long its block took plus a running average, recorded in a
  `TimerResult` per name (in a shared module dictionary unless you pass your
  own).
- `hellkit.geometry`: `get_mouse_ray`, `ray_triangle_intersect`, `any_hit`,
  `line_intersects_2d` / `line_intersects_3d` (return the point or `None`),
  `point_in_2d_triangle`, `closest_point_on_line`, `interpolate_quaternion`,
  `normal_from_triangle`, `triangle_min` / `triangle_max`, and matrix
  builders `scale_matrix`, `rotation_matrix` (degrees), `translation_matrix`,
  `voxel_model_matrix`, `matrix_from_rows`.
- `hellkit.utils`: `f_interp_to`, `map_range`, `random_float`, `random_int`,
  `vec3_to_string`, `mat4_to_string`, `read_text_from_file`, `file_exists`,
  and file-name inspection with `get_file_info` (slash-separated paths with a
  three-letter extension) and `file_info_from_path`; both detect the
  `ALB` / `RMA` / `NRM` material suffixes.
- `hellkit.mesh`: `Mesh` (vertices, indices, name) with `index_count()`,
  `triangle_mesh_data()` and `convex_hull_points()` (distinct positions).
- `hellkit.mesh_util`: procedural up/down planes, cubes, cuboids and single
  cube faces.
- `hellkit.model`: `load_model(path)` and `model_from_obj_text(text, filename)`
  read Wavefront OBJ text into a `Model`: one `Mesh` per object/group, with
  de-duplicated vertices, flipped v texture coordinate, per-triangle tangents
  and bitangents, and a `BoundingBox`. Malformed input raises `ObjParseError`.
- `hellkit.number_blitter`: `build_vertices(...)` lays out HUD digits from a
  glyph sheet as triangle-strip quads in normalised device coordinates, left
  or right justified (`Justification`); `glyph_metrics` gives each glyph's
  place in the sheet.
- `hellkit.dds_formats`: `Format`, `DxgiFormat`, `D3DFormat`, `make_fourcc`
  and lookups between formats, FourCC codes and names.
- `hellkit.dds_file`: `read_dds` / `write_dds` on binary streams and
  `load_dds` / `save_dds` on paths, for single-level `Texture`s. Errors
  raise `DdsError`.

## Installation

```
pip install .
```

## Examples

Load a model and inspect it:

```python
from hellkit.model import load_model

model = load_model("res/models/Cube.obj")
print(model.name, len(model.meshes), model.bounding_box.size)
```

Build a cube and get its triangle data:

```python
from hellkit.mesh_util import create_cube

cube = create_cube(1.0, 1.0, True)
positions, triangles = cube.triangle_mesh_data()
print(cube.index_count())  # 36
```

Time a block:

```python
from hellkit.timer import Timer

results = {}
with Timer("physics step", results):
    ...
print(results["physics step"].average())
```

Round-trip a DDS texture:

```python
from hellkit.dds_file import load_dds, save_dds

texture = load_dds("albedo.dds")
save_dds("copy.dds", texture)
```

## What it does not do

hellkit prepares data only. It does not open windows, read input devices,
upload anything to a GPU or draw; it runs no physics simulation (mesh data
is returned as arrays for you to hand to one) and plays no audio. DDS
support covers one mip level and does not compress or decompress blocks.
There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```