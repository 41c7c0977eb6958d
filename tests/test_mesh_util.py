import numpy as np
import pytest

from hellkit import mesh_util


def _triangles(mesh):
    idx = mesh.indices
    for i in range(0, len(idx), 3):
        yield tuple(np.asarray(mesh.vertices[j].position, dtype=float) for j in idx[i:i + 3])


def _winding_normal(a, b, c):
    return np.cross(b - a, c - a)


@pytest.mark.parametrize("out_facing", [True, False])
def test_cube_counts_and_extent(out_facing):
    mesh = mesh_util.create_cube(2.0, 1.0, out_facing)
    assert len(mesh.vertices) == 24
    assert mesh.index_count() == 36
    assert max(mesh.indices) < len(mesh.vertices)
    positions = np.array([v.position for v in mesh.vertices])
    assert np.allclose(np.abs(positions), 1.0)
    assert mesh.name == "Cube"


@pytest.mark.parametrize("out_facing,sign", [(True, 1), (False, -1)])
def test_cube_winding_points_out_or_in(out_facing, sign):
    mesh = mesh_util.create_cube(1.0, 1.0, out_facing)
    for a, b, c in _triangles(mesh):
        centroid = (a + b + c) / 3.0
        assert sign * float(np.dot(_winding_normal(a, b, c), centroid)) > 0


@pytest.mark.parametrize("out_facing,sign", [(True, 1), (False, -1)])
def test_cuboid_winding_points_out_or_in(out_facing, sign):
    mesh = mesh_util.create_cuboid(2.0, 3.0, 4.0, 1.0, out_facing)
    for a, b, c in _triangles(mesh):
        centroid = (a + b + c) / 3.0
        assert sign * float(np.dot(_winding_normal(a, b, c), centroid)) > 0


def test_cuboid_extent_and_uv_range():
    mesh = mesh_util.create_cuboid(2.0, 3.0, 4.0, 0.5)
    positions = np.array([v.position for v in mesh.vertices])
    assert np.allclose(positions.max(axis=0), [1.0, 1.5, 2.0])
    assert np.allclose(positions.min(axis=0), [-1.0, -1.5, -2.0])
    uvs = np.array([v.uv for v in mesh.vertices])
    assert uvs.min() >= 0.0
    assert uvs.max() == pytest.approx(2.0)
    assert mesh.name == "Cuboid"


def test_in_and_out_cube_share_triangles_with_reversed_winding():
    out_mesh = mesh_util.create_cube(1.0)
    in_mesh = mesh_util.create_cube(1.0, 1.0, False)
    out_sets = sorted(tuple(sorted(out_mesh.indices[i:i + 3])) for i in range(0, 36, 3))
    in_sets = sorted(tuple(sorted(in_mesh.indices[i:i + 3])) for i in range(0, 36, 3))
    assert out_sets == in_sets


@pytest.mark.parametrize(
    "builder",
    [
        mesh_util.create_cube_face_z_front,
        mesh_util.create_cube_face_z_back,
        mesh_util.create_cube_face_x_front,
        mesh_util.create_cube_face_x_back,
        mesh_util.create_cube_face_y_top,
        mesh_util.create_cube_face_y_bottom,
    ],
)
def test_cube_face_winding_matches_normal(builder):
    mesh = builder(2.0, 1.0)
    assert len(mesh.vertices) == 4
    assert mesh.index_count() == 6
    declared = np.asarray(mesh.vertices[0].normal, dtype=float)
    for a, b, c in _triangles(mesh):
        n = _winding_normal(a, b, c)
        assert np.allclose(n / np.linalg.norm(n), declared)
    positions = np.array([v.position for v in mesh.vertices])
    assert np.allclose(positions @ declared, 1.0)


def test_cube_face_names():
    assert mesh_util.create_cube_face_y_top(1.0).name == "VoxelYFaceUp"
    assert mesh_util.create_cube_face_y_bottom(1.0).name == "VoxelYFaceDown"


def test_up_facing_plane():
    mesh = mesh_util.create_up_facing_plane(0.0, 2.0, 0.0, 3.0, 1.5)
    assert mesh.name == "UpPlane"
    assert all(float(v.position[1]) == 1.5 for v in mesh.vertices)
    assert np.allclose(mesh.vertices[0].uv, [2.0, 3.0])
    for a, b, c in _triangles(mesh):
        assert _winding_normal(a, b, c)[1] > 0


def test_down_facing_plane():
    mesh = mesh_util.create_down_facing_plane(0.0, 2.0, 0.0, 3.0, -1.0)
    assert mesh.name == "DownPlane"
    assert np.allclose(mesh.vertices[3].uv, [0.0, 3.0])
    for a, b, c in _triangles(mesh):
        assert _winding_normal(a, b, c)[1] < 0