import numpy as np

from hellkit.common import Vertex
from hellkit.mesh import Mesh


def _vertex(x, y, z, u=0.0):
    return Vertex(position=np.array([x, y, z], dtype=float), uv=np.array([u, 0.0]))


def _quad():
    vertices = [_vertex(0, 0, 0), _vertex(1, 0, 0), _vertex(1, 1, 0), _vertex(0, 1, 0)]
    return Mesh(vertices, [0, 1, 2, 0, 2, 3], "Quad")


def test_index_count():
    mesh = _quad()
    assert mesh.index_count() == len(mesh.indices)


def test_triangle_mesh_data_shapes():
    mesh = _quad()
    points, triangles = mesh.triangle_mesh_data()
    assert points.shape == (4, 3)
    assert triangles.shape == (2, 3)
    assert triangles.ravel().tolist() == mesh.indices
    assert np.array_equal(points[2], mesh.vertices[2].position)


def test_triangle_mesh_data_without_indices():
    mesh = Mesh([_vertex(0, 0, 0)], [], "Empty")
    assert mesh.triangle_mesh_data() is None


def test_triangle_mesh_data_drops_partial_triangle():
    mesh = _quad()
    mesh.indices.append(1)
    _, triangles = mesh.triangle_mesh_data()
    assert triangles.shape == (2, 3)


def test_convex_hull_points_removes_duplicates_in_order():
    vertices = [
        _vertex(0, 0, 0),
        _vertex(1, 0, 0, u=0.5),
        _vertex(0, 0, 0, u=1.0),
        _vertex(1, 0, 0),
        _vertex(0, 1, 0),
    ]
    mesh = Mesh(vertices, [0, 1, 2], "Dupes")
    hull = mesh.convex_hull_points()
    assert hull.shape == (3, 3)
    assert np.array_equal(hull[0], vertices[0].position)
    assert np.array_equal(hull[1], vertices[1].position)
    assert np.array_equal(hull[2], vertices[4].position)


def test_convex_hull_points_empty():
    assert Mesh().convex_hull_points() is None


def test_mesh_defaults():
    mesh = Mesh()
    assert mesh.index_count() == 0
    assert mesh.vertices == []