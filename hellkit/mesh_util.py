"""Builders for simple procedural meshes: planes, cubes, cuboids and cube faces."""

from __future__ import annotations

import numpy as np

from hellkit.common import Vertex
from hellkit.mesh import Mesh

_FORWARD = (0.0, 0.0, 1.0)

_OUT_FACING_INDICES = (
    3, 1, 0, 3, 2, 1, 4, 5, 7, 5, 6, 7, 8, 9, 11, 9, 10, 11,
    15, 13, 12, 15, 14, 13, 19, 17, 16, 19, 18, 17, 20, 21, 23, 21, 22, 23,
)
_IN_FACING_INDICES = (
    0, 1, 3, 1, 2, 3, 7, 5, 4, 7, 6, 5, 11, 9, 8, 11, 10, 9,
    12, 13, 15, 13, 14, 15, 16, 17, 19, 17, 18, 19, 23, 21, 20, 23, 22, 21,
)


def _mesh(corners, indices, name):
    vertices = [
        Vertex(
            position=np.array(position, dtype=float),
            normal=np.array(normal, dtype=float),
            uv=np.array(uv, dtype=float),
        )
        for position, normal, uv in corners
    ]
    return Mesh(vertices, list(indices), name)


def create_up_facing_plane(x_min, x_max, z_min, z_max, height):
    """Horizontal quad at ``height`` whose front face points up."""
    width = x_max - x_min
    depth = z_max - z_min
    corners = [
        ((x_min, height, z_max), _FORWARD, (width, depth)),
        ((x_min, height, z_min), _FORWARD, (width, 0.0)),
        ((x_max, height, z_min), _FORWARD, (0.0, 0.0)),
        ((x_max, height, z_max), _FORWARD, (0.0, depth)),
    ]
    return _mesh(corners, (3, 1, 0, 3, 2, 1), "UpPlane")


def create_down_facing_plane(x_min, x_max, z_min, z_max, height):
    """Horizontal quad at ``height`` whose front face points down."""
    width = x_max - x_min
    depth = z_max - z_min
    corners = [
        ((x_min, height, z_max), _FORWARD, (width, depth)),
        ((x_min, height, z_min), _FORWARD, (width, 0.0)),
        ((x_max, height, z_min), _FORWARD, (0.0, 0.0)),
        ((x_max, height, z_max), _FORWARD, (0.0, depth)),
    ]
    return _mesh(corners, (0, 1, 3, 1, 2, 3), "DownPlane")


def create_cube(size, texture_scaling=1.0, out_facing=True):
    """Axis-aligned cube centred on the origin, 24 vertices, facing out or in."""
    d = size * 0.5
    s = texture_scaling
    n = _FORWARD
    corners = [
        # top
        ((-d, d, d), n, (0, s)),
        ((-d, d, -d), n, (0, 0)),
        ((d, d, -d), n, (s, 0)),
        ((d, d, d), n, (s, s)),
        # bottom
        ((-d, -d, d), n, (s, s)),
        ((-d, -d, -d), n, (s, 0)),
        ((d, -d, -d), n, (0, 0)),
        ((d, -d, d), n, (0, s)),
        # z front
        ((-d, d, d), n, (0, 0)),
        ((-d, -d, d), n, (0, s)),
        ((d, -d, d), n, (s, s)),
        ((d, d, d), n, (s, 0)),
        # z back
        ((-d, d, -d), n, (s, 0)),
        ((-d, -d, -d), n, (s, s)),
        ((d, -d, -d), n, (0, s)),
        ((d, d, -d), n, (0, 0)),
        # x front
        ((d, d, -d), n, (s, 0)),
        ((d, -d, -d), n, (s, s)),
        ((d, -d, d), n, (0, s)),
        ((d, d, d), n, (0, 0)),
        # x back
        ((-d, d, -d), n, (0, 0)),
        ((-d, -d, -d), n, (0, s)),
        ((-d, -d, d), n, (s, s)),
        ((-d, d, d), n, (s, 0)),
    ]
    indices = _OUT_FACING_INDICES if out_facing else _IN_FACING_INDICES
    return _mesh(corners, indices, "Cube")


def create_cuboid(width, height, depth, texture_scaling=1.0, out_facing=True):
    """Axis-aligned box centred on the origin with UVs scaled by its dimensions."""
    w = width * 0.5
    h = height * 0.5
    d = depth * 0.5
    ws = width * texture_scaling
    hs = height * texture_scaling
    ds = depth * texture_scaling
    n = _FORWARD
    corners = [
        # top
        ((-w, h, d), n, (0, ds)),
        ((-w, h, -d), n, (0, 0)),
        ((w, h, -d), n, (ws, 0)),
        ((w, h, d), n, (ws, ds)),
        # bottom
        ((-w, -h, d), n, (ws, ds)),
        ((-w, -h, -d), n, (ws, 0)),
        ((w, -h, -d), n, (0, 0)),
        ((w, -h, d), n, (0, ds)),
        # front (+z)
        ((-w, h, d), n, (0, 0)),
        ((-w, -h, d), n, (0, hs)),
        ((w, -h, d), n, (ws, hs)),
        ((w, h, d), n, (ws, 0)),
        # back (-z)
        ((-w, h, -d), n, (ws, 0)),
        ((-w, -h, -d), n, (ws, hs)),
        ((w, -h, -d), n, (0, hs)),
        ((w, h, -d), n, (0, 0)),
        # right (+x)
        ((w, h, -d), n, (ds, 0)),
        ((w, -h, -d), n, (ds, hs)),
        ((w, -h, d), n, (0, hs)),
        ((w, h, d), n, (0, 0)),
        # left (-x)
        ((-w, h, -d), n, (0, 0)),
        ((-w, -h, -d), n, (0, hs)),
        ((-w, -h, d), n, (ds, hs)),
        ((-w, h, d), n, (ds, 0)),
    ]
    indices = _OUT_FACING_INDICES if out_facing else _IN_FACING_INDICES
    return _mesh(corners, indices, "Cuboid")


def create_cube_face_z_front(size, texture_scaling=1.0):
    """The +Z face of a cube of the given size."""
    d = size * 0.5
    s = texture_scaling
    n = (0.0, 0.0, 1.0)
    corners = [
        ((-d, d, d), n, (0, 0)),
        ((-d, -d, d), n, (0, s)),
        ((d, -d, d), n, (s, s)),
        ((d, d, d), n, (s, 0)),
    ]
    return _mesh(corners, (0, 1, 3, 1, 2, 3), "VoxelZFaceFront")


def create_cube_face_z_back(size, texture_scaling=1.0):
    """The -Z face of a cube of the given size."""
    d = size * 0.5
    s = texture_scaling
    n = (0.0, 0.0, -1.0)
    corners = [
        ((-d, d, -d), n, (s, 0)),
        ((-d, -d, -d), n, (s, s)),
        ((d, -d, -d), n, (0, s)),
        ((d, d, -d), n, (0, 0)),
    ]
    return _mesh(corners, (3, 1, 0, 3, 2, 1), "VoxelZFaceBack")


def create_cube_face_x_front(size, texture_scaling=1.0):
    """The +X face of a cube of the given size."""
    d = size * 0.5
    s = texture_scaling
    n = (1.0, 0.0, 0.0)
    corners = [
        ((d, d, -d), n, (s, 0)),
        ((d, -d, -d), n, (s, s)),
        ((d, -d, d), n, (0, s)),
        ((d, d, d), n, (0, 0)),
    ]
    return _mesh(corners, (3, 1, 0, 3, 2, 1), "VoxelXFaceFront")


def create_cube_face_x_back(size, texture_scaling=1.0):
    """The -X face of a cube of the given size."""
    d = size * 0.5
    s = texture_scaling
    n = (-1.0, 0.0, 0.0)
    corners = [
        ((-d, d, -d), n, (0, 0)),
        ((-d, -d, -d), n, (0, s)),
        ((-d, -d, d), n, (s, s)),
        ((-d, d, d), n, (s, 0)),
    ]
    return _mesh(corners, (0, 1, 3, 1, 2, 3), "VoxelXFaceBack")


def create_cube_face_y_top(size, texture_scaling=1.0):
    """The +Y face of a cube of the given size."""
    d = size * 0.5
    s = texture_scaling
    n = (0.0, 1.0, 0.0)
    corners = [
        ((-d, d, d), n, (0, s)),
        ((-d, d, -d), n, (0, 0)),
        ((d, d, -d), n, (s, 0)),
        ((d, d, d), n, (s, s)),
    ]
    return _mesh(corners, (3, 1, 0, 3, 2, 1), "VoxelYFaceUp")


def create_cube_face_y_bottom(size, texture_scaling=1.0):
    """The -Y face of a cube of the given size."""
    d = size * 0.5
    s = texture_scaling
    n = (0.0, -1.0, 0.0)
    corners = [
        ((-d, -d, d), n, (s, s)),
        ((-d, -d, -d), n, (s, 0)),
        ((d, -d, -d), n, (0, 0)),
        ((d, -d, d), n, (0, s)),
    ]
    return _mesh(corners, (0, 1, 3, 1, 2, 3), "VoxelYFaceDown")