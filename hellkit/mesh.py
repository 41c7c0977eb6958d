"""Indexed triangle meshes and the data the physics layer builds from them."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from hellkit.common import Vertex


@dataclass
class Mesh:
    """A named list of vertices and triangle indices."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    name: str = ""

    def index_count(self):
        """Number of indices in the mesh."""
        return len(self.indices)

    def triangle_mesh_data(self):
        """Vertex positions (N x 3) and triangles (M x 3), or None without indices."""
        if not self.indices:
            return None
        points = np.array([np.asarray(v.position, dtype=float) for v in self.vertices]).reshape(-1, 3)
        count = len(self.indices) // 3
        triangles = np.array(self.indices[: count * 3], dtype=np.int64).reshape(count, 3)
        return points, triangles

    def convex_hull_points(self):
        """Distinct vertex positions in first-seen order, or None if there are none."""
        seen = {}
        for vertex in self.vertices:
            key = tuple(float(c) for c in vertex.position)
            seen.setdefault(key, None)
        if not seen:
            return None
        return np.array(list(seen), dtype=float)