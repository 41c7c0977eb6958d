"""Models loaded from Wavefront OBJ text: meshes with tangents and a bounding box."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from hellkit.common import Triangle, Vertex
from hellkit.mesh import Mesh


class ObjParseError(ValueError):
    """Raised when OBJ text cannot be parsed."""


@dataclass(eq=False)
class BoundingBox:
    size: np.ndarray = field(default_factory=lambda: np.zeros(3))
    offset_from_model_origin: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass(eq=False)
class Model:
    """A named collection of meshes loaded from one file."""

    name: str = ""
    filename: str = ""
    meshes: list[Mesh] = field(default_factory=list)
    triangles: list[Triangle] = field(default_factory=list)
    mesh_names: list[str] = field(default_factory=list)
    bounding_box: BoundingBox = field(default_factory=BoundingBox)

    def triangle_mesh_data(self):
        """All meshes merged into points (N x 3) and triangles (M x 3), or None."""
        points = []
        indices = []
        base = 0
        for mesh in self.meshes:
            points.extend(np.asarray(v.position, dtype=float) for v in mesh.vertices)
            indices.extend(index + base for index in mesh.indices)
            base = len(points)
        if not indices:
            return None
        count = len(indices) // 3
        return (
            np.array(points, dtype=float).reshape(-1, 3),
            np.array(indices[: count * 3], dtype=np.int64).reshape(count, 3),
        )


def _floats(args, count, keyword):
    if len(args) < 1:
        raise ValueError(f"'{keyword}' needs at least one value")
    values = [float(a) for a in args[:count]]
    values.extend([0.0] * (count - len(values)))
    return values


def _resolve(token, count, kind):
    value = int(token)
    if value > 0:
        index = value - 1
    elif value < 0:
        index = count + value
    else:
        raise ValueError(f"{kind} index 0 is not valid")
    if not 0 <= index < count:
        raise ValueError(f"{kind} index {value} out of range")
    return index


def _parse_obj(text):
    positions, normals, texcoords = [], [], []
    shapes = []
    name = ""
    faces = []
    for number, raw in enumerate(text.splitlines(), 1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *args = line.split()
        try:
            if keyword == "v":
                if len(args) < 3:
                    raise ValueError("'v' needs three coordinates")
                positions.append(_floats(args, 3, keyword))
            elif keyword == "vn":
                if len(args) < 3:
                    raise ValueError("'vn' needs three coordinates")
                normals.append(_floats(args, 3, keyword))
            elif keyword == "vt":
                texcoords.append(_floats(args, 2, keyword))
            elif keyword == "f":
                if len(args) < 3:
                    raise ValueError("a face needs at least three corners")
                corners = []
                for token in args:
                    parts = token.split("/")
                    vi = _resolve(parts[0], len(positions), "vertex")
                    ti = _resolve(parts[1], len(texcoords), "texcoord") if len(parts) > 1 and parts[1] else -1
                    ni = _resolve(parts[2], len(normals), "normal") if len(parts) > 2 and parts[2] else -1
                    corners.append((vi, ti, ni))
                for second, third in zip(corners[1:-1], corners[2:]):
                    faces.extend((corners[0], second, third))
            elif keyword in ("o", "g"):
                if faces:
                    shapes.append((name, faces))
                    faces = []
                name = " ".join(args)
        except ValueError as exc:
            raise ObjParseError(f"line {number}: {exc}") from exc
    if faces:
        shapes.append((name, faces))
    return positions, normals, texcoords, shapes


def _set_tangents(vertices, indices):
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(0, len(indices) - 2, 3):
            v0, v1, v2 = (vertices[j] for j in indices[i:i + 3])
            delta_pos1 = v1.position - v0.position
            delta_pos2 = v2.position - v0.position
            delta_uv1 = v1.uv - v0.uv
            delta_uv2 = v2.uv - v0.uv
            det = np.float64(delta_uv1[0] * delta_uv2[1] - delta_uv1[1] * delta_uv2[0])
            r = np.float64(1.0) / det
            tangent = (delta_pos1 * delta_uv2[1] - delta_pos2 * delta_uv1[1]) * r
            bitangent = (delta_pos2 * delta_uv1[0] - delta_pos1 * delta_uv2[0]) * r
            for vertex in (v0, v1, v2):
                vertex.tangent = tangent.copy()
                vertex.bitangent = bitangent.copy()


def model_from_obj_text(text, filename):
    """Build a Model from OBJ text; ``filename`` supplies the model's name."""
    base = filename[filename.rfind("/") + 1:]
    model = Model(name=base[: len(base) - 4] if len(base) >= 4 else base, filename=base)

    positions, normals, texcoords, shapes = _parse_obj(text)
    min_pos = np.array([9999.0, 9999.0, 9999.0])
    max_pos = np.zeros(3)

    for shape_name, corners in shapes:
        vertices = []
        indices = []
        unique = {}
        for vi, ti, ni in corners:
            position = np.array(positions[vi], dtype=float)
            normal = np.array(normals[ni], dtype=float) if ni >= 0 else np.zeros(3)
            if texcoords and ti != -1:
                u, v = texcoords[ti]
                uv = np.array([u, 1.0 - v])
            else:
                uv = np.zeros(2)
            min_pos = np.minimum(min_pos, position)
            max_pos = np.maximum(max_pos, position)
            vertex = Vertex(position=position, normal=normal, uv=uv)
            index = unique.get(vertex)
            if index is None:
                index = len(vertices)
                unique[vertex] = index
                vertices.append(vertex)
            indices.append(index)
        _set_tangents(vertices, indices)
        model.meshes.append(Mesh(vertices, indices, shape_name))
        model.mesh_names.append(shape_name)

    model.bounding_box = BoundingBox(
        size=np.abs(max_pos - min_pos),
        offset_from_model_origin=min_pos,
    )
    return model


def load_model(filepath):
    """Load an OBJ file into a Model."""
    with open(filepath, encoding="utf-8") as handle:
        text = handle.read()
    return model_from_obj_text(text, str(filepath))