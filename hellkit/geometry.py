"""Vector, matrix, ray and segment helpers used by the renderer and editor."""

from __future__ import annotations

import math

import numpy as np

from hellkit.common import IntersectionResult, Transform, to_radians

_FLOAT_EPSILON = 1.1920928955078125e-07


def _v(values):
    return np.asarray(values, dtype=float)


def get_mouse_ray(projection, view, window_width, window_height, mouse_x, mouse_y):
    """Return the normalised world-space direction under the mouse cursor."""
    x = (2.0 * mouse_x) / float(window_width) - 1.0
    y = 1.0 - (2.0 * mouse_y) / float(window_height)
    ray_clip = np.array([x, y, 1.0, 1.0])
    ray_eye = np.linalg.inv(_v(projection)) @ ray_clip
    ray_eye = np.array([ray_eye[0], ray_eye[1], ray_eye[2], 0.0])
    ray_world = (np.linalg.inv(_v(view)) @ ray_eye)[:3]
    return ray_world / np.linalg.norm(ray_world)


def closest_point_on_line(point, start, end):
    """Closest point to ``point`` on the segment start-end, in the XZ plane (y = 0)."""
    p = _v(point)[[0, 2]]
    v = _v(start)[[0, 2]]
    w = _v(end)[[0, 2]]
    l2 = float(np.dot(v - w, v - w))
    if l2 == 0.0:
        return np.zeros(3)
    t = max(0.0, min(1.0, float(np.dot(p - v, w - v)) / l2))
    projection = v + t * (w - v)
    return np.array([projection[0], 0.0, projection[1]])


def distance_squared(a, b):
    """Squared distance between two points."""
    c = _v(a) - _v(b)
    return float(np.dot(c, c))


def translate(matrix, position):
    """Transform a point by a 4x4 matrix."""
    return (_v(matrix) @ np.append(_v(position), 1.0))[:3]


def ray_triangle_intersect(p1, p2, p3, origin, direction):
    """Intersect a ray with a triangle, either winding; the hit must lie ahead of the origin."""
    result = IntersectionResult()
    v0, v1, v2 = _v(p1), _v(p2), _v(p3)
    orig, d = _v(origin), _v(direction)
    e1 = v1 - v0
    e2 = v2 - v0
    p = np.cross(d, e2)
    a = float(np.dot(e1, p))
    s = orig - v0
    if a > _FLOAT_EPSILON:
        bx = float(np.dot(s, p))
        if bx < 0.0 or bx > a:
            return result
        q = np.cross(s, e1)
        by = float(np.dot(d, q))
        if by < 0.0 or bx + by > a:
            return result
    elif a < -_FLOAT_EPSILON:
        bx = float(np.dot(s, p))
        if bx > 0.0 or bx < a:
            return result
        q = np.cross(s, e1)
        by = float(np.dot(d, q))
        if by > 0.0 or bx + by < a:
            return result
    else:
        return result
    f = 1.0 / a
    result.distance = float(np.dot(e2, q)) * f
    result.bary_position = np.array([bx * f, by * f])
    result.found = result.distance >= 0.0
    return result


def normal_from_triangle(p0, p1, p2):
    """Unit normal of a triangle with counter-clockwise winding."""
    a = _v(p0)
    n = np.cross(_v(p1) - a, _v(p2) - a)
    return n / np.linalg.norm(n)


def triangle_min(triangle):
    """Per-axis minimum of a triangle's three corners."""
    return np.minimum(np.minimum(_v(triangle.p1), _v(triangle.p2)), _v(triangle.p3))


def triangle_max(triangle):
    """Per-axis maximum of a triangle's three corners."""
    return np.maximum(np.maximum(_v(triangle.p1), _v(triangle.p2)), _v(triangle.p3))


def any_hit(triangles, origin, direction, min_dist, max_dist):
    """True if the ray hits any triangle between the two distances (exclusive).

    Triangles whose normal points against the ray direction are skipped.
    """
    d = _v(direction)
    for tri in triangles:
        if float(np.dot(d, _v(tri.normal))) < 0.0:
            continue
        hit = ray_triangle_intersect(tri.p1, tri.p2, tri.p3, origin, d)
        if hit.found and min_dist < hit.distance < max_dist:
            return True
    return False


def _same_sign(a, b):
    return a * b >= 0


def line_intersects_2d(begin_a, end_a, begin_b, end_b):
    """Intersection point of two 2D segments, or None if they do not cross."""
    x1, y1 = (float(c) for c in begin_a)
    x2, y2 = (float(c) for c in end_a)
    x3, y3 = (float(c) for c in begin_b)
    x4, y4 = (float(c) for c in end_b)

    a1 = y2 - y1
    b1 = x1 - x2
    c1 = x2 * y1 - x1 * y2
    r3 = a1 * x3 + b1 * y3 + c1
    r4 = a1 * x4 + b1 * y4 + c1
    if r3 != 0 and r4 != 0 and _same_sign(r3, r4):
        return None

    a2 = y4 - y3
    b2 = x3 - x4
    c2 = x4 * y3 - x3 * y4
    r1 = a2 * x1 + b2 * y1 + c2
    r2 = a2 * x2 + b2 * y2 + c2
    if r1 != 0 and r2 != 0 and _same_sign(r1, r2):
        return None

    if a1 * b2 - a2 * b1 == 0:
        return None  # collinear

    a = y2 - y1
    b = x1 - x2
    c = a * x1 + b * y1
    aa = y4 - y3
    bb = x3 - x4
    cc = aa * x3 + bb * y3
    det = a * bb - aa * b
    if det == 0:
        return None
    return np.array([(bb * c - b * cc) / det, (a * cc - aa * c) / det])


def line_intersects_3d(begin_a, end_a, begin_b, end_b):
    """Intersect two segments projected onto XZ; the result takes the y of ``begin_a``."""
    ba, ea, bb, eb = _v(begin_a), _v(end_a), _v(begin_b), _v(end_b)
    hit = line_intersects_2d(ba[[0, 2]], ea[[0, 2]], bb[[0, 2]], eb[[0, 2]])
    if hit is None:
        return None
    return np.array([hit[0], ba[1], hit[1]])


def _sign(p1, p2, p3):
    return (p1[0] - p3[0]) * (p2[1] - p3[1]) - (p2[0] - p3[0]) * (p1[1] - p3[1])


def point_in_2d_triangle(pt, v1, v2, v3):
    """True if the point lies inside or on the edge of the triangle."""
    d1 = _sign(pt, v1, v2)
    d2 = _sign(pt, v2, v3)
    d3 = _sign(pt, v3, v1)
    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)


def y_rotation_between_two_points(a, b):
    """Rotation about Y, in radians, that faces from ``a`` towards ``b``."""
    return -math.atan2(float(b[2]) - float(a[2]), float(b[0]) - float(a[0]))


def get_translation_from_matrix(matrix):
    """Translation component of a 4x4 matrix."""
    return _v(matrix)[:3, 3].copy()


def remove_scale_from_matrix(matrix):
    """Return a copy with the first three entries of the bottom row set to 1."""
    result = _v(matrix).copy()
    result[3, 0:3] = 1.0
    return result


def interpolate_quaternion(start, end, factor):
    """Spherical interpolation of two quaternions, taking the shorter path."""
    q1 = _v(start)
    q2 = _v(end).copy()
    cosom = float(np.dot(q1, q2))
    if cosom < 0.0:
        cosom = -cosom
        q2 = -q2
    if 1.0 - cosom > 0.0001:
        omega = math.acos(cosom)
        sinom = math.sin(omega)
        sclp = math.sin((1.0 - factor) * omega) / sinom
        sclq = math.sin(factor * omega) / sinom
    else:
        sclp = 1.0 - factor
        sclq = factor
    return sclp * q1 + sclq * q2


def scale_matrix(sx, sy, sz):
    """4x4 scale matrix."""
    return np.diag([float(sx), float(sy), float(sz), 1.0])


def rotation_matrix(rx, ry, rz):
    """4x4 rotation from angles in degrees, composed as Z * Y * X."""
    x, y, z = to_radians(rx), to_radians(ry), to_radians(rz)
    cx, sx = math.cos(x), math.sin(x)
    cy, sy = math.cos(y), math.sin(y)
    cz, sz = math.cos(z), math.sin(z)
    mx = np.array([[1, 0, 0, 0], [0, cx, sx, 0], [0, -sx, cx, 0], [0, 0, 0, 1]], dtype=float)
    my = np.array([[cy, 0, sy, 0], [0, 1, 0, 0], [-sy, 0, cy, 0], [0, 0, 0, 1]], dtype=float)
    mz = np.array([[cz, sz, 0, 0], [-sz, cz, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]], dtype=float)
    return mz @ my @ mx


def translation_matrix(x, y, z):
    """4x4 translation matrix."""
    m = np.identity(4)
    m[:3, 3] = (x, y, z)
    return m


def voxel_model_matrix(x, y, z, voxel_size):
    """Model matrix placing a voxel of the given size at grid cell (x, y, z)."""
    transform = Transform()
    transform.scale = np.full(3, float(voxel_size))
    transform.position = np.array([x, y, z], dtype=float) * voxel_size
    return transform.to_mat4()


def matrix_from_rows(rows):
    """Build a 4x4 matrix from 3x3 or 4x4 row-major values."""
    data = _v(rows)
    if data.shape == (4, 4):
        return data.copy()
    if data.shape == (3, 3):
        result = np.identity(4)
        result[:3, :3] = data
        return result
    raise ValueError(f"expected a 3x3 or 4x4 matrix, got shape {data.shape}")