import math

import numpy as np
import pytest

from hellkit.common import (
    CollisionGroup,
    Key,
    Line,
    Settings,
    Transform,
    Vec3,
    Vec3i,
    Vertex,
    to_degrees,
    to_radians,
)


def test_to_radians_of_half_turn_is_pi():
    assert to_radians(180.0) == pytest.approx(math.pi)


@pytest.mark.parametrize("degrees", [0.0, 37.5, -90.0, 720.0])
def test_degree_radian_round_trip(degrees):
    assert to_degrees(to_radians(degrees)) == pytest.approx(degrees)


def test_default_transform_is_identity():
    assert np.allclose(Transform().to_mat4(), np.identity(4))


def test_transform_translation_lands_in_last_column():
    position = np.array([3.0, -2.0, 7.5])
    matrix = Transform(position=position).to_mat4()
    assert np.allclose(matrix[:3, 3], position)
    assert np.allclose(matrix[:3, :3], np.identity(3))


def test_transform_scale_on_diagonal():
    scale = np.array([2.0, 3.0, 4.0])
    matrix = Transform(scale=scale).to_mat4()
    assert np.allclose(np.diag(matrix)[:3], scale)


def test_transform_rotation_is_orthonormal():
    matrix = Transform(rotation=np.array([0.3, -1.1, 2.0])).to_mat4()
    rotation = matrix[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))
    assert np.linalg.det(rotation) == pytest.approx(1.0)


def test_transform_yaw_quarter_turn_moves_x_to_negative_z():
    matrix = Transform(rotation=np.array([0.0, math.pi / 2, 0.0])).to_mat4()
    moved = matrix @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(moved, [0.0, 0.0, -1.0, 1.0])


def test_vertex_equality_ignores_tangent_and_bitangent():
    a = Vertex(position=np.array([1.0, 2.0, 3.0]), tangent=np.array([1.0, 0.0, 0.0]))
    b = Vertex(position=np.array([1.0, 2.0, 3.0]), bitangent=np.array([0.0, 1.0, 0.0]))
    assert a == b
    assert hash(a) == hash(b)


def test_vertex_inequality_on_uv():
    a = Vertex(uv=np.array([0.0, 1.0]))
    b = Vertex(uv=np.array([1.0, 0.0]))
    assert not a == b


def test_vertices_deduplicate_in_dict():
    vertices = [
        Vertex(position=np.array([0.0, 0.0, 0.0])),
        Vertex(position=np.array([1.0, 0.0, 0.0])),
        Vertex(position=np.array([0.0, 0.0, 0.0])),
    ]
    unique = {}
    for vertex in vertices:
        unique.setdefault(vertex, len(unique))
    assert len(unique) == 2
    assert unique[vertices[2]] == 0


def test_vertex_defaults_are_not_shared():
    first = Vertex()
    second = Vertex()
    first.position[0] = 5.0
    assert second.position[0] == 0.0


def test_line_sets_both_points():
    line = Line((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (1.0, 0.0, 0.0))
    assert np.allclose(line.p1.pos, [1.0, 2.0, 3.0])
    assert np.allclose(line.p2.pos, [4.0, 5.0, 6.0])
    assert np.allclose(line.p1.color, line.p2.color)
    assert np.allclose(line.p2.color, [1.0, 0.0, 0.0])


def test_vec3_add_and_sub_round_trip():
    a = Vec3(1.5, 2.5, -3.0)
    b = Vec3(0.5, -1.0, 4.0)
    result = (a + b) - b
    assert (result.x, result.y, result.z) == (a.x, a.y, a.z)


def test_vec3_equality_does_not_compare_x():
    assert Vec3(1.0, 2.0, 3.0) == Vec3(9.0, 2.0, 3.0)
    assert Vec3(1.0, 2.0, 3.0) != Vec3(1.0, 2.0, 4.0)


def test_vec3i_arithmetic_and_str():
    total = Vec3i(1, 2, 3) + Vec3i(4, 5, 6)
    assert (total.x, total.y, total.z) == (5, 7, 9)
    difference = total - Vec3i(4, 5, 6)
    assert str(difference) == "(1, 2, 3)"


def test_vec3i_equality_does_not_compare_x():
    assert Vec3i(0, 1, 2) == Vec3i(7, 1, 2)
    assert Vec3i(0, 1, 2) != Vec3i(0, 3, 2)


def test_collision_groups_combine_as_flags():
    mask = CollisionGroup(6)
    assert mask == CollisionGroup.PLAYER | CollisionGroup.ENVIROMENT_OBSTACLE
    assert CollisionGroup.PLAYER in mask
    assert CollisionGroup.BULLET_CASING not in mask


def test_key_lookup_from_character_code():
    assert Key(ord("A")) is Key.A
    assert Key.LAST is Key.MENU


def test_settings_override_keeps_other_defaults():
    settings = Settings(player_walk_speed=1.0)
    assert settings.player_walk_speed == 1.0
    assert settings == Settings(player_walk_speed=1.0)
    assert settings != Settings()