"""Shared engine types, enumerations, key codes and constants."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

import numpy as np

AUDIO_SELECT = "SELECT.wav"

DOOR_VOLUME = 1.0
INTERACT_DISTANCE = 2.5

NEAR_PLANE = 0.005
FAR_PLANE = 50.0

NOOSE_PI = 3.14159265359
NOOSE_HALF_PI = 1.57079632679
HELL_PI = math.pi

DOOR_WIDTH = 0.8
DOOR_HEIGHT = 2.0
DOOR_EDITOR_DEPTH = 0.05

WINDOW_WIDTH = 0.85
WINDOW_HEIGHT = 2.1

BLACK = (0.0, 0.0, 0.0)
WHITE = (1.0, 1.0, 1.0)
RED = (1.0, 0.0, 0.0)
GREEN = (0.0, 1.0, 0.0)
BLUE = (0.0, 0.0, 1.0)
YELLOW = (1.0, 1.0, 0.0)
PURPLE = (1.0, 0.0, 1.0)
GREY = (0.25, 0.25, 0.25)
LIGHT_BLUE = (0.0, 1.0, 1.0)
GRID_COLOR = tuple(channel * 0.5 for channel in (0.509, 0.333, 0.490))

SMALL_NUMBER = 9.99999993922529e-9
KINDA_SMALL_NUMBER = 0.00001
MIN_RAY_DIST = 0.01

NRM_X_FORWARD = (1.0, 0.0, 0.0)
NRM_X_BACK = (-1.0, 0.0, 0.0)
NRM_Y_UP = (0.0, 1.0, 0.0)
NRM_Y_DOWN = (0.0, -1.0, 0.0)
NRM_Z_FORWARD = (0.0, 0.0, 1.0)
NRM_Z_BACK = (0.0, 0.0, -1.0)

POSITION_LOCATION = 0
NORMAL_LOCATION = 1
TEX_COORD_LOCATION = 2
TANGENT_LOCATION = 3
BITANGENT_LOCATION = 4
BONE_ID_LOCATION = 5
BONE_WEIGHT_LOCATION = 6
SMOOTH_NORMAL_LOCATION = 7


def to_radians(x):
    """Convert degrees to radians."""
    return x * HELL_PI / 180.0


def to_degrees(x):
    """Convert radians to degrees."""
    return x * 180.0 / HELL_PI


class EngineMode(enum.IntEnum):
    GAME = 0
    FLOORPLAN = 1
    EDITOR = 2


class ViewportMode(enum.IntEnum):
    FULLSCREEN = 0
    SPLITSCREEN = 1


class Weapon(enum.IntEnum):
    KNIFE = 0
    GLOCK = 1
    SHOTGUN = 2
    AKS74U = 3
    MP7 = 4


class WeaponAction(enum.IntEnum):
    IDLE = 0
    FIRE = 1
    RELOAD = 2
    RELOAD_FROM_EMPTY = 3
    DRAW_BEGIN = 4
    DRAWING = 5
    SPAWNING = 6


class VertexBufferType(enum.IntEnum):
    INDEX_BUFFER = 0
    POS_VB = 1
    NORMAL_VB = 2
    TEXCOORD_VB = 3
    TANGENT_VB = 4
    BITANGENT_VB = 5
    BONE_VB = 6
    SMOOTH_NORMAL_VB = 7


class RaycastGroup(enum.IntEnum):
    RAYCAST_DISABLED = 0
    RAYCAST_ENABLED = 1


class PhysicsObjectType(enum.IntEnum):
    UNDEFINED = 0
    GAME_OBJECT = 1
    GLASS = 2
    DOOR = 3
    SCENE_MESH = 4


class CollisionGroup(enum.IntFlag):
    NO_COLLISION = 0
    BULLET_CASING = 1
    PLAYER = 2
    ENVIROMENT_OBSTACLE = 4
    GENERIC_BOUNCEABLE = 8
    ITEM_PICK_UP = 16


class Key(enum.IntEnum):
    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    DIGIT_0 = 48
    DIGIT_1 = 49
    DIGIT_2 = 50
    DIGIT_3 = 51
    DIGIT_4 = 52
    DIGIT_5 = 53
    DIGIT_6 = 54
    DIGIT_7 = 55
    DIGIT_8 = 56
    DIGIT_9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    WORLD_1 = 161
    WORLD_2 = 162
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314
    KP_0 = 320
    KP_1 = 321
    KP_2 = 322
    KP_3 = 323
    KP_4 = 324
    KP_5 = 325
    KP_6 = 326
    KP_7 = 327
    KP_8 = 328
    KP_9 = 329
    KP_DECIMAL = 330
    KP_DIVIDE = 331
    KP_MULTIPLY = 332
    KP_SUBTRACT = 333
    KP_ADD = 334
    KP_ENTER = 335
    KP_EQUAL = 336
    LEFT_SHIFT = 16
    LEFT_CONTROL = 17
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348
    LAST = 348
    LEFT_SHIFT_GLFW = 340
    LEFT_CONTROL_GLFW = 341


class MouseButton(enum.IntEnum):
    LEFT = 350
    RIGHT = 351


class WindowsKey(enum.IntEnum):
    ENTER = 13
    SHIFT = 16
    CONTROL = 17
    ALT = 18
    TAB = 9
    CAPSLOCK = 20
    ESCAPE = 27


class PS4Button(enum.IntEnum):
    CROSS = 1
    CIRCLE = 2
    SQUARE = 0
    TRIANGLE = 3
    L1 = 4
    L2 = 6
    L3 = 10
    R1 = 5
    R2 = 7
    R3 = 11
    SHARE = 6
    OPTIONS = 9
    PS_BUTTON = 12
    DPAD_UP = 14
    DPAD_RIGHT = 15
    DPAD_DOWN = 16
    DPAD_LEFT = 17
    TRIGGER_L = 18
    TRIGGER_R = 19


class XboxButton(enum.IntEnum):
    A = 0
    B = 1
    X = 2
    Y = 3
    L1 = 4
    R1 = 5
    WIERD_1 = 6
    WIERD_2 = 7
    L3 = 8
    R3 = 9
    DPAD_UP = 10
    DPAD_RIGHT = 11
    DPAD_DOWN = 12
    DPAD_LEFT = 13
    TRIGGER_L = 14
    TRIGGER_R = 15


@dataclass
class Settings:
    """Tunable gameplay values."""

    player_walk_speed: float = 0.5
    player_crouch_speed: float = 0.1
    item_respawn_time: float = 5.0
    pickup_text_time: float = 2.0


def _vec(*values):
    return np.array(values, dtype=float)


def _vec_field(*values):
    return field(default_factory=lambda: _vec(*values))


def _quaternion_from_euler(angles):
    cx, cy, cz = np.cos(np.asarray(angles, dtype=float) * 0.5)
    sx, sy, sz = np.sin(np.asarray(angles, dtype=float) * 0.5)
    w = cx * cy * cz + sx * sy * sz
    x = sx * cy * cz - cx * sy * sz
    y = cx * sy * cz + sx * cy * sz
    z = cx * cy * sz - sx * sy * cz
    return w, x, y, z


def _rotation_from_quaternion(w, x, y, z):
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ]
    )


@dataclass(eq=False)
class Transform:
    """Position, Euler rotation (radians) and scale of an object."""

    position: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    rotation: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    scale: np.ndarray = _vec_field(1.0, 1.0, 1.0)

    def to_mat4(self):
        """Return the 4x4 model matrix: translation, then rotation, then scale."""
        translation = np.identity(4)
        translation[:3, 3] = self.position
        rotation = np.identity(4)
        rotation[:3, :3] = _rotation_from_quaternion(*_quaternion_from_euler(self.rotation))
        scale = np.diag([*np.asarray(self.scale, dtype=float), 1.0])
        return translation @ rotation @ scale


@dataclass(eq=False)
class Vertex:
    """A mesh vertex; equality and hashing use position, normal and uv only."""

    position: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    normal: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    uv: np.ndarray = _vec_field(0.0, 0.0)
    tangent: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    bitangent: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    weight: np.ndarray = _vec_field(0.0, 0.0, 0.0, 0.0)
    bone_id: np.ndarray = field(default_factory=lambda: np.zeros(4, dtype=int))

    def _key(self):
        return (
            tuple(float(v) for v in self.position),
            tuple(float(v) for v in self.normal),
            tuple(float(v) for v in self.uv),
        )

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())


@dataclass(eq=False)
class Point:
    pos: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    color: np.ndarray = _vec_field(0.0, 0.0, 0.0)


@dataclass(init=False, eq=False)
class Line:
    """A coloured line segment between two points."""

    p1: Point
    p2: Point

    def __init__(self, start=(0.0, 0.0, 0.0), end=(0.0, 0.0, 0.0), color=(0.0, 0.0, 0.0)):
        self.p1 = Point(_vec(*start), _vec(*color))
        self.p2 = Point(_vec(*end), _vec(*color))


@dataclass(eq=False)
class VoxelFace:
    x: int
    y: int
    z: int
    base_color: np.ndarray
    normal: np.ndarray
    accumulated_direct_lighting: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    indirect_lighting: np.ndarray = _vec_field(0.0, 0.0, 0.0)


@dataclass(eq=False)
class Light:
    position: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    strength: float = 1.0
    color: np.ndarray = _vec_field(1.0, 0.7799999713897705, 0.5289999842643738)
    is_dirty: bool = False
    radius: float = 6.0


@dataclass(eq=False)
class Triangle:
    p1: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    p2: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    p3: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    normal: np.ndarray = _vec_field(0.0, 0.0, 0.0)
    color: np.ndarray = _vec_field(0.0, 0.0, 0.0)


@dataclass(eq=False)
class IntersectionResult:
    found: bool = False
    distance: float = 0.0
    dot: float = 0.0
    bary_position: np.ndarray = _vec_field(0.0, 0.0)


@dataclass(eq=False)
class GridProbe:
    color: np.ndarray = _vec_field(*BLACK)
    ignore: bool = True  # blocked by geometry, or out of map range


@dataclass
class Extent2Di:
    width: int
    height: int


@dataclass
class FileInfo:
    fullpath: str = ""
    directory: str = ""
    filename: str = ""
    filetype: str = ""
    material_type: str = ""


@dataclass
class Material:
    name: str = "undefined"
    basecolor: int = 0
    normal: int = 0
    rma: int = 0


@dataclass(frozen=True, eq=False)
class Vec3:
    """A plain float vector; equality compares only y and z, as the engine does."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.y, self.z))


@dataclass(frozen=True, eq=False)
class Vec3i:
    """A plain integer vector; equality compares only y and z, as the engine does."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other):
        return Vec3i(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vec3i(self.x - other.x, self.y - other.y, self.z - other.z)

    def __eq__(self, other):
        if not isinstance(other, Vec3i):
            return NotImplemented
        return self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.y, self.z))

    def __str__(self):
        return f"({self.x}, {self.y}, {self.z})"