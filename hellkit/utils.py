"""Small numeric, string and file helpers."""

from __future__ import annotations

import os
import random

import numpy as np

from hellkit.common import SMALL_NUMBER, FileInfo

_MATERIAL_SUFFIXES = ("ALB", "RMA", "NRM")


def random_float(min_value, max_value):
    """Uniformly distributed float between the two bounds, inclusive."""
    return random.uniform(min_value, max_value)


def random_int(min_value, max_value):
    """Uniformly distributed integer between the two bounds, inclusive."""
    return random.randint(min_value, max_value)


def read_text_from_file(path):
    """Return the file's lines, each ending in a newline; empty if it cannot be read."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError:
        return ""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return "".join(f"{line}\n" for line in lines)


def vec3_to_string(v):
    """Format a 3-vector as ``(x, y, z)`` with two decimals."""
    x, y, z = (float(c) for c in v)
    return f"({x:.2f}, {y:.2f}, {z:.2f})"


def mat4_to_string(m):
    """Format a 4x4 matrix row by row, two decimals, one row per line."""
    rows = np.asarray(m, dtype=float)
    if rows.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {rows.shape}")
    return "\n".join(", ".join(f"{value:.2f}" for value in row) for row in rows)


def file_exists(path):
    """True if the path names an existing file or directory."""
    return os.path.exists(path)


def f_interp_to(current, target, delta_time, interp_speed):
    """Move ``current`` towards ``target`` at a rate set by speed and time step."""
    if interp_speed <= 0.0:
        return target
    dist = target - current
    if dist * dist < SMALL_NUMBER:
        return target
    return current + dist * min(max(delta_time * interp_speed, 0.0), 1.0)


def map_range(value, in_min, in_max, out_min, out_max):
    """Linearly map a value from one range onto another."""
    x = (value - in_min) / (in_max - in_min)
    return out_min + (out_max - out_min) * x


def _material_type(stem):
    if len(stem) > 5:
        query = stem[-3:]
        if query in _MATERIAL_SUFFIXES:
            return query
    return "NONE"


def get_file_info(filepath):
    """Split a slash-separated path with a three-letter extension into its parts."""
    if len(filepath) < 3:
        raise ValueError(f"path too short to hold an extension: {filepath!r}")
    slash = filepath.rfind("/") + 1
    filename = filepath[slash:]
    if len(filename) >= 4:
        filename = filename[: len(filename) - 4]
    return FileInfo(
        fullpath=filepath,
        directory=filepath[:slash],
        filename=filename,
        filetype=filepath[len(filepath) - 3:],
        material_type=_material_type(filename),
    )


def file_info_from_path(path):
    """Describe a path (string, path object or directory entry) as a FileInfo."""
    full = os.fspath(path)
    base = os.path.basename(full)
    stem, extension = os.path.splitext(base)
    return FileInfo(
        fullpath=full,
        directory=os.path.dirname(full),
        filename=stem,
        filetype=extension[1:],
        material_type=_material_type(stem),
    )