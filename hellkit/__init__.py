"""Math, mesh, OBJ model, HUD number layout and DDS texture helpers for a small 3D game engine."""

__version__ = "0.1.0"