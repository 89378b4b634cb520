"""Geometry and colouring used when drawing the bodies as spheres."""

from __future__ import annotations

import numpy as np

__all__ = ["velocity_colors", "sphere_model", "COLOR_MAP", "MODEL_PI"]

_MAPPING_R = (106, 153, 204, 255, 248, 241, 211, 134, 57, 24, 12, 0, 4, 9, 25, 66)
_MAPPING_G = (52, 87, 128, 170, 201, 233, 236, 181, 125, 82, 44, 7, 4, 1, 7, 30)
_MAPPING_B = (3, 0, 0, 0, 95, 191, 248, 229, 209, 177, 138, 100, 73, 47, 26, 15)

COLOR_MAP: np.ndarray = (
    np.array([_MAPPING_R, _MAPPING_G, _MAPPING_B], dtype=np.float32).T / np.float32(255.0)
).astype(np.float32)
"""Palette from slow (first row) to fast (last row), as RGB in ``[0, 1]``."""

MODEL_PI = 3.1415926
"""Value of pi used to build the sphere model."""

_COLOR_RANGE = len(_MAPPING_R) - 1


def velocity_colors(vx, vy, vz) -> np.ndarray:
    """Map each body's squared speed onto the palette.

    Squared speeds are scaled between their minimum and maximum and the
    result picks one of the palette entries. Returns an ``(n, 3)`` array
    of single-precision RGB values.
    """
    arrays = [np.asarray(a, dtype=np.float32) for a in (vx, vy, vz)]
    shapes = {a.shape for a in arrays}
    if len(shapes) != 1 or arrays[0].ndim != 1:
        raise ValueError("velocity components must be 1-D arrays of equal length")
    x, y, z = arrays
    with np.errstate(over="ignore", invalid="ignore"):
        norms = x * x + y * y + z * z
    if norms.size == 0:
        return np.empty((0, 3), dtype=np.float32)

    info = np.finfo(np.float32)
    low = np.minimum(norms.min(), info.max)
    high = np.maximum(norms.max(), info.tiny)
    span = np.float32(high - low)

    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        if span > 0 and np.isfinite(span):
            mix = (norms - low) / span
        else:
            mix = np.zeros_like(norms)
        mix = np.where(np.isfinite(mix), mix, np.float32(0.0))
        scaled = np.clip(mix * np.float32(_COLOR_RANGE), 0, _COLOR_RANGE)
    index = scaled.astype(np.int64) % len(_MAPPING_R)
    return COLOR_MAP[index].astype(np.float32)


def sphere_model(points_per_circle: int = 8) -> np.ndarray:
    """Vertices of a unit wire sphere drawn as one line strip.

    Meridians are taken every ``2*pi/points_per_circle`` over half a turn,
    each sampled at ``points_per_circle + 1`` points. Returns an array of
    shape ``((points_per_circle + 1) * (points_per_circle // 2 + 1), 3)``.
    """
    if points_per_circle <= 0:
        raise ValueError("points_per_circle must be positive")
    f32 = np.float32
    step = f32(MODEL_PI) * 2.0 / points_per_circle
    j = np.arange(points_per_circle // 2 + 1)
    i = np.arange(points_per_circle + 1)
    horizontal = (step * j).astype(f32)
    vertical = (step * i + float(f32(3.14) / f32(2.0))).astype(f32)
    h, v = np.meshgrid(horizontal, vertical, indexing="ij")
    cos_v = np.cos(v)
    vertices = np.stack(
        [cos_v * np.sin(h), np.sin(v), cos_v * np.cos(h)], axis=-1
    ).astype(f32)
    return vertices.reshape(-1, 3)