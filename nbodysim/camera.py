"""A free-flying camera driven by mouse and keyboard input."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

__all__ = ["InputState", "CameraControl", "perspective", "look_at"]


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection; ``fovy`` is in radians."""
    if aspect == 0 or far == near:
        raise ValueError("degenerate projection")
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * far * near) / (far - near)
    return result


def _normalize(v: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(v)
    if norm == 0:
        raise ValueError("cannot normalize a zero vector")
    return v / norm


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    result = np.eye(4)
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -np.dot(s, eye)
    result[1, 3] = -np.dot(u, eye)
    result[2, 3] = np.dot(f, eye)
    return result


@dataclass(frozen=True)
class InputState:
    """Snapshot of the user input for one frame."""

    mouse_pressed: bool = False
    cursor: tuple[float, float] = (0.0, 0.0)
    forward: bool = False
    backward: bool = False
    right: bool = False
    left: bool = False


class CameraControl:
    """Camera orientation and position updated from user input."""

    speed = 3.0
    mouse_speed = 0.005
    initial_fov = 45.0

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        self.position = np.array([0.0, 0.0, 5.0])
        self.direction = np.array([0.0, 0.0, -1.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.horizontal_angle = 3.14
        self.vertical_angle = 0.0
        self._cursor_anchor: tuple[float, float] | None = None
        self._last_time: float | None = None
        self._view = np.eye(4)
        self._projection = perspective(self.initial_fov, width / height, 0.1, 5000.0)

    @property
    def cursor_anchor(self) -> tuple[float, float] | None:
        """Where the cursor should be put back while dragging, if anywhere."""
        return self._cursor_anchor

    def _rotate(self, cursor: tuple[float, float]) -> None:
        if self._cursor_anchor is None:
            self._cursor_anchor = cursor
        ax, ay = self._cursor_anchor
        cx, cy = cursor
        self.horizontal_angle += self.mouse_speed * (ax - cx)
        self.vertical_angle += self.mouse_speed * (ay - cy)
        h, v = self.horizontal_angle, self.vertical_angle
        self.direction = np.array([math.cos(v) * math.sin(h), math.sin(v),
                                   math.cos(v) * math.cos(h)])
        self.right = np.array([math.sin(h - 3.14 / 2.0), 0.0,
                               math.cos(h - 3.14 / 2.0)])
        self.up = np.cross(self.right, self.direction)

    def update(self, inputs: InputState, current_time: float) -> np.ndarray:
        """Apply one frame of input and return projection times view."""
        if self._last_time is None:
            self._last_time = current_time
        delta = current_time - self._last_time

        if inputs.mouse_pressed:
            self._rotate(tuple(float(c) for c in inputs.cursor))
        else:
            self._cursor_anchor = None

        step = delta * self.speed
        if inputs.forward:
            self.position = self.position + self.direction * step
        if inputs.backward:
            self.position = self.position - self.direction * step
        if inputs.right:
            self.position = self.position + self.right * step
        if inputs.left:
            self.position = self.position - self.right * step

        self._view = look_at(self.position, self.position + self.direction, self.up)
        self._last_time = current_time
        return self._projection @ self._view

    @property
    def view_matrix(self) -> np.ndarray:
        """The view matrix computed by the last update."""
        return self._view.copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        """The projection matrix fixed by the window size."""
        return self._projection.copy()