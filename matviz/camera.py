"""A fly-through camera driven by Euler angles."""

import math
from enum import Enum, auto

import numpy as np

from .sprite_renderer import look_at

YAW = -90.0
PITCH = 0.0
SPEED = 2.5
SENSITIVITY = 0.1
ZOOM = 45.0

PITCH_LIMIT = 89.0
MIN_ZOOM = 1.0
MAX_ZOOM = 45.0


class CameraMovement(Enum):
    """Directions the camera can be moved in from keyboard-like input."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()


def _vec3(value) -> np.ndarray:
    array = np.array(value, dtype=np.float64).reshape(-1)
    if array.size != 3:
        raise ValueError(f"expected 3 components, got {array.size}")
    return array


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0:
        raise ValueError("cannot normalise a zero-length vector")
    return vector / length


class Camera:
    """Tracks position and orientation and produces a view matrix."""

    def __init__(self, position=(0.0, 0.0, 0.0), up=(0.0, 1.0, 0.0), yaw=YAW, pitch=PITCH):
        self.position = _vec3(position)
        self.world_up = _vec3(up)
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.front = np.array([0.0, 0.0, -1.0])
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self.right = np.zeros(3)
        self.up = np.zeros(3)
        self._update_vectors()

    def view_matrix(self) -> np.ndarray:
        """The view matrix looking along ``front`` from ``position``."""
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction, delta_time) -> None:
        """Move the camera in ``direction`` for ``delta_time`` seconds."""
        velocity = self.movement_speed * float(delta_time)
        direction = CameraMovement(direction)
        if direction is CameraMovement.FORWARD:
            self.position = self.position + self.front * velocity
        elif direction is CameraMovement.BACKWARD:
            self.position = self.position - self.front * velocity
        elif direction is CameraMovement.LEFT:
            self.position = self.position - self.right * velocity
        elif direction is CameraMovement.RIGHT:
            self.position = self.position + self.right * velocity

    def process_mouse_movement(self, xoffset, yoffset, constrain_pitch=True) -> None:
        """Turn the camera by mouse offsets, optionally keeping pitch within ±89°."""
        self.yaw += float(xoffset) * self.mouse_sensitivity
        self.pitch += float(yoffset) * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -PITCH_LIMIT), PITCH_LIMIT)
        self._update_vectors()

    def process_mouse_scroll(self, yoffset) -> None:
        """Zoom by a scroll-wheel offset, keeping zoom within [1, 45]."""
        self.zoom = min(max(self.zoom - float(yoffset), MIN_ZOOM), MAX_ZOOM)

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array([
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ])
        self.front = _normalize(front)
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))