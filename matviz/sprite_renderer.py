"""Sprite drawing and the 4x4 transformation helpers it is built on."""

import math
import os
from dataclasses import dataclass
from typing import Optional

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .shader import Shader  # noqa: E402
from .texture import Texture2D  # noqa: E402

# Two triangles covering the unit square: x, y, u, v per vertex.
QUAD_VERTICES = np.array(
    [
        [0.0, 1.0, 0.0, 1.0],
        [1.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 1.0],
        [1.0, 1.0, 1.0, 1.0],
        [1.0, 0.0, 1.0, 0.0],
    ],
    dtype=np.float32,
)


def _vec3(value) -> np.ndarray:
    array = np.asarray(value, dtype=np.float64).reshape(-1)
    if array.size != 3:
        raise ValueError(f"expected 3 components, got {array.size}")
    return array


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0:
        raise ValueError("cannot normalise a zero-length vector")
    return vector / length


def translate(matrix, offset) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    translation = np.identity(4)
    translation[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=np.float64) @ translation


def rotate(matrix, angle, axis) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = _normalize(_vec3(axis))
    c, s = math.cos(angle), math.sin(angle)
    a = np.array([x, y, z])
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    rotation = np.identity(4)
    rotation[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return np.asarray(matrix, dtype=np.float64) @ rotation


_rotate_matrix = rotate


def scale(matrix, factors) -> np.ndarray:
    """Return ``matrix`` followed by a scaling by ``factors``."""
    scaling = np.identity(4)
    scaling[:3, :3] = np.diag(_vec3(factors))
    return np.asarray(matrix, dtype=np.float64) @ scaling


def ortho(left, right, bottom, top, near, far) -> np.ndarray:
    """An orthographic projection onto normalised device coordinates."""
    if right == left or top == bottom or far == near:
        raise ValueError("orthographic volume must have non-zero extent")
    result = np.identity(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result


def perspective(fovy, aspect, near, far) -> np.ndarray:
    """A right-handed perspective projection; ``fovy`` is in radians."""
    if aspect == 0 or far == near:
        raise ValueError("aspect must be non-zero and near must differ from far")
    focal = 1.0 / math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = focal / aspect
    result[1, 1] = focal
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -2.0 * far * near / (far - near)
    result[3, 2] = -1.0
    return result


def look_at(eye, center, up) -> np.ndarray:
    """A right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    forward = _normalize(_vec3(center) - eye)
    side = _normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    result = np.identity(4)
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -np.dot(side, eye)
    result[1, 3] = -np.dot(upward, eye)
    result[2, 3] = np.dot(forward, eye)
    return result


def model_matrix(position, size, rotate=0.0) -> np.ndarray:
    """Place the unit quad at ``position`` with ``size``, rotated ``rotate`` degrees about its centre."""
    px, py = (float(v) for v in position)
    sx, sy = (float(v) for v in size)
    model = translate(np.identity(4), (px, py, 0.0))
    model = translate(model, (0.5 * sx, 0.5 * sy, 0.0))
    model = _rotate_matrix(model, math.radians(rotate), (0.0, 0.0, 1.0))
    model = translate(model, (-0.5 * sx, -0.5 * sy, 0.0))
    return scale(model, (sx, sy, 1.0))


@dataclass
class SpriteDraw:
    """One sprite drawn by a renderer."""

    texture: Texture2D
    position: tuple
    size: tuple
    rotate: float
    color: tuple
    model: np.ndarray


class SpriteRenderer:
    """Draws textured, tinted quads through a sprite shader.

    Every draw is recorded in ``draws``; when a pygame surface is given the
    sprite is also painted onto it.
    """

    def __init__(self, shader: Shader, surface: Optional[pygame.Surface] = None):
        self.shader = shader
        self.surface = surface
        self.vertices = QUAD_VERTICES.copy()
        self.draws: list = []

    def draw_sprite(self, texture, position, size=(10.0, 10.0), rotate=0.0,
                    color=(1.0, 1.0, 1.0, 1.0)) -> SpriteDraw:
        position = tuple(float(v) for v in position)
        size = tuple(float(v) for v in size)
        color = tuple(float(v) for v in color)
        self.shader.use()
        model = model_matrix(position, size, rotate)
        self.shader.set_matrix4("model", model)
        self.shader.set_vector4f("spriteColor", color)
        texture.bind()
        draw = SpriteDraw(texture, position, size, float(rotate), color, model)
        self.draws.append(draw)
        if self.surface is not None:
            self._paint(draw)
        return draw

    def _paint(self, draw: SpriteDraw) -> None:
        width = max(1, round(abs(draw.size[0])))
        height = max(1, round(abs(draw.size[1])))
        rgba = np.clip(np.asarray(draw.color) * 255.0, 0.0, 255.0)
        pixels = draw.texture.pixels
        if pixels.size:
            if pixels.shape[2] == 3:
                alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=np.uint8)
                pixels = np.concatenate([pixels, alpha], axis=2)
            tinted = (pixels.astype(np.float64) * (rgba / 255.0)).astype(np.uint8)
            sprite = pygame.image.frombuffer(
                tinted.tobytes(), (draw.texture.width, draw.texture.height), "RGBA"
            ).copy()
            sprite = pygame.transform.scale(sprite, (width, height))
        else:
            sprite = pygame.Surface((width, height), pygame.SRCALPHA)
            sprite.fill(tuple(int(v) for v in rgba))
        if draw.rotate:
            sprite = pygame.transform.rotate(sprite, -draw.rotate)
        centre = (
            draw.position[0] + draw.size[0] / 2.0,
            draw.position[1] + draw.size[1] / 2.0,
        )
        self.surface.blit(sprite, sprite.get_rect(center=centre))