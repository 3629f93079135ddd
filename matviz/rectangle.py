"""A small coloured rectangle drawn in perspective with a time-driven camera."""

import math
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .shader import Shader  # noqa: E402
from .sprite_renderer import look_at, perspective, rotate, translate  # noqa: E402

DEFAULT_VERTEX_PATH = Path("shadersProgram/shader.vs")
DEFAULT_FRAGMENT_PATH = Path("shadersProgram/shader.fs")

# Corners of the rectangle: x, y, z, then texture coordinates u, v and a padding zero.
RECT_VERTICES = np.array(
    [
        [0.1, 0.1, 0.0, 1.0, 1.0, 0.0],
        [0.1, -0.1, 0.0, 1.0, 0.0, 0.0],
        [-0.1, -0.1, 0.0, 0.0, 0.0, 0.0],
        [-0.1, 0.1, 0.0, 0.0, 1.0, 0.0],
    ],
    dtype=np.float32,
)
RECT_INDICES = np.array([0, 1, 3, 1, 2, 3], dtype=np.uint32)

ASPECT = 800.0 / 600.0
FIELD_OF_VIEW = math.radians(45.0)
NEAR_PLANE = 0.1
FAR_PLANE = 100.0
EYE = (0.0, 0.0, 10.0)


@dataclass
class RectangleTransforms:
    """The matrices and animated values used for one rectangle draw."""

    transform: np.ndarray
    view: np.ndarray
    projection: np.ndarray
    color_amount: float
    cam_y: float


@dataclass
class RectangleDraw:
    """One rectangle drawn by a ``RectangleGraphics``."""

    transforms: RectangleTransforms
    color: tuple
    depth: int


def _elapsed_clock() -> Callable[[], float]:
    start = time.monotonic()
    return lambda: time.monotonic() - start


class RectangleGraphics:
    """Draws a rectangle whose colour and view swing with elapsed time.

    Every draw is recorded in ``draws``; when a pygame surface is given the
    projected rectangle is also painted onto it.
    """

    def __init__(self, shader: Optional[Shader] = None, *, vertex_path=DEFAULT_VERTEX_PATH,
                 fragment_path=DEFAULT_FRAGMENT_PATH, clock: Optional[Callable[[], float]] = None,
                 surface: Optional[pygame.Surface] = None):
        self.shader = shader if shader is not None else Shader.from_files(vertex_path, fragment_path)
        self.clock = clock if clock is not None else _elapsed_clock()
        self.surface = surface
        self.vertices = RECT_VERTICES.copy()
        self.indices = RECT_INDICES.copy()
        self.draws: list = []

    def transforms(self, position, time) -> RectangleTransforms:
        """Compute the model, view and projection matrices at ``time`` seconds.

        With ``position`` None the model matrix is the identity.
        """
        model = np.identity(4)
        if position is not None:
            model = translate(model, position)
        swing = math.sin(time)
        view = look_at(EYE, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        view = rotate(view, math.radians(swing * 90.0), (0.0, 0.0, 1.0))
        view = rotate(view, math.radians(swing * 180.0), (1.0, 0.0, 0.0))
        projection = perspective(FIELD_OF_VIEW, ASPECT, NEAR_PLANE, FAR_PLANE)
        return RectangleTransforms(model, view, projection, swing, swing)

    def display(self, position, color, depth=0) -> RectangleDraw:
        """Draw the rectangle at a 3D ``position`` tinted by ``color``'s red part."""
        position = [float(v) for v in position]
        color = [float(v) for v in color]
        if len(position) != 3:
            raise ValueError(f"position needs 3 components, got {len(position)}")
        if len(color) != 3:
            raise ValueError(f"color needs 3 components, got {len(color)}")
        return self._render(self.transforms(position, self.clock()), color[0], depth)

    def update(self, entity) -> RectangleDraw:
        """Draw the rectangle for ``entity`` at the origin with a fixed red part."""
        return self._render(self.transforms(None, self.clock()), 0.3, 0)

    def _render(self, transforms: RectangleTransforms, red: float, depth: int) -> RectangleDraw:
        self.shader.use()
        self.shader.set_matrix4("projection", transforms.projection)
        self.shader.set_matrix4("view", transforms.view)
        self.shader.set_matrix4("transform", transforms.transform)
        color = (float(red), transforms.color_amount, transforms.cam_y)
        self.shader.set_vector3f("rectColor", color)
        draw = RectangleDraw(transforms, color, depth)
        self.draws.append(draw)
        if self.surface is not None:
            self._paint(draw)
        return draw

    def _paint(self, draw: RectangleDraw) -> None:
        t = draw.transforms
        mvp = t.projection @ t.view @ t.transform
        width, height = self.surface.get_size()
        points = []
        for x, y, z, *_ in self.vertices:
            clip = mvp @ np.array([x, y, z, 1.0])
            if clip[3] <= 0:
                return
            nx, ny = clip[0] / clip[3], clip[1] / clip[3]
            points.append(((nx + 1.0) / 2.0 * width, (1.0 - ny) / 2.0 * height))
        rgb = tuple(int(round(min(max(c, 0.0), 1.0) * 255)) for c in draw.color)
        for a, b, c in self.indices.reshape(-1, 3):
            pygame.draw.polygon(self.surface, rgb, [points[a], points[b], points[c]])