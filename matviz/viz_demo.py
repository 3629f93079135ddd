"""A window showing a transposable matrix of perspective rectangles."""

import argparse
import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .matrix_viz import MatrixViz  # noqa: E402
from .rectangle import RectangleGraphics  # noqa: E402
from .shader import Shader, ShaderError  # noqa: E402
from .vector_viz import VECTOR_FRAGMENT_PATH, VECTOR_VERTEX_PATH  # noqa: E402

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
START_POSITION = (0.1, 0.1, 0.0)
START_COLOR = (0.4, 0.4, 0.0)


def process_key(viz, key) -> bool:
    """Act on a pressed key; return True when the window should close."""
    if key == pygame.K_ESCAPE:
        return True
    if key == pygame.K_t:
        viz.transpose()
    return False


def _parse(argv):
    parser = argparse.ArgumentParser(prog="matviz-demo", description="Show a transposable matrix.")
    parser.add_argument("--vertex-shader", default=str(VECTOR_VERTEX_PATH))
    parser.add_argument("--fragment-shader", default=str(VECTOR_FRAGMENT_PATH))
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse(argv)
    try:
        shader = Shader.from_files(args.vertex_shader, args.fragment_shader)
    except ShaderError as exc:
        print(f"Failed to load the shader: {exc}", file=sys.stderr)
        return 1
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        viz = MatrixViz(10, 6, RectangleGraphics(shader, surface=screen))
        clock = pygame.time.Clock()
        frames = 0
        running = True
        while running and (args.frames is None or frames < args.frames):
            clock.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_BACKSPACE:
                        width, height = screen.get_size()
                        print(f"Height: {height}")
                        print(f"Width: {width}")
                    if process_key(viz, event.key):
                        running = False
            screen.fill((0, 0, 0))
            viz.array.rect.draws.clear()
            viz.display(START_POSITION, START_COLOR)
            pygame.display.flip()
            frames += 1
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())