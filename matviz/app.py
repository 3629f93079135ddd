"""The windowed program that shows the scaled dot-product animation."""

import argparse
import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .animation import KEY_COUNT, Animation, AnimationAssets  # noqa: E402
from .resource_manager import ResourceManager  # noqa: E402
from .shader import ShaderError  # noqa: E402
from .sprite_renderer import SpriteRenderer  # noqa: E402

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600


def handle_key(animation, key, pressed) -> bool:
    """Record a key change; return True when the window should close."""
    should_close = key == pygame.K_ESCAPE and pressed
    if 0 <= key < KEY_COUNT:
        animation.keys[key] = bool(pressed)
    return should_close


def _parse(argv):
    defaults = AnimationAssets()
    parser = argparse.ArgumentParser(prog="matviz", description="Show the scaled dot-product animation.")
    parser.add_argument("--vertex-shader", default=str(defaults.vertex_shader))
    parser.add_argument("--fragment-shader", default=str(defaults.fragment_shader))
    parser.add_argument("--face-texture", default=str(defaults.face_texture))
    parser.add_argument("--block-texture", default=str(defaults.block_texture))
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse(argv)
    assets = AnimationAssets(
        args.vertex_shader, args.fragment_shader, args.face_texture, args.block_texture
    )
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Breakout")
        resources = ResourceManager()
        animation = Animation(SCREEN_WIDTH, SCREEN_HEIGHT, assets)
        try:
            animation.init(resources)
        except (OSError, ShaderError) as exc:
            print(f"Failed to initialise the animation: {exc}", file=sys.stderr)
            return 1
        renderer = SpriteRenderer(resources.get_shader("sprite"), surface=screen)
        clock = pygame.time.Clock()
        frames = 0
        running = True
        while running and (args.frames is None or frames < args.frames):
            dt = clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    if handle_key(animation, event.key, event.type == pygame.KEYDOWN):
                        running = False
            animation.process_input(dt)
            animation.update(dt)
            screen.fill((0, 0, 0))
            renderer.draws.clear()
            animation.render(renderer)
            pygame.display.flip()
            frames += 1
        resources.clear()
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())