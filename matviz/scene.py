"""A window that repeatedly updates a list of entities."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

BACKGROUND = (0, 128, 128)


class Scene:
    """Holds entities and runs the frame loop that updates them."""

    def __init__(self, width=800, height=800, title="LearnOpenGL"):
        self.width = width
        self.height = height
        self.title = title
        self.entities: list = []

    @property
    def entity_count(self) -> int:
        return len(self.entities)

    def add_entity(self, entity) -> None:
        self.entities.append(entity)

    def update_entities(self) -> list:
        """Update every entity in the order added; return their results."""
        return [entity.update() for entity in self.entities]

    def run(self, max_frames=None) -> int:
        """Open the window and loop until it closes, Escape is pressed or
        ``max_frames`` frames are drawn; return the number of frames drawn."""
        if max_frames is not None and max_frames < 0:
            raise ValueError(f"max_frames must not be negative, got {max_frames}")
        pygame.init()
        try:
            try:
                screen = pygame.display.set_mode((self.width, self.height))
            except pygame.error as exc:
                raise RuntimeError(f"Failed to create window: {exc}") from exc
            pygame.display.set_caption(self.title)
            frames = 0
            running = True
            while running and (max_frames is None or frames < max_frames):
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                if not running:
                    break
                screen.fill(BACKGROUND)
                self.update_entities()
                pygame.display.flip()
                frames += 1
            return frames
        finally:
            pygame.quit()