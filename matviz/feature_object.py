"""A column of bricks standing for a feature vector."""

from .game_object import GameObject

FEATURE_COLOR = (0.2, 0.6, 1.0, 1.0)


class FeatureObject:
    """A vertical vector of bricks."""

    def __init__(self):
        self.bricks: list = []

    def load(self, row, level_width, level_height, resources) -> None:
        """Replace the bricks with ``row`` bricks laid out for the given area."""
        if row <= 0:
            raise ValueError(f"a feature needs at least one row, got {row}")
        texture = resources.get_texture("block")
        self.bricks.clear()
        unit_width = level_width / float(row) * 0.3
        unit_height = (int(level_height) // row) * 0.3
        for i in range(row):
            self.bricks.append(
                GameObject(
                    position=(0.0, unit_height * i + i),
                    size=(unit_width, unit_height),
                    sprite=texture,
                    color=FEATURE_COLOR,
                )
            )

    def draw(self, renderer) -> None:
        for tile in self.bricks:
            if not tile.destroyed:
                tile.draw(renderer)

    def is_completed(self) -> bool:
        """True when every non-solid brick has been destroyed."""
        return all(tile.is_solid or tile.destroyed for tile in self.bricks)