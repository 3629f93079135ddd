"""A grid of bricks standing for a matrix."""

from .game_object import GameObject


class MatrixObject:
    """Bricks held as a list of rows, each a list of bricks."""

    def __init__(self):
        self.bricks: list = []

    def load(self, row, col, lvl_width, lvl_height, resources) -> None:
        """Append ``row`` rows of ``col`` bricks laid out for the given area."""
        if row <= 0 or col <= 0:
            raise ValueError(f"a matrix needs positive dimensions, got {row}x{col}")
        texture = resources.get_texture("block")
        unit_width = lvl_width / float(row) * 0.2
        unit_height = (int(lvl_height) // col) * 0.3
        for x in range(row):
            self.bricks.append(
                [
                    GameObject(
                        position=(unit_width * x + x * 15, unit_height * y + y),
                        size=(unit_width, unit_height),
                        sprite=texture,
                        color=(0.2, 0.6 * x, 1.0, 1.0),
                    )
                    for y in range(col)
                ]
            )

    def draw(self, renderer) -> None:
        for line in self.bricks:
            for brick in line:
                brick.draw(renderer)