"""A matrix shown as rows of vector visualisations."""

from .vector_viz import SPACING, LinAlg, Orientation, VectorViz


class MatrixViz(LinAlg):
    """Draws ``n_rows`` vectors of ``n_cols`` elements each."""

    def __init__(self, n_rows, n_cols, rect=None):
        if n_rows < 0 or n_cols < 0:
            raise ValueError(f"dimensions must not be negative, got {n_rows}x{n_cols}")
        self.n_rows = n_rows
        self.n_cols = n_cols
        self.array = VectorViz(n_cols, rect)
        self.position = [0.0, 0.0, 0.0]
        self.color = [0.0, 0.0, 0.0]

    def display(self, position, color) -> list:
        """Draw every row; return the element positions of each row."""
        self.position = [float(v) for v in position]
        self.color = [float(v) for v in color]
        # Rows are stacked across the direction the row vectors run in.
        axis = 0 if self.array.orientation is Orientation.VERTICAL else 1
        rows = []
        for i in range(self.n_rows):
            row_position = list(self.position)
            row_position[axis] += i * SPACING
            rows.append(self.array.display(row_position, self.color))
        return rows

    def transpose(self) -> None:
        """Swap rows and columns, flip the row orientation and redraw."""
        self.n_rows, self.n_cols = self.n_cols, self.n_rows
        self.array.length = self.n_cols
        self.array.orientation = self.array.orientation.flipped()
        self.display(self.position, self.color)