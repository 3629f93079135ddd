"""A vector shown as a row or column of rectangles."""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path

from .rectangle import RectangleGraphics

SPACING = 0.3
VECTOR_VERTEX_PATH = Path("src/shadersProgram/shader.vs")
VECTOR_FRAGMENT_PATH = Path("src/shadersProgram/shader.fs")


class LinAlg(ABC):
    """A visualised linear-algebra object that can be transposed."""

    @abstractmethod
    def transpose(self) -> None:
        """Transpose the object and redraw it."""


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def flipped(self) -> "Orientation":
        return Orientation.VERTICAL if self is Orientation.HORIZONTAL else Orientation.HORIZONTAL


class VectorViz(LinAlg):
    """Draws ``length`` rectangles spaced along the current orientation."""

    def __init__(self, length, rect=None, orientation=Orientation.HORIZONTAL):
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        self.length = length
        self.orientation = orientation
        self.rect = rect if rect is not None else RectangleGraphics(
            vertex_path=VECTOR_VERTEX_PATH, fragment_path=VECTOR_FRAGMENT_PATH
        )
        self.position: list = []
        self.color: list = []

    def display(self, position, color) -> list:
        """Draw every element from ``position`` onwards; return the positions drawn."""
        position = [float(v) for v in position]
        color = [float(v) for v in color]
        if len(position) != len(color):
            raise ValueError("position and color must have the same number of components")
        self.position = position
        self.color = color
        axis = 1 if self.orientation is Orientation.VERTICAL else 0
        drawn = []
        for i in range(self.length):
            element = list(position)
            element[axis] += i * SPACING
            self.rect.display(element, color, i)
            drawn.append(element)
        return drawn

    def transpose(self) -> None:
        """Flip the orientation and redraw at the last displayed position."""
        self.orientation = self.orientation.flipped()
        if self.position:
            self.display(self.position, self.color)