"""Linear-algebra operations laid out and drawn as bricks."""

from abc import ABC, abstractmethod

from .feature_object import FeatureObject
from .matrix_object import MatrixObject


class Operation(ABC):
    """An operation that can be visualised."""

    @abstractmethod
    def draw(self, renderer) -> None:
        """Lay out the operands and draw them."""


class MatVecMul(Operation):
    """A matrix-vector product: the vector is placed to the right of the matrix."""

    def __init__(self, mat: MatrixObject, vec: FeatureObject):
        self.mat = mat
        self.vec = vec
        self.is_completed = False

    def draw(self, renderer) -> None:
        if not self.mat.bricks or not self.mat.bricks[-1]:
            raise ValueError("the matrix has no bricks to place the vector against")
        anchor_x = self.mat.bricks[-1][0].position[0]
        for brick in self.vec.bricks:
            brick.position = (anchor_x + 100, brick.position[1])
        self.mat.draw(renderer)
        self.vec.draw(renderer)