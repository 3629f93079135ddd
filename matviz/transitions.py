"""Transitions that alter a game object before it is drawn."""

import math
from abc import ABC, abstractmethod

from .game_object import GameObject


class Transition(ABC):
    """Something that yields a (possibly altered) game object for drawing."""

    @abstractmethod
    def transform(self, renderer) -> GameObject:
        """Apply the transition and return the affected object."""


class IdentityTransition(Transition):
    """Returns its object unchanged and draws nothing."""

    def __init__(self, game_object: GameObject):
        self.game_object = game_object

    def transform(self, renderer) -> GameObject:
        return self.game_object


class FadeTransition(Transition):
    """Sets the alpha of the wrapped transition's object from an angle in degrees."""

    def __init__(self, transition: Transition):
        self.transition = transition
        self.current_iteration = 90.0

    def set_beep(self, current_iteration) -> None:
        self.current_iteration = float(current_iteration)

    def transform(self, renderer) -> GameObject:
        obj = self.transition.transform(renderer)
        red, green, blue = obj.color[:3]
        obj.color = (red, green, blue, math.cos(math.radians(self.current_iteration)))
        obj.draw(renderer)
        return obj