"""Entities and the components that give them behaviour."""

from abc import ABC, abstractmethod


class InputComponent(ABC):
    """Reacts to input on behalf of an entity."""

    @abstractmethod
    def update(self, entity):
        """Handle input for ``entity``."""


class MovementComponent:
    """Base for components that move an entity."""


class GraphicsComponent(ABC):
    """Draws an entity."""

    @abstractmethod
    def update(self, entity):
        """Draw ``entity``."""


class RectangleInputComponent(InputComponent):
    """Input handling for a rectangle; rectangles ignore input and stay put."""

    def update(self, entity):
        """Leave ``entity`` unmoved and return its position."""
        return (entity.position_x, entity.position_y)


class Entity:
    """Something in a scene, drawn by its graphics component."""

    def __init__(self, graphics_component, position_x=0, position_y=0):
        self.graphics_component = graphics_component
        self.position_x = position_x
        self.position_y = position_y

    def update(self):
        """Let the graphics component draw this entity; return what it returns."""
        return self.graphics_component.update(self)