"""The drawable entity every visualised element is made of."""

from dataclasses import dataclass, field

from .texture import Texture2D


@dataclass(eq=False)
class GameObject:
    """A positioned, sized, tinted sprite with simple state flags."""

    position: tuple = (0.0, 0.0)
    size: tuple = (1.0, 1.0)
    sprite: Texture2D = field(default_factory=Texture2D)
    color: tuple = (1.0, 1.0, 1.0, 1.0)
    velocity: tuple = (0.0, 0.0)
    rotation: float = 0.0
    is_solid: bool = False
    destroyed: bool = False

    def draw(self, renderer):
        """Draw this object's sprite with ``renderer``."""
        return renderer.draw_sprite(self.sprite, self.position, self.size, self.rotation, self.color)