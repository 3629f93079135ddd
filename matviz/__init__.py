"""Linear-algebra operations drawn as tiles: textures, shaders, sprites, matrices, vectors and pygame windows."""

__version__ = "0.1.0"