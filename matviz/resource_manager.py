"""A registry of named shaders and textures loaded from files."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .shader import Shader  # noqa: E402
from .texture import PixelFormat, Texture2D  # noqa: E402


class ResourceManager:
    """Loads shaders and textures and keeps them under string names."""

    def __init__(self):
        self.shaders: dict = {}
        self.textures: dict = {}

    def load_shader(self, v_shader_file, f_shader_file, g_shader_file, name) -> Shader:
        """Compile a shader from files and store it as ``name``."""
        shader = Shader.from_files(v_shader_file, f_shader_file, g_shader_file)
        self.shaders[name] = shader
        return shader

    def get_shader(self, name) -> Shader:
        try:
            return self.shaders[name]
        except KeyError:
            raise KeyError(f"no shader named {name!r}") from None

    def load_texture(self, file, alpha, name) -> Texture2D:
        """Load an image file into a texture and store it as ``name``."""
        texture = Texture2D()
        if alpha:
            texture.internal_format = PixelFormat.RGBA
            texture.image_format = PixelFormat.RGBA
        try:
            surface = pygame.image.load(os.fspath(file))
        except (pygame.error, OSError) as exc:
            raise OSError(f"failed to load texture {file}") from exc
        width, height = surface.get_size()
        data = pygame.image.tobytes(surface, "RGBA" if alpha else "RGB")
        texture.generate(width, height, data)
        self.textures[name] = texture
        return texture

    def get_texture(self, name) -> Texture2D:
        try:
            return self.textures[name]
        except KeyError:
            raise KeyError(f"no texture named {name!r}") from None

    def clear(self) -> None:
        """Release every stored shader and texture."""
        if Shader.current in self.shaders.values():
            Shader.current = None
        if Texture2D.active in self.textures.values():
            Texture2D.active = None
        self.shaders.clear()
        self.textures.clear()