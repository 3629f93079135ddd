"""Two-dimensional textures held in memory as pixel arrays."""

import itertools
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional

import numpy as np


class PixelFormat(IntEnum):
    """Pixel layouts a texture can store or be given."""

    RGB = 0x1907
    RGBA = 0x1908

    @property
    def channels(self) -> int:
        return 4 if self is PixelFormat.RGBA else 3


class WrapMode(IntEnum):
    """How texture coordinates outside [0, 1] are treated."""

    REPEAT = 0x2901
    CLAMP_TO_EDGE = 0x812F
    MIRRORED_REPEAT = 0x8370


class FilterMode(IntEnum):
    """How texels are sampled when the texture is scaled."""

    NEAREST = 0x2600
    LINEAR = 0x2601


_texture_ids = itertools.count(1)


def _empty_pixels() -> np.ndarray:
    return np.zeros((0, 0, PixelFormat.RGB.channels), dtype=np.uint8)


@dataclass(eq=False)
class Texture2D:
    """A texture with its image data, format and sampling configuration."""

    active: ClassVar[Optional["Texture2D"]] = None

    width: int = 0
    height: int = 0
    internal_format: PixelFormat = PixelFormat.RGB
    image_format: PixelFormat = PixelFormat.RGB
    wrap_s: WrapMode = WrapMode.REPEAT
    wrap_t: WrapMode = WrapMode.REPEAT
    filter_min: FilterMode = FilterMode.LINEAR
    filter_max: FilterMode = FilterMode.LINEAR
    id: int = field(default_factory=lambda: next(_texture_ids), init=False)
    pixels: np.ndarray = field(default_factory=_empty_pixels, init=False, repr=False)

    def generate(self, width, height, data) -> "Texture2D":
        """Store image data laid out in ``image_format``, converted to ``internal_format``.

        ``data`` may be bytes-like, array-like or None (a zero-filled image).
        Rows run from the top of the image downwards.
        """
        if width < 0 or height < 0:
            raise ValueError(f"texture dimensions must not be negative: {width}x{height}")
        source_channels = PixelFormat(self.image_format).channels
        shape = (height, width, source_channels)
        if data is None:
            image = np.zeros(shape, dtype=np.uint8)
        else:
            if isinstance(data, (bytes, bytearray, memoryview)):
                flat = np.frombuffer(bytes(data), dtype=np.uint8)
            else:
                flat = np.asarray(data, dtype=np.uint8).reshape(-1)
            expected = width * height * source_channels
            if flat.size != expected:
                raise ValueError(
                    f"expected {expected} bytes of image data for a {width}x{height} "
                    f"{PixelFormat(self.image_format).name} image, got {flat.size}"
                )
            image = flat.reshape(shape).copy()

        target_channels = PixelFormat(self.internal_format).channels
        if target_channels < source_channels:
            image = image[:, :, :target_channels].copy()
        elif target_channels > source_channels:
            alpha = np.full((height, width, 1), 255, dtype=np.uint8)
            image = np.concatenate([image, alpha], axis=2)

        self.width = width
        self.height = height
        self.pixels = image
        return self

    def bind(self) -> "Texture2D":
        """Make this the active texture."""
        Texture2D.active = self
        return self