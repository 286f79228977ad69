"""RGBA images with sprite regions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .pixels import Color3, PixelBuffer
from .types import Vec2f, Vec2i


@dataclass(eq=False)
class SpriteImage:
    """A rectangular region of an image, in pixels and texture coordinates."""

    width: int = 0
    height: int = 0
    top_left: Vec2i = field(default_factory=Vec2i)
    bottom_right: Vec2i = field(default_factory=Vec2i)
    tex_top_left: Vec2f = field(default_factory=Vec2f)
    tex_bottom_right: Vec2f = field(default_factory=Vec2f)


@dataclass(eq=False)
class Image:
    """An RGBA pixel image with optional sprites."""

    pixels: PixelBuffer
    sprites: list[SpriteImage] = field(default_factory=list)

    @classmethod
    def create(cls, width: int, height: int) -> "Image":
        """Return a transparent black RGBA image."""
        return cls(PixelBuffer.create(width, height, 4))

    @property
    def width(self) -> int:
        return self.pixels.width

    @property
    def height(self) -> int:
        return self.pixels.height

    @property
    def bytes_per_pixel(self) -> int:
        return self.pixels.bpp

    def clear(self) -> None:
        self.pixels.clear()

    def blit(self, dst: "Image", src_x: int = 0, src_y: int = 0,
             src_width: Optional[int] = None, src_height: Optional[int] = None,
             dst_x: int = 0, dst_y: int = 0) -> None:
        """Copy a region of this image into ``dst``."""
        self.pixels.blit(dst.pixels, src_x, src_y, src_width, src_height, dst_x, dst_y)

    def blit_ext(self, dst: "Image", src_x: int, src_y: int,
                 src_width: int, src_height: int,
                 scale_x: int = 1, scale_y: int = 1,
                 dst_x: int = 0, dst_y: int = 0,
                 protected_colors: Iterable[Color3] = ()) -> None:
        """Blit with scaling, alpha blending and protected destination colours."""
        self.pixels.blit_ext(dst.pixels, src_x, src_y, src_width, src_height,
                             scale_x, scale_y, dst_x, dst_y, protected_colors)

    def init_sprite(self, index: int, x: int, y: int,
                    width: int, height: int) -> SpriteImage:
        """Define sprite ``index`` as the given region and return it."""
        if index < 0:
            raise IndexError(f"sprite index must not be negative, got {index}")
        while len(self.sprites) <= index:
            self.sprites.append(SpriteImage())
        sprite = SpriteImage(
            width=width,
            height=height,
            top_left=Vec2i(x, y),
            bottom_right=Vec2i(x + width, y + height),
            tex_top_left=Vec2f(x / self.width, y / self.height),
            tex_bottom_right=Vec2f((x + width) / self.width, (y + height) / self.height),
        )
        self.sprites[index] = sprite
        return sprite