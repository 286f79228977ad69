"""Raw pixel buffers with copy, alpha-aware blit and mask creation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Union

from .types import Vec3i

Color3 = Union[Vec3i, Sequence[int]]


def _rgb(color: Color3) -> tuple[int, int, int]:
    if isinstance(color, Vec3i):
        return (color.x, color.y, color.z)
    r, g, b = color
    return (r, g, b)


@dataclass(eq=False)
class PixelBuffer:
    """Row-major pixel data, ``bpp`` bytes per pixel."""

    width: int
    height: int
    bpp: int = 4
    data: Optional[bytearray] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        size = self.width * self.height * self.bpp
        if self.data is None:
            self.data = bytearray(size)
        elif not isinstance(self.data, bytearray):
            self.data = bytearray(self.data)
        if len(self.data) != size:
            raise ValueError(
                f"pixel data has {len(self.data)} bytes, expected {size}"
            )

    @classmethod
    def create(cls, width: int, height: int, bpp: int = 4) -> "PixelBuffer":
        """Return a zero-filled buffer."""
        return cls(width, height, bpp)

    def _offset(self, x: int, y: int) -> int:
        return (x + y * self.width) * self.bpp

    def clear(self) -> None:
        self.data[:] = bytes(len(self.data))

    def get(self, x: int, y: int) -> tuple[int, ...]:
        """Return the channels of the pixel at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        idx = self._offset(x, y)
        return tuple(self.data[idx:idx + self.bpp])

    def _check_target(self, dst: "PixelBuffer") -> None:
        if dst.bpp != self.bpp:
            raise ValueError(f"bytes per pixel differ: {self.bpp} != {dst.bpp}")

    def blit(self, dst: "PixelBuffer", src_x: int = 0, src_y: int = 0,
             src_width: Optional[int] = None, src_height: Optional[int] = None,
             dst_x: int = 0, dst_y: int = 0) -> None:
        """Copy a region of this buffer into ``dst``, clipping at both edges."""
        self._check_target(dst)
        if src_width is None:
            src_width = self.width
        if src_height is None:
            src_height = self.height
        bpp = self.bpp

        x_start = max(0, -dst_x, -src_x)
        x_end = min(src_width, dst.width - dst_x, self.width - src_x)
        if x_end <= x_start:
            return
        span = (x_end - x_start) * bpp

        for y in range(src_height):
            out_y = dst_y + y
            in_y = src_y + y
            if not (0 <= out_y < dst.height and 0 <= in_y < self.height):
                continue
            s = self._offset(src_x + x_start, in_y)
            d = dst._offset(dst_x + x_start, out_y)
            dst.data[d:d + span] = self.data[s:s + span]

    def blit_ext(self, dst: "PixelBuffer", src_x: int, src_y: int,
                 src_width: int, src_height: int,
                 scale_x: int = 1, scale_y: int = 1,
                 dst_x: int = 0, dst_y: int = 0,
                 protected_colors: Iterable[Color3] = ()) -> None:
        """Blit with scaling, alpha handling and protected destination colours.

        Fully transparent source pixels are skipped, partially transparent
        ones are blended, and destination pixels whose RGB equals one of
        ``protected_colors`` are never overwritten.
        """
        self._check_target(dst)
        if scale_x <= 0 or scale_y <= 0:
            raise ValueError("scale factors must be positive")
        protected = {_rgb(c) for c in protected_colors}
        bpp = self.bpp
        src, out = self.data, dst.data

        for y in range(src_height * scale_y):
            out_y = dst_y + y
            if not 0 <= out_y < dst.height:
                continue
            in_y = src_y + y // scale_y
            if not 0 <= in_y < self.height:
                continue
            for x in range(src_width * scale_x):
                out_x = dst_x + x
                if not 0 <= out_x < dst.width:
                    continue
                in_x = src_x + x // scale_x
                if not 0 <= in_x < self.width:
                    continue

                s = self._offset(in_x, in_y)
                if bpp == 4 and src[s + 3] == 0:
                    continue
                d = dst._offset(out_x, out_y)
                if bpp >= 3 and protected and (out[d], out[d + 1], out[d + 2]) in protected:
                    continue

                if bpp <= 3 or src[s + 3] == 255:
                    out[d:d + bpp] = src[s:s + bpp]
                    continue

                p = src[s + 3] / 255.0
                for i in range(3):
                    out[d + i] = int(p * src[s + i] + (1.0 - p) * out[d + i])
                out[d + 3] = 255

    def create_mask(self) -> "PixelBuffer":
        """Return a buffer that is opaque white where this one has any alpha."""
        if self.bpp < 4:
            raise ValueError("a mask needs an alpha channel")
        mask = PixelBuffer.create(self.width, self.height, self.bpp)
        opaque, clear = b"\xff" * 4, bytes(4)
        for idx in range(0, len(self.data), self.bpp):
            mask.data[idx:idx + 4] = opaque if self.data[idx + 3] else clear
        return mask