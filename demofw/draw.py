"""Software drawing primitives on :class:`PixelBuffer` objects."""

from __future__ import annotations

from typing import Sequence, Union

from .fastmath import sqrtf
from .pixels import PixelBuffer
from .types import Vec4i

Color = Union[Vec4i, Sequence[int]]


def _color(color: Color) -> bytes:
    if isinstance(color, Vec4i):
        values = (color.x, color.y, color.z, color.w)
    else:
        values = tuple(color)
    if len(values) != 4:
        raise ValueError(f"colour needs four channels, got {len(values)}")
    return bytes(int(v) & 0xFF for v in values)


def _inside(buffer: PixelBuffer, x: int, y: int) -> bool:
    return 0 <= x < buffer.width and 0 <= y < buffer.height


def _put(buffer: PixelBuffer, x: int, y: int, raw: bytes) -> None:
    if not _inside(buffer, x, y):
        return
    idx = (x + y * buffer.width) * buffer.bpp
    n = min(4, buffer.bpp)
    buffer.data[idx:idx + n] = raw[:n]


def draw_pixel(buffer: PixelBuffer, x: int, y: int, color: Color) -> None:
    """Set one pixel; coordinates outside the buffer are ignored."""
    _put(buffer, x, y, _color(color))


def fill_box(buffer: PixelBuffer, x1: int, y1: int, x2: int, y2: int,
             color: Color) -> None:
    """Fill the rectangle with corners ``(x1, y1)`` and ``(x2, y2)`` inclusive."""
    raw = _color(color)
    for y in range(y1, y2 + 1):
        for x in range(x1, x2 + 1):
            _put(buffer, x, y, raw)


def flood_fill(buffer: PixelBuffer, x: int, y: int, color: Color) -> None:
    """Replace the 4-connected region of the start pixel's colour with ``color``."""
    if not _inside(buffer, x, y):
        return
    if buffer.bpp < 4:
        raise ValueError("flood fill needs four bytes per pixel")
    new = _color(color)
    idx = (x + y * buffer.width) * buffer.bpp
    old = bytes(buffer.data[idx:idx + 4])
    if new == old:
        return

    pending = [(x, y)]
    while pending:
        px, py = pending.pop()
        if not _inside(buffer, px, py):
            continue
        i = (px + py * buffer.width) * buffer.bpp
        if buffer.data[i:i + 4] != old:
            continue
        _put(buffer, px, py, new)
        pending.extend(((px + 1, py), (px - 1, py), (px, py + 1), (px, py - 1)))


def draw_circle(buffer: PixelBuffer, cx: int, cy: int, radius: int,
                color: Color) -> None:
    """Draw a circle outline with the midpoint algorithm."""
    raw = _color(color)
    x, y = 0, radius
    m = 5 - 4 * radius
    while x <= y:
        for px, py in ((cx + x, cy + y), (cx + x, cy - y),
                       (cx - x, cy + y), (cx - x, cy - y),
                       (cx + y, cy + x), (cx + y, cy - x),
                       (cx - y, cy + x), (cx - y, cy - x)):
            _put(buffer, px, py, raw)
        if m > 0:
            y -= 1
            m -= 8 * y
        x += 1
        m += 8 * x + 4


def draw_line(buffer: PixelBuffer, x0: int, y0: int, x1: int, y1: int,
              color: Color) -> None:
    """Draw a line between two points with Bresenham's algorithm."""
    raw = _color(color)
    dx, sx = abs(x1 - x0), (1 if x0 < x1 else -1)
    dy, sy = -abs(y1 - y0), (1 if y0 < y1 else -1)
    err = dx + dy
    while True:
        _put(buffer, x0, y0, raw)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def gradient_oval(buffer: PixelBuffer) -> None:
    """Draw a white oval whose alpha fades from opaque centre to clear edge."""
    center_x = buffer.width / 2.0
    center_y = buffer.height / 2.0
    for y in range(buffer.height):
        for x in range(buffer.width):
            distance_x = (x - center_x) / center_x
            distance_y = (y - center_y) / center_y
            distance = sqrtf(distance_x * distance_x + distance_y * distance_y)
            if distance <= 1.0:
                intensity = max(1.0 - distance, 0.0)
                _put(buffer, x, y, bytes((255, 255, 255, int(intensity * 255))))