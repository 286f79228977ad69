import pytest

from demofw.draw import (
    draw_circle,
    draw_line,
    draw_pixel,
    fill_box,
    flood_fill,
    gradient_oval,
)
from demofw.pixels import PixelBuffer
from demofw.types import Vec4i

RED = (255, 0, 0, 255)


def set_pixels(buf):
    return {
        (x, y)
        for y in range(buf.height)
        for x in range(buf.width)
        if buf.get(x, y) != (0, 0, 0, 0)
    }


def test_draw_pixel():
    buf = PixelBuffer.create(3, 3)
    draw_pixel(buf, 1, 2, Vec4i(1, 2, 3, 4))
    assert buf.get(1, 2) == (1, 2, 3, 4)
    assert set_pixels(buf) == {(1, 2)}


def test_draw_pixel_outside_is_ignored():
    buf = PixelBuffer.create(2, 2)
    draw_pixel(buf, -1, 0, RED)
    draw_pixel(buf, 0, 2, RED)
    assert set_pixels(buf) == set()


def test_bad_color_rejected():
    with pytest.raises(ValueError):
        draw_pixel(PixelBuffer.create(1, 1), 0, 0, (1, 2, 3))


def test_fill_box_is_inclusive():
    buf = PixelBuffer.create(5, 5)
    fill_box(buf, 1, 2, 3, 3, RED)
    assert set_pixels(buf) == {(x, y) for x in range(1, 4) for y in range(2, 4)}


def test_flood_fill_stops_at_border():
    buf = PixelBuffer.create(5, 3)
    draw_line(buf, 2, 0, 2, 2, RED)
    flood_fill(buf, 0, 0, (0, 255, 0, 255))
    for y in range(3):
        assert buf.get(0, y) == (0, 255, 0, 255)
        assert buf.get(1, y) == (0, 255, 0, 255)
        assert buf.get(2, y) == RED
        assert buf.get(4, y) == (0, 0, 0, 0)


def test_flood_fill_same_color_is_noop():
    buf = PixelBuffer.create(2, 2)
    flood_fill(buf, 0, 0, (0, 0, 0, 0))
    assert set_pixels(buf) == set()


def test_circle_radius_zero_is_single_pixel():
    buf = PixelBuffer.create(5, 5)
    draw_circle(buf, 2, 2, 0, RED)
    assert set_pixels(buf) == {(2, 2)}


def test_circle_is_symmetric_and_on_radius():
    buf = PixelBuffer.create(11, 11)
    draw_circle(buf, 5, 5, 4, RED)
    points = set_pixels(buf)
    assert points == {(10 - x, y) for x, y in points}
    assert points == {(y, x) for x, y in points}
    for x, y in points:
        assert abs(((x - 5) ** 2 + (y - 5) ** 2) ** 0.5 - 4) < 1


def test_horizontal_line():
    buf = PixelBuffer.create(6, 3)
    draw_line(buf, 0, 1, 4, 1, RED)
    assert set_pixels(buf) == {(x, 1) for x in range(5)}


def test_diagonal_line_both_directions():
    forward = PixelBuffer.create(4, 4)
    backward = PixelBuffer.create(4, 4)
    draw_line(forward, 0, 0, 3, 3, RED)
    draw_line(backward, 3, 3, 0, 0, RED)
    assert set_pixels(forward) == {(i, i) for i in range(4)}
    assert set_pixels(backward) == set_pixels(forward)


def test_gradient_oval():
    buf = PixelBuffer.create(9, 9)
    gradient_oval(buf)
    center = buf.get(4, 4)
    assert center[:3] == (255, 255, 255)
    assert center[3] > 200
    assert buf.get(0, 0) == (0, 0, 0, 0)
    assert buf.get(8, 8) == (0, 0, 0, 0)
    assert buf.get(4, 1)[3] < center[3]