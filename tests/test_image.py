import pytest

from demofw.draw import draw_pixel
from demofw.image import Image


def test_create_is_transparent():
    image = Image.create(3, 2)
    assert image.width == 3
    assert image.height == 2
    assert image.bytes_per_pixel == 4
    assert image.pixels.data == bytearray(24)


def test_clear():
    image = Image.create(2, 2)
    draw_pixel(image.pixels, 1, 1, (1, 2, 3, 4))
    image.clear()
    assert image.pixels.get(1, 1) == (0, 0, 0, 0)


def test_blit_copies_region():
    src = Image.create(4, 4)
    draw_pixel(src.pixels, 1, 1, (9, 8, 7, 255))
    dst = Image.create(4, 4)
    src.blit(dst, 1, 1, 2, 2, 2, 2)
    assert dst.pixels.get(2, 2) == (9, 8, 7, 255)
    assert dst.pixels.get(1, 1) == (0, 0, 0, 0)


def test_blit_ext_respects_protected_colors():
    src = Image.create(2, 1)
    draw_pixel(src.pixels, 0, 0, (50, 60, 70, 255))
    draw_pixel(src.pixels, 1, 0, (50, 60, 70, 255))
    dst = Image.create(2, 1)
    draw_pixel(dst.pixels, 0, 0, (1, 2, 3, 255))
    src.blit_ext(dst, 0, 0, 2, 1, protected_colors=[(1, 2, 3)])
    assert dst.pixels.get(0, 0) == (1, 2, 3, 255)
    assert dst.pixels.get(1, 0) == (50, 60, 70, 255)


def test_init_sprite_geometry():
    image = Image.create(16, 8)
    sprite = image.init_sprite(2, 4, 2, 8, 4)
    assert image.sprites[2] is sprite
    assert len(image.sprites) == 3
    assert (sprite.bottom_right.x, sprite.bottom_right.y) == (4 + 8, 2 + 4)
    assert sprite.tex_top_left.x * image.width == pytest.approx(4)
    assert sprite.tex_top_left.y * image.height == pytest.approx(2)
    assert sprite.tex_bottom_right.x * image.width == pytest.approx(12)
    assert sprite.tex_bottom_right.y * image.height == pytest.approx(6)


def test_init_sprite_full_image_spans_unit_square():
    image = Image.create(5, 3)
    sprite = image.init_sprite(0, 0, 0, 5, 3)
    assert (sprite.tex_bottom_right.x, sprite.tex_bottom_right.y) == (1.0, 1.0)


def test_init_sprite_negative_index():
    with pytest.raises(IndexError):
        Image.create(2, 2).init_sprite(-1, 0, 0, 1, 1)