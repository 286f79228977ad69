import pytest

from demofw.font import FontFace, FontGlyph
from demofw.image import Image

ADVANCE = 6


def make_face():
    glyphs = [
        FontGlyph(x=(i % 16) * 8, y=(i // 16) * 8, width=5, height=7,
                  xoffset=1, yoffset=2, xadvance=ADVANCE)
        for i in range(256)
    ]
    return FontFace(line_height=10, texture_width=128, texture_height=128, glyphs=glyphs)


def test_tex_coords_match_pixel_positions():
    face = make_face()
    g = face.glyphs[ord("A")]
    assert g.left * face.texture_width == pytest.approx(g.x)
    assert g.top * face.texture_height == pytest.approx(g.y)
    assert g.right * face.texture_width == pytest.approx(g.x + g.width)
    assert g.bottom * face.texture_height == pytest.approx(g.y + g.height)


def test_attach_image():
    face = make_face()
    image = Image.create(128, 128)
    face.attach_image(image)
    assert face.image is image
    assert face.glyphs[0].right * 128 == pytest.approx(face.glyphs[0].width)


def test_calc_line_width():
    face = make_face()
    assert face.calc_line_width("hello") == len("hello") * ADVANCE
    assert face.calc_line_width("") == 0
    assert face.calc_line_width(b"ab") == face.calc_line_width("ab")


def test_line_quads_layout():
    face = make_face()
    quads = face.line_quads("abc", 10, 20)
    assert len(quads) == 3
    first, second = quads[0], quads[1]
    glyph = face.glyphs[ord("a")]
    assert first.left == 10 + glyph.xoffset
    assert first.top == 20 + glyph.yoffset
    assert first.right - first.left == glyph.width
    assert first.bottom - first.top == glyph.height
    assert second.left - first.left == ADVANCE
    assert first.tex_left == glyph.left


def test_text_quads_full_and_lines():
    face = make_face()
    quads = face.text_quads(["ab", "cd"], 0, 0, 1.0)
    assert len(quads) == 4
    assert quads[2].top - quads[0].top == face.line_height


def test_text_quads_partial_completion():
    face = make_face()
    assert len(face.text_quads(["ab", "cd"], 0, 0, 0.5)) == 2
    assert face.text_quads(["ab", "cd"], 0, 0, 0.0) == []


def test_text_quads_no_text():
    assert make_face().text_quads(["", ""], 0, 0, 1.0) == []