"""Bitmap font faces: glyph metrics, line widths and glyph quad layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from .image import Image

Text = Union[str, bytes]


def _codes(text: Text) -> bytes:
    return text if isinstance(text, bytes) else text.encode("latin-1")


@dataclass(eq=False)
class FontGlyph:
    """Placement of one character in the font texture, in pixels."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    xoffset: int = 0
    yoffset: int = 0
    xadvance: int = 0
    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0


@dataclass(frozen=True)
class GlyphQuad:
    """Screen rectangle of a placed glyph with its texture coordinates."""

    left: int
    top: int
    right: int
    bottom: int
    tex_left: float
    tex_top: float
    tex_right: float
    tex_bottom: float


@dataclass(eq=False)
class FontFace:
    """A font whose glyphs are indexed by character code."""

    line_height: int
    texture_width: int
    texture_height: int
    glyphs: Sequence[FontGlyph] = field(default_factory=list)
    outline: int = 0
    image: Optional[Image] = None

    def __post_init__(self) -> None:
        self._compute_tex_coords()

    def _compute_tex_coords(self) -> None:
        tw, th = float(self.texture_width), float(self.texture_height)
        for g in self.glyphs:
            g.left = g.x / tw
            g.top = g.y / th
            g.right = (g.x + g.width) / tw
            g.bottom = (g.y + g.height) / th

    def attach_image(self, image: Image) -> None:
        """Bind the texture image and refresh glyph texture coordinates."""
        self.image = image
        self._compute_tex_coords()

    def calc_line_width(self, text: Text) -> int:
        """Return the total advance of ``text`` in pixels."""
        return sum(self.glyphs[c].xadvance for c in _codes(text))

    @staticmethod
    def _quad(glyph: FontGlyph, x: int, y: int) -> GlyphQuad:
        left = x + glyph.xoffset
        top = y + glyph.yoffset
        return GlyphQuad(left, top, left + glyph.width, top + glyph.height,
                         glyph.left, glyph.top, glyph.right, glyph.bottom)

    def line_quads(self, text: Text, x: int, y: int) -> list[GlyphQuad]:
        """Lay out one line of text starting at ``(x, y)``."""
        quads = []
        advance = 0
        for c in _codes(text):
            glyph = self.glyphs[c]
            quads.append(self._quad(glyph, x + advance, y))
            advance += glyph.xadvance
        return quads

    def text_quads(self, lines: Sequence[Text], x: int, y: int,
                   completion: float = 1.0) -> list[GlyphQuad]:
        """Lay out several lines, showing only the first ``completion`` share of characters."""
        encoded = [_codes(line) for line in lines]
        total = sum(len(line) for line in encoded)
        quads: list[GlyphQuad] = []
        processed = 0
        for row, line in enumerate(encoded):
            line_y = y + row * self.line_height
            advance = 0
            for i, c in enumerate(line):
                if (i + processed) / total >= completion:
                    break
                glyph = self.glyphs[c]
                quads.append(self._quad(glyph, x + advance, line_y))
                advance += glyph.xadvance
            processed += len(line)
        return quads