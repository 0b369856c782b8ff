# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Shared helper functions for font-related tests."""

from io import BytesIO

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

ICON_NAMES = (".notdef", "home", "search", "user")

# First private use codepoint assigned to icons
PUA_START = 0xF100


def _rectangle(width: int):
    """Returns a simple glyph with one rectangular contour."""
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100 + width, 0))
    pen.lineTo((100 + width, 700))
    pen.lineTo((100, 700))
    pen.closePath()
    return pen.glyph()


def build_icon_font(
    names=ICON_NAMES,
    *,
    composite: tuple[str, str] | None = None,
    post_names: dict[str, str] | None = None,
) -> TTFont:
    """Builds a small TrueType icon font in memory.

    Every glyph except ``.notdef`` is a rectangle whose width depends on
    its position, so outlines can be told apart after renumbering.
    Icons are mapped to consecutive private use codepoints.

    Args:
        names: Glyph order.
        composite: Optional ``(name, base)`` pair; adds a composite glyph
            ``name`` that references ``base``.
        post_names: Optional overrides of PostScript names written to the
            ``post`` table (glyph name -> PostScript name).

    Returns:
        The built font.
    """
    order = list(names)
    if composite is not None:
        order.append(composite[0])

    glyphs = {}
    for index, name in enumerate(names):
        if name == ".notdef":
            glyphs[name] = TTGlyphPen(None).glyph()
        else:
            glyphs[name] = _rectangle(100 * index)
    if composite is not None:
        pen = TTGlyphPen(glyphs)
        pen.addComponent(composite[1], (1, 0, 0, 1, 50, 0))
        glyphs[composite[0]] = pen.glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(order)
    fb.setupCharacterMap(
        {
            PUA_START + index: name
            for index, name in enumerate(order)
            if name != ".notdef"
        }
    )
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (1000, 0) for name in order})
    fb.setupHorizontalHeader(ascent=850, descent=-150)
    fb.setupNameTable(
        {
            "familyName": "Test Icons",
            "styleName": "Regular",
            "fullName": "Test Icons Regular",
            "psName": "TestIcons-Regular",
        }
    )
    fb.setupOS2(
        sTypoAscender=850,
        sTypoDescender=-150,
        sTypoLineGap=0,
        usWinAscent=850,
        usWinDescent=150,
    )
    fb.setupPost()
    if post_names:
        fb.font["post"].mapping = dict(post_names)
    return fb.font


def font_to_bytes(font: TTFont, flavor: str | None = None) -> bytes:
    """Serializes a font with the given flavor (None, "woff", "woff2")."""
    font.flavor = flavor
    buffer = BytesIO()
    font.save(buffer)
    return buffer.getvalue()


def load_font(data: bytes) -> TTFont:
    """Parses font bytes of any flavor."""
    return TTFont(BytesIO(data))


def glyph_coordinates(font: TTFont, glyph_name: str) -> list[tuple[int, int]]:
    """Returns the outline points of a simple glyph."""
    glyph = font["glyf"][glyph_name]
    if glyph.numberOfContours == 0:
        return []
    return [tuple(point) for point in glyph.coordinates]
