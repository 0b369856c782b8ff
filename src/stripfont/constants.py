# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Constants for icon usage detection and font stripping."""

# Class prefix of icon classes (e.g. "bi-house" -> "house")
ICON_CLASS_PREFIX = "bi-"

# Identifier of the empty glyph kept in slot 0. Firefox does not render
# the first glyph of the font, so it must never be a real icon.
SENTINEL_IDENTIFIER = ""

# Logical names of the emitted icon font assets
FONT_ASSET_NAMES = frozenset({"bootstrap-icons.woff", "bootstrap-icons.woff2"})

STYLESHEET_SUFFIX = ".css"

# Generated files scanned for class attributes
CODE_SUFFIXES = frozenset({".js", ".mjs", ".cjs", ".html", ".htm"})

# Tables that address glyphs by index or name and are not rebuilt by the
# rewriter. They are dropped so no stale glyph reference survives.
GLYPH_DEPENDENT_TABLES = (
    "GSUB",
    "GPOS",
    "GDEF",
    "JSTF",
    "MATH",
    "kern",
    "hdmx",
    "LTSH",
    "VORG",
    "COLR",
    "SVG ",
    "sbix",
    "CBDT",
    "CBLC",
    "EBDT",
    "EBLC",
    "EBSC",
    "DSIG",
)
