# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Conversion between font container bytes and decoded fonts.

Parsing and serialization are done by fontTools. WOFF2 data is
inflated to a plain sfnt with ``fontTools.ttLib.woff2`` before parsing
and compressed again after serialization, so the rewriter always works
on an uncompressed TrueType structure. WOFF (zlib) and bare sfnt data
are parsed and written by ``TTFont`` directly.
"""

import enum
import logging
from io import BytesIO
from pathlib import PurePosixPath

from fontTools.ttLib import TTFont, woff2

from ..exceptions import FontDecodeError, FontEncodeError
from .rewriter import check_consistency
from .utils import font_size, get_font_name

logger = logging.getLogger(__name__)


class ContainerKind(enum.Enum):
    """On-disk wrapping of a font."""

    SFNT = "sfnt"
    WOFF = "woff"
    WOFF2 = "woff2"


_SUFFIX_KINDS = {
    ".ttf": ContainerKind.SFNT,
    ".otf": ContainerKind.SFNT,
    ".woff": ContainerKind.WOFF,
    ".woff2": ContainerKind.WOFF2,
}


def container_kind_for(file_name: str) -> ContainerKind:
    """Determines the container kind from a font file name.

    Args:
        file_name: Font file name or path.

    Returns:
        The matching ContainerKind.

    Raises:
        FontDecodeError: If the suffix is not a known font container.
    """
    suffix = PurePosixPath(file_name.replace("\\", "/")).suffix.lower()
    kind = _SUFFIX_KINDS.get(suffix)
    if kind is None:
        raise FontDecodeError(file_name, f"unknown font container '{suffix}'")
    return kind


def decode(data: bytes, kind: ContainerKind, path: str = "<memory>") -> TTFont:
    """Decodes font bytes into a fully loaded TTFont.

    Args:
        data: Raw bytes of the font asset.
        kind: Container kind of ``data``.
        path: Asset path used in error messages.

    Returns:
        Decoded font with every table decompiled.

    Raises:
        FontDecodeError: If the bytes cannot be parsed or the font does
            not have TrueType outlines.
    """
    try:
        if kind is ContainerKind.WOFF2:
            sfnt = BytesIO()
            woff2.decompress(BytesIO(data), sfnt)
            data = sfnt.getvalue()
            logger.debug("Inflated %s to %s", path, font_size(data))

        font = TTFont(BytesIO(data), recalcTimestamp=False)
        # Surface table corruption here, not halfway through subsetting
        font.ensureDecompiled()
    except Exception as e:
        logger.error("Unable to import font %s: %s", path, e)
        raise FontDecodeError(path, str(e)) from e

    if "glyf" not in font:
        raise FontDecodeError(path, "only TrueType (glyf) outlines are supported")
    if "fvar" in font:
        raise FontDecodeError(path, "variable fonts are not supported")
    if "post" not in font:
        raise FontDecodeError(path, "font has no post table")

    logger.debug(
        "Decoded %s (%s, %d glyphs)",
        path,
        kind.value,
        len(font.getGlyphOrder()),
    )
    return font


def encode(font: TTFont, kind: ContainerKind) -> bytes:
    """Serializes a decoded font into the given container.

    Args:
        font: Decoded (and possibly rewritten) font.
        kind: Target container kind.

    Returns:
        The font as bytes.

    Raises:
        FontEncodeError: If the font is inconsistent or cannot be
            serialized.
    """
    font_name = get_font_name(font)

    problems = check_consistency(font)
    if problems:
        logger.error("Unable to export font %s: %s", font_name, "; ".join(problems))
        raise FontEncodeError(font_name, "; ".join(problems))

    try:
        font.flavor = "woff" if kind is ContainerKind.WOFF else None
        buffer = BytesIO()
        font.save(buffer)
        data = buffer.getvalue()

        if kind is ContainerKind.WOFF2:
            compressed = BytesIO()
            woff2.compress(BytesIO(data), compressed)
            data = compressed.getvalue()
    except Exception as e:
        logger.error("Unable to export font %s: %s", font_name, e)
        raise FontEncodeError(font_name, str(e)) from e

    logger.debug("Encoded %s as %s (%s)", font_name, kind.value, font_size(data))
    return data
