# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Utility functions for font handling."""

import logging

from fontTools.ttLib import TTFont

logger = logging.getLogger(__name__)

# name table IDs tried in order when naming a font in messages
_FULL_NAME_ID = 4
_POSTSCRIPT_NAME_ID = 6


def get_font_name(font: TTFont, fallback: str = "<unknown>") -> str:
    """Returns the declared name of a font.

    Prefers the full name, then the PostScript name.

    Args:
        font: Decoded font.
        fallback: Value to return if the font declares no name.

    Returns:
        Font name as string.
    """
    if "name" not in font:
        return fallback
    try:
        name_table = font["name"]
        for name_id in (_FULL_NAME_ID, _POSTSCRIPT_NAME_ID):
            name = name_table.getDebugName(name_id)
            if name:
                return name
    except Exception as e:
        logger.debug("Could not read name table: %s", e)
    return fallback


def font_size(data: bytes) -> str:
    """Formats a byte count for log messages (e.g. ``"12.3 KiB"``)."""
    if len(data) < 1024:
        return f"{len(data)} B"
    return f"{len(data) / 1024:.1f} KiB"
