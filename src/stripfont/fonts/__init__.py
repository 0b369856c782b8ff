# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Icon font decoding, subsetting and encoding."""

from ..exceptions import (
    FontDecodeError,
    FontEncodeError,
    MissingGlyphError,
    SubsetError,
)
from .codec import ContainerKind, container_kind_for, decode, encode
from .rewriter import check_consistency, glyph_names, glyph_records, subset
from .utils import get_font_name

__all__ = [
    # Exceptions
    "FontDecodeError",
    "FontEncodeError",
    "MissingGlyphError",
    "SubsetError",
    # Codec
    "ContainerKind",
    "container_kind_for",
    "decode",
    "encode",
    # Rewriting
    "check_consistency",
    "glyph_names",
    "glyph_records",
    "subset",
    # Helpers
    "get_font_name",
]
