# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Custom exceptions for stripfont."""


class StripFontError(Exception):
    """Base exception for all stripfont errors."""


class ConfigurationError(StripFontError):
    """Invalid plugin configuration."""


class FontDecodeError(StripFontError):
    """Font bytes could not be parsed into a usable font.

    Attributes:
        path: Path (or asset name) of the offending font.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Unable to import font {path}: {reason}")


class SubsetError(StripFontError):
    """Error while rewriting the glyph tables of a font."""


class MissingGlyphError(SubsetError):
    """A used icon identifier has no glyph in the font.

    Attributes:
        identifier: The icon identifier that could not be resolved.
    """

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Glyph {identifier} not found")


class FontEncodeError(StripFontError):
    """A rewritten font could not be serialized.

    Attributes:
        font_name: Declared full name of the font.
    """

    def __init__(self, font_name: str, reason: str) -> None:
        self.font_name = font_name
        super().__init__(f"Unable to export font {font_name}: {reason}")
