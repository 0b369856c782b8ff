# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""stripfont - Strip unused icons from the icon font of a built web app."""

from importlib.metadata import PackageNotFoundError, version

from .build import (
    OutputAsset,
    OutputChunk,
    PluginConfig,
    StripFontPlugin,
    StripResult,
    bundle_from_directory,
)
from .exceptions import (
    ConfigurationError,
    FontDecodeError,
    FontEncodeError,
    MissingGlyphError,
    StripFontError,
    SubsetError,
)
from .stylesheet import PruneResult, prune, prune_stylesheet
from .usage import UsageRegistry, UsageSet, collect

try:
    __version__ = version("stripfont")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "__version__",
    "collect",
    "prune",
    "prune_stylesheet",
    "bundle_from_directory",
    "OutputAsset",
    "OutputChunk",
    "PluginConfig",
    "PruneResult",
    "StripFontPlugin",
    "StripResult",
    "UsageRegistry",
    "UsageSet",
    "StripFontError",
    "ConfigurationError",
    "FontDecodeError",
    "FontEncodeError",
    "MissingGlyphError",
    "SubsetError",
]
