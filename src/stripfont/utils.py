# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Utility functions for stripfont."""

import logging
import re
import sys
from collections.abc import Iterable
from typing import Any

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Bundlers append an 8 character content hash to emitted asset names
_HASHED_NAME_RE = re.compile(r"^(?P<stem>.+)-[A-Za-z0-9_-]{8}(?P<suffix>\.[^./]+)$")


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configures logging for stripfont.

    Args:
        verbose: If True, DEBUG level is used.
        quiet: If True, only ERROR and higher are output.
            Takes precedence over verbose.

    Returns:
        Configured logger for stripfont.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    stripfont_logger = logging.getLogger("stripfont")
    stripfont_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    stripfont_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    stripfont_logger.addHandler(handler)

    logger.debug("Logging configured with level: %s", logging.getLevelName(level))
    return stripfont_logger


def validate_whitelist(whitelist: Any) -> tuple[str, ...]:
    """Validates and normalizes the ``whitelist`` option.

    Args:
        whitelist: Sequence of icon identifiers, or None.

    Returns:
        Tuple of identifiers in the given order.

    Raises:
        ConfigurationError: If whitelist is a bare string or contains
            anything other than strings.
    """
    if whitelist is None:
        return ()
    if isinstance(whitelist, (str, bytes)) or not isinstance(whitelist, Iterable):
        raise ConfigurationError(
            f"whitelist must be a sequence of strings, got {type(whitelist).__name__}"
        )

    items = tuple(whitelist)
    for item in items:
        if not isinstance(item, str):
            raise ConfigurationError(
                f"whitelist entries must be strings, got {item!r}"
            )
    return items


def logical_asset_name(file_name: str) -> str:
    """Returns the logical name of an emitted asset.

    Strips the directory part and a bundler content hash, so
    ``assets/bootstrap-icons-BfDeaU_d.woff2`` becomes
    ``bootstrap-icons.woff2``.

    Args:
        file_name: File name relative to the output directory.

    Returns:
        Logical asset name.
    """
    base = file_name.replace("\\", "/").rsplit("/", 1)[-1]
    match = _HASHED_NAME_RE.match(base)
    if match:
        return match.group("stem") + match.group("suffix")
    return base
