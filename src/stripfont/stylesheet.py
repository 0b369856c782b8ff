# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Removal of unused icon rules from stylesheets."""

import logging
import re
from collections.abc import Container
from dataclasses import dataclass, field

from .constants import ICON_CLASS_PREFIX

logger = logging.getLogger(__name__)


def _icon_rule_pattern(prefix: str) -> re.Pattern[str]:
    # Matches ".bi-house:before { ... }" and ".bi-house::before { ... }"
    return re.compile(
        re.escape("." + prefix) + r"([A-Za-z0-9_\-]+)::?before\s*\{[^}]+\}"
    )


_ICON_RULE_RE = _icon_rule_pattern(ICON_CLASS_PREFIX)


@dataclass
class PruneResult:
    """Result of pruning a stylesheet.

    Attributes:
        text: The pruned stylesheet.
        removed: Identifiers whose rules were removed, in text order.
    """

    text: str
    removed: list[str] = field(default_factory=list)


def prune_stylesheet(
    text: str,
    used: Container[str],
    prefix: str = ICON_CLASS_PREFIX,
) -> PruneResult:
    """Removes icon ``:before`` rules for identifiers not in use.

    Only the matched rule fragments are removed. All other text,
    including surrounding whitespace, is kept byte-for-byte.

    Args:
        text: Stylesheet text.
        used: Identifiers to keep.
        prefix: Icon class prefix.

    Returns:
        PruneResult with the new text and the removed identifiers.
    """
    pattern = _ICON_RULE_RE if prefix == ICON_CLASS_PREFIX else _icon_rule_pattern(prefix)
    removed: list[str] = []

    def _replace(match: re.Match[str]) -> str:
        identifier = match.group(1)
        if identifier in used:
            return match.group(0)
        removed.append(identifier)
        return ""

    pruned = pattern.sub(_replace, text)
    logger.debug("Removed %d unused icon rule(s)", len(removed))
    return PruneResult(text=pruned, removed=removed)


def prune(text: str, used: Container[str]) -> str:
    """Returns the stylesheet without rules for unused icons."""
    return prune_stylesheet(text, used).text
