# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Icon usage detection in generated application code.

Scans generated markup and scripts for ``class="..."`` and
``className="..."`` attributes and records every class token that
carries the icon prefix. The resulting identifiers drive both
stylesheet pruning and font subsetting.
"""

import logging
import re
from collections.abc import Iterable, Iterator

from .constants import ICON_CLASS_PREFIX, SENTINEL_IDENTIFIER

logger = logging.getLogger(__name__)

# Plain HTML spelling and the JSX spelling of the class attribute
_CLASS_ATTRIBUTE_RE = re.compile(r'(?:class|className)="([^"]+)"')


class UsageSet:
    """Frozen, ordered set of icon identifiers in use.

    Iteration yields identifiers in first-seen order with the empty
    sentinel first. This order becomes the glyph index order of the
    subset font, so it is fixed for a given registry state.
    """

    __slots__ = ("_identifiers", "_members")

    def __init__(self, identifiers: Iterable[str] = ()) -> None:
        ordered = dict.fromkeys(identifiers)
        ordered.pop(SENTINEL_IDENTIFIER, None)
        self._identifiers = (SENTINEL_IDENTIFIER, *ordered)
        self._members = frozenset(self._identifiers)

    def __iter__(self) -> Iterator[str]:
        return iter(self._identifiers)

    def __len__(self) -> int:
        return len(self._identifiers)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._members

    def __getitem__(self, index: int) -> str:
        return self._identifiers[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UsageSet):
            return self._members == other._members
        if isinstance(other, (set, frozenset)):
            return self._members == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"UsageSet({list(self._identifiers)!r})"


def scan_text(text: str, prefix: str = ICON_CLASS_PREFIX) -> Iterator[str]:
    """Yields icon identifiers referenced by class attributes in text.

    Args:
        text: Generated code or markup.
        prefix: Icon class prefix to look for.

    Yields:
        Identifiers with the prefix stripped, in order of appearance.
        Duplicates are not filtered.
    """
    for match in _CLASS_ATTRIBUTE_RE.finditer(text):
        for class_name in match.group(1).split():
            if class_name.startswith(prefix):
                yield class_name[len(prefix) :]


class UsageRegistry:
    """Accumulates icon identifiers across build passes.

    A single registry is owned by the caller and handed to every build
    pass of one process. Frameworks that run two passes (e.g. a server
    and a client build) would otherwise see different identifiers in
    each pass and emit inconsistent fonts.
    """

    def __init__(self) -> None:
        self._identifiers: dict[str, None] = {}

    def add(self, identifiers: Iterable[str]) -> None:
        """Appends identifiers, keeping first-seen order."""
        for identifier in identifiers:
            self._identifiers.setdefault(identifier, None)

    def scan(self, text: str, prefix: str = ICON_CLASS_PREFIX) -> None:
        """Scans one code artifact and records its icon identifiers."""
        self.add(scan_text(text, prefix))

    def freeze(self) -> UsageSet:
        """Returns the current identifiers with the sentinel first."""
        return UsageSet(self._identifiers)

    def __len__(self) -> int:
        return len(self._identifiers)


def collect(
    artifacts: Iterable[str],
    whitelist: Iterable[str] = (),
    *,
    prefix: str = ICON_CLASS_PREFIX,
    registry: UsageRegistry | None = None,
) -> UsageSet:
    """Collects the icon identifiers used by the generated code.

    Args:
        artifacts: Text of every generated code artifact.
        whitelist: Identifiers to keep even if never referenced
            statically (e.g. classes applied at runtime).
        prefix: Icon class prefix.
        registry: Optional shared registry. When given, identifiers from
            earlier calls are kept and the new ones are appended.

    Returns:
        Frozen usage set with the empty sentinel first.
    """
    if registry is None:
        registry = UsageRegistry()

    scanned = 0
    for text in artifacts:
        registry.scan(text, prefix)
        scanned += 1

    registry.add(whitelist)
    usage = registry.freeze()
    logger.debug(
        "Collected %d icon identifier(s) from %d artifact(s)",
        len(usage) - 1,
        scanned,
    )
    return usage
