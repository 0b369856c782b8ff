# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Glyph table rewriting for icon fonts.

Reduces a decoded TrueType icon font to the glyphs named by a usage
set. Unlike ``fontTools.subset``, glyphs are renumbered in the
iteration order of the usage set and the ``post`` table is rebuilt
from the icon identifiers, so glyph ``i`` of the result is always
named after the ``i``-th used identifier.

Tables that address glyphs and are rewritten here: ``glyf`` (and
``loca`` on compile), ``hmtx``, ``vmtx``, ``cmap``, ``post`` and
``maxp``. Other glyph-indexed tables are dropped.
"""

import logging
from collections.abc import Iterable

from fontTools.pens.recordingPen import DecomposingRecordingPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont
from fontTools.ttLib.tables._g_l_y_f import Glyph

from ..constants import GLYPH_DEPENDENT_TABLES, SENTINEL_IDENTIFIER
from ..exceptions import MissingGlyphError, SubsetError
from .utils import get_font_name

logger = logging.getLogger(__name__)


def glyph_names(font: TTFont) -> list[str]:
    """Returns the naming table of a font as a list.

    fontTools gives every glyph a unique, non-empty internal name and
    keeps the actual PostScript name in ``post.mapping`` when the two
    differ (empty or duplicate names). This returns the PostScript
    names, indexed by glyph ID.

    Args:
        font: Decoded font.

    Returns:
        Glyph names by glyph index.
    """
    mapping = getattr(font["post"], "mapping", None) or {}
    return [mapping.get(name, name) for name in font.getGlyphOrder()]


def glyph_records(font: TTFont) -> dict[int, Glyph]:
    """Returns the glyph records of a font keyed by glyph index."""
    glyf = font["glyf"]
    return {index: glyf[name] for index, name in enumerate(font.getGlyphOrder())}


def check_consistency(font: TTFont) -> list[str]:
    """Checks the cross-table glyph count invariants of a font.

    Args:
        font: Decoded font.

    Returns:
        List of problems; empty if the font is consistent.
    """
    problems: list[str] = []
    order = font.getGlyphOrder()
    count = font["maxp"].numGlyphs

    if len(order) != count:
        problems.append(f"glyph order has {len(order)} entries, maxp declares {count}")

    glyphs = font["glyf"].glyphs
    if len(glyphs) != len(order) or set(glyphs) != set(order):
        problems.append(
            f"glyf has {len(glyphs)} glyph(s) not matching the glyph order"
        )

    names = glyph_names(font)
    if len(names) != len(order):
        problems.append(f"naming table has {len(names)} entries for {len(order)} glyphs")

    for tag in ("hmtx", "vmtx"):
        if tag in font:
            missing = [name for name in order if name not in font[tag].metrics]
            if missing:
                problems.append(f"{tag} lacks metrics for {len(missing)} glyph(s)")

    if "cmap" in font:
        known = set(order)
        for table in font["cmap"].tables:
            stale = [
                name for name in getattr(table, "cmap", {}).values() if name not in known
            ]
            if stale:
                problems.append(
                    f"cmap format {table.format} references {len(stale)} unknown glyph(s)"
                )

    return problems


def _internal_glyph_name(identifier: str, index: int, taken: set[str]) -> str:
    """Returns a unique, non-empty fontTools glyph name for an identifier.

    Follows fontTools' own convention for empty and duplicate names so a
    re-decoded font gets the same internal names.
    """
    name = identifier or f"glyph{index:05d}"
    if name not in taken:
        return name
    n = 1
    while f"{name}#{n}" in taken:
        n += 1
    return f"{name}#{n}"


def _decompose(glyph_set, glyph_name: str) -> Glyph:
    """Flattens a composite glyph into a simple outline."""
    recording = DecomposingRecordingPen(glyph_set)
    glyph_set[glyph_name].draw(recording)
    pen = TTGlyphPen(None)
    recording.replay(pen)
    return pen.glyph()


def _resolve_sources(font: TTFont, used: Iterable[str]) -> list[tuple[str, str]]:
    """Maps each used identifier to the internal name of its source glyph.

    Args:
        font: Decoded font.
        used: Identifiers in the order they will be numbered.

    Returns:
        List of ``(identifier, source glyph name)`` pairs.

    Raises:
        MissingGlyphError: If an identifier has no glyph.
        SubsetError: If two identifiers resolve to the same glyph.
    """
    order = font.getGlyphOrder()
    by_name: dict[str, str] = {}
    for internal, ps_name in zip(order, glyph_names(font)):
        if ps_name in by_name:
            # Ambiguous naming table; the lowest glyph index wins
            logger.warning(
                "Duplicate glyph name '%s' in font %s, using glyph '%s'",
                ps_name,
                get_font_name(font),
                by_name[ps_name],
            )
            continue
        by_name[ps_name] = internal

    selected: list[tuple[str, str]] = []
    claimed: dict[str, str] = {}
    for identifier in used:
        source = by_name.get(identifier)
        if source is None and identifier == SENTINEL_IDENTIFIER and order:
            # No glyph carries the empty name: reuse slot 0 (.notdef)
            source = order[0]
        if source is None:
            raise MissingGlyphError(identifier)
        if source in claimed:
            raise SubsetError(
                f"Identifiers '{claimed[source]}' and '{identifier}' "
                f"both resolve to glyph '{source}'"
            )
        claimed[source] = identifier
        selected.append((identifier, source))
    return selected


def subset(font: TTFont, used: Iterable[str]) -> TTFont:
    """Reduces a font to the glyphs named by ``used``.

    Glyph ``i`` of the result is the glyph whose name equals the
    ``i``-th identifier of ``used``; the ``post`` table names it after
    that identifier and every other glyph is discarded. Glyph count,
    glyph order, ``glyf``, metrics and ``cmap`` stay consistent.

    The font is modified in place and returned.

    Args:
        font: Decoded TrueType font.
        used: Identifiers to keep, in output glyph order.

    Returns:
        The same font object, reduced.

    Raises:
        MissingGlyphError: If a used identifier has no glyph.
        SubsetError: If the selection cannot be mapped to distinct glyphs.
    """
    original_count = len(font.getGlyphOrder())
    selected = _resolve_sources(font, used)

    new_order: list[str] = []
    renames: dict[str, str] = {}
    ps_mapping: dict[str, str] = {}
    for index, (identifier, source) in enumerate(selected):
        internal = _internal_glyph_name(identifier, index, set(new_order))
        new_order.append(internal)
        renames[source] = internal
        if internal != identifier:
            ps_mapping[internal] = identifier

    # Outlines must be read before any table is touched
    glyf = font["glyf"]
    glyph_set = font.getGlyphSet()
    glyphs: dict[str, Glyph] = {}
    for source, internal in renames.items():
        glyph = glyf[source]
        if glyph.isComposite():
            logger.debug("Decomposing composite glyph '%s'", source)
            glyph = _decompose(glyph_set, source)
        glyphs[internal] = glyph

    for tag in ("hmtx", "vmtx"):
        if tag in font:
            metrics = font[tag].metrics
            font[tag].metrics = {renames[src]: metrics[src] for src in renames}

    if "cmap" in font:
        cmap = font["cmap"]
        tables = []
        for table in cmap.tables:
            # Variation sequences (format 14) and unparsed subtables are dropped
            if table.format == 14 or not hasattr(table, "cmap"):
                continue
            table.cmap = {
                code: renames[name]
                for code, name in table.cmap.items()
                if name in renames
            }
            tables.append(table)
        cmap.tables = tables

    for tag in GLYPH_DEPENDENT_TABLES:
        if tag in font:
            logger.debug("Dropping glyph-indexed table '%s'", tag)
            del font[tag]

    font.setGlyphOrder(new_order)
    glyf.glyphs = glyphs

    post = font["post"]
    post.formatType = 2.0
    post.extraNames = []
    post.mapping = ps_mapping

    font["maxp"].numGlyphs = len(new_order)

    logger.info(
        "Subset font %s: %d -> %d glyph(s)",
        get_font_name(font),
        original_count,
        len(new_order),
    )
    return font
