# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pytest fixtures for the stripfont test suite."""

from pathlib import Path

import pytest
from font_helpers import build_icon_font, font_to_bytes

SAMPLE_CHUNK = (
    'const a = `<i class="bi bi-home"></i>`;\n'
    'const b = `<button className="btn bi-search"></button>`;\n'
    'const c = `<span class="badge">bi-user</span>`;\n'
)

SAMPLE_STYLESHEET = r""".bi::before,
[class^="bi-"]::before {
  display: inline-block;
  font-family: bootstrap-icons !important;
}
.bi-home::before { content: "\f101"; }
.bi-search::before { content: "\f102"; }
.bi-user::before { content: "\f103"; }
body { margin: 0; }
"""


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Temporary directory for tests.

    Args:
        tmp_path: Pytest-provided temporary directory.

    Returns:
        Path to the temporary directory.
    """
    return tmp_path


@pytest.fixture
def icon_ttf_bytes() -> bytes:
    """Icon font with glyphs .notdef, home, search, user as TTF.

    Returns:
        Font data as bytes.
    """
    return font_to_bytes(build_icon_font())


@pytest.fixture
def icon_woff_bytes() -> bytes:
    """The icon font as WOFF.

    Returns:
        Font data as bytes.
    """
    return font_to_bytes(build_icon_font(), "woff")


@pytest.fixture
def icon_woff2_bytes() -> bytes:
    """The icon font as WOFF2.

    Returns:
        Font data as bytes.
    """
    return font_to_bytes(build_icon_font(), "woff2")


@pytest.fixture
def dist_dir(tmp_dir: Path, icon_woff_bytes: bytes, icon_woff2_bytes: bytes) -> Path:
    """Build output directory with one chunk, a stylesheet and both fonts.

    Args:
        tmp_dir: Temporary directory.
        icon_woff_bytes: WOFF font data.
        icon_woff2_bytes: WOFF2 font data.

    Returns:
        Path to the output directory.
    """
    dist = tmp_dir / "dist"
    assets = dist / "assets"
    assets.mkdir(parents=True)
    (assets / "index-Ab12Cd34.js").write_text(SAMPLE_CHUNK, encoding="utf-8")
    (assets / "index-Ef56Gh78.css").write_text(SAMPLE_STYLESHEET, encoding="utf-8")
    (assets / "bootstrap-icons-Xy12Zw34.woff").write_bytes(icon_woff_bytes)
    (assets / "bootstrap-icons-Qr56St78.woff2").write_bytes(icon_woff2_bytes)
    (dist / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")
    return dist
