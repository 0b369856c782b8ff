# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Post-build stage that strips unused icons from emitted assets.

The stage has two hooks, mirroring a bundler plugin:

1. ``generate_bundle`` scans every generated code chunk for icon
   classes and freezes the usage set. It may run once per build pass;
   identifiers accumulate in the shared ``UsageRegistry``.
2. ``write_bundle`` prunes every emitted stylesheet and subsets every
   icon font asset, then writes them back to their original paths.

All assets are rewritten in memory first. Files are only written once
every asset succeeded, so a failed font never leaves a pruned
stylesheet behind (or the other way round).
"""

import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from .constants import CODE_SUFFIXES, FONT_ASSET_NAMES, STYLESHEET_SUFFIX
from .exceptions import MissingGlyphError
from .fonts.codec import container_kind_for, decode, encode
from .fonts.rewriter import subset
from .stylesheet import prune_stylesheet
from .usage import UsageRegistry, UsageSet, collect
from .utils import logical_asset_name, validate_whitelist

logger = logging.getLogger(__name__)


@dataclass
class OutputChunk:
    """Generated code emitted by the build.

    Attributes:
        file_name: Path relative to the output directory.
        code: Generated source text.
    """

    file_name: str
    code: str


@dataclass
class OutputAsset:
    """Non-code file emitted by the build.

    Attributes:
        file_name: Path relative to the output directory.
        name: Logical name before content hashing
            (e.g. ``bootstrap-icons.woff2``).
    """

    file_name: str
    name: str | None = None


Bundle = Mapping[str, OutputChunk | OutputAsset]


@dataclass(frozen=True)
class PluginConfig:
    """Configuration of the strip stage.

    Attributes:
        whitelist: Icon identifiers kept even if no generated code
            references them (e.g. classes applied at runtime).
    """

    whitelist: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "whitelist", validate_whitelist(self.whitelist))


@dataclass
class StripResult:
    """Result of one ``write_bundle`` run.

    Attributes:
        stylesheets: Paths of rewritten stylesheets.
        fonts: Paths of rewritten fonts.
        rules_removed: Number of icon rules removed from stylesheets.
        glyphs_kept: Number of glyphs in each subset font.
        bytes_saved: Total bytes saved across all rewritten files.
        warnings: Warnings raised during the run.
    """

    stylesheets: list[str] = field(default_factory=list)
    fonts: list[str] = field(default_factory=list)
    rules_removed: int = 0
    glyphs_kept: int = 0
    bytes_saved: int = 0
    warnings: list[str] = field(default_factory=list)


@dataclass
class _Rewrite:
    """A rewritten file waiting to be written back."""

    path: Path
    data: bytes
    original_size: int
    is_font: bool
    rules_removed: int = 0
    glyphs_kept: int = 0


def bundle_from_directory(output_dir: Path) -> dict[str, OutputChunk | OutputAsset]:
    """Builds a bundle description from a build output directory.

    Files with a code suffix become chunks; all other files become
    assets whose logical name has the content hash stripped.

    Args:
        output_dir: Build output directory.

    Returns:
        Mapping of relative file name to chunk or asset.
    """
    bundle: dict[str, OutputChunk | OutputAsset] = {}
    for path in sorted(output_dir.rglob("*")):
        if not path.is_file():
            continue
        file_name = path.relative_to(output_dir).as_posix()
        if path.suffix.lower() in CODE_SUFFIXES:
            code = path.read_text(encoding="utf-8", errors="replace")
            bundle[file_name] = OutputChunk(file_name=file_name, code=code)
        else:
            bundle[file_name] = OutputAsset(
                file_name=file_name, name=logical_asset_name(file_name)
            )
    logger.debug("Found %d file(s) in %s", len(bundle), output_dir)
    return bundle


class StripFontPlugin:
    """Strips unused icons from the stylesheet and icon font of a build.

    The registry is shared by every build pass of the process; pass the
    same instance to each plugin when a framework builds more than once.
    """

    name = "strip-font"

    def __init__(
        self,
        config: PluginConfig | None = None,
        registry: UsageRegistry | None = None,
        *,
        max_workers: int | None = None,
    ) -> None:
        """Initializes the plugin.

        Args:
            config: Plugin configuration.
            registry: Shared identifier registry. A private one is
                created if omitted.
            max_workers: Thread count for rewriting assets.
        """
        self.config = config or PluginConfig()
        self.registry = registry if registry is not None else UsageRegistry()
        self.max_workers = max_workers
        self.usage: UsageSet | None = None

    def generate_bundle(self, bundle: Bundle) -> UsageSet:
        """Scans the generated code chunks of a bundle.

        Args:
            bundle: Files emitted by the build.

        Returns:
            The frozen usage set for this build.
        """
        chunks = [f for f in bundle.values() if isinstance(f, OutputChunk)]
        self.usage = collect(
            (chunk.code for chunk in chunks),
            self.config.whitelist,
            registry=self.registry,
        )
        logger.info(
            "Found %d icon(s) in use across %d chunk(s)",
            len(self.usage) - 1,
            len(chunks),
        )
        return self.usage

    def write_bundle(self, output_dir: Path, bundle: Bundle) -> StripResult:
        """Rewrites stylesheets and icon fonts of a bundle in place.

        Args:
            output_dir: Directory the bundle was written to.
            bundle: Files emitted by the build.

        Returns:
            StripResult describing the rewritten files.

        Raises:
            StripFontError: If any asset fails. Nothing is written then.
        """
        usage = self.usage if self.usage is not None else self.registry.freeze()
        output_dir = Path(output_dir)

        assets = [f for f in bundle.values() if isinstance(f, OutputAsset)]
        stylesheets = [
            a for a in assets if a.name and a.name.endswith(STYLESHEET_SUFFIX)
        ]
        fonts = [a for a in assets if a.name in FONT_ASSET_NAMES]

        result = StripResult()
        if not fonts:
            warning = "No icon font found in bundle"
            result.warnings.append(warning)
            logger.warning(warning)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(self._prune_stylesheet, output_dir / a.file_name, usage)
                for a in stylesheets
            ]
            futures += [
                executor.submit(
                    self._subset_font, output_dir / a.file_name, a.name, usage
                )
                for a in fonts
            ]
        rewrites = [future.result() for future in futures]

        for rewrite in rewrites:
            rewrite.path.write_bytes(rewrite.data)
            result.bytes_saved += rewrite.original_size - len(rewrite.data)
            if rewrite.is_font:
                result.fonts.append(str(rewrite.path))
                result.glyphs_kept = rewrite.glyphs_kept
            else:
                result.stylesheets.append(str(rewrite.path))
                result.rules_removed += rewrite.rules_removed

        logger.info(
            "Stripped %d stylesheet(s) and %d font(s), saved %d bytes",
            len(result.stylesheets),
            len(result.fonts),
            result.bytes_saved,
        )
        return result

    def _prune_stylesheet(self, path: Path, usage: UsageSet) -> _Rewrite:
        """Prunes one stylesheet in memory."""
        original = path.read_bytes()
        pruned = prune_stylesheet(original.decode("utf-8"), usage)
        data = pruned.text.encode("utf-8")
        logger.debug("Pruned %d rule(s) from %s", len(pruned.removed), path)
        return _Rewrite(
            path=path,
            data=data,
            original_size=len(original),
            is_font=False,
            rules_removed=len(pruned.removed),
        )

    def _subset_font(self, path: Path, name: str, usage: UsageSet) -> _Rewrite:
        """Decodes, subsets and re-encodes one font in memory."""
        original = path.read_bytes()
        kind = container_kind_for(name)
        font = decode(original, kind, str(path))
        try:
            subset(font, usage)
        except MissingGlyphError as e:
            logger.error("Glyph '%s' is used but missing from %s", e.identifier, path)
            raise
        data = encode(font, kind)
        return _Rewrite(
            path=path,
            data=data,
            original_size=len(original),
            is_font=True,
            glyphs_kept=len(usage),
        )
