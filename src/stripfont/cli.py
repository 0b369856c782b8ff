# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Click-based CLI for stripfont.

This module provides the command-line interface for stripping
unused icons from a build output directory.
"""

# Standard Library
import logging
import sys
from pathlib import Path

# Third Party
import click
from colorama import Fore, Style, init

# Local
from . import __version__
from .build import PluginConfig, StripFontPlugin, StripResult, bundle_from_directory
from .exceptions import ConfigurationError, StripFontError
from .usage import UsageRegistry
from .utils import setup_logging

EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
EXIT_DIR_NOT_FOUND = 2
EXIT_STRIP_FAILED = 3
EXIT_PERMISSION_ERROR = 5

logger = logging.getLogger(__name__)


def print_success(msg: str) -> None:
    """Prints a success message in green.

    Args:
        msg: The message to output.
    """
    click.echo(f"{Fore.GREEN}\u2713{Style.RESET_ALL} {msg}")


def print_error(msg: str) -> None:
    """Prints an error message in red.

    Args:
        msg: The error message to output.
    """
    click.echo(f"{Fore.RED}\u2717 Error:{Style.RESET_ALL} {msg}", err=True)


def print_warning(msg: str) -> None:
    """Prints a warning in yellow.

    Args:
        msg: The warning to output.
    """
    click.echo(f"{Fore.YELLOW}\u26a0{Style.RESET_ALL} {msg}")


def _print_result(result: StripResult, icon_count: int, quiet: bool) -> None:
    """Prints the strip result in a formatted way.

    Args:
        result: The strip result.
        icon_count: Number of icons in use (without the empty glyph).
        quiet: If True, only output errors.
    """
    if quiet:
        return

    print_success(f"{icon_count} icon(s) in use")
    for path in result.stylesheets:
        print_success(f"Pruned stylesheet: {path}")
    for path in result.fonts:
        print_success(f"Subset font: {path} ({result.glyphs_kept} glyphs)")
    click.echo(
        f"  {result.rules_removed} rule(s) removed, {result.bytes_saved} bytes saved"
    )
    for warning in result.warnings:
        print_warning(warning)


@click.command()
@click.argument("output_dir", required=False, type=click.Path())
@click.option(
    "-w",
    "--whitelist",
    multiple=True,
    metavar="NAME",
    help="Icon to keep even if no generated code references it (repeatable)",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Only output errors",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Detailed output",
)
@click.version_option(version=__version__)
def main(
    output_dir: str | None,
    whitelist: tuple[str, ...],
    quiet: bool,
    verbose: bool,
) -> None:
    """Strips unused icons from the icon font and stylesheets of a build.

    OUTPUT_DIR is the directory the web application was built into.
    Stylesheets and fonts are rewritten in place.
    """
    # Initialize colorama for Windows compatibility
    init()

    if output_dir is None:
        click.echo(click.get_current_context().get_help())
        sys.exit(EXIT_GENERAL_ERROR)

    setup_logging(verbose=verbose, quiet=quiet)

    output_path = Path(output_dir)
    if not output_path.is_dir():
        print_error(f"Invalid directory: {output_dir}")
        sys.exit(EXIT_DIR_NOT_FOUND)

    try:
        plugin = StripFontPlugin(PluginConfig(whitelist=whitelist), UsageRegistry())
        bundle = bundle_from_directory(output_path)

        if not quiet:
            click.echo(f"Stripping icons in {output_path}...")

        usage = plugin.generate_bundle(bundle)
        result = plugin.write_bundle(output_path, bundle)
        _print_result(result, len(usage) - 1, quiet)
        exit_code = EXIT_SUCCESS

    except ConfigurationError as e:
        print_error(str(e))
        exit_code = EXIT_GENERAL_ERROR
    except FileNotFoundError as e:
        print_error(str(e))
        exit_code = EXIT_DIR_NOT_FOUND
    except PermissionError as e:
        print_error(f"Access denied: {e}")
        exit_code = EXIT_PERMISSION_ERROR
    except StripFontError as e:
        print_error(str(e))
        exit_code = EXIT_STRIP_FAILED
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        exit_code = EXIT_GENERAL_ERROR

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
