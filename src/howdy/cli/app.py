"""CLI application entry point and command routing for howdy.

This module is the **sole error boundary** for the entire application.
It catches :class:`~howdy.exceptions.HowdyError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering a one-line message on stderr
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here.  Selection happens in the core layer,
  network, filesystem and imaging work in the infrastructure layer.
* The rendered art is the only thing written to stdout.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from howdy.cli import exit_codes
from howdy.cli.console import configure_logging, console
from howdy.cli.options import parse_args, print_usage
from howdy.core.models import Configuration
from howdy.core.protocols import Renderer
from howdy.core.render_options import build_render_options
from howdy.core.resolver import ImageSourceResolver
from howdy.exceptions import HowdyError, ParseError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Collaborator factories
# ---------------------------------------------------------------------------

def _build_resolver() -> ImageSourceResolver:
    """Wire the resolver to the XKCD API and the local filesystem."""
    from howdy.infra.image_directory import DirectoryImageFinder
    from howdy.infra.xkcd_provider import XkcdComicProvider

    return ImageSourceResolver(XkcdComicProvider(), DirectoryImageFinder())


def _build_renderer() -> Renderer:
    from howdy.infra.ascii_renderer import AsciiRenderer

    return AsciiRenderer()


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_render(config: Configuration) -> int:
    """Resolve an image, render it, and print art followed by its source.

    Flow:
    1. Resolve the image path or URL (file > directory > id > latest).
    2. Translate the configuration into renderer options.
    3. Render; nothing is printed unless this succeeds.
    4. Print the art, a blank line, and the source.
    """
    source = _build_resolver().resolve(config)
    logger.debug("Image source: %s", source)

    options = build_render_options(config)
    logger.debug("Render options: %s", options)

    art = _build_renderer().convert(source, options)

    print(art)
    print()
    print(source)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from howdy.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the howdy CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    config = parse_args(argv)
    configure_logging(config.verbose)

    if config.help:
        print_usage()
        return exit_codes.SUCCESS

    if config.command == "doctor":
        return _handle_doctor()

    return _handle_render(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: Sequence[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except ParseError as exc:
        console.print_error(str(exc), exc.hint)
        sys.exit(exit_codes.USAGE_ERROR)
    except HowdyError as exc:
        console.print_error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_error(
            f"unexpected {type(exc).__name__}: {exc}",
            "Please report this issue.",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
