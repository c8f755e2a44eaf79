"""Command-line option parsing for howdy.

``-h`` means ``--height`` here, so argparse's automatic help is disabled
and ``--help`` is an ordinary flag answered with :data:`USAGE`.  Parse
failures raise :class:`~howdy.exceptions.ParseError` instead of exiting,
so the CLI error boundary reports them like every other error.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn

from howdy.core.models import Configuration
from howdy.exceptions import ParseError
from howdy.version import __version__

USAGE = """\
howdy - Display XKCD comics or your own images as ASCII art in the terminal
Usage: howdy [OPTIONS] [doctor]

Options:
  -d, --directory DIR    Serve a random image from the specified directory
  -f, --file FILE        Convert a given file
  -i, --id ID            Fetch and convert XKCD comic with the given ID
  -b, --braille          Use braille characters for higher resolution
  -s, --symbols STRING   String with allowed symbols
  -g, --grayscale        Disable color output
  -w, --width WIDTH      Set the image width
  -h, --height HEIGHT    Set the image height
      --verbose          Log debug information to stderr
  -V, --version          Print the version and exit
      --help             Print this help text

Commands:
  doctor                 Check that the runtime environment is usable

If no options are provided, howdy fetches the latest XKCD comic by default."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises :class:`ParseError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ParseError(message, hint="Run 'howdy --help' for usage.")


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


_SYMBOLS_FLAGS = ("-s", "--symbols")


def _bind_symbols_values(argv: Sequence[str]) -> list[str]:
    """Join ``-s X`` into ``--symbols=X`` so palettes may start with ``-``."""
    bound: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token in _SYMBOLS_FLAGS:
            value = next(tokens, None)
            if value is None:
                bound.append(token)
                break
            bound.append(f"--symbols={value}")
        else:
            bound.append(token)
    return bound


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser (short and long forms share a dest)."""
    parser = _ArgumentParser(prog="howdy", add_help=False)
    parser.add_argument("-d", "--directory", default="")
    parser.add_argument("-f", "--file", default="")
    parser.add_argument("-i", "--id", dest="comic_id", type=_non_negative_int, default=0)
    parser.add_argument("-b", "--braille", action="store_true")
    parser.add_argument("-s", "--symbols", default="")
    parser.add_argument("-g", "--grayscale", action="store_true")
    parser.add_argument("-w", "--width", type=_non_negative_int, default=0)
    parser.add_argument("-h", "--height", type=_non_negative_int, default=0)
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--help", action="store_true")
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("command", nargs="?", choices=("doctor",), default=None)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Configuration:
    """Parse *argv* (``sys.argv[1:]`` when ``None``) into a Configuration.

    Raises
    ------
    ParseError
        On unknown flags, missing or malformed values.
    """
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(_bind_symbols_values(argv))
    return Configuration(
        directory=args.directory,
        file=args.file,
        comic_id=args.comic_id,
        braille=args.braille,
        symbols=args.symbols,
        grayscale=args.grayscale,
        width=args.width,
        height=args.height,
        help=args.help,
        verbose=args.verbose,
        command=args.command,
    )


def print_usage() -> None:
    """Write the usage block to stdout."""
    print(USAGE)
