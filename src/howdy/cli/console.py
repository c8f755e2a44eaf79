"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--version``) remain functional even when
Rich is not installed.  Everything rendered here goes to stderr; stdout
is reserved for the art itself.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from howdy.exceptions import EnvironmentError, missing_dependency


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise missing_dependency("rich") from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain stderr fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def print_error(self, message: str, hint: str | None = None) -> None:
        """Render ``Error <message>`` on one line, plus an optional hint."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(f"Error {message}", file=sys.stderr)
            if hint:
                print(f"Hint: {hint}", file=sys.stderr)
            return

        from rich.markup import escape

        rich_console.print(f"[bold red]Error[/bold red] {escape(message)}", soft_wrap=True)
        if hint:
            rich_console.print(f"[yellow]Hint:[/yellow] {escape(hint)}", soft_wrap=True)


console = _ConsoleProxy()


def configure_logging(verbose: bool = False) -> None:
    """Route the ``howdy`` logger hierarchy to stderr.

    ``verbose`` lowers the threshold from WARNING to DEBUG.  Rich's
    handler is used when installed, a plain stream handler otherwise.
    """
    handler: logging.Handler
    try:
        from rich.logging import RichHandler

        handler = RichHandler(console=get_rich_console(), show_path=False)
    except (ModuleNotFoundError, EnvironmentError):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger("howdy")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
