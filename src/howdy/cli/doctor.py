"""``howdy doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can fetch and render images.

This module lives in the CLI layer and renders via Rich.  No business
logic resides here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import importlib
import importlib.metadata
import platform
import shutil
import sys

from howdy.cli import exit_codes
from howdy.cli.console import console
from howdy.utils.constants import FALLBACK_TERMINAL_SIZE
from howdy.version import __version__

# (distribution name, import name) of every required runtime library.
REQUIRED_LIBRARIES: tuple[tuple[str, str], ...] = (
    ("Pillow", "PIL"),
    ("ascii_magic", "ascii_magic"),
    ("drawille", "drawille"),
    ("requests", "requests"),
)


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _library_check(distribution: str, module: str) -> tuple[str, str, str]:
    """Return (label, value, status) for one required library."""
    try:
        importlib.import_module(module)
    except ImportError:
        return distribution, "NOT INSTALLED", "[red]FAIL[/red]"

    try:
        version = importlib.metadata.version(distribution)
    except importlib.metadata.PackageNotFoundError:
        version = "unknown"
    return distribution, version, "[green]OK[/green]"


def _rich_check() -> tuple[str, str, str]:
    """Rich only improves output, so a missing install is a warning."""
    try:
        importlib.import_module("rich")
    except ImportError:
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"
    try:
        version = importlib.metadata.version("rich")
    except importlib.metadata.PackageNotFoundError:
        version = "unknown"
    return "rich", version, "[green]OK[/green]"


def _terminal_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the terminal size row."""
    size = shutil.get_terminal_size(FALLBACK_TERMINAL_SIZE)
    value = f"{size.columns}x{size.lines}"
    if not sys.stdout.isatty():
        return "Terminal", value, "[yellow]WARN (not a tty)[/yellow]"
    return "Terminal", value, "[green]OK[/green]"


def _howdy_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the howdy version row."""
    return "howdy", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nhowdy doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _howdy_version_check(),
        _python_version_check(),
        *(_library_check(dist, module) for dist, module in REQUIRED_LIBRARIES),
        _rich_check(),
        _terminal_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="howdy doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    missing = [label for label, _, status in checks if "FAIL" in status and label != "Python"]
    if missing:
        command = "pip install " + " ".join(missing)
        if rich_available:
            console.print(f"Install missing libraries with:\n\n  [bold]{command}[/bold]\n")
        else:
            print(f"Install missing libraries with:\n\n  {command}\n", file=sys.stderr)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
