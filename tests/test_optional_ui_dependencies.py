"""Regression tests for the optional Rich dependency.

Bootstrap commands and error reporting must keep working when Rich is
missing; output then falls back to plain text on stderr.
"""

from __future__ import annotations

import sys

import pytest

from howdy.cli import exit_codes
from howdy.cli.app import cli, main
from howdy.cli.console import configure_logging, console


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("rich", "rich.console", "rich.table", "rich.logging", "rich.markup"):
        monkeypatch.setitem(sys.modules, name, None)


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--help"]) == exit_codes.SUCCESS
    assert "Usage: howdy" in capsys.readouterr().out


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_errors_fall_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        cli(["--bogus"])

    assert exc_info.value.code == exit_codes.USAGE_ERROR
    err_lines = capsys.readouterr().err.splitlines()
    assert err_lines[0].startswith("Error parsing arguments: ")
    assert err_lines[1].startswith("Hint: ")


def test_print_error_escapes_markup(capsys: pytest.CaptureFixture[str]) -> None:
    console.print_error("converting image to ASCII: open [red]x.png: missing")

    assert "[red]x.png" in capsys.readouterr().err


def test_logging_falls_back_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    import logging

    _hide_rich(monkeypatch)
    configure_logging(verbose=True)

    logging.getLogger("howdy.test").debug("plain handler works")

    assert "DEBUG howdy.test: plain handler works" in capsys.readouterr().err
