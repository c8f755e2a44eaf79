"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from howdy import __version__
from howdy.cli import exit_codes
from howdy.cli.app import main
from howdy.exceptions import (
    DirectoryEmptyError,
    EnvironmentError,
    FetchError,
    HowdyError,
    ParseError,
    RenderError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ParseError,
            DirectoryEmptyError,
            FetchError,
            RenderError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[HowdyError]
    ) -> None:
        assert issubclass(exc_class, HowdyError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(HowdyError, Exception)

    def test_hint_is_stored(self) -> None:
        err = HowdyError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = HowdyError("boom")
        assert err.hint is None

    def test_fetch_error_without_id(self) -> None:
        err = FetchError("timed out")
        assert str(err) == "fetching comic: timed out"
        assert err.comic_id is None

    def test_fetch_error_with_id(self) -> None:
        err = FetchError("404", comic_id=614)
        assert str(err) == "fetching comic with ID 614: 404"
        assert err.comic_id == 614

    def test_directory_empty_message(self) -> None:
        err = DirectoryEmptyError("/pics")
        assert str(err) == "getting random image from directory: no images found in /pics"
        assert err.directory == "/pics"

    def test_render_error_message(self) -> None:
        assert str(RenderError("bad header")) == "converting image to ASCII: bad header"

    def test_parse_error_message(self) -> None:
        assert str(ParseError("unrecognized arguments: -x")).startswith("parsing arguments: ")


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_usage_error_is_two(self) -> None:
        assert exit_codes.USAGE_ERROR == 2

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_codes_are_distinct(self) -> None:
        codes = {
            exit_codes.SUCCESS,
            exit_codes.GENERAL_ERROR,
            exit_codes.USAGE_ERROR,
            exit_codes.UNEXPECTED_ERROR,
            exit_codes.KEYBOARD_INTERRUPT,
        }
        assert len(codes) == 5


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_help_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--help"])
        assert code == exit_codes.SUCCESS

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_doctor_routes_to_run_doctor(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from howdy.cli import doctor

        monkeypatch.setattr(doctor, "run_doctor", lambda: exit_codes.SUCCESS)
        assert main(["doctor"]) == exit_codes.SUCCESS

    def test_default_routes_to_render(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from howdy.cli import app as app_module

        seen = []
        monkeypatch.setattr(
            app_module, "_handle_render", lambda config: seen.append(config) or exit_codes.SUCCESS,
        )
        assert main([]) == exit_codes.SUCCESS
        assert len(seen) == 1
