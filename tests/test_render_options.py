"""Tests for build_render_options (core/render_options.py).

Pure mapping, no mocks needed.
"""

from __future__ import annotations

import pytest

from howdy.core.models import Configuration, RenderOptions
from howdy.core.render_options import build_render_options


class TestDimensions:
    def test_both_unset_requests_full_size(self) -> None:
        options = build_render_options(Configuration())
        assert options.full is True
        assert options.width == 0
        assert options.height == 0

    @pytest.mark.parametrize(
        ("width", "height"),
        [(80, 0), (0, 30), (80, 30)],
    )
    def test_explicit_dimensions_pass_through(self, width: int, height: int) -> None:
        options = build_render_options(Configuration(width=width, height=height))
        assert options.full is False
        assert options.width == width
        assert options.height == height


class TestColour:
    def test_colour_by_default(self) -> None:
        options = build_render_options(Configuration())
        assert options.colored is True
        assert options.grayscale is False

    def test_grayscale_disables_colour(self) -> None:
        options = build_render_options(Configuration(grayscale=True))
        assert options.colored is False
        assert options.grayscale is True


class TestGlyphSet:
    def test_library_default_without_symbols_or_braille(self) -> None:
        options = build_render_options(Configuration())
        assert options.custom_map == ""
        assert options.braille is False

    def test_braille_only_when_requested(self) -> None:
        assert build_render_options(Configuration(braille=True)).braille is True

    def test_symbols_become_custom_map(self) -> None:
        options = build_render_options(Configuration(symbols=" .:#"))
        assert options.custom_map == " .:#"
        assert options.braille is False

    def test_symbols_take_precedence_over_braille(self) -> None:
        options = build_render_options(Configuration(symbols="ab", braille=True))
        assert options.custom_map == "ab"
        assert options.braille is False


class TestFixedModes:
    def test_complex_always_enabled(self) -> None:
        assert build_render_options(Configuration()).complex is True
        assert build_render_options(Configuration(symbols="ab")).complex is True

    def test_dither_defaults_on(self) -> None:
        assert build_render_options(Configuration()).dither is True

    def test_dither_can_be_disabled(self) -> None:
        assert build_render_options(Configuration(), dither=False).dither is False

    def test_returns_render_options(self) -> None:
        assert isinstance(build_render_options(Configuration()), RenderOptions)
