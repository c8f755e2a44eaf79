"""Domain models for howdy.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and stay unchanged for the whole (single-shot)
process lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Command-line configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Configuration:
    """Parsed command line.

    Zero and empty values mean "unset".  Source fields are consulted in
    the fixed order file > directory > comic_id > latest.
    """

    directory: str = ""
    """Pick a random image from this directory."""

    file: str = ""
    """Render this path or URL verbatim."""

    comic_id: int = 0
    """XKCD comic number; ``0`` selects the latest comic."""

    braille: bool = False
    """Use braille characters for higher resolution."""

    symbols: str = ""
    """Custom glyph palette ordered darkest to brightest."""

    grayscale: bool = False
    """Disable colour output."""

    width: int = 0
    """Target width in columns; ``0`` means automatic."""

    height: int = 0
    """Target height in rows; ``0`` means automatic."""

    help: bool = False

    verbose: bool = False

    command: str | None = None
    """Optional sub-command (only ``"doctor"``)."""


# ---------------------------------------------------------------------------
# Comic metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Comic:
    """One XKCD comic as returned by the JSON API."""

    number: int
    title: str
    image_url: str
    alt_text: str = ""


# ---------------------------------------------------------------------------
# Renderer options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Options handed to the ASCII renderer.

    Mirrors the knobs of a typical image-to-text converter: explicit
    dimensions or ``full`` auto-sizing, colour handling, and the glyph
    set (custom palette, braille, or the library's default ramp).
    """

    width: int = 0
    height: int = 0
    full: bool = False
    """Fit the terminal width; height follows the aspect ratio."""

    colored: bool = True
    grayscale: bool = False
    custom_map: str = ""
    """Allowed glyphs, darkest to brightest.  Empty means library default."""

    braille: bool = False
    complex: bool = True
    """Use the library's extended glyph ramp instead of the short one.

    :func:`~howdy.core.render_options.build_render_options` always sets
    this; ``False`` is for library callers that want :data:`SIMPLE_RAMP`.
    """

    dither: bool = True
    """Floyd-Steinberg dithering before braille dot plotting."""
