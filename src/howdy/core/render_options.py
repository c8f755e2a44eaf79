"""Translate a :class:`Configuration` into :class:`RenderOptions`.

Pure data transformation with no failure modes.

Policies
--------
* Both dimensions unset requests ``full`` sizing (terminal width,
  aspect-preserving height).
* Braille is used only when explicitly requested, and never together
  with a custom symbol palette.
* Complex glyph mode is always on; dithering defaults to on.
"""

from __future__ import annotations

from howdy.core.models import Configuration, RenderOptions


def build_render_options(config: Configuration, *, dither: bool = True) -> RenderOptions:
    """Map command-line settings onto renderer options."""
    full = config.width == 0 and config.height == 0

    custom_map = config.symbols
    braille = config.braille and not custom_map

    return RenderOptions(
        width=max(config.width, 0),
        height=max(config.height, 0),
        full=full,
        colored=not config.grayscale,
        grayscale=config.grayscale,
        custom_map=custom_map,
        braille=braille,
        complex=True,
        dither=dither,
    )
