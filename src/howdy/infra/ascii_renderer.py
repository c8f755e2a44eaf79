"""Image-to-text rendering backed by Pillow, ascii_magic and drawille.

This module is the **only** place in the codebase that imports the
imaging libraries.  Every library exception is caught here and re-raised
as :class:`~howdy.exceptions.RenderError`.

Glyph modes
-----------
* braille: Pillow reduces the image to one bit (optionally dithered),
  drawille packs two by four dots into each braille character.  Bright
  pixels become dots, as bright cells get dense glyphs in the other modes.
  Cells are coloured like the palette mode unless monochrome.
* palette: a caller-supplied glyph string, one glyph per cell by
  luminance.  ascii_magic only accepts a single override character, so
  palettes are applied to the Pillow-resized grid here.  The short ramp
  replaces ascii_magic when complex mode is off; the CLI always asks for
  complex mode, so only library callers of :class:`AsciiRenderer` reach it.
* default: ascii_magic's density ramp, coloured unless monochrome.
"""

from __future__ import annotations

import io
import logging
import shutil
from collections.abc import Callable
from typing import Any

from howdy.core.models import RenderOptions
from howdy.exceptions import HowdyError, RenderError, missing_dependency
from howdy.infra.http_session import build_session, import_requests
from howdy.utils.constants import (
    BRAILLE_BLANK,
    CELL_RATIO,
    FALLBACK_TERMINAL_SIZE,
    REQUEST_TIMEOUT,
    SIMPLE_RAMP,
)

logger = logging.getLogger(__name__)

_RESET = "\033[0m"


def _paint(line: str, y: int, colours: Any) -> str:
    """Wrap each glyph of row *y* in its cell's 24-bit foreground colour."""
    parts = []
    for x, glyph in enumerate(line):
        r, g, b = colours[x, y]
        parts.append(f"\033[38;2;{r};{g};{b}m{glyph}")
    return "".join(parts) + _RESET


def _terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size(FALLBACK_TERMINAL_SIZE)
    return size.columns, size.lines


class AsciiRenderer:
    """Concrete :class:`~howdy.core.protocols.Renderer`.

    Parameters
    ----------
    session:
        Optional ``requests.Session`` used for ``http(s)://`` sources.
    timeout:
        Seconds to wait when downloading a remote image.
    terminal_size:
        Callable returning ``(columns, rows)``; used for ``full`` sizing.
    """

    def __init__(
        self,
        *,
        session: Any | None = None,
        timeout: float = REQUEST_TIMEOUT,
        terminal_size: Callable[[], tuple[int, int]] = _terminal_size,
    ) -> None:
        self._session: Any | None = session
        self._timeout: float = timeout
        self._terminal_size = terminal_size

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def convert(self, source: str, options: RenderOptions) -> str:
        """Render *source* (local path or URL) according to *options*.

        Raises
        ------
        RenderError
            If the image cannot be loaded or converted.
        """
        image = self._load(source)

        try:
            columns, rows = self.grid_size(image.size, options)
            logger.debug("Rendering %s at %dx%d cells", source, columns, rows)

            monochrome = options.grayscale or not options.colored
            if options.braille:
                return self._render_braille(
                    image, columns, rows, dither=options.dither, colored=not monochrome,
                )

            palette = options.custom_map or ("" if options.complex else SIMPLE_RAMP)
            if palette:
                return self._render_palette(image, columns, rows, palette, colored=not monochrome)
            return self._render_ascii_magic(image, columns, rows, monochrome=monochrome)
        except HowdyError:
            raise
        except Exception as exc:
            raise RenderError(str(exc)) from exc

    # ------------------------------------------------------------------
    # Sizing (pure)
    # ------------------------------------------------------------------

    def grid_size(self, image_size: tuple[int, int], options: RenderOptions) -> tuple[int, int]:
        """Return the ``(columns, rows)`` character grid for an image.

        A single given dimension derives the other from the image aspect
        ratio, corrected for character cells being taller than wide.
        """
        width, height = image_size
        aspect = height / width / CELL_RATIO

        if options.width and options.height:
            return options.width, options.height
        if options.width:
            return options.width, max(1, round(options.width * aspect))
        if options.height:
            return max(1, round(options.height / aspect)), options.height

        columns = max(1, self._terminal_size()[0])
        return columns, max(1, round(columns * aspect))

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _load(self, source: str) -> Any:
        """Open *source* with Pillow and return an RGB image."""
        try:
            from PIL import Image
        except ModuleNotFoundError as exc:
            raise missing_dependency("PIL", "Pillow") from exc

        stream: Any = source
        if source.startswith(("http://", "https://")):
            stream = io.BytesIO(self._download(source))

        try:
            with Image.open(stream) as img:
                return img.convert("RGB")
        except FileNotFoundError as exc:
            raise RenderError(
                f"open {source}: no such file or directory",
                hint="Check the path passed to --file.",
            ) from exc
        except Exception as exc:
            raise RenderError(f"cannot read image {source}: {exc}") from exc

    def _download(self, url: str) -> bytes:
        requests = import_requests()
        if self._session is None:
            self._session = build_session()

        logger.debug("Downloading %s", url)
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RenderError(f"download {url}: {exc}") from exc
        return response.content

    # ------------------------------------------------------------------
    # Glyph modes
    # ------------------------------------------------------------------

    @staticmethod
    def _render_braille(
        image: Any,
        columns: int,
        rows: int,
        *,
        dither: bool,
        colored: bool,
    ) -> str:
        try:
            from drawille import Canvas
        except ModuleNotFoundError as exc:
            raise missing_dependency("drawille") from exc
        from PIL import Image

        dot_width, dot_height = columns * 2, rows * 4
        gray = image.convert("L").resize((dot_width, dot_height), Image.Resampling.LANCZOS)
        mode = Image.Dither.FLOYDSTEINBERG if dither else Image.Dither.NONE
        bits = gray.convert("1", dither=mode)

        canvas = Canvas(line_ending="\n")
        pixels = bits.load()
        for y in range(dot_height):
            for x in range(dot_width):
                if pixels[x, y] != 0:
                    canvas.set(x, y)

        # drawille drops rows without dots; restore the full grid.
        frame = canvas.frame(0, 0, dot_width, dot_height).split("\n")
        frame += [""] * (rows - len(frame))
        lines = [line.ljust(columns, BRAILLE_BLANK) for line in frame[:rows]]

        if colored:
            colours = image.resize((columns, rows), Image.Resampling.LANCZOS).load()
            lines = [_paint(line, y, colours) for y, line in enumerate(lines)]
        return "\n".join(lines)

    @staticmethod
    def _render_palette(
        image: Any,
        columns: int,
        rows: int,
        palette: str,
        *,
        colored: bool,
    ) -> str:
        from PIL import Image

        glyphs = list(palette)
        top = len(glyphs) - 1
        small = image.resize((columns, rows), Image.Resampling.LANCZOS)
        luminance = small.convert("L").load()
        colours = small.load()

        lines: list[str] = []
        for y in range(rows):
            line = "".join(glyphs[luminance[x, y] * top // 255] for x in range(columns))
            lines.append(_paint(line, y, colours) if colored else line)
        return "\n".join(lines)

    @staticmethod
    def _render_ascii_magic(image: Any, columns: int, rows: int, *, monochrome: bool) -> str:
        try:
            from ascii_magic import AsciiArt
        except ModuleNotFoundError as exc:
            raise missing_dependency("ascii_magic") from exc
        from PIL import Image

        # Pre-sized grid with a unit ratio so ascii_magic keeps exactly `rows`.
        small = image.resize((columns, rows), Image.Resampling.LANCZOS)
        art = AsciiArt.from_pillow_image(small)
        return art.to_ascii(columns=columns, width_ratio=1.0, monochrome=monochrome)
