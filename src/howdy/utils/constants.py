"""Fixed values shared across layers.

Kept in one place so that tests and adapters agree on the exact
extension set, endpoints and sizing ratios.
"""

from __future__ import annotations

IMAGE_EXTENSIONS: tuple[str, ...] = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")
"""Extensions considered when picking from a directory.  Matched as given."""

XKCD_BASE_URL: str = "https://xkcd.com"
"""Root of the XKCD JSON API (``/info.0.json`` and ``/<id>/info.0.json``)."""

REQUEST_TIMEOUT: float = 30.0
"""Seconds before an HTTP request to the comic API or an image host gives up."""

USER_AGENT: str = "howdy (+https://xkcd.com/json.html)"

CELL_RATIO: float = 2.2
"""Height-to-width ratio of one terminal character cell."""

SIMPLE_RAMP: str = " .:-=+*#%@"
"""Short glyph ramp, darkest to brightest, used when complex mode is off.

Only reachable through :class:`~howdy.core.models.RenderOptions` built by
library callers; the CLI always renders in complex mode.
"""

FALLBACK_TERMINAL_SIZE: tuple[int, int] = (80, 24)

BRAILLE_BLANK: str = "\u2800"
"""Braille cell with no dots raised, as drawille prints empty cells."""
