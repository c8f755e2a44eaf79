"""Core / service layer — pure selection logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic (the random
  directory pick is delegated to an injectable chooser).
"""

from howdy.core.models import Comic, Configuration, RenderOptions
from howdy.core.protocols import ComicProvider, ImageFinder, Renderer
from howdy.core.render_options import build_render_options
from howdy.core.resolver import ImageSourceResolver

__all__: list[str] = [
    "Comic",
    "ComicProvider",
    "Configuration",
    "ImageFinder",
    "ImageSourceResolver",
    "RenderOptions",
    "Renderer",
    "build_render_options",
]
