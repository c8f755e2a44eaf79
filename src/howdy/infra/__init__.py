"""Infrastructure layer — external system integration.

This layer wraps all interaction with the XKCD API (``requests``), the
local filesystem, and the imaging libraries (Pillow, ascii_magic,
drawille).  Every raw third-party exception must be caught here and
re-raised as a :class:`~howdy.exceptions.HowdyError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from howdy.infra.ascii_renderer import AsciiRenderer
from howdy.infra.image_directory import DirectoryImageFinder
from howdy.infra.xkcd_provider import XkcdComicProvider

__all__: list[str] = [
    "AsciiRenderer",
    "DirectoryImageFinder",
    "XkcdComicProvider",
]
