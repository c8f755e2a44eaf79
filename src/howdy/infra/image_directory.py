"""Infrastructure: image file discovery in a local directory.

Rules
-----
* Non-recursive; only direct children are considered.
* Extensions are matched exactly as listed, with no case folding.
* A missing or unreadable directory yields no images rather than an error.
"""

from __future__ import annotations

import logging
from pathlib import Path

from howdy.utils.constants import IMAGE_EXTENSIONS

logger = logging.getLogger(__name__)


class DirectoryImageFinder:
    """Concrete :class:`~howdy.core.protocols.ImageFinder` using :mod:`pathlib`."""

    def __init__(self, extensions: tuple[str, ...] = IMAGE_EXTENSIONS) -> None:
        self._extensions: tuple[str, ...] = extensions

    def find_images(self, directory: str) -> list[str]:
        root = Path(directory)
        images: list[str] = []
        for ext in self._extensions:
            try:
                matches = sorted(root.glob(f"*{ext}"))
            except OSError as exc:
                logger.debug("Cannot list %s: %s", root, exc)
                continue
            images.extend(str(path) for path in matches if path.is_file())
        logger.debug("Found %d image(s) in %s", len(images), directory)
        return images
