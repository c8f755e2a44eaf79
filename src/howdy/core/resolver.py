"""Image source resolution — decides which single image to render.

The resolver depends on a :class:`~howdy.core.protocols.ComicProvider`
and an :class:`~howdy.core.protocols.ImageFinder` injected at
construction time, keeping the core free of network and filesystem
imports.

Selection order (first match wins)
----------------------------------
1. explicit file, returned verbatim, never checked for existence
2. directory, uniform pick among matching image files
3. comic id, that numbered comic's image URL
4. otherwise, the latest comic's image URL

Guarantees
----------
* No retries; the first failure ends resolution.
* Only :class:`~howdy.exceptions.HowdyError` subclasses escape.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable, Sequence

from howdy.core.models import Comic, Configuration
from howdy.core.protocols import ComicProvider, ImageFinder
from howdy.exceptions import DirectoryEmptyError, FetchError, HowdyError
from howdy.utils.constants import IMAGE_EXTENSIONS

logger = logging.getLogger(__name__)


class ImageSourceResolver:
    """Turn a :class:`Configuration` into one image path or URL.

    Parameters
    ----------
    comic_provider:
        Any object satisfying the :class:`ComicProvider` protocol.
    image_finder:
        Any object satisfying the :class:`ImageFinder` protocol.
    chooser:
        Picks one element of a non-empty sequence.  Defaults to
        :func:`secrets.choice`, which draws from the OS CSPRNG.
    """

    def __init__(
        self,
        comic_provider: ComicProvider,
        image_finder: ImageFinder,
        *,
        chooser: Callable[[Sequence[str]], str] = secrets.choice,
    ) -> None:
        self._comic_provider: ComicProvider = comic_provider
        self._image_finder: ImageFinder = image_finder
        self._chooser = chooser

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, config: Configuration) -> str:
        """Return the image path or URL selected by *config*.

        Raises
        ------
        DirectoryEmptyError
            If the requested directory contains no matching images.
        FetchError
            If the comic API fails.
        """
        if config.file:
            logger.debug("Using explicit file %s", config.file)
            return config.file

        if config.directory:
            return self.pick_from_directory(config.directory)

        if config.comic_id != 0:
            comic = self._fetch(config.comic_id)
        else:
            comic = self._fetch(None)
        logger.debug("Resolved comic #%d %r -> %s", comic.number, comic.title, comic.image_url)
        return comic.image_url

    def pick_from_directory(self, directory: str) -> str:
        """Pick one image in *directory* uniformly at random."""
        images = self._image_finder.find_images(directory)
        if not images:
            raise DirectoryEmptyError(
                directory,
                hint="Supported extensions: " + ", ".join(IMAGE_EXTENSIONS),
            )
        choice = self._chooser(images)
        logger.debug("Picked %s out of %d image(s) in %s", choice, len(images), directory)
        return choice

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self, comic_id: int | None) -> Comic:
        """Call the provider once and ensure only our exceptions escape."""
        try:
            if comic_id is None:
                return self._comic_provider.fetch_latest()
            return self._comic_provider.fetch_by_id(comic_id)
        except HowdyError:
            raise
        except Exception as exc:
            raise FetchError(
                f"unexpected provider error: {exc}",
                comic_id=comic_id,
            ) from exc
