"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from typing import Protocol

from howdy.core.models import Comic, RenderOptions


class ComicProvider(Protocol):
    """Contract for web-comic API clients.

    Implementations must map all backend-specific exceptions to
    :class:`~howdy.exceptions.FetchError`.
    """

    def fetch_latest(self) -> Comic:
        """Return the most recent comic.

        Raises
        ------
        FetchError
            When the API cannot be reached or returns an unusable payload.
        """
        ...  # pragma: no cover

    def fetch_by_id(self, comic_id: int) -> Comic:
        """Return comic number *comic_id*.

        Raises
        ------
        FetchError
            Carrying *comic_id*, when the comic cannot be retrieved.
        """
        ...  # pragma: no cover


class ImageFinder(Protocol):
    """Contract for listing candidate image files in a directory."""

    def find_images(self, directory: str) -> list[str]:
        """Return paths of image files directly inside *directory*.

        A missing directory yields an empty list rather than an error.
        """
        ...  # pragma: no cover


class Renderer(Protocol):
    """Contract for image-to-text converters.

    Implementations must map all library exceptions to
    :class:`~howdy.exceptions.RenderError`.
    """

    def convert(self, source: str, options: RenderOptions) -> str:
        """Render the image at *source* (path or URL) as text."""
        ...  # pragma: no cover
