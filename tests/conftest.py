"""Shared pytest fixtures and configuration for the howdy test suite.

Guidelines
----------
* No internet access in any test.
* ``requests`` sessions, comic providers and renderers are mocked at the
  infra boundary.
* Filesystem tests only touch ``tmp_path``.
* Test images are generated with Pillow.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PIL import Image

from howdy.core.models import Comic


@pytest.fixture(autouse=True)
def _reset_howdy_logger() -> Iterator[None]:
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger("howdy")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a solid-colour image under ``tmp_path``."""

    def _make(
        name: str = "image.png",
        color: tuple[int, int, int] = (255, 255, 255),
        size: tuple[int, int] = (20, 20),
    ) -> Path:
        path = tmp_path / name
        Image.new("RGB", size, color).save(path)
        return path

    return _make


def _comic(number: int = 614, image_url: str | None = None) -> Comic:
    return Comic(
        number=number,
        title="Woodpecker",
        image_url=image_url or f"https://imgs.xkcd.com/comics/comic_{number}.png",
        alt_text="alt",
    )


@pytest.fixture
def comic_provider() -> MagicMock:
    """A ComicProvider mock answering both fetch paths."""
    provider = MagicMock()
    provider.fetch_latest.return_value = _comic(2999)
    provider.fetch_by_id.side_effect = lambda comic_id: _comic(comic_id)
    return provider


@pytest.fixture
def image_finder() -> MagicMock:
    finder = MagicMock()
    finder.find_images.return_value = []
    return finder
