"""XKCD JSON API implementation of :class:`~howdy.core.protocols.ComicProvider`.

This module is the **only** place in the codebase that talks to the
comic API.  All ``requests`` exceptions, HTTP error statuses and
malformed payloads are caught here and re-raised as
:class:`~howdy.exceptions.FetchError`, so nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

import logging
from typing import Any

from howdy.core.models import Comic
from howdy.exceptions import FetchError
from howdy.infra.http_session import build_session, import_requests
from howdy.utils.constants import REQUEST_TIMEOUT, XKCD_BASE_URL

logger = logging.getLogger(__name__)


class XkcdComicProvider:
    """Concrete :class:`ComicProvider` backed by ``https://xkcd.com``.

    Usage::

        provider = XkcdComicProvider()
        comic = provider.fetch_by_id(614)
        comic.image_url  # "https://imgs.xkcd.com/comics/woodpecker.png"

    Parameters
    ----------
    base_url:
        API root; ``/info.0.json`` and ``/<id>/info.0.json`` are appended.
    session:
        Optional ``requests.Session`` (or compatible object).  A new
        session is created lazily when omitted.
    timeout:
        Seconds to wait for each request.
    """

    def __init__(
        self,
        base_url: str = XKCD_BASE_URL,
        *,
        session: Any | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self._base_url: str = base_url.rstrip("/")
        self._session: Any | None = session
        self._timeout: float = timeout

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def fetch_latest(self) -> Comic:
        """Return the most recent comic."""
        return self._get(f"{self._base_url}/info.0.json", comic_id=None)

    def fetch_by_id(self, comic_id: int) -> Comic:
        """Return comic number *comic_id*."""
        return self._get(f"{self._base_url}/{comic_id}/info.0.json", comic_id=comic_id)

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    def _get(self, url: str, *, comic_id: int | None) -> Comic:
        requests = import_requests()
        session = self._get_session()
        logger.debug("GET %s", url)

        try:
            response = session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = getattr(exc.response, "status_code", None)
            hint = None
            if status == 404 and comic_id is not None:
                hint = "No comic exists with this ID. Omit --id to fetch the latest comic."
            raise FetchError(str(exc), comic_id=comic_id, hint=hint) from exc
        except requests.RequestException as exc:
            raise FetchError(
                str(exc),
                comic_id=comic_id,
                hint="Check your network connection.",
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError(f"invalid JSON from {url}: {exc}", comic_id=comic_id) from exc

        return self._parse_comic(payload, comic_id=comic_id)

    def _get_session(self) -> Any:
        if self._session is None:
            self._session = build_session()
        return self._session

    # ------------------------------------------------------------------
    # Payload → domain model (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_comic(payload: Any, *, comic_id: int | None) -> Comic:
        """Convert an ``info.0.json`` payload into a :class:`Comic`."""
        if not isinstance(payload, dict):
            raise FetchError("unexpected response payload", comic_id=comic_id)

        image_url = payload.get("img")
        if not isinstance(image_url, str) or not image_url:
            raise FetchError("response does not contain an image URL", comic_id=comic_id)

        raw_number = payload.get("num", comic_id or 0)
        number = raw_number if isinstance(raw_number, int) else comic_id or 0
        title = payload.get("safe_title") or payload.get("title") or ""

        return Comic(
            number=number,
            title=str(title),
            image_url=image_url,
            alt_text=str(payload.get("alt", "")),
        )
