"""Shared ``requests`` plumbing for the infrastructure layer.

``requests`` is imported lazily so that bootstrap paths (``--help``,
``--version``) keep working when it is not installed.
"""

from __future__ import annotations

from types import ModuleType
from typing import Any

from howdy.exceptions import missing_dependency
from howdy.utils.constants import USER_AGENT


def import_requests() -> ModuleType:
    """Return the ``requests`` module or raise ``EnvironmentError``."""
    try:
        import requests
    except ModuleNotFoundError as exc:
        raise missing_dependency("requests") from exc
    return requests


def build_session() -> Any:
    """Create a ``requests.Session`` carrying the howdy User-Agent."""
    requests = import_requests()
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session
