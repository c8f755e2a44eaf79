"""Custom exception hierarchy for howdy.

All exceptions that cross layer boundaries must inherit from
:class:`HowdyError`.  Raw third-party exceptions (``requests``, Pillow,
ascii_magic, drawille) must NEVER propagate beyond the infrastructure
layer; they are caught and re-raised as a typed subclass defined here.

Each message is phrased as ``<context>: <cause>`` so that the CLI error
boundary can render it as a single ``Error <context>: <cause>`` line.

Hierarchy
---------
HowdyError
├── ParseError
├── DirectoryEmptyError
├── FetchError
├── RenderError
└── EnvironmentError
"""

from __future__ import annotations


class HowdyError(Exception):
    """Base exception for all howdy errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class ParseError(HowdyError):
    """Raised when the command line cannot be parsed."""

    def __init__(self, cause: str, *, hint: str | None = None) -> None:
        super().__init__(f"parsing arguments: {cause}", hint=hint)


# --- Source resolution -----------------------------------------------------

class DirectoryEmptyError(HowdyError):
    """Raised when a directory holds no file with a supported image extension."""

    def __init__(self, directory: str, *, hint: str | None = None) -> None:
        super().__init__(
            f"getting random image from directory: no images found in {directory}",
            hint=hint,
        )
        self.directory: str = directory


class FetchError(HowdyError):
    """Raised when the comic API cannot deliver a comic.

    ``comic_id`` is ``None`` when the latest comic was requested.
    """

    def __init__(
        self,
        cause: str,
        *,
        comic_id: int | None = None,
        hint: str | None = None,
    ) -> None:
        context = "fetching comic" if comic_id is None else f"fetching comic with ID {comic_id}"
        super().__init__(f"{context}: {cause}", hint=hint)
        self.comic_id: int | None = comic_id


# --- Rendering -------------------------------------------------------------

class RenderError(HowdyError):
    """Raised when an image cannot be loaded or converted to text."""

    def __init__(self, cause: str, *, hint: str | None = None) -> None:
        super().__init__(f"converting image to ASCII: {cause}", hint=hint)


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(HowdyError):
    """Raised when a required runtime dependency is not available."""


def missing_dependency(package: str, distribution: str | None = None) -> EnvironmentError:
    """Build the standard error for an uninstalled third-party package."""
    return EnvironmentError(
        f"{package} is not installed. Install with: pip install {distribution or package}",
    )
