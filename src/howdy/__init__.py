"""howdy — XKCD comics and local images as ASCII art in the terminal.

A thin layered CLI over the XKCD JSON API and the ascii_magic /
drawille rendering libraries.
"""

from howdy.version import __version__

__all__: list[str] = ["__version__"]
