"""Allow ``python -m howdy`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m howdy`` behaves identically to the ``howdy`` console script.
"""

from __future__ import annotations

from howdy.cli.app import cli

if __name__ == "__main__":
    cli()
