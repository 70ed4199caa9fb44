"""Allow ``python -m valuekit`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m valuekit`` behaves identically to the ``valuekit`` console
script.
"""

from __future__ import annotations

from valuekit.cli.app import cli

if __name__ == "__main__":
    cli()
