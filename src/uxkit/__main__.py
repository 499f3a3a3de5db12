"""Allow ``python -m uxkit`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m uxkit`` behaves identically to the ``uxkit`` console
script.
"""

from __future__ import annotations

from uxkit.cli.app import cli

if __name__ == "__main__":
    cli()
