"""Allow ``python -m sdcv`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m sdcv`` behaves identically to the ``sdcv`` console
script.
"""

from __future__ import annotations

from sdcv.cli.app import cli

if __name__ == "__main__":
    cli()
