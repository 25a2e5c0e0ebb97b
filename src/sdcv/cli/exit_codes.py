"""Process exit statuses returned by :func:`sdcv.cli.app.main`.

Scripts calling ``sdcv -n`` rely on these values, so every exit path
goes through one of the names below.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Every phrase was processed, or the listing was printed."""

GENERAL_ERROR: int = 1
"""Bad arguments, a failed lookup, or any error caught by the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
