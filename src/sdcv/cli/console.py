"""CLI console and logging helpers with optional Rich support.

Module-level imports of Rich are avoided so that ``--help``,
``--version`` and ``--list-dicts`` keep working when it is not
installed.  Diagnostics always go to stderr; stdout is reserved for
dictionary output.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

from sdcv.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def escape(text: str) -> str:
    """Escape *text* so Rich does not interpret brackets as markup."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


def strip_markup(text: str) -> str:
    """Drop the simple style tags used in this package's messages."""
    return _MARKUP_TAG.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
    """Minimal ``print``-compatible stderr proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(
                *(strip_markup(o) if isinstance(o, str) else o for o in objects),
                file=sys.stderr,
            )
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def configure_logging(level: str) -> None:
    """Route the root logger to stderr, through Rich when installed.

    Unknown level names fall back to ``WARNING``.
    """
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(
            level=numeric_level,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
        return

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=get_rich_console(), show_path=False)],
    )
