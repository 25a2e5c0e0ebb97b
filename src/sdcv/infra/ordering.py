"""Reader for the per-user dictionary ordering file (``~/.sdcv_ordering``)."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_ordering_file(path: Path) -> list[str] | None:
    """Return the booknames listed in *path*, one per line.

    Returns ``None`` when the file does not exist.  Lines are returned
    verbatim apart from their terminators; blank lines are kept so that
    resolution can reject them like any other unknown name.
    """
    try:
        with path.open(encoding="utf-8", newline=None) as handle:
            lines = handle.read().splitlines()
    except FileNotFoundError:
        logger.debug("No ordering file at %s", path)
        return None

    logger.debug("Read %d entries from %s", len(lines), path)
    return lines
