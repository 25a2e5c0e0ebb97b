"""Best-effort creation of the per-user configuration directory."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_config_dir(path: Path) -> bool:
    """Create *path* (mode ``0o700``) if it does not exist yet.

    Failure is logged as a warning and reported as ``False``; it never
    aborts the run.
    """
    try:
        path.mkdir(mode=0o700, parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Could not create configuration directory %s: %s", path, exc)
        return False
    return True
