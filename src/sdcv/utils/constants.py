"""Well-known names, paths, and environment variables."""

from __future__ import annotations

from pathlib import Path

APP_DIRNAME: str = ".stardict"
"""Per-user configuration directory, relative to the home directory."""

USER_DICT_SUBDIR: str = "dic"
"""Dictionary subdirectory inside :data:`APP_DIRNAME`."""

ORDERING_FILENAME: str = ".sdcv_ordering"
"""Per-user dictionary ordering file, relative to the home directory."""

DEFAULT_DATA_DIR: Path = Path("/usr/share/stardict/dic")
"""System-wide data directory used when nothing else is configured."""

DESCRIPTOR_SUFFIX: str = ".ifo"

DATA_DIR_ENV: str = "STARDICT_DATA_DIR"
HOME_ENV: str = "HOME"
BACKEND_ENV: str = "SDCV_BACKEND"
LOG_LEVEL_ENV: str = "SDCV_LOG_LEVEL"

DEFAULT_LOG_LEVEL: str = "WARNING"

BACKEND_ENTRY_POINT_GROUP: str = "sdcv.backends"
"""``importlib.metadata`` entry-point group for lookup backends."""

PROMPT: str = "Enter word or phrase: "
