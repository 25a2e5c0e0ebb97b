"""Directory set construction.

Pure path arithmetic; no filesystem access.  The directories need not
exist yet.
"""

from __future__ import annotations

from pathlib import Path

from sdcv.utils.constants import APP_DIRNAME, DEFAULT_DATA_DIR, USER_DICT_SUBDIR


def resolve_data_dir(
    *,
    data_dir_override: str | None,
    env_data_dir: str | None,
    default_data_dir: Path = DEFAULT_DATA_DIR,
) -> Path:
    """Pick the data directory: ``--data-dir`` > environment > default."""
    if data_dir_override:
        return Path(data_dir_override)
    if env_data_dir:
        return Path(env_data_dir)
    return default_data_dir


def build_directory_set(
    home: Path,
    *,
    data_dir_override: str | None = None,
    env_data_dir: str | None = None,
    default_data_dir: Path = DEFAULT_DATA_DIR,
) -> tuple[Path, ...]:
    """Return the dictionary directories in ascending precedence.

    The per-user ``~/.stardict/dic`` always comes first, followed by the
    resolved data directory.  Discovery lets later directories override
    earlier ones.
    """
    user_dir = home / APP_DIRNAME / USER_DICT_SUBDIR
    data_dir = resolve_data_dir(
        data_dir_override=data_dir_override,
        env_data_dir=env_data_dir,
        default_data_dir=default_data_dir,
    )
    return (user_dir, data_dir)
