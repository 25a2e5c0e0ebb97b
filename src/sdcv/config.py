"""Run configuration resolved from the process environment.

The CLI reads the environment exactly once, here, and passes the
resulting :class:`AppConfig` down as plain values.  Nothing below the CLI
layer consults ``os.environ`` directly.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from sdcv.utils.constants import (
    APP_DIRNAME,
    BACKEND_ENV,
    DATA_DIR_ENV,
    DEFAULT_LOG_LEVEL,
    HOME_ENV,
    LOG_LEVEL_ENV,
    ORDERING_FILENAME,
    USER_DICT_SUBDIR,
)


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Resolved configuration for a single run."""

    home: Path
    """User home directory (``$HOME`` or the platform default)."""

    data_dir_override: str | None
    """Value of ``--data-dir``, if given."""

    env_data_dir: str | None
    """Value of ``$STARDICT_DATA_DIR``, if set."""

    backend_name: str | None = None
    """Lookup backend entry-point name from ``$SDCV_BACKEND``."""

    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def config_dir(self) -> Path:
        return self.home / APP_DIRNAME

    @property
    def user_dict_dir(self) -> Path:
        return self.config_dir / USER_DICT_SUBDIR

    @property
    def ordering_file(self) -> Path:
        return self.home / ORDERING_FILENAME

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str],
        *,
        data_dir_override: str | None = None,
    ) -> AppConfig:
        """Build a config from *environ* and the ``--data-dir`` flag.

        Empty environment values are treated as unset.
        """
        raw_home = environ.get(HOME_ENV)
        home = Path(raw_home) if raw_home else Path.home()
        return cls(
            home=home,
            data_dir_override=data_dir_override or None,
            env_data_dir=environ.get(DATA_DIR_ENV) or None,
            backend_name=environ.get(BACKEND_ENV) or None,
            log_level=(environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper(),
        )
