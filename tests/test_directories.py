"""Tests for directory set construction and environment config."""

from __future__ import annotations

from pathlib import Path

from sdcv.config import AppConfig
from sdcv.core.directories import build_directory_set, resolve_data_dir
from sdcv.utils.constants import DEFAULT_DATA_DIR


class TestResolveDataDir:
    def test_override_wins(self) -> None:
        assert resolve_data_dir(data_dir_override="/opt/dic", env_data_dir="/env/dic") == Path(
            "/opt/dic"
        )

    def test_environment_beats_default(self) -> None:
        assert resolve_data_dir(data_dir_override=None, env_data_dir="/env/dic") == Path(
            "/env/dic"
        )

    def test_default(self) -> None:
        assert resolve_data_dir(data_dir_override=None, env_data_dir=None) == DEFAULT_DATA_DIR

    def test_empty_strings_are_unset(self) -> None:
        assert resolve_data_dir(data_dir_override="", env_data_dir="") == DEFAULT_DATA_DIR


class TestBuildDirectorySet:
    def test_user_directory_first(self) -> None:
        dirs = build_directory_set(Path("/home/ann"), env_data_dir="/env/dic")
        assert dirs == (Path("/home/ann/.stardict/dic"), Path("/env/dic"))

    def test_custom_default(self) -> None:
        dirs = build_directory_set(Path("/h"), default_data_dir=Path("/compiled"))
        assert dirs[-1] == Path("/compiled")

    def test_does_not_touch_filesystem(self, tmp_path: Path) -> None:
        home = tmp_path / "missing-home"
        build_directory_set(home)
        assert not home.exists()


class TestAppConfig:
    def test_from_environ(self) -> None:
        config = AppConfig.from_environ(
            {
                "HOME": "/home/ann",
                "STARDICT_DATA_DIR": "/env/dic",
                "SDCV_BACKEND": "fake",
                "SDCV_LOG_LEVEL": "debug",
            },
            data_dir_override="/opt/dic",
        )
        assert config.home == Path("/home/ann")
        assert config.data_dir_override == "/opt/dic"
        assert config.env_data_dir == "/env/dic"
        assert config.backend_name == "fake"
        assert config.log_level == "DEBUG"

    def test_derived_paths(self) -> None:
        config = AppConfig.from_environ({"HOME": "/home/ann"})
        assert config.config_dir == Path("/home/ann/.stardict")
        assert config.user_dict_dir == Path("/home/ann/.stardict/dic")
        assert config.ordering_file == Path("/home/ann/.sdcv_ordering")

    def test_home_falls_back_to_platform(self, monkeypatch) -> None:
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: Path("/fallback")))
        config = AppConfig.from_environ({})
        assert config.home == Path("/fallback")
        assert config.env_data_dir is None
        assert config.log_level == "WARNING"
