"""Tests for lookup backend discovery (infra/backend.py).

Entry points are faked; no real backend distribution is installed.
"""

from __future__ import annotations

from importlib.metadata import EntryPoint
from unittest.mock import patch

import pytest

from conftest import RecordingLibrary
from sdcv.core.models import LibraryOptions
from sdcv.exceptions import BackendNotFoundError, EnvironmentError
from sdcv.infra import backend


def _ep(name: str, value: str = "conftest:RecordingLibrary") -> EntryPoint:
    return EntryPoint(name=name, value=value, group="sdcv.backends")


class TestResolveLibraryFactory:
    @patch("sdcv.infra.backend.available_backends", return_value=[])
    def test_no_backend(self, _mock: object) -> None:
        with pytest.raises(BackendNotFoundError) as exc_info:
            backend.resolve_library_factory()
        assert "sdcv.backends" in (exc_info.value.hint or "")

    @patch("sdcv.infra.backend.available_backends")
    def test_first_backend_by_default(self, mock_available) -> None:
        mock_available.return_value = [_ep("alpha"), _ep("beta", "missing_module:X")]
        assert backend.resolve_library_factory() is RecordingLibrary

    @patch("sdcv.infra.backend.available_backends")
    def test_named_backend(self, mock_available) -> None:
        mock_available.return_value = [_ep("alpha", "missing_module:X"), _ep("beta")]
        assert backend.resolve_library_factory("beta") is RecordingLibrary

    @patch("sdcv.infra.backend.available_backends")
    def test_unknown_name_lists_known(self, mock_available) -> None:
        mock_available.return_value = [_ep("alpha"), _ep("beta")]
        with pytest.raises(BackendNotFoundError) as exc_info:
            backend.resolve_library_factory("gamma")
        assert "alpha, beta" in (exc_info.value.hint or "")

    @patch("sdcv.infra.backend.available_backends")
    def test_import_failure_is_environment_error(self, mock_available) -> None:
        mock_available.return_value = [_ep("broken", "sdcv_no_such_module:Library")]
        with pytest.raises(EnvironmentError, match="could not be imported"):
            backend.resolve_library_factory()


class TestLoadLibrary:
    @patch("sdcv.infra.backend.available_backends")
    def test_factory_receives_options(self, mock_available) -> None:
        mock_available.return_value = [_ep("alpha")]
        options = LibraryOptions(utf8_output=True, colorize=True)
        library = backend.load_library(options)
        assert isinstance(library, RecordingLibrary)
        assert library.options == options

    def test_available_backends_sorted(self) -> None:
        fakes = [_ep("zeta"), _ep("alpha")]
        with patch("sdcv.infra.backend.entry_points", return_value=fakes):
            assert [ep.name for ep in backend.available_backends()] == ["alpha", "zeta"]
