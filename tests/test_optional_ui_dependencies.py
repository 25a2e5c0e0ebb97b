"""Regression tests for optional CLI UI dependencies (rich/questionary).

Bootstrap commands must keep working when the UI packages are missing;
only the interactive prompt needs questionary.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from conftest import RecordingLibrary
from sdcv.cli import exit_codes
from sdcv.cli.app import main
from sdcv.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


class _Tty:
    def isatty(self) -> bool:
        return True


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_list_dicts_works_without_rich_or_questionary(
    monkeypatch: pytest.MonkeyPatch,
    environ: dict[str, str],
    data_dir: Path,
    make_ifo,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)
    make_ifo(data_dir, "Plain", wordcount=9)

    assert main(["-l"], environ=environ) == exit_codes.SUCCESS
    assert "Plain    9" in capsys.readouterr().out


def test_bad_arguments_render_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--bogus"]) == exit_codes.GENERAL_ERROR
    assert "Invalid command line arguments" in capsys.readouterr().err


def test_empty_batch_renders_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    environ: dict[str, str],
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["-n"], environ=environ, library_factory=RecordingLibrary)
    assert code == exit_codes.SUCCESS
    err = capsys.readouterr().err
    assert "There are no words/phrases to translate." in err
    assert "[yellow]" not in err


def test_interactive_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch,
    environ: dict[str, str],
) -> None:
    _hide_questionary(monkeypatch)
    monkeypatch.setattr(sys, "stdin", _Tty())

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        main([], environ=environ, library_factory=lambda options: RecordingLibrary(options))


def test_batch_on_terminal_works_without_questionary(
    monkeypatch: pytest.MonkeyPatch,
    environ: dict[str, str],
) -> None:
    _hide_questionary(monkeypatch)
    monkeypatch.setattr(sys, "stdin", _Tty())
    libraries: list[RecordingLibrary] = []

    def _factory(options: object) -> RecordingLibrary:
        libraries.append(RecordingLibrary(options))
        return libraries[-1]

    assert main(["word"], environ=environ, library_factory=_factory) == exit_codes.SUCCESS
    assert libraries[0].processed == [("word", False)]
