"""Shared pytest fixtures and configuration for the sdcv test suite.

Guidelines
----------
* No real lookup backend: the library is always a recording fake.
* No TTY: the line reader is always scripted.
* Filesystem fixtures live under ``tmp_path``.
* Tests must not depend on the real ``$HOME`` or ``$STARDICT_DATA_DIR``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import pytest

from sdcv.core.models import LibraryOptions, ReadResult

IfoWriter = Callable[..., Path]


def write_ifo(
    directory: Path,
    bookname: str,
    *,
    wordcount: int | str = 100,
    filename: str | None = None,
    magic: str = "StarDict's dict ifo file",
) -> Path:
    """Write a minimal ``.ifo`` descriptor and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    name = filename or f"{bookname.replace(' ', '_').lower()}.ifo"
    path = directory / name
    path.write_text(
        "\n".join(
            (
                magic,
                "version=2.4.2",
                f"wordcount={wordcount}",
                "idxfilesize=1024",
                f"bookname={bookname}",
                "",
            )
        ),
        encoding="utf-8",
    )
    return path


class ScriptedLineReader:
    """Line reader that replays *phrases* and then reports end of input."""

    def __init__(self, phrases: Iterable[str] = ()) -> None:
        self._pending: list[str] = list(phrases)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read(self, prompt: str) -> ReadResult:
        self.prompts.append(prompt)
        if not self._pending:
            return ReadResult(phrase="", has_more=False)
        return ReadResult(phrase=self._pending.pop(0), has_more=True)

    def write(self, text: str) -> None:
        self.output.append(text)


class RecordingLibrary:
    """Fake :class:`~sdcv.core.protocols.Library` that records every call."""

    def __init__(
        self,
        options: LibraryOptions | None = None,
        *,
        failing: Sequence[str] = (),
    ) -> None:
        self.options = options
        self.failing: set[str] = set(failing)
        self.loaded: list[tuple[tuple[Path, ...], tuple[Path, ...], tuple[Path, ...]]] = []
        self.processed: list[tuple[str, bool]] = []

    def load(
        self,
        directories: Sequence[Path],
        order: Sequence[Path],
        disabled: Sequence[Path],
    ) -> None:
        self.loaded.append((tuple(directories), tuple(order), tuple(disabled)))

    def process_phrase(self, phrase: str, io: object, *, non_interactive: bool = False) -> bool:
        self.processed.append((phrase, non_interactive))
        return phrase not in self.failing


@pytest.fixture()
def make_ifo() -> IfoWriter:
    return write_ifo


@pytest.fixture()
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture()
def user_dir(home: Path) -> Path:
    path = home / ".stardict" / "dic"
    path.mkdir(parents=True)
    return path


@pytest.fixture()
def environ(home: Path, data_dir: Path) -> dict[str, str]:
    return {"HOME": str(home), "STARDICT_DATA_DIR": str(data_dir)}
