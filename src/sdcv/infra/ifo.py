"""StarDict ``.ifo`` descriptor parsing and directory scanning.

Only the descriptor metadata is read here.  Index and content files
(``.idx``, ``.dict``, ``.syn``) belong to the lookup backend.

Rules
-----
* Every I/O or decoding failure is mapped to
  :class:`~sdcv.exceptions.DescriptorParseError`.
* The scanner never raises for a single bad file or a missing directory;
  it logs and moves on.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

from sdcv.core.models import DictionaryDescriptor
from sdcv.exceptions import DescriptorParseError
from sdcv.utils.constants import DESCRIPTOR_SUFFIX

logger = logging.getLogger(__name__)

IFO_MAGIC: str = "StarDict's dict ifo file"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_ifo_text(text: str, path: Path) -> DictionaryDescriptor:
    """Parse the contents of an ``.ifo`` file read from *path*.

    Raises
    ------
    DescriptorParseError
        When the magic line is missing, or ``bookname`` / ``wordcount``
        are absent or malformed.
    """
    lines = text.lstrip("\ufeff").splitlines()
    if not lines or not lines[0].startswith(IFO_MAGIC):
        raise DescriptorParseError(f"{path}: not a StarDict descriptor")

    fields: dict[str, str] = {}
    for line in lines[1:]:
        key, sep, value = line.partition("=")
        if not sep:
            continue
        fields[key.strip()] = value.strip()

    bookname = fields.get("bookname", "")
    if not bookname:
        raise DescriptorParseError(f"{path}: missing bookname")

    raw_count = fields.get("wordcount")
    if raw_count is None:
        raise DescriptorParseError(f"{path}: missing wordcount")
    try:
        word_count = int(raw_count)
    except ValueError as exc:
        raise DescriptorParseError(
            f"{path}: invalid wordcount {raw_count!r}",
        ) from exc
    if word_count < 0:
        raise DescriptorParseError(f"{path}: negative wordcount {word_count}")

    return DictionaryDescriptor(
        bookname=bookname,
        descriptor_path=path,
        word_count=word_count,
        version=fields.get("version", ""),
        author=fields.get("author") or None,
        description=fields.get("description") or None,
    )


def load_descriptor(path: Path) -> DictionaryDescriptor:
    """Read and parse the ``.ifo`` file at *path*."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DescriptorParseError(f"{path}: {exc}") from exc
    return parse_ifo_text(text, path)


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------

def iter_descriptor_files(directory: Path) -> Iterator[Path]:
    """Yield ``.ifo`` files below *directory*, recursively, in name order."""
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError as exc:
        logger.debug("Skipping dictionary directory %s: %s", directory, exc)
        return

    for entry in entries:
        path = Path(entry.path)
        if entry.is_dir():
            yield from iter_descriptor_files(path)
        elif entry.name.endswith(DESCRIPTOR_SUFFIX) and entry.is_file():
            yield path


def scan_descriptors(directories: Sequence[Path]) -> Iterator[DictionaryDescriptor]:
    """Parse every descriptor under *directories*, in directory order.

    Files that fail to parse are skipped.
    """
    for directory in directories:
        for path in iter_descriptor_files(directory):
            try:
                yield load_descriptor(path)
            except DescriptorParseError as exc:
                logger.debug("Skipping descriptor: %s", exc)
