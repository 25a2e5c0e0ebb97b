"""``sdcv --list-dicts`` — print every parseable dictionary descriptor.

The listing re-scans the directories on its own and ignores any
selection state: every successfully parsed descriptor is printed, even
when another directory holds a dictionary with the same bookname.
Output is plain text on stdout so scripts can consume it.  Characters
the stdout encoding cannot represent are replaced, not fatal.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import TextIO

from sdcv.cli import exit_codes
from sdcv.core.models import DictionaryDescriptor

LIST_HEADER: str = "Dictionary's name   Word count"


def format_listing_line(descriptor: DictionaryDescriptor) -> str:
    return f"{descriptor.bookname}    {descriptor.word_count}"


def _encodable(text: str, stream: TextIO) -> str:
    """Replace characters *stream* cannot encode instead of failing."""
    encoding = getattr(stream, "encoding", None) or "utf-8"
    return text.encode(encoding, errors="replace").decode(encoding)


def list_dictionaries(
    directories: Sequence[Path],
    *,
    scanner: Callable[[Sequence[Path]], Iterable[DictionaryDescriptor]] | None = None,
    out: TextIO | None = None,
) -> int:
    """Print the header and one line per descriptor under *directories*.

    Returns
    -------
    int
        Always :data:`exit_codes.SUCCESS`.
    """
    if scanner is None:
        from sdcv.infra.ifo import scan_descriptors

        scanner = scan_descriptors
    stream = out if out is not None else sys.stdout

    print(LIST_HEADER, file=stream)
    for descriptor in scanner(directories):
        print(_encodable(format_listing_line(descriptor), stream), file=stream)
    return exit_codes.SUCCESS
