"""Domain models for sdcv.

Value objects are **frozen** dataclasses with no behaviour beyond data
access.  :class:`DiscoveryMap` is the one exception: it owns the
bookname-to-descriptor precedence rule and the typed lookup used by
selection.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple


# ---------------------------------------------------------------------------
# Dictionary descriptors
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DictionaryDescriptor:
    """Metadata parsed from a single ``.ifo`` descriptor file."""

    bookname: str
    """Human-readable dictionary name; the selection key."""

    descriptor_path: Path
    """Location of the ``.ifo`` file this descriptor was read from."""

    word_count: int
    """Number of headwords.  Informational, shown by ``--list-dicts``."""

    version: str = ""
    """Descriptor format version (``2.4.2`` or ``3.0.0``)."""

    author: str | None = None
    description: str | None = None


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LookupResult:
    """Outcome of looking a bookname up in a :class:`DiscoveryMap`."""

    bookname: str
    descriptor_path: Path | None

    @property
    def found(self) -> bool:
        return self.descriptor_path is not None


@dataclass(slots=True)
class DiscoveryMap:
    """Bookname → descriptor path, in first-seen order.

    Precedence rule: :meth:`add` always replaces an existing entry with
    the same bookname.  Feeding descriptors in directory scan order
    therefore makes directories scanned later win.
    """

    _entries: dict[str, Path] = field(default_factory=dict)

    def add(self, descriptor: DictionaryDescriptor) -> None:
        self._entries[descriptor.bookname] = descriptor.descriptor_path

    def lookup(self, bookname: str) -> LookupResult:
        return LookupResult(
            bookname=bookname,
            descriptor_path=self._entries.get(bookname),
        )

    def items(self) -> Iterator[tuple[str, Path]]:
        return iter(self._entries.items())

    def __contains__(self, bookname: object) -> bool:
        return bookname in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SelectionPlan:
    """Activation plan handed to the lookup library."""

    order: tuple[Path, ...]
    """Descriptor paths in explicit priority order."""

    disabled: tuple[Path, ...]
    """Descriptor paths the library must not load."""


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

class SessionMode(enum.Enum):
    """Top-level behaviour chosen once per run."""

    LIST_DICTS = "list-dicts"
    BATCH = "batch"
    INTERACTIVE = "interactive"
    EMPTY_BATCH = "empty-batch"


@dataclass(frozen=True, slots=True)
class LibraryOptions:
    """Input/output switches forwarded to the lookup backend."""

    utf8_input: bool = False
    utf8_output: bool = False
    colorize: bool = False


class ReadResult(NamedTuple):
    """One step of a :class:`~sdcv.core.protocols.LineReader`."""

    phrase: str
    has_more: bool
