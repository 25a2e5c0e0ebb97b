"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from sdcv.core.directories import build_directory_set
from sdcv.core.discovery import discover, merge_descriptors
from sdcv.core.models import (
    DictionaryDescriptor,
    DiscoveryMap,
    LibraryOptions,
    LookupResult,
    ReadResult,
    SelectionPlan,
    SessionMode,
)
from sdcv.core.protocols import Library, LibraryFactory, LineReader
from sdcv.core.selection import resolve_selection
from sdcv.core.session import SessionRunner, select_session_mode

__all__: list[str] = [
    "DictionaryDescriptor",
    "DiscoveryMap",
    "Library",
    "LibraryFactory",
    "LibraryOptions",
    "LineReader",
    "LookupResult",
    "ReadResult",
    "SelectionPlan",
    "SessionMode",
    "SessionRunner",
    "build_directory_set",
    "discover",
    "merge_descriptors",
    "resolve_selection",
    "select_session_mode",
]
