"""Protocols (interfaces) consumed by the core layer.

These define the contracts that lookup backends and line-reader adapters
must satisfy.  Core code depends ONLY on these protocols, never on
concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

from sdcv.core.models import LibraryOptions, ReadResult


class LineReader(Protocol):
    """Contract for the interactive input/output front end.

    The same object is used as the output sink passed to
    :meth:`Library.process_phrase`, so a backend can ask the user to
    choose between several matches.
    """

    def read(self, prompt: str) -> ReadResult:
        """Show *prompt* and read one phrase.

        End of input (closed stream, Ctrl+D, an interrupted prompt) is
        reported as ``ReadResult(phrase="", has_more=False)``, never as an
        exception.
        """
        ...  # pragma: no cover

    def write(self, text: str) -> None:
        """Write *text* to the user-facing output."""
        ...  # pragma: no cover


class Library(Protocol):
    """Contract for dictionary lookup backends.

    Dictionary content parsing and matching live entirely behind this
    interface.
    """

    def load(
        self,
        directories: Sequence[Path],
        order: Sequence[Path],
        disabled: Sequence[Path],
    ) -> None:
        """Load every dictionary under *directories*.

        *order* lists descriptor paths that must come first, in that
        order; *disabled* lists descriptor paths that must be skipped.
        Fatal I/O errors propagate.
        """
        ...  # pragma: no cover

    def process_phrase(
        self,
        phrase: str,
        io: LineReader,
        *,
        non_interactive: bool = False,
    ) -> bool:
        """Look *phrase* up and render the result through *io*.

        Returns ``False`` when the lookup failed in a way that must end
        the session.
        """
        ...  # pragma: no cover


LibraryFactory = Callable[[LibraryOptions], Library]
"""Callable that builds a :class:`Library` for the given options."""
