"""Session dispatch — batch and interactive lookup loops.

Both loops stop at the first phrase the library reports as failed; the
remaining phrases are never attempted.  Choosing the mode is a pure
function of the command line so it can be tested without any I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sdcv.core.models import SessionMode
from sdcv.core.protocols import Library, LineReader
from sdcv.utils.constants import PROMPT

logger = logging.getLogger(__name__)


def select_session_mode(
    *,
    list_dicts: bool,
    phrases: Sequence[str],
    non_interactive: bool,
) -> SessionMode:
    """Pick the session mode.

    ``--list-dicts`` wins over everything; positional phrases select batch
    mode; otherwise ``--non-interactive`` selects the empty batch and the
    default is the interactive prompt.
    """
    if list_dicts:
        return SessionMode.LIST_DICTS
    if phrases:
        return SessionMode.BATCH
    if non_interactive:
        return SessionMode.EMPTY_BATCH
    return SessionMode.INTERACTIVE


class SessionRunner:
    """Drive a loaded :class:`Library` with phrases.

    Parameters
    ----------
    library:
        An already loaded library.
    reader:
        Input front end; also the output sink handed to the library.
    """

    def __init__(self, library: Library, reader: LineReader) -> None:
        self._library: Library = library
        self._reader: LineReader = reader

    def run_batch(self, phrases: Sequence[str], *, non_interactive: bool) -> bool:
        """Process *phrases* in order, stopping at the first failure."""
        for phrase in phrases:
            if not self._library.process_phrase(
                phrase,
                self._reader,
                non_interactive=non_interactive,
            ):
                logger.debug("Lookup failed for %r; stopping batch", phrase)
                return False
        return True

    def run_interactive(self, prompt: str = PROMPT) -> bool:
        """Prompt until end of input, stopping at the first failure.

        A clean end of input is a success even if nothing was read.
        """
        while True:
            phrase, has_more = self._reader.read(prompt)
            if not has_more:
                break
            if not self._library.process_phrase(phrase, self._reader):
                logger.debug("Lookup failed for %r; leaving prompt", phrase)
                return False

        self._reader.write("\n")
        return True
