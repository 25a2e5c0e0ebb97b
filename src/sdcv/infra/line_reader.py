"""Line readers satisfying :class:`~sdcv.core.protocols.LineReader`.

* :class:`PromptLineReader` — questionary-backed prompt for terminals.
* :class:`StreamLineReader` — plain text-stream reader for piped input.

:func:`create_line_reader` picks one based on whether stdin is a TTY.
questionary is imported lazily so the non-interactive paths keep working
without it.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from sdcv.core.models import ReadResult
from sdcv.exceptions import EnvironmentError

_END_OF_INPUT = ReadResult(phrase="", has_more=False)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompting."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class StreamLineReader:
    """Read phrases line by line from a text stream.

    The prompt is echoed to *output* before every read.  End of file on
    *input_stream* ends the session.
    """

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._input: TextIO = input_stream if input_stream is not None else sys.stdin
        self._output: TextIO = output if output is not None else sys.stdout

    def read(self, prompt: str) -> ReadResult:
        self.write(prompt)
        line = self._input.readline()
        if not line:
            return _END_OF_INPUT
        return ReadResult(phrase=line.rstrip("\r\n"), has_more=True)

    def write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()


class PromptLineReader:
    """Interactive prompt backed by ``questionary.text``.

    ``questionary`` returns ``None`` when the prompt is interrupted
    (Ctrl+C / Esc); that, and Ctrl+D, are treated as end of input.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self._questionary: Any = _import_questionary()
        self._output: TextIO = output if output is not None else sys.stdout

    def read(self, prompt: str) -> ReadResult:
        try:
            answer: str | None = self._questionary.text(prompt, qmark="").ask()
        except EOFError:
            return _END_OF_INPUT
        if answer is None:
            return _END_OF_INPUT
        return ReadResult(phrase=answer, has_more=True)

    def write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()


def create_line_reader(
    input_stream: TextIO | None = None,
    output: TextIO | None = None,
) -> StreamLineReader | PromptLineReader:
    """Return a prompt reader on a terminal, a stream reader otherwise."""
    stream = input_stream if input_stream is not None else sys.stdin
    if stream.isatty():
        return PromptLineReader(output=output)
    return StreamLineReader(stream, output)
