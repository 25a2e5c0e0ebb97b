"""Infrastructure layer — filesystem, terminal, and backend integration.

This layer reads descriptor and ordering files, creates the per-user
configuration directory, talks to the terminal, and loads lookup
backends.  Raw OS and third-party exceptions are caught here and
re-raised as :class:`~sdcv.exceptions.SdcvError` subclasses, or logged
where the failure is recoverable.

Rules
-----
* No imports from ``cli``.
* No user-facing rendering (no Rich); plain stream writes only where a
  line reader needs them.
"""

from sdcv.infra.backend import load_library, resolve_library_factory
from sdcv.infra.config_dir import ensure_config_dir
from sdcv.infra.ifo import load_descriptor, parse_ifo_text, scan_descriptors
from sdcv.infra.line_reader import PromptLineReader, StreamLineReader, create_line_reader
from sdcv.infra.ordering import read_ordering_file

__all__: list[str] = [
    "PromptLineReader",
    "StreamLineReader",
    "create_line_reader",
    "ensure_config_dir",
    "load_descriptor",
    "load_library",
    "parse_ifo_text",
    "read_ordering_file",
    "resolve_library_factory",
    "scan_descriptors",
]
