"""Custom exception hierarchy for sdcv.

All exceptions that cross layer boundaries must inherit from
:class:`SdcvError`.  Raw third-party or OS exceptions must not propagate
beyond the infrastructure layer; they are caught there and re-raised as a
typed subclass defined here.

Hierarchy
---------
SdcvError
├── InvalidArgumentsError
├── DescriptorParseError
├── ConsistencyError
│   ├── UnknownDictionaryError
│   └── StaleOrderingError
└── EnvironmentError
    └── BackendNotFoundError
"""

from __future__ import annotations


class SdcvError(Exception):
    """Base exception for all sdcv errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class InvalidArgumentsError(SdcvError):
    """Raised when the command line cannot be parsed."""


# --- Dictionary descriptors ------------------------------------------------

class DescriptorParseError(SdcvError):
    """Raised when a ``.ifo`` descriptor file cannot be parsed.

    Discovery treats this as recoverable: the file is skipped.
    """


# --- Selection consistency -------------------------------------------------

class ConsistencyError(SdcvError):
    """Raised when requested or recorded state disagrees with discovery.

    The run aborts and no partial selection is applied.
    """

    def __init__(
        self,
        message: str,
        *,
        bookname: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.bookname: str = bookname
        """The bookname that could not be resolved."""


class UnknownDictionaryError(ConsistencyError):
    """Raised when a ``--use-dict`` bookname was not discovered."""


class StaleOrderingError(ConsistencyError):
    """Raised when the ordering file names a dictionary that no longer exists."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SdcvError):
    """Raised when a required runtime dependency is not available."""


class BackendNotFoundError(EnvironmentError):
    """Raised when no dictionary lookup backend can be loaded."""
