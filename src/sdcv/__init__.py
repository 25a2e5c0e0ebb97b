"""sdcv — console version of the StarDict dictionary program.

Resolves which dictionaries are available and active, then drives a
batch, interactive, or listing session against a pluggable lookup backend.
"""

from sdcv.version import __version__

__all__: list[str] = ["__version__"]
