"""Lookup backend discovery via ``importlib.metadata`` entry points.

A backend is any installed distribution that registers a
:data:`~sdcv.core.protocols.LibraryFactory` under the ``sdcv.backends``
entry-point group, e.g. in its ``pyproject.toml``::

    [project.entry-points."sdcv.backends"]
    stardict = "my_backend:StarDictLibrary"

The backend is loaded only on lookup paths; ``--help``, ``--version``
and ``--list-dicts`` never touch it.
"""

from __future__ import annotations

import logging
from importlib.metadata import EntryPoint, entry_points

from sdcv.core.models import LibraryOptions
from sdcv.core.protocols import Library, LibraryFactory
from sdcv.exceptions import BackendNotFoundError, EnvironmentError
from sdcv.utils.constants import BACKEND_ENTRY_POINT_GROUP, BACKEND_ENV

logger = logging.getLogger(__name__)


def available_backends() -> list[EntryPoint]:
    """Return registered backend entry points sorted by name."""
    return sorted(
        entry_points(group=BACKEND_ENTRY_POINT_GROUP),
        key=lambda ep: ep.name,
    )


def _select_entry_point(name: str | None) -> EntryPoint:
    backends = available_backends()
    if not backends:
        raise BackendNotFoundError(
            "No dictionary lookup backend is installed.",
            hint=(
                "Install a package that provides the "
                f"'{BACKEND_ENTRY_POINT_GROUP}' entry point."
            ),
        )
    if name is None:
        return backends[0]
    for ep in backends:
        if ep.name == name:
            return ep
    known = ", ".join(ep.name for ep in backends)
    raise BackendNotFoundError(
        f"Unknown dictionary lookup backend: {name}",
        hint=f"Set {BACKEND_ENV} to one of: {known}",
    )


def resolve_library_factory(name: str | None = None) -> LibraryFactory:
    """Load the factory of backend *name*, or of the first backend."""
    ep = _select_entry_point(name)
    logger.debug("Loading lookup backend %r from %s", ep.name, ep.value)
    try:
        factory: LibraryFactory = ep.load()
    except ImportError as exc:
        raise EnvironmentError(
            f"Lookup backend {ep.name!r} could not be imported: {exc}",
        ) from exc
    return factory


def load_library(options: LibraryOptions, *, name: str | None = None) -> Library:
    """Instantiate a :class:`Library` from the selected backend."""
    factory = resolve_library_factory(name)
    return factory(options)
